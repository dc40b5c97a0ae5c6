"""
Tests for signs, listings, and document exports.
"""

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from openpyxl import load_workbook

from bird_conservatory.core.bird import BirdRecord, Species, Food, TalkingTraits, AquaticTraits
from bird_conservatory.core.directory import AllocationDirectory
from bird_conservatory.core.enclosure import Enclosure
from bird_conservatory.core.errors import UnknownEnclosureId
from bird_conservatory.reporting import (
    describe_bird,
    assignment_message,
    lookup_message,
    enclosure_sign,
    sign_for,
    conservatory_map,
    bird_index,
    food_requirements,
    export_docx,
    export_workbook,
    export_all,
)
from bird_conservatory.config import REPORT


# =============================================================================
# TEST HELPERS
# =============================================================================

def sample_directory():
    """Seven birds across four enclosures."""
    prey_food = [Food.SMALL_MAMMALS, Food.OTHER_BIRDS]
    birds = [
        BirdRecord(Species.HAWK, "Sharp hooked beak", False, 2, prey_food),
        BirdRecord(Species.EAGLE, "Powerful talons", False, 2, prey_food),
        BirdRecord(Species.DUCK, "Waterproof feathers", False, 2,
                   [Food.VEGETATION, Food.AQUATIC_INVERTEBRATES], AquaticTraits("Lake Michigan")),
        BirdRecord(Species.GRAY_PARROT, "Intelligent", False, 2,
                   [Food.SEEDS, Food.NUTS, Food.FRUIT], TalkingTraits(50, "Polly wants a cracker")),
        BirdRecord(Species.EMU, "Large flightless", False, 0, [Food.SEEDS, Food.FRUIT]),
        BirdRecord(Species.OWL, "Silent flight", False, 2, [Food.SMALL_MAMMALS, Food.INSECTS]),
        BirdRecord(Species.PIGEON, "Urban dweller", False, 2, [Food.SEEDS, Food.BERRIES]),
    ]
    directory = AllocationDirectory()
    for bird in birds:
        directory.assign(bird)
    return directory


# =============================================================================
# DESCRIPTIONS & MESSAGES
# =============================================================================

class TestDescriptions:
    """Tests for bird descriptions and messages."""

    def test_describe_bird_of_prey(self):
        hawk = BirdRecord(Species.HAWK, "Sharp hooked beak", False, 2, [Food.FISH, Food.SMALL_MAMMALS])
        assert describe_bird(hawk) == (
            "Hawk (Birds of Prey): Sharp hooked beak. Wings: 2. "
            "Preferred food: small mammals, fish."
        )

    def test_describe_extinct(self):
        moa = BirdRecord(Species.MOA, "Giant", True, 0, [Food.VEGETATION, Food.SEEDS])
        assert "Moa (Flightless Birds): Giant [EXTINCT]. Wings: 0." in describe_bird(moa)

    def test_describe_parrot(self):
        parrot = BirdRecord(Species.GRAY_PARROT, "Intelligent", False, 2,
                            [Food.SEEDS, Food.NUTS], TalkingTraits(50, "Hello there!"))
        text = describe_bird(parrot)
        assert text.endswith(' Vocabulary: 50 words. Favorite saying: "Hello there!".')

    def test_describe_quiet_parrot(self):
        parrot = BirdRecord(Species.GRAY_PARROT, "Shy", False, 2,
                            [Food.SEEDS, Food.NUTS], TalkingTraits(0, ""))
        text = describe_bird(parrot)
        assert text.endswith(" Vocabulary: 0 words.")
        assert "Favorite saying" not in text

    def test_describe_aquatic(self):
        swan = BirdRecord(Species.SWAN, "Long neck", False, 2,
                          [Food.VEGETATION, Food.FISH], AquaticTraits("Swan Lake"))
        assert describe_bird(swan).endswith(" Lives near: Swan Lake.")

    def test_assignment_messages(self, directory, make_bird):
        hawk = make_bird(Species.HAWK)
        eagle = make_bird(Species.EAGLE)

        assert assignment_message(hawk, directory.assign(hawk)) == \
            "Hawk assigned to new Enclosure 1 (Birds of Prey Wing - Section 1)"
        assert assignment_message(eagle, directory.assign(eagle)) == \
            "Eagle assigned to Enclosure 1 (Birds of Prey Wing - Section 1)"
        assert assignment_message(hawk, directory.assign(hawk)) == \
            "Hawk is already in Enclosure 1 (Birds of Prey Wing - Section 1)"

    def test_lookup_messages(self, directory, make_bird):
        owl = make_bird(Species.OWL)
        kiwi = make_bird(Species.KIWI)
        dove = make_bird(Species.DOVE)
        directory.assign(owl)
        directory.intake(dove)

        assert lookup_message(owl, directory.lookup(owl)) == \
            "Owl is located in Enclosure 1 (Owls Wing - Section 1)"
        assert lookup_message(dove, directory.lookup(dove)) == \
            "Dove has been rescued but is not yet assigned to an enclosure"
        assert lookup_message(kiwi, directory.lookup(kiwi)) == \
            "Kiwi is not found in this conservatory"


# =============================================================================
# SIGNS & LISTINGS
# =============================================================================

class TestListings:
    """Tests for signs, map, index, and food listing."""

    def test_enclosure_sign(self):
        directory = sample_directory()
        sign = sign_for(directory, 3)

        assert sign.startswith("=== Enclosure 3 ===\nLocation: Parrots Wing - Section 1\n")
        assert "Gray Parrot (Parrots): Intelligent" in sign
        assert "Owl (Owls): Silent flight" in sign
        assert "Pigeon (Pigeons): Urban dweller" in sign

    def test_unknown_sign(self):
        with pytest.raises(UnknownEnclosureId):
            sign_for(sample_directory(), 99)

    def test_empty_enclosure_sign(self):
        assert "This enclosure is currently empty." in enclosure_sign(Enclosure(7, "Spare Wing"))

    def test_empty_map(self, directory):
        text = conservatory_map(directory)
        assert REPORT.map_title in text
        assert "No enclosures have been created yet." in text

    def test_map_lists_every_enclosure(self):
        text = conservatory_map(sample_directory())
        assert "┌─ Enclosure 1 ─ Birds of Prey Wing - Section 1" in text
        assert "┌─ Enclosure 4 ─ Flightless Birds Wing - Section 1" in text
        assert "• Duck (Waterfowl)" in text
        box_lines = [line for line in text.splitlines() if line.startswith(("┌", "│", "└"))]
        assert all(len(line) == REPORT.map_width + 2 for line in box_lines)

    def test_index_sorted_by_name(self):
        text = bird_index(sample_directory())
        names = [line.split("→")[0].strip() for line in text.splitlines() if "→" in line]
        assert names == sorted(names)
        assert len(names) == 7
        assert "Duck" in names

    def test_empty_index(self, directory):
        assert "No birds are currently housed in the conservatory." in bird_index(directory)

    def test_food_requirements(self):
        text = food_requirements(sample_directory())
        assert " - small mammals: 3" in text
        assert " - seeds: 3" in text
        assert " - other birds: 2" in text
        lines = [line for line in text.splitlines() if line.startswith(" - ")]
        assert len(lines) == 9
        # Catalogue order: berries before seeds
        assert lines[0] == " - berries: 1"


# =============================================================================
# DOCUMENT EXPORT
# =============================================================================

class TestDocumentExport:
    """Tests for Word and Excel reports."""

    def test_export_docx(self, tmp_path):
        path = export_docx(sample_directory(), str(tmp_path / "report.docx"))

        doc = Document(path)
        headings = [p.text for p in doc.paragraphs if p.style.name.startswith(("Heading", "Title"))]
        assert REPORT.title in headings
        assert "Bird Index" in headings

        assert len(doc.tables) == 3
        enclosures, index, food = doc.tables
        assert [c.text for c in enclosures.rows[0].cells] == \
            ["Enclosure", "Location", "Classification", "Occupancy", "Residents"]
        assert len(enclosures.rows) == 5
        assert enclosures.rows[3].cells[4].text == "Gray Parrot, Owl, Pigeon"
        assert len(index.rows) == 8
        assert len(food.rows) == 10

    def test_docx_table_styling(self, tmp_path):
        doc = Document(export_docx(sample_directory(), str(tmp_path / "styled.docx")))
        food = doc.tables[2]

        header = food.rows[0].cells[0]
        assert header.paragraphs[0].runs[0].bold
        fill = header._tc.tcPr.find(qn("w:shd"))
        assert fill.get(qn("w:fill")) == REPORT.header_color

        assert food.rows[1].cells[1].paragraphs[0].alignment == WD_ALIGN_PARAGRAPH.RIGHT
        assert food.rows[1].cells[0].paragraphs[0].alignment is None

    def test_export_docx_empty(self, tmp_path, directory):
        doc = Document(export_docx(directory, str(tmp_path / "empty.docx")))
        assert len(doc.tables) == 0
        assert any("No enclosures have been created yet." in p.text for p in doc.paragraphs)

    def test_export_workbook(self, tmp_path):
        path = export_workbook(sample_directory(), str(tmp_path / "report.xlsx"))

        wb = load_workbook(path)
        assert wb.sheetnames == ["Enclosures", "Bird Index", "Food Requirements"]

        ws = wb["Enclosures"]
        assert ws["A1"].value == "Enclosure"
        assert ws["A1"].font.bold
        assert ws.max_row == 5
        assert ws["B2"].value == "Birds of Prey Wing - Section 1"
        assert ws["D2"].value == "2/5"

        food = {row[0]: row[1] for row in wb["Food Requirements"].iter_rows(min_row=2, values_only=True)}
        assert food["small mammals"] == 3
        assert food["vegetation"] == 1

    def test_export_all(self, tmp_path):
        output_dir = tmp_path / "out"
        paths = export_all(sample_directory(), str(output_dir))
        assert [p.split("/")[-1] for p in paths] == [REPORT.docx_filename, REPORT.workbook_filename]
        assert all((output_dir / name).exists() for name in (REPORT.docx_filename, REPORT.workbook_filename))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
