"""
Bird Conservatory — Configuration
Housing limits, record validation bounds, and report settings.
"""

from dataclasses import dataclass


@dataclass
class ConservatoryConfig:
    """Housing and intake limits."""

    # Housing
    enclosure_capacity: int = 5      # Birds per enclosure
    max_enclosures: int = 20         # Enclosures per conservatory
    first_enclosure_id: int = 1

    # Record validation
    min_diet_items: int = 2
    max_diet_items: int = 4
    max_vocabulary: int = 100        # Words, talking species only

    # New enclosures are labelled from the first resident's classification
    location_template: str = "{classification} Wing - Section {ordinal}"

    @property
    def max_residents(self) -> int:
        return self.enclosure_capacity * self.max_enclosures

    def location_for(self, classification_name: str, ordinal: int) -> str:
        return self.location_template.format(
            classification=classification_name,
            ordinal=ordinal,
        )


@dataclass
class ReportConfig:
    """Sign, map and document export settings."""

    title: str = "Bird Conservatory"
    map_title: str = "CONSERVATORY MAP"
    index_title: str = "BIRD INDEX (A-Z)"
    food_title: str = "FOOD REQUIREMENTS"

    # Box drawing width for the text map
    map_width: int = 62

    # Document styling (hex RGB)
    header_color: str = "1F4E79"
    header_font_color: str = "FFFFFF"

    # Export file names
    docx_filename: str = "Conservatory_Report.docx"
    workbook_filename: str = "Conservatory_Report.xlsx"


# Default configurations
CONSERVATORY = ConservatoryConfig()
REPORT = ReportConfig()
