"""
Bird Conservatory — Signs and Listings
Plain-text descriptions, enclosure signs, the conservatory map, the bird
index, and food requirement listings.
"""

from typing import List

from ..core.bird import BirdRecord, Food
from ..core.directory import AllocationDirectory, LocationDescriptor, LookupResult, PlacementStatus
from ..core.enclosure import Enclosure
from ..core.resources import ResourceAggregator
from ..config import ReportConfig, REPORT


def describe_bird(record: BirdRecord) -> str:
    """One-paragraph description used on signs."""
    parts = [f"{record.display_name} ({record.classification.display_name}): {record.characteristic}"]
    if record.extinct:
        parts.append(" [EXTINCT]")
    parts.append(f". Wings: {record.wings}")
    parts.append(". Preferred food: ")
    parts.append(", ".join(food.display_name for food in record.diet_in_order()))
    parts.append(".")

    if record.is_talking:
        parts.append(f" Vocabulary: {record.vocabulary_size} words.")
        if record.favorite_phrase:
            parts.append(f' Favorite saying: "{record.favorite_phrase}".')
    elif record.is_aquatic:
        parts.append(f" Lives near: {record.water_body}.")

    return "".join(parts)


def assignment_message(record: BirdRecord, descriptor: LocationDescriptor) -> str:
    where = f"Enclosure {descriptor.enclosure_id} ({descriptor.location})"
    if descriptor.already_resident:
        return f"{record.display_name} is already in {where}"
    if descriptor.created:
        return f"{record.display_name} assigned to new {where}"
    return f"{record.display_name} assigned to {where}"


def lookup_message(record: BirdRecord, result: LookupResult) -> str:
    if result.status == PlacementStatus.LOCATED:
        location = result.location
        return (
            f"{record.display_name} is located in Enclosure "
            f"{location.enclosure_id} ({location.location})"
        )
    if result.status == PlacementStatus.AWAITING_ASSIGNMENT:
        return f"{record.display_name} has been rescued but is not yet assigned to an enclosure"
    return f"{record.display_name} is not found in this conservatory"


def enclosure_sign(enclosure: Enclosure) -> str:
    """Sign posted outside an enclosure."""
    lines = [
        f"=== Enclosure {enclosure.enclosure_id} ===",
        f"Location: {enclosure.location}",
        "",
    ]
    if enclosure.is_empty:
        lines.append("This enclosure is currently empty.")
    else:
        lines.append("Birds housed here:")
        lines.append("-" * 40)
        for bird in enclosure.residents:
            lines.append(describe_bird(bird))
            lines.append("")
    return "\n".join(lines) + "\n"


def sign_for(directory: AllocationDirectory, enclosure_id: int) -> str:
    """Sign for an enclosure by id. Raises UnknownEnclosureId."""
    return enclosure_sign(directory.get_enclosure_by_id(enclosure_id))


def _banner(title: str, width: int) -> List[str]:
    return [
        "╔" + "═" * width + "╗",
        "║" + title.center(width) + "║",
        "╚" + "═" * width + "╝",
        "",
    ]


def conservatory_map(directory: AllocationDirectory, config: ReportConfig = REPORT) -> str:
    """Every enclosure with its location and residents."""
    width = config.map_width
    lines = _banner(config.map_title, width)

    enclosures = directory.enclosures
    if not enclosures:
        lines.append("No enclosures have been created yet.")
        return "\n".join(lines) + "\n"

    for enclosure in enclosures:
        header = f"┌─ Enclosure {enclosure.enclosure_id} ─ {enclosure.location} "
        lines.append(header + "─" * max(0, width + 1 - len(header)) + "┐")
        if enclosure.is_empty:
            lines.append("│" + "  (empty)".ljust(width) + "│")
        for bird in enclosure.residents:
            entry = f"  • {bird.display_name} ({bird.classification.display_name})"
            lines.append("│" + entry.ljust(width) + "│")
        lines.append("└" + "─" * width + "┘")
        lines.append("")

    return "\n".join(lines) + "\n"


def bird_index(directory: AllocationDirectory, config: ReportConfig = REPORT) -> str:
    """Housed birds sorted by name, with their enclosure."""
    lines = _banner(config.index_title, config.map_width)

    entries = [
        (bird.display_name, enclosure)
        for enclosure in directory.enclosures
        for bird in enclosure.residents
    ]
    if not entries:
        lines.append("No birds are currently housed in the conservatory.")
        return "\n".join(lines) + "\n"

    entries.sort(key=lambda entry: entry[0])
    for name, enclosure in entries:
        lines.append(f"{name:<30} → Enclosure {enclosure.enclosure_id} ({enclosure.location})")

    return "\n".join(lines) + "\n"


def food_requirements(directory: AllocationDirectory, config: ReportConfig = REPORT) -> str:
    """Food units needed, in catalogue order."""
    totals = ResourceAggregator().consumption_totals(directory)
    lines = [f"{config.food_title}:"]
    if not totals:
        lines.append(" - none")
    for food in Food:
        if food in totals:
            lines.append(f" - {food.display_name}: {totals[food]}")
    return "\n".join(lines) + "\n"
