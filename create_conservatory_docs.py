#!/usr/bin/env python3
"""
Create the Bird Conservatory report documents:
1. Conservatory_Report.docx (map, index, food requirements)
2. Conservatory_Report.xlsx (same tables, one sheet each)

Rescues a sample roster, houses it, prints the assignments, map and food
requirements, then writes both documents.

Usage:
    python create_conservatory_docs.py [OUTPUT_DIR]

OUTPUT_DIR defaults to $CONSERVATORY_OUTPUT_DIR, then the current directory.
"""

import logging
import os
import sys

from bird_conservatory import (
    AllocationDirectory,
    AquaticTraits,
    BirdRecord,
    Food,
    Species,
    TalkingTraits,
)
from bird_conservatory.reporting import (
    assignment_message,
    conservatory_map,
    export_all,
    food_requirements,
)


def sample_roster():
    """Birds from the morning rescue run."""
    prey_food = [Food.SMALL_MAMMALS, Food.OTHER_BIRDS]
    waterfowl_food = [Food.VEGETATION, Food.AQUATIC_INVERTEBRATES]
    parrot_food = [Food.SEEDS, Food.NUTS, Food.FRUIT]

    return [
        BirdRecord(Species.HAWK, "Sharp hooked beak", False, 2, prey_food),
        BirdRecord(Species.EAGLE, "Powerful talons", False, 2, prey_food),
        BirdRecord(Species.DUCK, "Waterproof feathers", False, 2, waterfowl_food,
                   AquaticTraits("Lake Michigan")),
        BirdRecord(Species.GRAY_PARROT, "Intelligent", False, 2, parrot_food,
                   TalkingTraits(50, "Polly wants a cracker")),
        BirdRecord(Species.EMU, "Large flightless", False, 0, [Food.SEEDS, Food.FRUIT]),
        BirdRecord(Species.OWL, "Silent flight", False, 2, [Food.SMALL_MAMMALS, Food.INSECTS]),
        BirdRecord(Species.PIGEON, "Urban dweller", False, 2, [Food.SEEDS, Food.BERRIES]),
    ]


def main(argv):
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    output_dir = argv[1] if len(argv) > 1 else os.environ.get("CONSERVATORY_OUTPUT_DIR", ".")

    print("=" * 49)
    print("   Welcome to the Bird Conservatory System")
    print("=" * 49)

    directory = AllocationDirectory()
    roster = sample_roster()

    print("Rescuing birds...")
    for bird in roster:
        directory.intake(bird)
    print(f"{len(roster)} birds rescued.\n")

    print("Assigning birds to enclosures...")
    for bird in roster:
        print(f" - {assignment_message(bird, directory.assign(bird))}")
    print()

    print(conservatory_map(directory))
    print(food_requirements(directory))

    for path in export_all(directory, output_dir):
        print(f"Created: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
