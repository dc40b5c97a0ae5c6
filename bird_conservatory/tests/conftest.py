"""
Shared fixtures for conservatory tests.
"""

import pytest

from bird_conservatory.core.bird import (
    BirdRecord,
    Food,
    TalkingTraits,
    AquaticTraits,
    TALKING_CLASSIFICATIONS,
    AQUATIC_CLASSIFICATIONS,
)
from bird_conservatory.core.directory import AllocationDirectory


def build_bird(species, characteristic="Rescued", extinct=False, wings=2,
               diet=(Food.SEEDS, Food.FRUIT)):
    """Valid record for any species, with the variant traits it requires."""
    variant = None
    if species.classification in TALKING_CLASSIFICATIONS:
        variant = TalkingTraits(25, "Hello there!")
    elif species.classification in AQUATIC_CLASSIFICATIONS:
        variant = AquaticTraits("Lake Victoria")
    return BirdRecord(species, characteristic, extinct, wings, list(diet), variant)


@pytest.fixture
def make_bird():
    return build_bird


@pytest.fixture
def directory():
    return AllocationDirectory()
