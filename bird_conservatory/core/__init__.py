"""
Bird Conservatory — Core Module
Bird records, compatibility rules, enclosures, placement, and food totals.
"""

from .errors import (
    ConservatoryError,
    BirdValidationError,
    NullRecord,
    InvalidSpecies,
    InvalidCharacteristic,
    InvalidExtinctFlag,
    InvalidWingCount,
    InvalidDietSize,
    InvalidVocabulary,
    MissingWaterBody,
    UnexpectedVariant,
    PlacementError,
    DuplicateIntake,
    ExtinctRecord,
    EnclosureFull,
    IncompatibleClassification,
    DirectoryFull,
    UnknownEnclosureId,
)
from .bird import (
    BirdRecord,
    Species,
    Classification,
    Food,
    TalkingTraits,
    AquaticTraits,
    TAXONOMY,
)
from .compatibility import (
    classify,
    is_restricted,
    can_coexist,
    RESTRICTED_CLASSIFICATIONS,
    MINGLER_CLASSIFICATIONS,
)
from .enclosure import Enclosure
from .directory import AllocationDirectory, LocationDescriptor, LookupResult, PlacementStatus
from .resources import ResourceAggregator, consumption_totals

__all__ = [
    # Errors
    "ConservatoryError",
    "BirdValidationError",
    "NullRecord",
    "InvalidSpecies",
    "InvalidCharacteristic",
    "InvalidExtinctFlag",
    "InvalidWingCount",
    "InvalidDietSize",
    "InvalidVocabulary",
    "MissingWaterBody",
    "UnexpectedVariant",
    "PlacementError",
    "DuplicateIntake",
    "ExtinctRecord",
    "EnclosureFull",
    "IncompatibleClassification",
    "DirectoryFull",
    "UnknownEnclosureId",

    # Records
    "BirdRecord",
    "Species",
    "Classification",
    "Food",
    "TalkingTraits",
    "AquaticTraits",
    "TAXONOMY",

    # Compatibility
    "classify",
    "is_restricted",
    "can_coexist",
    "RESTRICTED_CLASSIFICATIONS",
    "MINGLER_CLASSIFICATIONS",

    # Housing
    "Enclosure",
    "AllocationDirectory",
    "LocationDescriptor",
    "LookupResult",
    "PlacementStatus",

    # Resources
    "ResourceAggregator",
    "consumption_totals",
]
