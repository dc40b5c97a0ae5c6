"""
Bird Conservatory — Rescue Housing Model
Intake of rescued birds, placement into enclosures under mixing rules,
and food requirements for the housed population.
"""

__version__ = "1.0.0"

from .config import (
    CONSERVATORY,
    REPORT,
    ConservatoryConfig,
    ReportConfig,
)

from .core import (
    BirdRecord,
    Species,
    Classification,
    Food,
    TalkingTraits,
    AquaticTraits,
    classify,
    is_restricted,
    can_coexist,
    Enclosure,
    AllocationDirectory,
    LocationDescriptor,
    LookupResult,
    PlacementStatus,
    ResourceAggregator,
    consumption_totals,
    ConservatoryError,
    BirdValidationError,
    PlacementError,
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "CONSERVATORY",
    "REPORT",
    "ConservatoryConfig",
    "ReportConfig",

    # Records
    "BirdRecord",
    "Species",
    "Classification",
    "Food",
    "TalkingTraits",
    "AquaticTraits",

    # Engine
    "classify",
    "is_restricted",
    "can_coexist",
    "Enclosure",
    "AllocationDirectory",
    "LocationDescriptor",
    "LookupResult",
    "PlacementStatus",
    "ResourceAggregator",
    "consumption_totals",

    # Errors
    "ConservatoryError",
    "BirdValidationError",
    "PlacementError",
]
