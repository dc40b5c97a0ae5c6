"""
Bird Conservatory — Errors
Validation and placement failures raised by records, enclosures and the directory.
"""


class ConservatoryError(Exception):
    """Base class for all conservatory failures."""
    pass


# =============================================================================
# RECORD VALIDATION
# =============================================================================

class BirdValidationError(ConservatoryError, ValueError):
    """A bird record was built from invalid attributes."""
    pass


class NullRecord(BirdValidationError):
    """A bird record was required but None was given."""
    pass


class InvalidSpecies(BirdValidationError):
    """Species is not one of the known species."""
    pass


class InvalidCharacteristic(BirdValidationError):
    """Defining characteristic is missing or blank."""
    pass


class InvalidExtinctFlag(BirdValidationError):
    """Extinct flag is not a boolean."""
    pass


class InvalidWingCount(BirdValidationError):
    """Wing count is negative."""
    pass


class InvalidDietSize(BirdValidationError):
    """Diet does not hold 2-4 distinct food items."""
    pass


class InvalidVocabulary(BirdValidationError):
    """Vocabulary size is outside 0-100 or missing for a talking species."""
    pass


class MissingWaterBody(BirdValidationError):
    """Aquatic species without a body of water."""
    pass


class UnexpectedVariant(BirdValidationError):
    """Variant traits do not match the species classification."""
    pass


# =============================================================================
# PLACEMENT
# =============================================================================

class PlacementError(ConservatoryError):
    """A bird could not be taken in or housed."""
    pass


class DuplicateIntake(PlacementError):
    """Bird has already been rescued or housed."""
    pass


class ExtinctRecord(PlacementError):
    """Extinct birds cannot be housed."""
    pass


class EnclosureFull(PlacementError):
    """Enclosure is at maximum capacity."""
    pass


class IncompatibleClassification(PlacementError):
    """Bird cannot share an enclosure with the current residents."""
    pass


class DirectoryFull(PlacementError):
    """No enclosure admits the bird and no new enclosure can be built."""
    pass


class UnknownEnclosureId(ConservatoryError, LookupError):
    """No enclosure exists with the requested id."""
    pass
