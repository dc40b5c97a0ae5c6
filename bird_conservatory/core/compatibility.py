"""
Bird Conservatory — Compatibility Policy
Classification of records and the rules for which birds may share an enclosure.

Restricted classifications (birds of prey, flightless birds, waterfowl) only
live with their own classification. All other classifications are minglers
and may be mixed freely with each other.
"""

from typing import TYPE_CHECKING

from .bird import BirdRecord, Classification

if TYPE_CHECKING:
    from .enclosure import Enclosure


RESTRICTED_CLASSIFICATIONS = frozenset({
    Classification.BIRDS_OF_PREY,
    Classification.FLIGHTLESS_BIRDS,
    Classification.WATERFOWL,
})

MINGLER_CLASSIFICATIONS = frozenset(set(Classification) - RESTRICTED_CLASSIFICATIONS)


def classify(record: BirdRecord) -> Classification:
    """Classification of a record, derived from its species."""
    return record.species.classification


def is_restricted(classification: Classification) -> bool:
    return classification in RESTRICTED_CLASSIFICATIONS


def can_coexist(candidate: BirdRecord, enclosure: "Enclosure") -> bool:
    """
    Check whether a bird may join the current residents of an enclosure.

    Capacity is not considered here; see Enclosure.try_admit.
    """
    if candidate.extinct:
        return False

    residents = enclosure.residents
    if not residents:
        return True

    existing = classify(residents[0])
    incoming = classify(candidate)

    if is_restricted(incoming):
        return incoming == existing
    if is_restricted(existing):
        return False
    return True
