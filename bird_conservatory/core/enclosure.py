"""
Bird Conservatory — Enclosure
A capacity-bounded housing unit that keeps its residents compatible.
"""

from typing import Dict, Optional, Tuple
import logging

from .bird import BirdRecord, Classification
from .compatibility import can_coexist, classify
from .errors import NullRecord, ExtinctRecord, EnclosureFull, IncompatibleClassification
from ..config import ConservatoryConfig, CONSERVATORY

logger = logging.getLogger(__name__)


class Enclosure:
    """
    Houses up to five birds.

    An enclosure is either empty, holds birds of a single restricted
    classification, or holds any mix of minglers. Residents are kept as a
    tuple in admission order and replaced on every admission.
    """

    def __init__(self, enclosure_id: int, location: str,
                 config: ConservatoryConfig = CONSERVATORY):
        if not isinstance(location, str) or not location.strip():
            raise ValueError("Enclosure location cannot be empty")

        self.enclosure_id = enclosure_id
        self.location = location
        self.capacity = config.enclosure_capacity
        self._residents: Tuple[BirdRecord, ...] = ()

    @property
    def residents(self) -> Tuple[BirdRecord, ...]:
        return self._residents

    @property
    def occupancy(self) -> int:
        return len(self._residents)

    @property
    def free_slots(self) -> int:
        return max(0, self.capacity - len(self._residents))

    @property
    def is_empty(self) -> bool:
        return not self._residents

    @property
    def is_full(self) -> bool:
        return len(self._residents) >= self.capacity

    def classification(self) -> Optional[Classification]:
        """Classification of the first resident, or None when empty."""
        if not self._residents:
            return None
        return classify(self._residents[0])

    def has_resident(self, record: BirdRecord) -> bool:
        return record in self._residents

    def try_admit(self, record: BirdRecord) -> bool:
        """Whether the bird could be admitted right now."""
        if record is None:
            return False
        return (
            not record.extinct
            and len(self._residents) < self.capacity
            and can_coexist(record, self)
        )

    def admit(self, record: BirdRecord):
        """
        Add a bird to this enclosure.

        Placement belongs to AllocationDirectory.assign, which also clears the
        bird from the waiting list and holds the directory lock. Calling this
        directly skips both.

        Raises:
            NullRecord: record is None
            ExtinctRecord: the bird is extinct
            EnclosureFull: no free slot left
            IncompatibleClassification: residents cannot live with the bird
        """
        if record is None:
            raise NullRecord("Bird cannot be None")

        if not self.try_admit(record):
            if record.extinct:
                raise ExtinctRecord("Cannot add extinct bird to an enclosure")
            if self.is_full:
                raise EnclosureFull(
                    f"Enclosure {self.enclosure_id} is at maximum capacity of {self.capacity}"
                )
            raise IncompatibleClassification(
                f"{record.display_name} is incompatible with the "
                f"{self.classification().display_name} in enclosure {self.enclosure_id}"
            )

        self._residents = self._residents + (record,)
        logger.debug(
            f"Enclosure {self.enclosure_id}: admitted {record.display_name} "
            f"({self.occupancy}/{self.capacity})"
        )

    def get_status(self) -> Dict:
        """Get current status as dictionary."""
        classification = self.classification()
        return {
            "enclosure_id": self.enclosure_id,
            "location": self.location,
            "classification": classification.display_name if classification else None,
            "occupancy": self.occupancy,
            "capacity": self.capacity,
            "free_slots": self.free_slots,
            "residents": [bird.display_name for bird in self._residents],
        }

    def __repr__(self) -> str:
        return f"Enclosure {self.enclosure_id} ({self.location}) - {self.occupancy}/{self.capacity} birds"
