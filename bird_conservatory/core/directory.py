"""
Bird Conservatory — Allocation Directory
Owns all enclosures and rescued-but-unhoused birds, and places birds first-fit.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from enum import Enum, auto
import logging
import threading

from .bird import BirdRecord
from .compatibility import classify
from .enclosure import Enclosure
from .errors import NullRecord, DuplicateIntake, ExtinctRecord, DirectoryFull, UnknownEnclosureId
from ..config import ConservatoryConfig, CONSERVATORY

logger = logging.getLogger(__name__)


class PlacementStatus(Enum):
    """Where a bird stands in the conservatory."""
    LOCATED = auto()              # Housed in an enclosure
    AWAITING_ASSIGNMENT = auto()  # Rescued, not yet housed
    UNKNOWN = auto()              # Never seen


@dataclass(frozen=True)
class LocationDescriptor:
    """The enclosure a bird was placed in or found in."""
    enclosure_id: int
    location: str
    created: bool = False           # Enclosure was built for this assignment
    already_resident: bool = False  # Bird was housed before this call


@dataclass(frozen=True)
class LookupResult:
    """Outcome of looking a bird up."""
    status: PlacementStatus
    location: Optional[LocationDescriptor] = None

    @property
    def is_located(self) -> bool:
        return self.status == PlacementStatus.LOCATED


class AllocationDirectory:
    """
    Conservatory-wide housing directory.

    Manages:
    - Intake of rescued birds awaiting housing
    - First-fit placement into enclosures in creation order
    - Creation of new enclosures, up to the configured maximum
    - Residency lookups

    Mutations (intake, assign) and reads run under one re-entrant lock, so a
    placement is never observed half-applied. Enclosure ids come from a
    counter held by each directory.
    """

    def __init__(self, config: ConservatoryConfig = CONSERVATORY):
        self.config = config

        self._enclosures: List[Enclosure] = []
        self._unassigned: Dict[BirdRecord, None] = {}  # Insertion-ordered set
        self._next_enclosure_id = config.first_enclosure_id
        self._lock = threading.RLock()

        logger.info(
            f"Allocation directory initialized "
            f"({config.max_enclosures} enclosures x {config.enclosure_capacity} birds)"
        )

    # -------------------------------------------------------------------------
    # Read queries
    # -------------------------------------------------------------------------

    @property
    def enclosures(self) -> Tuple[Enclosure, ...]:
        """All enclosures in creation order."""
        with self._lock:
            return tuple(self._enclosures)

    @property
    def unassigned(self) -> Tuple[BirdRecord, ...]:
        """Rescued birds not yet housed, in intake order."""
        with self._lock:
            return tuple(self._waiting())

    @property
    def is_full(self) -> bool:
        with self._lock:
            return len(self._enclosures) >= self.config.max_enclosures

    def residents(self) -> Tuple[BirdRecord, ...]:
        """Every housed bird, enclosure by enclosure."""
        with self._lock:
            return tuple(bird for enclosure in self._enclosures for bird in enclosure.residents)

    def get_enclosure_by_id(self, enclosure_id: int) -> Enclosure:
        with self._lock:
            for enclosure in self._enclosures:
                if enclosure.enclosure_id == enclosure_id:
                    return enclosure
        raise UnknownEnclosureId(f"No enclosure found with id: {enclosure_id}")

    def lookup(self, record: BirdRecord) -> LookupResult:
        """Find where a bird is: housed, awaiting assignment, or unknown."""
        if record is None:
            raise NullRecord("Bird cannot be None")

        with self._lock:
            enclosure = self._find_residence(record)
            if enclosure is not None:
                return LookupResult(
                    PlacementStatus.LOCATED,
                    LocationDescriptor(enclosure.enclosure_id, enclosure.location),
                )
            if record in self._unassigned:
                return LookupResult(PlacementStatus.AWAITING_ASSIGNMENT)
            return LookupResult(PlacementStatus.UNKNOWN)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def intake(self, record: BirdRecord):
        """
        Register a rescued bird without housing it.

        Raises:
            NullRecord: record is None
            DuplicateIntake: an equal bird is already rescued or housed
        """
        if record is None:
            raise NullRecord("Bird cannot be None")

        with self._lock:
            if record in self._unassigned or self._find_residence(record) is not None:
                logger.warning(f"Duplicate intake rejected: {record.display_name}")
                raise DuplicateIntake(f"{record.display_name} has already been rescued")

            self._unassigned[record] = None
            logger.debug(f"Rescued {record.display_name} ({len(self._unassigned)} awaiting housing)")

    def assign(self, record: BirdRecord) -> LocationDescriptor:
        """
        House a bird in the first enclosure that admits it.

        Birds already housed are reported where they are. Otherwise existing
        enclosures are scanned in creation order and the earliest admissible
        one wins, even when a later one has more room. Only when none admits
        the bird is a new enclosure built.

        Raises:
            NullRecord: record is None
            ExtinctRecord: the bird is extinct
            DirectoryFull: a new enclosure is needed but the maximum is reached
        """
        if record is None:
            raise NullRecord("Bird cannot be None")
        if record.extinct:
            logger.warning(f"Rejected extinct bird: {record.display_name}")
            raise ExtinctRecord("Extinct birds cannot be added to an enclosure")

        with self._lock:
            current = self._find_residence(record)
            if current is not None:
                self._unassigned.pop(record, None)
                logger.debug(f"{record.display_name} already in enclosure {current.enclosure_id}")
                return LocationDescriptor(current.enclosure_id, current.location, already_resident=True)

            for enclosure in self._enclosures:
                if enclosure.try_admit(record):
                    enclosure.admit(record)
                    self._unassigned.pop(record, None)
                    logger.info(f"Assigned {record.display_name} to enclosure {enclosure.enclosure_id}")
                    return LocationDescriptor(enclosure.enclosure_id, enclosure.location)

            enclosure = self._create_enclosure(record)
            enclosure.admit(record)
            self._unassigned.pop(record, None)
            logger.info(f"Assigned {record.display_name} to new enclosure {enclosure.enclosure_id}")
            return LocationDescriptor(enclosure.enclosure_id, enclosure.location, created=True)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _find_residence(self, record: BirdRecord) -> Optional[Enclosure]:
        for enclosure in self._enclosures:
            if enclosure.has_resident(record):
                return enclosure
        return None

    def _waiting(self) -> List[BirdRecord]:
        # Drop birds admitted to an enclosure directly, outside assign()
        for record in [r for r in self._unassigned if self._find_residence(r) is not None]:
            del self._unassigned[record]
        return list(self._unassigned)

    def _create_enclosure(self, record: BirdRecord) -> Enclosure:
        if len(self._enclosures) >= self.config.max_enclosures:
            logger.warning(f"No room for {record.display_name}: all enclosures in use")
            raise DirectoryFull(
                f"Conservatory has reached maximum capacity of {self.config.max_enclosures} enclosures"
            )

        classification = classify(record)
        ordinal = 1 + sum(
            1 for enclosure in self._enclosures if enclosure.classification() == classification
        )
        location = self.config.location_for(classification.display_name, ordinal)

        enclosure = Enclosure(self._next_enclosure_id, location, self.config)
        self._next_enclosure_id += 1
        self._enclosures.append(enclosure)

        logger.info(f"Created enclosure {enclosure.enclosure_id}: {location}")
        return enclosure

    def get_status(self) -> Dict:
        """Get directory status as dictionary."""
        with self._lock:
            return {
                "enclosures": len(self._enclosures),
                "max_enclosures": self.config.max_enclosures,
                "housed": sum(e.occupancy for e in self._enclosures),
                "awaiting_assignment": len(self._waiting()),
                "enclosure_status": [e.get_status() for e in self._enclosures],
            }

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"AllocationDirectory({len(self._enclosures)} enclosures, "
                f"{len(self._waiting())} awaiting assignment)"
            )
