"""
Bird Conservatory — Resource Aggregation
Food requirements derived from the birds currently housed.
"""

from collections import Counter
from typing import Dict, Iterable
import logging

from .bird import BirdRecord, Food
from .directory import AllocationDirectory

logger = logging.getLogger(__name__)


class ResourceAggregator:
    """
    Derives food-unit totals from a directory's current placement.

    Each housed bird needs one unit of every food in its diet. Birds awaiting
    assignment are not fed from enclosure stock and are not counted.
    """

    @staticmethod
    def _tally(birds: Iterable[BirdRecord]) -> Dict[Food, int]:
        counts: Counter = Counter()
        for bird in birds:
            counts.update(bird.diet)
        return {food: count for food, count in counts.items() if count > 0}

    def consumption_totals(self, directory: AllocationDirectory) -> Dict[Food, int]:
        """Units of each food needed across all enclosures."""
        totals = self._tally(directory.residents())
        logger.debug(f"Food totals: {sum(totals.values())} units across {len(totals)} foods")
        return totals

    def totals_by_enclosure(self, directory: AllocationDirectory) -> Dict[int, Dict[Food, int]]:
        """Units of each food needed, per enclosure id."""
        return {
            enclosure.enclosure_id: self._tally(enclosure.residents)
            for enclosure in directory.enclosures
        }


def consumption_totals(directory: AllocationDirectory) -> Dict[Food, int]:
    """Units of each food needed across all enclosures."""
    return ResourceAggregator().consumption_totals(directory)
