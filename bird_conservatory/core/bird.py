"""
Bird Conservatory — Bird Records
Species taxonomy, food catalogue, and the immutable record describing one rescued bird.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union
from enum import Enum, auto

from .errors import (
    InvalidSpecies,
    InvalidCharacteristic,
    InvalidExtinctFlag,
    InvalidWingCount,
    InvalidDietSize,
    InvalidVocabulary,
    MissingWaterBody,
    UnexpectedVariant,
)
from ..config import CONSERVATORY


class Classification(Enum):
    """Taxonomy groups used for housing decisions."""
    BIRDS_OF_PREY = "Birds of Prey"
    FLIGHTLESS_BIRDS = "Flightless Birds"
    OWLS = "Owls"
    PARROTS = "Parrots"
    PIGEONS = "Pigeons"
    SHOREBIRDS = "Shorebirds"
    WATERFOWL = "Waterfowl"

    @property
    def display_name(self) -> str:
        return self.value


class Species(Enum):
    """Species the conservatory can take in."""
    # Birds of Prey
    HAWK = auto()
    EAGLE = auto()
    OSPREY = auto()

    # Flightless Birds
    EMU = auto()
    KIWI = auto()
    MOA = auto()

    # Owls
    OWL = auto()

    # Parrots
    ROSE_RING_PARAKEET = auto()
    GRAY_PARROT = auto()
    SULFUR_CRESTED_COCKATOO = auto()

    # Pigeons / Doves
    PIGEON = auto()
    DOVE = auto()

    # Shorebirds
    GREAT_AUK = auto()
    HORNED_PUFFIN = auto()
    AFRICAN_JACANA = auto()

    # Waterfowl
    DUCK = auto()
    SWAN = auto()
    GOOSE = auto()

    @property
    def display_name(self) -> str:
        return TAXONOMY[self][0]

    @property
    def classification(self) -> Classification:
        return TAXONOMY[self][1]


class Food(Enum):
    """Food items a bird may prefer."""
    BERRIES = "berries"
    SEEDS = "seeds"
    FRUIT = "fruit"
    INSECTS = "insects"
    OTHER_BIRDS = "other birds"
    EGGS = "eggs"
    SMALL_MAMMALS = "small mammals"
    FISH = "fish"
    BUDS = "buds"
    LARVAE = "larvae"
    AQUATIC_INVERTEBRATES = "aquatic invertebrates"
    NUTS = "nuts"
    VEGETATION = "vegetation"

    @property
    def display_name(self) -> str:
        return self.value


# Species -> (display name, classification)
TAXONOMY: Dict[Species, Tuple[str, Classification]] = {
    Species.HAWK: ("Hawk", Classification.BIRDS_OF_PREY),
    Species.EAGLE: ("Eagle", Classification.BIRDS_OF_PREY),
    Species.OSPREY: ("Osprey", Classification.BIRDS_OF_PREY),
    Species.EMU: ("Emu", Classification.FLIGHTLESS_BIRDS),
    Species.KIWI: ("Kiwi", Classification.FLIGHTLESS_BIRDS),
    Species.MOA: ("Moa", Classification.FLIGHTLESS_BIRDS),
    Species.OWL: ("Owl", Classification.OWLS),
    Species.ROSE_RING_PARAKEET: ("Rose-ring Parakeet", Classification.PARROTS),
    Species.GRAY_PARROT: ("Gray Parrot", Classification.PARROTS),
    Species.SULFUR_CRESTED_COCKATOO: ("Sulfur-crested Cockatoo", Classification.PARROTS),
    Species.PIGEON: ("Pigeon", Classification.PIGEONS),
    Species.DOVE: ("Dove", Classification.PIGEONS),
    Species.GREAT_AUK: ("Great Auk", Classification.SHOREBIRDS),
    Species.HORNED_PUFFIN: ("Horned Puffin", Classification.SHOREBIRDS),
    Species.AFRICAN_JACANA: ("African Jacana", Classification.SHOREBIRDS),
    Species.DUCK: ("Duck", Classification.WATERFOWL),
    Species.SWAN: ("Swan", Classification.WATERFOWL),
    Species.GOOSE: ("Goose", Classification.WATERFOWL),
}

# Classifications carrying variant traits
TALKING_CLASSIFICATIONS = frozenset({Classification.PARROTS})
AQUATIC_CLASSIFICATIONS = frozenset({Classification.SHOREBIRDS, Classification.WATERFOWL})

_FOOD_ORDER: Dict[Food, int] = {food: i for i, food in enumerate(Food)}


@dataclass(frozen=True)
class TalkingTraits:
    """Extra traits for species that mimic speech."""
    vocabulary_size: int
    favorite_phrase: str = ""


@dataclass(frozen=True)
class AquaticTraits:
    """Extra traits for species living near water."""
    water_body: str


Variant = Union[TalkingTraits, AquaticTraits]


@dataclass(frozen=True)
class BirdRecord:
    """
    One rescued bird.

    Records are immutable values: two records with identical fields are the
    same bird as far as intake and housing are concerned. The diet is stored
    as a frozenset, so the order foods are listed in does not matter.

    Raises a BirdValidationError subclass when any attribute is invalid.
    """
    species: Species
    characteristic: str
    extinct: bool
    wings: int
    diet: FrozenSet[Food]
    variant: Optional[Variant] = None

    def __post_init__(self):
        """Validate attributes and normalize the diet."""
        if not isinstance(self.species, Species):
            raise InvalidSpecies(f"Unknown species: {self.species!r}")
        if not isinstance(self.characteristic, str) or not self.characteristic.strip():
            raise InvalidCharacteristic("Defining characteristic cannot be empty")
        if not isinstance(self.extinct, bool):
            raise InvalidExtinctFlag(f"Extinct flag must be True or False: {self.extinct!r}")
        if isinstance(self.wings, bool) or not isinstance(self.wings, int) or self.wings < 0:
            raise InvalidWingCount(f"Number of wings cannot be negative: {self.wings!r}")

        object.__setattr__(self, "diet", self._normalize_diet(self.diet))
        self._validate_variant()

    @staticmethod
    def _normalize_diet(diet: Optional[Iterable[Food]]) -> FrozenSet[Food]:
        if diet is None or isinstance(diet, (str, Food)):
            raise InvalidDietSize("Preferred food must be a collection of food items")

        try:
            listed = list(diet)
        except TypeError:
            raise InvalidDietSize(f"Preferred food must be a collection: {diet!r}") from None
        for item in listed:
            if not isinstance(item, Food):
                raise InvalidDietSize(f"Not a food item: {item!r}")

        items = frozenset(listed)

        low, high = CONSERVATORY.min_diet_items, CONSERVATORY.max_diet_items
        if not low <= len(items) <= high:
            raise InvalidDietSize(
                f"Birds must have {low}-{high} distinct preferred food items, got {len(items)}"
            )
        return items

    def _validate_variant(self):
        classification = self.classification

        if classification in TALKING_CLASSIFICATIONS:
            if self.variant is None:
                raise InvalidVocabulary(f"{self.display_name} requires a vocabulary size")
            if not isinstance(self.variant, TalkingTraits):
                raise UnexpectedVariant(f"{self.display_name} takes talking traits only")
            vocabulary = self.variant.vocabulary_size
            if isinstance(vocabulary, bool) or not isinstance(vocabulary, int) \
                    or not 0 <= vocabulary <= CONSERVATORY.max_vocabulary:
                raise InvalidVocabulary(
                    f"Vocabulary size must be between 0 and {CONSERVATORY.max_vocabulary}"
                )
            if not isinstance(self.variant.favorite_phrase, str):
                raise UnexpectedVariant(
                    f"Favorite phrase must be text: {self.variant.favorite_phrase!r}"
                )

        elif classification in AQUATIC_CLASSIFICATIONS:
            if self.variant is None:
                raise MissingWaterBody(f"{self.display_name} requires a body of water")
            if not isinstance(self.variant, AquaticTraits):
                raise UnexpectedVariant(f"{self.display_name} takes aquatic traits only")
            water = self.variant.water_body
            if not isinstance(water, str) or not water.strip():
                raise MissingWaterBody("Body of water cannot be empty")

        elif self.variant is not None:
            raise UnexpectedVariant(
                f"{classification.display_name} do not carry {type(self.variant).__name__}"
            )

    @property
    def classification(self) -> Classification:
        return self.species.classification

    @property
    def display_name(self) -> str:
        return self.species.display_name

    @property
    def is_talking(self) -> bool:
        return isinstance(self.variant, TalkingTraits)

    @property
    def is_aquatic(self) -> bool:
        return isinstance(self.variant, AquaticTraits)

    @property
    def vocabulary_size(self) -> Optional[int]:
        return self.variant.vocabulary_size if self.is_talking else None

    @property
    def favorite_phrase(self) -> Optional[str]:
        return self.variant.favorite_phrase if self.is_talking else None

    @property
    def water_body(self) -> Optional[str]:
        return self.variant.water_body if self.is_aquatic else None

    def diet_in_order(self) -> List[Food]:
        """Preferred foods in catalogue order."""
        return sorted(self.diet, key=_FOOD_ORDER.__getitem__)

    def __repr__(self) -> str:
        flag = ", extinct" if self.extinct else ""
        return f"BirdRecord({self.display_name}: {self.characteristic!r}{flag})"
