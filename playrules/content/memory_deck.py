"""Animal catalog and memory-game deck building."""

import random
from dataclasses import dataclass
from typing import Final

from playrules.progression.levels import animal_level_config
from playrules.shared.schemas.base import LevelBand

_default_rng = random.Random()


@dataclass(frozen=True)
class Animal:
    """An animal that can appear on a card."""

    id: str
    name: str
    emoji: str
    card_color: str


@dataclass(frozen=True)
class AnimalCard:
    """One face-down card; every animal appears on exactly two cards."""

    uid: str
    animal: Animal
    is_flipped: bool = False
    is_matched: bool = False


ANIMALS: Final[tuple[Animal, ...]] = (
    Animal("pig", "Pig", "🐷", "#FFD1DC"),
    Animal("dog", "Dog", "🐶", "#DBEAFE"),
    Animal("horse", "Horse", "🐴", "#FDE4CF"),
    Animal("yak", "Yak", "🐂", "#FAE0C8"),
    Animal("cat", "Cat", "🐱", "#FFF1B7"),
    Animal("sheep", "Sheep", "🐑", "#E7F9EF"),
    Animal("cow", "Cow", "🐮", "#E9E7FF"),
    Animal("rabbit", "Rabbit", "🐰", "#FFE2EE"),
    Animal("duck", "Duck", "🦆", "#E6F7FF"),
    Animal("donkey", "Donkey", "🫏", "#DFE9F7"),
    Animal("chicken", "Chicken", "🐔", "#FBE7C7"),
    Animal("llama", "Llama", "🦙", "#FEE2C6"),
    Animal("camel", "Camel", "🐫", "#F6DDB7"),
    Animal("ox", "Ox", "🐂", "#E5D0D0"),
    Animal("turkey", "Turkey", "🦃", "#F5D5D5"),
)

_ANIMALS_BY_ID: Final[dict[str, Animal]] = {animal.id: animal for animal in ANIMALS}

# Familiar animals dealt first in each band; the rest of the board is random
BAND_ANIMAL_IDS: Final[dict[LevelBand, tuple[str, ...]]] = {
    LevelBand.EASY: ("pig", "dog", "horse", "yak"),
    LevelBand.MEDIUM: ("pig", "dog", "horse", "yak", "cat", "sheep"),
    LevelBand.HARD: ("pig", "dog", "horse", "yak", "cat", "sheep", "cow", "rabbit"),
}


def animal_by_id(animal_id: str) -> Animal | None:
    """Catalog entry for an id, or None."""
    return _ANIMALS_BY_ID.get(animal_id)


def pick_animals(band: LevelBand, pair_count: int, rng: random.Random | None = None) -> list[Animal]:
    """``pair_count`` distinct animals: the band's favourites, then random extras."""
    rng = rng or _default_rng
    pair_count = max(0, min(pair_count, len(ANIMALS)))
    selected = [_ANIMALS_BY_ID[animal_id] for animal_id in BAND_ANIMAL_IDS[band]][:pair_count]
    if len(selected) < pair_count:
        chosen = {animal.id for animal in selected}
        extras = [animal for animal in ANIMALS if animal.id not in chosen]
        selected.extend(rng.sample(extras, pair_count - len(selected)))
    return selected


def build_deck(level: float, rng: random.Random | None = None) -> list[AnimalCard]:
    """Shuffled deck for an animal memory level, two cards per pair."""
    rng = rng or _default_rng
    config = animal_level_config(level)
    cards = [
        AnimalCard(uid=f"{animal.id}-{side}", animal=animal)
        for animal in pick_animals(config.band, config.pairs, rng)
        for side in ("A", "B")
    ]
    rng.shuffle(cards)
    return cards
