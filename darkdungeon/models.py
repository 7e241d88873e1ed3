"""Core game data: hero classes, accessories, characters, enemies and game state.

Every roster in :class:`GameState` is a list kept head-first: a newly added
entry goes to index 0, which is the order the game shows and saves them in.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum

NAME_LIMIT = 49


class ClassType(IntEnum):
    """The hero classes a character can belong to."""

    FURIE = 0
    VESTALE = 1
    CHASSEUR_DE_PRIMES = 2
    MAITRE_CHIEN = 3


@dataclass
class CharacterClass:
    """Base statistics of a hero class."""

    type: ClassType
    att: int
    defense: int
    hp_max: int
    rest: int


_CLASS_STATS: dict[ClassType, CharacterClass] = {
    ClassType.FURIE: CharacterClass(ClassType.FURIE, 13, 0, 20, 0),
    ClassType.VESTALE: CharacterClass(ClassType.VESTALE, 3, 0, 20, 10),
    ClassType.CHASSEUR_DE_PRIMES: CharacterClass(ClassType.CHASSEUR_DE_PRIMES, 7, 3, 25, 3),
    ClassType.MAITRE_CHIEN: CharacterClass(ClassType.MAITRE_CHIEN, 10, 6, 17, 5),
}

_CLASS_NAMES: dict[ClassType, str] = {
    ClassType.FURIE: "Furie",
    ClassType.VESTALE: "Vestale",
    ClassType.CHASSEUR_DE_PRIMES: "Chasseur",
    ClassType.MAITRE_CHIEN: "M. Chien",
}


def class_stats(class_type: ClassType | int) -> CharacterClass:
    """Return a fresh copy of the base statistics for a class.

    Raises ValueError for a value that is not a known class.
    """
    return replace(_CLASS_STATS[ClassType(class_type)])


def get_class_name(class_type: ClassType | int) -> str:
    """Return the display name of a class, or "Inconnue" if it is unknown."""
    try:
        return _CLASS_NAMES[ClassType(class_type)]
    except ValueError:
        return "Inconnue"


def _clip_name(name: str) -> str:
    return name[:NAME_LIMIT]


@dataclass(eq=False)
class Accessory:
    """An item a character can wear for stat bonuses."""

    name: str
    attbonus: int = 0
    defbonus: int = 0
    hp_bonus: int = 0
    rest_bonus: int = 0
    stress_reduction: int = 0
    price: int = 0

    def __post_init__(self) -> None:
        self.name = _clip_name(self.name)

    def describe(self) -> str:
        """One-line summary of the accessory's bonuses."""
        return (
            f"{self.name:<20} +{self.attbonus} att +{self.defbonus} def "
            f"+{self.hp_bonus} HP +{self.rest_bonus} rest -{self.stress_reduction} str"
        )


@dataclass(eq=False)
class Character:
    """A hero with a class, health, stress and up to two accessories."""

    name: str
    char_class: CharacterClass
    hp: int
    stress: int = 0
    acc1: Accessory | None = None
    acc2: Accessory | None = None
    nbcomb: int = 0
    is_defending: bool = False

    def __post_init__(self) -> None:
        self.name = _clip_name(self.name)

    @classmethod
    def create(cls, name: str, class_type: ClassType | int) -> Character:
        """Create a fresh character at full health with no stress."""
        stats = class_stats(class_type)
        return cls(name=name, char_class=stats, hp=stats.hp_max)

    def equipped(self) -> list[Accessory]:
        """Accessories currently worn, first slot first."""
        return [acc for acc in (self.acc1, self.acc2) if acc is not None]

    def attack_bonus(self) -> int:
        return sum(acc.attbonus for acc in self.equipped())

    def defense_bonus(self) -> int:
        return sum(acc.defbonus for acc in self.equipped())

    def hp_bonus(self) -> int:
        return sum(acc.hp_bonus for acc in self.equipped())

    def rest_bonus(self) -> int:
        return sum(acc.rest_bonus for acc in self.equipped())

    def stress_reduction(self) -> int:
        return sum(acc.stress_reduction for acc in self.equipped())

    def max_hp(self) -> int:
        """Maximum health including accessory bonuses."""
        return self.char_class.hp_max + self.hp_bonus()

    def describe(self) -> str:
        """Status line for the character, followed by one line per accessory."""
        cls = self.char_class
        lines = [
            f"{self.name:<15} {get_class_name(cls.type):<10} "
            f"{cls.att:3d}(+{self.attack_bonus()}) "
            f"{cls.defense:3d}(+{self.defense_bonus()}) "
            f"{self.hp:3d}/{self.max_hp():<3d} "
            f"{cls.rest:3d}(+{self.rest_bonus()}) "
            f"{self.stress:3d} {self.nbcomb:3d}"
        ]
        for slot, acc in ((1, self.acc1), (2, self.acc2)):
            if acc is not None:
                lines.append(f"   Accessoire {slot}: {acc.name}")
        return "\n".join(lines)


@dataclass
class Enemy:
    """An opponent faced at one dungeon level."""

    name: str
    level: int
    attack: int
    defense: int
    hp: int
    stress_attack: int


@dataclass
class GameState:
    """Everything that makes up a game in progress."""

    current_level: int = 1
    gold: int = 0
    available_characters: list[Character] = field(default_factory=list)
    sanitarium_characters: list[Character] = field(default_factory=list)
    tavern_characters: list[Character] = field(default_factory=list)
    fighting_characters: list[Character] = field(default_factory=list)
    available_accessories: list[Accessory] = field(default_factory=list)
    shop_accessories: list[Accessory] = field(default_factory=list)