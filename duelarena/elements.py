"""Elemental fighters: earth, fire, water and wind, with their health bar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BASE_HP = 100
WATER_MAX_HP = 150
BASE_DAMAGE = 20
HEAL_AMOUNT = 15
BAR_WIDTH = 10


class Element(Enum):
    """The four elements a fighter can belong to, keyed by menu letter."""

    EARTH = "a"
    FIRE = "b"
    WATER = "c"
    WIND = "d"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def special_name(self) -> str:
        return _SPECIALS[self]

    @property
    def max_hp(self) -> int:
        return WATER_MAX_HP if self is Element.WATER else BASE_HP


_LABELS = {
    Element.EARTH: "Tierra",
    Element.FIRE: "Fuego",
    Element.WATER: "Agua",
    Element.WIND: "Viento",
}

_SPECIALS = {
    Element.EARTH: "Lanzarrocas",
    Element.FIRE: "Lanzallamas",
    Element.WATER: "Stunami",
    Element.WIND: "Tornado",
}


def parse_element(text: str) -> Element:
    """Read a menu letter (a-d, either case) as an element."""
    try:
        return Element(text.strip().lower())
    except ValueError:
        raise ValueError(f"{text!r} is not an element") from None


@dataclass
class Fighter:
    """A named fighter with health, shield charges, damage and speed."""

    name: str
    element: Element
    speed: int
    hp: int = BASE_HP
    shield: int = 0
    damage: int = BASE_DAMAGE

    @property
    def max_hp(self) -> int:
        return self.element.max_hp

    def _hit(self, other: Fighter, amount: int) -> None:
        if other.shield > 0:
            other.shield -= 1
            other.hp -= amount // 2
        else:
            other.hp -= amount

    def strike(self, other: Fighter) -> None:
        """Plain blow; a shield charge on the target halves it."""
        self._hit(other, self.damage)

    def special(self, other: Fighter) -> None:
        """The element's signature attack; a shield charge halves it."""
        self._hit(other, self.damage)

    def block(self) -> None:
        self.shield += 1

    def heal(self) -> None:
        """Restore health, never going above the element's maximum."""
        self.hp = min(self.hp + HEAL_AMOUNT, self.max_hp)

    def at_full_health(self) -> bool:
        return self.hp == self.max_hp


def create_fighter(element: Element, name: str, speed: int) -> Fighter:
    """Build a fighter with its element's bonus applied."""
    fighter = Fighter(name, element, speed)
    if element is Element.EARTH:
        fighter.shield += 1
    elif element is Element.FIRE:
        fighter.damage += 10
    elif element is Element.WATER:
        fighter.hp += 50
    elif element is Element.WIND:
        fighter.speed += 10
    return fighter


def health_bar(hp: int, element: Element) -> str:
    """Render health as a ten-slot bar followed by the numbers."""
    max_hp = element.max_hp
    blocks = int(hp * BAR_WIDTH / max_hp)
    filled = "#" * max(blocks, 0)
    empty = "-" * max(BAR_WIDTH - blocks, 0)
    return f"[{filled}{empty}] {hp}/{max_hp} HP"