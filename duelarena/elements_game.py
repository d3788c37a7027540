"""Two-player elemental duel played in one terminal."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from duelarena.combat import clear_screen
from duelarena.elements import Element, Fighter, create_fighter, health_bar, parse_element

_ELEMENT_MENU = (
    "elija elemento de guerrero:\n"
    "A-Tierra (+1 escudo)\n"
    "B-Fuego (+10 dano)\n"
    "C-Agua (+50 hp)\n"
    "D-Viento (+10 velocidad)\n"
)

_WINNER_BANNER = (
    "=========================================\n"
    "             ¡TENEMOS UN GANADOR!      \n"
    "=========================================\n"
    "                 {name}\n"
    "     ¡Ha demostrado su gran poder!\n"
    "=========================================\n"
)


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class ElementDuel:
    """A game between two elemental fighters sharing one terminal."""

    def __init__(
        self,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = _write_stdout,
        clear: Callable[[], None] = clear_screen,
        rng: random.Random | None = None,
    ) -> None:
        self._read = read
        self._write = write
        self._clear = clear
        self._rng = rng if rng is not None else random.Random()
        self._leader: Fighter | None = None

    def _token(self) -> str:
        while True:
            words = self._read().split()
            if words:
                return words[0]

    def choose_fighter(self) -> Fighter:
        """Ask for an element and a name, then build a fighter with random speed."""
        while True:
            self._write(_ELEMENT_MENU)
            letter = self._token()[0]
            self._clear()
            try:
                element = parse_element(letter)
            except ValueError:
                continue
            break
        self._write("ingrese nombre:")
        name = self._token()
        speed = self._rng.randint(1, 10)
        self._clear()
        return create_fighter(element, name, speed)

    def _menu(self, actor: Fighter) -> str:
        header = "turno de" if actor is self._leader else "Turno de"
        return (
            f"{header} {actor.name}\n"
            "1 - Golpe\n"
            f"2 - {actor.element.special_name}\n"
            "3 - Bloquear\n"
            "4 - Curarse\n\n"
            f"{health_bar(actor.hp, actor.element)}\n"
            f"DEFENSA: {actor.shield}\n"
        )

    def take_turn(self, actor: Fighter, target: Fighter) -> str:
        """Ask the actor for an action until a valid one is done; return it."""
        invalid = (
            "  No es opcion  >:(  \n" if actor is self._leader else "No es opcion\n"
        )
        while True:
            self._write(self._menu(actor))
            choice = self._token()[0]
            self._clear()
            if choice == "1":
                actor.strike(target)
            elif choice == "2":
                actor.special(target)
            elif choice == "3":
                actor.block()
            elif choice == "4":
                if actor.at_full_health():
                    self._write("Salud al maximo\n")
                    continue
                actor.heal()
            else:
                self._write(invalid)
                continue
            return choice

    def fight(self, first: Fighter, second: Fighter) -> Fighter:
        """Alternate turns, ``first`` leading, until one falls; return the winner."""
        self._leader = first
        self._write(f"{first.name} inicia el combate\n\n")
        while True:
            self.take_turn(first, second)
            if second.hp <= 0:
                return first
            self.take_turn(second, first)
            if first.hp <= 0:
                return second

    def _stats(self, fighter: Fighter) -> str:
        return (
            "Stats:\n"
            f"nombre: {fighter.name}\n"
            f"elemento: {fighter.element.label}\n"
            f"dano: {fighter.damage}\n"
            f"escudo: {fighter.shield}\n"
            f"hp: {fighter.hp}\n"
            f"velocidad: {fighter.speed}\n\n"
        )

    def run(self) -> Fighter:
        """Play a whole game and return the winning fighter."""
        one = self.choose_fighter()
        two = self.choose_fighter()
        for fighter in (one, two):
            self._write(self._stats(fighter))
        self._write("---DUELO---\n\n")
        if one.speed >= two.speed:
            winner = self.fight(one, two)
        else:
            winner = self.fight(two, one)
        self._write(_WINNER_BANNER.format(name=winner.name))
        return winner


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Two-player elemental duel.")
    parser.parse_args(argv)
    try:
        ElementDuel().run()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0