"""Two-player arena duel between warriors, alchemists, wizards and vampires."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from duelarena.heroes import Alchemist, Character, Vampire, Warrior, Wizard

_SEPARATOR = "___________________________________________________________________\n\n"

_GAME_OVER = (
    "    :::::      ::     ::      ::  ::::::\n"
    "  ::         ::  ::   ::::  ::::  ::    \n"
    "  ::  ::::   ::::::   ::  ::  ::  ::::: \n"
    "  ::    ::  ::    ::  ::      ::  ::    \n"
    "    :::::   ::    ::  ::      ::  ::::::\n"
    "\n"
    "      ::::    ::    ::  ::::::  ::::::  \n"
    "    ::    ::  ::    ::  ::      ::   :: \n"
    "    ::    ::  ::    ::  :::::   ::::::  \n"
    "    ::    ::   ::  ::   ::      ::   :: \n"
    "      ::::       ::     ::::::  ::   :: \n"
    "\n"
)


class Kind(Enum):
    """The four characters a player can pick."""

    WARRIOR = "GUERRERO"
    ALCHEMIST = "ALQUIMISTA"
    WIZARD = "MAGO"
    VAMPIRE = "VAMPIRO"


def parse_kind(text: str) -> Kind:
    """Read a character name in upper, lower or capitalised form."""
    for kind in Kind:
        if text in (kind.value, kind.value.lower(), kind.value.capitalize()):
            return kind
    raise ValueError(f"{text} IS NOT A CHARACTER")


@dataclass
class Side:
    """One player's roster: a copy of every character and the one chosen."""

    warrior: Warrior = field(default_factory=lambda: Warrior("GUERRERO", 25, 5, False))
    alchemist: Alchemist = field(default_factory=lambda: Alchemist("ALQUIMISTA", 20, 4, 4))
    wizard: Wizard = field(default_factory=lambda: Wizard("MAGO", 27, 3, 2, 2, 2))
    vampire: Vampire = field(default_factory=lambda: Vampire("VAMPIRO", 22, 3, 1, 1, 3))
    kind: Kind | None = None

    def active(self) -> Character:
        """The character this player chose."""
        if self.kind is None:
            raise ValueError("no character selected")
        return {
            Kind.WARRIOR: self.warrior,
            Kind.ALCHEMIST: self.alchemist,
            Kind.WIZARD: self.wizard,
            Kind.VAMPIRE: self.vampire,
        }[self.kind]

    def enemy_view(self, player: int) -> str:
        return self.active().enemy_view(player)


def clear_screen() -> None:
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _heal_message(character: Alchemist | Vampire, gained: int) -> str:
    shown = gained if gained == character.cure else character.max_hp - character.hp
    return f"+{shown} HP\n"


class Duel:
    """A full game between two players sharing one terminal."""

    def __init__(
        self,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = _write_stdout,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self._read = read
        self._write = write
        self._clear = clear
        self.sides = (Side(), Side())

    def _side(self, player: int) -> Side:
        if player not in (1, 2):
            raise ValueError(f"no player {player}")
        return self.sides[player - 1]

    def _token(self) -> str:
        words = self._read().split()
        return words[0] if words else ""

    def _option(self) -> tuple[int | None, str]:
        token = self._token()
        try:
            return int(token), token
        except ValueError:
            return None, token

    def select(self, player: int) -> Kind:
        """Ask a player for a character until a valid name is given."""
        side = self._side(player)
        while True:
            self._write(f"                             PLAYER {player}\nSELECT CHARACTER\n")
            for character in (side.warrior, side.alchemist, side.wizard, side.vampire):
                self._write(_SEPARATOR)
                self._write(character.describe())
            self._write(
                "\nOPTION (ENTER NAME OF CHARACTER - Guerrero, Alquimista, Mago, Vampiro): "
            )
            text = self._token()
            self._clear()
            try:
                side.kind = parse_kind(text)
            except ValueError as error:
                self._write(f"{error}\n")
                continue
            return side.kind

    def turn(self, attacker: int, defender: int) -> bool:
        """Play one turn; return True if the attacker is already dead."""
        own, other = self._side(attacker), self._side(defender)
        if own.active().is_dead():
            return True
        if other.wizard.consume_freeze():
            return False
        valid = {1, 2} if own.kind is Kind.ALCHEMIST else {1, 2, 3}
        while True:
            self._write(other.enemy_view(defender))
            self._write(own.active().turn_view(attacker))
            option, text = self._option()
            if option == 1:
                self._attack(own, other)
            elif option == 2:
                self._second_ability(own, other)
            elif option == 3 and 3 in valid:
                self._third_ability(own, other, attacker, defender)
            self._clear()
            if option in valid:
                return False
            self._write(f"{text} NO ES UNA OPCION\n\n")

    def _attack(self, own: Side, other: Side) -> None:
        guard = other.warrior
        if own.kind is Kind.WARRIOR:
            hero = own.warrior
            if other.kind is Kind.WARRIOR:
                if guard.shield:
                    guard.shield = False
                else:
                    guard.take_damage(hero.attack)
                if guard.rebound_ready:
                    hero.take_damage(guard.rebound(hero.attack))
            elif other.kind is Kind.VAMPIRE:
                if guard.shield:
                    other.vampire.take_damage(int(hero.attack / 2))
                    guard.shield = False
                else:
                    other.vampire.take_damage(hero.attack)
            else:
                other.active().take_damage(hero.attack)
        elif own.kind is Kind.ALCHEMIST:
            alchemist = own.alchemist
            if other.kind is Kind.WARRIOR:
                if guard.shield:
                    guard.shield = False
                else:
                    guard.take_damage(alchemist.attack)
                if guard.rebound_ready:
                    alchemist.take_damage(guard.rebound(alchemist.attack))
            else:
                other.active().take_damage(alchemist.attack)
        elif own.kind is Kind.WIZARD:
            wizard = own.wizard
            if other.kind is Kind.WARRIOR:
                if guard.shield:
                    guard.shield = False
                    if guard.rebound_ready:
                        wizard.take_damage(guard.rebound(wizard.attack + wizard.bonus()))
                else:
                    guard.take_damage(wizard.attack + wizard.bonus())
                    if guard.rebound_ready:
                        wizard.take_damage(guard.rebound(wizard.attack))
            else:
                other.active().take_damage(wizard.attack + wizard.bonus())
        elif own.kind is Kind.VAMPIRE:
            vampire = own.vampire
            if other.kind is Kind.WARRIOR:
                if guard.shield:
                    guard.shield = False
                    if guard.rebound_ready:
                        vampire.take_damage(guard.rebound(vampire.attack))
                else:
                    self._drain(own, guard)
                    if guard.rebound_ready:
                        vampire.take_damage(guard.rebound(vampire.attack))
            elif other.kind is Kind.VAMPIRE and guard.shield:
                guard.shield = False
            elif other.kind is not None:
                self._drain(own, other.active())

    def _drain(self, own: Side, target: Character) -> None:
        vampire = own.vampire
        target.take_damage(vampire.attack + own.wizard.bonus())
        self._write(_heal_message(vampire, vampire.heal()))
        target.take_damage(vampire.poison_tick())

    def _second_ability(self, own: Side, other: Side) -> None:
        if own.kind is Kind.WARRIOR:
            own.warrior.shield = True
        elif own.kind is Kind.ALCHEMIST:
            self._write(_heal_message(own.alchemist, own.alchemist.heal()))
        elif own.kind is Kind.WIZARD:
            own.wizard.start_boost(own.wizard.boost_rounds)
        elif own.kind is Kind.VAMPIRE and other.kind is not None:
            vampire = own.vampire
            vampire.start_poison(vampire.poison_rounds)
            if other.kind in (Kind.WARRIOR, Kind.VAMPIRE) and other.warrior.shield:
                other.warrior.shield = False
            else:
                other.active().take_damage(vampire.poison_tick())

    def _third_ability(self, own: Side, other: Side, attacker: int, defender: int) -> None:
        if own.kind is Kind.WARRIOR:
            own.warrior.rebound_ready = True
        elif own.kind is Kind.WIZARD:
            own.wizard.freeze()
        elif own.kind is Kind.VAMPIRE:
            self._clear()
            self._mimic(own, other, attacker, defender)

    def _mimic(self, own: Side, other: Side, attacker: int, defender: int) -> None:
        vampire = own.vampire
        while True:
            option: int | None = None
            text = ""
            if other.kind is Kind.WARRIOR:
                self._write(other.warrior.enemy_view(defender))
                self._write(own.warrior.turn_view(attacker))
                option, text = self._option()
                if option == 1:
                    if other.warrior.shield:
                        other.warrior.shield = False
                    else:
                        other.warrior.take_damage(own.warrior.attack)
                elif option == 2:
                    own.warrior.shield = True
            elif other.kind is Kind.ALCHEMIST:
                self._write(other.alchemist.enemy_view(defender))
                self._write(own.alchemist.turn_view(attacker))
                option, text = self._option()
                if option == 1:
                    other.alchemist.take_damage(own.alchemist.attack)
                elif option == 2:
                    vampire.hp += int(own.alchemist.cure / 2)
            elif other.kind is Kind.WIZARD:
                self._write(other.wizard.enemy_view(defender))
                self._write(own.wizard.turn_view(attacker))
                option, text = self._option()
                if option == 1:
                    other.wizard.take_damage(own.wizard.attack)
                elif option == 2:
                    own.wizard.start_boost(1)
            elif other.kind is Kind.VAMPIRE:
                self._write(other.vampire.enemy_view(defender))
                self._write(vampire.turn_view(attacker))
                option, text = self._option()
                if option == 1:
                    other.vampire.take_damage(vampire.attack + vampire.poison_tick())
                    self._write(_heal_message(vampire, vampire.heal()))
                elif option == 2:
                    vampire.start_poison(1)
            self._clear()
            if option in (1, 2):
                return
            if option == 3:
                self._write(" OPCION NO DISPONIBLE\n\n")
            else:
                self._write(f"{text} NO ES UNA OPCION\n\n")

    def run(self) -> int:
        """Play a whole game and return the winning player's number."""
        self.select(1)
        self.select(2)
        first_dead = second_dead = False
        turn = 1
        while not (first_dead or second_dead):
            if turn % 2:
                first_dead = self.turn(1, 2)
            else:
                second_dead = self.turn(2, 1)
            turn += 1
        winner = 2 if first_dead else 1
        self._write(_GAME_OVER)
        self._write(f"        ****PLAYER {winner} WIN****\n\n")
        return winner


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Two-player arena duel.")
    parser.parse_args(argv)
    try:
        Duel().run()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0