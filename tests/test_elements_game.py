import random

import pytest

from duelarena.elements import Element, create_fighter
from duelarena.elements_game import ElementDuel, main


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return self.value


def _game(lines, rng=None):
    feed = iter(lines)
    output = []

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    duel = ElementDuel(read=read, write=output.append, clear=lambda: None, rng=rng)
    return duel, output


def test_choose_fighter_retries_until_valid_letter():
    duel, output = _game(["z", "C", "Lia"], rng=random.Random(3))
    fighter = duel.choose_fighter()
    assert fighter.element is Element.WATER
    assert fighter.name == "Lia"
    assert fighter.hp == 150
    assert 1 <= fighter.speed <= 10
    assert sum("elija elemento" in text for text in output) == 2


def test_choose_fighter_wind_speed_bonus():
    duel, _ = _game(["d", "Vento"], rng=_FixedRng(4))
    fighter = duel.choose_fighter()
    assert fighter.speed == 4 + 10


def test_take_turn_block_increases_shield():
    duel, _ = _game(["3"])
    actor = create_fighter(Element.FIRE, "a", 1)
    target = create_fighter(Element.FIRE, "b", 1)
    assert duel.take_turn(actor, target) == "3"
    assert actor.shield == 1
    assert target.hp == target.max_hp


def test_take_turn_heal_at_full_asks_again():
    duel, output = _game(["4", "1"])
    actor = create_fighter(Element.EARTH, "a", 1)
    target = create_fighter(Element.WIND, "b", 1)
    assert duel.take_turn(actor, target) == "1"
    assert "Salud al maximo\n" in output
    assert target.hp == target.max_hp - actor.damage


def test_take_turn_rejects_unknown_option():
    duel, output = _game(["9", "2"])
    actor = create_fighter(Element.WIND, "a", 1)
    target = create_fighter(Element.WIND, "b", 1)
    assert duel.take_turn(actor, target) == "2"
    assert any("No es opcion" in text for text in output)
    assert target.hp == target.max_hp - actor.damage


def test_take_turn_menu_shows_special_name():
    duel, output = _game(["3"])
    actor = create_fighter(Element.EARTH, "Roca", 1)
    duel.take_turn(actor, create_fighter(Element.FIRE, "b", 1))
    assert "2 - Lanzarrocas\n" in output[0]
    assert "DEFENSA: 1\n" in output[0]


def test_fight_leader_wins_equal_race():
    duel, output = _game(["1"] * 20)
    first = create_fighter(Element.FIRE, "Ana", 1)
    second = create_fighter(Element.FIRE, "Beto", 1)
    winner = duel.fight(first, second)
    assert winner is first
    assert second.hp <= 0
    assert first.hp > 0
    assert output[0] == "Ana inicia el combate\n\n"


def test_run_full_game_picks_faster_first():
    lines = ["b", "Ana", "b", "Beto"] + ["1"] * 20
    duel, output = _game(lines, rng=_FixedRng(5))
    winner = duel.run()
    assert winner.name == "Ana"
    text = "".join(output)
    assert "---DUELO---" in text
    assert "¡TENEMOS UN GANADOR!" in text
    assert "elemento: Fuego" in text


def test_run_wind_fighter_leads():
    lines = ["b", "Ana", "d", "Vento"] + ["1"] * 40
    duel, output = _game(lines, rng=_FixedRng(5))
    duel.run()
    assert "Vento inicia el combate\n\n" in output


def test_input_exhausted_raises_eof():
    duel, _ = _game([])
    with pytest.raises(EOFError):
        duel.choose_fighter()


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])