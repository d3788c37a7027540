import pytest

from duelarena.heroes import Alchemist, Character, Vampire, Warrior, Wizard


@pytest.fixture
def warrior():
    return Warrior("GUERRERO", 25, attack=5, shield=False)


@pytest.fixture
def alchemist():
    return Alchemist("ALQUIMISTA", 20, attack=4, cure=4)


@pytest.fixture
def wizard():
    return Wizard("MAGO", 27, attack=3, buff=2, boost_rounds=2, freeze_turns=2)


@pytest.fixture
def vampire():
    return Vampire("VAMPIRO", 22, attack=3, cure=1, venom=1, poison_rounds=3)


def test_max_hp_taken_from_starting_hp():
    c = Character("X", 25)
    assert c.max_hp == 25
    assert c.hp == c.max_hp


def test_take_damage_reduces_hp_but_not_max():
    c = Character("X", 25)
    c.take_damage(5)
    assert c.hp == c.max_hp - 5
    assert c.max_hp == 25


@pytest.mark.parametrize("damage,dead", [(24, False), (25, True), (30, True)])
def test_is_dead(damage, dead):
    c = Character("X", 25)
    c.take_damage(damage)
    assert c.is_dead() is dead


def test_base_describe():
    c = Character("HERO", 25)
    assert c.describe() == "CHARACTER: HERO\nHEALTH POINTS: 25\n"


def test_warrior_rebound_inactive_returns_zero(warrior):
    assert warrior.rebound(warrior.attack) == 0


def test_warrior_rebound_returns_half(warrior):
    warrior.rebound_ready = True
    assert warrior.rebound(4) == 2
    assert warrior.rebound(5) * 2 <= 5


def test_warrior_describe(warrior):
    text = warrior.describe()
    assert "CHARACTER: GUERRERO" in text
    assert "HEALTH POINTS: 25" in text
    assert text.endswith("\n\n")


def test_warrior_views_show_shield(warrior):
    assert "SHIELD ON" not in warrior.turn_view(1)
    warrior.shield = True
    assert "SHIELD ON" in warrior.turn_view(1)
    assert "SHIELD ON" in warrior.enemy_view(2)


def test_warrior_turn_view(warrior):
    text = warrior.turn_view(1)
    assert "<<<<<PLAYER 1 TURN>>>>>" in text
    assert "{IIIIII}" in text
    assert "  HP 25/25" in text
    assert text.endswith(" SELECT OPTION: ")


def test_warrior_enemy_view(warrior):
    warrior.take_damage(3)
    text = warrior.enemy_view(2)
    assert "Player 2" in text
    assert f"HP {warrior.hp}/25  DAMAGE 5" in text
    assert text.endswith("VS.  \n\n")


def test_alchemist_heal_full_amount(alchemist):
    alchemist.take_damage(10)
    assert alchemist.heal() == alchemist.cure
    assert alchemist.hp == alchemist.max_hp - 10 + alchemist.cure


def test_alchemist_heal_capped_at_max(alchemist):
    alchemist.take_damage(1)
    assert alchemist.heal() == 1
    assert alchemist.hp == alchemist.max_hp


def test_alchemist_heal_never_exceeds_max(alchemist):
    for _ in range(5):
        alchemist.heal()
    assert alchemist.hp == alchemist.max_hp


def test_alchemist_views(alchemist):
    assert "HEALING: Cura 4 puntos de vida" in alchemist.describe()
    assert "2. HEAL (4)" in alchemist.turn_view(1)
    assert "HP 20/20  DAMAGE 4" in alchemist.enemy_view(2)


def test_wizard_bonus_lasts_boost_rounds(wizard):
    assert wizard.bonus() == 0
    wizard.start_boost(wizard.boost_rounds)
    bonuses = [wizard.bonus() for _ in range(wizard.boost_rounds + 1)]
    assert bonuses == [wizard.buff] * wizard.boost_rounds + [0]


def test_wizard_freeze_consumed(wizard):
    assert wizard.consume_freeze() is False
    wizard.freeze()
    results = [wizard.consume_freeze() for _ in range(wizard.freeze_turns + 1)]
    assert results == [True] * wizard.freeze_turns + [False]


def test_wizard_views_show_boosted_attack(wizard):
    assert "1. ATTACK (3)" in wizard.turn_view(1)
    wizard.start_boost(1)
    boosted = wizard.attack + wizard.buff
    assert f"1. ATTACK ({boosted})" in wizard.turn_view(1)
    assert f"DAMAGE {boosted}" in wizard.enemy_view(2)


def test_wizard_describe(wizard):
    text = wizard.describe()
    assert "Aumenta el ataque en 2 durante 2 rondas" in text
    assert "FREEZE: Cancela 2 turnos del rival" in text


def test_vampire_poison_ticks(vampire):
    assert vampire.poison_tick() == 0
    vampire.start_poison(vampire.poison_rounds)
    ticks = [vampire.poison_tick() for _ in range(vampire.poison_rounds + 1)]
    assert ticks == [vampire.venom] * vampire.poison_rounds + [0]
    assert vampire.poison_counter == 0


def test_vampire_heal_capped(vampire):
    assert vampire.heal() == 0
    vampire.take_damage(2)
    assert vampire.heal() == vampire.cure
    assert vampire.hp == vampire.max_hp - 2 + vampire.cure


def test_vampire_views(vampire):
    assert "Envenena al enemigo 3 rondas (1/ronda)" in vampire.describe()
    assert "2. POISON (1/ronda)" in vampire.turn_view(1)
    assert "HP 22/22  DAMAGE 3" in vampire.enemy_view(2)
    assert vampire.turn_view(1).endswith(" SELECT OPTION: ")