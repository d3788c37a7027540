"""Characters of the four-class arena duel and their text views."""

from __future__ import annotations

from dataclasses import dataclass, field

_PROMPT = " SELECT OPTION: "


def _block(lines: list[str]) -> str:
    """Join lines into text, each line ending with a newline."""
    return "\n".join(lines) + "\n"


@dataclass
class Character:
    """A named fighter with current and maximum health."""

    name: str
    hp: int
    max_hp: int = field(init=False)

    def __post_init__(self) -> None:
        self.max_hp = self.hp

    def describe(self) -> str:
        return _block([f"CHARACTER: {self.name}", f"HEALTH POINTS: {self.hp}"])

    def take_damage(self, amount: int) -> None:
        self.hp -= amount

    def is_dead(self) -> bool:
        return self.hp <= 0

    def _restore(self, amount: int) -> int:
        """Heal up to ``amount`` without passing maximum health; return the gain."""
        if self.max_hp - amount >= self.hp:
            self.hp += amount
            return amount
        gained = self.max_hp - self.hp
        self.hp = self.max_hp
        return gained

    @property
    def _hp_text(self) -> str:
        return f"{self.hp}/{self.max_hp}"


@dataclass
class Warrior(Character):
    """Fighter that can raise a shield and return half of incoming damage."""

    attack: int = 0
    shield: bool = False
    rebound_ready: bool = field(default=False, init=False)

    def describe(self) -> str:
        return _block([
            "      /\\    ",
            f"      ||       CHARACTER: {self.name}",
            f"      ||       HEALTH POINTS: {self.hp}",
            f"      ||       DAMAGE: {self.attack}",
            "     (==)      SPECIAL ABILITIES",
            "      []       SHIELD: Proteje del siguiente ataque",
            "               RETURN: Devuelde el 50% de daño del siguiente ataque del enemigo",
            "",
        ])

    def turn_view(self, player: int) -> str:
        hp_line = f"  HP {self._hp_text}" + ("   SHIELD ON" if self.shield else "")
        return _block([
            f"       <<<<<PLAYER {player} TURN>>>>>",
            "             *   /\\ * ",
            "                /  \\  ",
            "              * |  |   ",
            "                |  | * ",
            "                |  |   ",
            "             *  |  |   *",
            "                |  |   ",
            "                |  | * ",
            "              {IIIIII} ",
            "                 []    ",
            "                 []    ",
            "                 <>    ",
            hp_line,
            " _______________     _______________",
            f"| 1. ATTACK ({self.attack}) |   |   2. SHIELD   |",
            " ---------------     ---------------",
            "            ____________",
            "           | 3. RETURN  |",
            "            ------------",
        ]) + _PROMPT

    def enemy_view(self, player: int) -> str:
        stats = f"         HP {self._hp_text}  DAMAGE {self.attack}"
        if self.shield:
            stats += "   SHIELD ON"
        return _block([
            f"              Player {player}",
            "                 /\\   ",
            "                 ||    ",
            "                 ||    ",
            "                 ||    ",
            "                (==)   ",
            "                 []    ",
            stats,
            "",
            "                VS.  ",
            "",
        ])

    def rebound(self, damage: int) -> int:
        """Damage sent back to an attacker: half of ``damage`` once armed."""
        return int(damage / 2) if self.rebound_ready else 0


@dataclass
class Alchemist(Character):
    """Fighter that can heal itself."""

    attack: int = 0
    cure: int = 0

    def describe(self) -> str:
        return _block([
            "     ::::   ",
            f"      ||       CHARACTER: {self.name}",
            f"     /  \\      HEALTH POINTS: {self.hp}",
            f"    /____\\     DAMAGE: {self.attack}",
            "   |      |    SPECIAL ABILITIES",
            f"    \\____/     HEALING: Cura {self.cure} puntos de vida",
            "",
        ])

    def turn_view(self, player: int) -> str:
        return _block([
            f"       <<<<<PLAYER {player} TURN>>>>>",
            "              ::::::::     ",
            "              ::::::::     ",
            "                ||||       ",
            "              //    \\\\    ",
            "             //      \\\\   ",
            "            //        \\\\  ",
            "           //          \\\\ ",
            "          ||\\/\\/\\/\\/\\/\\/|| ",
            "          || o     o    ||  ",
            "          ||   o      o ||  ",
            "           \\\\__________//  ",
            "             ==========     ",
            f"  HP {self._hp_text}",
            " _______________     _________________",
            f"| 1. ATTACK ({self.attack}) |   |   2. HEAL ({self.cure})   |",
            " ---------------     -----------------",
            "",
        ]) + _PROMPT

    def enemy_view(self, player: int) -> str:
        return _block([
            f"              Player {player}",
            "                ::::      ",
            "                 ||       ",
            "                /  \\     ",
            "               /____\\    ",
            "              |      |    ",
            "               \\____/    ",
            f"         HP {self._hp_text}  DAMAGE {self.attack}",
            "",
            "                 VS.  ",
            "",
        ])

    def heal(self) -> int:
        """Restore up to ``cure`` health, capped at the maximum; return the gain."""
        return self._restore(self.cure)


@dataclass
class Wizard(Character):
    """Fighter that can boost its attack for some rounds and freeze the rival."""

    attack: int = 0
    buff: int = 0
    boost_rounds: int = 0
    freeze_turns: int = 0
    boost: int = field(default=0, init=False)
    frozen: int = field(default=0, init=False)

    @property
    def _shown_attack(self) -> int:
        return self.attack + self.buff if self.boost > 0 else self.attack

    def describe(self) -> str:
        return _block([
            f"     |\\        CHARACTER: {self.name}",
            f"     | \\       HEALTH POINTS: {self.hp}",
            f"     |  \\      DAMAGE: {self.attack}",
            "     /___\\     SPECIAL ABILITIES",
            f"    /__W__|    DAMAGE INCREASE: Aumenta el ataque en {self.buff}"
            f" durante {self.boost_rounds} rondas",
            f"   =========   FREEZE: Cancela {self.freeze_turns} turnos del rival",
            "",
        ])

    def turn_view(self, player: int) -> str:
        return _block([
            f"     <<<<<PLAYER {player} TURN>>>>>",
            "           _____                 ",
            "           \\\\   \\\\__             ",
            "             \\\\  _  \\\\           ",
            "              ||  __   \\\\         ",
            "              ||        \\\\       ",
            "              ||      __ ||      ",
            "              // __       \\\\     ",
            "             //____________\\\\    ",
            "            //    WIZARD    ||   ",
            "           //_______________||   ",
            "          //                ||   ",
            "       IIIIIIIIIIIIIIIIIIIIIIIII ",
            f"  HP {self._hp_text}",
            " _______________     _________________",
            f"| 1. ATTACK ({self._shown_attack}) |   | 2. INCREASE ({self.buff}) |",
            " ---------------     -----------------",
            "        _____________________",
            f"       | 3. FREEZE ({self.freeze_turns} turns) |",
            "        ---------------------",
            "",
        ]) + _PROMPT

    def enemy_view(self, player: int) -> str:
        return _block([
            f"                Player {player}",
            "                  |\\     ",
            "                  | \\       ",
            "                  |  \\      ",
            "                  /___\\     ",
            "                 /__W__|    ",
            "                =========  ",
            f"           HP {self._hp_text}  DAMAGE {self._shown_attack}",
            "",
            "                VS.  ",
            "",
        ])

    def bonus(self) -> int:
        """Extra attack for this hit; uses up one boosted round."""
        if self.boost > 0:
            self.boost -= 1
            return self.buff
        return 0

    def start_boost(self, rounds: int) -> None:
        self.boost = rounds

    def freeze(self) -> None:
        """Freeze the rival for the full number of turns."""
        self.frozen = self.freeze_turns

    def consume_freeze(self) -> bool:
        """Report whether the rival loses this turn, using up one frozen turn."""
        if self.frozen > 0:
            self.frozen -= 1
            return True
        return False


@dataclass
class Vampire(Character):
    """Fighter that drains health on hit and can poison the rival."""

    attack: int = 0
    cure: int = 0
    venom: int = 0
    poison_rounds: int = 0
    poison_counter: int = field(default=0, init=False)

    def describe(self) -> str:
        return _block([
            f"     (\\_/)     CHARACTER: {self.name}",
            f" ____( oo)____ HEALTH POINTS: {self.hp}",
            f" \\   |   |   / DAMAGE: {self.attack}",
            "  \\/\\|   |/\\/  SPECIAL ABILITIES",
            f"      \\_/      DAMAGE HEALS: Roba {self.cure} punto de vida cada vez que ataca",
            f"               POISON: Envenena al enemigo {self.poison_rounds} rondas"
            f" ({self.venom}/ronda)",
            "               CHAMALEON: Imita al enemigo y obtiene algunas de sus"
            " habilidades reducidas por 1 turno",
        ])

    def turn_view(self, player: int) -> str:
        return _block([
            f"        <<<<<PLAYER {player} TURN>>>>>",
            "        /\\                      /\\",
            "      _/  \\      /\\    /\\      /  \\_ ",
            "     /     \\    //\\\\__//\\\\    /     \\ ",
            "   _/       \\__|          |__/       \\_ ",
            "  /              ( O) ( O)             \\",
            " /         \\   |     vv   |   /         \\",
            "|      \\    \\__|          |__/   /       |",
            "|       \\ ___\\  \\        /  /__ /        | ",
            " \\   \\ ___\\      \\______/      /___/    /  ",
            "  \\  /              \\/              \\  /",
            "   \\/                                \\/ ",
            f"  HP {self._hp_text}",
            " _______________     _____________________",
            f"| 1. ATTACK ({self.attack}) |   | 2. POISON ({self.venom}/ronda) |",
            " ---------------     ---------------------",
            "            _______________",
            "           |  3.CHAMALEON  |",
            "            ---------------",
            "",
        ]) + _PROMPT

    def enemy_view(self, player: int) -> str:
        return _block([
            f"                  Player {player}",
            "                   (\\_/)     ",
            "               ____( oo)____ ",
            "               \\   |   |   / ",
            "                \\/\\|   |/\\/  ",
            "                    \\_/     ",
            f"            HP {self._hp_text}  DAMAGE {self.attack}",
            "",
            "                      VS.  ",
            "",
        ])

    def heal(self) -> int:
        """Restore up to ``cure`` health, capped at the maximum; return the gain."""
        return self._restore(self.cure)

    def start_poison(self, rounds: int) -> None:
        self.poison_counter = rounds

    def poison_tick(self) -> int:
        """Poison damage for this round; uses up one poisoned round."""
        if self.poison_counter > 0:
            self.poison_counter -= 1
            return self.venom
        return 0