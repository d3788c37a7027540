# duelarena

Two turn-based duel games for two players who share one terminal.

## Installation

```
pip install .
```

## Hero duel

```
duelarena
```

Each player picks a hero by name: Guerrero, Alquimista, Mago or Vampiro. The name can be all upper case, all lower case or capitalised. An unknown name is rejected and the player is asked again.

Player 1 moves first, and the players then take turns. On each turn the player picks a numbered action. The game ends when a player's hero has zero health or less at the start of that player's turn, and the other player wins.

- **Warrior** (`Warrior`): attack; raise a shield that absorbs the next attack; or arm a rebound. Once the rebound is armed, it sends half of the attack value back to attackers.
- **Alchemist** (`Alchemist`): attack, or heal. Healing never goes past maximum health.
- **Wizard** (`Wizard`): attack; raise attack power for a number of hits; or freeze the opponent, who then loses that many turns.
- **Vampire** (`Vampire`): attack and drain health; poison the opponent over several rounds; or take the opponent's form for one turn with weaker abilities.

## Elemental duel

```
duelarena-elements
```

Each player chooses an element by letter, in either case, and then enters a name:

| Option | Element | Bonus       |
|--------|---------|-------------|
| A      | Earth   | +1 shield   |
| B      | Fire    | +10 damage  |
| C      | Water   | +50 HP      |
| D      | Wind    | +10 speed   |

Speed is rolled at random from 1 to 10 before the bonus is added. The faster fighter moves first, and player one moves first on a tie.

On each turn a fighter can:

- strike;
- use its element's special move;
- block, which adds a shield charge;
- heal by 15, up to 100 HP, or 150 HP for Water.

Each shield charge halves one hit taken. A fighter that is already at full health cannot heal, and is asked for another action. The duel ends as soon as one fighter's health reaches zero or less.

Both commands exit with status 1 if input ends or the game is interrupted.

## Using the library

The game pieces can also be used from code.

- `duelarena.heroes` holds the hero classes `Character`, `Warrior`, `Alchemist`, `Wizard` and `Vampire`. Each hero's `describe`, `turn_view` and `enemy_view` methods return its text views as strings.
- `duelarena.combat` holds `Kind` and `parse_kind`, `Side` and `Duel`. Input, output and screen clearing are passed to `Duel` as the callables `read`, `write` and `clear`, so a game can be driven from code.
- `duelarena.elements` holds `Element`, `parse_element`, `Fighter`, `create_fighter` and `health_bar`.
- `duelarena.elements_game` holds `ElementDuel`. It takes the same `read`, `write` and `clear` callables, plus an optional `random.Random` in `rng`.

```python
from duelarena.elements import Element, create_fighter, health_bar

fighter = create_fighter(Element.WATER, "Nami", 5)
print(health_bar(fighter.hp, Element.WATER))  # [##########] 150/150 HP
```

## What it does not do

Both games are for two people at one keyboard. There is no computer opponent, no play over a network and no saving of games or scores.

## Running the tests

```
pip install .[test]
pytest
```