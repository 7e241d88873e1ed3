# darkdungeon

A small turn-based dungeon crawler for the terminal. The prompts are in French.
You lead a band of heroes through ten levels. Each level has a stronger enemy, from
the *Brigand* to the *Boss Final*.

## Installing

```
pip install .
```

## Playing

```
darkdungeon
```

The main menu offers three choices:

1. **Nouveau jeu**: starts a new game with Boudicca (Furie) and Junia (Vestale),
   plus two accessories, and plays it level by level.
2. **Charger une partie**: asks for a file name and loads a save file.
3. **Quitter**: quits. End of input also quits.

At each level you choose up to two fighters, or three from level 6 onward. Then the
fight begins. On its turn, each hero who is alive and not overwhelmed by stress can:

- `A`: attack the enemy,
- `D`: defend, which raises defence by 10% against the enemy's next blow,
- `R`: heal a fighter (restoration), picked by number.

The enemy then strikes one living hero at random, with either a physical blow or a
stress attack. A hero whose stress reaches 100 can no longer act. Each victory
earns 10 gold. Survivors of a victory give their accessories back to the shared
stock; the dead lose theirs. New heroes join after levels 2, 4, 6 and 8. After each
level you can save the game to a file.

## Using the library

The game logic can also be used from Python:

```python
import random

from darkdungeon.models import Character, ClassType, get_class_name
from darkdungeon.combat import calculate_damage, apply_damage
from darkdungeon.save_load import SaveFileError, save_game, load_game
from darkdungeon.game import new_game, play

hero = Character.create("Boudicca", ClassType.FURIE)
print(get_class_name(hero.char_class.type), hero.max_hp())

damage = calculate_damage(13, 3, random.Random(1))
apply_damage(hero, damage)

state = new_game()
save_game("partie.txt", state)
restored = load_game("partie.txt")

# Continue a loaded game from its saved level.
play(restored, input, print, random.Random())
```

The modules are:

- `darkdungeon.models`: `ClassType`, `CharacterClass`, `Accessory`, `Character`,
  `Enemy`, `GameState`, `class_stats` and `get_class_name`.
- `darkdungeon.combat`: damage, healing and stress rules, `perform_enemy_action`,
  `start_combat` (returns `True` on victory, `False` on defeat, `None` when the fight
  stops because every living hero is overwhelmed by stress) and `end_combat`.
- `darkdungeon.save_load`: `format_save`, `parse_save`, `save_game`, `load_game`
  and `parse_accessory_line`. Failures to read or write a file raise
  `SaveFileError`.
- `darkdungeon.game`: `new_game`, `recruit_for_level`, `max_fighters`, `play` and
  `main`.

Functions that talk to the player take an `ask` callable (prompt in, answer out)
and an `out` callable for messages, and those that roll dice take a
`random.Random`, so games can be scripted and reproduced.

## Save files

Save files are plain text, with one record per line: `LEVEL`, `GOLD`,
`AVAILABLE_CHAR` and `ACCESSORY`. Only the level, the gold, the available heroes
and the available accessories are stored. Loading puts each record at the head of
its list, so lists come back in reverse order.

## What it does not do

- The `darkdungeon` command loads a save file but does not resume it: choosing
  *Nouveau jeu* afterwards always starts a fresh game. Use `play` from Python to
  continue a loaded game.
- There is no way in the game to equip accessories on heroes, and no shop, even
  though `Accessory` has a `price` and `GameState` has a `shop_accessories` list.
- Nothing sends heroes to the sanitarium or the tavern; those lists are only
  offered for release if they already hold someone.