"""Turn-based combat between the fighting party and a single enemy."""

from __future__ import annotations

import random
import re
from collections.abc import Callable, Sequence

from darkdungeon.models import Character, Enemy, GameState

Ask = Callable[[str], str]
Out = Callable[[str], None]

STRESS_LIMIT = 100
VICTORY_GOLD = 10
DEFENSE_STANCE_FACTOR = 1.1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _default_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_roll(rng: random.Random | None = None) -> float:
    """Return a random multiplier between 0.8 and 1.2 in steps of 0.01."""
    return (_default_rng(rng).randrange(41) + 80) / 100.0


def calculate_damage(attack: int, defense: int, rng: random.Random | None = None) -> int:
    """Damage dealt by ``attack`` against ``defense``; at least 1 when defense wins."""
    roll = random_roll(rng)
    base_damage = attack - defense
    if base_damage <= 0:
        return 1
    return int(base_damage * roll)


def apply_healing(target: Character | None, healing: int) -> None:
    """Heal ``target``, never above its maximum health."""
    if target is None:
        return
    target.hp = min(target.hp + healing, target.max_hp())


def apply_damage(target: Character | None, damage: int) -> None:
    """Hurt a living ``target``, never below zero health."""
    if target is None or target.hp <= 0:
        return
    target.hp = max(target.hp - damage, 0)


def apply_stress(target: Character | None, stress: int, stress_resistance: int) -> None:
    """Add stress beyond the resistance, capped at the stress limit."""
    if target is None or target.stress >= STRESS_LIMIT:
        return
    final_stress = stress - stress_resistance
    if final_stress > 0:
        target.stress = min(target.stress + final_stress, STRESS_LIMIT)


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _first_char(text: str) -> str:
    stripped = text.strip()
    return stripped[0] if stripped else ""


def select_healing_target(
    fighters: Sequence[Character],
    ask: Ask = input,
    out: Out = print,
) -> Character | None:
    """List living fighters and return the one the player picks by number.

    Numbers count every fighter, living or not. A number of 1 or less picks
    the first fighter; one past the end, or unreadable input, picks nobody.
    """
    if not fighters:
        return None

    out("Choisir la cible du soin:")
    for idx, fighter in enumerate(fighters, start=1):
        if fighter.hp > 0:
            out(f"{idx}. {fighter.name} ({fighter.hp}/{fighter.char_class.hp_max} HP)")

    choice = _parse_int(ask(""))
    if choice is None:
        return None
    index = max(choice, 1) - 1
    return fighters[index] if index < len(fighters) else None


def is_all_dead(fighters: Sequence[Character]) -> bool:
    """True when no fighter has health left."""
    return all(fighter.hp <= 0 for fighter in fighters)


def is_all_stressed(fighters: Sequence[Character]) -> bool:
    """True when no living fighter is below the stress limit."""
    return not any(f.hp > 0 and f.stress < STRESS_LIMIT for f in fighters)


def _physical_defense(target: Character) -> int:
    defense = target.char_class.defense + target.defense_bonus()
    if target.is_defending:
        defense = int(defense * DEFENSE_STANCE_FACTOR)
    return defense


def perform_enemy_action(
    enemy: Enemy,
    fighters: Sequence[Character],
    rng: random.Random | None = None,
    out: Out = print,
) -> None:
    """Let the enemy strike a random living fighter, in body or in mind."""
    living = [fighter for fighter in fighters if fighter.hp > 0]
    if not living:
        return
    rng = _default_rng(rng)

    target = living[rng.randrange(len(living))]

    if rng.randrange(2) == 0 or target.stress >= STRESS_LIMIT:
        damage = calculate_damage(enemy.attack, _physical_defense(target), rng)
        apply_damage(target, damage)
        out(f"L'ennemi attaque {target.name} pour {damage} points de degats!")
        if target.hp <= 0:
            out(f"{target.name} est mort au combat...")
    else:
        roll = random_roll(rng)
        stress_damage = int((enemy.stress_attack - target.stress_reduction()) * roll)
        apply_stress(target, stress_damage, 0)
        out(f"L'ennemi stresse {target.name} de {stress_damage} points!")
        if target.stress >= STRESS_LIMIT:
            out(f"{target.name} est submerge par le stress!")


def _hero_turn(
    hero: Character,
    state: GameState,
    enemy: Enemy,
    ask: Ask,
    out: Out,
    rng: random.Random,
) -> None:
    action = _first_char(
        ask(f"\nAction de {hero.name} (A:Attaque, D:Defense, R:Restauration): ")
    ).upper()

    if action == "A":
        attack = hero.char_class.att + hero.attack_bonus()
        damage = calculate_damage(attack, enemy.defense, rng)
        enemy.hp -= damage
        out(f"{hero.name} inflige {damage} degats a l'ennemi!")
    elif action == "D":
        hero.is_defending = True
        out(f"{hero.name} se met en position defensive.")
    elif action == "R":
        healing = hero.char_class.rest + hero.rest_bonus()
        target = select_healing_target(state.fighting_characters, ask, out)
        if target is not None:
            apply_healing(target, healing)
            out(f"{hero.name} soigne {target.name} pour {healing} points de vie.")


def start_combat(
    state: GameState,
    enemy: Enemy,
    ask: Ask = input,
    out: Out = print,
    rng: random.Random | None = None,
) -> bool | None:
    """Run a combat until the enemy or the whole party falls.

    Returns True on victory, False on defeat, and None when the fight ends
    without a result: the enemy was already down, or every living fighter
    is overwhelmed by stress so nobody can act any more.
    """
    rng = _default_rng(rng)
    fighters = state.fighting_characters

    out(f"\nCombat contre {enemy.name} (niveau {enemy.level})")
    out(f"Points de vie: {enemy.hp}")

    turn = 1
    while not is_all_dead(fighters) and enemy.hp > 0:
        out(f"\n=== Tour {turn} ===")
        for fighter in fighters:
            if fighter.hp > 0:
                out(f"{fighter.name}: {fighter.hp} HP, {fighter.stress} stress")

        for fighter in fighters:
            if fighter.hp > 0 and fighter.stress < STRESS_LIMIT:
                _hero_turn(fighter, state, enemy, ask, out, rng)

        for fighter in fighters:
            fighter.is_defending = False

        if enemy.hp <= 0:
            out("\nVictoire! L'ennemi est vaincu!")
            state.gold += VICTORY_GOLD
            end_combat(state, True)
            return True

        if is_all_stressed(fighters):
            if is_all_dead(fighters):
                break
            return None

        perform_enemy_action(enemy, fighters, rng, out)
        turn += 1

    if is_all_dead(fighters):
        out("\nDefaite! Tous vos personnages sont morts!")
        end_combat(state, False)
        return False
    return None


def end_combat(state: GameState | None, victory: bool) -> None:
    """Count the fight for survivors and settle everyone's accessories.

    The dead lose what they wore. After a victory, survivors hand their
    accessories back to the shared stock.
    """
    if state is None:
        return

    for fighter in state.fighting_characters:
        if fighter.hp > 0:
            fighter.nbcomb += 1

    for fighter in state.fighting_characters:
        if fighter.hp <= 0:
            fighter.acc1 = None
            fighter.acc2 = None
        elif victory:
            for acc in fighter.equipped():
                state.available_accessories.insert(0, acc)
            fighter.acc1 = None
            fighter.acc2 = None