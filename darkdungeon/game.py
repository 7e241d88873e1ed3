"""The dungeon campaign: menu, level loop, party management and recruits."""

from __future__ import annotations

import random
import re
from collections.abc import Callable
from dataclasses import replace

from darkdungeon.combat import start_combat
from darkdungeon.models import Accessory, Character, ClassType, Enemy, GameState
from darkdungeon.save_load import SaveFileError, load_game, save_game

Ask = Callable[[str], str]
Out = Callable[[str], None]

FINAL_LEVEL = 10
SAVE_PROMPT = "Nom du fichier de sauvegarde: "

ENEMIES: tuple[Enemy, ...] = (
    Enemy("Brigand", 1, 3, 3, 9, 0),
    Enemy("Squelette", 2, 6, 4, 13, 10),
    Enemy("Goule", 3, 8, 8, 16, 20),
    Enemy("Gargouille", 4, 10, 10, 20, 25),
    Enemy("Cultiste", 5, 12, 12, 25, 30),
    Enemy("Bandit", 6, 15, 15, 30, 35),
    Enemy("Necromancien", 7, 18, 18, 35, 40),
    Enemy("Sorcier", 8, 20, 20, 40, 45),
    Enemy("Dragon", 9, 25, 25, 50, 50),
    Enemy("Boss Final", 10, 30, 30, 60, 60),
)

_RECRUITS: dict[int, tuple[str, ClassType]] = {
    2: ("William", ClassType.MAITRE_CHIEN),
    4: ("Tardif", ClassType.CHASSEUR_DE_PRIMES),
    6: ("Alhazred", ClassType.VESTALE),
    8: ("Dismas", ClassType.FURIE),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _says_yes(answer: str) -> bool:
    stripped = answer.strip()
    return bool(stripped) and stripped[0] in "Oo"


def new_game() -> GameState:
    """Start a fresh game with the two founding heroes and two accessories."""
    state = GameState(current_level=1, gold=0)
    for name, class_type in (("Boudicca", ClassType.FURIE), ("Junia", ClassType.VESTALE)):
        state.available_characters.insert(0, Character.create(name, class_type))
    for accessory in (
        Accessory("Pendentif tranchant", 5, 1, 0, 0, 0),
        Accessory("Calice de jeunesse", 0, 3, 5, 0, 5),
    ):
        state.available_accessories.insert(0, accessory)
    return state


def recruit_for_level(level: int) -> Character | None:
    """The hero who joins after clearing ``level``, if any."""
    recruit = _RECRUITS.get(level)
    if recruit is None:
        return None
    name, class_type = recruit
    return Character.create(name, class_type)


def max_fighters(level: int) -> int:
    """How many heroes may fight at ``level``."""
    return 2 if level <= 5 else 3


def _release_from(roster: list[Character], place: str, state: GameState, ask: Ask, out: Out) -> None:
    for character in list(roster):
        out(character.describe())
        if _says_yes(ask(f"Faire sortir {character.name} {place}? (O/N): ")):
            roster.remove(character)
            state.available_characters.insert(0, character)


def _select_fighters(state: GameState, ask: Ask, out: Out) -> None:
    out("\n=== Selection des combattants ===")
    for idx, character in enumerate(state.available_characters, start=1):
        out(f"{idx}. {character.describe()}")

    state.fighting_characters = []
    for slot in range(1, max_fighters(state.current_level) + 1):
        choice = _parse_int(ask(f"Choisir combattant {slot} (0 pour terminer): "))
        if choice == 0:
            break
        if choice is None:
            continue
        index = max(choice, 1) - 1
        if index < len(state.available_characters):
            fighter = state.available_characters.pop(index)
            state.fighting_characters.insert(0, fighter)


def _offer_save(state: GameState, ask: Ask, out: Out) -> None:
    if not _says_yes(ask("\nSauvegarder la partie? (O/N): ")):
        return
    words = ask(SAVE_PROMPT).split()
    if not words:
        out("Erreur lors de la sauvegarde.")
        return
    try:
        save_game(words[0], state)
    except SaveFileError:
        out("Erreur lors de la sauvegarde.")
    else:
        out("Partie sauvegardee avec succes!")


def play(
    state: GameState,
    ask: Ask = input,
    out: Out = print,
    rng: random.Random | None = None,
) -> bool:
    """Run the campaign from the state's current level.

    Returns True once the last level is behind, False when a level is
    entered with nobody fighting.
    """
    rng = rng if rng is not None else random.Random()

    while state.current_level <= FINAL_LEVEL:
        out(f"\n=== Niveau {state.current_level} ===")
        out(f"Or: {state.gold}\n")

        out("=== Sanitarium ===")
        _release_from(state.sanitarium_characters, "du sanitarium", state, ask, out)
        out("\n=== Taverne ===")
        _release_from(state.tavern_characters, "de la taverne", state, ask, out)

        _select_fighters(state, ask, out)

        enemy = replace(ENEMIES[state.current_level - 1])
        start_combat(state, enemy, ask, out, rng)

        if not state.fighting_characters:
            out("Game Over!")
            return False

        for fighter in state.fighting_characters:
            state.available_characters.insert(0, fighter)
        state.fighting_characters = []

        if state.current_level % 2 == 0 and state.current_level < 9:
            out("\nUn nouveau heros rejoint votre equipe!")
            recruit = recruit_for_level(state.current_level)
            if recruit is not None:
                state.available_characters.insert(0, recruit)
                out(recruit.describe())

        state.current_level += 1
        _offer_save(state, ask, out)

    return True


def main(argv: list[str] | None = None) -> int:
    """Show the main menu until the player quits."""
    rng = random.Random()
    state = new_game()
    try:
        while True:
            print("\n=== Darkest C Dungeon ===")
            print("1. Nouveau jeu")
            print("2. Charger une partie")
            print("3. Quitter")
            choice = _parse_int(input("Choix : "))

            if choice == 1:
                state = new_game()
                play(state, input, print, rng)
            elif choice == 2:
                words = input(SAVE_PROMPT).split()
                try:
                    if not words:
                        raise SaveFileError("Impossible d'ouvrir le fichier")
                    state = load_game(words[0], print)
                except SaveFileError as exc:
                    print(exc)
                    print("Erreur lors du chargement.")
            elif choice == 3:
                print("Au revoir!")
                return 0
            else:
                print("Choix invalide.")
    except EOFError:
        return 0