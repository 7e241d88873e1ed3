"""Saving a game to a plain-text file and loading it back.

The file holds one record per line::

    LEVEL <level>
    GOLD <gold>
    AVAILABLE_CHAR <name> <class> <hp> <att> <def> <rest> <stress> <fights>
    ACCESSORY <name> <att> <def> <hp> <rest> <stress reduction>

Only the available characters and accessories are stored. Loading puts each
record at the head of its roster, so lists come back in reverse order.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from os import PathLike

from darkdungeon.models import Accessory, Character, GameState

Out = Callable[[str], None]

_INT = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\s*(\S+)")
_C_SPACE = " \t\n\v\f\r"
_NAME_STOP = "0123456789-"
_ACCESSORY_PREFIX = "ACCESSORY "


class SaveFileError(Exception):
    """A save file could not be written, read or understood."""


def _scan_ints(text: str, pos: int, count: int) -> list[int]:
    """Read up to ``count`` integers from ``text`` starting at ``pos``."""
    values: list[int] = []
    while len(values) < count:
        match = _INT.match(text, pos)
        if match is None:
            break
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def format_save(state: GameState) -> str:
    """Render the savable part of ``state`` as save-file text."""
    lines = [f"LEVEL {state.current_level}", f"GOLD {state.gold}"]
    for ch in state.available_characters:
        cls = ch.char_class
        lines.append(
            f"AVAILABLE_CHAR {ch.name} {int(cls.type)} {ch.hp} {cls.att} "
            f"{cls.defense} {cls.rest} {ch.stress} {ch.nbcomb}"
        )
    for acc in state.available_accessories:
        lines.append(
            f"ACCESSORY {acc.name} {acc.attbonus} {acc.defbonus} "
            f"{acc.hp_bonus} {acc.rest_bonus} {acc.stress_reduction}"
        )
    return "".join(line + "\n" for line in lines)


def save_game(filename: str | PathLike[str], state: GameState) -> None:
    """Write ``state`` to ``filename``; raise SaveFileError if that fails."""
    try:
        with open(filename, "w", encoding="utf-8", newline="") as handle:
            handle.write(format_save(state))
    except OSError as exc:
        raise SaveFileError(f"cannot write save file {filename}: {exc}") from exc


def parse_accessory_line(line: str) -> Accessory:
    """Build an accessory from an ``ACCESSORY`` line.

    The name runs up to the first digit or minus sign, so it may hold spaces.
    Raises SaveFileError if the five bonuses cannot be read.
    """
    rest = line[len(_ACCESSORY_PREFIX):]
    stop = next((i for i, ch in enumerate(rest) if ch in _NAME_STOP), len(rest))
    name = rest[:stop].rstrip(_C_SPACE)
    values = _scan_ints(rest, stop, 5)
    if len(values) != 5:
        raise SaveFileError(f"Erreur format accessoire: {line}")
    attbonus, defbonus, hp_bonus, rest_bonus, stress_reduction = values
    return Accessory(name, attbonus, defbonus, hp_bonus, rest_bonus, stress_reduction)


def _parse_character_line(line: str, out: Out) -> Character | None:
    prefix = "AVAILABLE_CHAR"
    if not line.startswith(prefix):
        out(f"Erreur format personnage: {line}")
        return None
    word = _WORD.match(line, len(prefix))
    values = _scan_ints(line, word.end(), 7) if word else []
    if word is None or len(values) != 7:
        out(f"Erreur format personnage: {line}")
        return None
    name = word.group(1)
    class_type, hp, att, defense, rest, stress, nbcomb = values
    try:
        character = Character.create(name, class_type)
    except ValueError:
        out(f"Erreur lors de la creation du personnage {name}")
        return None
    character.hp = hp
    character.char_class.att = att
    character.char_class.defense = defense
    character.char_class.rest = rest
    character.stress = stress
    character.nbcomb = nbcomb
    out(f"Personnage charge: {name} (classe: {class_type})")
    return character


def _parse_keyword_int(line: str, keyword: str) -> int | None:
    if not line.startswith(keyword):
        return None
    values = _scan_ints(line, len(keyword), 1)
    return values[0] if values else None


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_save(text: str, out: Out = print) -> GameState:
    """Build a game state from save-file text, reporting bad lines to ``out``."""
    state = GameState()

    for number, line in enumerate(_split_lines(text), start=1):
        tokens = line.split()
        if not tokens:
            out(f"Erreur de lecture de la ligne {number}: {line}")
            continue
        kind = tokens[0]

        if kind == "LEVEL":
            level = _parse_keyword_int(line, "LEVEL")
            if level is None:
                out("Erreur de lecture du niveau")
            else:
                state.current_level = level
        elif kind == "GOLD":
            gold = _parse_keyword_int(line, "GOLD")
            if gold is None:
                out("Erreur de lecture de l'or")
            else:
                state.gold = gold
        elif kind == "AVAILABLE_CHAR":
            character = _parse_character_line(line, out)
            if character is not None:
                state.available_characters.insert(0, character)
        elif kind == "ACCESSORY":
            try:
                accessory = parse_accessory_line(line)
            except SaveFileError as exc:
                out(str(exc))
            else:
                state.available_accessories.insert(0, accessory)

    out(f"Chargement termine. Niveau: {state.current_level}, Or: {state.gold}")
    return state


def load_game(filename: str | PathLike[str], out: Out = print) -> GameState:
    """Load a game from ``filename``; raise SaveFileError if it cannot be read."""
    try:
        with open(filename, "r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SaveFileError(f"Impossible d'ouvrir le fichier {filename}") from exc
    return parse_save(text, out)