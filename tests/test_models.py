import pytest

from darkdungeon.models import (
    Accessory,
    Character,
    CharacterClass,
    ClassType,
    Enemy,
    GameState,
    class_stats,
    get_class_name,
)


@pytest.mark.parametrize(
    "class_type, expected",
    [
        (ClassType.FURIE, (13, 0, 20, 0)),
        (ClassType.VESTALE, (3, 0, 20, 10)),
        (ClassType.CHASSEUR_DE_PRIMES, (7, 3, 25, 3)),
        (ClassType.MAITRE_CHIEN, (10, 6, 17, 5)),
    ],
)
def test_class_stats_values(class_type, expected):
    stats = class_stats(class_type)
    assert stats.type == class_type
    assert (stats.att, stats.defense, stats.hp_max, stats.rest) == expected


def test_class_stats_accepts_int_and_returns_copy():
    first = class_stats(1)
    first.att = 999
    second = class_stats(ClassType.VESTALE)
    assert second.att == 3
    assert first is not second


def test_class_stats_rejects_unknown():
    with pytest.raises(ValueError):
        class_stats(7)


@pytest.mark.parametrize(
    "class_type, name",
    [
        (ClassType.FURIE, "Furie"),
        (ClassType.VESTALE, "Vestale"),
        (ClassType.CHASSEUR_DE_PRIMES, "Chasseur"),
        (ClassType.MAITRE_CHIEN, "M. Chien"),
        (42, "Inconnue"),
    ],
)
def test_get_class_name(class_type, name):
    assert get_class_name(class_type) == name


def test_accessory_name_is_clipped():
    acc = Accessory("x" * 80, 1, 2, 3, 4, 5)
    assert acc.name == "x" * 49


def test_accessory_describe_fields():
    acc = Accessory("Calice de jeunesse", 0, 3, 5, 0, 5)
    text = acc.describe()
    assert text.startswith("Calice de jeunesse".ljust(20))
    assert text.endswith("+0 att +3 def +5 HP +0 rest -5 str")


def test_character_create_full_health():
    hero = Character.create("Boudicca", ClassType.FURIE)
    assert hero.name == "Boudicca"
    assert hero.hp == hero.char_class.hp_max == 20
    assert hero.stress == 0
    assert hero.nbcomb == 0
    assert hero.equipped() == []
    assert hero.is_defending is False


def test_character_create_clips_name():
    hero = Character.create("n" * 60, ClassType.VESTALE)
    assert len(hero.name) == 49


def test_character_bonuses_sum_accessories():
    hero = Character.create("Junia", ClassType.VESTALE)
    first = Accessory("Pendentif tranchant", 5, 1, 0, 0, 0)
    second = Accessory("Calice de jeunesse", 0, 3, 5, 0, 5)
    hero.acc1 = first
    hero.acc2 = second
    assert hero.equipped() == [first, second]
    assert hero.attack_bonus() == 5
    assert hero.defense_bonus() == 1 + 3
    assert hero.hp_bonus() == 5
    assert hero.rest_bonus() == 0
    assert hero.stress_reduction() == 5
    assert hero.max_hp() == hero.char_class.hp_max + 5


def test_character_equipped_only_second_slot():
    hero = Character.create("William", ClassType.MAITRE_CHIEN)
    acc = Accessory("Anneau", 2, 0, 0, 0, 0)
    hero.acc2 = acc
    assert hero.equipped() == [acc]
    assert hero.attack_bonus() == 2


def test_character_describe_without_accessories():
    hero = Character.create("Tardif", ClassType.CHASSEUR_DE_PRIMES)
    text = hero.describe()
    assert "\n" not in text
    assert text.startswith("Tardif".ljust(15) + " " + "Chasseur".ljust(10))


def test_character_describe_lists_accessories():
    hero = Character.create("Dismas", ClassType.FURIE)
    hero.acc1 = Accessory("Pendentif tranchant", 5, 1, 0, 0, 0)
    hero.acc2 = Accessory("Calice de jeunesse", 0, 3, 5, 0, 5)
    lines = hero.describe().split("\n")
    assert len(lines) == 3
    assert lines[1] == "   Accessoire 1: Pendentif tranchant"
    assert lines[2] == "   Accessoire 2: Calice de jeunesse"
    assert "(+5)" in lines[0]


def test_character_identity_equality():
    first = Character.create("Same", ClassType.FURIE)
    second = Character.create("Same", ClassType.FURIE)
    roster = [first, second]
    roster.remove(second)
    assert roster == [first]
    assert roster[0] is first


def test_game_state_defaults_are_independent():
    one = GameState()
    two = GameState()
    one.available_characters.append(Character.create("A", ClassType.FURIE))
    assert two.available_characters == []
    assert one.current_level == 1
    assert one.gold == 0


def test_enemy_is_mutable():
    enemy = Enemy("Brigand", 1, 3, 3, 9, 0)
    enemy.hp -= 4
    assert enemy.hp == 5
    assert enemy.name == "Brigand"


def test_character_class_fields():
    stats = CharacterClass(ClassType.FURIE, 1, 2, 3, 4)
    hero = Character("Custom", stats, hp=2)
    assert hero.max_hp() == 3
    assert "Furie" in hero.describe()