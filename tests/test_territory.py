import random

import pytest

from territorywar.territory import (
    AttackError,
    BattleResult,
    Territory,
    attack,
    format_compact,
    format_detailed,
    roll_die,
)


class _FixedDice:
    def __init__(self, rolls):
        self._rolls = iter(rolls)

    def randint(self, low, high):
        return next(self._rolls)


def test_roll_die_stays_on_the_die():
    rng = random.Random(1234)
    rolls = {roll_die(rng) for _ in range(600)}
    assert rolls == set(range(1, 7))


def test_roll_die_uses_the_generator():
    assert roll_die(_FixedDice([4])) == 4


def test_attacker_wins_with_higher_roll():
    attacker = Territory("Brasil", "Azul", 10)
    defender = Territory("Chile", "Verde", 3)
    result = attack(attacker, defender, _FixedDice([6, 2]))
    assert result == BattleResult(6, 2)
    assert result.attacker_won
    assert defender.color == "Azul"
    assert defender.troops == 5
    assert attacker.troops + defender.troops == 10


def test_odd_troops_are_split_without_loss():
    attacker = Territory("Brasil", "Azul", 7)
    defender = Territory("Chile", "Verde", 3)
    attack(attacker, defender, _FixedDice([5, 1]))
    assert attacker.troops + defender.troops == 7
    assert defender.troops <= attacker.troops


@pytest.mark.parametrize("rolls", [[3, 3], [1, 6]])
def test_defender_holds_on_tie_or_lower(rolls):
    attacker = Territory("Brasil", "Azul", 10)
    defender = Territory("Chile", "Verde", 3)
    result = attack(attacker, defender, _FixedDice(rolls))
    assert not result.attacker_won
    assert attacker.troops == 10 - 1
    assert defender == Territory("Chile", "Verde", 3)


def test_cannot_attack_same_color():
    attacker = Territory("Brasil", "Azul", 10)
    defender = Territory("Chile", "Azul", 3)
    with pytest.raises(AttackError, match="mesma cor"):
        attack(attacker, defender, _FixedDice([]))
    assert attacker.troops == 10


def test_attacker_needs_two_troops():
    attacker = Territory("Brasil", "Azul", 1)
    defender = Territory("Chile", "Verde", 3)
    with pytest.raises(AttackError, match="pelo menos 2 tropas"):
        attack(attacker, defender, _FixedDice([]))
    assert defender.color == "Verde"


def test_format_detailed_lists_every_field():
    text = format_detailed([Territory("Brasil", "Azul", 10), Territory("Chile", "Verde", 3)])
    assert "Nome: Brasil\n" in text
    assert "Cor do exército: Verde\n" in text
    assert "Quantidade de tropas: 10\n" in text
    assert text.index("Brasil") < text.index("Chile")


def test_format_compact_line():
    text = format_compact([Territory("Brasil", "Azul", 10)])
    assert text == "1. Brasil (Exército: Azul , Tropas: 10)\n"


def test_formats_of_empty_map():
    assert format_detailed([]) == ""
    assert format_compact([]) == ""