"""Territories, dice rolls and battles between territories."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

NAME_LENGTH = 29
DIE_FACES = 6
MIN_ATTACK_TROOPS = 2


@dataclass
class Territory:
    """A territory on the map, held by an army of one color."""

    name: str
    color: str
    troops: int


class AttackError(Exception):
    """Raised when an attack is not allowed by the rules."""


@dataclass(frozen=True)
class BattleResult:
    """The dice rolled in one battle."""

    attacker_roll: int
    defender_roll: int

    @property
    def attacker_won(self) -> bool:
        return self.attacker_roll > self.defender_roll


def roll_die(rng: random.Random) -> int:
    """Roll one six-sided die."""
    return rng.randint(1, DIE_FACES)


def attack(attacker: Territory, defender: Territory, rng: random.Random) -> BattleResult:
    """Resolve an attack, updating both territories in place.

    The attacker wins only with a strictly higher roll; it then takes the
    defender's territory and moves half of its troops there. Otherwise the
    attacker loses one troop.
    """
    if attacker.color == defender.color:
        raise AttackError("Não é possível atacar um território da mesma cor!")
    if attacker.troops < MIN_ATTACK_TROOPS:
        raise AttackError("O atacante precisa ter pelo menos 2 tropas para atacar!")

    result = BattleResult(roll_die(rng), roll_die(rng))
    if result.attacker_won:
        defender.color = attacker.color
        defender.troops = attacker.troops // 2
        attacker.troops -= defender.troops
    else:
        attacker.troops -= 1
    return result


def format_detailed(territories: Iterable[Territory]) -> str:
    """Describe each territory in a block of several lines."""
    return "".join(
        f"\nTerritório {number}:\n"
        f"Nome: {territory.name}\n"
        f"Cor do exército: {territory.color}\n"
        f"Quantidade de tropas: {territory.troops}\n"
        for number, territory in enumerate(territories, start=1)
    )


def format_compact(territories: Iterable[Territory]) -> str:
    """Describe each territory on a single line."""
    return "".join(
        f"{number}. {territory.name} "
        f"(Exército: {territory.color} , Tropas: {territory.troops})\n"
        for number, territory in enumerate(territories, start=1)
    )