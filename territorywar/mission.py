"""Players, their secret missions and mission checks."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from territorywar.territory import Territory

MISSIONS = (
    "Conquistar 3 territorios",
    "Destruir o exercito Verde",
    "Controlar 2 territorios Azuis",
    "Ter 20 tropas em um unico territorio",
    "Conquistar todos os territorios Pretos",
)


@dataclass
class Player:
    """A player with an army color and a drawn mission."""

    color: str
    mission: str = ""


def draw_mission(missions: Sequence[str], rng: random.Random) -> str:
    """Pick one mission at random."""
    if not missions:
        raise ValueError("no missions to draw from")
    return missions[rng.randrange(len(missions))]


def mission_accomplished(mission: str, territories: Iterable[Territory], color: str) -> bool:
    """Tell whether the player of the given color has fulfilled the mission.

    Only the "3 territorios" and "exercito Verde" missions can be completed.
    """
    territories = list(territories)
    if "3 territorios" in mission:
        if sum(territory.color == color for territory in territories) >= 3:
            return True
    if "exercito Verde" in mission:
        return not any(
            territory.color == "Verde" and territory.troops > 0 for territory in territories
        )
    return False