"""The three game modes: registration only, battles, and missions."""

from __future__ import annotations

import random

from territorywar.console import Console
from territorywar.mission import MISSIONS, Player, draw_mission, mission_accomplished
from territorywar.territory import (
    AttackError,
    Territory,
    attack,
    format_compact,
    format_detailed,
)

COLORS = ("Verde", "Azul", "Amarelo", "Preto", "Roxo")
MASTER_COLORS = COLORS + ("Branco",)
PLAYER_COLORS = ("Azul", "Vermelho")
BEGINNER_COUNT = 5


def _show_detailed(console: Console, territories: list[Territory]) -> None:
    console.write("\n=== Lista de Territórios ===\n")
    console.write(format_detailed(territories))


def _show_compact(console: Console, territories: list[Territory]) -> None:
    console.write("\n=== Lista de Territórios ===\n")
    console.write(format_compact(territories))


def _read_count(console: Console) -> int:
    count = console.read_int("Digite o número de territórios a cadastrar: ")
    if count < 1:
        raise ValueError("o número de territórios deve ser positivo")
    return count


def _pick_pair(console: Console, territories: list[Territory]):
    total = len(territories)
    attacker = console.read_int(f"Escolha o território atacante (1-{total}): ")
    defender = console.read_int(f"Escolha o território defensor (1-{total}): ")
    if not (1 <= attacker <= total and 1 <= defender <= total):
        console.write("Índices inválidos!\n")
        return None
    return territories[attacker - 1], territories[defender - 1]


def _battle(console: Console, attacker: Territory, defender: Territory, rng) -> None:
    try:
        result = attack(attacker, defender, rng)
    except AttackError as error:
        console.write(f"{error}\n")
        return
    console.write(
        f"\n=== Batalha entre {attacker.name} (atacante) e {defender.name} (defensor) ===\n"
    )
    console.write(f"{attacker.name} rolou: {result.attacker_roll}\n")
    console.write(f"{defender.name} rolou: {result.defender_roll}\n")
    if result.attacker_won:
        console.write(">> O atacante venceu a batalha!\n")
    else:
        console.write(">> O defensor resistiu! O atacante perde 1 tropa.\n")


def run_beginner(console: Console) -> list[Territory]:
    """Register five territories and list them."""
    console.write("=== Cadastro de Territorios ===\n")
    territories = console.register_territories(BEGINNER_COUNT, COLORS)
    console.write("\n=== Lista de Territorios Cadastrados ===\n")
    console.write(format_detailed(territories))
    return territories


def run_adventurer(console: Console, rng: random.Random) -> list[Territory]:
    """Register territories, then play attacks until the user stops."""
    count = _read_count(console)
    territories = console.register_territories(count, COLORS)
    _show_detailed(console, territories)
    while True:
        pair = _pick_pair(console, territories)
        if pair is not None:
            _battle(console, *pair, rng)
            _show_detailed(console, territories)
        answer = console.read_char("\nDeseja realizar outro ataque? (s/n): ")
        if answer not in ("s", "S"):
            return territories


def run_master(console: Console, rng: random.Random) -> int | None:
    """Play a two-player game with secret missions.

    Returns the number of the winning player, or None if the game was quit.
    """
    count = _read_count(console)
    territories = console.register_territories(count, MASTER_COLORS)
    _show_compact(console, territories)

    players = []
    for number, color in enumerate(PLAYER_COLORS, start=1):
        player = Player(color, draw_mission(MISSIONS, rng))
        players.append(player)
        console.write(f"\n--- SUA MISSAO (Jogador {number} - Exército {player.color}) ---\n")
        console.write(f"{player.mission}\n")

    turn = 0
    winner = None
    while True:
        player = players[turn]
        console.write(
            f"\n--- MENU DE ACOES (Jogador {turn + 1} - Exército {player.color}) ---\n"
            "1 - Atacar\n"
            "2 - Verificar Missao\n"
            "0 - Sair\n"
        )
        option = console.read_int("Escolha: ")

        if option == 1:
            _show_compact(console, territories)
            pair = _pick_pair(console, territories)
            if pair is not None:
                _battle(console, *pair, rng)
                _show_compact(console, territories)
                if mission_accomplished(player.mission, territories, player.color):
                    winner = turn + 1
        elif option == 2:
            if mission_accomplished(player.mission, territories, player.color):
                console.write(f"\nParabéns Jogador {turn + 1}! Você cumpriu sua missão!\n")
                winner = turn + 1
            else:
                console.write("\nMissão ainda não cumprida.\n")
        elif option == 0:
            console.write("\nJogo encerrado.\n")
            return None
        else:
            console.write("Opção inválida!\n")

        if winner is not None:
            console.write(f"\n=== O Jogador {winner} venceu cumprindo sua missão! ===\n")
            return winner

        turn = (turn + 1) % len(players)