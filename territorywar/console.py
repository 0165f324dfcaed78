"""Line-oriented terminal input and output for the games."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from territorywar.territory import NAME_LENGTH, Territory


class Console:
    """Prompts on one text stream and reads answers from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _next_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and return the next line without its newline."""
        self.write(prompt)
        return self._next_line().rstrip("\n")

    def read_int(self, prompt: str = "") -> int:
        """Read an integer, asking again until one is given."""
        while True:
            text = self.read_line(prompt).strip()
            try:
                return int(text)
            except ValueError:
                self.write("Entrada inválida! Digite um número inteiro.\n")

    def read_char(self, prompt: str = "") -> str:
        """Return the first non-blank character typed."""
        self.write(prompt)
        while True:
            stripped = self._next_line().strip()
            if stripped:
                return stripped[0]

    def choose_color(self, colors: Sequence[str]) -> str:
        """Offer a numbered list of colors and return the one picked."""
        colors = list(colors)
        if not colors:
            raise ValueError("no colors to choose from")
        self.write("Escolha a cor do exército:\n")
        for number, color in enumerate(colors, start=1):
            self.write(f"  {number} - {color}\n")
        while True:
            choice = self.read_int(f"Digite o número correspondente (1-{len(colors)}): ")
            if 1 <= choice <= len(colors):
                return colors[choice - 1]
            self.write("Opção inválida! Tente novamente.\n")

    def register_territories(self, count: int, colors: Sequence[str]) -> list[Territory]:
        """Ask for the name, color and troops of each territory."""
        territories = []
        for number in range(1, count + 1):
            self.write(f"\n--- Território {number} ---\n")
            name = self.read_line("Digite o nome do território: ")[:NAME_LENGTH]
            color = self.choose_color(colors)
            troops = self.read_int("Digite a quantidade de tropas: ")
            territories.append(Territory(name, color, troops))
        return territories