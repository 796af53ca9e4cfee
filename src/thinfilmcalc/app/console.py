"""
Console Presentation
====================
All reading from and writing to the terminal goes through ``Console``.

Why is this file needed?
------------------------
1. Testability: The controller never calls ``input``/``print`` directly, so a
   session can be scripted with a list of answers and a ``StringIO``.
2. Input validation: Numbers are re-prompted until they parse, so the
   workflow only ever sees valid values.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from thinfilmcalc.app.state import MENU_LABELS
from thinfilmcalc.config import MATERIAL_WIDTH, INDEX_WIDTH, MAXIMA_WIDTH, THICKNESS_WIDTH
from thinfilmcalc.exceptions import MalformedInputError
from thinfilmcalc.model.materials import Material, parse_number

logger = logging.getLogger(__name__)

YES_ANSWERS = ("y", "yes")


class Console:
    """
    Blocking line-based terminal I/O.

    ``input_func`` receives the prompt and returns the typed line, raising
    EOFError when the input is exhausted (the contract of ``input``).
    """
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    # ---- OUTPUT ----
    def write(self, text: str = "") -> None:
        print(text, file=self.output)

    def error(self, text: str) -> None:
        self.write(text)

    def show_menu(self) -> None:
        self.write()
        self.write("Please choose one of the following operations: ")
        for choice, label in MENU_LABELS.items():
            self.write(f"{choice.value}. {label}")

    def show_library(self, materials: Iterable[Material]) -> None:
        self.write()
        self.write("THIN FILM LIBRARY")
        self.write(f"{'Material':<{MATERIAL_WIDTH}}{'Index':>{INDEX_WIDTH + 4}}")
        for position, material in enumerate(materials, start=1):
            self.write(f"{position:>2} {material.library_row()}")

    def show_material(self, material: Material) -> None:
        self.write()
        self.write(f"{'Material':<{MATERIAL_WIDTH}}{'Index':>{INDEX_WIDTH}}")
        self.write(material.library_row())

    def show_measurement(self, material: Material) -> None:
        self.write()
        self.write(
            f"{'Material':<{MATERIAL_WIDTH}}"
            f"{'Index':>{INDEX_WIDTH}}"
            f"{'# of maxima':>{MAXIMA_WIDTH}}"
            f"{'Thickness (nm)':>{THICKNESS_WIDTH}}"
        )
        self.write(material.measurement_row())

    # ---- INPUT ----
    def read_line(self, prompt: str) -> str:
        """One raw line. EOFError propagates to the caller."""
        return self._input(prompt)

    def ask_text(self, prompt: str) -> str:
        """Non-blank text, surrounding whitespace removed."""
        while True:
            text = self.read_line(prompt).strip()
            if text:
                return text

    def ask_number(self, prompt: str) -> float:
        """A finite number, re-prompting on malformed input."""
        while True:
            text = self.read_line(prompt)
            try:
                return parse_number(text)
            except MalformedInputError as e:
                logger.debug(f"Rejected input for '{prompt.strip()}': {e}")
                self.error(f"{e} Please try again.")

    def ask_position(self, prompt: str) -> int:
        """A whole number, re-prompting on anything else."""
        while True:
            text = self.read_line(prompt).strip()
            try:
                return int(text)
            except ValueError:
                logger.debug(f"Rejected position '{text}'")
                self.error(f"'{text}' is not a whole number. Please try again.")

    def ask_yes_no(self, prompt: str) -> bool:
        return self.read_line(prompt).strip().lower() in YES_ANSWERS
