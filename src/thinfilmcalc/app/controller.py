"""
Workflow Controller
===================
Runs the interactive menu loop on top of a ``MaterialLibrary``.

The loop itself is driven by ``transition``; this module only performs the
effects it asks for. File errors (``FileOpenError``) are not handled here,
they are fatal and end up in ``main()``. Invalid library positions abort the
current operation and return to the menu.
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

from thinfilmcalc.app.console import Console
from thinfilmcalc.app.state import Effect, MenuChoice, WorkflowState, transition
from thinfilmcalc.exceptions import InvalidIndexError
from thinfilmcalc.model.io import IOManager
from thinfilmcalc.model.library import MaterialLibrary
from thinfilmcalc.model.materials import Material

logger = logging.getLogger(__name__)

PROMPT_CHOICE = f"Choice ({min(MenuChoice).value}-{max(MenuChoice).value}): "
PROMPT_NAME = "Enter the name of the film: "
PROMPT_INDEX = "Enter the refractive index of the film: "
PROMPT_RANGE = "Enter the spectral bandwidth over which the spectra was acquired in nm: "
PROMPT_MAXIMA = "Enter the number of maxima within the spectral range: "
PROMPT_POSITION = "Enter the number preceding the name of the thin film material: "


class WorkflowController:
    """Owns the session: the library, the results log path and the console."""

    def __init__(self, library: MaterialLibrary, results_path: str, console: Console) -> None:
        self.library = library
        self.results_path = results_path
        self.console = console
        self.state = WorkflowState.MAIN_MENU

    def run(self) -> None:
        """Menu loop until the exit choice (or the end of the input)."""
        self.console.write()
        self.console.write("Thin Film Calculator")
        self.state = WorkflowState.MAIN_MENU
        self.console.show_menu()

        while self.state is not WorkflowState.EXIT:
            try:
                raw = self.console.read_line(PROMPT_CHOICE)
            except EOFError:
                logger.info("End of input, leaving the menu.")
                raw = str(MenuChoice.EXIT.value)

            try:
                self._step(raw)
            except EOFError:
                logger.info("End of input during an operation, leaving the menu.")
                self.state = WorkflowState.MAIN_MENU
                self._step(str(MenuChoice.EXIT.value))

    def _step(self, raw: str) -> None:
        self.state, effects = transition(self.state, raw)
        self._apply(effects)

        # Finished operations fall back to the menu
        if self.state not in (WorkflowState.MAIN_MENU, WorkflowState.EXIT):
            self.state, effects = transition(self.state)
            self._apply(effects)

    def _apply(self, effects: Tuple[Effect, ...]) -> None:
        handlers = {
            Effect.SHOW_MENU: self.console.show_menu,
            Effect.CALCULATE: self.calculate_thickness,
            Effect.LIST: self.list_materials,
            Effect.ADD: self.add_material,
            Effect.DELETE: self.delete_material,
            Effect.SAY_GOODBYE: self._say_goodbye,
        }
        for effect in effects:
            logger.debug(f"Effect: {effect}")
            handlers[effect]()

    def _say_goodbye(self) -> None:
        self.console.write()
        self.console.write("Goodbye!")

    # ---- OPERATIONS ----
    def list_materials(self) -> None:
        self.console.show_library(self.library)

    def calculate_thickness(self) -> None:
        """Measures films until the user declines to enter another one."""
        repeat = True
        while repeat:
            if self.console.ask_yes_no("Read material data from library? (y/n): "):
                self._measure_library_film()
            else:
                self._measure_new_film()
            repeat = self.console.ask_yes_no("Enter another thin film? (y/n): ")

    def add_material(self) -> None:
        name = self.console.ask_text(PROMPT_NAME)
        index = self.console.ask_number(PROMPT_INDEX)
        material = Material(name, index)
        self.console.show_material(material)

        if self.console.ask_yes_no("Save material and index of this film (y/n)? "):
            self.library.add(material)
            self.console.write(f"'{material.name}' added to the library.")

    def delete_material(self) -> None:
        try:
            position = self._select_position()
        except InvalidIndexError as e:
            self._report_invalid_position(e)
            return

        removed = self.library.delete_at(self.library.index_of(position))
        self.console.write(f"'{removed.name}' deleted from the library.")

    # ---- HELPERS ----
    def _select_position(self) -> int:
        """Lists the library and reads a checked 1-based position."""
        self.list_materials()
        if len(self.library) == 0:
            raise InvalidIndexError(0, 0)
        position = self.console.ask_position(PROMPT_POSITION)
        self.library.index_of(position)
        return position

    def _report_invalid_position(self, error: InvalidIndexError) -> None:
        logger.warning(f"Invalid library position: {error}")
        self.console.error(str(error))

    def _measure_library_film(self) -> None:
        try:
            position = self._select_position()
        except InvalidIndexError as e:
            self._report_invalid_position(e)
            return

        # Work on a copy, the library entry keeps no measurement data
        film = self.library.get(position)
        film.spectral_range = self.console.ask_number(PROMPT_RANGE)
        film.fringe_count = self.console.ask_number(PROMPT_MAXIMA)
        self._show_result(film)
        self._offer_measurement_save(film)

    def _measure_new_film(self) -> None:
        film = Material(
            self.console.ask_text(PROMPT_NAME),
            self.console.ask_number(PROMPT_INDEX),
        )
        film.spectral_range = self.console.ask_number(PROMPT_RANGE)
        film.fringe_count = self.console.ask_number(PROMPT_MAXIMA)
        self._show_result(film)

        if self.console.ask_yes_no("Save material and index of this film (y/n)? "):
            self.library.add_and_save(film)
        self._offer_measurement_save(film)

    def _show_result(self, film: Material) -> None:
        self.console.show_measurement(film)
        if not film.thickness_is_defined():
            logger.warning(f"Thickness of '{film.name}' is undefined for n = {film.refractive_index}.")
            self.console.error(
                "The refractive index must be at least 1 to calculate a thickness."
            )
        else:
            logger.info(f"Thickness of '{film.name}': {film.thickness():.1f} nm")

    def _offer_measurement_save(self, film: Material) -> None:
        if not film.thickness_is_defined():
            return
        if self.console.ask_yes_no("Would you like to save this measurement result (y/n)? "):
            IOManager.append_measurement(film, self.results_path)


def process_batch(
    measurements: Iterable[Material],
    console: Console,
    results_path: str | None = None,
) -> int:
    """
    Prints a result row for every measurement record. With ``results_path``
    each defined thickness is appended to the results log. Returns the number
    of rows with a defined thickness.
    """
    defined = 0
    first = True
    for film in measurements:
        if first:
            console.show_measurement(film)
            first = False
        else:
            console.write(film.measurement_row())

        if not film.thickness_is_defined():
            logger.warning(f"Skipping '{film.name}': thickness undefined for n = {film.refractive_index}.")
            continue
        defined += 1
        if results_path is not None:
            IOManager.append_measurement(film, results_path)
    return defined
