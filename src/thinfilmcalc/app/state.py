from __future__ import annotations

from enum import Enum, IntEnum, StrEnum
from typing import Tuple


class MenuChoice(IntEnum):
    """Numbers typed at the main menu."""
    EXIT = 0
    CALCULATE = 1
    LIST = 2
    ADD = 3
    DELETE = 4


class WorkflowState(Enum):
    """The states of the interactive session."""
    MAIN_MENU = "main_menu"
    CALCULATING = "calculating"
    LISTING = "listing"
    ADDING_MATERIAL = "adding_material"
    DELETING_MATERIAL = "deleting_material"
    EXIT = "exit"


class Effect(StrEnum):
    """What the controller has to do after a transition."""
    SHOW_MENU = "show_menu"
    CALCULATE = "calculate"
    LIST = "list"
    ADD = "add"
    DELETE = "delete"
    SAY_GOODBYE = "say_goodbye"


MENU_LABELS: dict[MenuChoice, str] = {
    MenuChoice.EXIT: "Exit the program",
    MenuChoice.CALCULATE: "Calculate thickness of arbitrary film",
    MenuChoice.LIST: "List the materials in the thin film library",
    MenuChoice.ADD: "Add a new thin film to the library",
    MenuChoice.DELETE: "Delete a thin film from the library",
}

_CHOICE_TO_STATE: dict[MenuChoice, Tuple[WorkflowState, Effect]] = {
    MenuChoice.EXIT: (WorkflowState.EXIT, Effect.SAY_GOODBYE),
    MenuChoice.CALCULATE: (WorkflowState.CALCULATING, Effect.CALCULATE),
    MenuChoice.LIST: (WorkflowState.LISTING, Effect.LIST),
    MenuChoice.ADD: (WorkflowState.ADDING_MATERIAL, Effect.ADD),
    MenuChoice.DELETE: (WorkflowState.DELETING_MATERIAL, Effect.DELETE),
}


def parse_choice(raw_input: str | None) -> MenuChoice | None:
    """Menu number typed by the user, None for anything else."""
    if raw_input is None:
        return None
    try:
        return MenuChoice(int(raw_input.strip()))
    except ValueError:
        return None


def transition(state: WorkflowState, raw_input: str | None = None) -> Tuple[WorkflowState, Tuple[Effect, ...]]:
    """
    Pure state transition of the main loop.

    At MAIN_MENU the raw input selects the next state; anything that is not a
    menu number keeps MAIN_MENU and asks for the menu again. Operation states
    ignore the input and go back to MAIN_MENU once the controller has run
    them. EXIT is terminal.
    """
    if state is WorkflowState.EXIT:
        return WorkflowState.EXIT, ()

    if state is WorkflowState.MAIN_MENU:
        choice = parse_choice(raw_input)
        if choice is None:
            return WorkflowState.MAIN_MENU, (Effect.SHOW_MENU,)
        next_state, effect = _CHOICE_TO_STATE[choice]
        return next_state, (effect,)

    return WorkflowState.MAIN_MENU, (Effect.SHOW_MENU,)
