"""Key bindings and the two-state loop of the watchlist TUI."""

from enum import StrEnum


class LoopState(StrEnum):
    RUNNING = "RUNNING"
    QUITTING = "QUITTING"


class Action(StrEnum):
    QUIT = "QUIT"
    TOGGLE = "TOGGLE"
    NEXT = "NEXT"
    PREVIOUS = "PREVIOUS"
    NONE = "NONE"


KEY_ACTIONS: dict[str, Action] = {
    "q": Action.QUIT,
    "space": Action.TOGGLE,
    "down": Action.NEXT,
    "j": Action.NEXT,
    "up": Action.PREVIOUS,
    "k": Action.PREVIOUS,
}


def action_for_key(key: str) -> Action:
    return KEY_ACTIONS.get(key, Action.NONE)


def next_state(state: LoopState, action: Action) -> LoopState:
    if state is LoopState.QUITTING or action is Action.QUIT:
        return LoopState.QUITTING
    return LoopState.RUNNING
