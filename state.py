"""
State: lifecycle states of the game and the table of legal transitions.

Every lifecycle operation of the controller names itself in TRANSITIONS
together with the states it may be called from and the state it leads to.
Calling an operation from any other state is a programming error and raises
IllegalStateTransition.
"""
from enum import Enum


class State(Enum):
    INITIALIZED = "initialized"
    READY = "ready"
    PLAYING = "playing"
    GAMEOVER = "gameover"

    def __str__(self):
        return self.name


class IllegalStateTransition(RuntimeError):
    """Raised when a lifecycle operation runs in a state it does not accept."""

    def __init__(self, operation, state):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot run {operation}() in state {state}")


# operation -> (allowed source states, target state); None means "constructed"
TRANSITIONS = {
    "init_game": ((None,), State.INITIALIZED),
    "new_game": ((State.INITIALIZED, State.GAMEOVER), State.READY),
    "start_game": ((State.READY,), State.PLAYING),
    "stop_game": ((State.PLAYING,), State.GAMEOVER),
    "step_game": ((State.PLAYING,), State.PLAYING),
}


def check_transition(operation, current):
    """
    Return the state that `operation` leads to from `current`,
    or raise IllegalStateTransition if `current` is not an allowed source.
    """
    sources, target = TRANSITIONS[operation]
    if current not in sources:
        raise IllegalStateTransition(operation, current)
    return target
