import pytest

from state import IllegalStateTransition, State, TRANSITIONS, check_transition


def test_transition_table_targets():
    assert check_transition("init_game", None) == State.INITIALIZED
    assert check_transition("new_game", State.INITIALIZED) == State.READY
    assert check_transition("new_game", State.GAMEOVER) == State.READY
    assert check_transition("start_game", State.READY) == State.PLAYING
    assert check_transition("stop_game", State.PLAYING) == State.GAMEOVER
    assert check_transition("step_game", State.PLAYING) == State.PLAYING


@pytest.mark.parametrize("operation", sorted(TRANSITIONS))
def test_every_other_state_is_rejected(operation):
    sources, _ = TRANSITIONS[operation]
    for state in [None] + list(State):
        if state in sources:
            continue
        with pytest.raises(IllegalStateTransition):
            check_transition(operation, state)


def test_error_names_operation_and_state():
    with pytest.raises(IllegalStateTransition) as excinfo:
        check_transition("start_game", State.GAMEOVER)
    assert str(excinfo.value) == "Cannot run start_game() in state GAMEOVER"
    assert excinfo.value.operation == "start_game"
    assert excinfo.value.state == State.GAMEOVER


def test_unknown_operation():
    with pytest.raises(KeyError):
        check_transition("pause_game", State.PLAYING)
