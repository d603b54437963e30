"""Session counters — immutable transitions."""

from __future__ import annotations

import pytest

from slidingcore.engine.gamestate import GameState


def test_fresh_state() -> None:
    state = GameState()
    assert (state.moves, state.elapsed, state.running, state.won) == (0, 0, True, False)


def test_tick_only_while_running() -> None:
    state = GameState().tick().tick()
    assert state.elapsed == 2

    stopped = GameState(elapsed=2, running=False)
    assert stopped.tick(5) is stopped


def test_won_state_is_frozen_in_time() -> None:
    state = GameState(moves=3, elapsed=40).mark_won()
    assert state.won and not state.running
    assert state.tick().elapsed == 40


def test_record_move_starts_clock() -> None:
    state = GameState(running=False).record_move()
    assert state.moves == 1
    assert state.running


def test_restart_clock_clears_counters() -> None:
    state = GameState(moves=9, elapsed=61, running=False)
    assert state.restart_clock() == GameState()


def test_restart_clock_keeps_a_win() -> None:
    state = GameState(moves=9, elapsed=61).mark_won()
    assert state.restart_clock() is state
    assert state.won and not state.running


def test_transitions_do_not_mutate() -> None:
    state = GameState()
    state.tick()
    state.record_move()
    assert state == GameState()
    with pytest.raises(AttributeError):
        state.moves = 4  # type: ignore[misc]
