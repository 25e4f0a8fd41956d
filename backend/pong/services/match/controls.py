"""State transitions triggered by player input.

Each function mutates the match it is given (the caller holds the write
lock) and returns ``(signals, wake)``: the fragments to republish and whether
the simulation driver has to be woken up.
"""
from typing import List, Tuple

from pong.models import COURT_SIZE, PAUSE_KEY, MatchState, RenderSignal

Transition = Tuple[List[RenderSignal], bool]


def toggle_pause(game: MatchState) -> Transition:
    game.is_running = not game.is_running
    return [RenderSignal.SCOREBOARD], game.is_running


def press_key(game: MatchState, key: str) -> Transition:
    if key == PAUSE_KEY:
        return toggle_pause(game)
    if not game.is_running:
        return [], False

    for paddle, signal in ((game.left, RenderSignal.PADDLE_LEFT),
                           (game.right, RenderSignal.PADDLE_RIGHT)):
        if key == paddle.up_key:
            paddle.move_up()
            return [signal], False
        if key == paddle.down_key:
            paddle.move_down()
            return [signal], False
    return [], False


def click(game: MatchState, x: float, y: float) -> Transition:
    """Start the match, or pull the paddle on the clicked half towards ``y``."""
    if not game.is_running:
        game.is_running = True
        return [RenderSignal.SCOREBOARD], True

    if x < 0.5:
        paddle, signal = game.left, RenderSignal.PADDLE_LEFT
    else:
        paddle, signal = game.right, RenderSignal.PADDLE_RIGHT
    paddle.snap_toward(int(y * COURT_SIZE))
    return [signal], False
