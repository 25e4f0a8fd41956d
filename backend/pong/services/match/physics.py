from typing import List, Tuple

from pong.models import COURT_SIZE, MatchState, Paddle, RenderSignal

LEFT_WALL = 10
RIGHT_WALL = COURT_SIZE - 10
TOP_WALL = 0
BOTTOM_WALL = COURT_SIZE - 10


def advance(game: MatchState) -> List[RenderSignal]:
    """Advance the ball by one tick and return the fragments that went stale.

    Mutates ``game`` in place. Horizontal and vertical collisions are resolved
    independently, so one tick can both bounce off the top and score.
    ``BALL`` is always the last signal.
    """
    signals: List[RenderSignal] = []
    x, y = game.ball.position
    vx, vy = game.ball.velocity
    x += vx
    y += vy

    if x <= LEFT_WALL:
        defended, hit = _wall_hit(game, game.left, y, RenderSignal.PADDLE_LEFT)
        signals.extend(hit)
        if defended:
            x = LEFT_WALL
            vx = -vx
    elif x >= RIGHT_WALL:
        defended, hit = _wall_hit(game, game.right, y, RenderSignal.PADDLE_RIGHT)
        signals.extend(hit)
        if defended:
            x = RIGHT_WALL
            vx = -vx

    if y <= TOP_WALL:
        y = TOP_WALL
        vy = -vy
        signals.append(RenderSignal.SCOREBOARD)
    elif y >= BOTTOM_WALL:
        y = BOTTOM_WALL
        vy = -vy
        signals.append(RenderSignal.SCOREBOARD)

    game.ball.position = (x, y)
    game.ball.velocity = (vx, vy)
    signals.append(RenderSignal.BALL)
    return signals


def _wall_hit(game: MatchState, paddle: Paddle, y: int,
              paddle_signal: RenderSignal) -> Tuple[bool, List[RenderSignal]]:
    """Score the defending paddle or lose the match; returns (defended, signals)."""
    if paddle.covers(y):
        paddle.score_up()
        return True, [paddle_signal, RenderSignal.SCOREBOARD]
    # Miss: freeze the board; the driver resets it on its next wake.
    game.is_lost = True
    return False, [
        RenderSignal.PADDLE_LEFT,
        RenderSignal.PADDLE_RIGHT,
        RenderSignal.SCOREBOARD,
    ]
