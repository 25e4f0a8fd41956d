from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# Both court axes run 0..=COURT_SIZE in fixed-point units.
COURT_SIZE = 1000
MIN_PADDLE_HEIGHT = 10
PADDLE_STEP = 50
PAUSE_KEY = 'p'


class RenderSignal(Enum):
    """A fragment that is stale and must be republished.

    The value is both the Socket.IO event name and the fragment template name.
    """
    SCOREBOARD = 'scoreboard'
    PADDLE_LEFT = 'paddle_left'
    PADDLE_RIGHT = 'paddle_right'
    BALL = 'ball'


RENDER_ALL = (
    RenderSignal.PADDLE_LEFT,
    RenderSignal.PADDLE_RIGHT,
    RenderSignal.SCOREBOARD,
    RenderSignal.BALL,
)


@dataclass
class Paddle:
    up_key: str
    down_key: str
    position: int
    height: int = 200
    score: int = 0

    def move_up(self, step: int = PADDLE_STEP) -> None:
        self.position -= step
        if self.position < 0:
            self.position = 0

    def move_down(self, step: int = PADDLE_STEP) -> None:
        self.position += step
        if self.position > COURT_SIZE - self.height:
            self.position = COURT_SIZE - self.height

    def snap_toward(self, target: int) -> None:
        """Move half a paddle towards ``target`` so the center follows the pointer."""
        step = self.height // 2
        if target - step < self.position:
            self.position = max(self.position - step, 1)
        else:
            self.position = min(self.position + step, COURT_SIZE)

    def covers(self, y: int) -> bool:
        return self.position <= y < self.position + self.height

    def score_up(self) -> None:
        self.score += 1
        self.height = max(MIN_PADDLE_HEIGHT, self.height - self.height // 10)

    def to_dict(self):
        return {
            'up_key': self.up_key,
            'down_key': self.down_key,
            'position': self.position,
            'height': self.height,
            'score': self.score,
        }


@dataclass
class Ball:
    position: Tuple[int, int] = (230, 420)
    velocity: Tuple[int, int] = (15, 5)

    def to_dict(self):
        return {
            'position': list(self.position),
            'velocity': list(self.velocity),
        }


def _left_paddle():
    return Paddle(up_key='w', down_key='s', position=400)


def _right_paddle():
    return Paddle(up_key='o', down_key='l', position=200)


@dataclass
class MatchState:
    left: Paddle = field(default_factory=_left_paddle)
    right: Paddle = field(default_factory=_right_paddle)
    ball: Ball = field(default_factory=Ball)
    is_running: bool = False
    is_lost: bool = False

    @property
    def status(self) -> str:
        if self.is_lost:
            return 'lost'
        return 'running' if self.is_running else 'paused'

    def reset(self) -> None:
        """Restore the default board and clear both flags."""
        fresh = MatchState()
        self.left = fresh.left
        self.right = fresh.right
        self.ball = fresh.ball
        self.is_running = False
        self.is_lost = False

    def to_dict(self):
        return {
            'left': self.left.to_dict(),
            'right': self.right.to_dict(),
            'ball': self.ball.to_dict(),
            'is_running': self.is_running,
            'is_lost': self.is_lost,
            'status': self.status,
        }
