from jinja2 import Environment

from pong.models import MatchState, RenderSignal

TEMPLATE_DIR = 'fragments'


class FragmentRenderer:
    """Renders one HTML fragment per :class:`RenderSignal`.

    Templates are loaded when the renderer is built, so a missing or broken
    fragment template fails application start instead of a live request.
    """

    def __init__(self, env: Environment):
        self._templates = {
            signal: env.get_template(f"{TEMPLATE_DIR}/{signal.value}.html")
            for signal in RenderSignal
        }

    def render(self, signal: RenderSignal, game: MatchState, players: int = 0) -> str:
        return self._templates[signal].render(game=game, players=players)
