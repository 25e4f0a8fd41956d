"""Match domain services: state store, physics, simulation and rendering.

Everything in this package is transport agnostic. Socket.IO and HTTP
handlers talk to it through :class:`pong.services.match.engine.MatchEngine`.
"""
