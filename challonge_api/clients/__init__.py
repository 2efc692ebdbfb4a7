"""API clients for the Challonge service."""

from challonge_api.clients.challonge import ChallongeClient

__all__ = ["ChallongeClient"]
