"""
Async client for the Challonge tournament API.

Usage:
    from challonge_api import ChallongeClient

    async with ChallongeClient("username", "api-key") as client:
        tournament = client.tournament("my_bracket")
        await tournament.start()
        for match in await tournament.get_matches({"state": "open"}):
            await match.mark_as_underway()
"""

from .clients import ChallongeClient
from .exceptions import (
    ChallongeError,
    ConfigurationError,
    PreconditionError,
    TransportError,
    HTTPError,
    ParseError,
)
from .models import Tournament, Participant, Match, Attachment
from .types import Method

__all__ = [
    'ChallongeClient',
    'ChallongeError',
    'ConfigurationError',
    'PreconditionError',
    'TransportError',
    'HTTPError',
    'ParseError',
    'Tournament',
    'Participant',
    'Match',
    'Attachment',
    'Method',
]
