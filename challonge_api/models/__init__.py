"""Data models for Challonge resources."""

from challonge_api.models.attachment import Attachment
from challonge_api.models.base import Resource
from challonge_api.models.match import Match
from challonge_api.models.participant import Participant
from challonge_api.models.tournament import Tournament

__all__ = ["Resource", "Tournament", "Participant", "Match", "Attachment"]
