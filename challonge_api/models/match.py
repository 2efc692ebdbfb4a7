"""Match data model."""

from datetime import datetime
from typing import List, Optional

from pydantic import JsonValue

from challonge_api.models.attachment import Attachment
from challonge_api.models.base import Resource
from challonge_api.types import Identifier, JsonObject, Method, Params


class Match(Resource):
    """
    Represents a match between two participants.

    See https://api.challonge.com/v1/documents/matches
    """

    id: Optional[int] = None
    tournament_id: Optional[Identifier] = None
    identifier: Optional[str] = None
    round: Optional[int] = None
    state: Optional[str] = None  # pending, open, complete
    group_id: JsonValue = None
    location: JsonValue = None

    player1_id: Optional[int] = None
    player1_is_prereq_match_loser: Optional[bool] = None
    player1_prereq_match_id: JsonValue = None
    player1_votes: JsonValue = None
    player2_id: Optional[int] = None
    player2_is_prereq_match_loser: Optional[bool] = None
    player2_prereq_match_id: JsonValue = None
    player2_votes: JsonValue = None
    prerequisite_match_ids_csv: Optional[str] = None

    winner_id: JsonValue = None
    loser_id: JsonValue = None
    scores_csv: Optional[str] = None

    has_attachment: Optional[bool] = None
    attachment_count: JsonValue = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    scheduled_time: Optional[datetime] = None
    underway_at: Optional[datetime] = None

    def _path(self, *segments: str) -> str:
        self._require(tournament_id=self.tournament_id, id=self.id)
        return self._json_path(
            "tournaments", self.tournament_id, "matches", self.id, *segments
        )

    async def show(self, include_attachments: bool = False) -> JsonObject:
        """
        Retrieve this match.

        Args:
            include_attachments: Include the match's attachment records
        """
        params = {"include_attachments": "1" if include_attachments else "0"}
        return await self.client.fetch_and_parse(Method.GET, self._path(), params)

    async def update(self, params: Optional[Params] = None) -> JsonObject:
        """
        Update the match, e.g. report a result.

        Args:
            params: match[scores_csv], match[winner_id], match[player1_votes], ...
        """
        return await self.client.fetch_and_parse(Method.PUT, self._path(), params)

    async def reopen(self) -> JsonObject:
        """Reopen the match and reset matches that follow it."""
        return await self.client.fetch_and_parse(Method.POST, self._path("reopen"))

    async def mark_as_underway(self) -> JsonObject:
        """Set underway_at to the current time and highlight the match in the bracket."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("mark_as_underway")
        )

    async def unmark_as_underway(self) -> JsonObject:
        """Clear underway_at and unhighlight the match in the bracket."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("unmark_as_underway")
        )

    async def get_attachments(self) -> List[Attachment]:
        """
        Retrieve the match's attachments.

        Returns:
            Attachment records scoped to this match and tournament
        """
        return await self.client.fetch_collection(
            self._path("attachments"),
            Attachment,
            tournament_id=self.tournament_id,
            match_id=self.id,
        )

    async def create_attachment(self, params: Optional[Params] = None) -> JsonObject:
        """
        Add a file, link or text attachment.

        The tournament's accept_attachments attribute must be true.

        Args:
            params: match_attachment[url], match_attachment[description], ...
        """
        return await self.client.fetch_and_parse(
            Method.POST, self._path("attachments"), params
        )
