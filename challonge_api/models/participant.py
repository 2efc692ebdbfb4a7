"""Participant data model."""

from datetime import datetime
from typing import Optional

from pydantic import JsonValue

from challonge_api.models.base import Resource
from challonge_api.types import Identifier, JsonObject, Method, Params


class Participant(Resource):
    """
    Represents a tournament participant.

    See https://api.challonge.com/v1/documents/participants
    """

    id: Optional[int] = None
    tournament_id: Optional[Identifier] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    display_name_with_invitation_email_address: Optional[str] = None
    username: Optional[str] = None
    seed: Optional[int] = None
    ordinal_seed: JsonValue = None
    final_rank: Optional[int] = None
    misc: Optional[str] = None
    icon: Optional[str] = None
    email_hash: Optional[str] = None
    invite_email: Optional[str] = None
    attached_participatable_portrait_url: Optional[str] = None

    challonge_username: Optional[str] = None
    challonge_user_id: Optional[int] = None
    challonge_email_address_verified: Optional[bool] = None
    invitation_id: Optional[int] = None
    ranked_member_id: JsonValue = None
    group_id: JsonValue = None
    group_player_ids: JsonValue = None
    custom_field_response: JsonValue = None
    clinch: JsonValue = None
    integration_uids: JsonValue = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None

    active: Optional[bool] = None
    on_waiting_list: Optional[bool] = None
    can_check_in: Optional[bool] = None
    checked_in: Optional[bool] = None
    check_in_open: Optional[bool] = None
    reactivatable: Optional[bool] = None
    removable: Optional[bool] = None
    confirm_remove: Optional[bool] = None
    invitation_pending: Optional[bool] = None
    participatable_or_invitation_attached: Optional[bool] = None
    has_irrelevant_seed: Optional[bool] = None

    def _path(self, *segments: str) -> str:
        self._require(tournament_id=self.tournament_id, id=self.id)
        return self._json_path(
            "tournaments", self.tournament_id, "participants", self.id, *segments
        )

    async def show(self, include_matches: bool = False) -> JsonObject:
        """
        Retrieve this participant.

        Args:
            include_matches: Include the participant's match records
        """
        params = {"include_matches": "1" if include_matches else "0"}
        return await self.client.fetch_and_parse(Method.GET, self._path(), params)

    async def update(self, params: Optional[Params] = None) -> JsonObject:
        return await self.client.fetch_and_parse(Method.PUT, self._path(), params)

    async def check_in(self) -> JsonObject:
        """Check the participant in, setting checked_in_at to the current time."""
        return await self.client.fetch_and_parse(Method.POST, self._path("check_in"))

    async def undo_check_in(self) -> JsonObject:
        """Mark the participant as not checked in."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("undo_check_in")
        )

    async def destroy(self) -> JsonObject:
        """
        Remove the participant.

        Before the tournament starts the seed is refilled; once underway the
        participant is marked inactive and forfeits remaining matches.
        """
        return await self.client.fetch_and_parse(Method.DELETE, self._path())
