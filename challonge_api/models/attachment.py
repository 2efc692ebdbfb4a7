"""Match attachment data model."""

from datetime import datetime
from typing import Optional

from pydantic import JsonValue

from challonge_api.models.base import Resource
from challonge_api.types import Identifier, JsonObject, Method, Params


class Attachment(Resource):
    """Represents a file, link or text attached to a match."""

    id: Optional[int] = None
    match_id: Optional[int] = None
    tournament_id: Optional[Identifier] = None
    user_id: Optional[int] = None
    description: Optional[str] = None
    url: Optional[str] = None
    original_file_name: Optional[str] = None
    asset_file_name: Optional[str] = None
    asset_content_type: Optional[str] = None
    asset_file_size: JsonValue = None
    asset_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def _path(self) -> str:
        self._require(
            tournament_id=self.tournament_id, match_id=self.match_id, id=self.id
        )
        return self._json_path(
            "tournaments", self.tournament_id,
            "matches", self.match_id,
            "attachments", self.id,
        )

    async def show(self) -> JsonObject:
        return await self.client.fetch_and_parse(Method.GET, self._path())

    async def update(self, params: Optional[Params] = None) -> JsonObject:
        """Update the attachment (match_attachment[...] keys)."""
        return await self.client.fetch_and_parse(Method.PUT, self._path(), params)

    async def destroy(self) -> JsonObject:
        return await self.client.fetch_and_parse(Method.DELETE, self._path())
