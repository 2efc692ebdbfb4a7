"""Tournament data model."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import JsonValue

from challonge_api.exceptions import PreconditionError
from challonge_api.models.base import Resource
from challonge_api.models.match import Match
from challonge_api.models.participant import Participant
from challonge_api.types import Identifier, JsonObject, Method, Params

TOURNAMENTS_PATH = "tournaments"

# Parameters the API needs to create a tournament
REQUIRED_CREATE_PARAMS = ("tournament[name]", "tournament[url]")


class Tournament(Resource):
    """
    Represents a Challonge tournament.

    Besides records returned by ChallongeClient.get_tournaments(), a bare
    handle can be obtained with ChallongeClient.tournament(id) to run
    operations on a tournament without fetching it first. Every operation
    except create() needs the id (numeric id or URL slug).

    See https://api.challonge.com/v1/documents/tournaments
    """

    id: Optional[Identifier] = None
    name: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    description_source: Optional[str] = None
    tournament_type: Optional[str] = None
    state: Optional[str] = None  # pending, underway, awaiting_review, complete
    subdomain: Optional[str] = None
    full_challonge_url: Optional[str] = None
    live_image_url: Optional[str] = None
    sign_up_url: Optional[str] = None
    game_id: Optional[int] = None
    game_name: Optional[str] = None
    category: JsonValue = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    start_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    started_checking_in_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    predictions_opened_at: Optional[datetime] = None
    check_in_duration: JsonValue = None

    participants_count: Optional[int] = None
    signup_cap: JsonValue = None
    progress_meter: Optional[int] = None
    swiss_rounds: Optional[int] = None
    max_predictions_per_user: Optional[int] = None
    prediction_method: Optional[int] = None
    ranked_by: Optional[str] = None
    tie_breaks: Optional[List[str]] = None

    pts_for_bye: Optional[Decimal] = None
    pts_for_game_tie: Optional[Decimal] = None
    pts_for_game_win: Optional[Decimal] = None
    pts_for_match_tie: Optional[Decimal] = None
    pts_for_match_win: Optional[Decimal] = None
    rr_pts_for_game_tie: Optional[Decimal] = None
    rr_pts_for_game_win: Optional[Decimal] = None
    rr_pts_for_match_tie: Optional[Decimal] = None
    rr_pts_for_match_win: Optional[Decimal] = None

    accept_attachments: Optional[bool] = None
    accepting_predictions: Optional[bool] = None
    allow_participant_match_reporting: Optional[bool] = None
    anonymous_voting: Optional[bool] = None
    created_by_api: Optional[bool] = None
    credit_capped: Optional[bool] = None
    group_stages_enabled: Optional[bool] = None
    group_stages_were_started: Optional[bool] = None
    hide_forum: Optional[bool] = None
    hide_seeds: Optional[bool] = None
    hold_third_place_match: Optional[bool] = None
    notify_users_when_matches_open: Optional[bool] = None
    notify_users_when_the_tournament_ends: Optional[bool] = None
    open_signup: Optional[bool] = None
    participants_locked: Optional[bool] = None
    participants_swappable: Optional[bool] = None
    private: Optional[bool] = None
    quick_advance: Optional[bool] = None
    require_score_agreement: Optional[bool] = None
    review_before_finalizing: Optional[bool] = None
    sequential_pairings: Optional[bool] = None
    show_rounds: Optional[bool] = None
    team_convertable: Optional[bool] = None
    teams: Optional[bool] = None

    def _path(self, *segments: str) -> str:
        self._require(id=self.id)
        return self._json_path(TOURNAMENTS_PATH, self.id, *segments)

    async def create(self, params: Params) -> JsonObject:
        """
        Create a new tournament.

        Args:
            params: Must contain tournament[name] and tournament[url]

        Returns:
            The created tournament as returned by the API

        Raises:
            PreconditionError: If a required parameter is missing
        """
        missing = [key for key in REQUIRED_CREATE_PARAMS if key not in params]
        if missing:
            raise PreconditionError(f"Missing {' and '.join(missing)}")
        return await self.client.fetch_and_parse(
            Method.POST, self._json_path(TOURNAMENTS_PATH), params
        )

    async def show(self, params: Optional[Params] = None) -> JsonObject:
        """
        Retrieve this tournament.

        Args:
            params: Optional include_participants / include_matches flags ("0" or "1")
        """
        return await self.client.fetch_and_parse(Method.GET, self._path(), params)

    async def update(self, params: Optional[Params] = None) -> JsonObject:
        """Update the tournament's attributes (tournament[...] keys)."""
        return await self.client.fetch_and_parse(Method.PUT, self._path(), params)

    async def destroy(self) -> JsonObject:
        """Delete the tournament and all its records. There is no undo."""
        return await self.client.fetch_and_parse(Method.DELETE, self._path())

    async def process_check_ins(self, params: Optional[Params] = None) -> JsonObject:
        """
        Mark participants who have not checked in as inactive.

        Inactive participants move to the bottom seeds and the tournament
        goes from checking_in to checked_in.
        """
        return await self.client.fetch_and_parse(
            Method.POST, self._path("process_check_ins"), params
        )

    async def abort_check_in(self, params: Optional[Params] = None) -> JsonObject:
        """Reactivate all participants and return the tournament to pending."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("abort_check_in"), params
        )

    async def start(self, params: Optional[Params] = None) -> JsonObject:
        """Start the tournament. Needs at least two participants."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("start"), params
        )

    async def finalize(self, params: Optional[Params] = None) -> JsonObject:
        """Make the results of a fully scored tournament permanent."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("finalize"), params
        )

    async def reset(self, params: Optional[Params] = None) -> JsonObject:
        """Clear all scores and attachments."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("reset"), params
        )

    async def open_for_predictions(self, params: Optional[Params] = None) -> JsonObject:
        return await self.client.fetch_and_parse(
            Method.POST, self._path("open_for_predictions"), params
        )

    async def get_participants(self) -> List[Participant]:
        """
        Retrieve the participant list.

        Returns:
            Participant records scoped to this tournament's id
        """
        return await self.client.fetch_collection(
            self._path("participants"), Participant, tournament_id=self.id
        )

    async def add_participant(self, params: Optional[Params] = None) -> JsonObject:
        """Add a participant (participant[...] keys) before the tournament starts."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("participants"), params
        )

    async def randomize_participants(self) -> JsonObject:
        """Randomize seeds among participants. Only before the tournament starts."""
        return await self.client.fetch_and_parse(
            Method.POST, self._path("participants", "randomize")
        )

    async def clear_participants(self) -> JsonObject:
        """Delete all participants. Only before the tournament starts."""
        return await self.client.fetch_and_parse(
            Method.DELETE, self._path("participants", "clear")
        )

    async def get_matches(self, params: Optional[Params] = None) -> List[Match]:
        """
        Retrieve the tournament's matches.

        Args:
            params: Optional state ("all", "pending", "open", "complete")
                and participant_id filters

        Returns:
            Match records scoped to this tournament's id
        """
        return await self.client.fetch_collection(
            self._path("matches"), Match, params, tournament_id=self.id
        )
