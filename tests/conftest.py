"""
Shared test fixtures and configuration.

Provides a fake Challonge API built on httpx.MockTransport, a client wired
to it, and sample response payloads.
"""

import pytest
from typing import Any, Dict, List, Optional

import httpx

from challonge_api import ChallongeClient


# =============================================================================
# FAKE API
# =============================================================================

class FakeChallonge:
    """Records every request and replays queued responses in order."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []

    def queue(
        self,
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
    ) -> None:
        """Queue the next response."""
        if json is not None:
            self._responses.append(httpx.Response(status_code, json=json))
        else:
            self._responses.append(httpx.Response(status_code, text=text or ""))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        return self._responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api():
    """Provide a fresh fake API."""
    return FakeChallonge()


@pytest.fixture
def client(fake_api):
    """Provide a ChallongeClient that talks to the fake API."""
    return ChallongeClient(
        "alice",
        "secret-key",
        transport=httpx.MockTransport(fake_api.handler),
    )


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_tournament_data() -> Dict[str, Any]:
    """Provide a tournament object as returned by the API."""
    return {
        'id': 9044420,
        'name': 't1',
        'url': 'u1',
        'tournament_type': 'single elimination',
        'state': 'pending',
        'created_at': '2024-10-15T18:00:00.000-04:00',
        'updated_at': '2024-10-15T18:00:00.000-04:00',
        'started_at': None,
        'check_in_duration': None,
        'signup_cap': None,
        'participants_count': 0,
        'pts_for_match_win': '1.0',
        'pts_for_bye': '1.0',
        'private': False,
        'hold_third_place_match': False,
        'tie_breaks': ['match wins vs tied', 'game wins', 'points scored'],
        'full_challonge_url': 'https://challonge.com/u1',
        'game_name': 'Chess',
    }


@pytest.fixture
def sample_tournaments_response(sample_tournament_data) -> List[Dict[str, Any]]:
    """Provide a GET tournaments.json body."""
    second = dict(sample_tournament_data, id=9044421, name='t2', url='u2', state='underway')
    return [
        {'tournament': sample_tournament_data},
        {'tournament': second},
    ]


@pytest.fixture
def sample_participants_response() -> List[Dict[str, Any]]:
    """Provide a GET participants.json body without tournament_id fields."""
    return [
        {
            'participant': {
                'id': 16543993,
                'name': 'Maccabi',
                'seed': 1,
                'active': True,
                'created_at': '2024-10-15T18:05:00.000-04:00',
                'checked_in_at': None,
                'final_rank': None,
                'group_player_ids': [],
                'misc': None,
            }
        },
        {
            'participant': {
                'id': 16543994,
                'name': 'Hapoel',
                'seed': 2,
                'active': True,
                'created_at': '2024-10-15T18:06:00.000-04:00',
                'checked_in_at': '2024-10-15T19:00:00.000-04:00',
                'final_rank': None,
                'group_player_ids': [],
                'misc': 'late entry',
            }
        },
    ]


@pytest.fixture
def sample_matches_response() -> List[Dict[str, Any]]:
    """Provide a GET matches.json body."""
    return [
        {
            'match': {
                'id': 23575258,
                'tournament_id': 9044420,
                'identifier': 'A',
                'round': 1,
                'state': 'open',
                'player1_id': 16543993,
                'player2_id': 16543994,
                'player1_prereq_match_id': None,
                'winner_id': None,
                'loser_id': None,
                'scores_csv': '',
                'attachment_count': None,
                'underway_at': None,
            }
        },
        {
            'match': {
                'id': 23575259,
                'tournament_id': 9044420,
                'identifier': 'B',
                'round': 2,
                'state': 'pending',
                'player1_id': None,
                'player2_id': None,
                'player1_prereq_match_id': 23575258,
                'winner_id': None,
                'loser_id': None,
                'scores_csv': '',
                'attachment_count': 0,
                'underway_at': None,
            }
        },
    ]


@pytest.fixture
def sample_attachments_response() -> List[Dict[str, Any]]:
    """Provide a GET attachments.json body."""
    return [
        {
            'match_attachment': {
                'id': 120,
                'match_id': 23575258,
                'user_id': 7,
                'description': 'VOD',
                'url': 'https://example.com/vod',
                'asset_file_size': None,
                'created_at': '2024-10-16T10:00:00.000-04:00',
            }
        }
    ]
