"""Challonge API v1 client."""

import logging
from typing import Any, List, Optional, Type

import httpx
from pydantic import ValidationError

from challonge_api import config
from challonge_api.exceptions import (
    ConfigurationError,
    HTTPError,
    ParseError,
    TransportError,
)
from challonge_api.models import Tournament
from challonge_api.models.base import R
from challonge_api.types import ErrorsDict, Identifier, JsonObject, Method, Params
from challonge_api.utils.envelope import build_query, decode_body, unwrap_collection

logger = logging.getLogger(__name__)


def _error_messages(response: httpx.Response) -> List[str]:
    """Extract a readable error list from a failed response."""
    if response.status_code == 422:
        # Validation failures come back as {"errors": [...]}
        try:
            body: ErrorsDict = response.json()
            return [str(e) for e in body["errors"]]
        except (ValueError, KeyError, TypeError):
            pass
    text = response.text.strip()
    return [text[:200]] if text else []


class ChallongeClient:
    """
    Async client for the Challonge API v1.

    Owns a single httpx.AsyncClient authenticated with HTTP Basic auth for
    the lifetime of the instance. The client is never reconfigured after
    construction, so one instance can serve any number of concurrent
    coroutines.

    Usage:
        async with ChallongeClient("user", "api-key") as client:
            tournaments = await client.get_tournaments({"state": "pending"})
            participants = await client.tournament("my_slug").get_participants()
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            username: Challonge account name
            api_key: API key from https://challonge.com/settings/developer
            base_url: API root, defaults to config.BASE_URL
            timeout: Request timeout in seconds, defaults to config.TIMEOUT_SECONDS
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._username = username
        self._api_key = api_key
        self.base_url = (base_url or config.BASE_URL).rstrip("/") + "/"
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(username, api_key),
            headers={"Accept": "application/json"},
            timeout=config.TIMEOUT_SECONDS if timeout is None else timeout,
            transport=transport,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ChallongeClient":
        """
        Create a client from CHALLONGE_USERNAME and CHALLONGE_API_KEY.

        Raises:
            ConfigurationError: If either variable is missing
        """
        if not config.USERNAME or not config.API_KEY:
            raise ConfigurationError(
                "CHALLONGE_USERNAME and CHALLONGE_API_KEY must be set"
            )
        return cls(config.USERNAME, config.API_KEY, **kwargs)

    @property
    def username(self) -> str:
        return self._username

    @property
    def api_key(self) -> str:
        return self._api_key

    async def __aenter__(self) -> "ChallongeClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def fetch(
        self, method: Method, path: str, params: Optional[Params] = None
    ) -> str:
        """
        Make an authenticated HTTP request and return the raw body.

        GET and DELETE parameters go into the query string, POST and PUT
        parameters into a form-encoded body.

        Args:
            method: HTTP verb
            path: Path relative to the API root (e.g. "tournaments.json")
            params: Parameters keyed as the API names them

        Returns:
            Response body text

        Raises:
            HTTPError: If the API answers with a non-2xx status
            TransportError: If the request could not be sent
        """
        method = Method(method)
        params = params or {}
        logger.debug(f"{method.value} {path}")

        try:
            if method in (Method.GET, Method.DELETE):
                query = build_query(params)
                url = f"{path}?{query}" if query else path
                response = await self._http.request(method.value, url)
            else:
                response = await self._http.request(
                    method.value, path, data=dict(params)
                )
        except httpx.RequestError as e:
            logger.warning(f"{method.value} {path} could not be completed: {e}")
            raise TransportError(
                f"{method.value} {path} could not be completed: {e}",
                method.value,
                path,
            ) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"{method.value} {path} returned {response.status_code}")
            raise HTTPError(
                response.status_code, method.value, path, _error_messages(response)
            ) from e

        return response.text

    async def fetch_and_parse(
        self, method: Method, path: str, params: Optional[Params] = None
    ) -> JsonObject:
        """
        Make a request and decode the body as a JSON object.

        Raises:
            HTTPError: If the API answers with a non-2xx status
            TransportError: If the request could not be sent
            ParseError: If the body looks like an object but is not valid JSON
        """
        body = await self.fetch(method, path, params)
        return decode_body(body)

    async def fetch_collection(
        self,
        path: str,
        model: Type[R],
        params: Optional[Params] = None,
        **scope: Any,
    ) -> List[R]:
        """
        GET an index endpoint and decode it into typed records.

        Args:
            path: Path relative to the API root
            model: Record class for the unwrapped elements
            params: Query parameters
            **scope: Parent identifiers (tournament_id, match_id) set on
                every record, overriding the values in the response

        Returns:
            One bound record per array element

        Raises:
            ParseError: If the body is not an array of wrapped objects or an
                element does not validate as ``model``
        """
        body = await self.fetch(Method.GET, path, params)

        records: List[R] = []
        for data in unwrap_collection(body):
            try:
                record = model.model_validate({**data, **scope})
            except ValidationError as e:
                raise ParseError(f"Invalid {model.__name__} in {path}: {e}") from e
            records.append(record.bind(self))

        logger.debug(f"Decoded {len(records)} {model.__name__} records from {path}")
        return records

    def tournament(self, id: Optional[Identifier] = None) -> Tournament:
        """
        Get a handle for a tournament.

        Args:
            id: Tournament id or URL slug; may be omitted for create()

        Returns:
            Tournament bound to this client
        """
        return Tournament(id=id).bind(self)

    async def get_tournaments(self, params: Optional[Params] = None) -> List[Tournament]:
        """
        Retrieve the tournaments created with this account.

        Args:
            params: Optional filters (state, type, created_after, created_before, subdomain)

        Returns:
            List of Tournament records
        """
        return await self.fetch_collection("tournaments.json", Tournament, params)

    async def create_tournament(self, params: Params) -> JsonObject:
        """Create a tournament. See Tournament.create()."""
        return await self.tournament().create(params)
