"""Base data model for Challonge resources."""

from typing import Any, TypeVar

from pydantic import BaseModel, PrivateAttr

from challonge_api.exceptions import PreconditionError

R = TypeVar("R", bound="Resource")


class Resource(BaseModel):
    """
    Immutable snapshot of a server-side resource.

    Records are decoded from API responses and keep a reference to the
    client that fetched them so that follow-up operations can be issued.
    Operations never modify the record; they return the server's new
    representation instead.
    """

    # ChallongeClient; typed loosely to avoid an import cycle
    _client: Any = PrivateAttr(default=None)

    class Config:
        """Pydantic configuration."""

        frozen = True
        extra = "allow"

    def bind(self: R, client: Any) -> R:
        """Attach the client used for this record's operations."""
        self._client = client
        return self

    @property
    def client(self) -> Any:
        """The client this record was fetched with."""
        if self._client is None:
            raise PreconditionError(
                f"{type(self).__name__} is not bound to a ChallongeClient"
            )
        return self._client

    def _require(self, **identifiers: Any) -> None:
        """Raise PreconditionError if any of the given identifiers is unset."""
        missing = [
            name for name, value in identifiers.items()
            if value is None or value == ""
        ]
        if missing:
            raise PreconditionError(
                f"{type(self).__name__} {', '.join(missing)} is not initialized"
            )

    @staticmethod
    def _json_path(*segments: Any) -> str:
        """Join path segments and append the .json format suffix."""
        return "/".join(str(s) for s in segments) + ".json"
