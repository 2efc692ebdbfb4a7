"""
Type definitions for the Challonge client.

Aliases for request parameters and decoded responses, plus the TypedDict
describing the API's validation error body.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, TypedDict, Union


# Form/query parameters, keyed exactly as the API names them
# (e.g. "tournament[name]", "participant[seed]").
Params = Mapping[str, str]

# A decoded JSON object as returned by single-resource endpoints.
JsonObject = Dict[str, Any]

# Tournaments are addressed by numeric id or by URL slug
# ("single_elim_2024" or "subdomain-slug").
Identifier = Union[int, str]


class Method(str, Enum):
    """HTTP verbs used by the API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ErrorsDict(TypedDict):
    """Validation error body returned with status 422."""
    errors: List[str]
