"""
Request and response envelope helpers for the Challonge API.

The API expects GET/DELETE parameters in the query string and POST/PUT
parameters as a form body, and answers with either a plain JSON object or,
for index endpoints, a JSON array in which every element is wrapped under a
single key named after the resource:

    [{"participant": {"id": 1, ...}}, {"participant": {"id": 2, ...}}]

These functions are pure so they can be tested without a transport.
"""

import json
from typing import Any, List

from challonge_api.exceptions import ParseError
from challonge_api.types import JsonObject, Params


def build_query(params: Params) -> str:
    """
    Serialize parameters for a GET or DELETE request.

    Pairs are emitted in mapping order, each followed by "&". Encoding of
    reserved characters is left to the transport.

    Args:
        params: Parameter mapping (may be empty)

    Returns:
        Query string without the leading "?", or "" when there are no params
    """
    return "".join(f"{key}={value}&" for key, value in params.items())


def decode_body(body: str) -> JsonObject:
    """
    Decode a single-resource response body.

    Args:
        body: Raw response text

    Returns:
        The parsed object when the body starts with "{", otherwise a
        one-field object keyed by the raw body text

    Raises:
        ParseError: If the body starts with "{" but is not valid JSON
    """
    if body.startswith("{"):
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseError(f"Response is not a valid JSON object: {e}") from e

    # Bare values and plain-text error strings
    return {body: []}


def _unwrap_element(element: Any, index: int) -> JsonObject:
    """Return the value of the single property of a wrapped element."""
    if not isinstance(element, dict) or len(element) != 1:
        raise ParseError(
            f"Collection element {index} is not a single-key wrapper object"
        )
    (inner,) = element.values()
    if not isinstance(inner, dict):
        raise ParseError(
            f"Collection element {index} does not wrap a JSON object"
        )
    return inner


def unwrap_collection(body: str) -> List[JsonObject]:
    """
    Decode an index response into the list of inner resource objects.

    The wrapping key is discarded whatever its name. A single malformed
    element fails the whole collection.

    Args:
        body: Raw response text

    Returns:
        One dict per array element, in response order

    Raises:
        ParseError: If the body is not a JSON array of wrapped objects
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array, got {type(data).__name__}")

    return [_unwrap_element(element, i) for i, element in enumerate(data)]
