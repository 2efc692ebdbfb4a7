"""Wire-format helpers for the Challonge client."""

from challonge_api.utils.envelope import build_query, decode_body, unwrap_collection

__all__ = ["build_query", "decode_body", "unwrap_collection"]
