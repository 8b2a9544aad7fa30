"""Utility for percent-encoding link targets."""

from urllib.parse import quote

# reserved and unreserved characters that stay literal in a full URI
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"


def encode_uri(uri: str) -> str:
    """Percent-encode a URI, keeping its structural characters intact."""
    return quote(uri, safe=URI_SAFE_CHARS)
