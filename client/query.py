"""Query string and URL assembly."""

from typing import Optional, Sequence, Tuple, Union
from urllib.parse import quote

from common.constants import API_PREFIX, DEFAULT_SCHEME, MAX_PASSWORD_BYTES

QueryValue = Union[str, bytes, int]
QueryParams = Sequence[Tuple[str, Optional[QueryValue]]]


def truncate_password(password: Optional[str], limit: int = MAX_PASSWORD_BYTES) -> Optional[bytes]:
    """
    Truncate a password to at most `limit` UTF-8 bytes.

    The cut is made on the encoded bytes, so a multi-byte character at the
    boundary may be split; the bytes are sent percent-encoded as they are.

    Args:
        password: Password text or None
        limit: Maximum number of bytes kept

    Returns:
        The encoded (possibly truncated) password, or None if no password was given
    """
    if password is None:
        return None
    return password.encode('utf-8')[:limit]


def _encode_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        value = str(value).lower()
    elif isinstance(value, int):
        value = str(value)
    return quote(value, safe='')


def build_query(params: QueryParams) -> str:
    """
    Serialize (name, value) pairs into a query string.

    Pairs whose value is None are dropped. Order is preserved and nothing is
    sorted or deduplicated.

    Args:
        params: Ordered (name, optional value) pairs

    Returns:
        Query string without the leading '?', empty if no pair is present
    """
    return '&'.join(
        f"{quote(name, safe='')}={_encode_value(value)}"
        for name, value in params
        if value is not None
    )


def normalize_host(host: str) -> str:
    """
    Turn a caller-supplied host into a base URL.

    Args:
        host: Host with or without scheme (e.g. "box.example.com" or "http://localhost:8000")

    Returns:
        Base URL without a trailing slash
    """
    host = host.strip().rstrip('/')
    if '://' not in host:
        host = f"{DEFAULT_SCHEME}://{host}"
    return host


def build_url(host: str, *segments: str, trailing_slash: bool = False, params: QueryParams = ()) -> str:
    """
    Build an API URL from path segments and query parameters.

    Args:
        host: Caller-supplied host
        segments: Path segments after the API prefix; each is percent-encoded
        trailing_slash: Append '/' after the last segment
        params: Query parameters passed to build_query

    Returns:
        Absolute URL
    """
    path = '/'.join(quote(segment, safe='') for segment in segments)
    url = f"{normalize_host(host)}{API_PREFIX}/{path}"
    if trailing_slash:
        url += '/'
    query = build_query(params)
    if query:
        url = f"{url}?{query}"
    return url
