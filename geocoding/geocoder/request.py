"""Query construction for the geocoding endpoint."""

from typing import Dict, Optional
from urllib.parse import quote_plus

from geocoding.models.components import ComponentFilter
from geocoding.settings import GEOCODE_URL

# Parameters whose values arrive already encoded.
PRE_ENCODED_PARAMS = frozenset({"components"})
# Parameters sent even when their value is blank.
ALWAYS_SENT_PARAMS = frozenset({"sensor", "latlng"})


def build_geocode_params(
    address: str, api_key: str = "", components: Optional[ComponentFilter] = None
) -> Dict[str, Optional[str]]:
    """Return the query parameters of a forward geocode request.

    Args:
        address: Free-text address to look up.
        api_key: Optional service credential.
        components: Optional filter narrowing the matches.

    Returns:
        Parameter names mapped to raw values, in request order.
    """
    return {
        "sensor": "false",
        "key": api_key,
        "address": address,
        "components": components.to_query() if components else None,
    }


def build_reverse_geocode_params(
    latlng: str, api_key: str = ""
) -> Dict[str, Optional[str]]:
    """Return the query parameters of a reverse geocode request.

    Args:
        latlng: Coordinates formatted as ``"lat,lng"``.
        api_key: Optional service credential.

    Returns:
        Parameter names mapped to raw values, in request order.
    """
    return {
        "sensor": "false",
        "latlng": latlng,
        "key": api_key,
    }


def encode_params(params: Dict[str, Optional[str]]) -> str:
    """Encode parameters as a query string, skipping empty optional values."""
    pairs = []
    for name, value in params.items():
        if value is None:
            continue
        value = value.strip()
        if not value and name not in ALWAYS_SENT_PARAMS:
            continue
        if name not in PRE_ENCODED_PARAMS:
            value = quote_plus(value)
        pairs.append(f"{name}={value}")
    return "&".join(pairs)


def build_url(params: Dict[str, Optional[str]], base_url: str = GEOCODE_URL) -> str:
    """Join the endpoint and the encoded query string."""
    return f"{base_url}?{encode_params(params)}"
