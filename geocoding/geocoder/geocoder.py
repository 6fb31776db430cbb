"""Geocoding service client: transport, response decoding, and errors."""

from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

import httpx
from pydantic import ValidationError

from geocoding.geocoder.request import (
    build_geocode_params,
    build_reverse_geocode_params,
    build_url,
)
from geocoding.logging_config import logger
from geocoding.models.components import ComponentFilter
from geocoding.models.location import Address, Response, Status
from geocoding.settings import settings


class GeocodingError(Exception):
    """Base exception for geocoding failures."""
    pass


class RemoteServerError(GeocodingError):
    """Raised when the geocoding service cannot be reached."""

    def __init__(self, message: str = "Unable to contact the geocoding service."):
        super().__init__(message)


class ResponseDecodeError(GeocodingError):
    """Raised when the response body is not a valid geocoding payload."""
    pass


class GeocoderError(GeocodingError):
    """Raised when the service answers with a status other than OK."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Geocoder service error! ({status})")


class MalformedResponseError(GeocodingError):
    """Raised when an OK response carries no results."""
    pass


def _redact(url: str) -> str:
    """Hide the API key in a request URL before it is logged."""
    parts = urlsplit(url)
    query = [
        (name, "REDACTED" if name == "key" else value)
        for name, value in parse_qsl(parts.query)
    ]
    return parts._replace(query=urlencode(query)).geturl()


def decode_response(body: bytes) -> Address:
    """Decode a geocoding payload into an Address.

    Args:
        body: Raw JSON response body.

    Returns:
        An Address built from the first, most relevant result.

    Raises:
        ResponseDecodeError: If the body is not a valid payload.
        GeocoderError: If the service status is not OK.
        MalformedResponseError: If the status is OK but there are no results.
    """
    try:
        response = Response.model_validate_json(body)
    except ValidationError as exc:
        logger.error("GEOCODE_BAD_PAYLOAD", error=str(exc))
        raise ResponseDecodeError(str(exc)) from exc

    if response.status != Status.ok:
        logger.debug("GEOCODE_BAD_STATUS", status=response.status)
        raise GeocoderError(response.status)

    address = Address.from_response(response)
    if address is None:
        logger.error("GEOCODE_EMPTY_RESULTS", status=response.status)
        raise MalformedResponseError("Geocoder returned OK without any results")
    return address


def fetch(url: str) -> Address:
    """Request a geocoding URL and decode the answer.

    Args:
        url: Fully built request URL.

    Returns:
        An Address for the first result.

    Raises:
        RemoteServerError: When the HTTP request cannot be completed.
    """
    log_url = _redact(url)
    logger.debug("GEOCODE_REQUEST", url=log_url)
    try:
        response = httpx.get(url, timeout=settings.timeout)
    except httpx.HTTPError as exc:
        logger.error("GEOCODE_REQUEST_FAILED", url=log_url, error=str(exc))
        raise RemoteServerError() from exc

    logger.debug("GEOCODE_RESPONSE", url=log_url, status=response.status_code)
    return decode_response(response.content)


def geocode(address: str) -> Address:
    """Forward geocode an address without an API key."""
    return geocode_authenticated(address, "")


def reverse_geocode(latlng: str) -> Address:
    """Reverse geocode ``"lat,lng"`` without an API key."""
    return reverse_geocode_authenticated(latlng, "")


def geocode_authenticated(address: str, api_key: str) -> Address:
    """Forward geocode an address with an explicit API key."""
    return geocode_authenticated_with_components(address, ComponentFilter(), api_key)


def geocode_authenticated_with_components(
    address: str, components: Optional[ComponentFilter], api_key: str
) -> Address:
    """Forward geocode an address restricted by a component filter.

    Args:
        address: Free-text address to look up.
        components: Filter narrowing the matches; may be empty or None.
        api_key: Service credential; empty to send none.

    Returns:
        An Address for the most relevant match.
    """
    params = build_geocode_params(address, api_key, components)
    return fetch(build_url(params, settings.base_url))


def reverse_geocode_authenticated(latlng: str, api_key: str) -> Address:
    """Reverse geocode ``"lat,lng"`` with an explicit API key."""
    params = build_reverse_geocode_params(latlng, api_key)
    return fetch(build_url(params, settings.base_url))
