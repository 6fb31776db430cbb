"""Geocoding service response models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Status(str, Enum):
    """Status codes reported by the geocoding service."""

    ok = "OK"
    zero_results = "ZERO_RESULTS"
    over_query_limit = "OVER_QUERY_LIMIT"
    request_denied = "REQUEST_DENIED"
    invalid_request = "INVALID_REQUEST"


class LatLng(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Bounds(BaseModel):
    """A bounding box given by its southwest and northeast corners."""

    model_config = ConfigDict(frozen=True)

    southwest: LatLng
    northeast: LatLng


class GeometryData(BaseModel):
    """Location and bounding boxes of a single result."""

    model_config = ConfigDict(frozen=True)

    location: LatLng
    location_type: str = ""
    viewport: Optional[Bounds] = None
    bounds: Optional[Bounds] = None  # absent for point results


class AddressComponent(BaseModel):
    """One part of a result's address, e.g. the locality or the country."""

    model_config = ConfigDict(frozen=True)

    long_name: str = ""
    short_name: str = ""
    types: List[str] = []


class Result(BaseModel):
    """A candidate match returned by the geocoding service."""

    model_config = ConfigDict(frozen=True)

    types: List[str] = []
    formatted_address: str = ""
    address_components: List[AddressComponent] = []
    geometry: GeometryData


class Response(BaseModel):
    """Full geocoding payload, results ordered by relevance."""

    model_config = ConfigDict(frozen=True)

    status: str
    results: List[Result] = []

    @property
    def ok(self) -> bool:
        return self.status == Status.ok

    def first_result(self) -> Optional[Result]:
        """Return the most relevant result, or None when there are none."""
        return self.results[0] if self.results else None


class Address(BaseModel):
    """Simplified outcome of a successful geocode."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    address: str
    response: Response

    @classmethod
    def from_response(cls, response: Response) -> Optional["Address"]:
        """Create an Address from the first result of a response.

        Args:
            response: Decoded service payload.

        Returns:
            A populated Address, or None if the response has no results.
        """
        result = response.first_result()
        if result is None:
            return None
        return cls(
            lat=result.geometry.location.lat,
            lng=result.geometry.location.lng,
            address=result.formatted_address,
            response=response,
        )

    def __str__(self) -> str:
        return f"{self.address} (lat: {self.lat:3.7f}, lng: {self.lng:3.7f})"
