"""Component filters restricting forward geocode matches."""

from typing import Optional
from urllib.parse import quote_plus, unquote_plus

from pydantic import BaseModel

COMPONENT_KEYS = (
    "administrative_area",
    "country",
    "locality",
    "postal_code",
    "route",
)


class ComponentFilter(BaseModel):
    """Structured refinement of a forward geocode query."""

    administrative_area: Optional[str] = None
    country: Optional[str] = None
    locality: Optional[str] = None
    postal_code: Optional[str] = None
    route: Optional[str] = None

    def to_query(self) -> str:
        """Serialize the present fields as ``key:value`` pairs joined by ``|``.

        Values are percent-encoded. An empty filter serializes to ``""``.
        """
        parts = []
        for key in COMPONENT_KEYS:
            value = getattr(self, key)
            if value:
                parts.append(f"{key}:{quote_plus(value)}")
        return "|".join(parts)

    @classmethod
    def parse(cls, text: str) -> "ComponentFilter":
        """Parse the output of ``to_query`` back into a filter.

        Args:
            text: Serialized component string.

        Returns:
            A ComponentFilter with the decoded values.

        Raises:
            ValueError: If a part is not ``key:value`` or the key is unknown.
        """
        values = {}
        for part in filter(None, text.split("|")):
            key, sep, value = part.partition(":")
            if not sep or key not in COMPONENT_KEYS:
                raise ValueError(f"Invalid component: {part!r}")
            values[key] = unquote_plus(value)
        return cls(**values)

    def __bool__(self) -> bool:
        return bool(self.to_query())

    def __str__(self) -> str:
        return self.to_query()
