"""Airline directory — immutable airline name to backend address table."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class AirlineDirectory:
    """Read-only lookup of airline backends, built once at startup."""

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(dict(entries))

    def resolve(self, airline_name: str) -> str | None:
        """Return the backend address for an airline, or None if unknown."""
        return self._entries.get(airline_name)

    def items(self):
        return self._entries.items()

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, airline_name: object) -> bool:
        return airline_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AirlineDirectory({len(self._entries)} airlines)"
