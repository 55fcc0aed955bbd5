"""Custom exception hierarchy for muratrack."""

from __future__ import annotations


class MuraError(Exception):
    """Base exception for all muratrack errors."""


class MuraConfigError(MuraError):
    """Invalid or missing configuration."""


class InvalidPositionError(MuraError):
    """A position report is missing a coordinate or is out of range.

    Recovered inside the reducer and surfaced as a status message; the
    tracker state is left untouched.
    """

    def __init__(self, message: str, *, lat: object = None, lng: object = None) -> None:
        self.lat = lat
        self.lng = lng
        super().__init__(message)


class SourceUnavailableError(MuraError):
    """A remote subscription reported a connection failure.

    Retrying is the responsibility of the subscription owner, not of the
    reducer.
    """

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class NotReadyError(MuraError):
    """An event arrived before the map view finished initializing."""
