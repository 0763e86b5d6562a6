from .routing import NoPathFound, RoutingError
from .timetable import (
    InvalidJourneyError,
    InvalidRouteError,
    InvalidServiceError,
    MissingInputError,
    NoSuchStopError,
    TimetableError,
    TimetableFormatError,
)

__all__ = [
    "InvalidJourneyError",
    "InvalidRouteError",
    "InvalidServiceError",
    "MissingInputError",
    "NoPathFound",
    "NoSuchStopError",
    "RoutingError",
    "TimetableError",
    "TimetableFormatError",
]
