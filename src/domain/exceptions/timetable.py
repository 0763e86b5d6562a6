class TimetableError(Exception):
    """Base exception for timetable model violations."""


class MissingInputError(TimetableError, TypeError):
    """Raised when a required argument (or an element of one) is None."""


class InvalidRouteError(TimetableError, ValueError):
    """Raised when a route has fewer than two stops or repeats a stop."""


class InvalidServiceError(TimetableError, ValueError):
    """Raised when service times do not match the route or are not strictly ascending."""


class InvalidJourneyError(TimetableError, ValueError):
    """Raised when a leg or journey extension cannot be travelled."""


class NoSuchStopError(TimetableError, LookupError):
    """Raised when a stop number or station is not part of a route."""


class TimetableFormatError(TimetableError):
    """Raised when a timetable file is malformed."""
