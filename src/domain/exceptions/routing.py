class RoutingError(Exception):
    """Base exception for journey planning failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible journey exists for the given request."""
