from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import InvalidJourneyError, MissingInputError

from .service import Service
from .station import Station


@dataclass(frozen=True, slots=True)
class Leg:
    """One uninterrupted ride on a single service between two of its stops."""

    start: Station
    end: Station
    service: Service

    def __post_init__(self) -> None:
        if self.start is None or self.end is None or self.service is None:
            raise MissingInputError("Leg start, end and service cannot be None")
        if not self.service.route.can_travel_from(self.start, self.end):
            raise InvalidJourneyError(
                f"Cannot travel from {self.start} to {self.end} "
                f"using route {self.service.route.name}"
            )

    @property
    def start_time(self) -> int:
        return self.service.get_stop_time(self.start)

    @property
    def end_time(self) -> int:
        return self.service.get_stop_time(self.end)

    @property
    def route_name(self) -> str:
        return self.service.route.name

    def check_invariant(self) -> bool:
        if not all(isinstance(s, Station) for s in (self.start, self.end)):
            return False
        if not isinstance(self.service, Service):
            return False
        return self.service.route.can_travel_from(self.start, self.end)

    def __str__(self) -> str:
        return (
            f"{self.start_time} - {self.end_time}: catch route {self.route_name} "
            f"from {self.start} to {self.end}"
        )
