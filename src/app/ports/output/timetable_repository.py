from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Timetable


class ITimetableRepository(ABC):
    """Port for loading a validated timetable into memory."""

    @abstractmethod
    def load_timetable(self) -> Timetable:
        """Return a mapping of each route to its services, in schedule order."""
