from .local_timetable_repository import LocalTimetableRepository, parse_timetable

__all__ = [
    "LocalTimetableRepository",
    "parse_timetable",
]
