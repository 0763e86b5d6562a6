from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from src.app.ports.output import ITimetableRepository
from src.domain.exceptions import TimetableError, TimetableFormatError
from src.domain.models import Route, Service, Station, Timetable, check_timetable

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def parse_timetable(text: str, *, source: str = "<string>") -> Timetable:
    """Parse the plain-text timetable format.

    The text holds zero or more blocks, each:
        1. a route name on its own line (no inner whitespace)
        2. station names separated by ", "
        3. zero or more service lines of whitespace-separated integer times
        4. an empty line

    The final block must be terminated by its empty line too.
    """

    lines = text.splitlines()
    if lines and lines[-1] != "":
        raise TimetableFormatError(f"{source}: last line is not empty")

    timetable: dict[Route, list[Service]] = {}
    numbered = iter(enumerate(lines, start=1))
    for lineno, raw_name in numbered:
        route = _parse_route(raw_name, numbered, lineno, source)
        if any(existing.name == route.name for existing in timetable):
            raise TimetableFormatError(
                f"{source}:{lineno}: route {route.name} occurs more than once"
            )
        timetable[route] = _parse_services(route, numbered, source)

    try:
        check_timetable(timetable)
    except TimetableError as exc:
        raise TimetableFormatError(f"{source}: {exc}") from exc
    return timetable


def _parse_route(
    raw_name: str, lines: Iterator[tuple[int, str]], lineno: int, source: str
) -> Route:
    name = raw_name.strip()
    if not name:
        raise TimetableFormatError(f"{source}:{lineno}: route name cannot be empty")
    if _WHITESPACE.search(name):
        raise TimetableFormatError(
            f"{source}:{lineno}: route name {name!r} contains whitespace"
        )

    stations_lineno, raw_stations = next(lines, (lineno + 1, None))
    if raw_stations is None:
        raise TimetableFormatError(
            f"{source}:{stations_lineno}: route {name} has no station list"
        )

    names = raw_stations.split(", ")
    if any(not n for n in names):
        raise TimetableFormatError(
            f"{source}:{stations_lineno}: station name cannot be empty"
        )

    try:
        return Route(name=name, stops=[Station(name=n) for n in names])
    except TimetableError as exc:
        raise TimetableFormatError(f"{source}:{stations_lineno}: {exc}") from exc


def _parse_services(
    route: Route, lines: Iterator[tuple[int, str]], source: str
) -> list[Service]:
    services: list[Service] = []
    for lineno, raw in lines:
        if raw == "":
            break

        times: list[int] = []
        for token in raw.split():
            try:
                times.append(int(token))
            except ValueError:
                raise TimetableFormatError(
                    f"{source}:{lineno}: {token!r} is not a number"
                ) from None

        try:
            services.append(Service(route=route, times=times))
        except TimetableError as exc:
            raise TimetableFormatError(f"{source}:{lineno}: {exc}") from exc
    return services


@dataclass(slots=True)
class LocalTimetableRepository(ITimetableRepository):
    """Loads a timetable from a text file.

    Env vars:
      - TIMETABLE_PATH: timetable file (default: data/timetable.txt)
      - TIMETABLE_CACHE: 0|false|no to re-read the file on every load
    """

    path: str | Path | None = None
    cache: bool | None = None

    _timetable: Timetable | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("TIMETABLE_PATH") or "data/timetable.txt"
        return Path(value)

    def _cache_enabled(self) -> bool:
        if self.cache is not None:
            return self.cache
        raw = (os.getenv("TIMETABLE_CACHE") or "1").strip().lower()
        return raw not in {"0", "false", "no"}

    def load_timetable(self) -> Timetable:
        if self._timetable is not None and self._cache_enabled():
            return self._timetable

        path = self._path()
        text = path.read_text(encoding="utf-8")
        timetable = parse_timetable(text, source=str(path))
        logger.info(
            "Loaded timetable %s: %d routes, %d services",
            path,
            len(timetable),
            sum(len(services) for services in timetable.values()),
        )

        if self._cache_enabled():
            self._timetable = timetable
        return timetable
