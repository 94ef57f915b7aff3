from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from invasion.common.errors import InvalidConnectionError, MapLoadError
from invasion.engine.graph import CityGraph

logger = logging.getLogger(__name__)


def load_map(path: str | Path) -> CityGraph:
    """Read a map file and build the city graph it describes."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MapLoadError(f"cannot read map file: {exc.strerror or exc}", source=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise MapLoadError(
            f"map file is not valid UTF-8 (byte {exc.start})", source=str(path)
        ) from exc
    graph = parse_map(text.splitlines(), source=str(path))
    logger.info("Loaded %d cities from %s", len(graph), path)
    return graph


def parse_map(lines: Iterable[str], source: str = "<string>") -> CityGraph:
    """Build a graph from map lines of the form ``<city> <direction>=<city> ...``.

    Cities are created on first mention, whether as a line's subject or as a
    neighbour.
    """
    graph = CityGraph()
    for lineno, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if not tokens:
            raise MapLoadError("line has no city name", source=source, line=lineno)
        name, links = tokens[0], tokens[1:]
        _ensure_city(graph, name)
        for token in links:
            direction, sep, neighbor = token.partition("=")
            if not sep:
                raise MapLoadError(
                    f"connection {token!r} is missing '='", source=source, line=lineno
                )
            if not direction or not neighbor:
                raise MapLoadError(f"incomplete connection {token!r}", source=source, line=lineno)
            _ensure_city(graph, neighbor)
            try:
                graph.connect(name, neighbor, direction)
            except InvalidConnectionError as exc:
                raise MapLoadError(str(exc), source=source, line=lineno) from exc
    return graph


def dump_map(graph: CityGraph) -> str:
    lines = graph.render()
    return "\n".join(lines) + "\n" if lines else ""


def _ensure_city(graph: CityGraph, name: str) -> None:
    if name not in graph:
        graph.add_city(name)
