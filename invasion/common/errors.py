from __future__ import annotations


class InvasionError(Exception):
    """Base class for simulator errors."""


class MapLoadError(InvasionError):
    """Map file could not be read or is malformed."""

    def __init__(self, message: str, source: str | None = None, line: int | None = None) -> None:
        self.source = source
        self.line = line
        if source is not None and line is not None:
            message = f"{source}:{line}: {message}"
        elif source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class DuplicateCityError(InvasionError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"City {name!r} already exists")


class UnknownCityError(InvasionError):
    def __init__(self, name: str, destroyed: bool = False) -> None:
        self.name = name
        self.destroyed = destroyed
        reason = "has been destroyed" if destroyed else "does not exist"
        super().__init__(f"City {name!r} {reason}")


class InvalidConnectionError(InvasionError):
    """Connection request with an unknown direction or a self-loop."""


class EmptySelectionError(InvasionError):
    def __init__(self) -> None:
        super().__init__("Cannot pick from an empty candidate list")
