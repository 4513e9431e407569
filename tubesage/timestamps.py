"""Elapsed-time marker parsing ("M:S" or "S")."""

DEFAULT_START_MARKER = "0:00"


class InvalidMarkerError(ValueError):
    """Raised when a time marker is not "S" or "M:S" with integer parts."""
    pass


def parse_marker(marker: str) -> int:
    """Convert a time marker to elapsed seconds.

    "2:05" -> 125, "45" -> 45. Parts are not range-checked, so "1:75" is 135.
    Markers with an hours component, signs, decimals or empty parts raise
    InvalidMarkerError.
    """
    if not isinstance(marker, str):
        raise InvalidMarkerError(f"Time marker must be a string, got {type(marker).__name__}")

    parts = marker.strip().split(":")
    if len(parts) > 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidMarkerError(f"Invalid time marker: {marker!r}")

    try:
        values = [int(p) for p in parts]
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit
        raise InvalidMarkerError(f"Invalid time marker: {marker[:20]!r}...") from e

    if len(values) == 2:
        return values[0] * 60 + values[1]
    return values[0]


def try_parse_marker(marker: str) -> int | None:
    """Like parse_marker, but return None instead of raising."""
    try:
        return parse_marker(marker)
    except InvalidMarkerError:
        return None
