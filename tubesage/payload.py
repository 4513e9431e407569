"""Transcript payload schema — the contract between the transcript service and the engine."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class PayloadError(ValueError):
    """Raised when a transcript payload does not have the expected shape."""
    pass


@dataclass
class DisplayDefaults:
    """Text substituted when a payload has no title or description."""

    title: str = "Untitled"
    description: str = "No description available"


@dataclass
class TranscriptPayload:
    """A transcript service response: raw fragments plus optional metadata."""

    transcript: list[Any] = field(default_factory=list)
    title: str | None = None
    description: str | None = None


def parse_payload(data: Any) -> TranscriptPayload:
    """Validate the envelope of a decoded response and wrap it.

    Only the envelope is checked; individual fragments are left to the grouper.
    Non-string title or description values are treated as absent.
    """
    if not data or not isinstance(data, dict):
        raise PayloadError("No data received from transcript service")

    transcript = data.get("transcript")
    if not isinstance(transcript, list):
        raise PayloadError("Payload must contain a 'transcript' list")

    title = data.get("title")
    description = data.get("description")
    return TranscriptPayload(
        transcript=transcript,
        title=title if isinstance(title, str) else None,
        description=description if isinstance(description, str) else None,
    )


def load_payload(path: str | Path) -> TranscriptPayload:
    """Load and validate a payload from a JSON file."""
    path = Path(path)
    return parse_payload(json.loads(path.read_text(encoding="utf-8")))


def load_defaults(path: str | Path) -> DisplayDefaults:
    """Load display defaults from a JSON config file."""
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Defaults config must be a JSON object")
    return DisplayDefaults(**data)
