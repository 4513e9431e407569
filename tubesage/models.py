"""Shared data types used across TubeSage."""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Fragment:
    """One timestamped caption unit from a source transcript."""

    timestamp: str
    text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Fragment":
        timestamp = data.get("timestamp")
        text = data.get("text")
        return cls(
            timestamp=timestamp if isinstance(timestamp, str) else "",
            text=text if isinstance(text, str) else "",
        )


@dataclass(frozen=True)
class Block:
    """A coalesced paragraph labeled with its start/end markers."""

    time_range: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"timeRange": self.time_range, "text": self.text}


@dataclass
class Reading:
    """A processed transcript, ready for display."""

    id: str
    created_at: str
    title: str
    description: str
    blocks: list[Block] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.created_at,
            "title": self.title,
            "description": self.description,
            "segments": [b.to_dict() for b in self.blocks],
        }
