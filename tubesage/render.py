"""Reading renderer — formats blocks as cards and writes them to disk."""

import json
from pathlib import Path

from tubesage.models import Reading

OUTPUT_FORMATS = ("text", "markdown", "json")


def format_text(reading: Reading) -> str:
    lines: list[str] = [reading.title, reading.description, ""]
    for block in reading.blocks:
        lines.append(f"[{block.time_range}]")
        lines.append(block.text)
        lines.append("")
    return "\n".join(lines)


def format_markdown(reading: Reading) -> str:
    lines: list[str] = [f"# {reading.title}", "", reading.description, ""]
    for block in reading.blocks:
        lines.append(f"**{block.time_range}**")
        lines.append("")
        lines.append(block.text)
        lines.append("")
    return "\n".join(lines)


def format_json(reading: Reading) -> str:
    return json.dumps(reading.to_dict(), indent=2, ensure_ascii=False)


def render(reading: Reading, output_format: str = "text") -> str:
    """Render a reading in one of OUTPUT_FORMATS."""
    if output_format == "markdown":
        return format_markdown(reading)
    if output_format == "json":
        return format_json(reading)
    if output_format == "text":
        return format_text(reading)
    raise ValueError(f"Unknown output format: {output_format!r}")


def write_reading(reading: Reading, path: Path, output_format: str = "text") -> Path:
    """Write the rendered reading to path and return it."""
    path.write_text(render(reading, output_format), encoding="utf-8")
    return path
