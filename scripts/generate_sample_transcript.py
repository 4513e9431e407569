#!/usr/bin/env python3
"""Generate a synthetic transcript payload for TubeSage testing.

Produces one fragment every 4 seconds for the requested duration, using
"M:SS" markers, e.g.:
  0:00  "Fragment 1"
  0:04  "Fragment 2"
  ...
"""

import json
import sys
from pathlib import Path


def generate_sample_transcript(output: Path, duration: int = 120, step: int = 4) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)

    transcript = [
        {"timestamp": f"{t // 60}:{t % 60:02d}", "text": f"Fragment {i}"}
        for i, t in enumerate(range(0, duration, step), 1)
    ]
    payload = {
        "title": "Synthetic transcript",
        "description": f"{len(transcript)} fragments, one every {step}s",
        "transcript": transcript,
    }

    output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Generated: {output}")


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("tests/fixtures/synthetic_transcript.json")
    generate_sample_transcript(out)
