"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_payload_path() -> Path:
    return FIXTURES_DIR / "sample_transcript.json"


@pytest.fixture
def sample_payload_data(sample_payload_path: Path) -> dict:
    return json.loads(sample_payload_path.read_text())


@pytest.fixture
def defaults_path() -> Path:
    return FIXTURES_DIR / "defaults.json"
