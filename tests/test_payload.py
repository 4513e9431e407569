"""Tests for payload loading and validation."""

import json
from pathlib import Path

import pytest

from tubesage.payload import (
    DisplayDefaults,
    PayloadError,
    TranscriptPayload,
    load_defaults,
    load_payload,
    parse_payload,
)


class TestDisplayDefaults:
    def test_defaults(self):
        cfg = DisplayDefaults()
        assert cfg.title == "Untitled"
        assert cfg.description == "No description available"

    def test_custom_values(self):
        cfg = DisplayDefaults(title="Clip", description="desc")
        assert cfg.title == "Clip"
        assert cfg.description == "desc"


class TestParsePayload:
    def test_minimal(self):
        p = parse_payload({"transcript": []})
        assert p == TranscriptPayload(transcript=[], title=None, description=None)

    def test_full(self):
        p = parse_payload({
            "transcript": [{"timestamp": "0:00", "text": "hi"}],
            "title": "T",
            "description": "D",
        })
        assert p.title == "T"
        assert p.description == "D"
        assert p.transcript == [{"timestamp": "0:00", "text": "hi"}]

    @pytest.mark.parametrize("data", [None, {}, [], "text"])
    def test_no_data(self, data):
        with pytest.raises(PayloadError, match="No data received"):
            parse_payload(data)

    @pytest.mark.parametrize("data", [{"title": "T"}, {"transcript": "0:00 hi"}, {"transcript": None}])
    def test_missing_transcript(self, data):
        with pytest.raises(PayloadError, match="'transcript' list"):
            parse_payload(data)

    @pytest.mark.parametrize("value", [5, ["T"], {"en": "T"}, True])
    def test_non_string_metadata_treated_as_absent(self, value):
        p = parse_payload({"transcript": [], "title": value, "description": value})
        assert p.title is None
        assert p.description is None

    def test_fragments_not_validated(self):
        p = parse_payload({"transcript": [None, {"bogus": 1}]})
        assert len(p.transcript) == 2


class TestLoadPayload:
    def test_load_sample(self, sample_payload_path: Path):
        p = load_payload(sample_payload_path)
        assert p.title == "Intro to Tides"
        assert len(p.transcript) == 8

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_payload(bad)

    def test_load_missing_transcript(self, tmp_path: Path):
        incomplete = tmp_path / "incomplete.json"
        incomplete.write_text('{"title": "x"}')
        with pytest.raises(PayloadError):
            load_payload(incomplete)


class TestLoadDefaults:
    def test_load(self, defaults_path: Path):
        cfg = load_defaults(defaults_path)
        assert cfg == DisplayDefaults(title="Unknown video", description="Nothing to say")

    def test_partial(self, tmp_path: Path):
        path = tmp_path / "defaults.json"
        path.write_text('{"title": "Only title"}')
        cfg = load_defaults(path)
        assert cfg.title == "Only title"
        assert cfg.description == "No description available"

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "defaults.json"
        path.write_text('{"threshold": 30}')
        with pytest.raises(TypeError):
            load_defaults(path)

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "defaults.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_defaults(path)
