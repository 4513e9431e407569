"""Web API routes for TubeSage."""

import logging

from flask import Blueprint, current_app, jsonify, request

from tubesage.engine import EmptyTranscriptError, process
from tubesage.models import Reading
from tubesage.payload import PayloadError, parse_payload

logger = logging.getLogger(__name__)

bp = Blueprint("web", __name__)


def _readings() -> dict[str, Reading]:
    """Per-app in-memory store: reading_id -> Reading, in creation order."""
    return current_app.extensions["tubesage_readings"]


@bp.route("/api/readings", methods=["POST"])
def create_reading():
    data = request.get_json(silent=True)

    try:
        payload = parse_payload(data)
        reading = process(payload, current_app.config["DISPLAY_DEFAULTS"])
    except PayloadError as e:
        return jsonify({"error": str(e)}), 400
    except EmptyTranscriptError as e:
        logger.info("Rejected transcript: %s", e)
        return jsonify({"error": str(e)}), 422

    store = _readings()
    store[reading.id] = reading
    while len(store) > current_app.config["MAX_READINGS"]:
        oldest = next(iter(store))
        logger.debug("Evicting reading %s", oldest)
        del store[oldest]

    return jsonify(reading.to_dict())


@bp.route("/api/readings")
def list_readings():
    return jsonify([r.to_dict() for r in _readings().values()])


@bp.route("/api/readings/<reading_id>")
def get_reading(reading_id: str):
    store = _readings()
    if reading_id not in store:
        return jsonify({"error": "Reading not found"}), 404
    return jsonify(store[reading_id].to_dict())
