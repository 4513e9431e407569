"""Orchestrator — turns a transcript payload into a Reading."""

import logging
import uuid
from datetime import datetime

from tubesage.grouping import group_transcript
from tubesage.models import Reading
from tubesage.payload import DisplayDefaults, TranscriptPayload

logger = logging.getLogger(__name__)


class EmptyTranscriptError(ValueError):
    """Raised when a transcript produces no reading blocks."""
    pass


def process(
    payload: TranscriptPayload,
    defaults: DisplayDefaults | None = None,
) -> Reading:
    """Group the payload's transcript and attach display metadata.

    Args:
        payload: Validated transcript payload.
        defaults: Title/description used when the payload omits them.
    """
    defaults = defaults or DisplayDefaults()

    blocks = group_transcript(payload.transcript)
    if not blocks:
        raise EmptyTranscriptError("No transcript segments could be processed")

    reading = Reading(
        id=uuid.uuid4().hex[:12],
        created_at=datetime.now().strftime("%H:%M:%S"),
        title=payload.title or defaults.title,
        description=payload.description or defaults.description,
        blocks=blocks,
    )
    logger.info(
        "Reading %s: %d fragments -> %d blocks",
        reading.id, len(payload.transcript), len(blocks),
    )
    return reading
