"""Transcript grouper — coalesces fragments into time-bounded reading blocks."""

import logging
from collections.abc import Mapping, Sequence
from functools import reduce
from typing import Any, NamedTuple

from tubesage.models import Block, Fragment
from tubesage.timestamps import DEFAULT_START_MARKER, parse_marker, try_parse_marker

logger = logging.getLogger(__name__)

# Maximum span of a block, measured from its start marker to the current fragment.
# A fragment exactly this far from the start still joins the block.
GROUPING_THRESHOLD_SECONDS = 18


class _ScanState(NamedTuple):
    blocks: tuple[Block, ...]
    block_start: str
    text: str
    previous_marker: str | None


def _as_fragment(item: Any) -> Fragment | None:
    if isinstance(item, Fragment):
        return item
    if isinstance(item, Mapping):
        return Fragment.from_dict(item)
    return None


def _initial_start(first: Any) -> str:
    fragment = _as_fragment(first)
    if fragment is None or try_parse_marker(fragment.timestamp) is None:
        return DEFAULT_START_MARKER
    return fragment.timestamp


def _close(state: _ScanState, end_marker: str) -> tuple[Block, ...]:
    """Append the open block to the emitted blocks, unless it is empty."""
    if not state.text:
        return state.blocks
    block = Block(time_range=f"{state.block_start} - {end_marker}", text=state.text)
    return state.blocks + (block,)


def _step(state: _ScanState, item: Any) -> _ScanState:
    fragment = _as_fragment(item)
    if (
        fragment is None
        or not fragment.timestamp
        or not isinstance(fragment.text, str)
        or not fragment.text.strip()
    ):
        logger.debug("Skipping incomplete fragment: %r", item)
        return state

    seconds = try_parse_marker(fragment.timestamp)
    if seconds is None:
        logger.debug("Skipping fragment with malformed marker: %r", fragment.timestamp)
        return state

    text = fragment.text.strip()
    elapsed = seconds - parse_marker(state.block_start)

    if elapsed <= GROUPING_THRESHOLD_SECONDS:
        joined = f"{state.text} {text}" if state.text else text
        return state._replace(text=joined, previous_marker=fragment.timestamp)

    blocks = _close(state, state.previous_marker or fragment.timestamp)
    return _ScanState(
        blocks=blocks,
        block_start=fragment.timestamp,
        text=text,
        previous_marker=fragment.timestamp,
    )


def group_transcript(fragments: Sequence[Fragment | Mapping[str, Any]]) -> list[Block]:
    """Merge consecutive fragments into blocks spanning under the threshold.

    A block stays open while the current fragment's marker is at most
    GROUPING_THRESHOLD_SECONDS after the block's start marker; a fragment at
    exactly the threshold is merged. The fragment that crosses it starts the
    next block. Blocks are labeled "<start> - <end>" with the original marker
    strings of their first and last absorbed fragments.

    Fragments missing a marker or text, or carrying a malformed marker, are
    skipped. Empty or non-sequence input yields an empty list. Never raises.
    """
    if isinstance(fragments, (str, bytes)) or not isinstance(fragments, Sequence):
        return []
    if not fragments:
        return []

    initial = _ScanState(
        blocks=(),
        block_start=_initial_start(fragments[0]),
        text="",
        previous_marker=None,
    )
    final = reduce(_step, fragments, initial)
    blocks = _close(final, final.previous_marker or final.block_start)

    logger.debug("Grouped %d fragments into %d blocks", len(fragments), len(blocks))
    return list(blocks)
