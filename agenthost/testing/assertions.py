"""Assertion utilities for stream tests.

These utilities validate Responses API event sequences, making tests more
readable and catching structural issues early.
"""

from __future__ import annotations

from typing import Any, AsyncIterator

import httpx

from ..core.sse import SSEDecoder


async def collect_sse_events(response: httpx.Response) -> list[dict[str, Any]]:
    """Decode every SSE frame of a streamed response into event dicts."""
    events: list[dict[str, Any]] = []
    decoder = SSEDecoder()
    async for chunk in response.aiter_raw():
        for frame in decoder.feed(chunk):
            if frame.data:
                events.append(frame.json())
    return events


async def collect_events(stream: AsyncIterator[dict[str, Any]]) -> list[dict[str, Any]]:
    return [event async for event in stream]


def assert_sequence_numbers_contiguous(events: list[dict[str, Any]]) -> None:
    """Assert sequence numbers run 1..N with no gaps or repeats.

    Raises:
        AssertionError: If the run is broken
    """
    numbers = [e.get("sequence_number") for e in events]
    expected = list(range(1, len(events) + 1))
    assert numbers == expected, f"Sequence numbers {numbers} != {expected}"


def assert_responses_sse_valid(events: list[dict[str, Any]]) -> None:
    """Validate a complete Responses API event sequence.

    Args:
        events: List of parsed event dicts

    Raises:
        AssertionError: If structure is invalid
    """
    assert len(events) > 0, "Events list is empty"

    assert events[0]["type"] == "response.created", (
        f"First event should be response.created, got '{events[0].get('type')}'"
    )
    assert events[-1]["type"] == "response.completed", (
        f"Last event should be response.completed, got '{events[-1].get('type')}'"
    )
    created = [e for e in events if e["type"] == "response.created"]
    completed = [e for e in events if e["type"] == "response.completed"]
    assert len(created) == 1, f"Expected one response.created, got {len(created)}"
    assert len(completed) == 1, f"Expected one response.completed, got {len(completed)}"

    assert_sequence_numbers_contiguous(events)

    # output_index never decreases
    indexes = [e["output_index"] for e in events if "output_index" in e]
    for i in range(1, len(indexes)):
        assert indexes[i] >= indexes[i - 1], (
            f"output_index decreased at {i}: {indexes[i - 1]} -> {indexes[i]}"
        )

    for event in events:
        if event["type"] == "response.output_text.delta":
            assert event["content_index"] == 0, "content_index must be 0"
            assert event["logprobs"] == [], "logprobs must be an empty list"
            assert isinstance(event["delta"], str)
        elif event["type"] == "response.workflow_event.complete":
            assert event["item_id"].startswith("wf_"), f"Bad workflow item id {event['item_id']}"


def reconstruct_output_text(events: list[dict[str, Any]]) -> dict[str, str]:
    """Rebuild each message's text from its deltas, keyed by item id."""
    texts: dict[str, str] = {}
    for event in events:
        if event["type"] == "response.output_text.delta":
            texts[event["item_id"]] = texts.get(event["item_id"], "") + event["delta"]
    return texts
