"""Tests for converting workflow notifications into stream events."""

from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from agenthost.responses.workflow_events import (
    generate_workflow_item_id,
    workflow_event_to_response_event,
)
from agenthost.types.updates import (
    AgentRunUpdate,
    AgentRunUpdateEvent,
    ExecutorCompletedEvent,
    SuperStepStartedEvent,
    WorkflowErrorEvent,
    WorkflowOutputEvent,
)


@dataclass
class Draft:
    title: str
    words: int


class TestWorkflowEventToResponseEvent:
    """Tests for workflow_event_to_response_event."""

    def test_executor_event_carries_executor_id(self):
        event = workflow_event_to_response_event(
            ExecutorCompletedEvent(executor_id="writer", data={"ok": True}),
            sequence_number=7,
            output_index=2,
        )

        assert event["type"] == "response.workflow_event.complete"
        assert event["sequence_number"] == 7
        assert event["output_index"] == 2
        assert event["executor_id"] == "writer"
        assert event["data"]["executor_id"] == "writer"
        assert event["data"]["event_type"] == "ExecutorCompletedEvent"
        assert event["data"]["data"] == {"ok": True}

    def test_non_executor_event_has_null_executor_id(self):
        event = workflow_event_to_response_event(SuperStepStartedEvent(step_number=1), 1, 0)

        assert event["executor_id"] is None
        assert event["data"]["executor_id"] is None
        assert event["data"]["data"] is None

    def test_timestamp_is_utc_iso8601(self):
        event = workflow_event_to_response_event(WorkflowOutputEvent(data="done"), 1, 0)

        parsed = datetime.fromisoformat(event["data"]["timestamp"])
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timezone.utc.utcoffset(None)

    def test_dataclass_payload_is_serialized(self):
        event = workflow_event_to_response_event(WorkflowOutputEvent(data=Draft("Intro", 120)), 1, 0)

        assert event["data"]["data"] == {"title": "Intro", "words": 120}

    def test_exception_payload_is_serialized(self):
        event = workflow_event_to_response_event(WorkflowErrorEvent(data=ValueError("boom")), 1, 0)

        assert event["data"]["data"] == {"type": "ValueError", "message": "boom"}

    def test_agent_update_payload_is_serialized(self):
        update = AgentRunUpdate.from_text("Hi", message_id="m1")
        event = workflow_event_to_response_event(
            AgentRunUpdateEvent(executor_id="writer", data=update), 1, 0
        )

        assert event["data"]["data"]["text"] == "Hi"
        assert event["data"]["data"]["message_id"] == "m1"

    def test_unserializable_payload_raises(self):
        with pytest.raises(ValueError):
            workflow_event_to_response_event(WorkflowOutputEvent(data=object()), 1, 0)

    def test_item_ids_are_prefixed_and_unique(self):
        ids = {
            workflow_event_to_response_event(WorkflowOutputEvent(), n, 0)["item_id"]
            for n in range(200)
        }

        assert len(ids) == 200
        assert all(item_id.startswith("wf_") for item_id in ids)


def test_generate_workflow_item_id_uses_full_uuid():
    item_id = generate_workflow_item_id()
    assert len(item_id) == len("wf_") + 32
