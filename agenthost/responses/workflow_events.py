"""Convert workflow lifecycle notifications into stream events."""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from fastapi.encoders import jsonable_encoder

from ..types.responses import (
    EVENT_WORKFLOW_EVENT_COMPLETE,
    WorkflowEventCompleteEvent,
    WorkflowEventData,
)
from ..types.updates import AgentRunUpdate, ExecutorEvent, WorkflowEvent


def generate_workflow_item_id() -> str:
    """Generate an item ID for a workflow event.

    Uses the full uuid4 hex so ids stay unique across long-running streams.
    """
    return f"wf_{uuid4().hex}"


def _serialize_event_data(data: Any) -> Any:
    if data is None:
        return None
    if isinstance(data, BaseException):
        return {"type": type(data).__name__, "message": str(data)}
    if isinstance(data, AgentRunUpdate):
        return {
            "message_id": data.message_id,
            "response_id": data.response_id,
            "role": data.role,
            "author_name": data.author_name,
            "text": data.text,
        }
    return jsonable_encoder(data)


def workflow_event_to_response_event(
    event: WorkflowEvent,
    sequence_number: int,
    output_index: int,
) -> WorkflowEventCompleteEvent:
    """Build a ``response.workflow_event.complete`` event.

    Args:
        event: The workflow notification
        sequence_number: Sequence number to stamp on the event
        output_index: Current output index (not advanced)

    Returns:
        The protocol event

    Raises:
        ValueError: If the event data cannot be made JSON-compatible
    """
    executor_id: Optional[str] = None
    if isinstance(event, ExecutorEvent):
        executor_id = event.executor_id

    data: WorkflowEventData = {
        "event_type": type(event).__name__,
        "data": _serialize_event_data(event.data),
        "executor_id": executor_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    return {
        "type": EVENT_WORKFLOW_EVENT_COMPLETE,
        "sequence_number": sequence_number,
        "output_index": output_index,
        "data": data,
        "executor_id": executor_id,
        "item_id": generate_workflow_item_id(),
    }
