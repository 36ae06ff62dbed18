"""Types for the OpenAI Responses wire protocol.

These types define the response objects and streaming events served by the
/v1/responses endpoints. Streaming events follow the OpenAI Responses event
shapes, plus the ``response.workflow_event.complete`` extension used to
surface workflow lifecycle notifications to clients.
"""

from typing import Any, Literal, Optional, Union
from typing_extensions import TypedDict


# =============================================================================
# Role / Status Types
# =============================================================================

Role = Literal["user", "assistant", "system", "developer", "tool"]

ItemStatus = Literal["in_progress", "completed", "incomplete"]
"""Status lifecycle for output items.

- in_progress: Item actively receiving content
- completed: Finished (terminal)
- incomplete: Cut short (terminal)
"""

ResponseStatus = Literal["in_progress", "completed", "failed", "incomplete"]


# =============================================================================
# Input Types
# =============================================================================

class InputText(TypedDict):
    """Plain text input content."""
    type: Literal["input_text"]
    text: str


class InputMessageItem(TypedDict, total=False):
    """A message item in the request input array."""
    type: Literal["message"]
    role: Role
    content: Union[str, list[InputText]]


class FunctionCallOutputItem(TypedDict, total=False):
    """A function call result item in input or output."""
    id: str
    type: Literal["function_call_output"]
    call_id: str
    output: str


InputItem = Union[InputMessageItem, FunctionCallOutputItem]


# =============================================================================
# Output Types
# =============================================================================

class OutputText(TypedDict, total=False):
    """Text output content."""
    type: Literal["output_text"]
    text: str
    annotations: list[Any]


class MessageItem(TypedDict, total=False):
    """A finalized assistant message."""
    id: str
    type: Literal["message"]
    role: Role
    status: ItemStatus
    content: list[OutputText]


class FunctionCallItem(TypedDict, total=False):
    """A function/tool call item in output."""
    id: str
    type: Literal["function_call"]
    call_id: str
    name: str
    arguments: str  # JSON string
    status: ItemStatus


OutputItem = Union[MessageItem, FunctionCallItem, FunctionCallOutputItem]


# =============================================================================
# Usage / Error Types
# =============================================================================

class ResponseUsage(TypedDict, total=False):
    """Token usage information for a response."""
    input_tokens: int
    output_tokens: int
    total_tokens: int


class ResponseError(TypedDict, total=False):
    """Structured error object embedded in a failed response."""
    type: str
    code: str
    message: str


class ErrorDetails(TypedDict, total=False):
    """Body of an HTTP error reply."""
    message: str
    type: str
    details: str


class ErrorResponse(TypedDict):
    error: ErrorDetails


# =============================================================================
# Response Object
# =============================================================================

class ResponseObject(TypedDict, total=False):
    """Full response object, used both as the non-streaming body and as the
    snapshot embedded in created/completed events."""
    id: str
    object: Literal["response"]
    created_at: float
    completed_at: float
    status: ResponseStatus
    model: str
    output: list[OutputItem]
    output_text: str
    error: Optional[ResponseError]
    incomplete_details: Optional[dict[str, Any]]
    usage: ResponseUsage
    metadata: dict[str, str]


# =============================================================================
# Streaming Event Types
# =============================================================================

class StreamEventBase(TypedDict):
    """Base fields for all streaming events."""
    type: str
    sequence_number: int


class ResponseCreatedEvent(StreamEventBase):
    """response.created - First event of every stream."""
    response: ResponseObject


class OutputTextDeltaEvent(StreamEventBase):
    """response.output_text.delta - Text content streaming."""
    item_id: str
    output_index: int
    content_index: int
    delta: str
    logprobs: list[Any]


class OutputItemDoneEvent(StreamEventBase):
    """response.output_item.done - Output item finalized."""
    output_index: int
    item: OutputItem


class WorkflowEventData(TypedDict):
    """Payload carried by a workflow event."""
    event_type: str
    data: Any
    executor_id: Optional[str]
    timestamp: str


class WorkflowEventCompleteEvent(StreamEventBase):
    """response.workflow_event.complete - Workflow lifecycle notification."""
    output_index: int
    data: WorkflowEventData
    executor_id: Optional[str]
    item_id: str


class ResponseCompletedEvent(StreamEventBase):
    """response.completed - Last event of a successful stream."""
    response: ResponseObject


ResponseStreamEvent = Union[
    ResponseCreatedEvent,
    OutputTextDeltaEvent,
    OutputItemDoneEvent,
    WorkflowEventCompleteEvent,
    ResponseCompletedEvent,
]
"""Union of all streaming event types."""


# =============================================================================
# Event Type Constants
# =============================================================================

EVENT_RESPONSE_CREATED = "response.created"
EVENT_RESPONSE_COMPLETED = "response.completed"
EVENT_OUTPUT_TEXT_DELTA = "response.output_text.delta"
EVENT_OUTPUT_ITEM_DONE = "response.output_item.done"
EVENT_WORKFLOW_EVENT_COMPLETE = "response.workflow_event.complete"
