"""OpenAI Responses API support for agenthost.

Key components:
- stream_adapter: Translate agent/workflow update streams into Responses events
- workflow_events: Convert workflow notifications into stream events
- snapshot: Build the response objects embedded in envelope events
- translator: Non-streaming conversion and request input conversion
"""

from .snapshot import ResponseSnapshotBuilder
from .stream_adapter import (
    AccumulationBuffer,
    ResponsesStreamTranslator,
    StreamState,
    translate_updates,
)
from .translator import (
    agent_run_result_to_response,
    convert_usage,
    generate_message_id,
    generate_response_id,
    request_input_to_messages,
)
from .workflow_events import workflow_event_to_response_event

__all__ = [
    "AccumulationBuffer",
    "ResponseSnapshotBuilder",
    "ResponsesStreamTranslator",
    "StreamState",
    "agent_run_result_to_response",
    "convert_usage",
    "generate_message_id",
    "generate_response_id",
    "request_input_to_messages",
    "translate_updates",
    "workflow_event_to_response_event",
]
