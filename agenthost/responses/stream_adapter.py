"""Stream translator from agent/workflow updates to Responses API events.

Consumes one update at a time from an agent's update stream and yields
protocol events with gapless sequence numbers:

    AgentRunUpdate(message_id="m1", text="Hello")
        -> response.created             (sequence_number=1)
        -> response.output_text.delta   (sequence_number=2, delta="Hello")
    AgentRunUpdate(message_id="m1", text=" world")
        -> response.output_text.delta   (sequence_number=3)
    <source exhausted>
        -> response.output_item.done    (sequence_number=4, item.id="m1")
        -> response.completed           (sequence_number=5)

Workflow events in the same stream become ``response.workflow_event.complete``
events; they share the sequence counter but never touch the output index or
the text buffer.
"""

import asyncio
import enum
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, Iterator, Optional

from typing_extensions import assert_never

from ..types.responses import (
    EVENT_OUTPUT_ITEM_DONE,
    EVENT_OUTPUT_TEXT_DELTA,
    EVENT_RESPONSE_COMPLETED,
    EVENT_RESPONSE_CREATED,
    OutputItemDoneEvent,
    OutputTextDeltaEvent,
    ResponseCompletedEvent,
    ResponseCreatedEvent,
    ResponseObject,
    ResponseStreamEvent,
)
from ..types.updates import AgentRunUpdate, StreamUpdate, TextContent, WorkflowEvent
from .snapshot import ResponseSnapshotBuilder
from .translator import build_message_item, generate_message_id
from .workflow_events import workflow_event_to_response_event

logger = logging.getLogger("agenthost")


class StreamState(enum.Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    DRAINING = "draining"
    CLOSED = "closed"


@dataclass
class AccumulationBuffer:
    """Text of the message currently being streamed."""

    message_id: Optional[str] = None
    item_id: Optional[str] = None
    parts: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.parts)

    def is_empty(self) -> bool:
        return not self.parts

    def clear(self) -> None:
        self.message_id = None
        self.item_id = None
        self.parts.clear()


class ResponsesStreamTranslator:
    """Translates one update stream into one Responses API event stream.

    Instances hold per-stream state and support a single traversal.
    """

    def __init__(self, snapshot_builder: ResponseSnapshotBuilder) -> None:
        self.snapshot_builder = snapshot_builder
        self.state = StreamState.IDLE

        self.sequence_number = 1
        self.output_index = 0
        self.created_emitted = False
        self.last_snapshot: Optional[ResponseObject] = None
        self.buffer = AccumulationBuffer()

        self.events_emitted = 0

    async def translate(
        self,
        updates: AsyncIterator[StreamUpdate],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AsyncIterator[ResponseStreamEvent]:
        """Yield protocol events for every update until the source is exhausted.

        Args:
            updates: The agent's update stream
            cancel_event: When set, translation stops at the next suspension
                point without flushing or emitting a completed event

        Yields:
            Responses API events, in emission order
        """
        if self.state is not StreamState.IDLE:
            raise RuntimeError("ResponsesStreamTranslator supports a single traversal")

        def cancelled() -> bool:
            return cancel_event is not None and cancel_event.is_set()

        try:
            async for update in updates:
                if cancelled():
                    logger.info("StreamTranslator: cancelled while awaiting updates")
                    return
                for event in self._process_update(update):
                    if cancelled():
                        logger.info("StreamTranslator: cancelled before event %d", event["sequence_number"])
                        return
                    self.events_emitted += 1
                    yield event

            self.state = StreamState.DRAINING
            for event in self._drain():
                if cancelled():
                    logger.info("StreamTranslator: cancelled while draining")
                    return
                self.events_emitted += 1
                yield event
        finally:
            self.state = StreamState.CLOSED
            aclose = getattr(updates, "aclose", None)
            if aclose is not None:
                await aclose()

    def _process_update(self, update: StreamUpdate) -> Iterator[ResponseStreamEvent]:
        if isinstance(update, AgentRunUpdate):
            if update.is_empty:
                return
        elif not isinstance(update, WorkflowEvent):
            assert_never(update)

        if self.state is StreamState.IDLE:
            self.state = StreamState.STREAMING

        if not self.created_emitted:
            yield self._created(update)

        if isinstance(update, WorkflowEvent):
            yield self._workflow_event(update)
            return

        for content in update.contents:
            if not isinstance(content, TextContent) or not content.text:
                continue
            if self.buffer.message_id is not None and self.buffer.message_id != update.message_id:
                yield self._flush()
            yield self._text_delta(update.message_id, content.text)

    def _drain(self) -> Iterator[ResponseStreamEvent]:
        if not self.buffer.is_empty():
            yield self._flush()
        if self.created_emitted:
            yield self._completed()
        logger.debug(
            "StreamTranslator: drained after %d events, %d output items",
            self.sequence_number - 1,
            self.output_index,
        )

    def _next_sequence_number(self) -> int:
        sequence_number = self.sequence_number
        self.sequence_number += 1
        return sequence_number

    def _created(self, update: StreamUpdate) -> ResponseCreatedEvent:
        self.last_snapshot = self.snapshot_builder.build(update)
        event: ResponseCreatedEvent = {
            "type": EVENT_RESPONSE_CREATED,
            "sequence_number": self._next_sequence_number(),
            "response": self.last_snapshot,
        }
        self.created_emitted = True
        return event

    def _workflow_event(self, update: WorkflowEvent) -> ResponseStreamEvent:
        event = workflow_event_to_response_event(
            update, self.sequence_number, self.output_index
        )
        self.sequence_number += 1
        return event

    def _text_delta(self, message_id: Optional[str], text: str) -> OutputTextDeltaEvent:
        self.buffer.message_id = message_id
        if message_id is not None:
            self.buffer.item_id = message_id
        elif self.buffer.item_id is None:
            self.buffer.item_id = generate_message_id()

        event: OutputTextDeltaEvent = {
            "type": EVENT_OUTPUT_TEXT_DELTA,
            "sequence_number": self._next_sequence_number(),
            "item_id": self.buffer.item_id,
            "output_index": self.output_index,
            "content_index": 0,
            "delta": text,
            "logprobs": [],
        }
        self.buffer.parts.append(text)
        return event

    def _flush(self) -> OutputItemDoneEvent:
        event: OutputItemDoneEvent = {
            "type": EVENT_OUTPUT_ITEM_DONE,
            "sequence_number": self._next_sequence_number(),
            "output_index": self.output_index,
            "item": build_message_item(self.buffer.text, self.buffer.item_id),
        }
        self.output_index += 1
        self.buffer.clear()
        return event

    def _completed(self) -> ResponseCompletedEvent:
        if self.last_snapshot is None:
            raise RuntimeError("response.completed requires a prior response.created snapshot")
        return {
            "type": EVENT_RESPONSE_COMPLETED,
            "sequence_number": self._next_sequence_number(),
            "response": self.last_snapshot,
        }


async def translate_updates(
    updates: AsyncIterator[StreamUpdate],
    snapshot_builder: ResponseSnapshotBuilder,
    cancel_event: Optional[asyncio.Event] = None,
) -> AsyncIterator[ResponseStreamEvent]:
    """Convenience function to translate an update stream.

    Args:
        updates: The agent's update stream
        snapshot_builder: Builder for the created/completed snapshots
        cancel_event: Optional cancellation signal

    Yields:
        Responses API events
    """
    translator = ResponsesStreamTranslator(snapshot_builder)
    async for event in translator.translate(updates, cancel_event):
        yield event
