"""Data model shared with the execution engine.

Agents stream ``AgentRunUpdate`` objects while they run; workflows stream
``WorkflowEvent`` objects. Both can appear in a single update stream, so the
host treats ``StreamUpdate`` as a closed union and dispatches on it with
``isinstance`` checks that end in ``assert_never``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional, Union


# =============================================================================
# Message Contents
# =============================================================================


@dataclass
class TextContent:
    text: str


@dataclass
class FunctionCallContent:
    call_id: str
    name: str
    arguments: str = "{}"


@dataclass
class FunctionResultContent:
    call_id: str
    result: Any = None


@dataclass
class UsageContent:
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


Content = Union[TextContent, FunctionCallContent, FunctionResultContent, UsageContent]


def _join_text(contents: list[Content]) -> str:
    return "".join(c.text for c in contents if isinstance(c, TextContent))


@dataclass
class ChatMessage:
    role: str
    contents: list[Content] = field(default_factory=list)
    message_id: Optional[str] = None
    author_name: Optional[str] = None

    @classmethod
    def from_text(cls, role: str, text: str, message_id: Optional[str] = None) -> "ChatMessage":
        return cls(role=role, contents=[TextContent(text)], message_id=message_id)

    @property
    def text(self) -> str:
        return _join_text(self.contents)


# =============================================================================
# Agent Updates / Results
# =============================================================================


@dataclass
class AgentRunUpdate:
    """One incremental piece of agent output."""

    contents: list[Content] = field(default_factory=list)
    message_id: Optional[str] = None
    response_id: Optional[str] = None
    role: str = "assistant"
    author_name: Optional[str] = None
    model_id: Optional[str] = None
    created_at: Optional[float] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        message_id: Optional[str] = None,
        response_id: Optional[str] = None,
    ) -> "AgentRunUpdate":
        return cls(contents=[TextContent(text)], message_id=message_id, response_id=response_id)

    @property
    def text(self) -> str:
        return _join_text(self.contents)

    @property
    def is_empty(self) -> bool:
        """True when the update carries no identifiers and no contents."""
        return not self.message_id and not self.response_id and not self.contents


@dataclass
class AgentRunResult:
    """Aggregated result of a non-streaming agent run."""

    messages: list[ChatMessage] = field(default_factory=list)
    response_id: Optional[str] = None
    created_at: float = field(default_factory=time.time)
    usage: Optional[UsageContent] = None

    @property
    def text(self) -> str:
        return "".join(m.text for m in self.messages)


# =============================================================================
# Workflow Events
# =============================================================================


@dataclass
class WorkflowEvent:
    """Base class for workflow lifecycle notifications."""

    data: Any = None


@dataclass
class WorkflowStartedEvent(WorkflowEvent):
    pass


@dataclass
class WorkflowOutputEvent(WorkflowEvent):
    pass


@dataclass
class WorkflowErrorEvent(WorkflowEvent):
    pass


@dataclass
class WorkflowWarningEvent(WorkflowEvent):
    pass


@dataclass
class RequestInfoEvent(WorkflowEvent):
    pass


@dataclass
class SuperStepStartedEvent(WorkflowEvent):
    step_number: int = 0


@dataclass
class SuperStepCompletedEvent(WorkflowEvent):
    step_number: int = 0


@dataclass
class ExecutorEvent(WorkflowEvent):
    """A workflow event scoped to one executor."""

    executor_id: str = ""


@dataclass
class ExecutorInvokedEvent(ExecutorEvent):
    pass


@dataclass
class ExecutorCompletedEvent(ExecutorEvent):
    pass


@dataclass
class AgentRunUpdateEvent(ExecutorEvent):
    """An agent executor inside a workflow produced an update."""

    @property
    def update(self) -> Optional[AgentRunUpdate]:
        return self.data if isinstance(self.data, AgentRunUpdate) else None


@dataclass
class AgentRunResponseEvent(ExecutorEvent):
    """An agent executor inside a workflow finished with a complete result."""

    @property
    def response(self) -> Optional[AgentRunResult]:
        return self.data if isinstance(self.data, AgentRunResult) else None


@dataclass
class WorkflowRunResult:
    """Events collected from a complete, non-streaming workflow run."""

    events: list[WorkflowEvent] = field(default_factory=list)
    status: str = "completed"


StreamUpdate = Union[AgentRunUpdate, WorkflowEvent]
"""Everything an update source may yield."""
