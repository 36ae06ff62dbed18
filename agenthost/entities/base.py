"""Agent and workflow abstractions consumed by the host.

The host never executes anything itself. It drives these interfaces and
translates what they produce into the Responses wire format.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import AsyncIterator, Optional, Sequence
from uuid import uuid4

from ..types.updates import (
    AgentRunResult,
    AgentRunUpdate,
    AgentRunResponseEvent,
    AgentRunUpdateEvent,
    ChatMessage,
    ExecutorCompletedEvent,
    ExecutorInvokedEvent,
    RequestInfoEvent,
    StreamUpdate,
    UsageContent,
    SuperStepCompletedEvent,
    SuperStepStartedEvent,
    WorkflowErrorEvent,
    WorkflowEvent,
    WorkflowRunResult,
    WorkflowStartedEvent,
    WorkflowWarningEvent,
)

logger = logging.getLogger("agenthost")

DEFAULT_MAX_ITERATIONS = 100


class Agent(ABC):
    """An executable agent."""

    def __init__(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        id: Optional[str] = None,
    ) -> None:
        self.id = id or uuid4().hex
        self.name = name
        self.description = description

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @abstractmethod
    async def run(self, messages: Sequence[ChatMessage]) -> AgentRunResult:
        """Run to completion and return the aggregated result."""

    @abstractmethod
    def run_stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[StreamUpdate]:
        """Run and yield updates as they are produced."""


# =============================================================================
# Workflow graph
# =============================================================================


@dataclass
class DirectEdge:
    source_id: str
    target_id: str
    has_condition: bool = False


@dataclass
class FanOutEdge:
    source_id: str
    target_ids: list[str] = field(default_factory=list)
    has_assigner: bool = False


@dataclass
class FanInEdge:
    source_ids: list[str]
    target_id: str


Edge = DirectEdge | FanOutEdge | FanInEdge


class Workflow(ABC):
    """A graph of executors that reports progress through workflow events."""

    def __init__(
        self,
        start_executor_id: str,
        edges: Optional[Sequence[Edge]] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        self.start_executor_id = start_executor_id
        self.edges: list[Edge] = list(edges or [])
        self.name = name
        self.description = description
        self.max_iterations = max_iterations

    @abstractmethod
    async def run(self, messages: Sequence[ChatMessage]) -> WorkflowRunResult:
        """Run to completion and return every event observed."""

    @abstractmethod
    def run_stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[WorkflowEvent]:
        """Run and yield workflow events as they happen."""


def estimate_tokens(text: str) -> int:
    """Rough token count for runs that report no usage (4 chars per token)."""
    return len(text) // 4


def workflow_event_to_text(event: WorkflowEvent) -> str:
    """Render a workflow event as one line of plain text."""
    if isinstance(event, AgentRunResponseEvent):
        response = event.response
        return f"Agent Response: {response.text if response and response.text else 'No content'}"
    if isinstance(event, AgentRunUpdateEvent):
        update = event.update
        return f"Agent Update: {update.text if update and update.text else 'Update'}"
    if isinstance(event, ExecutorCompletedEvent):
        return f"Executor completed: {event.executor_id}"
    if isinstance(event, ExecutorInvokedEvent):
        return f"Executor '{event.executor_id}' invoked: {event.data if event.data is not None else 'Processing'}"
    if isinstance(event, WorkflowStartedEvent):
        return f"Workflow started: {event.data if event.data is not None else 'Processing input'}"
    if isinstance(event, WorkflowErrorEvent):
        message = str(event.data) if isinstance(event.data, BaseException) else None
        return f"Workflow error: {message or 'Unknown error'}"
    if isinstance(event, WorkflowWarningEvent):
        return f"Workflow warning: {event.data if event.data is not None else 'Warning occurred'}"
    if isinstance(event, SuperStepStartedEvent):
        return f"Step {event.step_number} started"
    if isinstance(event, SuperStepCompletedEvent):
        return f"Step {event.step_number} completed"
    if isinstance(event, RequestInfoEvent):
        return f"External request: {event.data if event.data is not None else 'User input required'}"
    return f"{type(event).__name__}: {event.data if event.data is not None else 'No data'}"


class WorkflowAgent(Agent):
    """Exposes a workflow through the agent interface."""

    def __init__(self, workflow: Workflow, name: Optional[str] = None) -> None:
        super().__init__(
            name=name or workflow.name,
            description=workflow.description,
            id=name or workflow.name,
        )
        self.workflow = workflow

    async def run(self, messages: Sequence[ChatMessage]) -> AgentRunResult:
        run = await self.workflow.run(messages)
        lines = [line for line in (workflow_event_to_text(e) for e in run.events) if line]
        if not lines:
            lines.append(f"Workflow '{self.display_name}' completed with status: {run.status}")
        text = "\n".join(lines)
        prompt_tokens = estimate_tokens(messages[-1].text if messages else "")
        completion_tokens = estimate_tokens(text)
        return AgentRunResult(
            messages=[ChatMessage.from_text("assistant", text)],
            usage=UsageContent(
                input_tokens=prompt_tokens,
                output_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens,
            ),
        )

    async def run_stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[StreamUpdate]:
        async for event in self.workflow.run_stream(messages):
            yield event
            # Surface inner agent text so it streams as regular output
            if isinstance(event, AgentRunUpdateEvent) and event.update is not None:
                update: AgentRunUpdate = event.update
                yield update
