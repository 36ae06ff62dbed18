"""Type definitions for the host."""

from .updates import (
    AgentRunResult,
    AgentRunUpdate,
    AgentRunResponseEvent,
    AgentRunUpdateEvent,
    ChatMessage,
    Content,
    ExecutorCompletedEvent,
    ExecutorEvent,
    ExecutorInvokedEvent,
    FunctionCallContent,
    FunctionResultContent,
    RequestInfoEvent,
    StreamUpdate,
    SuperStepCompletedEvent,
    SuperStepStartedEvent,
    TextContent,
    UsageContent,
    WorkflowErrorEvent,
    WorkflowEvent,
    WorkflowOutputEvent,
    WorkflowRunResult,
    WorkflowStartedEvent,
    WorkflowWarningEvent,
)

__all__ = [
    "AgentRunResult",
    "AgentRunUpdate",
    "AgentRunResponseEvent",
    "AgentRunUpdateEvent",
    "ChatMessage",
    "Content",
    "ExecutorCompletedEvent",
    "ExecutorEvent",
    "ExecutorInvokedEvent",
    "FunctionCallContent",
    "FunctionResultContent",
    "RequestInfoEvent",
    "StreamUpdate",
    "SuperStepCompletedEvent",
    "SuperStepStartedEvent",
    "TextContent",
    "UsageContent",
    "WorkflowErrorEvent",
    "WorkflowEvent",
    "WorkflowOutputEvent",
    "WorkflowRunResult",
    "WorkflowStartedEvent",
    "WorkflowWarningEvent",
]
