"""Snapshot builder for the envelope events of a stream.

A snapshot is a complete response object describing the response at one point
in time. The stream translator embeds one in ``response.created`` and reuses
that same object in ``response.completed``.
"""

import time
from typing import Optional, Union

from typing_extensions import assert_never

from ..types.responses import ResponseObject
from ..types.updates import AgentRunResult, AgentRunUpdate, WorkflowEvent
from .translator import (
    agent_run_result_to_response,
    contents_to_output_items,
    generate_response_id,
)

SnapshotSource = Union[AgentRunUpdate, WorkflowEvent, AgentRunResult]


class ResponseSnapshotBuilder:
    """Builds response objects for one request."""

    def __init__(
        self,
        model: str,
        response_id: Optional[str] = None,
        metadata: Optional[dict[str, str]] = None,
    ) -> None:
        self.model = model
        self.response_id = response_id or generate_response_id()
        self.metadata = metadata or {}
        self.created_at = time.time()

    def build(self, source: SnapshotSource) -> ResponseObject:
        """Build a snapshot from an update or from a final result."""
        if isinstance(source, AgentRunResult):
            return agent_run_result_to_response(
                source,
                model=self.model,
                response_id=self.response_id,
                metadata=self.metadata,
            )
        if isinstance(source, AgentRunUpdate):
            return self._from_update(source)
        if isinstance(source, WorkflowEvent):
            return self._base("in_progress")
        assert_never(source)

    def _from_update(self, update: AgentRunUpdate) -> ResponseObject:
        response = self._base("in_progress")
        if update.response_id:
            response["id"] = update.response_id
        if update.created_at is not None:
            response["created_at"] = update.created_at
        if update.model_id:
            response["model"] = update.model_id
        response["output"] = contents_to_output_items(
            update.contents, update.message_id, status="in_progress"
        )
        response["output_text"] = update.text
        return response

    def _base(self, status: str) -> ResponseObject:
        return {
            "id": self.response_id,
            "object": "response",
            "created_at": self.created_at,
            "status": status,
            "model": self.model,
            "output": [],
            "output_text": "",
            "error": None,
            "incomplete_details": None,
            "metadata": dict(self.metadata),
        }
