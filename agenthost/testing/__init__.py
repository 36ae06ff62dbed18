"""Testing utilities for agenthost.

Scripted agents/workflows, an in-process harness, and assertion helpers.
"""

from .agents import EchoAgent, ScriptedAgent, ScriptedWorkflow
from .assertions import (
    assert_responses_sse_valid,
    assert_sequence_numbers_contiguous,
    collect_events,
    collect_sse_events,
    reconstruct_output_text,
)

__all__ = [
    "EchoAgent",
    "ScriptedAgent",
    "ScriptedWorkflow",
    "assert_responses_sse_valid",
    "assert_sequence_numbers_contiguous",
    "collect_events",
    "collect_sse_events",
    "reconstruct_output_text",
]
