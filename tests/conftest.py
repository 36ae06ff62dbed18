"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, AsyncIterator, Generator, Iterable

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from agenthost.core import registry as registry_module
from agenthost.core.registry import EntityRegistry, set_registry


@pytest.fixture(autouse=True)
def restore_global_registry() -> Generator[None, None, None]:
    """Keep the module-level registry from leaking between tests."""
    previous = registry_module.registry
    yield
    set_registry(previous)


@pytest.fixture
def registry() -> EntityRegistry:
    return EntityRegistry()


async def aiter_updates(items: Iterable[Any]) -> AsyncIterator[Any]:
    for item in items:
        yield item


def build_stream_request(model: str, input_: Any = "Hello", **extra: Any) -> dict[str, Any]:
    return {"model": model, "input": input_, "stream": True, **extra}
