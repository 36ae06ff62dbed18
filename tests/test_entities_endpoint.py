"""Tests for the entity discovery endpoints."""

import pytest

from agenthost.entities import DirectEdge
from agenthost.testing import EchoAgent, ScriptedWorkflow
from agenthost.testing.harness import HostHarness


@pytest.mark.asyncio
async def test_list_entities(registry):
    registry.register_agent(EchoAgent())
    registry.register_workflow(ScriptedWorkflow([], name="pipeline"))

    with HostHarness(registry) as host:
        async with host.make_async_client() as client:
            response = await client.get("/v1/entities")

    assert response.status_code == 200
    body = response.json()
    assert body["object"] == "list"
    assert [(e["id"], e["type"]) for e in body["data"]] == [("echo", "agent"), ("pipeline", "workflow")]
    assert body["data"][0]["description"] == "Echoes the input"


@pytest.mark.asyncio
async def test_get_workflow_includes_graph(registry):
    registry.register_workflow(ScriptedWorkflow(
        [], edges=[DirectEdge("start", "writer")], name="pipeline"
    ))

    with HostHarness(registry) as host:
        async with host.make_async_client() as client:
            response = await client.get("/v1/entities/workflow_pipeline")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "pipeline"
    assert body["workflow_dump"]["edge_groups"][0]["type"] == "SingleEdgeGroup"


@pytest.mark.asyncio
async def test_get_agent_has_no_graph(registry):
    registry.register_agent(EchoAgent())

    with HostHarness(registry) as host:
        async with host.make_async_client() as client:
            response = await client.get("/v1/entities/echo")

    assert response.status_code == 200
    assert "workflow_dump" not in response.json()


@pytest.mark.asyncio
async def test_get_unknown_entity_returns_404(registry):
    with HostHarness(registry) as host:
        async with host.make_async_client() as client:
            response = await client.get("/v1/entities/ghost")

    assert response.status_code == 404
    assert response.json()["error"]["type"] == "invalid_request_error"


@pytest.mark.asyncio
async def test_entities_endpoint_can_be_disabled(registry):
    config = {"responses": {"enable_entities_endpoint": False}}

    with HostHarness(registry, config) as host:
        async with host.make_async_client() as client:
            response = await client.get("/v1/entities")

    assert response.status_code == 404
