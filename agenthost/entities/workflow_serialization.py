"""Serialize workflow graphs into the descriptor format used by UI clients."""

from typing import Any
from uuid import uuid4

from .base import DirectEdge, FanInEdge, FanOutEdge, Workflow


def workflow_to_dict(workflow: Workflow) -> dict[str, Any]:
    """Convert a workflow to its UI descriptor.

    Args:
        workflow: The workflow to describe

    Returns:
        Dict with id, start_executor_id, max_iterations, optional name and
        description, executors keyed by id, and edge_groups
    """
    result: dict[str, Any] = {
        "id": workflow.name or str(uuid4()),
        "start_executor_id": workflow.start_executor_id,
        "max_iterations": workflow.max_iterations,
    }

    if workflow.name:
        result["name"] = workflow.name
    if workflow.description:
        result["description"] = workflow.description

    result["executors"] = _executors_to_dict(workflow)
    result["edge_groups"] = _edges_to_edge_groups(workflow)
    return result


def _executor_ids(workflow: Workflow) -> list[str]:
    # Executors are inferred from the graph; order is first appearance
    seen: dict[str, None] = {workflow.start_executor_id: None}
    for edge in workflow.edges:
        if isinstance(edge, DirectEdge):
            ids = [edge.source_id, edge.target_id]
        elif isinstance(edge, FanOutEdge):
            ids = [edge.source_id, *edge.target_ids]
        else:
            ids = [*edge.source_ids, edge.target_id]
        for executor_id in ids:
            seen.setdefault(executor_id, None)
    return list(seen)


def _executors_to_dict(workflow: Workflow) -> dict[str, dict[str, str]]:
    return {
        executor_id: {"id": executor_id, "type": "Executor"}
        for executor_id in _executor_ids(workflow)
    }


def _edges_to_edge_groups(workflow: Workflow) -> list[dict[str, Any]]:
    edge_groups: list[dict[str, Any]] = []

    for edge in workflow.edges:
        group_id = f"edge_group_{len(edge_groups)}"

        if isinstance(edge, DirectEdge):
            single: dict[str, Any] = {"source_id": edge.source_id, "target_id": edge.target_id}
            if edge.has_condition:
                single["condition_name"] = "condition"
            edge_groups.append({"id": group_id, "type": "SingleEdgeGroup", "edges": [single]})

        elif isinstance(edge, FanOutEdge):
            group: dict[str, Any] = {
                "id": group_id,
                "type": "FanOutEdgeGroup",
                "edges": [
                    {"source_id": edge.source_id, "target_id": target}
                    for target in edge.target_ids
                ],
            }
            if edge.has_assigner:
                group["selection_func_name"] = "selector"
            edge_groups.append(group)

        elif isinstance(edge, FanInEdge):
            edge_groups.append({
                "id": group_id,
                "type": "FanInEdgeGroup",
                "edges": [
                    {"source_id": source, "target_id": edge.target_id}
                    for source in edge.source_ids
                ],
            })

        else:
            raise TypeError(f"Unsupported edge type: {type(edge).__name__}")

    return edge_groups
