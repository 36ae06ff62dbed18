"""Instantiate entities named in configuration."""

import importlib
import logging
from typing import Any, Mapping

from ..core.exceptions import ConfigurationError
from ..core.registry import EntityRegistry
from .base import Agent, Workflow

logger = logging.getLogger("agenthost")


def import_object(reference: str) -> Any:
    """Import ``package.module:attribute``."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(
            f"Invalid entity reference '{reference}', expected 'module:attribute'"
        )
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import module '{module_name}': {exc}") from exc
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise ConfigurationError(f"'{module_name}' has no attribute '{attr_path}'") from exc
    return obj


def load_entities(config: Mapping[str, Any], registry: EntityRegistry) -> list[str]:
    """Register every entity listed under ``entities`` in the config.

    Each entry names a factory (``module:callable``) or an instance
    (``module:attribute``), with optional ``name`` and ``kwargs``.

    Returns:
        The registered entity keys, in config order
    """
    entries = config.get("entities") or []
    if not isinstance(entries, list):
        raise ConfigurationError("'entities' must be a list")

    registered: list[str] = []
    for entry in entries:
        if not isinstance(entry, Mapping) or "factory" not in entry:
            raise ConfigurationError(f"Entity entry must define 'factory': {entry!r}")
        target = import_object(str(entry["factory"]))
        kwargs = entry.get("kwargs") or {}
        entity = target(**kwargs) if callable(target) and not isinstance(target, (Agent, Workflow)) else target
        name = entry.get("name")

        if isinstance(entity, Workflow):
            registered.append(registry.register_workflow(entity, name=name))
        elif isinstance(entity, Agent):
            registered.append(registry.register_agent(entity, name=name))
        else:
            raise ConfigurationError(
                f"'{entry['factory']}' produced {type(entity).__name__}, expected an Agent or Workflow"
            )

    logger.info(f"Loaded {len(registered)} entities from configuration")
    return registered
