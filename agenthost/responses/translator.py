"""Stateless translation between the Responses API and the agent data model.

This module handles:
1. Converting Responses API request input into chat messages
2. Converting a complete agent run result into a Responses API object
3. Building output items (messages, function calls) from message contents
4. Usage statistics translation
"""

import json
import logging
import time
from typing import Any, Optional, Sequence
from uuid import uuid4

from ..core.exceptions import InvalidRequestError
from ..types.responses import (
    FunctionCallItem,
    FunctionCallOutputItem,
    InputMessageItem,
    ItemStatus,
    MessageItem,
    OutputItem,
    ResponseObject,
    ResponseUsage,
)
from ..types.updates import (
    AgentRunResult,
    ChatMessage,
    Content,
    FunctionCallContent,
    FunctionResultContent,
    TextContent,
    UsageContent,
)

logger = logging.getLogger("agenthost")


def generate_response_id() -> str:
    """Generate a unique response ID."""
    return f"resp_{uuid4().hex[:32]}"


def generate_message_id() -> str:
    """Generate a unique message ID."""
    return f"msg_{uuid4().hex[:24]}"


# =============================================================================
# Responses API input -> chat messages
# =============================================================================


def normalize_input(input_: Any) -> list[InputMessageItem]:
    """Turn a bare string input into a one-message input array."""
    if isinstance(input_, str):
        return [{
            "type": "message",
            "role": "user",
            "content": [{"type": "input_text", "text": input_}],
        }]
    if isinstance(input_, list):
        return input_
    raise InvalidRequestError(
        "'input' must be a string or an array of input items",
        code="invalid_input",
    )


def _content_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") in ("input_text", "output_text", "text"):
                parts.append(part.get("text", ""))
            else:
                logger.debug(f"Skipping unsupported input part: {part!r:.100}")
        return "".join(parts)
    return ""


def request_input_to_messages(input_: Any) -> list[ChatMessage]:
    """Convert the request's ``input`` into chat messages for an agent.

    Args:
        input_: A string, or a list of message / function_call_output items

    Returns:
        Chat messages in input order

    Raises:
        InvalidRequestError: If the input has an unsupported shape
    """
    messages: list[ChatMessage] = []

    for item in normalize_input(input_):
        if not isinstance(item, dict):
            raise InvalidRequestError("Input items must be objects", code="invalid_input")

        item_type = item.get("type", "message")
        if item_type == "message":
            role = item.get("role", "user")
            messages.append(ChatMessage.from_text(role, _content_text(item.get("content"))))
        elif item_type == "function_call_output":
            messages.append(ChatMessage(
                role="tool",
                contents=[FunctionResultContent(
                    call_id=str(item.get("call_id", "")),
                    result=item.get("output"),
                )],
            ))
        else:
            raise InvalidRequestError(
                f"Unsupported input item type '{item_type}'",
                code="invalid_input",
            )

    return messages


# =============================================================================
# Agent output -> Responses API output items
# =============================================================================


def build_message_item(
    text: str,
    message_id: Optional[str],
    status: ItemStatus = "completed",
) -> MessageItem:
    """Build an assistant message item holding one output_text part."""
    return {
        "id": message_id or generate_message_id(),
        "type": "message",
        "role": "assistant",
        "status": status,
        "content": [{
            "type": "output_text",
            "text": text,
            "annotations": [],
        }],
    }


def _stringify_result(result: Any) -> str:
    if isinstance(result, str):
        return result
    try:
        return json.dumps(result, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(result)


def contents_to_output_items(
    contents: Sequence[Content],
    message_id: Optional[str] = None,
    status: ItemStatus = "completed",
) -> list[OutputItem]:
    """Build output items from one message's contents.

    Text parts collapse into a single message item; function calls and
    results each become their own item.
    """
    output: list[OutputItem] = []
    text = "".join(c.text for c in contents if isinstance(c, TextContent))
    if text:
        output.append(build_message_item(text, message_id, status))

    for content in contents:
        if isinstance(content, FunctionCallContent):
            call_item: FunctionCallItem = {
                "id": content.call_id,
                "type": "function_call",
                "call_id": content.call_id,
                "name": content.name,
                "arguments": content.arguments,
                "status": "completed",
            }
            output.append(call_item)
        elif isinstance(content, FunctionResultContent):
            result_item: FunctionCallOutputItem = {
                "id": f"fco_{content.call_id}",
                "type": "function_call_output",
                "call_id": content.call_id,
                "output": _stringify_result(content.result),
            }
            output.append(result_item)

    return output


def convert_usage(usage: Optional[UsageContent]) -> ResponseUsage:
    """Convert agent usage details to Responses API format."""
    if usage is None:
        return {}
    total = usage.total_tokens or (usage.input_tokens + usage.output_tokens)
    return {
        "input_tokens": usage.input_tokens,
        "output_tokens": usage.output_tokens,
        "total_tokens": total,
    }


def _collect_usage(result: AgentRunResult) -> Optional[UsageContent]:
    if result.usage is not None:
        return result.usage
    found = [
        c for m in result.messages for c in m.contents if isinstance(c, UsageContent)
    ]
    if not found:
        return None
    return UsageContent(
        input_tokens=sum(u.input_tokens for u in found),
        output_tokens=sum(u.output_tokens for u in found),
        total_tokens=sum(u.total_tokens for u in found),
    )


def agent_run_result_to_response(
    result: AgentRunResult,
    model: str,
    response_id: Optional[str] = None,
    metadata: Optional[dict[str, str]] = None,
) -> ResponseObject:
    """Convert a complete agent run into a Responses API object.

    Args:
        result: The aggregated agent result
        model: Entity name reported as the response model
        response_id: Response ID to use when the result has none
        metadata: Request metadata to echo back

    Returns:
        Responses API response object
    """
    output: list[OutputItem] = []
    for message in result.messages:
        if message.role not in ("assistant", "tool"):
            continue
        output.extend(contents_to_output_items(message.contents, message.message_id))

    response: ResponseObject = {
        "id": result.response_id or response_id or generate_response_id(),
        "object": "response",
        "created_at": result.created_at,
        "completed_at": time.time(),
        "status": "completed",
        "model": model,
        "output": output,
        "output_text": "".join(m.text for m in result.messages if m.role == "assistant"),
        "error": None,
        "incomplete_details": None,
        "metadata": metadata or {},
    }

    usage = convert_usage(_collect_usage(result))
    if usage:
        response["usage"] = usage

    return response
