"""SSE (Server-Sent Events) frame encoding and decoding."""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def encode_sse_event(event: Mapping[str, Any]) -> bytes:
    """Encode one protocol event as a single SSE frame.

    The ``type`` field doubles as the SSE event name.
    """
    event_type = event["type"]
    json_str = json.dumps(event, ensure_ascii=False)
    return f"event: {event_type}\ndata: {json_str}\n\n".encode("utf-8")


@dataclass
class SSEEvent:
    data: Optional[str]
    event: Optional[str] = None
    other_lines: list[str] = field(default_factory=list)

    def json(self) -> Any:
        if self.data is None:
            return None
        return json.loads(self.data)


class SSEDecoder:
    """Incrementally split a byte stream into SSE frames."""

    def __init__(self) -> None:
        self._buffer = ""

    def feed(self, chunk: bytes) -> list[SSEEvent]:
        if not chunk:
            return []
        text = chunk.decode("utf-8", errors="replace")
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        self._buffer += text
        events: list[SSEEvent] = []

        while True:
            sep_index = self._buffer.find("\n\n")
            if sep_index == -1:
                break
            raw_event = self._buffer[:sep_index]
            self._buffer = self._buffer[sep_index + 2:]
            if not raw_event.strip():
                continue
            events.append(self._parse_event(raw_event))

        return events

    def flush(self) -> Optional[bytes]:
        if not self._buffer:
            return None
        leftover = self._buffer
        self._buffer = ""
        return leftover.encode("utf-8")

    @staticmethod
    def _parse_event(raw: str) -> SSEEvent:
        data_lines: list[str] = []
        other_lines: list[str] = []
        event_name: Optional[str] = None
        for line in raw.split("\n"):
            if line.startswith("data:"):
                data_lines.append(line[5:].lstrip())
            elif line.startswith("event:"):
                event_name = line[6:].strip()
            else:
                other_lines.append(line)
        data = "\n".join(data_lines) if data_lines else None
        return SSEEvent(data=data, event=event_name, other_lines=other_lines)
