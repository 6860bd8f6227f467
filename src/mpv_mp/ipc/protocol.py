"""mpv JSON IPC protocol client.

Requests are single newline-terminated lines: either plain input.conf style
commands (``cycle pause``) or JSON objects (``{"command": [...]}``).
Replies are not framed. A read drains whatever mpv wrote within a short
window, which may hold several concatenated JSON messages including
unsolicited events, so decoding walks the buffer message by message.
"""

import json
import socket
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

from loguru import logger

from mpv_mp.core.exceptions import PropertyTypeError, ProtocolError

RECEIVE_WINDOW = 0.1  # seconds
RECV_CHUNK_SIZE = 4096


class PropertyKind(Enum):
    """Kinds of value an mpv property can hold."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True)
class PropertyValue:
    """Decoded property value tagged with its kind.

    Callers assert the kind they expect through the ``as_*`` accessors,
    which raise PropertyTypeError on mismatch.
    """

    name: str
    kind: PropertyKind
    data: Any

    @classmethod
    def from_data(cls, name: str, data: Any) -> "PropertyValue":
        # bool before number: bool is an int subclass
        if isinstance(data, bool):
            kind = PropertyKind.BOOLEAN
        elif isinstance(data, (int, float)):
            kind = PropertyKind.NUMBER
        elif isinstance(data, str):
            kind = PropertyKind.STRING
        elif isinstance(data, list):
            kind = PropertyKind.SEQUENCE
        elif isinstance(data, dict):
            kind = PropertyKind.MAPPING
        else:
            raise PropertyTypeError(name, "a value", _json_type_name(data))
        return cls(name=name, kind=kind, data=data)

    def _expect(self, kind: PropertyKind) -> Any:
        if self.kind is not kind:
            raise PropertyTypeError(self.name, kind.value, self.kind.value)
        return self.data

    def as_bool(self) -> bool:
        return self._expect(PropertyKind.BOOLEAN)

    def as_number(self) -> int | float:
        return self._expect(PropertyKind.NUMBER)

    def as_str(self) -> str:
        return self._expect(PropertyKind.STRING)

    def as_list(self) -> list:
        return self._expect(PropertyKind.SEQUENCE)

    def as_dict(self) -> dict:
        return self._expect(PropertyKind.MAPPING)


def _json_type_name(data: Any) -> str:
    if data is None:
        return "null"
    return type(data).__name__


def quote_argument(value: str) -> str:
    """Quote a command argument for mpv's input command syntax."""
    # mpv accepts C-style escapes inside double quotes, same as JSON strings
    return json.dumps(value, ensure_ascii=False)


def format_loadfile(path: str, mode: str) -> str:
    return f"loadfile {quote_argument(path)} {mode}"


def format_loadlist(path: str, mode: str) -> str:
    return f"loadlist {quote_argument(path)} {mode}"


def iter_messages(raw: bytes) -> Iterator[Any]:
    """Yield each JSON message found in a drained buffer, in order.

    Undecodable text is skipped up to the next newline. Stops at the end of
    the buffer; a truncated trailing message is dropped.
    """
    text = raw.decode("utf-8", errors="replace")
    decoder = json.JSONDecoder()
    pos, end = 0, len(text)

    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return

        try:
            message, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            newline = text.find("\n", pos)
            logger.debug(f"Skipping undecodable data at offset {pos}: {e.msg}")
            if newline == -1:
                return
            pos = newline + 1
            continue

        yield message


def is_reply(message: Any, request_id: Optional[int] = None) -> bool:
    """Check if a message is a command reply rather than an event.

    Replies carry an ``error`` string; events carry an ``event`` name. A reply
    with a different integer ``request_id`` belongs to another request.
    """
    if not isinstance(message, dict) or "event" in message:
        return False
    if not isinstance(message.get("error"), str):
        return False

    reply_id = message.get("request_id")
    if (
        request_id is not None
        and isinstance(reply_id, int)
        and not isinstance(reply_id, bool)
        and reply_id != request_id
    ):
        logger.debug(f"Skipping reply for request {reply_id}, waiting for {request_id}")
        return False

    return True


def find_reply(raw: bytes, request_id: Optional[int] = None) -> Optional[dict]:
    """Return the first reply in a drained buffer, or None."""
    for message in iter_messages(raw):
        if is_reply(message, request_id):
            return message
        logger.debug(f"Ignoring message: {message!r}")
    return None


class Channel:
    """One connection to the mpv IPC socket.

    Strictly synchronous: one request at a time, then a timed drain.
    """

    def __init__(self, sock: socket.socket):
        self.sock = sock
        self._next_request_id = 1

    def close(self) -> None:
        self.sock.close()

    def send_command(self, text: str) -> None:
        """Send one command line.

        Raises:
            ProtocolError: If the write fails or is partial
        """
        data = f"{text}\n".encode("utf-8")
        try:
            sent = self.sock.send(data)
        except OSError as e:
            raise ProtocolError(f"couldn't send command {text!r}: {e}") from e

        if sent != len(data):
            raise ProtocolError(
                f"incorrect arg {text!r}: sent {sent} of {len(data)} bytes"
            )
        logger.debug(f"-> {text}")

    def receive_raw(self) -> bytes:
        """Drain everything mpv sends within RECEIVE_WINDOW.

        Timeout, peer close and I/O errors all just end the drain, so the
        result may be empty.
        """
        deadline = time.monotonic() + RECEIVE_WINDOW
        buf = bytearray()

        try:
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                try:
                    self.sock.settimeout(remaining)
                    chunk = self.sock.recv(RECV_CHUNK_SIZE)
                except OSError:  # includes socket.timeout
                    break
                if not chunk:
                    break
                buf.extend(chunk)
        finally:
            try:
                self.sock.settimeout(None)
            except OSError:
                pass  # socket already closed by the peer side

        logger.debug(f"<- {len(buf)} bytes")
        return bytes(buf)

    def get_property(self, name: str) -> PropertyValue:
        """Query a property and return its decoded value.

        Raises:
            ProtocolError: If no reply can be decoded or mpv reports an error
            PropertyTypeError: If the value is null or not a JSON value kind
        """
        request_id = self._next_request_id
        self._next_request_id += 1

        request = {"command": ["get_property", name], "request_id": request_id}
        self.send_command(json.dumps(request))

        reply = find_reply(self.receive_raw(), request_id)
        if reply is None:
            raise ProtocolError(f"couldn't get property {name!r}")
        if reply["error"] != "success":
            raise ProtocolError(f"couldn't get property {name!r}: {reply['error']}")

        return PropertyValue.from_data(name, reply.get("data"))
