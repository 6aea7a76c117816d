"""Streaming serialization of node trees to byte sinks."""

from __future__ import annotations

import html
import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, Protocol, Union

from .dom_model import Fragment, Node, Raw, Text
from .errors import BuildError, RenderCancelled, RenderError

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"
DEFAULT_CHUNK_SIZE = 8 * 1024

Renderable = Union[Node, Fragment, Text, Raw]


@dataclass(frozen=True)
class _Close:
    tag: str


class Sink(Protocol):
    def write(self, data: bytes) -> Any:
        ...


class StreamSink:
    """Bounded write buffer in front of a binary stream.

    Data is handed to the stream whenever the buffer reaches ``chunk_size``,
    so memory use does not grow with the document.
    """

    def __init__(self, stream: BinaryIO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.stream = stream
        self.chunk_size = chunk_size
        self.cancelled = False
        self.bytes_written = 0
        self._buffer = bytearray()

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    def cancel(self) -> None:
        """Drop buffered output and fail every later write."""

        self.cancelled = True
        self.discard()

    def discard(self) -> None:
        self._buffer.clear()

    def write(self, data: bytes) -> int:
        if self.cancelled:
            raise RenderCancelled("output sink was cancelled")
        self._buffer += data
        if len(self._buffer) >= self.chunk_size:
            self._drain()
        return len(data)

    def flush(self) -> None:
        if self.cancelled:
            raise RenderCancelled("output sink was cancelled")
        self._drain()
        flush = getattr(self.stream, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as exc:
            raise RenderError(f"failed flushing output stream: {exc}") from exc

    def _drain(self) -> None:
        if not self._buffer:
            return
        pending = memoryview(bytes(self._buffer))
        self._buffer.clear()
        # Raw streams may accept only part of a write; keep going until done.
        while pending:
            try:
                count = self.stream.write(pending)
            except (OSError, ValueError) as exc:
                raise RenderError(f"failed writing to output stream: {exc}") from exc
            if count is None:
                count = len(pending)
            if count <= 0:
                raise RenderError(
                    f"output stream accepted no bytes ({len(pending)} pending)"
                )
            self.bytes_written += count
            pending = pending[count:]


@contextmanager
def open_sink(
    target: Union[str, Path, BinaryIO], *, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[StreamSink]:
    """Yield a StreamSink for a path or stream, flushed on clean exit.

    Files opened here are closed on exit. On error the pending buffer is
    discarded rather than written. Stream failures while flushing or closing
    surface as RenderError.
    """

    owns_stream = isinstance(target, (str, Path))
    try:
        stream: BinaryIO = open(target, "wb") if owns_stream else target  # type: ignore[arg-type]
    except OSError as exc:
        raise RenderError(f"cannot open {target} for writing: {exc}") from exc
    sink = StreamSink(stream, chunk_size=chunk_size)
    try:
        yield sink
        if not sink.cancelled:
            sink.flush()
    except BaseException:
        sink.discard()
        if owns_stream:
            _close_after_error(stream)
        raise
    if owns_stream:
        try:
            stream.close()
        except OSError as exc:
            raise RenderError(f"failed closing {target}: {exc}") from exc


def _close_after_error(stream: BinaryIO) -> None:
    # The error already propagating is the one worth reporting.
    try:
        stream.close()
    except OSError as exc:
        logger.debug("ignoring close failure after error: %s", exc)


def escape_text(value: str) -> str:
    """Escape text content: ``&``, ``<`` and ``>``."""

    return html.escape(value, quote=False)


def escape_attr(value: str) -> str:
    """Escape an attribute value, quotes included."""

    return html.escape(value, quote=True)


def _render_attrs(attrs: Dict[str, str]) -> str:
    if not attrs:
        return ""
    parts = [f'{name}="{escape_attr(value)}"' for name, value in attrs.items()]
    return " " + " ".join(parts)


def iter_markup(root: Renderable) -> Iterator[str]:
    """Yield markup pieces for ``root`` in document order.

    The traversal keeps its own stack, so tree depth is not bounded by the
    interpreter recursion limit. Anything that is not a tree value, bare
    strings included, raises BuildError instead of being written out.
    """

    if isinstance(root, Node) and root.tag == "html":
        yield DOCTYPE
    stack: list[Any] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, _Close):
            yield f"</{item.tag}>"
        elif isinstance(item, Text):
            yield escape_text(item.content)
        elif isinstance(item, Raw):
            yield item.markup
        elif isinstance(item, Fragment):
            stack.extend(reversed(item.children))
        elif isinstance(item, Node):
            attrs = _render_attrs(item.attrs)
            if item.is_void:
                yield f"<{item.tag}{attrs}/>"
                continue
            yield f"<{item.tag}{attrs}>"
            stack.append(_Close(item.tag))
            stack.extend(reversed(item.children))
        else:
            raise BuildError(f"cannot render {type(item).__name__}")


def _write(sink: Sink, data: bytes) -> None:
    if getattr(sink, "cancelled", False):
        raise RenderCancelled("output sink was cancelled")
    try:
        sink.write(data)
    except RenderError:
        raise
    except (OSError, ValueError) as exc:
        raise RenderError(f"failed writing to output sink: {exc}") from exc


def render(root: Renderable, sink: Sink) -> int:
    """Serialize ``root`` to ``sink`` as UTF-8 and return the byte count.

    Any sink failure stops the traversal at once and surfaces as RenderError
    (RenderCancelled when the sink was cancelled).
    """

    total = 0
    for piece in iter_markup(root):
        data = piece.encode("utf-8")
        _write(sink, data)
        total += len(data)

    flush = getattr(sink, "flush", None)
    if flush is not None:
        try:
            flush()
        except RenderError:
            raise
        except (OSError, ValueError) as exc:
            raise RenderError(f"failed flushing output sink: {exc}") from exc

    logger.debug("rendered <%s> (%d bytes)", getattr(root, "tag", type(root).__name__), total)
    return total


def render_to_bytes(root: Renderable) -> bytes:
    """Render into memory; meant for tests and small fragments."""

    buffer = io.BytesIO()
    render(root, buffer)
    return buffer.getvalue()


def render_to_string(root: Renderable) -> str:
    return render_to_bytes(root).decode("utf-8")


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DOCTYPE",
    "Renderable",
    "Sink",
    "StreamSink",
    "escape_attr",
    "escape_text",
    "iter_markup",
    "open_sink",
    "render",
    "render_to_bytes",
    "render_to_string",
]
