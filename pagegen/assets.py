"""Compressed size reporting for static assets."""

from __future__ import annotations

import gzip
import io
import logging
import math
import zlib
from pathlib import Path
from typing import NamedTuple, Union

from .errors import AssetReadError, CompressionError

logger = logging.getLogger(__name__)

BEST_COMPRESSION = 9
_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


class AssetSize(NamedTuple):
    compressed_size: int
    human_readable: str


def human_bytes(size: int) -> str:
    """Format a byte count with decimal prefixes, e.g. "512 B", "1.5 kB", "12 kB"."""

    if size < 0:
        raise ValueError("size must not be negative")
    if size < 10:
        return f"{size} B"
    exponent = 0
    while exponent < len(_UNITS) - 1 and size >= 1000 ** (exponent + 1):
        exponent += 1
    value = math.floor(size / 1000**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {_UNITS[exponent]}"
    return f"{value:.0f} {_UNITS[exponent]}"


def gzip_size(payload: bytes, *, level: int = BEST_COMPRESSION) -> int:
    """Return the gzip-compressed size of ``payload``; the output is discarded."""

    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(f"payload must be bytes, got {type(payload).__name__}")
    buffer = io.BytesIO()
    try:
        # mtime is pinned so the same payload always yields the same size.
        with gzip.GzipFile(fileobj=buffer, mode="wb", compresslevel=level, mtime=0) as stream:
            stream.write(payload)
    except (OSError, zlib.error) as exc:
        raise CompressionError(f"could not finalize gzip stream: {exc}") from exc
    return buffer.getbuffer().nbytes


def compress_and_describe(payload: bytes) -> AssetSize:
    """Compress at maximum level and report the compressed size."""

    size = gzip_size(payload)
    described = AssetSize(size, human_bytes(size))
    logger.info(
        "compressed %d bytes to %d (%s)",
        len(payload),
        described.compressed_size,
        described.human_readable,
    )
    return described


def describe_asset(path: Union[str, Path]) -> AssetSize:
    """Read an asset from disk and describe its compressed size."""

    asset_path = Path(path)
    try:
        payload = asset_path.read_bytes()
    except OSError as exc:
        raise AssetReadError(f"could not read asset {asset_path}: {exc}") from exc
    return compress_and_describe(payload)


__all__ = [
    "AssetSize",
    "BEST_COMPRESSION",
    "compress_and_describe",
    "describe_asset",
    "gzip_size",
    "human_bytes",
]
