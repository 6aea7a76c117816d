"""Filesystem utilities for pagegen."""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, Path]


def ensure_parent(path: PathLike) -> Path:
    """Create the parent directory of ``path`` if needed and return the Path."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


@contextmanager
def staged_output(path: PathLike) -> Iterator[Path]:
    """Yield a temporary sibling of ``path``, renamed over it on success.

    If the block raises, the temporary file is removed and ``path`` keeps
    whatever it held before.
    """

    target = ensure_parent(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        os.replace(tmp_path, target)
    finally:
        tmp_path.unlink(missing_ok=True)


__all__ = ["ensure_parent", "staged_output"]
