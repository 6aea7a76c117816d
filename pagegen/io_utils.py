"""Utility helpers for YAML config IO and console messages."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
