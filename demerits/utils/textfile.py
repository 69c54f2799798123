"""Line-oriented access to the UTF-8 store files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from demerits.errors import StoreError


def read_lines(path: Path) -> List[str]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return [line.rstrip("\n") for line in fh]
    except OSError as exc:
        raise StoreError(f"Cannot read {path}") from exc


def append_line(path: Path, line: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8", newline="\n") as fh:
            fh.write(line + "\n")
    except OSError as exc:
        raise StoreError(f"Cannot append to {path}") from exc


def write_lines(path: Path, lines: List[str]) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.writelines(line + "\n" for line in lines)
    except OSError as exc:
        raise StoreError(f"Cannot write {path}") from exc
