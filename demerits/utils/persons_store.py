from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from demerits.models import PersonRecord
from demerits.utils.textfile import append_line, read_lines, write_lines

logger = logging.getLogger(__name__)


def append_person(path: Path, record: PersonRecord) -> None:
    append_line(path, record.to_line())
    logger.debug("Stored person %s in %s", record.person_id, path)


def replace_person(path: Path, original_id: str, record: PersonRecord) -> bool:
    """Rewrite the store with the first line for ``original_id`` replaced.

    Later lines with the same ID and malformed lines are kept as they are.
    Returns whether a line was replaced.
    """

    lines = read_lines(path)
    updated: List[str] = []
    replaced = False

    for line in lines:
        stored = PersonRecord.from_line(line)
        if not replaced and stored is not None and stored.person_id == original_id:
            updated.append(record.to_line())
            replaced = True
        else:
            updated.append(line)

    write_lines(path, updated)
    if not replaced:
        logger.warning("No stored person with ID %s in %s", original_id, path)
    return replaced


def iter_persons(path: Path) -> Iterator[PersonRecord]:
    for line in read_lines(path):
        record = PersonRecord.from_line(line)
        if record is not None:
            yield record


def load_persons(path: Path) -> List[PersonRecord]:
    if not path.exists():
        return []
    return list(iter_persons(path))


def find_person(path: Path, person_id: str) -> Optional[PersonRecord]:
    for record in load_persons(path):
        if record.person_id == person_id:
            return record
    return None


__all__ = [
    "append_person",
    "find_person",
    "load_persons",
    "replace_person",
]
