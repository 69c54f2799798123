from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from demerits.models import OffenseRecord
from demerits.utils.textfile import append_line, read_lines
from demerits.utils.validators import parse_date

logger = logging.getLogger(__name__)

MIN_POINTS = 1
MAX_POINTS = 6


def valid_points(points: object) -> bool:
    if isinstance(points, bool) or not isinstance(points, int):
        return False
    return MIN_POINTS <= points <= MAX_POINTS


def append_offense(path: Path, record: OffenseRecord) -> None:
    append_line(path, record.to_line())
    logger.debug(
        "Recorded %s point(s) for %s on %s",
        record.points,
        record.person_id,
        record.offense_date,
    )


def load_offenses(path: Path, person_id: Optional[str] = None) -> List[OffenseRecord]:
    offenses: List[OffenseRecord] = []
    for line in read_lines(path):
        record = OffenseRecord.from_line(line)
        if record is None:
            if line.count("|") >= 2:
                logger.warning("Skipping unreadable ledger line: %r", line)
            continue
        if person_id is not None and record.person_id != person_id:
            continue
        offenses.append(record)
    return offenses


def points_since(path: Path, person_id: str, cutoff: date) -> int:
    """Sum the points recorded for ``person_id`` on or after ``cutoff``."""

    total = 0
    for record in load_offenses(path, person_id):
        offense_date = parse_date(record.offense_date)
        if offense_date is None:
            logger.warning("Skipping ledger entry with bad date: %s", record.to_line())
            continue
        if offense_date >= cutoff:
            total += record.points
    return total


__all__ = ["MAX_POINTS", "MIN_POINTS", "append_offense", "load_offenses", "points_since", "valid_points"]
