"""Records stored in the persons file and the demerit ledger."""

from __future__ import annotations

import re
from dataclasses import dataclass

FIELD_SEPARATOR = "|"
PERSON_FIELDS = 5
OFFENSE_FIELDS = 3
POINTS_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True)
class PersonRecord:
    """One line of the persons file.

    ``address`` embeds four more separators. A line needs at least five
    top-level parts; the first three are taken from the left, the birthdate
    from the right and the address is whatever remains between them.
    """

    person_id: str
    first_name: str
    last_name: str
    address: str
    birthdate: str

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join(
            [self.person_id, self.first_name, self.last_name, self.address, self.birthdate]
        )

    @classmethod
    def from_line(cls, line: str) -> PersonRecord | None:
        if line.count(FIELD_SEPARATOR) < PERSON_FIELDS - 1:
            return None
        person_id, first_name, last_name, rest = line.split(FIELD_SEPARATOR, 3)
        address, _, birthdate = rest.rpartition(FIELD_SEPARATOR)
        return cls(person_id, first_name, last_name, address, birthdate)


@dataclass(slots=True)
class OffenseRecord:
    """One line of the demerit ledger."""

    person_id: str
    offense_date: str
    points: int

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join([self.person_id, self.offense_date, str(self.points)])

    @classmethod
    def from_line(cls, line: str) -> OffenseRecord | None:
        parts = line.split(FIELD_SEPARATOR, OFFENSE_FIELDS - 1)
        if len(parts) < OFFENSE_FIELDS:
            return None
        if not POINTS_RE.fullmatch(parts[2]):
            return None
        return cls(person_id=parts[0], offense_date=parts[1], points=int(parts[2]))


__all__ = ["FIELD_SEPARATOR", "OffenseRecord", "PersonRecord"]
