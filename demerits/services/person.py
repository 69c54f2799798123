from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from demerits.config import Config, load_config
from demerits.errors import StoreError, ValidationFailure
from demerits.models import OffenseRecord, PersonRecord
from demerits.utils.ledger import append_offense, points_since, valid_points
from demerits.utils.persons_store import append_person, find_person, replace_person
from demerits.utils.validators import (
    age_on,
    parse_date,
    validate_address,
    validate_date,
    validate_person_id,
    window_start,
)

logger = logging.getLogger(__name__)

SUCCESS = "Success"
FAILED = "Failed"

MINOR_AGE = 18
YOUNG_DRIVER_AGE = 21
YOUNG_DRIVER_THRESHOLD = 6
DEFAULT_THRESHOLD = 12


def check_record(record: PersonRecord) -> None:
    if not validate_person_id(record.person_id):
        raise ValidationFailure(f"Invalid person ID: {record.person_id!r}")
    if not validate_address(record.address):
        raise ValidationFailure(f"Invalid address: {record.address!r}")
    if not validate_date(record.birthdate):
        raise ValidationFailure(f"Invalid birthdate: {record.birthdate!r}")


def check_update_allowed(
    current: PersonRecord,
    original_id: str,
    proposed: PersonRecord,
    *,
    today: Optional[date] = None,
) -> None:
    """Raise ValidationFailure if ``current`` may not become ``proposed``.

    Rules, checked in order:
    - the proposed ID, address and birthdate are well formed;
    - a person under 18 keeps their address;
    - a birthdate change is the only change;
    - an ID starting with an even digit never changes.
    """

    check_record(proposed)

    born = parse_date(current.birthdate)
    if born is None:
        raise ValidationFailure(f"Stored birthdate is unreadable: {current.birthdate!r}")
    age = age_on(born, today or date.today())
    if age < MINOR_AGE and proposed.address != current.address:
        raise ValidationFailure(f"Address cannot change while under {MINOR_AGE} (age {age})")

    if proposed.birthdate != current.birthdate:
        others_changed = (
            proposed.person_id != original_id
            or proposed.first_name != current.first_name
            or proposed.last_name != current.last_name
            or proposed.address != current.address
        )
        if others_changed:
            raise ValidationFailure("Birthdate must be changed on its own")

    first = original_id[:1]
    if first.isdigit() and int(first) % 2 == 0 and proposed.person_id != original_id:
        raise ValidationFailure(f"ID {original_id!r} starts with an even digit and cannot change")


def suspension_threshold(age: int) -> int:
    return YOUNG_DRIVER_THRESHOLD if age < YOUNG_DRIVER_AGE else DEFAULT_THRESHOLD


class Person:
    """A person held in memory and persisted to the registry files.

    Nothing is written until :meth:`add_person` or
    :meth:`update_personal_details` succeeds.
    """

    def __init__(
        self,
        person_id: str,
        first_name: str,
        last_name: str,
        address: str,
        birthdate: str,
        *,
        config: Optional[Config] = None,
    ) -> None:
        self.person_id = person_id
        self.first_name = first_name
        self.last_name = last_name
        self.address = address
        self.birthdate = birthdate
        self.config = config or load_config()
        self._suspended = False

    def __repr__(self) -> str:
        return f"Person(person_id={self.person_id!r}, suspended={self._suspended})"

    @classmethod
    def from_record(cls, record: PersonRecord, config: Optional[Config] = None) -> Person:
        return cls(
            record.person_id,
            record.first_name,
            record.last_name,
            record.address,
            record.birthdate,
            config=config,
        )

    @classmethod
    def load(cls, person_id: str, config: Optional[Config] = None) -> Optional[Person]:
        """Build a person from the first stored line with ``person_id``."""

        config = config or load_config()
        try:
            record = find_person(config.persons_file, person_id)
        except StoreError:
            logger.exception("Could not load person %s", person_id)
            return None
        if record is None:
            return None
        return cls.from_record(record, config)

    def to_record(self) -> PersonRecord:
        return PersonRecord(
            person_id=self.person_id,
            first_name=self.first_name,
            last_name=self.last_name,
            address=self.address,
            birthdate=self.birthdate,
        )

    def is_suspended(self) -> bool:
        return self._suspended

    def add_person(self) -> bool:
        record = self.to_record()
        try:
            check_record(record)
        except ValidationFailure as exc:
            logger.debug("Rejected new person: %s", exc.reason)
            return False

        try:
            append_person(self.config.persons_file, record)
        except StoreError:
            logger.exception("Could not store person %s", self.person_id)
            return False
        return True

    def update_personal_details(
        self,
        original_id: str,
        new_id: str,
        new_first_name: str,
        new_last_name: str,
        new_address: str,
        new_birthdate: str,
        *,
        today: Optional[date] = None,
    ) -> bool:
        proposed = PersonRecord(
            person_id=new_id,
            first_name=new_first_name,
            last_name=new_last_name,
            address=new_address,
            birthdate=new_birthdate,
        )
        try:
            check_update_allowed(self.to_record(), original_id, proposed, today=today)
        except ValidationFailure as exc:
            logger.debug("Rejected update of %s: %s", original_id, exc.reason)
            return False

        try:
            replace_person(self.config.persons_file, original_id, proposed)
        except StoreError:
            logger.exception("Could not update person %s", original_id)
            return False

        # Memory follows the file only once the rewrite has gone through.
        self.person_id = proposed.person_id
        self.first_name = proposed.first_name
        self.last_name = proposed.last_name
        self.address = proposed.address
        self.birthdate = proposed.birthdate
        return True

    def add_demerit_points(self, offense_date: str, points: int) -> str:
        offense_day = parse_date(offense_date)
        if offense_day is None:
            logger.debug("Rejected offense date %r", offense_date)
            return FAILED
        if not valid_points(points):
            logger.debug("Rejected demerit points %r", points)
            return FAILED

        ledger_file = self.config.demerits_file
        try:
            append_offense(
                ledger_file,
                OffenseRecord(person_id=self.person_id, offense_date=offense_date, points=points),
            )
        except StoreError:
            logger.exception("Could not record offense for %s", self.person_id)
            return FAILED

        try:
            total = points_since(ledger_file, self.person_id, window_start(offense_day))
        except StoreError:
            logger.warning(
                "Offense for %s recorded but the ledger could not be re-read", self.person_id
            )
            return SUCCESS

        born = parse_date(self.birthdate)
        if born is None:
            logger.warning("Birthdate %r of %s is unreadable", self.birthdate, self.person_id)
            return SUCCESS

        threshold = suspension_threshold(age_on(born, offense_day))
        if total > threshold and not self._suspended:
            self._suspended = True
            logger.info(
                "Person %s suspended: %s points in two years (limit %s)",
                self.person_id,
                total,
                threshold,
            )
        return SUCCESS


__all__ = [
    "FAILED",
    "Person",
    "SUCCESS",
    "check_record",
    "check_update_allowed",
    "suspension_threshold",
]
