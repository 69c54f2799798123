from datetime import date

import pytest

from demerits.errors import StoreError
from demerits.models import OffenseRecord, PersonRecord
from demerits.utils.ledger import append_offense, load_offenses, points_since, valid_points
from demerits.utils.persons_store import append_person, find_person, load_persons, replace_person

ADDRESS = "12|Main St|Melbourne|Victoria|Australia"


def _record(person_id: str, last_name: str = "Smith") -> PersonRecord:
    return PersonRecord(person_id, "Jo", last_name, ADDRESS, "01-01-1990")


def test_person_record_line_keeps_address_whole():
    record = _record("23#@abABXY")
    line = record.to_line()
    assert line == "23#@abABXY|Jo|Smith|12|Main St|Melbourne|Victoria|Australia|01-01-1990"
    assert PersonRecord.from_line(line) == record
    assert PersonRecord.from_line("a|b|c|d|e") == PersonRecord("a", "b", "c", "d", "e")
    assert PersonRecord.from_line("only|four|parts|here") is None


def test_append_person_creates_missing_file(tmp_path):
    path = tmp_path / "nested" / "persons.txt"
    append_person(path, _record("23#@abABXY"))
    append_person(path, _record("23#@abABXY"))
    assert path.read_text(encoding="utf-8").splitlines() == [_record("23#@abABXY").to_line()] * 2


def test_replace_person_touches_only_first_match(tmp_path):
    path = tmp_path / "persons.txt"
    path.write_text(
        "broken|line\n"
        + _record("23#@abABXY", "First").to_line() + "\n"
        + _record("35!!cdCDZZ").to_line() + "\n"
        + _record("23#@abABXY", "Second").to_line() + "\n",
        encoding="utf-8",
    )

    replaced = replace_person(path, "23#@abABXY", _record("23#@abABXY", "Changed"))

    assert replaced
    assert path.read_text(encoding="utf-8").splitlines() == [
        "broken|line",
        _record("23#@abABXY", "Changed").to_line(),
        _record("35!!cdCDZZ").to_line(),
        _record("23#@abABXY", "Second").to_line(),
    ]


def test_replace_person_without_match_keeps_lines(tmp_path):
    path = tmp_path / "persons.txt"
    path.write_text(_record("35!!cdCDZZ").to_line() + "\n", encoding="utf-8")
    assert not replace_person(path, "23#@abABXY", _record("23#@abABXY"))
    assert path.read_text(encoding="utf-8") == _record("35!!cdCDZZ").to_line() + "\n"


def test_replace_person_missing_file(tmp_path):
    with pytest.raises(StoreError):
        replace_person(tmp_path / "persons.txt", "23#@abABXY", _record("23#@abABXY"))


def test_find_person_returns_first_match(tmp_path):
    path = tmp_path / "persons.txt"
    append_person(path, _record("23#@abABXY", "First"))
    append_person(path, _record("23#@abABXY", "Second"))
    assert find_person(path, "23#@abABXY").last_name == "First"
    assert find_person(path, "99!!cdefXY") is None
    assert load_persons(tmp_path / "absent.txt") == []


def test_valid_points_range():
    assert [p for p in range(-1, 9) if valid_points(p)] == [1, 2, 3, 4, 5, 6]
    assert not valid_points(True)
    assert not valid_points(3.0)
    assert not valid_points("3")


def test_load_offenses_skips_malformed_lines(tmp_path):
    path = tmp_path / "demeritPoints.txt"
    path.write_text(
        "23#@abABXY|01-01-2023|3\n"
        "garbage\n"
        "23#@abABXY|02-01-2023|x\n"
        "35!!cdCDZZ|03-01-2023|2\n",
        encoding="utf-8",
    )
    assert load_offenses(path, "23#@abABXY") == [OffenseRecord("23#@abABXY", "01-01-2023", 3)]
    assert len(load_offenses(path)) == 2


def test_points_since_counts_cutoff_day(tmp_path):
    path = tmp_path / "demeritPoints.txt"
    append_offense(path, OffenseRecord("23#@abABXY", "14-03-2021", 4))
    append_offense(path, OffenseRecord("23#@abABXY", "15-03-2021", 2))
    append_offense(path, OffenseRecord("23#@abABXY", "01-01-2023", 1))
    append_offense(path, OffenseRecord("35!!cdCDZZ", "01-01-2023", 6))

    assert path.read_text(encoding="utf-8").splitlines()[0] == "23#@abABXY|14-03-2021|4"
    assert points_since(path, "23#@abABXY", date(2021, 3, 15)) == 3


@pytest.mark.parametrize("points", ["1_0", " 3", "3 ", "٣", "", "3.0"])
def test_offense_line_rejects_loose_integers(points):
    assert OffenseRecord.from_line(f"23#@abABXY|01-01-2023|{points}") is None


def test_offense_line_accepts_signed_points():
    assert OffenseRecord.from_line("23#@abABXY|01-01-2023|+4").points == 4
