# student_store.py
import json
import os


MAX_AGE_DIGITS = 10


class DataUnavailable(Exception):
    """The student age file is missing or cannot be parsed."""


def _parse_age(name, raw):
    # bool is an int subclass; true/false is not an age
    if isinstance(raw, bool):
        raise DataUnavailable(f"Invalid age for {name!r}: {raw!r}")
    if isinstance(raw, int):
        age = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        # stays well under the int() digit limit
        if len(raw.strip()) > MAX_AGE_DIGITS:
            raise DataUnavailable(f"Invalid age for {name!r}: too many digits")
        age = int(raw.strip())
    else:
        raise DataUnavailable(f"Invalid age for {name!r}: {raw!r}")
    if age < 0:
        raise DataUnavailable(f"Invalid age for {name!r}: {raw!r}")
    return age


def load_student_ages(path):
    """
    Read ``{"student_age": {<name>: <age>, ...}}`` from ``path``.

    Returns a list of ``{"name": str, "age": int}`` records in file order.
    Raises DataUnavailable when the file is missing or malformed.
    """
    if not os.path.exists(path):
        raise DataUnavailable(f"Student age file not found: {path}")
    try:
        with open(path, encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        raise DataUnavailable(f"Cannot read student age file {path}: {e}") from e

    if not isinstance(loaded, dict) or not isinstance(loaded.get("student_age"), dict):
        raise DataUnavailable(f"{path} has no 'student_age' object")

    return [
        {"name": name, "age": _parse_age(name, raw)}
        for name, raw in loaded["student_age"].items()
    ]


class StudentStore:
    """Read-only student collection, loaded from disk on first use."""

    def __init__(self, path):
        self.path = path
        self._records = None

    def all(self):
        # a failed load is not cached, the next call reads the file again
        if self._records is None:
            self._records = load_student_ages(self.path)
        return list(self._records)

    def get(self, name):
        for record in self.all():
            if record["name"] == name:
                return record
        return None

    @staticmethod
    def to_wire(record):
        """Age goes over the wire as a string."""
        return {"name": record["name"], "age": str(record["age"])}
