"""Person records, their hash and the orderings used to sort them."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import ClassVar, TextIO

from .hashing import MODULUS, hash_text_sum
from .textutils import read_padded

__all__ = [
    "MAX_LENGTH",
    "DEFAULT_BORN_YEAR",
    "Person",
    "read_person",
    "hash_person",
    "int_less",
    "int_less_equal",
    "person_less",
    "person_less_equal",
]

MAX_LENGTH = 40
DEFAULT_BORN_YEAR = 2005

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Person:
    """A person identified by id and three names.

    Equality compares the id and the names; the birth year is ignored.
    """

    person_id: str
    first_name: str
    middle_name: str
    last_name: str
    born_year: int = field(compare=False)

    max_length: ClassVar[int] = MAX_LENGTH

    def __post_init__(self) -> None:
        checked = (
            ("id", self.person_id),
            ("first name", self.first_name),
            ("middle name", self.middle_name),
        )
        for label, value in checked:
            if len(value) > MAX_LENGTH:
                raise ValueError(
                    f"{label} has {len(value)} characters, more than {MAX_LENGTH}"
                )

    @classmethod
    def default(cls) -> Person:
        """A person with blank fields of full width, born in the default year."""
        blank = " " * MAX_LENGTH
        return cls(blank, blank, blank, blank, DEFAULT_BORN_YEAR)

    def __str__(self) -> str:
        lines = (
            self.person_id,
            self.first_name,
            self.middle_name,
            self.last_name,
            str(self.born_year),
        )
        return "\n" + "\n".join(lines) + "\n"


def _parse_year(line: str) -> int:
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else 0


def read_person(stream: TextIO, prompt_stream: TextIO | None = None) -> Person:
    """Read a person interactively from ``stream``.

    Each name and the id are read as one line, cut or space-padded to
    ``MAX_LENGTH`` characters; the rest of an over-long line is discarded.
    A birth year that cannot be parsed becomes 0.
    """
    out = sys.stdout if prompt_stream is None else prompt_stream

    def read_field(label: str) -> str:
        print(f"Enter {label}( max {MAX_LENGTH} symbols) :", file=out)
        text, complete = read_padded(stream, MAX_LENGTH)
        if not complete:
            stream.readline()
        return text

    first_name = read_field("first name")
    middle_name = read_field("middle name")
    last_name = read_field("last name")
    person_id = read_field("id")
    print("Enter born year", file=out)
    born_year = _parse_year(stream.readline())
    return Person(person_id, first_name, middle_name, last_name, born_year)


def hash_person(person: Person) -> int:
    """Sum of the name character codes plus the birth year, modulo ``MODULUS``."""
    names = (person.first_name, person.middle_name, person.last_name)
    return (hash_text_sum(names) + person.born_year) % MODULUS


def int_less(first: int, second: int) -> bool:
    """Strict ordering of integers."""
    return first < second


def int_less_equal(first: int, second: int) -> bool:
    """Non-strict ordering of integers."""
    return not int_less(second, first)


def person_less(first: Person, second: Person) -> bool:
    """Order people by the code of the first letter of the first name.

    A person with an empty first name comes before everyone.
    """
    if not first.first_name:
        return True
    if not second.first_name:
        return False
    return ord(first.first_name[0]) < ord(second.first_name[0])


def person_less_equal(first: Person, second: Person) -> bool:
    """True unless ``second`` orders strictly before ``first``."""
    return not person_less(second, first)