"""Word lists and randomly generated people."""

from __future__ import annotations

import random
from os import PathLike
from typing import Sequence

from .person import MAX_LENGTH, Person
from .sequence import MutableArraySequence
from .textutils import int_to_string, pad_to_length

__all__ = ["MIDDLE_NAME_SUFFIX", "load_words", "generate_people"]

MIDDLE_NAME_SUFFIX = "ов"


def load_words(path: str | PathLike[str], count: int | None = None) -> list[str]:
    """Read whitespace-separated words from a UTF-8 file.

    With ``count`` given, exactly that many leading words are returned and a
    file with fewer words raises ``ValueError``.
    """
    with open(path, encoding="utf-8") as handle:
        words = handle.read().split()
    if count is None:
        return words
    if count < 0:
        raise ValueError(f"invalid word count {count}")
    if len(words) < count:
        raise ValueError(f"{path} holds {len(words)} words, {count} needed")
    return words[:count]


def _fixed(text: str) -> str:
    return pad_to_length(text, MAX_LENGTH)


def generate_people(
    count: int,
    names: Sequence[str],
    surnames: Sequence[str],
    rng: random.Random | None = None,
) -> MutableArraySequence[Person]:
    """Make ``count`` people with random names, ids ``0..count-1`` and birth years.

    Every text field is padded with spaces to the maximum field length; the
    middle name is a first name with a patronymic suffix.
    """
    if not names or not surnames:
        raise ValueError("names and surnames must not be empty")
    generator = rng if rng is not None else random.Random()
    people: MutableArraySequence[Person] = MutableArraySequence(size=count)
    for number in range(count):
        name_index = generator.randrange(len(names))
        surname_index = generator.randrange(len(surnames))
        middle_name = names[abs(surname_index - name_index) % len(names)] + MIDDLE_NAME_SUFFIX
        born_year = generator.randrange(220) + 1800
        person = Person(
            _fixed(int_to_string(number)),
            _fixed(names[name_index]),
            _fixed(middle_name),
            _fixed(surnames[surname_index]),
            born_year,
        )
        people.set(number, person)
    return people