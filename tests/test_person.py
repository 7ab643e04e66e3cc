import io

import pytest

from lrukit.hashing import MODULUS, hash_string
from lrukit.person import (
    DEFAULT_BORN_YEAR,
    MAX_LENGTH,
    Person,
    hash_person,
    int_less,
    int_less_equal,
    person_less,
    person_less_equal,
    read_person,
)


def make(first="Anna", middle="Ivanovna", last="Petrova", pid="7", year=1990):
    return Person(pid, first, middle, last, year)


def test_default_person_is_blank_and_full_width():
    person = Person.default()
    assert person.first_name == " " * MAX_LENGTH
    assert person.person_id == " " * MAX_LENGTH
    assert person.last_name == " " * MAX_LENGTH
    assert person.born_year == DEFAULT_BORN_YEAR == 2005


def test_max_length_is_forty():
    assert Person.max_length == 40
    assert len(Person.default().middle_name) == 40


@pytest.mark.parametrize("argname", ["pid", "first", "middle"])
def test_too_long_fields_raise(argname):
    with pytest.raises(ValueError):
        make(**{argname: "x" * (MAX_LENGTH + 1)})


def test_long_last_name_is_accepted():
    person = make(last="y" * (MAX_LENGTH + 5))
    assert len(person.last_name) == MAX_LENGTH + 5


def test_equality_ignores_born_year():
    assert make(year=1800) == make(year=2000)
    assert make(first="Boris") != make()
    assert hash(make(year=1)) == hash(make(year=2))


def test_str_lists_fields_on_lines():
    person = make()
    assert str(person) == "\n7\nAnna\nIvanovna\nPetrova\n1990\n"


def test_hash_person_ignores_id():
    assert hash_person(make(pid="1")) == hash_person(make(pid="2"))


def test_hash_person_adds_year():
    assert hash_person(make(year=1991)) == hash_person(make(year=1990)) + 1


def test_hash_person_matches_name_sum():
    person = make(first="A", middle="B", last="C", year=0)
    assert hash_person(person) == hash_string("ABC")
    assert 0 <= hash_person(make()) < MODULUS


def test_read_person_pads_fields():
    data = io.StringIO("Anna\nIvanovna\nPetrova\n42\n1990\n")
    prompts = io.StringIO()
    person = read_person(data, prompts)
    assert person.first_name == "Anna".ljust(MAX_LENGTH)
    assert person.middle_name == "Ivanovna".ljust(MAX_LENGTH)
    assert person.last_name == "Petrova".ljust(MAX_LENGTH)
    assert person.person_id == "42".ljust(MAX_LENGTH)
    assert person.born_year == 1990
    assert "Enter first name( max 40 symbols) :" in prompts.getvalue()
    assert "Enter born year" in prompts.getvalue()


def test_read_person_cuts_long_lines():
    long_name = "N" * (MAX_LENGTH + 10)
    data = io.StringIO(f"{long_name}\nM\nL\nI\n1850\n")
    person = read_person(data, io.StringIO())
    assert person.first_name == "N" * MAX_LENGTH
    assert person.middle_name == "M".ljust(MAX_LENGTH)
    assert person.born_year == 1850


def test_read_person_bad_year_is_zero():
    data = io.StringIO("A\nB\nC\nD\nnonsense\n")
    person = read_person(data, io.StringIO())
    assert person.born_year == 0


def test_int_orderings():
    assert int_less(1, 2) is True
    assert int_less(2, 2) is False
    assert int_less_equal(2, 2) is True
    assert int_less_equal(3, 2) is False


def test_person_less_by_first_letter():
    anna = make(first="Anna")
    boris = make(first="Boris")
    assert person_less(anna, boris) is True
    assert person_less(boris, anna) is False


def test_person_less_same_letter():
    first = make(first="Anna")
    second = make(first="Alla")
    assert person_less(first, second) is False
    assert person_less(second, first) is False
    assert person_less_equal(first, second) is True
    assert person_less_equal(second, first) is True


def test_person_less_empty_first_name():
    empty = make(first="")
    other = make(first="Z")
    assert person_less(empty, other) is True
    assert person_less(other, empty) is False
    assert person_less_equal(other, empty) is False