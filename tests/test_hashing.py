import pytest

from lrukit.hashing import MODULUS, hash_int, hash_string, hash_text_sum


@pytest.mark.parametrize("value", [0, 1, 42, 2147483647])
def test_hash_int_of_non_negative_is_identity(value):
    assert hash_int(value) == value


@pytest.mark.parametrize("value", [1, 42, 2147483647])
def test_hash_int_of_negative_equals_positive(value):
    assert hash_int(-value) == hash_int(value)


def test_modulus_value():
    assert MODULUS == 1000000007
    assert hash_int(-MODULUS) == 1000000007


def test_hash_string_empty_is_zero():
    assert hash_string("") == 0


def test_hash_string_single_character_is_its_code():
    assert hash_string("a") == ord("a")


def test_hash_string_ignores_order():
    assert hash_string("abc") == hash_string("cab")


def test_hash_string_is_additive():
    assert hash_string("hello world") == hash_string("hello") + hash_string(" world")


def test_hash_string_stays_below_modulus():
    text = "\U0010ffff" * 2000
    result = hash_string(text)
    assert 0 <= result < MODULUS
    assert result == (ord("\U0010ffff") * 2000) % MODULUS


def test_hash_text_sum_equals_hash_of_concatenation():
    parts = ["Ivan", "Petrov", "Sidorov"]
    assert hash_text_sum(parts) == hash_string("".join(parts))


def test_hash_text_sum_of_nothing_is_zero():
    assert hash_text_sum([]) == 0


def test_hash_text_sum_accepts_generator():
    words = ["ab", "cd"]
    assert hash_text_sum(w for w in words) == hash_text_sum(words)