import os

import pytest

from dcafkit.prng import PrngUnavailableError, prng, set_prng


@pytest.fixture(autouse=True)
def _reset_prng():
    set_prng(None)
    yield
    set_prng(None)


def test_no_generator_raises():
    with pytest.raises(PrngUnavailableError):
        prng(4)


def test_installed_generator_is_used():
    set_prng(lambda n: b"\x01" * n)
    assert prng(4) == b"\x01\x01\x01\x01"


def test_length_of_output_matches_request():
    set_prng(os.urandom)
    for length in (0, 1, 16, 32):
        assert len(prng(length)) == length


def test_generator_receives_requested_length():
    seen = []

    def generator(n):
        seen.append(n)
        return b"\x05" * n

    set_prng(generator)
    result = prng(7)
    assert result == b"\x05" * 7
    assert seen == [7]


def test_removing_generator_disables_prng():
    set_prng(os.urandom)
    set_prng(None)
    with pytest.raises(PrngUnavailableError):
        prng(1)


def test_wrong_length_from_generator_raises():
    set_prng(lambda n: b"\x00")
    with pytest.raises(ValueError):
        prng(8)


def test_negative_length_raises():
    set_prng(os.urandom)
    with pytest.raises(ValueError):
        prng(-1)