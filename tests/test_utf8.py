import pytest

from dcafkit.utf8 import Utf8Error, bytes_to_utf8, utf8_length, utf8_to_bytes

SAMPLES = [b"", b"hello", b"\xe4\xf6\xfc", b"a\x80b\xffc", bytes(range(256))]


@pytest.mark.parametrize("data", SAMPLES)
def test_length_matches_encoded_output(data):
    assert utf8_length(data) == len(bytes_to_utf8(data))


@pytest.mark.parametrize("data", SAMPLES)
def test_encoding_matches_latin1_as_utf8(data):
    assert bytes_to_utf8(data) == data.decode("latin-1").encode("utf-8")


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    assert utf8_to_bytes(bytes_to_utf8(data)) == data


def test_decode_accepts_str():
    assert utf8_to_bytes("\u00e4x") == b"\xe4x"


def test_ascii_is_unchanged():
    assert bytes_to_utf8(b"abc") == b"abc"
    assert utf8_to_bytes(b"abc") == b"abc"


def test_encode_truncates_at_limit():
    assert bytes_to_utf8(b"abcdef", 3) == b"abc"


def test_encode_split_character_raises():
    with pytest.raises(Utf8Error):
        bytes_to_utf8(b"a\xff", 2)


def test_encode_character_fits_exactly():
    data = b"a\xff"
    assert bytes_to_utf8(data, 3) == data.decode("latin-1").encode("utf-8")


def test_decode_truncates_at_limit():
    assert utf8_to_bytes(b"abcdef", 2) == b"ab"


def test_decode_wide_character_raises():
    with pytest.raises(Utf8Error):
        utf8_to_bytes("\u20ac".encode("utf-8"))


def test_decode_truncated_sequence_raises():
    with pytest.raises(Utf8Error):
        utf8_to_bytes(b"a\xc3")


def test_decode_invalid_continuation_raises():
    with pytest.raises(Utf8Error):
        utf8_to_bytes(b"\xc3A")


@pytest.mark.parametrize("func", [bytes_to_utf8, utf8_to_bytes])
def test_negative_limit_raises(func):
    with pytest.raises(ValueError):
        func(b"abc", -1)