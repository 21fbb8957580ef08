import os

import pytest

from ftlib.output import (
    LOWER,
    UPPER,
    putchar_fd,
    putendl_fd,
    puthexnbr_fd,
    putlongnbr_fd,
    putnbr_fd,
    putstr_fd,
    putunbr_fd,
)


def _capture(tmp_path, write):
    """Run *write* on the descriptor of a fresh file; return its result and the file's bytes."""
    path = tmp_path / "out.txt"
    with open(path, "wb") as fh:
        result = write(fh.fileno())
    return result, path.read_bytes()


class TestPutcharFd:
    @pytest.mark.parametrize("char, expected", [("c", b"c"), ("5", b"5"), ("\t", b"\t")])
    def test_characters(self, tmp_path, char, expected):
        result, data = _capture(tmp_path, lambda fd: putchar_fd(char, fd))
        assert data == expected
        assert result == 1

    def test_integer_code(self, tmp_path):
        result, data = _capture(tmp_path, lambda fd: putchar_fd(ord("A"), fd))
        assert (result, data) == (1, b"A")

    def test_multi_character_string_raises(self, tmp_path):
        with pytest.raises(ValueError):
            _capture(tmp_path, lambda fd: putchar_fd("ab", fd))


class TestPutstrFd:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("abcd", b"abcd"),
            ("123", b"123"),
            ("\t]!\a", b"\t]!\a"),
            ("", b""),
            ("f\0\0t", b"f"),
        ],
    )
    def test_strings(self, tmp_path, text, expected):
        result, data = _capture(tmp_path, lambda fd: putstr_fd(text, fd))
        assert data == expected
        assert result == len(expected)

    def test_closed_descriptor_raises(self, tmp_path):
        path = tmp_path / "closed.txt"
        fd = os.open(path, os.O_CREAT | os.O_WRONLY)
        os.close(fd)
        with pytest.raises(OSError):
            putstr_fd("abc", fd)


class TestPutendlFd:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("abc", b"abc\n"),
            ("123", b"123\n"),
            ("\t]\a", b"\t]\a\n"),
            ("", b"\n"),
            ("f\0\0t", b"f\n"),
        ],
    )
    def test_strings(self, tmp_path, text, expected):
        result, data = _capture(tmp_path, lambda fd: putendl_fd(text, fd))
        assert data == expected
        assert result == len(expected)


class TestPutnbrFd:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (42, b"42"),
            (-42, b"-42"),
            (2147483647, b"2147483647"),
            (-2147483648, b"-2147483648"),
            (0, b"0"),
            (10, b"10"),
        ],
    )
    def test_numbers(self, tmp_path, number, expected):
        result, data = _capture(tmp_path, lambda fd: putnbr_fd(number, fd))
        assert data == expected
        assert result == len(expected)

    def test_out_of_range_raises(self, tmp_path):
        with pytest.raises(OverflowError):
            _capture(tmp_path, lambda fd: putnbr_fd(2147483648, fd))


class TestPutunbrFd:
    def test_plain(self, tmp_path):
        assert _capture(tmp_path, lambda fd: putunbr_fd(4294967295, fd)) == (
            10,
            b"4294967295",
        )

    def test_negative_wraps(self, tmp_path):
        assert _capture(tmp_path, lambda fd: putunbr_fd(-1, fd)) == (10, b"4294967295")

    def test_zero(self, tmp_path):
        assert _capture(tmp_path, lambda fd: putunbr_fd(0, fd)) == (1, b"0")


class TestPutlongnbrFd:
    def test_minimum(self, tmp_path):
        result, data = _capture(
            tmp_path, lambda fd: putlongnbr_fd(-9223372036854775808, fd)
        )
        assert data == b"-9223372036854775808"
        assert result == 20

    def test_maximum(self, tmp_path):
        result, data = _capture(
            tmp_path, lambda fd: putlongnbr_fd(9223372036854775807, fd)
        )
        assert data == b"9223372036854775807"
        assert result == 19

    def test_out_of_range_raises(self, tmp_path):
        with pytest.raises(OverflowError):
            _capture(tmp_path, lambda fd: putlongnbr_fd(1 << 63, fd))


class TestPuthexnbrFd:
    def test_lower(self, tmp_path):
        assert _capture(tmp_path, lambda fd: puthexnbr_fd(255, fd, LOWER)) == (2, b"ff")

    def test_upper(self, tmp_path):
        assert _capture(tmp_path, lambda fd: puthexnbr_fd(48879, fd, UPPER)) == (
            4,
            b"BEEF",
        )

    def test_zero(self, tmp_path):
        assert _capture(tmp_path, lambda fd: puthexnbr_fd(0, fd, LOWER)) == (1, b"0")

    def test_other_case_letter_gives_lower(self, tmp_path):
        assert _capture(tmp_path, lambda fd: puthexnbr_fd(171, fd, "q")) == (2, b"ab")

    def test_negative_wraps_to_64_bits(self, tmp_path):
        result, data = _capture(tmp_path, lambda fd: puthexnbr_fd(-1, fd, LOWER))
        assert data == b"f" * 16
        assert result == 16