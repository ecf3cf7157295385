import pytest

from kirbymaze.libft.strings import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   \t\n-17xyz", -17),
        ("+5", 5),
        ("abc", 0),
        ("--3", 0),
        ("", 0),
        ("-", 0),
        ("0007", 7),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, 12345, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_strchr():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", "z") is None


def test_strrchr():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("hello", "\0") == len("hello")
    assert strrchr("hello", "z") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp(chr(200), "a", 1) > 0


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr():
    text = "hello world"
    assert strnstr(text, "world", len(text)) == text.index("world")
    assert strnstr(text, "world", len(text) - 1) is None
    assert strnstr(text, "", 0) == 0
    assert strnstr("aaab", "ab", 4) == "aaab".index("ab")
    assert strnstr(text, "xyz", len(text)) is None


def test_substr():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "hello"[2:]
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim(" a ", "") == " a "
    assert strtrim("abcba", "a") == "bcb"


def test_split():
    assert split("  a b  c ", " ") == ["a", "b", "c"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("word", ",") == ["word"]


def test_split_invariant():
    text = ",,one,,two,three,,"
    pieces = split(text, ",")
    assert all(pieces)
    assert ",".join(pieces) == "one,two,three"


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strmapi():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_mutates_in_place():
    chars = list("abc")
    seen = []

    def visit(i, c):
        seen.append(i)
        return c.upper() if i == 1 else None

    assert striteri(chars, visit) is None
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_strlcpy_full_copy():
    dest = bytearray(10)
    assert strlcpy(dest, b"hello", 10) == len(b"hello")
    assert dest[:6] == b"hello\0"


def test_strlcpy_truncates():
    dest = bytearray(b"zzzzzz")
    assert strlcpy(dest, b"hello", 3) == len(b"hello")
    assert dest[:3] == b"he\0"
    assert dest[3:] == b"zzz"


def test_strlcpy_zero_size_leaves_dest():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"hello", 0) == len(b"hello")
    assert dest == bytearray(b"keep")


def test_strlcpy_too_small_dest():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hello", 10)


def test_strlcat_appends():
    dest = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dest, b"cd", 10) == len(b"ab") + len(b"cd")
    assert dest[:5] == b"abcd\0"


def test_strlcat_no_room():
    dest = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dest, b"cd", 3) == len(b"ab") + len(b"cd")
    assert dest[:3] == b"ab\0"


def test_strlcat_size_smaller_than_dest_string():
    dest = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dest, b"cd", 1) == 1 + len(b"cd")
    assert dest[:3] == b"ab\0"


def test_strlcat_then_strlcpy_round_trip():
    dest = bytearray(16)
    strlcpy(dest, b"kir", 16)
    strlcat(dest, b"by", 16)
    assert dest[: dest.index(0)] == b"kirby"