import string

import pytest

from wirefdf import cstr


@pytest.mark.parametrize("text, expected", [
    ("   -12345", -12345),
    ("42", 42),
    ("+7", 7),
    ("\t\n\v\f\r 99abc", 99),
    ("", 0),
    ("abc", 0),
    ("-", 0),
    ("--5", 0),
])
def test_atoi(text, expected):
    assert cstr.atoi(text) == expected


@pytest.mark.parametrize("n", [0, -123, 4567, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    assert cstr.atoi(cstr.itoa(n)) == n


def test_itoa_source_examples():
    assert cstr.itoa(0) == "0"
    assert cstr.itoa(-123) == "-123"
    assert cstr.itoa(4567) == "4567"
    assert cstr.itoa(-2147483648) == "-2147483648"


def test_split_source_example():
    words = cstr.split("Hello,world,welcome,to,C,programming", ",")
    assert words == ["Hello", "world", "welcome", "to", "C", "programming"]


def test_split_drops_empty_words():
    assert cstr.split(",,a,,b,,", ",") == ["a", "b"]
    assert cstr.split(",,,", ",") == []
    assert cstr.split("", " ") == []


def test_split_rejoin_invariant():
    text = "  one two   three "
    words = cstr.split(text, " ")
    assert " ".join(words) == " ".join(text.split())


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        cstr.split("a b", "")
    with pytest.raises(ValueError):
        cstr.split("a b", "ab")


def test_strtrim():
    assert cstr.strtrim("   Hello, world!   ", " ") == "Hello, world!"
    assert cstr.strtrim("xxyxx", "xy") == ""
    assert cstr.strtrim("abc", "") == "abc"


def test_substr():
    assert cstr.substr("Hello, world!", 7, 5) == "world"
    assert cstr.substr("Hello", 10, 3) == ""
    assert cstr.substr("Hello", 5, 3) == ""
    assert cstr.substr("Hello", 3, 100) == "lo"


def test_substr_negative():
    with pytest.raises(ValueError):
        cstr.substr("Hello", -1, 2)


def test_strnstr():
    haystack = "Hello, world!"
    assert cstr.strnstr(haystack, "world", 13) == haystack.index("world")
    assert cstr.strnstr(haystack, "world", 11) is None
    assert cstr.strnstr(haystack, "world", 12) == haystack.index("world")
    assert cstr.strnstr(haystack, "", 0) == 0
    assert cstr.strnstr(haystack, "xyz", 13) is None
    assert cstr.strnstr(haystack, "H", 0) is None


def test_strncmp():
    assert cstr.strncmp("Hello", "Helium", 3) == 0
    assert cstr.strncmp("Hello", "Helium", 4) == ord("l") - ord("i")
    assert cstr.strncmp("abc", "abc", 10) == 0
    assert cstr.strncmp("abc", "abcd", 4) == -ord("d")
    assert cstr.strncmp("abcd", "abc", 4) == ord("d")
    assert cstr.strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    pairs = [("apple", "apricot"), ("zeta", "alpha"), ("same", "same")]
    for a, b in pairs:
        assert cstr.strncmp(a, b, 10) == -cstr.strncmp(b, a, 10)


def test_strncmp_unsigned_bytes():
    assert cstr.strncmp(b"\xff", b"\x01", 1) > 0


def test_character_classes_match_ascii_sets():
    for code in range(0, 256):
        ch = chr(code)
        assert cstr.isalpha(code) == (ch in string.ascii_letters)
        assert cstr.isdigit(code) == (ch in string.digits)
        assert cstr.isalnum(code) == (ch in string.ascii_letters + string.digits)
        assert cstr.isascii(code) == (code < 128)
        assert cstr.isprint(code) == (32 <= code <= 126)


def test_character_classes_source_examples():
    assert cstr.isalnum("Q") is True
    assert cstr.isalnum("7") is True
    assert cstr.isalnum("+") is False
    assert cstr.isdigit("Q") is False
    assert cstr.isascii(65) is True
    assert cstr.isascii(200) is False
    assert cstr.isprint(65) is True
    assert cstr.isprint(31) is False
    assert cstr.isascii(-1) is False


def test_case_conversion():
    assert cstr.tolower("A") == "a"
    assert cstr.toupper("a") == "A"
    assert cstr.tolower("+") == "+"
    assert cstr.toupper(ord("z")) == ord("Z")
    for ch in string.ascii_letters:
        assert cstr.tolower(cstr.toupper(ch)) == ch.lower()
    assert cstr.toupper("é") == "é"


def test_bad_character_input():
    with pytest.raises(ValueError):
        cstr.isalpha("ab")
    with pytest.raises(TypeError):
        cstr.isdigit(1.5)