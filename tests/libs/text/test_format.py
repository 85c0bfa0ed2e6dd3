import pytest

from bytekit.libs.text import split, to_lower, to_upper


def test_to_upper_ascii_only():
    assert to_upper("abc XYZ 123 é") == "ABC XYZ 123 é"


def test_to_lower_ascii_only():
    assert to_lower("ABC xyz 123 É") == "abc xyz 123 É"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        (",a,,b,", ["a", "b"]),
        ("", []),
        (",,,", []),
        ("abc", ["abc"]),
    ],
)
def test_split_drops_empty_segments(text, expected):
    assert split(text, ",") == expected


def test_split_rejects_multi_char_delimiter():
    with pytest.raises(ValueError):
        split("a::b", "::")
