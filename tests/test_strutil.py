import math

import pytest

from uls.strutil import (
    binary_search,
    bubble_sort,
    count_substr,
    count_words,
    del_extra_spaces,
    encode_unicode,
    get_substr_index,
    hex_to_nbr,
    integer_sqrt,
    nbr_to_hex,
    power,
    quicksort,
    replace_substr,
    strsplit,
    strtrim,
)
from uls import strutil


@pytest.mark.parametrize("char", list(" \t\n\v\r\f"))
def test_is_space_accepts_whitespace(char):
    assert strutil.is_space(char) is True


@pytest.mark.parametrize("char", ["a", "0", "", "  "])
def test_is_space_rejects_others(char):
    assert strutil.is_space(char) is False


@pytest.mark.parametrize(
    "text, delimiter",
    [("  follow  the white rabbit ", " "), ("**a*b**c*", "*"), ("", "x"), ("xxx", "x")],
)
def test_count_words_matches_split(text, delimiter):
    assert count_words(text, delimiter) == len(strsplit(text, delimiter))


def test_strsplit_drops_empty_parts():
    assert strsplit("**Good bye,**Mr.*Anderson.****", "*") == ["Good bye,", "Mr.", "Anderson."]


def test_strtrim_removes_outer_whitespace():
    assert strtrim("\f\t  My name... is Neo  \n") == "My name... is Neo"
    assert strtrim(" \t\n") == ""


def test_del_extra_spaces_collapses_runs():
    assert del_extra_spaces("\f My name...   is \r Neo \t\n ") == "My name... is Neo"
    assert del_extra_spaces("   ") == ""


def test_count_substr_counts_overlaps():
    assert count_substr("aaa", "aa") == 2


@pytest.mark.parametrize("text, sub", [("yo, yo, yo Neo", "yo"), ("abcabc", "ca"), ("abc", "z")])
def test_count_substr_without_overlap_matches_split(text, sub):
    assert count_substr(text, sub) == len(text.split(sub)) - 1


def test_count_substr_empty_sub():
    assert count_substr("abc", "") == 0


def test_get_substr_index_finds_first():
    text, sub = "McDonalds Donuts", "Don"
    index = get_substr_index(text, sub)
    assert text[index : index + len(sub)] == sub
    assert sub not in text[: index + len(sub) - 1]


def test_get_substr_index_missing():
    assert get_substr_index("McDonalds", "Kek") == -1
    assert get_substr_index("", "a") == -1


def test_replace_substr():
    assert replace_substr("McDonalds", "alds", "uts") == "McDonuts"
    assert replace_substr("Ururu turu", "ru", "ta") == "Utata tuta"
    assert replace_substr("abc", "", "x") == "abc"


@pytest.mark.parametrize("number", [1, 15, 255, 4096, 0xDEADBEEF, 2**64 - 1])
def test_hex_round_trip(number):
    assert hex_to_nbr(nbr_to_hex(number)) == number
    assert nbr_to_hex(number) == format(number, "x")


def test_hex_to_nbr_case_insensitive():
    assert hex_to_nbr("FADE") == hex_to_nbr("fade")


def test_hex_to_nbr_rejects_non_hex_letters():
    assert hex_to_nbr("12g4") == 0


def test_nbr_to_hex_wraps_negative():
    assert hex_to_nbr(nbr_to_hex(-1)) == 2**64 - 1


@pytest.mark.parametrize("root", [0, 2, 3, 12, 1000])
def test_integer_sqrt_perfect_squares(root):
    assert integer_sqrt(root * root) == root


@pytest.mark.parametrize("x", [2, 3, 15, 99, -4])
def test_integer_sqrt_non_squares(x):
    assert integer_sqrt(x) == 0


def test_power_zero_exponent():
    assert power(7.5, 0) == 1.0


@pytest.mark.parametrize("base, exponent", [(2.0, 10), (1.5, 7), (-3.0, 5)])
def test_power_matches_math(base, exponent):
    assert power(base, exponent) == pytest.approx(math.pow(base, exponent))
    assert power(base, exponent + 1) == pytest.approx(power(base, exponent) * base)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2.0, -1)


def test_binary_search_found():
    items = ["222", "Abcd", "aBc", "ab", "az", "z"]
    assert binary_search(items, "ab") == (3, 3)


def test_binary_search_every_item():
    items = sorted(["pear", "apple", "fig", "kiwi", "plum", "date", "lime"])
    for item in items:
        index, steps = binary_search(items, item)
        assert items[index] == item
        assert steps >= 1


def test_binary_search_missing():
    assert binary_search(["a", "b", "c"], "bb") == (-1, 0)
    assert binary_search([], "x") == (-1, 0)


def test_bubble_sort_counts_swaps():
    items = ["abc", "xyz", "ghi", "def"]
    assert bubble_sort(items) == 3
    assert items == sorted(["abc", "xyz", "ghi", "def"])


def test_bubble_sort_sorted_input_needs_no_swaps():
    items = ["a", "b", "c"]
    assert bubble_sort(items) == 0
    assert items == ["a", "b", "c"]


def test_quicksort_orders_by_length():
    original = ["Michelangelo", "Donatello", "Leonardo", "Raphael", "Splinter", "Eve"]
    items = list(original)
    quicksort(items)
    lengths = [len(item) for item in items]
    assert lengths == sorted(lengths)
    assert sorted(items) == sorted(original)


def test_quicksort_single_item_needs_no_partition():
    items = ["only"]
    assert quicksort(items) == 0
    assert items == ["only"]


@pytest.mark.parametrize("codepoint", [0x41, 0x7F, 0x80, 0x3A9, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600])
def test_encode_unicode_matches_utf8(codepoint):
    assert encode_unicode(codepoint) == chr(codepoint).encode("utf-8")


def test_encode_unicode_surrogate():
    encoded = encode_unicode(0xD800)
    assert encoded == chr(0xD800).encode("utf-8", "surrogatepass")


def test_encode_unicode_negative():
    with pytest.raises(ValueError):
        encode_unicode(-1)