import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.numbers import INT_MAX, INT_MIN
from algonotes.strings import (
    add_binary,
    atoi,
    longest_common_prefix,
    longest_palindrome,
    longest_unique_substring_length,
    repeated_string_match,
    zigzag_convert,
)

small_text = st.text(alphabet="abc", max_size=12)
binary = st.text(alphabet="01", min_size=1, max_size=20)


@given(small_text)
def test_unique_length_bounded_by_alphabet(s):
    result = longest_unique_substring_length(s)
    assert result <= len(set(s))
    assert (result == 0) == (s == "")


@given(small_text)
def test_unique_length_is_witnessed(s):
    result = longest_unique_substring_length(s)
    windows = [s[i:i + result] for i in range(len(s) - result + 1)]
    assert any(len(set(w)) == len(w) for w in windows)


@given(st.lists(st.characters(), unique=True, max_size=15))
def test_unique_length_of_distinct_chars(chars):
    s = "".join(chars)
    assert longest_unique_substring_length(s) == len(s)


@given(small_text, small_text)
def test_unique_length_monotone_under_concatenation(s, t):
    combined = longest_unique_substring_length(s + t)
    assert combined >= longest_unique_substring_length(s)
    assert combined >= longest_unique_substring_length(t)


def test_longest_palindrome_examples():
    assert longest_palindrome("babad") == "bab"
    assert longest_palindrome("cbbd") == "bb"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


@given(st.text(alphabet="ab", min_size=1, max_size=10))
def test_longest_palindrome_is_maximal_substring(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    longer = (
        s[i:j]
        for i in range(len(s))
        for j in range(i + len(result) + 1, len(s) + 1)
    )
    assert not any(sub == sub[::-1] for sub in longer)


@given(small_text)
def test_longest_palindrome_of_palindrome_is_itself(s):
    whole = s + s[::-1]
    assert longest_palindrome(whole) == whole


@given(small_text, st.integers(min_value=1, max_value=6))
def test_zigzag_is_permutation(s, rows):
    assert sorted(zigzag_convert(s, rows)) == sorted(s)


@given(small_text)
def test_zigzag_one_row_is_identity(s):
    assert zigzag_convert(s, 1) == s


@given(small_text)
def test_zigzag_two_rows_alternates(s):
    assert zigzag_convert(s, 2) == s[::2] + s[1::2]


@given(small_text)
def test_zigzag_many_rows_is_identity(s):
    assert zigzag_convert(s, len(s) + 1) == s


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag_convert("abc", 0)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


@given(st.integers(min_value=0, max_value=INT_MAX), st.integers(0, 5))
def test_atoi_spaces_sign_and_trailing_text(n, spaces):
    assert atoi(" " * spaces + "+" + str(n) + " apples") == n


@given(st.integers(min_value=INT_MAX + 1))
def test_atoi_clamps_high(n):
    assert atoi(str(n)) == INT_MAX


@given(st.integers(max_value=INT_MIN - 1))
def test_atoi_clamps_low(n):
    assert atoi(str(n)) == INT_MIN


def test_atoi_without_leading_digits():
    assert atoi("words and 987") == 0


@given(st.integers(min_value=1, max_value=99))
def test_atoi_only_skips_spaces(n):
    assert atoi("\t" + str(n)) == atoi("")


@given(st.lists(small_text, min_size=1, max_size=5))
def test_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    k = len(prefix)
    if strs[0]:
        assert any(len(s) == k for s in strs) or len({s[k] for s in strs}) > 1


@given(small_text, small_text, small_text)
def test_common_prefix_of_shared_stem(stem, x, y):
    strs = [stem + "x" + x, stem + "y" + y]
    assert longest_common_prefix(strs) == stem


def test_common_prefix_empty_cases():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["", "abc"]) == ""


def test_common_prefix_leaves_input_unchanged():
    strs = ["flower", "flow", "flight"]
    longest_common_prefix(strs)
    assert strs == ["flower", "flow", "flight"]


@given(binary, binary)
def test_add_binary_value(a, b):
    result = add_binary(a, b)
    assert int(result, 2) == int(a, 2) + int(b, 2)
    assert len(result) in (max(len(a), len(b)), max(len(a), len(b)) + 1)


@given(binary)
def test_add_binary_keeps_width(a):
    zeros = "0" * (len(a) + 3)
    assert add_binary(a, zeros) == a.zfill(len(zeros))


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("102", "1")


@given(st.text(alphabet="ab", min_size=1, max_size=4), st.integers(1, 5))
def test_repeated_match_of_exact_repeats(a, k):
    assert repeated_string_match(a, a * k) == k


@given(
    st.text(alphabet="ab", min_size=1, max_size=4),
    st.text(alphabet="ab", max_size=10),
)
def test_repeated_match_is_minimal(a, b):
    result = repeated_string_match(a, b)
    if result == -1:
        assert b not in a * (len(b) // len(a) + 2)
    else:
        assert b in a * result
        assert result == 1 or b not in a * (result - 1)


def test_repeated_match_rejects_empty_a():
    with pytest.raises(ValueError):
        repeated_string_match("", "abc")