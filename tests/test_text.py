import pytest

from ftkit.text import (
    bounded_concat,
    bounded_copy,
    compare,
    find_char,
    find_last_char,
    find_within,
    join,
    map_indexed,
    split,
    substring,
    trim,
)


def test_find_char_first_occurrence():
    s = "banana"
    index = find_char(s, "a")
    assert s[index] == "a"
    assert "a" not in s[:index]


def test_find_char_missing_and_nul():
    assert find_char("abc", "z") is None
    assert find_char("abc", "\0") == len("abc")


def test_find_char_rejects_multichar():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_find_last_char():
    s = "banana"
    index = find_last_char(s, "a")
    assert s[index] == "a"
    assert "a" not in s[index + 1:]
    assert find_last_char(s, "q") is None
    assert find_last_char(s, "\0") == len(s)


def test_find_within_empty_needle():
    assert find_within("anything", "", 0) == 0


def test_find_within_bounds():
    haystack = "hello world"
    index = find_within(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"
    assert find_within(haystack, "world", len(haystack) - 1) is None
    assert find_within(haystack, "xyz", len(haystack)) is None


def test_find_within_only_first_occurrence_counts():
    # first "ab" overruns the bound of 1, so no later search happens
    assert find_within("abab", "ab", 1) is None


def test_compare_equal_and_sign():
    assert compare("abc", "abc", 3) == 0
    assert compare("abc", "abd", 3) < 0
    assert compare("abd", "abc", 3) > 0
    assert compare("abc", "abd", 2) == 0
    assert compare("x", "y", 0) == 0


def test_compare_shorter_string():
    assert compare("ab", "abc", 5) == -ord("c")
    assert compare("abc", "ab", 5) == ord("c")


def test_compare_antisymmetric():
    pairs = [("apple", "apricot"), ("", "a"), ("same", "same")]
    for a, b in pairs:
        assert compare(a, b, 10) == -compare(b, a, 10)


def test_substring():
    s = "libraries"
    assert substring(s, 3, 4) == s[3:7]
    assert substring(s, 0, 100) == s
    assert substring(s, len(s) + 1, 3) == ""
    assert substring(s, len(s), 3) == ""


def test_substring_negative_raises():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_trim():
    assert trim("  \tword\n ", "\t \n") == "word"
    assert trim("xxabcxx", "x") == "abc"
    assert trim("abc", "") == "abc"
    assert trim("aaaa", "a") == ""


def test_split_drops_empty_pieces():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    pieces = ["one", "two", "three"]
    assert split("\n".join(pieces), "\n") == pieces


def test_join():
    assert join("foo", "bar") == "foobar"
    assert join(None, "bar") == "bar"
    with pytest.raises(TypeError):
        join("foo", None)


def test_bounded_copy():
    src = "hello"
    assert bounded_copy(src, 10) == (src, len(src))
    assert bounded_copy(src, 3) == (src[:2], len(src))
    assert bounded_copy(src, 0) == ("", len(src))


def test_bounded_copy_fits_buffer():
    for size in range(1, 8):
        copied, total = bounded_copy("abcdef", size)
        assert len(copied) <= size - 1
        assert "abcdef".startswith(copied)
        assert total == len("abcdef")


def test_bounded_concat():
    dst, src = "abc", "def"
    assert bounded_concat(dst, src, 10) == (dst + src, len(dst) + len(src))
    assert bounded_concat(dst, src, 5) == (dst + src[:1], len(dst) + len(src))
    assert bounded_concat(dst, src, 2) == (dst, 2 + len(src))
    assert bounded_concat(dst, src, 0) == (dst, len(src))


def test_bounded_concat_negative_size():
    with pytest.raises(ValueError):
        bounded_concat("a", "b", -1)


def test_map_indexed():
    s = "abcd"
    result = map_indexed(s, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert map_indexed(s, lambda i, ch: ch) == s
    assert map_indexed("", lambda i, ch: ch) == ""