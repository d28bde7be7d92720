import pytest

from lskit.compare import (
    strchr,
    strcmp,
    strcmp_ci,
    strcmp_local,
    strncmp,
    strnstr,
    strrchr,
)

PAIRS = [
    ("abc", "abd"),
    ("abc", "ab"),
    ("", "a"),
    ("Zebra", "apple"),
    ("same", "same"),
    ("a\0zzz", "a"),
]


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_strcmp_is_antisymmetric(s1, s2):
    assert strcmp(s1, s2) == -strcmp(s2, s1)


@pytest.mark.parametrize("s1, s2", [p for p in PAIRS if "\0" not in p[0]])
def test_strcmp_sign_matches_python_order(s1, s2):
    result = strcmp(s1, s2)
    assert (result < 0) == (s1 < s2)
    assert (result == 0) == (s1 == s2)


def test_strcmp_stops_at_nul():
    assert strcmp("abc\0x", "abc\0y") == 0


def test_strcmp_mismatch_is_code_point_difference():
    assert strcmp("a", "b") == ord("a") - ord("b")


def test_strcmp_ci_ignores_case():
    assert strcmp_ci("Hello", "hELLO") == 0


@pytest.mark.parametrize("s1, s2", [("apple", "Banana"), ("Zoo", "yak"), ("abc", "ABD")])
def test_strcmp_ci_sign_matches_upper_order(s1, s2):
    result = strcmp_ci(s1, s2)
    assert (result < 0) == (s1.upper() < s2.upper())
    assert result == -strcmp_ci(s2, s1)


def test_strcmp_ci_prefix_of_second_compares_equal():
    assert strcmp_ci("ab", "abc") == 0
    assert strcmp_ci("abc", "ab") > 0


def test_strcmp_local_skips_hidden_dot():
    assert strcmp_local(".bashrc", "BASHRC") == 0
    assert strcmp_local(".a", "b") < 0
    assert strcmp_local("b", ".a") > 0


def test_strcmp_local_keeps_dot_entries():
    assert strcmp_local(".", "a") < 0
    assert strcmp_local("..", "a") < 0


def test_strncmp_zero_count_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == strcmp("abcX", "abcY")
    assert strncmp("ab", "ab", 10) == 0


def test_strncmp_rejects_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_match_within_length():
    big = "hello world"
    assert strnstr(big, "world", len(big)) == big.index("world")


def test_strnstr_respects_length():
    big = "hello world"
    assert strnstr(big, "world", big.index("world") + 4) is None
    assert strnstr(big, "world", big.index("world") + 5) == big.index("world")


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_absent_needle():
    assert strnstr("abc", "zz", 3) is None


@pytest.mark.parametrize("text, c", [("banana", "a"), ("banana", "n"), ("banana", "b")])
def test_strchr_and_strrchr_agree_with_find(text, c):
    assert strchr(text, c) == text.find(c)
    assert strrchr(text, c) == text.rfind(c)


def test_strchr_missing_character():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_searching_for_nul_gives_length():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_character_target():
    with pytest.raises(ValueError):
        strchr("abc", "ab")