import pytest

from minirex import (
    EngineConfig,
    MatchBudgetExceeded,
    NoMatchError,
    PatternSyntaxError,
    Regex,
    RegexError,
)


class TestConstruction:
    """Patterns are validated once, in the constructor."""

    @pytest.mark.parametrize("pattern", ["\n", "[", "a[", "+", "*", "a*+", "a+*"])
    def test_bad_patterns_raise(self, pattern):
        with pytest.raises(PatternSyntaxError) as excinfo:
            Regex(pattern)
        assert excinfo.value.pattern == pattern

    def test_syntax_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Regex("a**")
        with pytest.raises(RegexError):
            Regex("a**")

    def test_pattern_is_read_only(self):
        regex = Regex("a+b")
        assert regex.pattern == "a+b"
        with pytest.raises(AttributeError):
            regex.pattern = "b"

    def test_repr(self):
        assert repr(Regex("[a|b]")) == "Regex('[a|b]')"

    def test_explicit_config(self):
        config = EngineConfig(max_steps=10, max_depth=2)
        assert Regex("a", config).config is config

    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("MINIREX_MAX_STEPS", "42")
        assert Regex("a").config.max_steps == 42

    def test_same_pattern_behaves_the_same(self):
        first, second = Regex("x[a*|b]"), Regex("x[a*|b]")
        assert first is not second
        for text in ["", "x", "xa", "xaaa", "xb", "xbb", "ab", "xc"]:
            assert first.matches(text) == second.matches(text)
            assert first.first_match(text) == second.first_match(text)


@pytest.mark.parametrize("pattern,text,expected", [
    ("a", "a", True),
    ("a", "aa", False),
    ("", "", True),
    ("", "a", False),
    ("a*", "aaa", True),
    ("a+", "", False),
    (".*", "", True),
    ("[a|b]", "b", True),
    ("[a|]", "", True),
])
def test_matches(pattern, text, expected):
    assert Regex(pattern).matches(text) is expected


# (pattern, text, expected_first_match)
FIRST_MATCH_TESTS = [
    ("a", "a", "a"),
    ("a", "aa", "a"),
    ("a", "aaa", "a"),
    ("a+", "a", "a"),
    ("a+", "aa", "aa"),
    ("a+", "baa", "aa"),
    ("a+", "aaaaa", "aaaaa"),
    ("a+", "b", None),
    ("a+", "", None),
    # only whole suffixes are tried, so a trailing non-match hides everything
    ("a+", "faaafaaaaaf", None),
    ("aaa", "aaaaaaa", "aaa"),
    ("ab", "abababbabab", "ab"),
    ("[a|b]c", "xxbc", "bc"),
    # the scan never tries the empty suffix
    ("a*", "", None),
    ("a*", "b", None),
    (".*", "xyz", "xyz"),
]


@pytest.mark.parametrize("pattern,text,expected", FIRST_MATCH_TESTS)
def test_first_match(pattern, text, expected):
    assert Regex(pattern).first_match(text) == expected


def test_search_returns_the_span():
    assert Regex("a+").search("baa") == (1, 3)
    assert Regex("a+").search("aaa") == (0, 3)
    assert Regex("a+").search("b") is None


# (pattern, text, replacement, expected)
REPLACE_TESTS = [
    ("aaa", "aaaaaaa", "b", "bba"),
    ("aaa", "aaaaaa", "b", "bb"),
    ("ab", "abababbabab", "f", "fffbff"),
    ("a+", "baa", "x", "bx"),
    # replacement goes by value, so the earlier "ab" is replaced as well
    ("ab", "abxab", "Z", "ZxZ"),
    ("[a|b]c", "xxbc", "", "xx"),
]


@pytest.mark.parametrize("pattern,text,replacement,expected", REPLACE_TESTS)
def test_replace_first(pattern, text, replacement, expected):
    assert Regex(pattern).replace_first(text, replacement) == expected


def test_replace_without_match_raises():
    regex = Regex("a+")
    with pytest.raises(NoMatchError) as excinfo:
        regex.replace_first("bbb", "x")
    assert excinfo.value.text == "bbb"
    assert excinfo.value.pattern == "a+"
    with pytest.raises(LookupError):
        regex.replace_first("", "x")


class TestTrace:

    def test_records_alternation_branches(self):
        tracer = Regex("[a|b]c").trace("bc")
        root = tracer.root
        assert tracer.result is True
        assert root.pattern == "[a|b]c"
        assert root.steps == [("[", 0)]
        assert [child.pattern for child in root.children] == ["ac", "bc"]
        left, right = root.children
        assert left.steps == [("a", 0)]
        assert left.result is False
        assert right.steps == [("b", 0), ("c", 1)]
        assert right.result is True

    def test_left_success_skips_right_branch(self):
        tracer = Regex("[a|b]").trace("a")
        assert [child.pattern for child in tracer.root.children] == ["a"]

    def test_quantified_tokens_are_recorded_whole(self):
        tracer = Regex("a+b*").trace("aab")
        assert tracer.root.steps == [("a+", 0), ("b*", 2)]
        assert tracer.result is True

    def test_trace_agrees_with_matches(self):
        regex = Regex("x[a*|.]y")
        for text in ["xy", "xaay", "xby", "xbby", ""]:
            assert regex.trace(text).result is regex.matches(text)


class TestScanBudget:
    """The suffix scan shares one step ceiling across all offsets."""

    def test_first_match_trips_the_ceiling(self):
        regex = Regex("a", EngineConfig(max_steps=10))
        with pytest.raises(MatchBudgetExceeded):
            regex.first_match("b" * 50)

    def test_long_star_scan_trips_the_default_ceiling(self):
        regex = Regex("a*b", EngineConfig())
        with pytest.raises(MatchBudgetExceeded):
            regex.first_match("a" * 20000)

    def test_search_and_replace_share_the_ceiling(self):
        regex = Regex("a", EngineConfig(max_steps=10))
        with pytest.raises(MatchBudgetExceeded):
            regex.search("b" * 50)
        with pytest.raises(MatchBudgetExceeded):
            regex.replace_first("b" * 50, "x")

    def test_each_call_gets_its_own_ceiling(self):
        regex = Regex("a", EngineConfig(max_steps=10))
        for _ in range(5):
            assert regex.first_match("bbba") == "a"
