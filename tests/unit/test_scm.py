"""Tests for module normalization and SCM descriptors."""

from cvs_tag.scm import UnsupportedScm, normalize_modules


def test_splits_on_whitespace() -> None:
    assert normalize_modules("moduleA moduleB") == ("moduleA", "moduleB")
    assert normalize_modules("moduleA\nmoduleB\r\n  moduleC") == ("moduleA", "moduleB", "moduleC")


def test_escaped_space_is_kept_in_name() -> None:
    assert normalize_modules("my\\ module other") == ("my module", "other")


def test_empty_specification() -> None:
    assert normalize_modules("") == ()
    assert normalize_modules("   ") == ()


def test_surrounding_whitespace_ignored() -> None:
    assert normalize_modules("  moduleA  ") == ("moduleA",)


def test_describe() -> None:
    assert UnsupportedScm(kind="git").describe() == "git"
