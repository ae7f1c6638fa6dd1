"""Tests for tag name validation and the configuration check."""

import re

import pytest

from cvs_tag.expression import DEFAULT_TAG_TEMPLATE
from cvs_tag.naming import (
    InvalidTagName,
    TagNameCheckFailed,
    TagNameOk,
    ValidTagName,
    check_tag_name,
    validate_tag_name,
)


def test_valid_tag_name() -> None:
    assert validate_tag_name("Release_1_0") == ValidTagName(tag_name="Release_1_0")


def test_empty_tag_name() -> None:
    result = validate_tag_name("")
    assert isinstance(result, InvalidTagName)
    assert result.reason == "tag is empty"


@pytest.mark.parametrize("tag", ["1abc", "_abc", "-abc", " abc", "été"])
def test_must_start_with_ascii_letter(tag: str) -> None:
    result = validate_tag_name(tag)
    assert isinstance(result, InvalidTagName)
    assert result.reason == "tag must start with a letter"


@pytest.mark.parametrize(
    ("tag", "char"),
    [
        ("release@1", "@"),
        ("Release_1.0", "."),
        ("a$b", "$"),
        ("a,b", ","),
        ("a:b", ":"),
        ("a;b", ";"),
    ],
)
def test_illegal_characters_are_named(tag: str, char: str) -> None:
    result = validate_tag_name(tag)
    assert isinstance(result, InvalidTagName)
    assert result.reason == f"tag contains illegal character '{char}'"


def test_first_illegal_character_is_reported() -> None:
    result = validate_tag_name("a.b@c")
    assert isinstance(result, InvalidTagName)
    assert result.reason == "tag contains illegal character '.'"


def test_leading_letter_rule_wins_over_illegal_characters() -> None:
    result = validate_tag_name("1.0")
    assert isinstance(result, InvalidTagName)
    assert result.reason == "tag must start with a letter"


def test_non_printable_characters_are_not_rejected() -> None:
    assert isinstance(validate_tag_name("Tag\x01name"), ValidTagName)
    assert isinstance(validate_tag_name("Tag name"), ValidTagName)


def test_invalid_tag_name_message() -> None:
    result = validate_tag_name("release@1")
    assert isinstance(result, InvalidTagName)
    assert result.error_type == "tag-name-invalid"
    assert "release@1" in result.message
    assert "'@'" in result.message


def test_check_empty_template() -> None:
    result = check_tag_name("")
    assert isinstance(result, TagNameCheckFailed)
    assert result.error_type == "tag-name-missing"
    assert result.message == "Please specify a name for this tag."


def test_check_default_template_is_accepted() -> None:
    result = check_tag_name(DEFAULT_TAG_TEMPLATE)
    assert isinstance(result, TagNameOk)
    assert re.fullmatch(r"null-null-\d{4}_\d{2}_\d{2}", result.resolved)


def test_check_syntax_error_and_naming_error_are_distinguishable() -> None:
    syntax = check_tag_name("${env['JOB_NAME']")
    naming = check_tag_name("1abc")

    assert isinstance(syntax, TagNameCheckFailed)
    assert isinstance(naming, TagNameCheckFailed)
    assert syntax.error_type == "template-syntax"
    assert naming.error_type == "tag-name-invalid"
    assert syntax.message.startswith("Check if quotes, braces, or brackets are balanced.")
    assert naming.message == "Tag name is invalid: tag must start with a letter"


def test_check_literal_tag() -> None:
    assert check_tag_name("Release_1_0") == TagNameOk(resolved="Release_1_0")
