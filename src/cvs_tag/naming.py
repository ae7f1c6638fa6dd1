"""CVS tag name validation.

CVS tag names must start with a letter and may not contain any of the
characters `$ , . : ; @`. No other restriction is enforced.
"""

from dataclasses import dataclass

from cvs_tag.expression import TemplateSyntaxError, VariableEnvironment, resolve_template

ILLEGAL_TAG_CHARACTERS = "$,.:;@"


@dataclass(frozen=True)
class ValidTagName:
    """Validation success for a tag name.

    Attributes:
        tag_name: The validated tag name.
    """

    tag_name: str


@dataclass(frozen=True)
class InvalidTagName:
    """Validation failure for a tag name. Implements NonIdealState.

    Attributes:
        raw_tag_name: The tag name that failed validation.
        reason: Short description of the first rule that failed.
    """

    raw_tag_name: str
    reason: str

    @property
    def error_type(self) -> str:
        return "tag-name-invalid"

    @property
    def message(self) -> str:
        return f"Tag name {self.raw_tag_name!r} is invalid: {self.reason}"


def validate_tag_name(tag_name: str) -> ValidTagName | InvalidTagName:
    """Validate a resolved tag name against CVS naming rules.

    Rules are checked in order and the first failure wins.

    Examples:
        >>> validate_tag_name("Release_1_0")
        ValidTagName(tag_name='Release_1_0')
        >>> validate_tag_name("release@1").reason
        "tag contains illegal character '@'"
    """
    if not tag_name:
        return InvalidTagName(raw_tag_name=tag_name, reason="tag is empty")

    first = tag_name[0]
    if not (("A" <= first <= "Z") or ("a" <= first <= "z")):
        return InvalidTagName(raw_tag_name=tag_name, reason="tag must start with a letter")

    for ch in tag_name:
        if ch in ILLEGAL_TAG_CHARACTERS:
            return InvalidTagName(
                raw_tag_name=tag_name, reason=f"tag contains illegal character '{ch}'"
            )

    return ValidTagName(tag_name=tag_name)


@dataclass(frozen=True)
class TagNameOk:
    """A tag template that resolves to a valid tag name."""

    resolved: str


@dataclass(frozen=True)
class TagNameCheckFailed:
    """A tag template rejected by the configuration check. Implements NonIdealState."""

    kind: str
    message: str

    @property
    def error_type(self) -> str:
        return self.kind


def check_tag_name(raw: str) -> TagNameOk | TagNameCheckFailed:
    """Check a tag template the way the configuration form does.

    The template is resolved against an empty environment and the result is
    validated. Syntax errors and naming violations produce distinct messages.
    """
    if not raw:
        return TagNameCheckFailed(
            kind="tag-name-missing", message="Please specify a name for this tag."
        )

    try:
        resolved = resolve_template(raw, VariableEnvironment.empty())
    except TemplateSyntaxError as e:
        return TagNameCheckFailed(
            kind="template-syntax",
            message=f"Check if quotes, braces, or brackets are balanced. {e}",
        )

    validation = validate_tag_name(resolved)
    if isinstance(validation, InvalidTagName):
        return TagNameCheckFailed(
            kind=validation.error_type,
            message=f"Tag name is invalid: {validation.reason}",
        )
    return TagNameOk(resolved=resolved)
