"""Tag template evaluation.

A tag template is literal text with `${...}` placeholders. Only a closed set of
placeholder forms is understood:

    ${env['NAME']}   ${env["NAME"]}   ${env.NAME}      build environment
    ${sys['name']}   ${sys["name"]}                    system properties
    ${date('yyyy_MM_dd')}                              current date
    ${new java.text.SimpleDateFormat("yyyy_MM_dd").format(new Date())}

The last form is the spelling used by older default templates and is treated
as an alias of `date(...)`. Anything else is rejected with TemplateSyntaxError.
"""

import os
import platform
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from cvs_tag.dates import DatePatternError, format_java_date

DEFAULT_TAG_TEMPLATE = "${env['JOB_NAME']}-${env['BUILD_NUMBER']}-${date('yyyy_MM_dd')}"

# Rendered for lookups of names that are not defined
MISSING_VALUE = "null"

_ESCAPES = {"\\": "\\", "$": "$", '"': '"'}

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())

_ENV_INDEX = re.compile(r"""env\s*\[\s*(?P<q>['"])(?P<name>.*?)(?P=q)\s*\]""")
_ENV_ATTR = re.compile(r"env\s*\.\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)")
_SYS_INDEX = re.compile(r"""sys\s*\[\s*(?P<q>['"])(?P<name>.*?)(?P=q)\s*\]""")
_DATE_CALL = re.compile(r"""date\s*\(\s*(?P<q>['"])(?P<pattern>.*?)(?P=q)\s*\)""")
_SIMPLE_DATE_FORMAT = re.compile(
    r"""new\s+(?:java\.text\.)?SimpleDateFormat\s*\(\s*(?P<q>['"])(?P<pattern>.*?)(?P=q)\s*\)"""
    r"""\s*\.\s*format\s*\(\s*new\s+(?:java\.util\.)?Date\s*\(\s*\)\s*\)"""
)


class TemplateSyntaxError(ValueError):
    """Raised when a tag template cannot be parsed or uses an unsupported expression."""


@dataclass(frozen=True)
class VariableEnvironment:
    """Variables visible to a template: build environment plus system properties."""

    variables: Mapping[str, str] = field(default_factory=dict)
    system: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "VariableEnvironment":
        return cls(variables={}, system={})


def local_now() -> datetime:
    """Current local time, carrying the local zone so `z` renders its name."""
    return datetime.now().astimezone()


def default_system_properties() -> dict[str, str]:
    """System properties exposed to templates as `sys[...]`."""
    return {
        "user.name": os.environ.get("USER", os.environ.get("USERNAME", "")),
        "user.home": str(Path.home()),
        "user.dir": os.getcwd(),
        "os.name": platform.system(),
        "os.arch": platform.machine(),
        "file.separator": os.sep,
        "path.separator": os.pathsep,
    }


def resolve_template(
    template: str, env: VariableEnvironment, *, now: datetime | None = None
) -> str:
    """Resolve a tag template to a plain string.

    Args:
        template: Template text, e.g. "${env['JOB_NAME']}-${env['BUILD_NUMBER']}"
        env: Variables available to the template
        now: Clock value used by date placeholders (defaults to the current time)

    Returns:
        The resolved value with surrounding whitespace removed ("" when empty)

    Raises:
        TemplateSyntaxError: If the template is malformed or uses an
            unsupported expression
    """
    when = now if now is not None else local_now()
    parts: list[str] = []
    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch == "\\":
            if i + 1 >= n:
                raise TemplateSyntaxError("dangling '\\' at end of template")
            escaped = template[i + 1]
            if escaped not in _ESCAPES:
                raise TemplateSyntaxError(
                    f"unsupported escape sequence '\\{escaped}' at position {i}"
                )
            parts.append(_ESCAPES[escaped])
            i += 2
        elif ch == '"':
            raise TemplateSyntaxError(f"unescaped quote at position {i}")
        elif ch == "$":
            if not template.startswith("${", i):
                raise TemplateSyntaxError(
                    f"unexpected '$' at position {i} (use '\\$' for a literal dollar sign)"
                )
            end = _find_placeholder_end(template, i)
            parts.append(_evaluate(template[i + 2 : end].strip(), env, when))
            i = end + 1
        else:
            parts.append(ch)
            i += 1
    return "".join(parts).strip()


def _find_placeholder_end(template: str, start: int) -> int:
    """Return the index of the '}' closing the placeholder opened at `start`."""
    stack: list[str] = []
    quote: str | None = None
    i = start + 2
    while i < len(template):
        ch = template[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if not stack:
                if ch == "}":
                    return i
                raise TemplateSyntaxError(f"unbalanced '{ch}' at position {i}")
            expected = stack.pop()
            if ch != expected:
                raise TemplateSyntaxError(
                    f"unbalanced brackets: expected '{expected}' but found '{ch}' at position {i}"
                )
        i += 1
    if quote is not None:
        raise TemplateSyntaxError(f"unterminated string literal in placeholder at position {start}")
    raise TemplateSyntaxError(f"unbalanced braces: '${{' at position {start} is never closed")


def _evaluate(body: str, env: VariableEnvironment, when: datetime) -> str:
    match = _ENV_INDEX.fullmatch(body) or _ENV_ATTR.fullmatch(body)
    if match is not None:
        return _lookup(env.variables, match.group("name"))

    match = _SYS_INDEX.fullmatch(body)
    if match is not None:
        return _lookup(env.system, match.group("name"))

    match = _DATE_CALL.fullmatch(body) or _SIMPLE_DATE_FORMAT.fullmatch(body)
    if match is not None:
        try:
            return format_java_date(match.group("pattern"), when)
        except DatePatternError as e:
            raise TemplateSyntaxError(str(e)) from e

    raise TemplateSyntaxError(f"unsupported expression '${{{body}}}'")


def _lookup(values: Mapping[str, str], name: str) -> str:
    value = values.get(name)
    if value is None:
        return MISSING_VALUE
    return str(value)
