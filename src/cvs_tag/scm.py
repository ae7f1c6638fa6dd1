"""Source control configuration seen by the tagging step.

The build host resolves its SCM configuration once into either a
ScmDescriptor (CVS) or an UnsupportedScm marker before calling the core.
"""

import re
from dataclasses import dataclass

DEFAULT_CVS_EXECUTABLE = "cvs"

# Module separators are runs of spaces or newlines not preceded by a backslash
_MODULE_SEPARATOR = re.compile(r"(?<!\\)[ \r\n]+")


@dataclass(frozen=True)
class ScmDescriptor:
    """Read-only snapshot of the CVS configuration for one build.

    Attributes:
        executable: Path or name of the cvs executable
        cvs_root: Repository root locator passed via `-d`
        branch: Branch to tag from, or None for date-based tagging
        modules: Module names, already normalized
        legacy: Legacy mode, where module names are always passed explicitly
    """

    executable: str
    cvs_root: str
    branch: str | None
    modules: tuple[str, ...]
    legacy: bool

    def describe(self) -> str:
        return f"CVS({self.cvs_root})"


@dataclass(frozen=True)
class UnsupportedScm:
    """Any source control system other than CVS."""

    kind: str

    def describe(self) -> str:
        return self.kind


def normalize_modules(raw: str) -> tuple[str, ...]:
    """Split a module specification into module names.

    Modules are separated by whitespace; a backslash-escaped space ("\\ ")
    is part of the module name.

    Examples:
        >>> normalize_modules("moduleA moduleB")
        ('moduleA', 'moduleB')
        >>> normalize_modules("my\\\\ module other")
        ('my module', 'other')
    """
    return tuple(
        part.replace("\\ ", " ") for part in _MODULE_SEPARATOR.split(raw.strip()) if part
    )
