"""Construction of the cvs tag/rtag command line.

Two command shapes exist and exactly one is produced per build:

    cvs -d ROOT tag  [-F] -r BRANCH TAG [MODULE...]     (branch mode)
    cvs -d ROOT rtag [-F] -D DATE   TAG MODULE...       (date mode)

Branch mode is selected if and only if the SCM configuration names a branch.
"""

import shlex
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from cvs_tag.dates import format_java_date
from cvs_tag.scm import ScmDescriptor

# Equivalent of DateFormat.FULL date + FULL time for Locale.US in UTC
RTAG_DATE_PATTERN = "EEEE, MMMM d, yyyy h:mm:ss a z"


class TagMode(Enum):
    BRANCH = "tag"
    DATE = "rtag"


@dataclass(frozen=True)
class TagCommand:
    """A fully assembled cvs invocation.

    Attributes:
        args: Argument vector, starting with the executable
        mode: Which command shape was built
    """

    args: tuple[str, ...]
    mode: TagMode

    @property
    def uses_branch(self) -> bool:
        return self.mode is TagMode.BRANCH

    def display(self) -> str:
        """Shell-quoted rendering for logs."""
        return shlex.join(self.args)


def format_rtag_date(timestamp: datetime) -> str:
    """Render a build timestamp for `rtag -D`, in UTC with US English names.

    Naive datetimes are taken to be UTC already.

    Examples:
        >>> format_rtag_date(datetime(2024, 3, 5, 14, 7, 9, tzinfo=UTC))
        'Tuesday, March 5, 2024 2:07:09 PM UTC'
    """
    if timestamp.tzinfo is None:
        utc_timestamp = timestamp.replace(tzinfo=UTC)
    else:
        utc_timestamp = timestamp.astimezone(UTC)
    return format_java_date(RTAG_DATE_PATTERN, utc_timestamp)


def should_append_modules(scm: ScmDescriptor) -> bool:
    """Whether module names are passed explicitly.

    A single module in non-legacy branch mode is omitted; cvs picks it up from
    the working copy instead.
    """
    return scm.branch is None or scm.legacy or len(scm.modules) > 1


def build_tag_command(
    scm: ScmDescriptor,
    tag_name: str,
    *,
    move_tag: bool,
    build_timestamp: datetime,
) -> TagCommand:
    """Build the cvs command that applies `tag_name`.

    The tag name is expected to be validated already.

    Args:
        scm: CVS configuration of the build
        tag_name: Resolved, validated tag name
        move_tag: Pass -F so an existing tag is moved
        build_timestamp: Build start time, used by date mode

    Returns:
        The assembled TagCommand (not executed)
    """
    args = [scm.executable, "-d", scm.cvs_root]

    if scm.branch is not None:
        mode = TagMode.BRANCH
        args.append(mode.value)
        if move_tag:
            args.append("-F")
        args.extend(["-r", scm.branch, tag_name])
    else:
        mode = TagMode.DATE
        args.append(mode.value)
        if move_tag:
            args.append("-F")
        args.extend(["-D", format_rtag_date(build_timestamp), tag_name])

    if should_append_modules(scm):
        args.extend(scm.modules)

    return TagCommand(args=tuple(args), mode=mode)
