"""Fake build log for testing."""

from cvs_tag.gateway.build_log.abc import BuildLog


class FakeBuildLog(BuildLog):
    """In-memory build log.

    Mutation Tracking:
    -----------------
    - lines: Informational lines in the order written
    - errors: (message, exception) tuples from error()
    - fatal_errors: Messages from fatal_error()
    - all_text: Every message joined with newlines, in write order
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._errors: list[tuple[str, BaseException | None]] = []
        self._fatal_errors: list[str] = []
        self._ordered: list[str] = []

    def println(self, line: str) -> None:
        self._lines.append(line)
        self._ordered.append(line)

    def error(self, message: str, *, exc: BaseException | None) -> None:
        self._errors.append((message, exc))
        self._ordered.append(message)

    def fatal_error(self, message: str) -> None:
        self._fatal_errors.append(message)
        self._ordered.append(message)

    @property
    def lines(self) -> list[str]:
        return self._lines.copy()

    @property
    def errors(self) -> list[tuple[str, BaseException | None]]:
        return self._errors.copy()

    @property
    def fatal_errors(self) -> list[str]:
        return self._fatal_errors.copy()

    @property
    def all_text(self) -> str:
        return "\n".join(self._ordered)
