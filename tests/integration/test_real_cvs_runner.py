"""Integration tests for RealCvsRunner.

These tests launch real processes with `sh` standing in for cvs, so they
verify process launch, output streaming, exit codes, working directory and
environment handling without needing a CVS server.
"""

from pathlib import Path

import pytest

from cvs_tag.command import TagCommand, TagMode
from cvs_tag.executor import execute_tag_command
from cvs_tag.gateway.build_log.fake import FakeBuildLog
from cvs_tag.gateway.cvs_runner.real import RealCvsRunner
from cvs_tag.outcome import TagFailed, TagSucceeded, TagUnstable


def test_streams_output_and_returns_exit_code(tmp_path: Path) -> None:
    log = FakeBuildLog()

    exit_code = RealCvsRunner().run(
        ["sh", "-c", "echo first; echo second 1>&2; exit 0"], cwd=tmp_path, env={}, log=log
    )

    assert exit_code == 0
    assert log.lines == ["first", "second"]


def test_undecodable_output_is_logged_and_does_not_fail(tmp_path: Path) -> None:
    log = FakeBuildLog()
    command = TagCommand(
        args=("sh", "-c", "printf 'T caf\\351.c\\n'; exit 0"), mode=TagMode.BRANCH
    )

    outcome = execute_tag_command(
        command, runner=RealCvsRunner(), log=log, env={}, workspace_root=tmp_path
    )

    assert outcome == TagSucceeded()
    assert "T caf\ufffd.c" in log.lines


def test_reports_non_zero_exit(tmp_path: Path) -> None:
    exit_code = RealCvsRunner().run(
        ["sh", "-c", "exit 3"], cwd=tmp_path, env={}, log=FakeBuildLog()
    )
    assert exit_code == 3


def test_runs_in_working_directory(tmp_path: Path) -> None:
    log = FakeBuildLog()

    RealCvsRunner().run(["sh", "-c", "pwd"], cwd=tmp_path, env={}, log=log)

    assert Path(log.lines[0]).resolve() == tmp_path.resolve()


def test_passes_environment(tmp_path: Path) -> None:
    log = FakeBuildLog()

    RealCvsRunner().run(
        ["sh", "-c", 'echo "$BUILD_NUMBER"'], cwd=tmp_path, env={"BUILD_NUMBER": "7"}, log=log
    )

    assert log.lines == ["7"]


def test_missing_executable_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        RealCvsRunner().run(
            ["nonexistent_command_that_does_not_exist_12345"],
            cwd=tmp_path,
            env={},
            log=FakeBuildLog(),
        )


def test_date_mode_command_runs_in_removed_temp_dir(tmp_path: Path) -> None:
    log = FakeBuildLog()
    command = TagCommand(args=("sh", "-c", "pwd; touch marker"), mode=TagMode.DATE)

    outcome = execute_tag_command(
        command, runner=RealCvsRunner(), log=log, env={}, workspace_root=tmp_path
    )

    assert outcome == TagSucceeded()
    work_dir = Path(log.lines[1])
    assert work_dir.resolve().parent == tmp_path.resolve()
    assert not work_dir.exists()
    assert list(tmp_path.iterdir()) == []


def test_executor_maps_real_failures(tmp_path: Path) -> None:
    failing = TagCommand(args=("sh", "-c", "exit 1"), mode=TagMode.BRANCH)
    missing = TagCommand(
        args=("nonexistent_command_that_does_not_exist_12345",), mode=TagMode.BRANCH
    )

    assert execute_tag_command(
        failing, runner=RealCvsRunner(), log=FakeBuildLog(), env={}, workspace_root=tmp_path
    ) == TagUnstable(exit_code=1)
    assert isinstance(
        execute_tag_command(
            missing, runner=RealCvsRunner(), log=FakeBuildLog(), env={}, workspace_root=tmp_path
        ),
        TagFailed,
    )
