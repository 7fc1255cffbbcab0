"""Tests for the CLI application (cli/app.py).

The subprocess executor is patched at its source module; no runtime
is invoked.

Coverage:
* Argument handling and usage errors (exit code 1, never argparse's 2).
* Pull-then-run orchestration and ``--pull-only``.
* Stage failures stop the flow; a failed run keeps the pulled image.
* The ``cli`` error boundary: stream routing and exit codes.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from conftest import RecordingExecutor, make_result
from dockpull.cli import exit_codes
from dockpull.cli.app import cli, main
from dockpull.exceptions import ArgumentError, LaunchFailedError, PullFailedError, RunFailedError

_EXECUTOR = "dockpull.infra.subprocess_executor.SubprocessExecutor"
_NAME = "dockpull.core.naming.generate_container_name"


def _run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["dockpull", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return int(exc_info.value.code or 0)


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class TestArguments:
    def test_missing_image_raises_argument_error(self) -> None:
        with pytest.raises(ArgumentError, match="not enough arguments") as exc_info:
            main([])
        assert exc_info.value.hint == "Usage: dockpull <image-reference>"

    def test_empty_image_rejected(self) -> None:
        with pytest.raises(ArgumentError, match="Problem parsing arguments"):
            main([""])

    def test_unknown_option_is_argument_error(self) -> None:
        with pytest.raises(ArgumentError, match="unrecognized arguments") as exc_info:
            main(["--bogus", "hello-world"])
        assert exc_info.value.hint is not None
        assert exc_info.value.hint.startswith("usage:")

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

class TestPullAndRun:
    @patch(_NAME, return_value="container_0123456789")
    @patch(_EXECUTOR)
    def test_pull_then_run(
        self,
        mock_executor_cls: MagicMock,
        _mock_name: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        executor = RecordingExecutor(make_result(), make_result(stdout="9f8e7d6c5b4a3210\n"))
        mock_executor_cls.return_value = executor

        assert main(["hello-world"]) == exit_codes.SUCCESS
        assert executor.calls == [
            ["docker", "pull", "hello-world"],
            ["docker", "run", "--name", "container_0123456789", "-d", "-ti", "--rm", "hello-world"],
        ]

        out = capsys.readouterr().out
        assert "Image: hello-world" in out
        assert "Successfully pulled image: hello-world" in out
        assert "container_0123456789 (9f8e7d6c5b4a)" in out

    @patch(_EXECUTOR)
    def test_pull_only(self, mock_executor_cls: MagicMock) -> None:
        executor = RecordingExecutor()
        mock_executor_cls.return_value = executor

        assert main(["--pull-only", "alpine:3.20"]) == exit_codes.SUCCESS
        assert executor.calls == [["docker", "pull", "alpine:3.20"]]

    @patch(_EXECUTOR)
    def test_image_named_doctor_is_pulled(self, mock_executor_cls: MagicMock) -> None:
        executor = RecordingExecutor()
        mock_executor_cls.return_value = executor

        assert main(["--pull-only", "doctor"]) == exit_codes.SUCCESS
        assert executor.calls == [["docker", "pull", "doctor"]]

    @patch("dockpull.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    @patch(_EXECUTOR)
    def test_positional_never_routes_to_diagnostics(
        self, mock_executor_cls: MagicMock, mock_doctor: MagicMock,
    ) -> None:
        executor = RecordingExecutor()
        mock_executor_cls.return_value = executor

        main(["Doctor"])
        mock_doctor.assert_not_called()
        assert [call[:2] for call in executor.calls] == [
            ["docker", "pull"], ["docker", "run"],
        ]
        assert executor.calls[0][-1] == "Doctor"

    @patch(_EXECUTOR)
    def test_custom_runtime(self, mock_executor_cls: MagicMock) -> None:
        executor = RecordingExecutor()
        mock_executor_cls.return_value = executor

        main(["--runtime", "podman", "busybox"])
        assert [call[0] for call in executor.calls] == ["podman", "podman"]

    @patch(_EXECUTOR)
    def test_verbose_echoes_commands(
        self, mock_executor_cls: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_executor_cls.return_value = RecordingExecutor()

        main(["-v", "--pull-only", "hello-world"])
        assert "$ docker pull hello-world" in capsys.readouterr().out

    @patch(_EXECUTOR)
    def test_pull_failure_skips_run(self, mock_executor_cls: MagicMock) -> None:
        executor = RecordingExecutor(make_result(returncode=1, stderr="not found"))
        mock_executor_cls.return_value = executor

        with pytest.raises(PullFailedError):
            main(["non_existent_image"])
        assert len(executor.calls) == 1

    @patch(_EXECUTOR)
    def test_run_failure_after_pull(self, mock_executor_cls: MagicMock) -> None:
        executor = RecordingExecutor(
            make_result(),
            make_result(returncode=125, stderr="the input device is not a TTY"),
        )
        mock_executor_cls.return_value = executor

        with pytest.raises(RunFailedError, match="not a TTY"):
            main(["hello-world"])
        # No rollback: nothing is issued after the failed run.
        assert [call[1] for call in executor.calls] == ["pull", "run"]


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestCliBoundary:
    def test_missing_argument_exits_one_with_usage(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch) == exit_codes.GENERAL_ERROR

        captured = capsys.readouterr()
        assert "not enough arguments" in captured.err
        assert "Usage: dockpull <image-reference>" in captured.err
        assert captured.out == ""

    def test_unknown_option_exits_one(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        assert _run_cli(monkeypatch, "--bogus") == exit_codes.GENERAL_ERROR

    @patch(_EXECUTOR)
    def test_success_exits_zero(
        self, mock_executor_cls: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_executor_cls.return_value = RecordingExecutor()
        assert _run_cli(monkeypatch, "hello-world") == exit_codes.SUCCESS

    @patch(_EXECUTOR)
    def test_pull_failure_reports_stderr(
        self,
        mock_executor_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        stderr = "[auth] denied"
        mock_executor_cls.return_value = RecordingExecutor(
            make_result(returncode=1, stderr=stderr),
        )

        assert _run_cli(monkeypatch, "non_existent_image") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "non_existent_image: [auth] denied" in err

    @patch(_EXECUTOR)
    def test_run_failure_exits_one_with_stderr(
        self,
        mock_executor_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_executor_cls.return_value = RecordingExecutor(
            make_result(),
            make_result(returncode=125, stderr="name already in use"),
        )

        assert _run_cli(monkeypatch, "hello-world") == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert "Failed to run image hello-world" in captured.err
        assert "name already in use" in captured.err
        assert "Successfully pulled image: hello-world" in captured.out

    @patch(_EXECUTOR)
    def test_launch_failure_shows_hint(
        self,
        mock_executor_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_executor_cls.return_value.execute.side_effect = LaunchFailedError(
            "docker executable not found", hint="Install docker using one of:",
        )

        assert _run_cli(monkeypatch, "hello-world") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "docker executable not found" in err
        assert "Hint:" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from dockpull.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from dockpull.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise ValueError("kaboom")

        monkeypatch.setattr(app_module, "main", _explode)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "ValueError: kaboom" in capsys.readouterr().err
