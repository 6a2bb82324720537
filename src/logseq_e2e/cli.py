"""``logseq-e2e-test``: run the Playwright suite against a live Logseq."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from logseq_e2e import _setup_logging
from logseq_e2e.config import get_settings

console = Console()

LOG_PATH = Path("test-e2e.log")


def _pytest_command(extra_args: list[str]) -> list[str]:
    return [sys.executable, "-m", "pytest", "-m", "e2e", "--tb=short", *extra_args]


def run_e2e(extra_args: list[str], log_path: Path = LOG_PATH) -> int:
    """Run ``pytest -m e2e`` and mirror its output into *log_path*.

    Returns:
        pytest's exit code.
    """
    _setup_logging()
    base_url = get_settings().app.base_url
    command = _pytest_command(extra_args)

    console.print(
        Panel(
            f"[bold]Logseq E2E tests[/]\n"
            f"[dim]Logseq: {base_url}[/]\n"
            f"[cyan]{' '.join(command[1:])}[/]",
            border_style="blue",
        )
    )

    with log_path.open("w", encoding="utf-8") as log_file:
        log_file.write(f"Logseq: {base_url}\nCommand: {' '.join(command)}\n\n")
        process = subprocess.Popen(  # nosec B603 - fixed argv plus user pytest args
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
        )
        for line in process.stdout or []:
            sys.stdout.write(line)
            log_file.write(line)
        exit_code = process.wait()
        log_file.write(f"\nExit code: {exit_code}\n")

    style = "green" if exit_code == 0 else "red"
    console.print(f"[{style}]pytest exited with {exit_code}[/] (log: {log_path})")
    return exit_code


def test_e2e() -> None:
    """Console entry point. Arguments are passed through to pytest.

    Point ``APP__BASE_URL`` at the Logseq dev server first.
    """
    sys.exit(run_e2e(sys.argv[1:]))
