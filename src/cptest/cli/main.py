"""CLI entry point for cptest."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from colorama import init as colorama_init

from cptest import __version__
from cptest.config import CptestConfig, default_config_paths, load_config, write_default_config
from cptest.core import TestCaseRecorder, Verdict
from cptest.errors import CptestError
from cptest.reporting import JsonReporter, Reporter, ReportManager, TerminalReporter
from cptest.session import TestSession


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool, config_path: Optional[str], use_color: bool) -> None:
        self.verbose = verbose
        self.config_path = config_path
        self.use_color = use_color

    def load_config(self) -> CptestConfig:
        return load_config(self.config_path)


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"cptest {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Configuration file (defaults to $CPTEST_CONFIG or ~/cptest-config.yaml).",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the cptest version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[str], no_color: bool) -> None:
    """Run competitive programming solutions against stored test cases."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = CliState(verbose=verbose, config_path=config_path, use_color=not no_color)


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("-t", "--test-id", type=click.IntRange(min=1), help="Run only this test case.")
@click.option("--no-compile", is_flag=True, help="Reuse the previous build instead of compiling.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.pass_obj
def test(
    state: CliState,
    file: str,
    test_id: Optional[int],
    no_compile: bool,
    report_format: str,
    report_path: Optional[str],
) -> None:
    """Evaluate FILE against its stored test cases."""

    reporter: Reporter = TerminalReporter(use_color=state.use_color)
    if report_format == "json":
        reporter = ReportManager([reporter, JsonReporter(path=report_path)])
    try:
        session = TestSession(state.load_config(), Path(file), reporter=reporter)
        _check_no_compile_flag(session, no_compile, reporter)
        if test_id is not None:
            verdict = session.run_one(test_id, compile=not no_compile)
            exit_code = 0 if verdict is Verdict.AC else 1
        else:
            summary = session.run_all(compile=not no_compile)
            exit_code = 0 if summary.all_accepted else 1
    except CptestError as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("-t", "--test-id", type=click.IntRange(min=1), help="Feed this test case's input.")
@click.option("--no-compile", is_flag=True, help="Reuse the previous debug build.")
@click.pass_obj
def debug(state: CliState, file: str, test_id: Optional[int], no_compile: bool) -> None:
    """Run FILE with the debug command, attached to the terminal."""

    reporter = TerminalReporter(use_color=state.use_color)
    try:
        session = TestSession(state.load_config(), Path(file), reporter=reporter)
        _check_no_compile_flag(session, no_compile, reporter)
        if test_id is not None:
            exit_code = session.debug_one(test_id, compile=not no_compile)
        else:
            exit_code = session.debug_with_user_input(compile=not no_compile)
    except CptestError as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
def add(file: str) -> None:
    """Record a new test case for FILE from standard input."""

    path = Path(file)
    if not path.is_file():
        raise click.ClickException(f"File not found: {path}")
    try:
        TestCaseRecorder().record(path)
    except OSError as exc:
        raise click.ClickException(f"could not write test case: {exc}") from exc


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False))
def init(path: Optional[str]) -> None:
    """Write a default configuration file."""

    written = write_default_config(path)
    if written is None:
        click.echo(f"\"{path or default_config_paths()[0]}\" already exists")
        return
    click.echo(f'Your configuration file has been written in: "{written}"')


def _check_no_compile_flag(session: TestSession, no_compile: bool, reporter: Reporter) -> None:
    if no_compile and not session.language.needs_compile:
        reporter.on_notice(
            f"{session.language.language.value} does not support compilation, "
            "using --no-compile option is unnecessary"
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    colorama_init()
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="cptest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
