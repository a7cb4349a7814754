"""Command-line entry point for forge-init."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from . import __version__
from . import log as forge_log
from .models import InitRequest, TemplateDescriptor
from .services import ServiceFailure
from .services.init import InitializeProjectService

app = typer.Typer(
    name="forge-init",
    help="Scaffold a new smart-contract project.",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


def _validate_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in forge_log.LOG_LEVEL_NAMES:
        choices = ", ".join(forge_log.LOG_LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {choices}")
    return normalized


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"forge-init {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Minimum log level (trace, debug, info, success, warning, error).",
            callback=_validate_log_level,
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colored output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", help="Show the version and exit.", callback=_print_version, is_eager=True
        ),
    ] = False,
) -> None:
    """Scaffold a new smart-contract project."""
    del version
    if log_level is not None:
        forge_log.set_level(log_level)
    if no_color:
        forge_log.set_no_color(True)


def _fail(failure: ServiceFailure) -> typer.Exit:
    forge_log.error(failure.message)
    if failure.recovery_hint:
        forge_log.hint(failure.recovery_hint)
    return typer.Exit(code=1)


@app.command("init")
def init_cmd(
    root: Annotated[
        Path,
        typer.Argument(metavar="PATH", help="The root directory of the new project."),
    ] = Path("."),
    template: Annotated[
        str | None, typer.Option("--template", "-t", help="The template to start from.")
    ] = None,
    branch: Annotated[
        str | None,
        typer.Option(
            "--branch",
            "-b",
            help="Template branch to use (requires --template). Defaults to the default branch.",
        ),
    ] = None,
    offline: Annotated[
        bool,
        typer.Option(
            "--offline", "--no-deps", help="Do not install dependencies from the network."
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force", help="Create the project even if the root directory is not empty."
        ),
    ] = False,
    vscode: Annotated[
        bool,
        typer.Option(
            "--vscode",
            help="Create .vscode/settings.json with Solidity settings and a remappings.txt file.",
        ),
    ] = False,
    vyper: Annotated[
        bool, typer.Option("--vyper", help="Initialize a Vyper project template.")
    ] = False,
    shallow: Annotated[
        bool, typer.Option("--shallow", help="Fetch dependencies and submodules shallowly.")
    ] = False,
    no_git: Annotated[
        bool, typer.Option("--no-git", help="Do not create or touch a git repository.")
    ] = False,
    commit: Annotated[
        bool, typer.Option("--commit", help="Commit the initialized project.")
    ] = False,
) -> None:
    """Create a new project from the built-in skeleton or a template repository."""
    if branch and not template:
        raise typer.BadParameter("can only be used together with --template", param_hint="--branch")
    try:
        request = InitRequest(
            root=root,
            template=TemplateDescriptor(reference=template, branch=branch) if template else None,
            offline=offline,
            force=force,
            vscode=vscode,
            vyper=vyper,
            shallow=shallow,
            no_git=no_git,
            commit=commit,
        )
    except ValidationError as exc:
        messages = "; ".join(error["msg"].removeprefix("Value error, ") for error in exc.errors())
        raise typer.BadParameter(messages) from exc

    try:
        InitializeProjectService.run_default(request)
    except ServiceFailure as failure:
        raise _fail(failure) from failure
