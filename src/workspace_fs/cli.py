"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from workspace_fs.context import AppContext

import typer
from rich.logging import RichHandler

from workspace_fs import __version__
from workspace_fs.console import Output
from workspace_fs.context import create_context
from workspace_fs.operators import FsOperatorError
from workspace_fs.workspace import Workspace

app = typer.Typer(
    name="workspace-fs",
    help="File operations against local or distributed workspaces",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

output = Output()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (defaults to $WORKSPACE_FS_CONFIG)"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"workspace-fs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every operator decision")
    ] = False,
) -> None:
    """File operations against local or distributed workspaces."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=output.console, show_path=False)],
        )


def _fail(message: str, error: Exception) -> typer.Exit:
    """Report an error and build the exit to raise."""
    output.show_error(f"{message}: {error}")
    return typer.Exit(1)


# ============================================================================
# Operator Commands
# ============================================================================


@app.command("exists")
def exists(
    path: Annotated[str, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Exit 0 if a file or directory exists at PATH, 1 otherwise."""
    ctx = _context or create_context()
    if ctx.operator.exists(path):
        output.show_success(f"{path} exists")
        return
    output.show_warning(f"{path} does not exist")
    raise typer.Exit(1)


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    clean: Annotated[
        bool, typer.Option("--clean", help="Delete existing content first")
    ] = False,
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()
    try:
        if clean:
            ctx.operator.mk_clean_dirs(path)
        else:
            ctx.operator.mkdirs(path)
    except (FsOperatorError, OSError) as e:
        raise _fail(f"Cannot create {path}", e) from e
    output.show_success(f"Created {path}")


@app.command("rm")
def rm(
    path: Annotated[str, typer.Argument(help="File or directory to delete")],
    _context=None,
) -> None:
    """Delete a file or directory tree."""
    ctx = _context or create_context()
    try:
        ctx.operator.delete(path)
    except OSError as e:
        raise _fail(f"Cannot delete {path}", e) from e
    output.show_success(f"Deleted {path}")


@app.command("mv")
def mv(
    src: Annotated[str, typer.Argument(help="Source path")],
    dst: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move SRC to DST, replacing DST if present."""
    ctx = _context or create_context()
    try:
        ctx.operator.move(src, dst)
    except (FsOperatorError, OSError) as e:
        raise _fail(f"Cannot move {src}", e) from e
    output.show_success(f"Moved {src} to {dst}")


@app.command("cp")
def cp(
    src: Annotated[str, typer.Argument(help="File or directory to copy")],
    dst: Annotated[str, typer.Argument(help="Target file path or directory")],
    delete_source: Annotated[
        bool, typer.Option("--delete-source", help="Remove SRC after copying")
    ] = False,
    overwrite: Annotated[
        bool, typer.Option("--overwrite/--no-overwrite", help="Copy over an existing DST")
    ] = True,
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx = _context or create_context()
    try:
        ctx.operator.upload(src, dst, delete_source, overwrite)
    except (FsOperatorError, OSError) as e:
        raise _fail(f"Cannot copy {src}", e) from e
    output.show_success(f"Copied {src} to {dst}")


@app.command("hash")
def hash_(
    path: Annotated[str, typer.Argument(help="File to fingerprint")],
    _context=None,
) -> None:
    """Print the content hash of a file."""
    ctx = _context or create_context()
    try:
        digest = ctx.operator.content_hash(path)
    except (FsOperatorError, OSError) as e:
        raise _fail(f"Cannot hash {path}", e) from e
    output.console.print(f"{digest}  {path}")


@app.command("ls")
def ls(
    path: Annotated[str, typer.Argument(help="Directory or file to list")],
    _context=None,
) -> None:
    """List a directory one level deep."""
    ctx = _context or create_context()
    output.show_listing(path, ctx.operator.list_directory(path))


@app.command("stat")
def stat(
    path: Annotated[str, typer.Argument(help="Path to describe")],
    _context=None,
) -> None:
    """Show whether PATH is a file, a directory or absent."""
    ctx = _context or create_context()
    output.show_node(ctx.operator.node_info(path))


# ============================================================================
# Workspace Commands
# ============================================================================


@app.command("clean")
def clean(
    parts: Annotated[list[str], typer.Argument(help="Sub-directory inside the workspace")],
    config: ConfigOption = None,
    _context=None,
) -> None:
    """Reset a workspace sub-directory to an empty directory."""
    try:
        ctx = _context or create_context(config)
    except (FileNotFoundError, ValueError) as e:
        raise _fail("Cannot load config", e) from e
    workspace = Workspace.from_settings(ctx.settings, ctx.operator)
    try:
        target = workspace.reset(*parts)
    except (FsOperatorError, OSError) as e:
        raise _fail("Cannot reset workspace directory", e) from e
    output.show_success(f"Reset {target}")


@app.command("prune")
def prune(
    parts: Annotated[list[str], typer.Argument(help="Backup directory inside the workspace")],
    config: ConfigOption = None,
    _context=None,
) -> None:
    """Delete backups beyond the configured retention count."""
    try:
        ctx = _context or create_context(config)
    except (FileNotFoundError, ValueError) as e:
        raise _fail("Cannot load config", e) from e
    workspace = Workspace.from_settings(ctx.settings, ctx.operator)
    try:
        removed = workspace.prune_backups(*parts)
    except (FsOperatorError, OSError) as e:
        raise _fail("Cannot prune backups", e) from e
    if not removed:
        output.console.print("[dim]No backups to prune[/dim]")
        return
    for path in removed:
        output.show_success(f"Removed {path}")


@config_app.command("show")
def config_show(
    config: ConfigOption = None,
    _context=None,
) -> None:
    """Show effective configuration."""
    try:
        ctx = _context or create_context(config)
    except (FileNotFoundError, ValueError) as e:
        raise _fail("Cannot load config", e) from e
    output.show_settings(ctx.settings)
