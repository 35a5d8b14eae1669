"""vsdiff CLI: Typer application with diff, list, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from vsdiff import __version__
from vsdiff.logging import configure_logging
from vsdiff.logging import console as err_console

app = typer.Typer(
    name="vsd",
    help="Open git diff in a visual diff editor.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

_PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


class PassthroughCommand(TyperCommand):
    """Remember the raw argv so pathspecs after ``--`` can be told apart."""

    def parse_args(self, ctx, args):
        ctx.meta["vsd.raw_args"] = list(args)
        return super().parse_args(ctx, args)


def _passthrough(ctx: typer.Context) -> Tuple[List[str], List[str]]:
    """Return (git pre-args, pathspecs) from the unparsed extra arguments."""
    from vsdiff.git.args import split_args

    _, pathspecs = split_args(ctx.meta.get("vsd.raw_args", []))
    extra = list(ctx.args)
    if pathspecs:
        extra = extra[: len(extra) - len(pathspecs)]
    return extra, pathspecs


def _resolve_repo_root(cwd: Path) -> Path:
    """Find the git repo root (cwd outside a repo), exit 2 if git is missing."""
    from vsdiff.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(cwd)
    except GitError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _load(config: Optional[str]):
    """Resolve the repo root and load config, exit 2 on failure."""
    from vsdiff.config.loader import ConfigError, load_config

    cwd = Path.cwd()
    repo_root = _resolve_repo_root(cwd)

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        err_console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    return cwd, repo_root, cfg


def _collect(ctx: typer.Context, staged: bool, exclude: Optional[List[str]], config: Optional[str]):
    """Shared front half of ``diff`` and ``list``: run git diff and filter."""
    from vsdiff.filters.paths import normalize_excludes
    from vsdiff.git.adapter import GitError, raw_diff_args
    from vsdiff.git.args import apply_staged_flag
    from vsdiff.output import terminal
    from vsdiff.review.engine import collect_changes, staged_hint

    cwd, repo_root, cfg = _load(config)
    pre_args, pathspecs = _passthrough(ctx)
    excludes = normalize_excludes([*cfg.diff.exclude, *(exclude or [])])
    final_pre_args = apply_staged_flag(pre_args, staged or cfg.diff.staged)

    console.print(f"git diff {escape(' '.join(raw_diff_args(final_pre_args, pathspecs)))}", style="dim")
    try:
        session = collect_changes(
            cwd, final_pre_args, pathspecs, excludes, timeout=cfg.git.timeout
        )
    except GitError as exc:
        err_console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=exc.exit_code) from exc

    terminal.print_counts(console, len(session.parsed), len(session.entries))

    if session.empty:
        hint = staged_hint(cwd, final_pre_args, excludes, timeout=cfg.git.timeout)
        if hint:
            terminal.print_staged_hint(console, hint)
        if session.excluded:
            terminal.print_excluded(console, session.excluded)
        console.print("No changes (after excludes)." if excludes else "No changes.")
        raise typer.Exit(code=0)

    return repo_root, cfg, session


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command(cls=PassthroughCommand, context_settings=_PASSTHROUGH)
def diff(
    ctx: typer.Context,
    staged: bool = typer.Option(False, "--staged", help="Use staged changes (git diff --staged)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Exclude a path or folder name (repeatable)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vsdiff.toml"),
    wait: Optional[bool] = typer.Option(None, "--wait/--no-wait", help="Open pairs one at a time"),
    dry_run: bool = typer.Option(False, "--dry-run", help="List changes without opening the viewer"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Open each changed file of `git diff [ARGS] [-- PATHS]` in the viewer."""
    from vsdiff.content.resolver import ContentResolver
    from vsdiff.content.staging import StagingArea
    from vsdiff.output import terminal
    from vsdiff.review.engine import stage_entries
    from vsdiff.viewer.launcher import ViewerError, launch_viewer

    configure_logging(verbose=verbose, debug=debug)
    repo_root, cfg, session = _collect(ctx, staged, exclude, config)

    if dry_run:
        console.print(f"[bold]Dry run: {len(session.entries)} files would be opened:[/bold]")
        for record in session.entries:
            terminal.print_entry(console, record, prefix="  ")
        raise typer.Exit(code=0)

    wait_each = cfg.viewer.wait if wait is None else wait
    resolver = ContentResolver(repo_root, timeout=cfg.git.timeout)
    staging = StagingArea()
    try:
        for pair in stage_entries(session.entries, resolver, staging):
            terminal.print_entry(console, pair.record)
            launch_viewer(cfg.viewer.command, pair.left, pair.right, wait=wait_each)
    except ViewerError as exc:
        err_console.print(f"[bold red]Viewer error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    finally:
        # Without --wait the viewer still has the staged files open.
        if wait_each:
            staging.cleanup()


# ── list ──────────────────────────────────────────────────────────────────────


@app.command(name="list", cls=PassthroughCommand, context_settings=_PASSTHROUGH)
def list_changes(
    ctx: typer.Context,
    staged: bool = typer.Option(False, "--staged", help="Use staged changes (git diff --staged)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Exclude a path or folder name (repeatable)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vsdiff.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Show the changes `vsd diff` would open, as a table."""
    from vsdiff.output import terminal

    configure_logging(verbose=verbose, debug=debug)
    _, _, session = _collect(ctx, staged, exclude, config)
    terminal.render_table(console, session.entries)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .vsdiff.toml in the repo root."""
    from vsdiff.config.defaults import DEFAULT_TOML
    from vsdiff.config.loader import CONFIG_NAME

    repo_root = _resolve_repo_root(Path.cwd())
    config_path = repo_root / CONFIG_NAME

    if config_path.exists():
        err_console.print(f"[yellow]⚠[/yellow]  {CONFIG_NAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"vsd {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """vsd: open git changes side by side in a visual diff editor."""
