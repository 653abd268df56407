"""Handbook CLI — the main entry point for the AI handbook utilities."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ai_handbook import __version__

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """AI Handbook — global engineering guardrails for AI assistants.

    Read policies, agents and templates, inherit agents into a project,
    check CLAUDE.md inheritance and validate the package manifest.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


# ── Read ─────────────────────────────────────────────────────────────


@main.command(name="list")
@click.argument("category", type=click.Choice(["agents", "playbooks"]), default="agents")
def list_documents(category: str):
    """List the agents or playbooks shipped with the handbook."""
    from ai_handbook.library import Handbook

    handbook = Handbook()
    names = (
        handbook.get_available_agents()
        if category == "agents"
        else handbook.get_available_playbooks()
    )

    if not names:
        console.print(f"[yellow]No {category} found.[/]")
        return

    table = Table(title=f"Available {category} ({len(names)})")
    table.add_column("Name", style="cyan")
    table.add_column("File", style="dim")
    for name in sorted(names):
        table.add_row(name.removesuffix(".md"), name)
    console.print(table)


@main.command()
@click.argument("kind", type=click.Choice(["policy", "agent", "playbook", "template"]))
@click.argument("name", required=False)
def show(kind: str, name: str | None):
    """Print a handbook document.

    NAME is required for agents and playbooks, optional for policies
    (defaults to CLAUDE_GLOBAL.md) and ignored for the template.
    """
    from ai_handbook.library import Handbook

    handbook = Handbook()
    try:
        if kind == "policy":
            text = handbook.get_policy(name) if name else handbook.get_claude_global()
        elif kind == "template":
            text = handbook.get_template()
        elif not name:
            raise click.UsageError(f"NAME is required for {kind}")
        elif kind == "agent":
            text = handbook.get_agent(name)
        else:
            text = handbook.get_playbook(name)
    except FileNotFoundError as e:
        err_console.print(f"[red]x[/] Not found: {escape(str(e.filename))}")
        sys.exit(1)

    click.echo(text)


# ── Inherit ──────────────────────────────────────────────────────────


@main.command()
@click.option("--target", "-t", default=None, help="Target directory (default: .claude/agents)")
@click.option("--source", "-s", default=None, help="Copy from this directory instead")
def inherit(target: str | None, source: str | None):
    """Copy the handbook agents into this project's .claude/agents."""
    from pathlib import Path

    from ai_handbook.config import AGENTS_TARGET
    from ai_handbook.distribution.inherit import inherit as copy_documents
    from ai_handbook.distribution.inherit import resolve_source_dir
    from ai_handbook.errors import SourceNotFoundError

    try:
        source_dir = Path(source) if source else resolve_source_dir("agents")
    except SourceNotFoundError as e:
        err_console.print(f"[red]x[/] {escape(str(e))}")
        sys.exit(1)
    if not source_dir.is_dir():
        err_console.print(f"[red]x[/] Source directory not found: {escape(str(source_dir))}")
        sys.exit(1)
    target_dir = Path(target) if target else Path.cwd() / AGENTS_TARGET

    console.print("\n[bold blue]Handbook[/] — Inheriting agents\n")
    console.print(f"  Source: {escape(str(source_dir))}")
    console.print(f"  Target: {escape(str(target_dir))}\n")

    try:
        report = copy_documents(source_dir, target_dir)
    except OSError as e:
        err_console.print(
            f"[red]x[/] Cannot use target {escape(str(target_dir))}: {escape(str(e))}"
        )
        sys.exit(1)

    for name in report.succeeded:
        console.print(f"  [green]v[/] Inherited agent: {escape(name)}")
    for name, reason in report.failed:
        err_console.print(f"  [red]x[/] Failed to copy {escape(name)}: {escape(reason)}")

    console.print(f"\n[green]Successfully inherited {report.count} agents![/]\n")
    console.print("Available agents:")
    for name in report.present:
        console.print(f"  - {escape(name.removesuffix('.md'))}")


# ── Validate ─────────────────────────────────────────────────────────


@main.command(name="check-policy")
@click.argument("path", default="CLAUDE.md")
def check_policy(path: str):
    """Check that PATH declares inheritance of the handbook policy."""
    from ai_handbook.policy import validate_policy_file

    try:
        result = validate_policy_file(path)
    except FileNotFoundError:
        err_console.print(f"[red]x[/] File not found: {escape(path)}")
        sys.exit(1)

    if not result.valid:
        err_console.print(f"[red]x[/] {escape(result.message)}")
        sys.exit(1)
    if result.warning:
        console.print(f"[yellow]![/] {escape(result.message)}")
    else:
        console.print(f"[green]v[/] {escape(result.message)}")


@main.command(name="validate-manifest")
@click.argument("manifest", default="handbook.json")
@click.option("--variant", default="github", help="Deployment variant (private, github, opensource)")
@click.option("--root", default=None, help="Package root for file checks (default: manifest dir)")
@click.option("--variants", "variants_path", default=None, help="Alternative variants YAML")
def validate_manifest(manifest: str, variant: str, root: str | None, variants_path: str | None):
    """Validate MANIFEST before publishing.

    Stops at the first failing check and exits non-zero.
    """
    from ai_handbook.errors import HandbookError
    from ai_handbook.manifest import validate_manifest as run_validation

    console.print(f"Validating package configuration ({escape(variant)})...")

    try:
        result = run_validation(manifest, variant=variant, root=root, variants_path=variants_path)
    except HandbookError as e:
        err_console.print(f"[red]x[/] {escape(str(e))}")
        sys.exit(1)

    if not result.passed:
        err_console.print(f"[red]x[/] {escape(result.message)}")
        sys.exit(1)

    for line in result.summary:
        console.print(f"[green]v[/] {escape(line)}")


# ── Refactor ─────────────────────────────────────────────────────────


@main.group()
def refactor():
    """Refactoring report and branch helpers."""


@refactor.command()
@click.option("--root", "-r", default=".", help="Repository root to scan")
@click.option("--report", default=None, help="Report path (default: $REPORT_PATH or docs/reports/)")
def analyze(root: str, report: str | None):
    """Write a refactoring analysis report for the repo."""
    import json

    from ai_handbook.refactor.analysis import write_analysis_report

    path = write_analysis_report(root, report_path=report)
    click.echo(json.dumps({"report": str(path), "status": "ok"}))


@refactor.command()
@click.option("--scope", default=None, help="Branch scope (default: $SCOPE or general-cleanup)")
@click.option("--repo", default=".", help="Repository path")
def branch(scope: str | None, repo: str):
    """Create refactor/<scope> and commit all changes on it."""
    from ai_handbook.refactor.git_ops import create_refactor_branch

    try:
        name = create_refactor_branch(repo, scope=scope)
    except ValueError as e:
        err_console.print(f"[red]x[/] {escape(str(e))}")
        sys.exit(1)
    click.echo(name)


if __name__ == "__main__":
    main()
