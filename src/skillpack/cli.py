from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer

from skillpack.config import CONFIG
from skillpack.logger import setup_logging
from skillpack.skills import SkillPackage, SkillPackageError, discover_skills, parse_skill_package
from skillpack.skills.render import render_segment

app = typer.Typer(help="skillpack CLI - parse and browse skill packages", no_args_is_help=True)


@dataclass
class CliContext:
    """Settings shared by every command, built once by the app callback."""

    definition_file: str
    max_workers: Optional[int]


def _context(ctx: typer.Context) -> CliContext:
    return ctx.obj


def _parse_or_exit(cli: CliContext, path: Path) -> SkillPackage:
    try:
        return parse_skill_package(path, cli.definition_file)
    except SkillPackageError as e:
        typer.echo(f"❌ Failed to parse skill: {e}", err=True)
        raise typer.Exit(code=1)


def _discover_or_exit(cli: CliContext, root: Path) -> List[SkillPackage]:
    if not root.is_dir():
        typer.echo(f"❌ Could not read skills directory '{root}'", err=True)
        raise typer.Exit(code=1)
    try:
        return discover_skills(
            root,
            max_workers=cli.max_workers,
            skip_invalid=True,
            definition_file=cli.definition_file,
        )
    except SkillPackageError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)


def _summary_line(skill: SkillPackage) -> str:
    return f"- {skill.metadata.name:<20}: {skill.metadata.description}"


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(CONFIG.log_level, "--log-level", help="Logging level"),
    workers: Optional[int] = typer.Option(
        CONFIG.discovery_workers, "--workers", help="Worker threads for directory scans"
    ),
):
    setup_logging(level=log_level, log_file=CONFIG.log_file)
    ctx.obj = CliContext(definition_file=CONFIG.definition_file, max_workers=workers)


@app.command()
def parse(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Skill package directory"),
    as_json: bool = typer.Option(False, "--json", help="Print the package as JSON"),
):
    """Parse a skill package and display its structure."""
    skill = _parse_or_exit(_context(ctx), path)

    if as_json:
        typer.echo(skill.to_json())
        return

    meta = skill.metadata
    typer.echo(f"Path: {skill.path}")
    typer.echo(f"Name: {meta.name}")
    typer.echo(f"Description: {meta.description}")
    typer.echo(f"Allowed Tools: {', '.join(meta.allowed_tools)}")
    typer.echo(f"\n--- Body ({len(skill.segments)} segments) ---")
    for index, segment in enumerate(skill.segments, start=1):
        typer.echo(f"\n[{index}] {segment.type}")
        typer.echo(render_segment(segment))
    typer.echo("\n--- Resources ---")
    typer.echo(f"Scripts: {len(skill.resources.scripts)}")
    typer.echo(f"References: {len(skill.resources.references)}")
    typer.echo(f"Assets: {len(skill.resources.assets)}")


@app.command("list")
def list_skills(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Directory containing skill packages"),
):
    """List all valid skills in a directory."""
    skills = _discover_or_exit(_context(ctx), path)

    typer.echo(f"--- Skills found in {path} ---")
    for skill in skills:
        typer.echo(_summary_line(skill))
    if not skills:
        typer.echo("No valid skills found.")


@app.command()
def search(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Directory containing skill packages"),
    query: str = typer.Argument(..., help="Text to look for in names and descriptions"),
):
    """Search skills by name or description (case-insensitive)."""
    skills = _discover_or_exit(_context(ctx), path)
    needle = query.lower()

    typer.echo(f"--- Searching for '{query}' in {path} ---")
    matches = [
        s
        for s in skills
        if needle in s.metadata.name.lower() or needle in s.metadata.description.lower()
    ]
    for skill in matches:
        typer.echo(_summary_line(skill))
    if not matches:
        typer.echo("No matching skills found.")


@app.command()
def detail(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Skill package directory"),
):
    """Display detailed information about a skill package."""
    skill = _parse_or_exit(_context(ctx), path.resolve())
    meta = skill.metadata

    typer.echo(f"--- Skill Details: {meta.name} ---")
    typer.echo(f"Path: {skill.path}")
    typer.echo(f"Description: {meta.description}")
    typer.echo(f"Allowed Tools: {', '.join(meta.allowed_tools)}")
    for label, value in (
        ("Model", meta.model),
        ("Author", meta.author),
        ("Version", meta.version),
        ("License", meta.license),
    ):
        if value:
            typer.echo(f"{label}: {value}")

    typer.echo(f"\n--- {_context(ctx).definition_file} Body ---")
    for segment in skill.segments:
        typer.echo(render_segment(segment))
        typer.echo("")

    typer.echo("--- Resources ---")
    for label, files in (
        ("Scripts", skill.resources.scripts),
        ("References", skill.resources.references),
        ("Assets", skill.resources.assets),
    ):
        if files:
            typer.echo(f"{label}:")
            for f in files:
                typer.echo(f"  - {f}")
    if not skill.resources.all_files():
        typer.echo("No resources found.")


@app.command()
def files(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Skill package directory"),
):
    """List all files that make up a skill package."""
    cli = _context(ctx)
    skill = _parse_or_exit(cli, path)

    typer.echo(f"Files for skill: {skill.metadata.name}")
    typer.echo(f"- {skill.path / cli.definition_file}")
    for rel in skill.resources.all_files():
        typer.echo(f"- {skill.path / rel}")


if __name__ == "__main__":
    app()
