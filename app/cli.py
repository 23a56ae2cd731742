"""
Database commands: `flask --app app db migrate | rollback | status | seed`.
"""
from __future__ import annotations

import logging

import click
from flask.cli import AppGroup

from db import get_engine
from schema import migrate_latest, migration_status, rollback
from seeder import run_seeds


_log = logging.getLogger("cli")

db_cli = AppGroup("db", help="Schema migrations and fixture data.")


def _fail(action: str, exc: Exception) -> None:
    _log.error("%s failed: %s", action, exc)
    raise click.ClickException(f"{action} failed: {exc}")


@db_cli.command("migrate")
def migrate_command() -> None:
    """Apply every pending migration."""
    try:
        applied = migrate_latest(get_engine())
    except Exception as e:
        _fail("migrate", e)
    if not applied:
        click.echo("Already up to date")
        return
    for name in applied:
        click.echo(f"Migrated: {name}")


@db_cli.command("rollback")
@click.option("--all", "all_batches", is_flag=True, help="Revert every batch, not just the latest.")
def rollback_command(all_batches: bool) -> None:
    """Revert the latest migration batch."""
    try:
        reverted = rollback(get_engine(), all_batches=all_batches)
    except Exception as e:
        _fail("rollback", e)
    if not reverted:
        click.echo("Nothing to roll back")
        return
    for name in reverted:
        click.echo(f"Rolled back: {name}")


@db_cli.command("status")
def status_command() -> None:
    try:
        applied, pending = migration_status(get_engine())
    except Exception as e:
        _fail("status", e)
    for name in applied:
        click.echo(f"[applied] {name}")
    for name in pending:
        click.echo(f"[pending] {name}")
    click.echo(f"{len(applied)} applied, {len(pending)} pending")


@db_cli.command("seed")
@click.option("--only", "only", multiple=True, metavar="TABLE", help="Seed only this table (repeatable).")
@click.option("--no-reset", "no_reset", is_flag=True, help="Skip clearing seeded tables first.")
def seed_command(only: tuple[str, ...], no_reset: bool) -> None:
    """Load fixture rows into every seeded table."""
    try:
        counts = run_seeds(get_engine(), only=list(only) or None, reset=not no_reset)
    except Exception as e:
        _fail("seed", e)
    for table, count in counts.items():
        click.echo(f"Seeded {table}: {count}")
