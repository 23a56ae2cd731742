from __future__ import annotations

from sqlalchemy import inspect

from db import get_engine


def test_migrate_status_seed_rollback(cli_runner):
    res = cli_runner.invoke(args=["db", "status"])
    assert res.exit_code == 0
    assert "0 applied, 23 pending" in res.output

    res = cli_runner.invoke(args=["db", "migrate"])
    assert res.exit_code == 0, res.output
    assert "Migrated: 20250728070419_roles" in res.output

    res = cli_runner.invoke(args=["db", "migrate"])
    assert "Already up to date" in res.output

    res = cli_runner.invoke(args=["db", "seed"])
    assert res.exit_code == 0, res.output
    assert "Seeded role_permissions: 50" in res.output

    res = cli_runner.invoke(args=["db", "seed", "--only", "system_settings", "--no-reset"])
    assert res.exit_code == 0, res.output
    assert res.output.strip() == "Seeded system_settings: 5"

    res = cli_runner.invoke(args=["db", "rollback", "--all"])
    assert res.exit_code == 0, res.output
    assert "roles" not in inspect(get_engine()).get_table_names()


def test_seed_without_schema_fails(cli_runner):
    res = cli_runner.invoke(args=["db", "seed"])
    assert res.exit_code != 0
    assert "seed failed" in res.output


def test_app_carries_config(app):
    assert app.config["CFG"].DATABASE_URL.startswith("sqlite:///")
    assert "db" in app.cli.commands
