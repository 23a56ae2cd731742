from __future__ import annotations

import glob
import importlib
import logging
import os
from types import ModuleType
from typing import Iterable

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session as DbSession

from seeds.helpers import clear


_log = logging.getLogger("seeder")

SEEDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "seeds")
SEEDS_PACKAGE = "seeds"


def _table_name(module: ModuleType) -> str:
    return module.MODEL.__tablename__


def load_seeds() -> list[tuple[str, ModuleType]]:
    """
    Discover seed modules in filename order as `(table, module)` pairs.

    Each module declares the ORM `MODEL` it fills and a `seed(db)` loader.
    """
    out: list[tuple[str, ModuleType]] = []
    for path in sorted(glob.glob(os.path.join(SEEDS_DIR, "*.py"))):
        stem = os.path.splitext(os.path.basename(path))[0]
        ts, _sep, _rest = stem.partition("_")
        if len(ts) != 14 or not ts.isdigit():
            continue
        module = importlib.import_module(f"{SEEDS_PACKAGE}.{stem}")
        if getattr(module, "MODEL", None) is None or not callable(getattr(module, "seed", None)):
            raise RuntimeError(f"Seed {stem} must define MODEL and seed()")
        out.append((_table_name(module), module))
    return out


def _reset(engine: Engine, seeds: list[tuple[str, ModuleType]]) -> None:
    # Children first, so RESTRICT references never block the delete.
    with DbSession(engine) as db:
        for _table, module in reversed(seeds):
            clear(db, module.MODEL)
        db.commit()


def run_seeds(engine: Engine, *, only: Iterable[str] | None = None, reset: bool = True) -> dict[str, int]:
    """
    Run the seed loaders in order, one transaction each.

    `only` restricts the run to the named tables and skips the full reset.
    Returns `{table: inserted_rows}`.
    """
    seeds = load_seeds()
    if only:
        wanted = {str(t).strip() for t in only if str(t).strip()}
        known = {table for table, _module in seeds}
        unknown = sorted(wanted - known)
        if unknown:
            raise ValueError(f"Unknown seed table(s): {', '.join(unknown)}")
        seeds = [(table, module) for table, module in seeds if table in wanted]
    elif reset:
        try:
            _reset(engine, seeds)
        except Exception:
            _log.exception("Seed reset failed")
            raise

    counts: dict[str, int] = {}
    for table, module in seeds:
        with DbSession(engine) as db:
            try:
                counts[table] = int(module.seed(db))
                db.commit()
            except Exception:
                db.rollback()
                _log.exception("Seed failed table=%s", table)
                raise
        _log.info("Seeded table=%s rows=%s", table, counts[table])
    return counts
