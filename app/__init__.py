from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from app.cli import db_cli
from config import get_config
from db import init_engine


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app() -> Flask:
    load_dotenv()

    cfg = get_config()
    _configure_logging(cfg.LOG_LEVEL)

    # Schema is owned by the migrations; the factory only binds the engine.
    init_engine(cfg.DATABASE_URL, echo=cfg.DB_ECHO)

    app = Flask(__name__)
    app.config["CFG"] = cfg

    app.cli.add_command(db_cli)
    return app
