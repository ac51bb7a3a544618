from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import SCHEMA_PATH, load_settings

from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .payouts.controller import register as register_payouts

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "[payout-engine] settings=%s db=%s@%s:%s/%s",
        settings.__name__,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("[payout-engine] schema ready (tables=%s)", len(list_tables(db_config)))

    container = build_container(db_config=db_config)
    register_payouts(app, container)

    return app
