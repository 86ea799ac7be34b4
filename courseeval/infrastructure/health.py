# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from courseeval.infrastructure.db import ENGINE
from courseeval.shared.logging import logger


def check_database() -> dict[str, object]:
    """Run a trivial query against the configured engine."""

    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"health: database probe failed ({type(exc).__name__})")
        return {"ok": False, "database": "unavailable", "dialect": ENGINE.dialect.name}
    return {"ok": True, "database": "ok", "dialect": ENGINE.dialect.name}


__all__ = ["check_database"]
