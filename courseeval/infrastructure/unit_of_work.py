# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transactional session scope shared by the repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from courseeval.shared.errors.base import InfrastructureError
from courseeval.shared.logging import logger


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on any error.

    Integrity errors propagate unchanged so repositories can map them to
    domain conflicts; other database failures become ``InfrastructureError``.
    """

    session = factory()
    try:
        yield session
        session.commit()
    except IntegrityError:
        logger.warning("uow: rollback due to integrity error")
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        logger.exception("uow: database failure")
        session.rollback()
        raise InfrastructureError("database_error") from exc
    except Exception as exc:
        logger.warning(f"uow: rollback due to {type(exc).__name__}")
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["unit_of_work_scope"]
