from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import ConflictError, DomainError, PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits when the block finishes, rolls back on any exception. Driver
    errors are translated into domain errors; domain errors raised inside the
    block propagate unchanged after the rollback.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(f"Database unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except DomainError:
        conn.rollback()
        raise
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        raise ConflictError(str(e)) from e
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Database error, transaction rolled back: %s", e)
        raise PersistenceError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
