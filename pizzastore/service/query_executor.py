# service/query_executor.py
import logging
import sys
from contextlib import contextmanager

import click
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger("query_logger")


class DatabaseError(Exception):
    """A statement failed or the connection was lost."""


def _as_text(value):
    if value is None:
        return None
    return str(value)


def _error_message(exc):
    # driver message without SQLAlchemy's statement/background footer
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).strip()


class QueryExecutor:
    """Runs raw SQL over the one database session the client owns.

    Every call sends a single statement with bound parameters and drains the
    result before returning. Outside of ``atomic()`` each call commits on its
    own, so a failing handler never leaves a transaction open.
    """

    def __init__(self, session, out=None):
        self.session = session
        self.out = out
        self._atomic_depth = 0

    def _run(self, sql, params=None):
        try:
            return self.session.execute(text(sql), params or {})
        except SQLAlchemyError as e:
            logger.info(f"Statement failed: {sql!r} params={params!r}: {e}")
            # inside atomic() the outermost block owns the rollback
            if not self._atomic_depth:
                self._rollback()
            raise DatabaseError(_error_message(e)) from e

    def _finish(self):
        if self._atomic_depth:
            return
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.info(f"Commit failed: {e}")
            self._rollback()
            raise DatabaseError(_error_message(e)) from e

    def _rollback(self):
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")

    def execute_update(self, sql, params=None):
        """Run INSERT/UPDATE/DELETE and return the affected row count."""
        result = self._run(sql, params)
        rowcount = result.rowcount
        self._finish()
        return rowcount

    def execute_query_and_return_result(self, sql, params=None):
        """Return every row as a list of column values rendered as text."""
        result = self._run(sql, params)
        rows = [[_as_text(value) for value in row] for row in result]
        self._finish()
        return rows

    def execute_query_and_print_result(self, sql, params=None):
        """Print a header line and tab separated rows; return the row count."""
        result = self._run(sql, params)
        columns = list(result.keys())
        row_count = 0
        for row in result:
            if row_count == 0:
                self._echo("".join(f"{name}\t" for name in columns))
            self._echo("".join(f"{_as_text(value)}\t" for value in row))
            row_count += 1
        self._finish()
        return row_count

    def execute_query(self, sql, params=None):
        """Return only the number of rows a query produces."""
        result = self._run(sql, params)
        row_count = sum(1 for _ in result)
        self._finish()
        return row_count

    @contextmanager
    def atomic(self):
        """Group several statements into one transaction."""
        self._atomic_depth += 1
        try:
            yield self
        except BaseException:
            self._atomic_depth -= 1
            if self._atomic_depth == 0:
                self._rollback()
            raise
        else:
            self._atomic_depth -= 1
            self._finish()

    def ping(self):
        self.execute_query_and_return_result("SELECT 1")

    def cleanup(self):
        try:
            self.session.close()
        except SQLAlchemyError as e:
            # close errors are not actionable at shutdown
            logger.warning(f"Ignoring error while closing session: {e}")

    def _echo(self, message):
        click.echo(message, file=self.out or sys.stdout)
