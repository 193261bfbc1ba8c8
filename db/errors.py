"""Store failure taxonomy.

    NotFound             -> not an exception: None / [] from the repositories
    ConstraintViolation  -> IntegrityError (unique, not-null, foreign key)
    ConnectivityFailure  -> OperationalError | InterfaceError | TimeoutError

    - SQLAlchemy wraps the driver (asyncpg / aiosqlite) DBAPI exceptions,
      the original is available as ``exc.orig``
    - repositories never catch these, callers decide what to do
"""
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

ConstraintViolation = IntegrityError

# usable directly in an ``except`` clause
ConnectivityFailure: tuple[type[Exception], ...] = (
    OperationalError,
    InterfaceError,
    PoolTimeoutError,
)


def describe(exc: BaseException) -> str:
    """Short user-facing label for a store failure."""
    if isinstance(exc, ConstraintViolation):
        return "constraint violation"
    if isinstance(exc, ConnectivityFailure):
        return "database unreachable"
    return "database error"


__all__: tuple[str, ...] = (
    "ConnectivityFailure",
    "ConstraintViolation",
    "describe",
)
