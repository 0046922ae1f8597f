"""
Helpers shared by the repositories.
"""
from functools import wraps
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from domain.errors import ReferentialIntegrityError, StorageError, ValidationError


def require_text(value: Optional[str], field_name: str) -> str:
    """Reject missing or blank text before anything is written."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return value


def require_id(value: Any, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def storage_guard(func):
    """
    Roll back and translate SQLAlchemy failures raised by a repository method.

    The wrapped method must take the session as its first argument after self.
    """

    @wraps(func)
    def wrapper(self, session, *args, **kwargs):
        try:
            return func(self, session, *args, **kwargs)
        except IntegrityError as exc:
            session.rollback()
            raise ReferentialIntegrityError(
                f"{func.__name__} violates a database constraint: {exc.orig}"
            ) from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(f"{func.__name__} failed: {exc}") from exc

    return wrapper
