"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating client failures into StoreError.
"""

from typing import Any, Callable, Generic, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StoreError


T = TypeVar("T")

# Postgres error code for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() which runs a query and wraps client failures

    Subclasses implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            def get_by_id(self, user_id: str) -> Optional[Profile]:
                result = self._execute(
                    "get profile",
                    lambda: self._db.table("profiles").select("*").eq("id", user_id).execute(),
                )
                if not result.data:
                    return None
                return Profile(**result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, operation: str, query: Callable[[], Any]) -> Any:
        """
        Run a query, converting client and transport failures to StoreError.

        Args:
            operation: Short description used in the error message.
            query: Zero-argument callable that builds and executes the query.

        Raises:
            StoreError: If PostgREST rejects the query or the request fails.
        """
        try:
            return query()
        except APIError as e:
            raise StoreError(
                f"Failed to {operation}: {e.message}",
                operation=operation,
                details={"pg_code": e.code},
            ) from e
        except httpx.HTTPError as e:
            raise StoreError(f"Failed to {operation}: {e}", operation=operation) from e


def is_unique_violation(error: StoreError) -> bool:
    """Whether a StoreError came from a unique constraint violation."""
    return error.details.get("pg_code") == UNIQUE_VIOLATION
