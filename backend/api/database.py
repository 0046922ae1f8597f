"""
Store access for route handlers.

The store lives on `app.state.store`; handlers receive it through the
`get_store` dependency and run repository calls with `run_in_session`.
"""
from typing import Any, Callable, TypeVar

from fastapi import Request
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from db import Store

T = TypeVar("T")

# Largest id a 64-bit INTEGER column can hold.
MAX_ID = 2**63 - 1


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store built at startup."""
    return request.app.state.store


async def run_in_session(store: Store, operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a repository call in a worker thread with its own session and await the result."""

    def _run() -> T:
        with store.session() as session:
            return operation(session, *args, **kwargs)

    return await run_in_threadpool(_run)
