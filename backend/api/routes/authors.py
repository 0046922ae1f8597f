"""
Authors API routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel

from api.database import MAX_ID, get_store, run_in_session
from api.envelope import require_fields, success
from db import Store
from domain.errors import NotFoundError
from repositories import AuthorsRepository

router = APIRouter()
authors_repo = AuthorsRepository()


class AuthorPayload(BaseModel):
    # Optional so a missing name reaches require_fields and gets a 403 envelope.
    name: Optional[str] = None


@router.get("")
async def list_authors(store: Store = Depends(get_store)):
    """List all authors."""
    authors = await run_in_session(store, authors_repo.list_authors)
    return success(authors=[a.to_dict() for a in authors])


@router.get("/{author_id}")
async def get_author(author_id: int = Path(..., ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    """Get an author by ID, with their books."""
    author = await run_in_session(store, authors_repo.get_author, author_id, include_books=True)
    if not author:
        raise NotFoundError(f"Author {author_id} not found")
    return success(author=author.to_dict())


@router.post("")
async def create_author(payload: AuthorPayload, store: Store = Depends(get_store)):
    """Create a new author."""
    require_fields(payload, "name")
    author = await run_in_session(store, authors_repo.create_author, payload.name)
    return success(author=author.to_dict())


@router.put("/{author_id}")
async def update_author(
    payload: AuthorPayload,
    author_id: int = Path(..., ge=1, le=MAX_ID),
    store: Store = Depends(get_store),
):
    require_fields(payload, "name")
    author = await run_in_session(store, authors_repo.update_author, author_id, payload.name)
    return success(author=author.to_dict())


@router.delete("/{author_id}")
async def delete_author(author_id: int = Path(..., ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    """Delete an author. Refused while the author still has books."""
    await run_in_session(store, authors_repo.delete_author, author_id)
    return success(message=f"Author {author_id} deleted")
