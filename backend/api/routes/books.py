"""
Books API routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel, Field

from api.database import MAX_ID, get_store, run_in_session
from api.envelope import require_fields, success
from db import Store
from domain.errors import NotFoundError
from repositories import BooksRepository

router = APIRouter()
books_repo = BooksRepository()


class BookPayload(BaseModel):
    title: Optional[str] = None
    # Strict so JSON true is not read as author 1.
    authorid: Optional[int] = Field(default=None, strict=True, ge=1, le=MAX_ID)


@router.get("")
async def list_books(
    authorid: Optional[int] = Query(default=None, ge=1, le=MAX_ID),
    store: Store = Depends(get_store),
):
    """List all books, optionally only those by one author."""
    books = await run_in_session(store, books_repo.list_books, author_id=authorid)
    return success(books=[b.to_dict() for b in books])


@router.get("/{book_id}")
async def get_book(book_id: int = Path(..., ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    """Get a book by ID, joined with its author."""
    book = await run_in_session(store, books_repo.get_book, book_id, include_author=True)
    if not book:
        raise NotFoundError(f"Book {book_id} not found")
    return success(book=book.to_dict())


@router.post("")
async def create_book(payload: BookPayload, store: Store = Depends(get_store)):
    """Create a new book for an existing author."""
    require_fields(payload, "title", "authorid")
    book = await run_in_session(store, books_repo.create_book, payload.title, payload.authorid)
    return success(book=book.to_dict())


@router.put("/{book_id}")
async def update_book(
    payload: BookPayload,
    book_id: int = Path(..., ge=1, le=MAX_ID),
    store: Store = Depends(get_store),
):
    require_fields(payload, "title", "authorid")
    book = await run_in_session(
        store, books_repo.update_book, book_id, payload.title, payload.authorid
    )
    return success(book=book.to_dict())


@router.delete("/{book_id}")
async def delete_book(book_id: int = Path(..., ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    """Delete a book."""
    await run_in_session(store, books_repo.delete_book, book_id)
    return success(message=f"Book {book_id} deleted")
