"""
Book repository backed by SQLAlchemy.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from domain.errors import NotFoundError, ReferentialIntegrityError
from domain.models import Author, Book
from repositories.common import require_id, require_text, storage_guard
from repositories.models import AuthorORM, BookORM

logger = logging.getLogger(__name__)


def _book_from_orm(orm: BookORM, include_author: bool = False) -> Book:
    author = None
    if include_author and orm.author is not None:
        author = Author(id=orm.author.id, name=orm.author.name)
    return Book(id=orm.id, title=orm.title, author_id=orm.author_id, author=author)


def _ensure_author_exists(session: Session, author_id: int) -> None:
    if session.get(AuthorORM, author_id) is None:
        logger.warning("Rejected book write: author %s does not exist", author_id)
        raise ReferentialIntegrityError(f"Author {author_id} does not exist")


class BooksRepository:
    """CRUD operations for books."""

    @storage_guard
    def list_books(self, session: Session, author_id: Optional[int] = None) -> List[Book]:
        query = session.query(BookORM)
        if author_id is not None:
            query = query.filter(BookORM.author_id == author_id)
        books = query.order_by(BookORM.id).all()
        return [_book_from_orm(b) for b in books]

    @storage_guard
    def get_book(
        self, session: Session, book_id: int, include_author: bool = False
    ) -> Optional[Book]:
        query = session.query(BookORM).filter(BookORM.id == book_id)
        if include_author:
            query = query.options(joinedload(BookORM.author)).populate_existing()
        orm = query.first()
        return _book_from_orm(orm, include_author) if orm else None

    @storage_guard
    def create_book(self, session: Session, title: str, author_id: int) -> Book:
        require_text(title, "title")
        author_id = require_id(author_id, "authorid")
        _ensure_author_exists(session, author_id)
        orm = BookORM(title=title, author_id=author_id)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        logger.info("Created book %s for author %s", orm.id, author_id)
        return _book_from_orm(orm)

    @storage_guard
    def update_book(self, session: Session, book_id: int, title: str, author_id: int) -> Book:
        require_text(title, "title")
        author_id = require_id(author_id, "authorid")
        orm = session.get(BookORM, book_id)
        if not orm:
            raise NotFoundError(f"Book {book_id} not found")
        _ensure_author_exists(session, author_id)
        orm.title = title
        orm.author_id = author_id
        session.add(orm)
        session.commit()
        session.refresh(orm)
        logger.info("Updated book %s", book_id)
        return _book_from_orm(orm)

    @storage_guard
    def delete_book(self, session: Session, book_id: int) -> None:
        orm = session.get(BookORM, book_id)
        if not orm:
            raise NotFoundError(f"Book {book_id} not found")
        session.delete(orm)
        session.commit()
        logger.info("Deleted book %s", book_id)
