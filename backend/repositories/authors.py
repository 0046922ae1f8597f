"""
Author repository backed by SQLAlchemy.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from domain.errors import AuthorHasBooksError, NotFoundError
from domain.models import Author
from repositories.books import _book_from_orm
from repositories.common import require_text, storage_guard
from repositories.models import AuthorORM, BookORM

logger = logging.getLogger(__name__)


def _author_from_orm(orm: AuthorORM, book_count: int = 0, include_books: bool = False) -> Author:
    if include_books:
        books = [_book_from_orm(b) for b in orm.books]
        return Author(id=orm.id, name=orm.name, book_count=len(books), books=books)
    return Author(id=orm.id, name=orm.name, book_count=book_count)


class AuthorsRepository:
    """CRUD operations for authors."""

    @storage_guard
    def list_authors(self, session: Session) -> List[Author]:
        counts: Dict[int, int] = dict(
            session.query(BookORM.author_id, func.count(BookORM.id))
            .group_by(BookORM.author_id)
            .all()
        )
        authors = session.query(AuthorORM).order_by(AuthorORM.id).all()
        return [_author_from_orm(a, counts.get(a.id, 0)) for a in authors]

    @storage_guard
    def get_author(
        self, session: Session, author_id: int, include_books: bool = False
    ) -> Optional[Author]:
        query = session.query(AuthorORM).filter(AuthorORM.id == author_id)
        if include_books:
            query = query.options(selectinload(AuthorORM.books)).populate_existing()
        orm = query.first()
        if not orm:
            return None
        if include_books:
            return _author_from_orm(orm, include_books=True)
        return _author_from_orm(orm, self.count_books(session, orm.id))

    @storage_guard
    def count_books(self, session: Session, author_id: int) -> int:
        return (
            session.query(func.count(BookORM.id))
            .filter(BookORM.author_id == author_id)
            .scalar()
            or 0
        )

    @storage_guard
    def create_author(self, session: Session, name: str) -> Author:
        require_text(name, "name")
        orm = AuthorORM(name=name)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        logger.info("Created author %s", orm.id)
        return _author_from_orm(orm)

    @storage_guard
    def update_author(self, session: Session, author_id: int, name: str) -> Author:
        require_text(name, "name")
        orm = session.get(AuthorORM, author_id)
        if not orm:
            raise NotFoundError(f"Author {author_id} not found")
        orm.name = name
        session.add(orm)
        session.commit()
        session.refresh(orm)
        logger.info("Updated author %s", author_id)
        return _author_from_orm(orm, self.count_books(session, author_id))

    @storage_guard
    def delete_author(self, session: Session, author_id: int) -> None:
        orm = session.get(AuthorORM, author_id)
        if not orm:
            raise NotFoundError(f"Author {author_id} not found")
        book_count = self.count_books(session, author_id)
        if book_count:
            logger.warning(
                "Refusing to delete author %s: %d book(s) still reference it",
                author_id,
                book_count,
            )
            raise AuthorHasBooksError(
                f"Author {author_id} still has {book_count} book(s); delete them first"
            )
        session.delete(orm)
        session.commit()
        logger.info("Deleted author %s", author_id)
