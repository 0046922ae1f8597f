"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from db import Base


class AuthorORM(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)

    # No cascade: authors with books are refused at delete time.
    books = relationship(
        "BookORM",
        back_populates="author",
        order_by="BookORM.id",
        passive_deletes="all",
    )


class BookORM(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    author_id = Column(
        Integer, ForeignKey("authors.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    author = relationship("AuthorORM", back_populates="books")
