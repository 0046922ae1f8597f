"""
Core domain models for the library API.
These are framework-agnostic and can be used across all layers.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Book:
    """
    A book owned by exactly one author.

    `author` is only filled in when the caller asked for the join.
    """
    id: int
    title: str
    author_id: int
    author: Optional["Author"] = None

    def to_dict(self, include_author: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "authorid": self.author_id,
        }
        if include_author and self.author is not None:
            data["author"] = {"id": self.author.id, "name": self.author.name}
        return data


@dataclass
class Author:
    """
    An author and, optionally, the books they wrote.

    `books` is None unless the books were eagerly loaded, so an author with
    no books (empty list) can be told apart from one whose books were not
    requested.
    """
    id: int
    name: str
    book_count: int = 0
    books: Optional[List[Book]] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "book_count": self.book_count,
        }
        if self.books is not None:
            data["books"] = [b.to_dict(include_author=False) for b in self.books]
        return data
