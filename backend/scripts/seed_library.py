"""Seed the library database with a few authors and books.

Usage:
    python -m scripts.seed_library [--database-url URL] [--if-empty]

Run from the `backend/` directory. Tables are created if missing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List

from db import Store
from repositories import AuthorsRepository, BooksRepository

LOG = logging.getLogger("seed_library")

SAMPLE_LIBRARY: Dict[str, List[str]] = {
    "Arthur Conan Doyle": ["A Study in Scarlet", "The Sign of the Four", "The Hound of the Baskervilles"],
    "Mary Shelley": ["Frankenstein"],
    "H. G. Wells": ["The Time Machine", "The War of the Worlds"],
}


def seed(store: Store, only_if_empty: bool = False) -> int:
    """Insert the sample library; returns the number of books created."""
    authors_repo = AuthorsRepository()
    books_repo = BooksRepository()
    created = 0
    with store.session() as session:
        if only_if_empty and authors_repo.list_authors(session):
            LOG.info("Database already has authors; skipping seed")
            return 0
        for name, titles in SAMPLE_LIBRARY.items():
            author = authors_repo.create_author(session, name)
            for title in titles:
                books_repo.create_book(session, title, author.id)
                created += 1
    return created


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the library database with sample data.")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL.")
    parser.add_argument("--if-empty", action="store_true", help="Only seed when no authors exist yet.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    store = Store(args.database_url)
    try:
        store.init_db()
        created = seed(store, only_if_empty=args.if_empty)
    finally:
        store.dispose()
    LOG.info("Seeded %d book(s)", created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
