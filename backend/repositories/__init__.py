from .books import BooksRepository
from .authors import AuthorsRepository
from . import models

__all__ = ["BooksRepository", "AuthorsRepository", "models"]
