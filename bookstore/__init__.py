"""Bookstore Inventory - Core Package

This package contains the core modules including:
- Data models (book.py)
- Inventory management logic (inventory.py)
- Field validation (validators.py)
- CLI interface (cli.py)
"""
from bookstore.book import Author, Book, BookType
from bookstore.exceptions import BookstoreError, NotFoundError, ValidationError
from bookstore.inventory import Bookstore

__all__ = [
    "Author",
    "Book",
    "BookType",
    "Bookstore",
    "BookstoreError",
    "NotFoundError",
    "ValidationError",
]
