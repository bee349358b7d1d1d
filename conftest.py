import pytest

from bookstore.book import Author
from bookstore.config import settings
from bookstore.inventory import Bookstore

@pytest.fixture
def store():
    # A fresh in-memory store for every test
    return Bookstore()

@pytest.fixture
def tolkien():
    return Author("JRR Tolkien", 12)

@pytest.fixture
def strict_authors(monkeypatch):
    monkeypatch.setattr(settings, "validate_authors", True)
    yield
