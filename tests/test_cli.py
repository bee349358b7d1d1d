import json
import logging

import pytest
from typer.testing import CliRunner

from bookstore.cli import app
from bookstore.config import settings
from bookstore.ui_helpers import OUTPUT_MODE_ENV

runner = CliRunner()

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # --output writes to the environment; keep it from leaking between tests
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

SEED = {
    "authors": [
        {"name": "JRR Tolkien", "number_of_books_written": 12},
        {"number_of_books_written": 3},
    ],
    "books": [
        {"name": "Lord of The Rings", "book_type": "eBook", "num_pages": 1000, "price": 19.99,
         "is_in_stock": True, "is_best_selling": True,
         "author": {"name": "JRR Tolkien", "number_of_books_written": 12}},
        {"name": "The Hobbit: Rental", "book_type": "Rental", "num_pages": 1000, "price": 19.99,
         "is_in_stock": False, "is_best_selling": False,
         "author": {"name": "JRR Tolkien", "number_of_books_written": 12}},
        {"name": "Bad", "book_type": "eBook", "num_pages": 1000, "price": -1,
         "is_in_stock": True, "is_best_selling": False,
         "author": {"name": "JRR Tolkien", "number_of_books_written": 12}},
        {"name": "Odd", "book_type": "Scroll", "num_pages": 10, "price": 1,
         "author": {"name": "JRR Tolkien", "number_of_books_written": 12}},
    ],
}

def test_demo():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    out = result.stdout
    assert "Bookstore Inventory management" in out
    assert "Price cannot be less than zero. Check your entry and try again." in out
    assert "Lord of The Rings by JRR Tolkien [eBook, 19.99, in stock]" in out
    assert "The Hobbit: Rental by JRR Tolkien [Rental, 0.00, out of stock]" in out
    assert "Total books Available: 1\nTotal books unavailable: 2" in out
    # after the update and delete
    assert "The Hobbit: Rental by Dr Suess [Physical, 20.19, in stock]" in out
    assert "Total books Available: 1\nTotal books unavailable: 1" in out

def test_demo_json_output():
    result = runner.invoke(app, ["--output", "json", "demo"])
    assert result.exit_code == 0
    assert '{"available": 1, "unavailable": 2}' in result.stdout
    assert '{"available": 1, "unavailable": 1}' in result.stdout

def test_load(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps(SEED), encoding="utf-8")

    result = runner.invoke(app, ["load", str(seed)])
    assert result.exit_code == 0
    out = result.stdout
    assert "JRR Tolkien (12 books)" in out
    assert "Skipped author" in out
    assert "Skipped book 'Bad': Price cannot be less than zero" in out
    assert "Skipped book 'Odd': malformed record" in out
    assert "The Hobbit: Rental by JRR Tolkien [Rental, 0.00, out of stock]" in out
    assert "Total books Available: 1\nTotal books unavailable: 1" in out

def test_load_empty_file(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text("{}", encoding="utf-8")

    result = runner.invoke(app, ["load", str(seed)])
    assert result.exit_code == 0
    assert "No authors registered." in result.stdout
    assert "No books in inventory." in result.stdout
    assert "Total books Available: 0" in result.stdout

def test_load_missing_file(tmp_path):
    result = runner.invoke(app, ["load", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "File not found" in result.stdout

def test_load_invalid_json(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text("not json", encoding="utf-8")

    result = runner.invoke(app, ["load", str(seed)])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.stdout

def test_demo_rich_output():
    result = runner.invoke(app, ["--output", "rich", "demo"])
    assert result.exit_code == 0
    out = result.stdout
    assert "Books" in out
    assert "Stock" in out
    assert "Unavailable: 2" in out
    assert "Total books Available" not in out

def test_load_wrong_json_types(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({
        "authors": ["JRR Tolkien", {"name": "Ursula K. Le Guin", "number_of_books_written": 23}],
        "books": [
            "Lord of The Rings",
            {"name": "Earthsea", "book_type": "eBook", "num_pages": "10", "price": 5.0,
             "author": {"name": "Ursula K. Le Guin", "number_of_books_written": 23}},
        ],
    }), encoding="utf-8")

    result = runner.invoke(app, ["load", str(seed)])
    assert result.exit_code == 0
    assert result.exception is None
    out = result.stdout
    assert "Skipped author None: malformed record" in out
    assert "Skipped book None: malformed record" in out
    assert "Skipped book 'Earthsea': malformed record" in out
    assert "Ursula K. Le Guin (23 books)" in out
    assert "No books in inventory." in out

def test_invalid_log_level_falls_back_to_warning(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "log_level", "verbose")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert calls == [{"level": logging.WARNING}]
