import json
import logging
from pathlib import Path
from typing import Optional

import typer

from bookstore.book import Author, BookType
from bookstore.config import settings
from bookstore.exceptions import BookstoreError
from bookstore.inventory import Bookstore
from bookstore.ui_helpers import set_output_mode, print_book_list, print_author_list, print_counts

logger = logging.getLogger(__name__)

# --- Typer CLI Application ---
app = typer.Typer(help="Bookstore inventory CLI")

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    level = logging.getLevelName(settings.log_level.upper())
    logging.basicConfig(level=level if isinstance(level, int) else logging.WARNING)
    if output:
        set_output_mode(output)

def _record_name(item) -> Optional[str]:
    return item.get("name") if isinstance(item, dict) else None

def _print_title(title: str) -> None:
    print()
    print(title)
    print("-" * len(title))
    print()

def _report(store: Bookstore) -> None:
    print_book_list(store.list_books())
    print()
    print_counts(store.count_books_available())
    print()

@app.command("demo")
def cli_demo():
    """Run the fixed add/update/delete demonstration on a fresh in-memory store."""
    _print_title(settings.app_name)

    store = Bookstore()
    author = Author("JRR Tolkien", 12)
    store.add_author_to_list(author.name, author.number_of_books_written)

    steps = [
        lambda: store.add_book_to_inventory("Lord of The Rings", BookType.EBOOK, 1_000, 19.99, True, True, author),
        lambda: store.add_book_to_inventory("The Hobbit", BookType.PHYSICAL, 1_000, 39.99, False, True, author),
        lambda: store.add_book_to_inventory("The Hobbit: Rental", BookType.RENTAL, 1_000, 19.99, False, False, author),
        lambda: store.add_book_to_inventory("The Hobbit: Rental", BookType.RENTAL, 1_000, -1, True, False, author),
    ]
    for step in steps:
        try:
            step()
        except BookstoreError as e:
            print(e)

    _report(store)

    try:
        store.update_book_in_inventory("The Hobbit: Rental", BookType.PHYSICAL, 1_000, 20.19, True, False,
                                       Author("Dr Suess", 60))
    except BookstoreError as e:
        print(e)

    try:
        store.delete_book_in_inventory("Lord of The Rings")
    except BookstoreError as e:
        print(e)

    _report(store)

@app.command("load")
def cli_load(file_path: Path = typer.Argument(..., help="JSON file with 'authors' and 'books' lists")):
    """Load authors and books from a JSON file into a fresh store and show the result.

    Rejected records are reported and skipped. Nothing is written back to the file.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"File not found: {file_path}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in {file_path}: {e}")
        raise typer.Exit(code=1)

    if not isinstance(data, dict):
        print(f"Invalid seed file {file_path}: expected an object with 'authors' and 'books'")
        raise typer.Exit(code=1)

    store = Bookstore()
    rejected = 0

    for item in data.get("authors", []) or []:
        try:
            store.add_author_to_list(item["name"], item.get("number_of_books_written", 0))
        except BookstoreError as e:
            print(f"Skipped author {_record_name(item)!r}: {e}")
            rejected += 1
        except (KeyError, TypeError, AttributeError) as e:
            print(f"Skipped author {_record_name(item)!r}: malformed record ({e})")
            rejected += 1

    for item in data.get("books", []) or []:
        try:
            store.add_book_from_dict(item)
        except BookstoreError as e:
            print(f"Skipped book {_record_name(item)!r}: {e}")
            rejected += 1
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            print(f"Skipped book {_record_name(item)!r}: malformed record ({e})")
            rejected += 1

    logger.info(f"Loaded {len(store.books)} books and {len(store.authors)} authors, {rejected} rejected")

    print_author_list(store.list_authors())
    print()
    _report(store)

def main() -> None:
    app()


if __name__ == "__main__":
    main()
