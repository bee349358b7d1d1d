import os
import json
from typing import List, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from bookstore.book import Author, Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    # unknown values keep the current mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_book_list(books: List[Book]) -> None:
    """Print the inventory in the current output mode.
    - plain: one 'Name by Author [type, price, stock]' line per book, or 'No books in inventory.'
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books in inventory.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("Name", style="white")
        table.add_column("Type", style="magenta", no_wrap=True)
        table.add_column("Pages", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("In Stock")
        table.add_column("Best Seller")
        table.add_column("Author", style="white")
        for b in books:
            table.add_row(
                b.name,
                b.book_type.value,
                str(b.num_pages),
                f"{b.price:.2f}",
                "yes" if b.is_in_stock else "no",
                "yes" if b.is_best_selling else "no",
                b.author.name,
            )
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_author_list(authors: List[Author]) -> None:
    mode = get_output_mode()

    if not authors:
        print("No authors registered.")
        return

    if mode == "json":
        print(json.dumps([a.to_dict() for a in authors], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="✍️ Authors", header_style="bold cyan")
        table.add_column("Name", style="white")
        table.add_column("Books Written", justify="right")
        for a in authors:
            table.add_row(a.name, str(a.number_of_books_written))
        _console.print(table)
    else:
        for a in authors:
            print(str(a))

def print_counts(counts: Tuple[int, int]) -> None:
    """Print in-stock / out-of-stock counts.
    - plain: two lines
    - json: JSON object
    - rich: Panel
    """
    available, unavailable = counts
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"available": available, "unavailable": unavailable}))
    elif mode == "rich":
        content = f"[bold]Available:[/] {available}\n[bold]Unavailable:[/] {unavailable}"
        _console.print(Panel.fit(content, title="📊 Stock", border_style="blue"))
    else:
        print(f"Total books Available: {available}")
        print(f"Total books unavailable: {unavailable}")
