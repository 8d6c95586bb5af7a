"""Interactive menu over a bibliography file."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from biblio.catalogue import (
    count_types,
    describe,
    find_duplicates,
    harvard_reference,
    missing_fields,
    search_by_author,
    search_by_title,
    search_by_year,
    search_by_year_range,
    sort_by_author,
)
from biblio.entries import Entry, append_entry, read_entries

DEFAULT_FILE = "biblio.txt"
EXIT_CHOICE = 11

MENU = """Please choose one of the following 
1- Search based on Author name 
2- Search based on Title 
3- Search based on Single year 
4- Search based on range of years 
5- Display different entry & its count 
6- Show authors alphabetically ordered 
7- Detect duplicate entries 
8- Show UWE Harvard style ref 
9- Show missing info 
10-Add new entry to list
11-Exit"""

_MISSING_LABELS = {"year": "year", "type": "Type", "title": "Title", "author": "Author"}


class _Prompt:
    """Reads whitespace-separated words from standard input."""

    def __init__(self) -> None:
        self._pending: list[str] | None = None

    def pause(self) -> None:
        if self._pending is not None:
            self._pending = None
        else:
            input()

    def word(self) -> str:
        while not self._pending:
            self._pending = input().split()
        return self._pending.pop(0)

    def integer(self) -> int | None:
        try:
            return int(self.word())
        except ValueError:
            return None


def _load(path: Path, prompt: _Prompt) -> list[Entry] | None:
    try:
        entries = read_entries(path)
    except (OSError, ValueError):
        print("Error Reading the data from file!")
        return None
    print("Data Successfully loaded, press any key to continue!")
    prompt.pause()
    for number, entry in enumerate(entries, start=1):
        print(f"---- Entry {number} ----")
        print(f"Type: {entry.entry_type}")
        print(f"Title: {entry.title}")
        print(f"Author: {entry.author}")
        print(f"Year: {entry.year}")
    return entries


def _print_matches(matches: list[Entry]) -> None:
    for entry in matches:
        print(describe(entry), end="")


def _report_duplicates(entries: list[Entry]) -> None:
    pairs = find_duplicates(entries)
    for first, _ in pairs:
        print("Duplicate was found here ")
        print(describe(entries[first]), end="")
    if not pairs:
        print("No duplication was found in your data ")


def _by_author(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    print("Please Enter Author name ")
    _print_matches(search_by_author(entries, prompt.word()))
    return 0


def _by_title(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    print("Please Enter Title ")
    _print_matches(search_by_title(entries, prompt.word()))
    return 0


def _by_year(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    print("Please Enter Year ")
    year = prompt.integer()
    if year is None:
        print("invalid input")
        return 1
    _print_matches(search_by_year(entries, year))
    return 0


def _by_year_range(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    print("Please Enter start year ")
    start = prompt.integer()
    print("Please Enter last year ")
    end = prompt.integer()
    if start is None or end is None:
        print("invalid input")
        return 1
    _print_matches(search_by_year_range(entries, start, end))
    return 0


def _types(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    for name, count in count_types(entries).items():
        print(f"{name} : {count} ")
    return 0


def _authors(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    for entry in sort_by_author(entries):
        print(f"{entry.author} ")
    return 0


def _duplicates(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    _report_duplicates(entries)
    return 0


def _harvard(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    for number, entry in enumerate(entries):
        print(f"{number} - {entry.title} ")
    print("Enter title number for harvard style ")
    number = prompt.integer()
    if number is None or not 0 <= number < len(entries):
        print("invalid input")
        return 1
    print(harvard_reference(entries[number]))
    return 0


def _missing(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    for number, entry in enumerate(entries):
        missing = missing_fields(entry)
        if missing:
            notes = "".join(f"{_MISSING_LABELS[name]} is missing -" for name in missing)
            print(f"{notes}Info missing at entry number {number} please check to complete ")
    return 0


def _add(path: Path, entries: list[Entry], prompt: _Prompt) -> int:
    print("Enter the new entry type ")
    entry_type = prompt.word()
    print("Enter the new entry Author ")
    author = prompt.word()
    print("Enter the new entry Title ")
    title = prompt.word()
    print("Enter the new entry Year ")
    year = prompt.integer()
    if year is None:
        print("invalid input")
        return 1
    print("Enter the new entry Issue ")
    issue = prompt.word()
    print("Enter the new entry Publisher ")
    publisher = prompt.word()
    print("Enter the new entry Url ")
    url = prompt.word()
    try:
        append_entry(path, Entry(entry_type, author, title, year, issue, publisher, url))
    except OSError:
        print("Error Opening the file!")
        return 1
    print("Entry added successfully.")
    return 0 if _load(path, prompt) is not None else 1


_ACTIONS: dict[int, Callable[[Path, list[Entry], _Prompt], int]] = {
    1: _by_author,
    2: _by_title,
    3: _by_year,
    4: _by_year_range,
    5: _types,
    6: _authors,
    7: _duplicates,
    8: _harvard,
    9: _missing,
    10: _add,
}


def main(argv: list[str] | None = None) -> int:
    """Load the bibliography, run one menu action and return the exit status."""
    parser = argparse.ArgumentParser(prog="biblio", description="Browse a bibliography file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE, help="bibliography file")
    args = parser.parse_args(argv)
    path = Path(args.path)
    prompt = _Prompt()

    print("Welcome to my Bibliography project!")
    try:
        entries = _load(path, prompt)
        if entries is None:
            return 1
        _report_duplicates(entries)
        print(MENU)
        choice = prompt.integer()
        if choice == EXIT_CHOICE:
            return 0
        action = _ACTIONS.get(choice) if choice is not None else None
        if action is None:
            print("invalid input")
            return 0
        return action(path, entries, prompt)
    except EOFError:
        print("invalid input")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())