"""Queries and reports over a list of bibliography entries."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from biblio.entries import Entry

TYPE_NAMES = ("inproceedings", "techReport", "article", "misc", "book", "website")
OTHER = "other"


def describe(entry: Entry) -> str:
    """Summary block listing author, type, title and year."""
    return (
        f"Info : \n {entry.author} ,\n {entry.entry_type} ,\n"
        f" {entry.title} ,\n {entry.year} \n \n"
    )


def search_by_author(entries: Sequence[Entry], name: str) -> list[Entry]:
    """Entries whose author contains ``name``."""
    return [entry for entry in entries if name in entry.author]


def search_by_title(entries: Sequence[Entry], title: str) -> list[Entry]:
    """Entries whose title contains ``title``."""
    return [entry for entry in entries if title in entry.title]


def search_by_year(entries: Sequence[Entry], year: int) -> list[Entry]:
    """Entries published in ``year``."""
    return [entry for entry in entries if entry.year == year]


def search_by_year_range(entries: Sequence[Entry], start: int, end: int) -> list[Entry]:
    """Entries published between ``start`` and ``end`` inclusive."""
    return [entry for entry in entries if start <= entry.year <= end]


def count_types(entries: Sequence[Entry]) -> dict[str, int]:
    """Count entries per known type; unknown types are counted as 'other'."""
    counts = dict.fromkeys((*TYPE_NAMES, OTHER), 0)
    for entry in entries:
        key = entry.entry_type if entry.entry_type in TYPE_NAMES else OTHER
        counts[key] += 1
    return counts


def sort_by_author(entries: Sequence[Entry]) -> list[Entry]:
    """A new list of the entries ordered by author."""
    return sorted(entries, key=lambda entry: entry.author)


def find_duplicates(entries: Sequence[Entry]) -> list[tuple[int, int]]:
    """Index pairs (i, j), i < j, where entry j's type, author and title occur in entry i's."""
    return [
        (i, j)
        for (i, first), (j, second) in combinations(enumerate(entries), 2)
        if second.entry_type in first.entry_type
        and second.author in first.author
        and second.title in first.title
    ]


def harvard_reference(entry: Entry) -> str:
    """The entry as a UWE Harvard style reference."""
    parts = [
        f"{entry.author}.",
        f"({entry.year})." if entry.year > 0 else "(n.d.).",
        f"{entry.title}.",
    ]
    if entry.publisher:
        parts.append(f"{entry.publisher}.")
    if entry.issue:
        parts.append(f"{entry.issue}.")
    if entry.url:
        parts.append(f"Available from : {entry.url}.")
    return " ".join(parts)


def missing_fields(entry: Entry) -> list[str]:
    """Names of required fields that are empty: year, type, title, author."""
    checks = (
        ("year", entry.year == 0),
        ("type", not entry.entry_type),
        ("title", not entry.title),
        ("author", not entry.author),
    )
    return [name for name, missing in checks if missing]