"""Bibliography entries and the plain-text file format that stores them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

MAX_ENTRIES = 50
FIELD_LIMIT = 150

_TYPE = re.compile(r"@([^'{]+)")
_VALUE = re.compile(r"[^=]+=\s*\{([^}]+)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
# Checked in this order; the first keyword found anywhere on a line wins.
_FIELD_KEYWORDS = ("title", "author", "year", "issue", "publisher", "url")


@dataclass
class Entry:
    """One bibliography record."""

    entry_type: str = ""
    author: str = ""
    title: str = ""
    year: int = 0
    issue: str = ""
    publisher: str = ""
    url: str = ""


def trim(text: str) -> str:
    """Drop trailing commas, braces, spaces and newlines, then one leading brace."""
    text = text.rstrip(",}\n ")
    return text[1:] if text.startswith("{") else text


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_entries(lines: Iterable[str]) -> list[Entry]:
    """Parse entries from lines of text; an entry ends at a line starting with '}'."""
    entries: list[Entry] = []
    current = Entry()
    for line in lines:
        if line.startswith("@"):
            match = _TYPE.match(line)
            if match:
                current.entry_type = match.group(1)
            continue
        keyword = next((name for name in _FIELD_KEYWORDS if name in line), None)
        if keyword is not None:
            match = _VALUE.match(line)
            if match is None:
                continue
            value = trim(match.group(1))
            if keyword == "year":
                current.year = _leading_int(value)
            else:
                setattr(current, keyword, value[:FIELD_LIMIT])
        elif line.startswith("}"):
            if len(entries) >= MAX_ENTRIES:
                raise ValueError(f"more than {MAX_ENTRIES} entries")
            entries.append(current)
            current = Entry()
    return entries


def read_entries(path: str | Path) -> list[Entry]:
    """Read every complete entry from the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_entries(handle)


def format_entry(entry: Entry) -> str:
    """Render an entry in the file format."""
    return (
        f"@{entry.entry_type}{{,\n"
        f"   author = {{{entry.author}}},\n"
        f"   title = {{{entry.title}}},\n"
        f"   year = {{{entry.year}}},\n"
        f"   issue = {{{entry.issue}}},\n"
        f"   publisher = {{{entry.publisher}}},\n"
        f"   url = {{{entry.url}}},\n"
        "}\n\n"
    )


def append_entry(path: str | Path, entry: Entry) -> None:
    """Append an entry to the file at ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_entry(entry))