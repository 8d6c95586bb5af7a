# biblio

A small console tool and library for a plain BibTeX-style bibliography file.
Each entry in the file looks like this:

```
@article{,
   author = {Smith, J.},
   title = {On Things},
   year = {2020},
   issue = {3},
   publisher = {Example Press},
   url = {https://example.com/things},
}
```

## Installing

```
pip install .
```

## Using the command

```
biblio [path]
```

`path` defaults to `biblio.txt` in the current directory. The command loads
the file, waits for Enter, lists every entry (type, title, author, year) and
reports any duplicates. It then shows a menu and runs the one choice you make:

1. Search by author name
2. Search by title
3. Search by a single year
4. Search by a range of years (inclusive)
5. Count entries of each type (inproceedings, techReport, article, misc, book, website, other)
6. List authors in alphabetical order
7. Detect duplicate entries
8. Show a UWE Harvard style reference for a chosen entry number
9. Show entries with missing year, type, title or author
10. Append a new entry to the file, then load and list the file again
11. Exit

Answers are read as whitespace-separated words, so a search term or a field
of a new entry is a single word. The command exits with status 1 if the file
cannot be read, if a number it asks for is not a number or is out of range,
or if input ends early; an unknown menu choice prints `invalid input`.

## Using the library

```python
from biblio.entries import Entry, read_entries, append_entry, format_entry
from biblio.catalogue import (
    search_by_author,
    search_by_year_range,
    count_types,
    sort_by_author,
    find_duplicates,
    harvard_reference,
    missing_fields,
)

entries = read_entries("biblio.txt")

for entry in search_by_year_range(entries, 2000, 2010):
    print(harvard_reference(entry))

print(count_types(entries))
print([e.author for e in sort_by_author(entries)])
print(find_duplicates(entries))  # index pairs (i, j) with i < j

for entry in entries:
    gaps = missing_fields(entry)
    if gaps:
        print(entry.title, "is missing", ", ".join(gaps))

new = Entry(entry_type="book", author="Doe, A.", title="A Book", year=2024)
print(format_entry(new))
append_entry("biblio.txt", new)
```

`Entry` is a dataclass with the fields `entry_type`, `author`, `title`,
`year`, `issue`, `publisher` and `url`. `parse_entries` takes any iterable of
lines, and `trim` is the value clean-up it applies. `describe`,
`search_by_title` and `search_by_year` are also in `biblio.catalogue`.

## What it does not do

This is not a full BibTeX parser. Citation keys are ignored, each field must
sit on its own line, a field is recognised by its keyword (`title`, `author`,
`year`, `issue`, `publisher`, `url`, checked in that order) appearing anywhere
on the line, and an entry ends only at a line starting with `}`. Field values
are cut to 150 characters, and a file with more than 50 entries is rejected
with `ValueError`. The command runs one menu action per start; it does not
edit or delete existing entries.