import io

import pytest

from biblio.catalogue import describe, harvard_reference
from biblio.cli import main
from biblio.entries import Entry, read_entries

SAMPLE = """@article{key1,
   author = {Knuth, Donald},
   title = {The Art of Computer Programming},
   year = {1968},
   publisher = {Addison-Wesley},
}

@book{key2,
   author = {Austen, Jane},
   title = {Pride and Prejudice},
}
"""


@pytest.fixture
def biblio_file(tmp_path):
    path = tmp_path / "biblio.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def run(monkeypatch, path, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([str(path)])


def test_missing_file(monkeypatch, capsys, tmp_path):
    status = run(monkeypatch, tmp_path / "absent.txt", "")
    assert status == 1
    assert "Error Reading the data from file!" in capsys.readouterr().out


def test_listing_and_no_duplicates(monkeypatch, capsys, biblio_file):
    assert run(monkeypatch, biblio_file, "\n11\n") == 0
    out = capsys.readouterr().out
    assert "---- Entry 2 ----" in out
    assert "Author: Knuth, Donald" in out
    assert "No duplication was found in your data" in out


def test_invalid_choice(monkeypatch, capsys, biblio_file):
    assert run(monkeypatch, biblio_file, "\n99\n") == 0
    assert capsys.readouterr().out.rstrip().endswith("invalid input")


def test_search_by_author(monkeypatch, capsys, biblio_file):
    assert run(monkeypatch, biblio_file, "\n1\nKnuth\n") == 0
    entry = read_entries(biblio_file)[0]
    assert describe(entry) in capsys.readouterr().out


def test_type_counts(monkeypatch, capsys, biblio_file):
    run(monkeypatch, biblio_file, "\n5\n")
    out = capsys.readouterr().out
    assert "article : 1 " in out
    assert "website : 0 " in out


def test_authors_sorted(monkeypatch, capsys, biblio_file):
    run(monkeypatch, biblio_file, "\n6\n")
    out = capsys.readouterr().out
    tail = out[out.index("11-Exit"):]
    assert tail.index("Austen, Jane") < tail.index("Knuth, Donald")


def test_duplicates_reported(monkeypatch, capsys, tmp_path):
    path = tmp_path / "biblio.txt"
    path.write_text(SAMPLE + SAMPLE, encoding="utf-8")
    run(monkeypatch, path, "\n11\n")
    assert "Duplicate was found here" in capsys.readouterr().out


def test_harvard(monkeypatch, capsys, biblio_file):
    assert run(monkeypatch, biblio_file, "\n8\n0\n") == 0
    entry = read_entries(biblio_file)[0]
    assert harvard_reference(entry) in capsys.readouterr().out


def test_harvard_out_of_range(monkeypatch, capsys, biblio_file):
    assert run(monkeypatch, biblio_file, "\n8\n7\n") == 1


def test_missing_info(monkeypatch, capsys, biblio_file):
    run(monkeypatch, biblio_file, "\n9\n")
    out = capsys.readouterr().out
    assert "year is missing -Info missing at entry number 1 please check to complete" in out
    assert "entry number 0" not in out


def test_add_entry(monkeypatch, capsys, biblio_file):
    text = "\n10\nbook\nSmith\nPython\n2021\n3\nAcme\nhttp://example.com\n"
    assert run(monkeypatch, biblio_file, text) == 0
    assert "Entry added successfully." in capsys.readouterr().out
    assert read_entries(biblio_file)[-1] == Entry(
        "book", "Smith", "Python", 2021, "3", "Acme", "http://example.com"
    )


def test_add_entry_bad_year(monkeypatch, biblio_file):
    before = biblio_file.read_text(encoding="utf-8")
    assert run(monkeypatch, biblio_file, "\n10\nbook\nSmith\nPython\nsoon\n") == 1
    assert biblio_file.read_text(encoding="utf-8") == before