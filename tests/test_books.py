# tests/test_books.py
"""
Tests for books.py - bundled catalog data and BookCatalog lookup.
"""

import os
import tempfile

from bible_callout.references.books import (
    BookCatalog,
    BookCatalogEntry,
    load_catalog,
    normalize_book_name,
    reload_catalog,
)


def test_bundled_catalog():
    """The bundled catalog holds the 66 books in bolls.life order."""
    print("\n=== Testing bundled catalog ===")

    catalog = load_catalog()
    assert len(catalog) == 66
    assert catalog.version == "1"
    assert catalog.get(1).name == "Genesis"
    assert catalog.get(19).name == "Psalms"
    assert catalog.get(19).chapters == 150
    assert catalog.get(40).name == "Matthew"
    assert catalog.get(66).name == "Revelation"
    print("✓ 66 books, ids match positions")

    total = sum(book.chapters for book in catalog)
    assert total == 1189, f"Expected 1189 chapters, got {total}"
    print("✓ chapter counts add up to 1189")

    # load_catalog is memoised
    assert load_catalog() is catalog
    print("✓ catalog loaded once")


def test_find():
    """Lookup by name, alias, period and spacing variants."""
    print("\n=== Testing find ===")

    catalog = load_catalog()

    assert catalog.find("Exodus") == (2, catalog.get(2))
    assert catalog.find("EXOD")[0] == 2
    assert catalog.find("ex.")[0] == 2
    assert catalog.find("1  Cor.")[0] == 46
    assert catalog.find("ii   kings")[0] == 12
    assert catalog.find("Nonsense") is None
    print("✓ names, aliases and spacing variants")

    # Only "1john" is listed as an alias, "1 jo" falls back to "1jo"
    assert catalog.find("1 jo")[0] == 62
    print("✓ space-less fallback")


def test_normalize_book_name():
    assert normalize_book_name("  1  Cor. ") == "1 cor"
    assert normalize_book_name("Song  of\tSolomon") == "song of solomon"
    print("✓ normalize_book_name")


def test_get_out_of_range():
    catalog = load_catalog()
    for book_id in (0, 67):
        try:
            catalog.get(book_id)
            assert False, "Should have raised IndexError"
        except IndexError:
            pass
    print("✓ get rejects ids outside 1-66")


def test_duplicate_alias_rejected():
    """Names and aliases must be unique across the catalog."""
    print("\n=== Testing uniqueness ===")

    try:
        BookCatalog([
            BookCatalogEntry("Alpha", ("a",), 1),
            BookCatalogEntry("Beta", ("A",), 1),
        ])
        assert False, "Should have raised ValueError"
    except ValueError as e:
        assert "Duplicate" in str(e)
        print("✓ duplicate alias (case-insensitive) rejected")

    try:
        BookCatalog([
            BookCatalogEntry("Alpha", (), 1),
            BookCatalogEntry("Beta", ("alpha",), 1),
        ])
        assert False, "Should have raised ValueError"
    except ValueError:
        print("✓ alias equal to another book's name rejected")

    try:
        BookCatalog([BookCatalogEntry("Alpha", (), 0)])
        assert False, "Should have raised ValueError"
    except ValueError:
        print("✓ book without chapters rejected")


def test_load_custom_file():
    """A catalog can be loaded from another YAML file."""
    print("\n=== Testing custom catalog file ===")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "books.yml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(
                "version: 7\n"
                "books:\n"
                "  - name: Alpha\n"
                "    aliases: [al]\n"
                "    chapters: 3\n"
                "  - name: Beta\n"
                "    chapters: 2\n"
            )

        catalog = reload_catalog(path)
        assert catalog.version == "7"
        assert len(catalog) == 2
        assert catalog.find("al") == (1, BookCatalogEntry("Alpha", ("al",), 3))
        assert catalog.get(2).aliases == ()

    # Restore the bundled catalog for other tests
    assert len(reload_catalog()) == 66
    print("✓ custom YAML catalog")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Book Catalog Test Suite")
    print("=" * 60)

    test_bundled_catalog()
    test_find()
    test_normalize_book_name()
    test_get_out_of_range()
    test_duplicate_alias_rejected()
    test_load_custom_file()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
