import io
from unittest.mock import patch

import pytest

from pocketledger import library as lib
from pocketledger.library import (
    Book,
    BookNotAvailableError,
    BookNotBorrowedError,
    BookNotFoundError,
    Library,
    LibraryError,
    banner,
    main,
    run,
)


@pytest.fixture
def shelf():
    library = Library()
    library.add_book(Book("Dune", "Frank Herbert", "111"))
    library.add_book(Book("Emma", "Jane Austen", "222"))
    return library


def _run(text):
    out = io.StringIO()
    with patch("pocketledger.library.time.sleep"):
        result = run(io.StringIO(text), out)
    return result, out.getvalue()


def test_book_defaults_to_not_borrowed():
    book = Book("T", "A", "1")
    assert book.is_borrowed is False


def test_book_borrow_and_give_back():
    book = Book("T", "A", "1")
    book.borrow()
    assert book.is_borrowed is True
    book.give_back()
    assert book.is_borrowed is False


def test_details_contains_fields_and_flag():
    book = Book("Dune", "Frank Herbert", "111")
    text = book.details()
    assert f"{lib.CYAN}Title: {lib.RESET}Dune\n" in text
    assert f"{lib.CYAN}Author: {lib.RESET}Frank Herbert\n" in text
    assert f"{lib.CYAN}ISBN: {lib.RESET}111\n" in text
    assert text.endswith(f"{lib.CYAN}Borrowed: {lib.RESET}false\n")
    book.borrow()
    assert book.details().endswith(f"{lib.CYAN}Borrowed: {lib.RESET}true\n")


def test_find_book_returns_same_object(shelf):
    assert shelf.find_book("222") is shelf.books[1]


def test_find_book_first_match_wins(shelf):
    shelf.add_book(Book("Other", "X", "111"))
    assert shelf.find_book("111").title == "Dune"


def test_find_missing_book_raises(shelf):
    with pytest.raises(BookNotFoundError):
        shelf.find_book("999")


def test_borrow_book(shelf):
    book = shelf.borrow_book("111")
    assert book.is_borrowed is True
    assert shelf.available_books() == [shelf.books[1]]


def test_borrow_twice_raises(shelf):
    shelf.borrow_book("111")
    with pytest.raises(BookNotAvailableError) as info:
        shelf.borrow_book("111")
    assert str(info.value) == "Book not available"


def test_borrow_missing_raises(shelf):
    with pytest.raises(BookNotFoundError) as info:
        shelf.borrow_book("nope")
    assert str(info.value) == "Book not found."


def test_return_book(shelf):
    shelf.borrow_book("222")
    book = shelf.return_book("222")
    assert book.is_borrowed is False
    assert len(shelf.available_books()) == 2


def test_return_not_borrowed_raises(shelf):
    with pytest.raises(BookNotBorrowedError) as info:
        shelf.return_book("111")
    assert str(info.value) == "Book not borrowed."


def test_errors_caught_as_library_error(shelf):
    with pytest.raises(LibraryError) as missing:
        shelf.borrow_book("nope")
    assert isinstance(missing.value, BookNotFoundError)

    with pytest.raises(LibraryError) as not_borrowed:
        shelf.return_book("111")
    assert isinstance(not_borrowed.value, BookNotBorrowedError)

    shelf.borrow_book("222")
    with pytest.raises(LibraryError) as unavailable:
        shelf.borrow_book("222")
    assert isinstance(unavailable.value, BookNotAvailableError)


def test_list_all_books_empty():
    assert "No books in the library." in Library().list_all_books()


def test_list_all_books_lists_each(shelf):
    text = shelf.list_all_books()
    assert "=== All Books ===" in text
    assert text.count(lib.SEPARATOR) == 2
    assert text.index("Dune") < text.index("Emma")


def test_list_available_books_skips_borrowed(shelf):
    shelf.borrow_book("111")
    text = shelf.list_available_books()
    assert "=== Available Books ===" in text
    assert "Dune" not in text
    assert "Emma" in text


def test_list_available_books_none(shelf):
    shelf.borrow_book("111")
    shelf.borrow_book("222")
    text = shelf.list_available_books()
    assert "No available books." in text
    assert lib.SEPARATOR not in text


def test_banner_text():
    assert "LIBRARY MANAGER SYSTEM" in banner()


def test_run_adds_book_and_exits():
    library, output = _run("1\nDune\nFrank Herbert\n111\n\n6\n")
    assert library.books == [Book("Dune", "Frank Herbert", "111")]
    assert "Book added successfully." in output
    assert "Thank you for using Library Manager! Goodbye!" in output


def test_run_borrow_and_list():
    library, output = _run("1\nT\nA\nI\n\n2\nI\n\n4\n\n6\n")
    assert library.find_book("I").is_borrowed is True
    assert "Book borrowed successfully." in output
    assert f"Borrowed: {lib.RESET}true" in output


def test_run_return_flow():
    library, output = _run("1\nT\nA\nI\n\n3\nI\n\n2\nI\n\n3\nI\n\n6\n")
    assert "Book not borrowed." in output
    assert "Book returned successfully." in output
    assert library.find_book("I").is_borrowed is False


def test_run_unknown_isbn():
    _, output = _run("2\nmissing\n\n6\n")
    assert f"{lib.RED}Book not found.{lib.RESET}" in output


def test_run_invalid_choices():
    library, output = _run("abc\n9\n\n6\n")
    assert output.count("Invalid input.") == 2
    assert library.books == []


def test_run_stops_at_end_of_input():
    library, output = _run("1\nT\n")
    assert library.books == []
    assert "LIBRARY MANAGER SYSTEM" in output


def test_main_uses_standard_streams(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n\n6\n"))
    monkeypatch.setattr("sys.stdout", out)
    with patch("pocketledger.library.time.sleep"):
        assert main([]) == 0
    assert "No available books." in out.getvalue()