"""A small in-memory library of books with an interactive terminal menu."""

from __future__ import annotations

import argparse
import re
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

RESET = "\033[0m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
BOLD = "\033[1m"
RED = "\033[31m"

CLEAR_SCREEN = "\033[2J\033[1;1H"
SEPARATOR = "------------------------"

_CHOICE = re.compile(r"\s*([+-]?\d+)")
_MENU = (
    f"{BOLD}\nACTIONS:\n{RESET}"
    f"{CYAN}1.{RESET}\tAdd new book\n"
    f"{CYAN}2.{RESET}\tBorrow a book\n"
    f"{CYAN}3.{RESET}\tReturn a book\n"
    f"{CYAN}4.{RESET}\tList all books\n"
    f"{CYAN}5.{RESET}\tList all available books\n"
    f"{CYAN}6.{RESET}\tExit\n"
    f"{BOLD}Choice:\t{RESET}"
)


class LibraryError(Exception):
    """A library operation could not be carried out."""

    color = RED


class BookNotFoundError(LibraryError):
    """No book has the requested ISBN."""

    color = RED

    def __init__(self, message: str = "Book not found."):
        super().__init__(message)


class BookNotAvailableError(LibraryError):
    """The book is already borrowed."""

    color = YELLOW

    def __init__(self, message: str = "Book not available"):
        super().__init__(message)


class BookNotBorrowedError(LibraryError):
    """The book is not currently borrowed, so it cannot be returned."""

    color = YELLOW

    def __init__(self, message: str = "Book not borrowed."):
        super().__init__(message)


@dataclass
class Book:
    """A book identified by its ISBN."""

    title: str
    author: str
    isbn: str
    is_borrowed: bool = False

    def borrow(self) -> None:
        """Mark the book as borrowed."""
        self.is_borrowed = True

    def give_back(self) -> None:
        """Mark the book as returned."""
        self.is_borrowed = False

    def details(self) -> str:
        """Return the book's fields as coloured lines of text."""
        borrowed = "true" if self.is_borrowed else "false"
        return (
            f"{CYAN}Title: {RESET}{self.title}\n"
            f"{CYAN}Author: {RESET}{self.author}\n"
            f"{CYAN}ISBN: {RESET}{self.isbn}\n"
            f"{CYAN}Borrowed: {RESET}{borrowed}\n"
        )


@dataclass
class Library:
    """An ordered collection of books."""

    books: list[Book] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        """Append a book to the collection."""
        self.books.append(book)

    def find_book(self, isbn: str) -> Book:
        """Return the first book with the given ISBN."""
        for book in self.books:
            if book.isbn == isbn:
                return book
        raise BookNotFoundError()

    def borrow_book(self, isbn: str) -> Book:
        """Borrow the book with the given ISBN and return it."""
        book = self.find_book(isbn)
        if book.is_borrowed:
            raise BookNotAvailableError()
        book.borrow()
        return book

    def return_book(self, isbn: str) -> Book:
        """Return the borrowed book with the given ISBN."""
        book = self.find_book(isbn)
        if not book.is_borrowed:
            raise BookNotBorrowedError()
        book.give_back()
        return book

    def available_books(self) -> list[Book]:
        """Books that are not currently borrowed, in insertion order."""
        return [book for book in self.books if not book.is_borrowed]

    def list_all_books(self) -> str:
        """Render every book, or a notice when the library is empty."""
        if not self.books:
            return f"{YELLOW}No books in the library.{RESET}\n"
        header = f"{BOLD}{MAGENTA}=== All Books ==={RESET}\n"
        return header + "".join(f"{book.details()}{SEPARATOR}\n" for book in self.books)

    def list_available_books(self) -> str:
        """Render the available books, or a notice when there are none."""
        text = f"{BOLD}{MAGENTA}=== Available Books ==={RESET}\n"
        available = self.available_books()
        if not available:
            return text + f"{YELLOW}No available books.{RESET}\n"
        return text + "".join(f"{book.details()}{SEPARATOR}\n" for book in available)


def banner() -> str:
    """The program's title banner."""
    return (
        f"{BOLD}{GREEN}"
        "==========================================\n"
        "         LIBRARY MANAGER SYSTEM           \n"
        f"=========================================={RESET}\n"
    )


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("input ended")
    return line.rstrip("\n")


def _prompt(stdin: TextIO, stdout: TextIO, text: str) -> str:
    stdout.write(f"{BOLD}{text}{RESET}")
    stdout.flush()
    return _read_line(stdin)


def _parse_choice(line: str) -> int | None:
    match = _CHOICE.match(line)
    return int(match.group(1)) if match else None


def _report(stdout: TextIO, error: LibraryError) -> None:
    stdout.write(f"{error.color}{error}{RESET}\n")


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Library:
    """Run the interactive menu until the user exits or input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    library = Library()

    try:
        while True:
            stdout.write(CLEAR_SCREEN + banner() + _MENU)
            stdout.flush()
            choice = _parse_choice(_read_line(stdin))
            if choice is None:
                stdout.write(f"{RED}Invalid input.{RESET}\n")
                stdout.flush()
                time.sleep(1.2)
                continue

            stdout.write(CLEAR_SCREEN + banner())
            if choice == 1:
                title = _prompt(stdin, stdout, "\nEnter title: ")
                author = _prompt(stdin, stdout, "Enter author: ")
                isbn = _prompt(stdin, stdout, "Enter ISBN: ")
                library.add_book(Book(title, author, isbn))
                stdout.write(f"{GREEN}Book added successfully.\n{RESET}")
            elif choice == 2:
                isbn = _prompt(stdin, stdout, "\nEnter ISBN: ")
                try:
                    library.borrow_book(isbn)
                except LibraryError as error:
                    _report(stdout, error)
                else:
                    stdout.write(f"{GREEN}Book borrowed successfully.{RESET}\n")
            elif choice == 3:
                isbn = _prompt(stdin, stdout, "\nEnter ISBN: ")
                try:
                    library.return_book(isbn)
                except LibraryError as error:
                    _report(stdout, error)
                else:
                    stdout.write(f"{GREEN}Book returned successfully.{RESET}\n")
            elif choice == 4:
                stdout.write(library.list_all_books())
            elif choice == 5:
                stdout.write(library.list_available_books())
            elif choice == 6:
                stdout.write(
                    f"{BOLD}{GREEN}\nThank you for using Library Manager! Goodbye!\n{RESET}"
                )
                stdout.flush()
                time.sleep(1.2)
                stdout.write(CLEAR_SCREEN)
                stdout.flush()
                return library
            else:
                stdout.write(f"{RED}Invalid input.{RESET}\n")

            stdout.write(f"{YELLOW}\nPress Enter to continue...{RESET}")
            stdout.flush()
            _read_line(stdin)
    except EOFError:
        return library


def main(argv: list[str] | None = None) -> int:
    """Start the library manager on the terminal."""
    parser = argparse.ArgumentParser(description="Manage a small library of books.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())