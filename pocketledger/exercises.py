"""Small warm-up exercises: sequences, sums, swapping and contact records."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


def fibonacci(x: int = 0, y: int = 1, count: int = 10) -> Iterator[int]:
    """Yield ``count`` successive sums, starting from the pair (x, y)."""
    if count < 0:
        raise ValueError("count must not be negative")
    for _ in range(count):
        x, y = y, x + y
        yield y


def recursive_sum(x: int) -> int:
    """Sum the integers from 1 to x; zero when x is not positive."""
    return sum(range(1, x + 1))


def swap_nums(x, y):
    """Return the two values in swapped order."""
    return y, x


@dataclass
class Contact:
    """A person's contact details."""

    first_name: str
    last_name: str
    email: str
    age: int
    phone_number: str

    @classmethod
    def parse(cls, text: str) -> "Contact":
        """Build a contact from whitespace-separated first name, last name,
        email, age and phone number."""
        fields = text.split()
        if len(fields) < 5:
            raise ValueError("expected first name, last name, email, age and phone number")
        first_name, last_name, email, age_text, phone_number = fields[:5]
        try:
            age = int(age_text)
        except ValueError:
            raise ValueError(f"age is not a number: {age_text!r}") from None
        return cls(first_name, last_name, email, age, phone_number)

    def describe(self) -> str:
        """Render the contact as labelled lines."""
        return (
            f"Name: {self.first_name} {self.last_name}\n"
            f"Email: {self.email}\n"
            f"Age: {self.age}\n"
            f"Phone number: {self.phone_number}"
        )


def echo_filename(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Ask for a filename, write it back and return it."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write("Filename: ")
    stdout.flush()
    filename = stdin.readline().rstrip("\n")
    stdout.write(filename)
    stdout.flush()
    return filename