"""User accounts and balances stored in two small CSV files."""

from __future__ import annotations

import math
import re
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

USERS_FILE = "users.csv"
FINANCES_FILE = "finances.csv"
CLEAR_SCREEN = "\033[2J\033[1;1H"

_WHITESPACE = " \t\r\n"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class User:
    """A registered account and its current balance."""

    id: int
    username: str
    password: str
    balance: float = 0.0


class AuthError(Exception):
    """Signing up or logging in did not succeed."""


class UsernameTakenError(AuthError):
    """The requested username is already registered."""


class LoginFailedError(AuthError):
    """No account matches the given username and password."""


def trim(s: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_WHITESPACE)


def _parse_int(text: str) -> int:
    """Read a leading integer, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Read a leading floating-point number, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _read_lines(path: str | Path) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except FileNotFoundError:
        return []


def load_balances(finances_file: str | Path = FINANCES_FILE) -> dict[int, float]:
    """Map user ids to balances; unreadable lines are skipped, later lines win."""
    balances: dict[int, float] = {}
    for line in _read_lines(finances_file):
        fields = line.split(",")
        if len(fields) < 2 or not fields[1]:
            continue
        try:
            user_id = _parse_int(trim(fields[0]))
            balance = _parse_float(trim(fields[1]))
        except ValueError:
            continue
        balances[user_id] = balance
    return balances


def load_users(
    users_file: str | Path = USERS_FILE,
    finances_file: str | Path = FINANCES_FILE,
) -> list[User]:
    """Read every valid account, joined with its balance (0 if none is stored)."""
    balances = load_balances(finances_file)
    users: list[User] = []
    for raw in _read_lines(users_file):
        line = trim(raw)
        if not line or line.startswith("#"):
            continue
        fields = line.split(",")
        if len(fields) < 3:
            continue
        id_text, username, password = (trim(field) for field in fields[:3])
        if not (id_text and username and password):
            continue
        try:
            user_id = _parse_int(id_text)
        except ValueError:
            continue
        users.append(User(user_id, username, password, balances.get(user_id, 0.0)))
    return users


def add_user(
    username: str,
    password: str,
    users_file: str | Path = USERS_FILE,
    finances_file: str | Path = FINANCES_FILE,
) -> int:
    """Register a new account with a zero balance and return its id."""
    users = load_users(users_file, finances_file)
    if any(user.username == username for user in users):
        raise UsernameTakenError(f"username {username!r} already exists")
    new_id = users[-1].id + 1 if users else 1
    with open(users_file, "a", encoding="utf-8") as handle:
        handle.write(f"{new_id},{username},{password}\n")
    with open(finances_file, "a", encoding="utf-8") as handle:
        handle.write(f"{new_id},0\n")
    return new_id


def login_user(
    username: str,
    password: str,
    users_file: str | Path = USERS_FILE,
    finances_file: str | Path = FINANCES_FILE,
) -> int:
    """Return the id of the account matching the credentials."""
    user = _find_user(username, password, users_file, finances_file)
    return user.id


def _find_user(username, password, users_file, finances_file) -> User:
    for user in load_users(users_file, finances_file):
        if user.username == username and user.password == password:
            return user
    raise LoginFailedError("incorrect username or password")


def save_user(
    user_id: int,
    balance: float,
    finances_file: str | Path = FINANCES_FILE,
) -> None:
    """Store a balance, rewriting the finances file ordered by user id."""
    balances = load_balances(finances_file)
    balances[user_id] = balance
    with open(finances_file, "w", encoding="utf-8") as handle:
        for uid in sorted(balances):
            handle.write(f"{uid},{balances[uid]:g}\n")


class _Scanner:
    """Reads whitespace-separated input one character at a time."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def read_char(self) -> str:
        while True:
            char = self._stream.read(1)
            if not char:
                raise EOFError("input ended")
            if not char.isspace():
                return char

    def read_token(self) -> str:
        chars = [self.read_char()]
        while True:
            char = self._stream.read(1)
            if not char or char.isspace():
                return "".join(chars)
            chars.append(char)


def _fail(stdout: TextIO, message: str) -> None:
    stdout.write(message)
    stdout.flush()
    time.sleep(2)
    stdout.write(CLEAR_SCREEN)


def authenticate(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    users_file: str | Path = USERS_FILE,
    finances_file: str | Path = FINANCES_FILE,
) -> User:
    """Ask the user to log in or sign up and return the resulting account."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    scanner = _Scanner(stdin)

    stdout.write("Welcome to the Budget Manager!\n")
    while True:
        stdout.write("Log in or sign up (L/S):\t")
        stdout.flush()
        action = scanner.read_char().lower()
        if action in ("l", "s"):
            break
        stdout.write("\nIncorrect input!\n")

    stdout.write("\nLOGIN\n" if action == "l" else "\nSIGN UP\n")
    stdout.write("Enter username: ")
    stdout.flush()
    username = scanner.read_token()
    stdout.write("Enter password: ")
    stdout.flush()
    password = scanner.read_token()

    if action == "l":
        try:
            user = _find_user(username, password, users_file, finances_file)
        except LoginFailedError:
            _fail(stdout, "Login failed. Incorrect username or password.\n")
            raise
        stdout.write("Login successful!\n")
        return user

    try:
        new_id = add_user(username, password, users_file, finances_file)
    except UsernameTakenError:
        _fail(stdout, "Username already exists.\n")
        raise
    stdout.write("Sign up successful!\n")
    return User(new_id, username, password, 0.0)