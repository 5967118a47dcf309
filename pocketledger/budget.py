"""Interactive deposit and withdrawal menu for a logged-in user."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, TextIO

from pocketledger.auth import (
    CLEAR_SCREEN,
    FINANCES_FILE,
    USERS_FILE,
    AuthError,
    User,
    _Scanner,
    authenticate,
    save_user,
)


class InvalidAmountError(ValueError):
    """The amount is negative or not a number."""


class InsufficientFundsError(ValueError):
    """The withdrawal is larger than the balance."""


def deposit(user: User, amount: float) -> float:
    """Add a non-negative amount to the user's balance and return the new balance."""
    if amount < 0:
        raise InvalidAmountError(f"invalid amount: {amount}")
    user.balance += amount
    return user.balance


def withdraw(user: User, amount: float) -> float:
    """Take a non-negative amount no larger than the balance; return the new balance."""
    if amount < 0:
        raise InvalidAmountError(f"invalid amount: {amount}")
    if amount > user.balance:
        raise InsufficientFundsError(
            f"cannot withdraw {amount} from a balance of {user.balance}"
        )
    user.balance -= amount
    return user.balance


def _transaction_screen(
    user: User,
    scanner: _Scanner,
    stdout: TextIO,
    verb: str,
    operation: Callable[[User, float], float],
) -> None:
    stdout.write(CLEAR_SCREEN)
    stdout.write(
        f"Current Balance: {user.balance:.2f}\nEnter amount to {verb}:\t$"
    )
    stdout.flush()
    token = scanner.read_token()
    try:
        operation(user, float(token))
    except InsufficientFundsError:
        stdout.write("\nNot enough funds.")
    except (InvalidAmountError, ValueError):
        stdout.write("\nInvalid input.")
    else:
        stdout.write("\nSuccessful!\n")
    stdout.flush()
    time.sleep(2)


def run_menu(
    user: User,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    finances_file: str | Path = FINANCES_FILE,
) -> User:
    """Show the balance menu until the user exits; the balance is then saved."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    scanner = _Scanner(stdin)

    while True:
        stdout.write(
            f"BALANCE: ${user.balance:.2f}\nACTIONS:\n1.\tDeposit\n"
            "2.\tWithdraw\n3.\tExit\nChoice:\t"
        )
        stdout.flush()
        token = scanner.read_token()
        try:
            choice = int(token)
        except ValueError:
            choice = None

        if choice == 1:
            _transaction_screen(user, scanner, stdout, "deposit", deposit)
        elif choice == 2:
            _transaction_screen(user, scanner, stdout, "withdraw", withdraw)
        elif choice == 3:
            save_user(user.id, user.balance, finances_file)
            return user
        else:
            stdout.write("\nInvalid Input.\n")
            stdout.flush()
            time.sleep(1.5)
        stdout.write(CLEAR_SCREEN)


def main(argv: list[str] | None = None) -> int:
    """Run the budget manager: authenticate, then show the balance menu."""
    parser = argparse.ArgumentParser(description="Keep track of a personal balance.")
    parser.add_argument("--users", default=USERS_FILE, help="accounts file")
    parser.add_argument("--finances", default=FINANCES_FILE, help="balances file")
    args = parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    stdout.write(CLEAR_SCREEN)
    try:
        while True:
            try:
                user = authenticate(stdin, stdout, args.users, args.finances)
                break
            except AuthError:
                continue
        stdout.write(CLEAR_SCREEN)
        stdout.write(f"Welcome, {user.username}!\n")
        run_menu(user, stdin, stdout, args.finances)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())