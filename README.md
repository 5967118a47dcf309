# pocketledger

pocketledger has two small interactive terminal programs and a few helper functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Budget manager

```
pocketledger-budget [--users USERS] [--finances FINANCES]
```

At start-up you choose to log in (`L`) or sign up (`S`). You then enter a
username and a password. Accounts are kept in `users.csv`
(`id,username,password`) and balances in `finances.csv` (`id,balance`).
Both files are in the current directory by default. `--users` and
`--finances` select other files. A new account starts with a balance of 0.
A username that is already taken is refused. A failed login or sign-up
returns you to the start.

After you log in, the menu offers:

1. Deposit: adds a non-negative amount to the balance.
2. Withdraw: takes a non-negative amount that is no more than the balance.
3. Exit: writes the balance to the finances file and quits.

The balance is written only when you choose Exit. If input ends before then,
the program exits with status 1 and does not save the balance.

The same operations can be used from Python:

```python
from pocketledger.auth import add_user, login_user, load_users, save_user
from pocketledger.budget import deposit, withdraw, InsufficientFundsError

password = "password"
user_id = add_user("alice", password, "users.csv", "finances.csv")
assert login_user("alice", password, "users.csv", "finances.csv") == user_id

user = next(u for u in load_users("users.csv", "finances.csv") if u.id == user_id)
deposit(user, 50.0)
try:
    withdraw(user, 80.0)
except InsufficientFundsError:
    print("not enough funds")
save_user(user.id, user.balance, "finances.csv")
```

- `add_user` raises `UsernameTakenError` when the name is already in use.
- `login_user` and `authenticate` raise `LoginFailedError` when the credentials
  do not match.
- Both errors are subclasses of `AuthError`.
- `deposit` and `withdraw` raise `InvalidAmountError` for negative amounts.
  `withdraw` raises `InsufficientFundsError` when the amount is more than the
  balance.
- `load_balances` reads the finances file as a dict of id to balance.
- `run_menu` runs the balance menu for a `User` you already have.

Passwords are stored in `users.csv` as plain text, with no hashing. The files
are not locked, so do not use them from more than one session at a time.

## Library manager

```
pocketledger-library
```

A menu for adding books (title, author, ISBN), borrowing and returning them
by ISBN, and listing either all books or only the available ones. The
collection exists only in memory: it is not saved, and it is empty each time
the program starts.

From Python:

```python
from pocketledger.library import Book, Library, BookNotAvailableError

library = Library()
library.add_book(Book("Dune", "Frank Herbert", "978-0-00-000000-0"))
library.borrow_book("978-0-00-000000-0")
try:
    library.borrow_book("978-0-00-000000-0")
except BookNotAvailableError:
    print("already out")
print(library.available_books())
```

- `find_book`, `borrow_book` and `return_book` raise `BookNotFoundError` for an
  unknown ISBN.
- `return_book` raises `BookNotBorrowedError` for a book that is not borrowed.
- These errors are subclasses of `LibraryError`.
- `list_all_books`, `list_available_books` and `Book.details` return the
  coloured text that the menu prints.

## Small helpers

`pocketledger.exercises` provides:

- `fibonacci(x=0, y=1, count=10)`: a generator that yields `count` successive
  sums of a Fibonacci-style sequence.
- `recursive_sum(x)`: the sum 1 + 2 + … + x. It returns 0 when x is 0 or less.
- `swap_nums(x, y)`: returns the two values in swapped order.
- `Contact`: a contact record. `Contact.parse` reads one from
  whitespace-separated text, and `describe` formats it.
- `echo_filename()`: asks for a filename, writes it back and returns it.