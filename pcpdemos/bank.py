"""A bank account whose transactions are safe to run from many threads."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

DEMO_ROUNDS = 1000
DEMO_INITIAL_DEPOSIT = 100
DEMO_DEPOSIT = 100
DEMO_WITHDRAWAL = 50


class Account:
    """An account balance guarded by a lock, with a transaction counter."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._balance = 0
        self._transactions = 0

    def deposit(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        with self._lock:
            self._balance += amount
            self._transactions += 1

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` from the balance if it is covered; otherwise do nothing."""
        with self._lock:
            if self._balance >= amount:
                self._balance -= amount
                self._transactions += 1

    def balance(self) -> int:
        """Return the current balance."""
        with self._lock:
            return self._balance

    def transaction_count(self) -> int:
        """Return how many deposits and withdrawals took effect."""
        with self._lock:
            return self._transactions


def demo() -> Account:
    """Run many concurrent deposits and withdrawals and print the outcome."""
    account = Account()
    account.deposit(DEMO_INITIAL_DEPOSIT)

    with ThreadPoolExecutor(max_workers=32) as pool:
        futures = []
        for _ in range(DEMO_ROUNDS):
            futures.append(pool.submit(account.deposit, DEMO_DEPOSIT))
            futures.append(pool.submit(account.withdraw, DEMO_WITHDRAWAL))
        for future in futures:
            future.result()

    print("Final balance:", account.balance())
    print("Total transactions:", account.transaction_count())
    return account