import threading

from pcpdemos.bank import (
    DEMO_DEPOSIT,
    DEMO_INITIAL_DEPOSIT,
    DEMO_ROUNDS,
    DEMO_WITHDRAWAL,
    Account,
    demo,
)


def test_new_account_is_empty():
    account = Account()
    assert account.balance() == 0
    assert account.transaction_count() == 0


def test_deposit_increases_balance_and_count():
    account = Account()
    account.deposit(100)
    assert account.balance() == 100
    assert account.transaction_count() == 1


def test_withdraw_without_cover_is_ignored():
    account = Account()
    account.deposit(30)
    account.withdraw(50)
    assert account.balance() == 30
    assert account.transaction_count() == 1


def test_withdraw_of_whole_balance_is_allowed():
    account = Account()
    account.deposit(50)
    account.withdraw(50)
    assert account.balance() == 0
    assert account.transaction_count() == 2


def test_concurrent_deposits_are_not_lost():
    account = Account()
    workers = 200
    amount = 5

    threads = [threading.Thread(target=account.deposit, args=(amount,)) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert account.balance() == workers * amount
    assert account.transaction_count() == workers


def test_demo_balance_matches_transactions(capsys):
    account = demo()
    out = capsys.readouterr().out

    successful_withdrawals = account.transaction_count() - 1 - DEMO_ROUNDS
    assert 0 <= successful_withdrawals <= DEMO_ROUNDS
    expected = (
        DEMO_INITIAL_DEPOSIT
        + DEMO_ROUNDS * DEMO_DEPOSIT
        - successful_withdrawals * DEMO_WITHDRAWAL
    )
    assert account.balance() == expected
    assert f"Final balance: {account.balance()}" in out
    assert f"Total transactions: {account.transaction_count()}" in out