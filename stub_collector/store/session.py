"""In-memory store for the records of one collector session."""

from dataclasses import dataclass, field
from decimal import Decimal

from stub_collector.exceptions import ReferentialIntegrityError
from stub_collector.models.financial import Account, Transaction


@dataclass
class SessionStore:
    """Accounts and transactions accumulated during a session.

    Transactions are kept in insertion order. Balances live on the
    accounts themselves; the store only indexes who references whom.
    """

    accounts: dict[str, Account] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)

    _account_transactions: dict[str, list[int]] = field(default_factory=dict)
    _dangling: list[int] = field(default_factory=list)

    def add_account(self, account: Account) -> bool:
        """Add an account; return False if an account with that id is already there."""
        if account.account_id in self.accounts:
            return False
        self.accounts[account.account_id] = account
        self._account_transactions.setdefault(account.account_id, [])
        return True

    def add_transaction(self, transaction: Transaction, strict: bool = True) -> None:
        """Append a transaction.

        With ``strict`` (the default) a transaction referencing an unknown
        account is rejected; corrupted records are added with
        ``strict=False`` and tracked as dangling.
        """
        known = transaction.account_id in self.accounts
        if strict and not known:
            raise ReferentialIntegrityError(f"Account {transaction.account_id} not found")

        idx = len(self.transactions)
        self.transactions.append(transaction)
        if known:
            self._account_transactions[transaction.account_id].append(idx)
        else:
            self._dangling.append(idx)

    def add_transactions(self, transactions: list[Transaction]) -> None:
        for transaction in transactions:
            self.add_transaction(transaction)

    # Query methods
    def get_account(self, account_id: str) -> Account:
        try:
            return self.accounts[account_id]
        except KeyError:
            raise ReferentialIntegrityError(f"Account {account_id} not found") from None

    def get_account_transactions(self, account_id: str) -> list[Transaction]:
        """Get all transactions booked against an account."""
        indices = self._account_transactions.get(account_id, [])
        return [self.transactions[i] for i in indices]

    def get_dangling_transactions(self) -> list[Transaction]:
        """Transactions whose account reference matches no known account."""
        return [self.transactions[i] for i in self._dangling]

    def ledger_total(self, account_id: str) -> Decimal:
        """Sum of the signed amounts of the transactions booked against an account."""
        return sum(
            (tx.amount for tx in self.get_account_transactions(account_id)),
            Decimal("0.00"),
        )

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "accounts": len(self.accounts),
            "transactions": len(self.transactions),
            "dangling_transactions": len(self._dangling),
        }
