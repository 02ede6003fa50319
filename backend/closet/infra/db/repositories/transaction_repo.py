"""Transaction ledger implementation."""
from closet.domain.market.models import Transaction
from closet.domain.market.repositories import TransactionRepository
from closet.infra.db.base import InMemoryTable


class TransactionRepositoryImpl(TransactionRepository):
    """Append-only ledger. There is no update or delete."""

    def __init__(self) -> None:
        self._table: InMemoryTable[Transaction] = InMemoryTable()

    def append(self, transaction: Transaction) -> Transaction:
        """Record a transaction."""
        return self._table.insert(transaction)

    def list_for_user(self, user_id: int) -> list[Transaction]:
        return self._table.filter(lambda t: user_id in (t.buyer_id, t.seller_id))

    def list_for_dress(self, dress_id: int) -> list[Transaction]:
        return self._table.filter(lambda t: t.dress_id == dress_id)

    def count(self) -> int:
        return len(self._table)
