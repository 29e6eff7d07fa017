from collections.abc import Sequence

from finance_tracker.clients.backend import FinanceApiClient
from finance_tracker.schemas.transaction import TransactionRead


def find_transaction(transactions: Sequence[TransactionRead], transaction_id: str) -> TransactionRead:
    for transaction in transactions:
        if transaction.id == transaction_id:
            return transaction
    raise LookupError("Transaction not found")


async def get_transaction(client: FinanceApiClient, transaction_id: str, lookup_limit: int) -> TransactionRead:
    # The backend has no single-transaction endpoint; look it up among the most recent ones.
    recent = await client.get_recent_transactions(lookup_limit)
    return find_transaction(recent, transaction_id)
