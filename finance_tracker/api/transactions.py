from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from finance_tracker.clients.backend import FinanceApiClient, get_backend_client
from finance_tracker.schemas.common import RESOURCE_ID_PATTERN
from finance_tracker.schemas.transaction import TransactionCreate, TransactionRead, TransactionUpdate
from finance_tracker.services.transactions import get_transaction
from finance_tracker.settings import Settings, get_settings

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("/transactions", response_model=list[TransactionRead])
async def list_transactions(
    limit: int | None = Query(default=None, ge=1),
    client: FinanceApiClient = Depends(get_backend_client),
    settings: Settings = Depends(get_settings),
) -> list[TransactionRead]:
    return await client.get_recent_transactions(limit or settings.transactions_list_limit)


@router.get("/transactions/{transaction_id}", response_model=TransactionRead)
async def transaction_details(
    transaction_id: str = Path(pattern=RESOURCE_ID_PATTERN),
    client: FinanceApiClient = Depends(get_backend_client),
    settings: Settings = Depends(get_settings),
) -> TransactionRead:
    try:
        return await get_transaction(client, transaction_id, settings.transaction_lookup_limit)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/transactions", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreate,
    client: FinanceApiClient = Depends(get_backend_client),
) -> dict[str, str]:
    await client.add_transaction(payload)
    return {"status": "ok"}


@router.put("/transactions/{transaction_id}", response_model=TransactionRead)
async def update_transaction(
    payload: TransactionUpdate,
    transaction_id: str = Path(pattern=RESOURCE_ID_PATTERN),
    client: FinanceApiClient = Depends(get_backend_client),
) -> TransactionRead:
    return await client.edit_transaction(transaction_id, payload)


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(
    transaction_id: str = Path(pattern=RESOURCE_ID_PATTERN),
    client: FinanceApiClient = Depends(get_backend_client),
) -> dict[str, str]:
    await client.delete_transaction(transaction_id)
    return {"status": "ok"}
