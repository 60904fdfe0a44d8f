"""
HTTP routes served on the unix socket. Decoding is left to FastAPI, storage to handlers.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.handlers import handle_store_values
from app.schemas.values import StoreValuesRequest
from app.services.values_store import ValuesStore, get_values_store

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Values ---

@router.post(
    "/store-values",
    status_code=201,
    response_model=str,
    tags=["values"],
    summary="Store values for vcluster create",
    description="Write `data` verbatim to a randomly named file under the values directory; return its path as a JSON string. 422 on an invalid body, 500 if the write fails.",
)
def store_values(
    body: StoreValuesRequest,
    store: ValuesStore = Depends(get_values_store),
) -> str:
    logger.info("[api:store_values] IN  data_len=%d", len(body.data))
    path = handle_store_values(body, store)
    logger.info("[api:store_values] OUT path=%s", path)
    return path
