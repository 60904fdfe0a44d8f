"""
API handlers: call services with decoded request data, map results/errors to HTTP.

Responsibility: Bridge HTTP types and services. Outcome-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import HTTPException

from app.schemas.values import StoreValuesRequest
from app.services.values_store import StorageFault, ValuesStore

logger = logging.getLogger(__name__)


def handle_store_values(body: StoreValuesRequest, store: ValuesStore) -> str:
    """
    Persist the submitted values and return the written file path.
    A storage fault becomes HTTP 500; the process keeps serving.
    """
    outcome = store.store(body.data)
    if isinstance(outcome, StorageFault):
        logger.error("[api:store_values] storage fault: %s", outcome.reason)
        raise HTTPException(status_code=500, detail=f"Failed to store values: {outcome.reason}")
    return outcome.path
