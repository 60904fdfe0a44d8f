"""Schemas for the store-values endpoint."""

from pydantic import BaseModel, Field, StrictStr


class StoreValuesRequest(BaseModel):
    """Values to persist for a later `vcluster create`."""

    data: StrictStr = Field(..., description="Raw values content, written to the file verbatim.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"data": "sync:\n  toHost:\n    ingresses:\n      enabled: true\n"}]
        }
    }
