# Data objects for the feed check.
# UpdateRecord mirrors the document the upstream publisher writes to the store,
# FreshnessReport is what /check sends back.

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UpdateRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    updated_at: str = Field(alias="Atualizado")  # "DD/MM HH:MM", no year
    network: Any = Field(default=None, alias="Rede")  # unused downstream


class FreshnessReport(BaseModel):
    lastupdate: str
    nextupdate: str
    now: str


class ErrorDetail(BaseModel):
    type: str
    message: str


class ErrorOut(BaseModel):
    error: ErrorDetail
