"""
Shared FastAPI dependencies + domain-error → HTTP mapping.
"""
from __future__ import annotations

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from sustain_engine.core.errors import ConfigurationError, DataError, EngineError, ValidationError
from sustain_engine.models.database import get_db
from sustain_engine.services.supplier_repository import SupplierRepository
from sustain_engine.services.weights_store import WeightConfigurationStore


def get_weights_store(db: AsyncSession = Depends(get_db)) -> WeightConfigurationStore:
    return WeightConfigurationStore(db)


def get_supplier_repository(db: AsyncSession = Depends(get_db)) -> SupplierRepository:
    return SupplierRepository(db)


def engine_http_error(e: EngineError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(
            status_code=422,
            detail={"message": "Invalid weights", "fields": e.fields, "errors": e.errors},
        )
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=500, detail=f"Weight configuration error: {e}")
    if isinstance(e, DataError):
        return HTTPException(status_code=500, detail=f"Supplier data error: {e}")
    return HTTPException(status_code=500, detail=f"Scoring engine error: {e}")
