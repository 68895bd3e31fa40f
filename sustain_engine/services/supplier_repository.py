"""
Supplier persistence.

Rows become canonical `Supplier` schemas at this boundary; a row that does
not convert (e.g. a NULL metric left by a manual DB edit) raises DataError
instead of being coerced. Scoring happens in the caller, against one
weight snapshot per request.
"""
from __future__ import annotations

from typing import Optional

import pydantic
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sustain_engine.core.errors import DataError
from sustain_engine.models.supplier import SupplierRecord
from sustain_engine.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate

logger = structlog.get_logger()


def to_supplier(record: SupplierRecord) -> Supplier:
    try:
        return Supplier.model_validate(record)
    except pydantic.ValidationError as e:
        field = str(e.errors()[0]["loc"][0]) if e.errors()[0]["loc"] else "record"
        logger.error("supplier_record_invalid", supplier_id=record.id, field=field, error=str(e))
        raise DataError(field, supplier_id=record.id) from e


class SupplierRepository:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, supplier_id: str) -> Optional[Supplier]:
        record = await self.session.get(SupplierRecord, supplier_id)
        return to_supplier(record) if record is not None else None

    async def list_all(self) -> list[Supplier]:
        result = await self.session.execute(select(SupplierRecord).order_by(SupplierRecord.name))
        return [to_supplier(r) for r in result.scalars()]

    async def create(self, data: SupplierCreate) -> Supplier:
        record = SupplierRecord(**data.model_dump())
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("supplier_created", supplier_id=record.id, name=record.name)
        return to_supplier(record)

    async def update(self, supplier_id: str, data: SupplierUpdate) -> Optional[Supplier]:
        record = await self.session.get(SupplierRecord, supplier_id)
        if record is None:
            return None
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(record, field, value)
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("supplier_updated", supplier_id=supplier_id, fields=sorted(changes))
        return to_supplier(record)

    async def delete(self, supplier_id: str) -> bool:
        record = await self.session.get(SupplierRecord, supplier_id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.commit()
        logger.info("supplier_deleted", supplier_id=supplier_id)
        return True
