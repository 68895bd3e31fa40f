"""
Shared fixtures: in-memory store/repository (real validation + scoring
paths, no database) and a TestClient with auth bypassed.
"""
from __future__ import annotations

import itertools
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from sustain_engine.api.dependencies import get_supplier_repository, get_weights_store
from sustain_engine.core.auth import verify_token
from sustain_engine.core.config import Settings
from sustain_engine.main import app
from sustain_engine.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from sustain_engine.schemas.weights import Weights
from sustain_engine.services.supplier_repository import SupplierRepository
from sustain_engine.services.weights_store import WeightConfigurationStore

ADMIN_CLAIMS = {"sub": "admin-user", "roles": ["procurement-admin"]}
SUPPLIER_CLAIMS = {"sub": "supplier-user", "roles": ["supplier"]}


class InMemoryWeightsStore(WeightConfigurationStore):

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(session=None, settings=settings or Settings(kafka_enabled=False))
        self.row: Optional[Weights] = None
        self.saves = 0

    async def _fetch(self) -> Optional[Weights]:
        return self.row

    async def _upsert(self, weights: Weights) -> Weights:
        self.row = weights
        self.saves += 1
        return weights


class InMemorySupplierRepository(SupplierRepository):

    def __init__(self):
        super().__init__(session=None)
        self.rows: dict[str, Supplier] = {}
        self._ids = itertools.count(1)

    async def get(self, supplier_id: str) -> Optional[Supplier]:
        return self.rows.get(supplier_id)

    async def list_all(self) -> list[Supplier]:
        return sorted(self.rows.values(), key=lambda s: s.name)

    async def create(self, data: SupplierCreate) -> Supplier:
        supplier = Supplier(id=f"SUP-{next(self._ids):03d}", **data.model_dump())
        self.rows[supplier.id] = supplier
        return supplier

    async def update(self, supplier_id: str, data: SupplierUpdate) -> Optional[Supplier]:
        current = self.rows.get(supplier_id)
        if current is None:
            return None
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        updated = Supplier(**{**current.model_dump(), **changes})
        self.rows[supplier_id] = updated
        return updated

    async def delete(self, supplier_id: str) -> bool:
        return self.rows.pop(supplier_id, None) is not None


@pytest.fixture
def weights_store() -> InMemoryWeightsStore:
    return InMemoryWeightsStore()


@pytest.fixture
def supplier_repo() -> InMemorySupplierRepository:
    return InMemorySupplierRepository()


@pytest.fixture
def client(weights_store, supplier_repo):
    app.dependency_overrides[get_weights_store] = lambda: weights_store
    app.dependency_overrides[get_supplier_repository] = lambda: supplier_repo
    app.dependency_overrides[verify_token] = lambda: ADMIN_CLAIMS
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
