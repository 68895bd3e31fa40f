"""
Weight Configuration Store

Holds the single active weight configuration (one row keyed by
`global_settings_id`). Reads fall back to DEFAULT_WEIGHTS until an admin
saves; saves validate, replace the row atomically and announce the change.

There is no versioning: after a save the previous configuration is gone.
Scores are never cached, so nothing needs invalidating here beyond the
WEIGHTS_UPDATED event for downstream consumers.
"""
from __future__ import annotations

from typing import Any, Optional

import pydantic
import structlog
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from sustain_engine.core.config import Settings, get_settings
from sustain_engine.core.errors import ValidationError
from sustain_engine.models.supplier import AppSettingsRecord
from sustain_engine.schemas.weights import DEFAULT_WEIGHTS, Weights
from sustain_engine.services.event_publisher import publish_weights_event

logger = structlog.get_logger()


def parse_weights(payload: Any) -> Weights:
    """
    Validate a raw weight payload. Every field must be present, numeric and
    non-negative; otherwise ValidationError lists all offending fields.
    """
    if isinstance(payload, Weights):
        return payload
    try:
        return Weights.model_validate(payload)
    except pydantic.ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "payload"
            errors.setdefault(field, err["msg"])
        raise ValidationError(list(errors), errors) from e


def weight_sum_advisory(weights: Weights, settings: Optional[Settings] = None) -> Optional[str]:
    """
    Advisory only: a message when the total strays from the target by more
    than the tolerance, else None. Scoring normalizes by the total either way.
    """
    settings = settings or get_settings()
    total = weights.total
    if abs(total - settings.weights_sum_target) > settings.weights_sum_tolerance:
        return (
            f"Total weights are {total:g}; they should be approximately "
            f"{settings.weights_sum_target:g} points for optimal scoring."
        )
    return None


class WeightConfigurationStore:

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None):
        self.session = session
        self.settings = settings or get_settings()

    async def get(self) -> Weights:
        weights = await self._fetch()
        if weights is None:
            logger.debug("weights_not_configured_using_defaults")
            return DEFAULT_WEIGHTS
        return weights

    async def save(self, payload: Any) -> Weights:
        saved, _ = await self.save_with_advisory(payload)
        return saved

    async def save_with_advisory(self, payload: Any) -> tuple[Weights, Optional[str]]:
        """Like save, also returning the sum advisory (None when within tolerance)."""
        weights = parse_weights(payload)

        advisory = weight_sum_advisory(weights, self.settings)
        if advisory:
            logger.warning("weights_sum_outside_tolerance", total=weights.total)

        saved = await self._upsert(weights)
        logger.info("weights_saved", total=saved.total, **saved.model_dump())

        await publish_weights_event(saved)
        return saved, advisory

    # ── Persistence ──

    async def _fetch(self) -> Optional[Weights]:
        result = await self.session.execute(
            select(AppSettingsRecord).where(AppSettingsRecord.id == self.settings.global_settings_id)
        )
        row = result.scalar_one_or_none()
        return Weights.model_validate(row) if row is not None else None

    async def _upsert(self, weights: Weights) -> Weights:
        values = weights.model_dump()
        stmt = (
            insert(AppSettingsRecord)
            .values(id=self.settings.global_settings_id, **values)
            .on_conflict_do_update(index_elements=[AppSettingsRecord.id], set_=values)
            .returning(AppSettingsRecord)
        )
        result = await self.session.execute(stmt)
        row = result.scalar_one()
        await self.session.commit()
        return Weights.model_validate(row)
