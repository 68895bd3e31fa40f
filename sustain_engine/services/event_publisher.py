"""
Kafka event publisher — fire-and-forget.

Publishes WEIGHTS_UPDATED whenever the global weight configuration changes,
so downstream consumers (dashboards, any derived-score cache) know every
sustainability score has shifted.
Gracefully degrades if Kafka is unavailable.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone

import structlog

from sustain_engine.core.config import get_settings
from sustain_engine.schemas.weights import Weights

logger = structlog.get_logger()

_producer = None


async def _get_producer():
    global _producer
    settings = get_settings()
    if not settings.kafka_enabled:
        return None
    if _producer is None:
        from aiokafka import AIOKafkaProducer
        _producer = AIOKafkaProducer(bootstrap_servers=settings.kafka_bootstrap)
        await _producer.start()
    return _producer


async def publish_weights_event(weights: Weights) -> None:
    settings = get_settings()
    if not settings.kafka_enabled:
        return

    try:
        producer = await _get_producer()
        if producer:
            event = {
                "event_type": "WEIGHTS_UPDATED",
                "settings_id": settings.global_settings_id,
                "weights": weights.model_dump(by_alias=True),
                "total": weights.total,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            await producer.send_and_wait(
                settings.kafka_topic_weight_events,
                json.dumps(event).encode("utf-8"),
                key=settings.global_settings_id.encode("utf-8"),
            )
            logger.info("kafka_event_published", event_type="WEIGHTS_UPDATED")
    except Exception as e:
        # Fire-and-forget: log but don't fail the request
        logger.warning("kafka_publish_failed", error=str(e))
