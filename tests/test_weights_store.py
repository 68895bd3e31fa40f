"""
Tests for weight validation and the weight configuration store.
"""
import asyncio
import json

import pytest

from sustain_engine.core.config import Settings
from sustain_engine.core.errors import ValidationError
from sustain_engine.schemas.weights import DEFAULT_WEIGHTS, WEIGHT_FIELDS, Weights
from sustain_engine.services import event_publisher
from sustain_engine.services.weights_store import parse_weights, weight_sum_advisory

from conftest import InMemoryWeightsStore


def _payload(**overrides) -> dict:
    payload = {
        "carbonFootprint": 30, "waterUsage": 15, "wasteReduction": 10, "energyEfficiency": 10,
        "iso14001": 15, "recyclingPolicy": 8, "waterPolicy": 5, "sustainabilityReport": 7,
    }
    payload.update(overrides)
    return payload


class TestDefaults:
    def test_default_distribution(self):
        assert DEFAULT_WEIGHTS.carbon_footprint == 25
        assert DEFAULT_WEIGHTS.water_usage == 17
        assert DEFAULT_WEIGHTS.iso14001 == 15
        assert DEFAULT_WEIGHTS.total == 100

    def test_eight_fields(self):
        assert len(WEIGHT_FIELDS) == 8


class TestParseWeights:
    def test_valid_camel_case(self):
        w = parse_weights(_payload())
        assert w.carbon_footprint == 30
        assert w.total == 100

    def test_valid_snake_case(self):
        w = parse_weights({name: 10 for name in WEIGHT_FIELDS})
        assert w.total == 80

    def test_missing_field(self):
        payload = _payload()
        del payload["waterPolicy"]
        with pytest.raises(ValidationError) as exc:
            parse_weights(payload)
        assert exc.value.fields == ["waterPolicy"]

    def test_non_numeric_fields_all_listed(self):
        with pytest.raises(ValidationError) as exc:
            parse_weights(_payload(carbonFootprint="lots", iso14001=None))
        assert set(exc.value.fields) == {"carbonFootprint", "iso14001"}
        assert "carbonFootprint" in exc.value.errors

    def test_negative_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_weights(_payload(waterUsage=-1))
        assert exc.value.fields == ["waterUsage"]

    def test_numeric_string_rejected(self):
        with pytest.raises(ValidationError):
            parse_weights(_payload(waterUsage="15"))

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            parse_weights([1, 2, 3])


class TestAdvisory:
    def test_within_tolerance(self):
        assert weight_sum_advisory(parse_weights(_payload(waterPolicy=10)), Settings()) is None  # 105

    def test_outside_tolerance(self):
        msg = weight_sum_advisory(parse_weights(_payload(waterPolicy=11)), Settings())  # 106
        assert msg is not None
        assert "106" in msg

    def test_custom_tolerance(self):
        settings = Settings(weights_sum_tolerance=0)
        assert weight_sum_advisory(parse_weights(_payload(waterPolicy=6)), settings) is not None


class TestStore:
    def test_get_falls_back_to_defaults(self):
        store = InMemoryWeightsStore()
        assert asyncio.run(store.get()) == DEFAULT_WEIGHTS

    def test_save_replaces_configuration(self):
        store = InMemoryWeightsStore()
        saved = asyncio.run(store.save(_payload()))
        assert saved.carbon_footprint == 30
        assert asyncio.run(store.get()) == saved

        second = asyncio.run(store.save(_payload(carbonFootprint=40)))
        assert asyncio.run(store.get()) == second
        assert store.saves == 2

    def test_save_out_of_tolerance_still_persists(self):
        store = InMemoryWeightsStore()
        saved = asyncio.run(store.save(_payload(carbonFootprint=80)))
        assert saved.total == 150
        assert asyncio.run(store.get()).total == 150

    def test_invalid_save_persists_nothing(self):
        store = InMemoryWeightsStore()
        with pytest.raises(ValidationError):
            asyncio.run(store.save(_payload(carbonFootprint="x")))
        assert store.saves == 0
        assert asyncio.run(store.get()) == DEFAULT_WEIGHTS

    def test_accepts_weights_instance(self):
        store = InMemoryWeightsStore()
        w = Weights(**{name: 12.5 for name in WEIGHT_FIELDS})
        assert asyncio.run(store.save(w)) == w

    def test_save_with_advisory_off_target(self):
        store = InMemoryWeightsStore()
        saved, advisory = asyncio.run(store.save_with_advisory(_payload(carbonFootprint=80)))
        assert saved.total == 150
        assert advisory is not None
        assert "150" in advisory

    def test_save_with_advisory_within_tolerance(self):
        store = InMemoryWeightsStore()
        _, advisory = asyncio.run(store.save_with_advisory(_payload(waterPolicy=10)))  # 105
        assert advisory is None


class TestWeightsEvents:

    @pytest.fixture
    def published(self, monkeypatch) -> list:
        events = []

        async def _record(weights):
            events.append(weights)

        monkeypatch.setattr("sustain_engine.services.weights_store.publish_weights_event", _record)
        return events

    def test_save_publishes_once(self, published):
        store = InMemoryWeightsStore()
        saved = asyncio.run(store.save(_payload()))
        assert published == [saved]

    def test_rejected_save_publishes_nothing(self, published):
        store = InMemoryWeightsStore()
        with pytest.raises(ValidationError):
            asyncio.run(store.save(_payload(iso14001="high")))
        assert published == []


class _FakeProducer:
    def __init__(self):
        self.sent = []

    async def send_and_wait(self, topic, value, key=None):
        self.sent.append((topic, json.loads(value), key))


class TestEventPublisher:

    def test_weights_updated_event(self, monkeypatch):
        producer = _FakeProducer()
        settings = Settings(kafka_enabled=True)
        monkeypatch.setattr(event_publisher, "get_settings", lambda: settings)

        async def _producer():
            return producer

        monkeypatch.setattr(event_publisher, "_get_producer", _producer)
        weights = parse_weights(_payload())

        asyncio.run(event_publisher.publish_weights_event(weights))

        assert len(producer.sent) == 1
        topic, event, key = producer.sent[0]
        assert topic == settings.kafka_topic_weight_events
        assert key == settings.global_settings_id.encode("utf-8")
        assert event["event_type"] == "WEIGHTS_UPDATED"
        assert event["weights"] == weights.model_dump(by_alias=True)
        assert event["total"] == 100

    def test_disabled_sends_nothing(self, monkeypatch):
        producer = _FakeProducer()
        monkeypatch.setattr(event_publisher, "get_settings", lambda: Settings(kafka_enabled=False))

        async def _producer():
            return producer

        monkeypatch.setattr(event_publisher, "_get_producer", _producer)
        asyncio.run(event_publisher.publish_weights_event(DEFAULT_WEIGHTS))
        assert producer.sent == []
