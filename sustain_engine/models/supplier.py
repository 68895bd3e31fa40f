"""
Persistent tables owned by the procurement app.
Schema: sustainability.suppliers, sustainability.app_settings

Scores and risk levels are NOT stored; they are derived on every read.
"""
import uuid

from sqlalchemy import Boolean, Column, Float, Integer, JSON, String, Text
from sqlalchemy.orm import DeclarativeBase

SCHEMA = "sustainability"


class Base(DeclarativeBase):
    pass


class SupplierRecord(Base):
    __tablename__ = "suppliers"
    __table_args__ = {"schema": SCHEMA}

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    product_category = Column(Text, nullable=False, default="General")
    location = Column(Text, nullable=False, default="Unknown")
    employee_count = Column(Integer, nullable=False, default=0)

    # ── Environmental metrics ──
    carbon_footprint = Column(Float, nullable=False)
    water_usage = Column(Float, nullable=False)
    waste_generation = Column(Float, nullable=False, default=0)
    waste_reduction = Column(Float, nullable=False, default=0)
    energy_efficiency = Column(Float, nullable=False, default=0)

    # ── Social / operational metrics ──
    labor_practices = Column(Float, nullable=False, default=0)
    transport_cost_per_unit = Column(Float, nullable=False, default=0)
    on_time_delivery = Column(Float, nullable=False, default=0)
    regulatory_flags = Column(Integer, nullable=False, default=0)
    lead_time_days = Column(Integer, nullable=False, default=0)

    # ── Policies / certifications ──
    iso14001 = Column(Boolean, nullable=False, default=False)
    recycling_policy = Column(Boolean, nullable=False, default=False)
    water_policy = Column(Boolean, nullable=False, default=False)
    sustainability_report = Column(Boolean, nullable=False, default=False)

    historical_carbon = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return f"<SupplierRecord {self.id} {self.name!r}>"


class AppSettingsRecord(Base):
    """Singleton row (id = settings.global_settings_id) holding the active weights."""
    __tablename__ = "app_settings"
    __table_args__ = {"schema": SCHEMA}

    id = Column(String(50), primary_key=True)
    carbon_footprint = Column(Float, nullable=False)
    water_usage = Column(Float, nullable=False)
    waste_reduction = Column(Float, nullable=False)
    energy_efficiency = Column(Float, nullable=False)
    iso14001 = Column(Float, nullable=False)
    recycling_policy = Column(Float, nullable=False)
    water_policy = Column(Float, nullable=False)
    sustainability_report = Column(Float, nullable=False)
