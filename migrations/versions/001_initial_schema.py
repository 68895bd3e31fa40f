"""
001 — Initial schema: suppliers + app_settings

Revision ID: 001
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSON

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

SCHEMA = "sustainability"


def upgrade() -> None:
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    op.create_table(
        "suppliers",
        sa.Column("id", sa.String(36), primary_key=True, server_default=sa.text("gen_random_uuid()::text")),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("product_category", sa.Text, nullable=False, server_default="General"),
        sa.Column("location", sa.Text, nullable=False, server_default="Unknown"),
        sa.Column("employee_count", sa.Integer, nullable=False, server_default="0"),

        sa.Column("carbon_footprint", sa.Float, nullable=False),
        sa.Column("water_usage", sa.Float, nullable=False),
        sa.Column("waste_generation", sa.Float, nullable=False, server_default="0"),
        sa.Column("waste_reduction", sa.Float, nullable=False, server_default="0"),
        sa.Column("energy_efficiency", sa.Float, nullable=False, server_default="0"),

        sa.Column("labor_practices", sa.Float, nullable=False, server_default="0"),
        sa.Column("transport_cost_per_unit", sa.Float, nullable=False, server_default="0"),
        sa.Column("on_time_delivery", sa.Float, nullable=False, server_default="0"),
        sa.Column("regulatory_flags", sa.Integer, nullable=False, server_default="0"),
        sa.Column("lead_time_days", sa.Integer, nullable=False, server_default="0"),

        sa.Column("iso14001", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("recycling_policy", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("water_policy", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("sustainability_report", sa.Boolean, nullable=False, server_default=sa.false()),

        sa.Column("historical_carbon", JSON, nullable=False, server_default="[]"),

        sa.CheckConstraint("carbon_footprint >= 0", name="ck_suppliers_carbon_non_negative"),
        sa.CheckConstraint("water_usage >= 0", name="ck_suppliers_water_non_negative"),
        schema=SCHEMA,
    )
    op.create_index("ix_suppliers_name", "suppliers", ["name"], schema=SCHEMA)

    op.create_table(
        "app_settings",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("carbon_footprint", sa.Float, nullable=False),
        sa.Column("water_usage", sa.Float, nullable=False),
        sa.Column("waste_reduction", sa.Float, nullable=False),
        sa.Column("energy_efficiency", sa.Float, nullable=False),
        sa.Column("iso14001", sa.Float, nullable=False),
        sa.Column("recycling_policy", sa.Float, nullable=False),
        sa.Column("water_policy", sa.Float, nullable=False),
        sa.Column("sustainability_report", sa.Float, nullable=False),
        schema=SCHEMA,
    )


def downgrade() -> None:
    op.drop_table("app_settings", schema=SCHEMA)
    op.drop_table("suppliers", schema=SCHEMA)
