"""
002 — Seed the global weight configuration

Inserts the default distribution under the singleton key 'global'.
Re-running leaves an admin-saved configuration untouched.

Revision ID: 002
Create Date: 2026-10-18
"""
from alembic import op
from sqlalchemy import text as sa_text

revision = "002"
down_revision = "001"
branch_labels = None
depends_on = None

SCHEMA = "sustainability"

DEFAULT_WEIGHTS = {
    "carbon_footprint": 25,
    "water_usage": 17,
    "waste_reduction": 10,
    "energy_efficiency": 10,
    "iso14001": 15,
    "recycling_policy": 8,
    "water_policy": 6,
    "sustainability_report": 9,
}


def upgrade() -> None:
    columns = ", ".join(DEFAULT_WEIGHTS)
    params = ", ".join(f":{k}" for k in DEFAULT_WEIGHTS)
    op.get_bind().execute(
        sa_text(f"""
        INSERT INTO {SCHEMA}.app_settings (id, {columns})
        VALUES ('global', {params})
        ON CONFLICT (id) DO NOTHING
        """),
        DEFAULT_WEIGHTS,
    )


def downgrade() -> None:
    op.execute(f"DELETE FROM {SCHEMA}.app_settings WHERE id = 'global'")
