"""process records
Revision ID: 0002_process_records
Revises: 0001_ui_definition_tables
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

from app.models.process_record import PROCESS_RECORD_COLUMNS

revision = "0002_process_records"
down_revision = "0001_ui_definition_tables"
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "process_records",
        *[
            sa.Column(spec.name, spec.type_, nullable=spec.nullable, primary_key=spec.primary_key)
            for spec in PROCESS_RECORD_COLUMNS
        ],
    )

def downgrade():
    op.drop_table("process_records")
