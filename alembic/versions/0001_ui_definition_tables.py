"""ui definition tables
Revision ID: 0001_ui_definition_tables
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_ui_definition_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "ui_elements",
        sa.Column("element_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("seq_id", sa.Integer(), nullable=False),
        sa.Column("element_type", sa.String(length=50), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=True),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("parent_label", sa.String(length=200), nullable=True),
        sa.Column("initial_value", sa.String(length=200), nullable=True),
        sa.Column("options_key", sa.String(length=80), nullable=True),
        sa.Column("properties", sa.JSON(), nullable=True),
        sa.Column("trigger_event", sa.String(length=50), nullable=True),
        sa.Column("product", sa.String(length=80), nullable=True),
    )
    op.create_index("ix_ui_elements_product_seq", "ui_elements", ["product", "seq_id"])

    op.create_table(
        "options_data",
        sa.Column("option_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("option_key", sa.String(length=80), nullable=False),
        sa.Column("value", sa.String(length=200), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=False),
        sa.Column("parent_value", sa.String(length=200), nullable=True),
        sa.Column("product", sa.String(length=80), nullable=True),
    )
    op.create_index("ix_options_data_option_key", "options_data", ["option_key"])

    op.create_table(
        "ui_changed",
        sa.Column("change_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("element_id", sa.Integer(), nullable=False),
        sa.Column("parent_value", sa.String(length=200), nullable=True),
        sa.Column("action_id", sa.Integer(), nullable=False),
        sa.Column("action_type", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_ui_changed_element_id", "ui_changed", ["element_id"])

def downgrade():
    op.drop_index("ix_ui_changed_element_id", table_name="ui_changed")
    op.drop_table("ui_changed")
    op.drop_index("ix_options_data_option_key", table_name="options_data")
    op.drop_table("options_data")
    op.drop_index("ix_ui_elements_product_seq", table_name="ui_elements")
    op.drop_table("ui_elements")
