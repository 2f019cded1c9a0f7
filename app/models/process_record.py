from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Numeric, String, Table, Text
from sqlalchemy.types import TypeEngine

from app.db.session import Base


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    type_: TypeEngine
    nullable: bool = True
    primary_key: bool = False


def _s(name: str, length: int = 200, **kw) -> ColumnSpec:
    return ColumnSpec(name, String(length), **kw)


def _n(name: str, precision: int = 14, scale: int = 2) -> ColumnSpec:
    return ColumnSpec(name, Numeric(precision, scale, asdecimal=False))


# Order is significant: the table, the INSERT column list and the positional
# value list are all produced from this tuple.
PROCESS_RECORD_COLUMNS: tuple[ColumnSpec, ...] = (
    # identity
    _s("uid", 64, nullable=False, primary_key=True),
    _s("qo_no", 40, nullable=False),
    _s("product", 80),
    _s("status", 30),
    ColumnSpec("version_no", Integer()),
    # customer
    _s("customer_id", 40),
    _s("customer_name"),
    _s("customer_tax_id", 20),
    _s("contact_name", 120),
    _s("contact_phone", 40),
    _s("contact_mobile", 40),
    _s("contact_email"),
    _s("billing_address", 400),
    _s("billing_city", 80),
    _s("billing_district", 80),
    _s("billing_zip", 20),
    _s("shipping_address", 400),
    _s("shipping_city", 80),
    _s("shipping_district", 80),
    _s("shipping_zip", 20),
    _s("country_code", 2),
    # sales
    _s("sales_rep_id", 40),
    _s("sales_rep_name", 120),
    _s("sales_dept", 80),
    _s("channel", 40),
    _s("region", 40),
    _s("branch_code", 20),
    # schedule
    ColumnSpec("quote_date", Date()),
    ColumnSpec("valid_until", Date()),
    ColumnSpec("order_date", Date()),
    ColumnSpec("requested_ship_date", Date()),
    ColumnSpec("promised_ship_date", Date()),
    ColumnSpec("actual_ship_date", Date()),
    ColumnSpec("invoice_date", Date()),
    ColumnSpec("due_date", Date()),
    ColumnSpec("closed_date", Date()),
    # item
    _s("item_code", 60),
    _s("item_name"),
    _s("item_spec", 400),
    _s("item_category", 80),
    _s("item_color", 40),
    _s("item_size", 40),
    _s("material", 80),
    _s("unit", 20),
    _n("quantity", 14, 3),
    _n("unit_price", 14, 4),
    _n("discount_rate", 6, 4),
    _n("discount_amount"),
    _n("subtotal"),
    _n("tax_rate", 6, 4),
    _n("tax_amount"),
    _n("shipping_fee"),
    _n("handling_fee"),
    _n("total_amount"),
    _s("currency", 3),
    _n("exchange_rate", 12, 6),
    # payment
    _s("payment_terms", 80),
    _s("payment_method", 40),
    _n("deposit_amount"),
    ColumnSpec("deposit_paid", Boolean()),
    _n("balance_amount"),
    _s("invoice_no", 40),
    _s("invoice_title"),
    # production
    _s("process_stage", 40),
    ColumnSpec("process_note", Text()),
    _s("workshop_code", 20),
    _s("machine_code", 20),
    _s("operator_id", 40),
    ColumnSpec("planned_start", DateTime(timezone=True)),
    ColumnSpec("planned_end", DateTime(timezone=True)),
    ColumnSpec("actual_start", DateTime(timezone=True)),
    ColumnSpec("actual_end", DateTime(timezone=True)),
    _n("yield_qty", 14, 3),
    _n("scrap_qty", 14, 3),
    _s("qc_result", 20),
    _s("qc_inspector", 120),
    # logistics
    _s("carrier", 80),
    _s("tracking_no", 80),
    ColumnSpec("package_count", Integer()),
    _n("gross_weight", 12, 3),
    _n("net_weight", 12, 3),
    # audit
    _s("priority", 20),
    ColumnSpec("remarks", Text()),
    _s("created_by", 120),
    ColumnSpec("created_at", DateTime(timezone=True)),
    _s("updated_by", 120),
)

PROCESS_RECORD_COLUMN_NAMES: tuple[str, ...] = tuple(spec.name for spec in PROCESS_RECORD_COLUMNS)

process_records = Table(
    "process_records",
    Base.metadata,
    *[
        Column(spec.name, spec.type_, nullable=spec.nullable, primary_key=spec.primary_key)
        for spec in PROCESS_RECORD_COLUMNS
    ],
)
