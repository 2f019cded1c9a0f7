"""Row to output-object projections for the UI definition document.

All functions here are pure: they take row snapshots (ORM instances or any
object exposing the same attributes) and return schema objects. Optional
source fields that are missing are left unset on the output model, so they
disappear from the dumped JSON instead of showing up as ``null``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from app.core.config import settings
from app.schemas.ui_data import OptionEntryOut, OptionGroupOut, UiChangeOut, UiElementOut


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def normalize_initial_value(raw: Any, tokens: Mapping[str, bool] | None = None) -> bool | str | None:
    """Map a stored truth token to a boolean, pass any other value through.

    Returns ``None`` when the stored value is absent, which callers treat as
    "omit the key".
    """
    if not _present(raw):
        return None
    table = settings.initial_value_tokens if tokens is None else tokens
    text = str(raw)
    if text in table:
        return table[text]
    return text


def project_element(row: Any, *, tokens: Mapping[str, bool] | None = None) -> UiElementOut:
    fields: dict[str, Any] = {
        "element_id": row.element_id,
        "seq_id": row.seq_id,
        "element_type": row.element_type,
    }
    if _present(row.label):
        fields["label"] = row.label
    if row.parent_id is not None:
        fields["parent_id"] = row.parent_id
    if _present(row.parent_label):
        fields["parent_label"] = row.parent_label
    initial_value = normalize_initial_value(row.initial_value, tokens)
    if initial_value is not None:
        fields["initial_value"] = initial_value
    if _present(row.options_key):
        fields["options_key"] = row.options_key
    if row.properties is not None:
        fields["properties"] = row.properties
    if _present(row.trigger_event):
        fields["trigger_event"] = row.trigger_event
    if _present(row.product):
        fields["product"] = row.product
    return UiElementOut(**fields)


def _project_option_entry(row: Any) -> OptionEntryOut:
    fields: dict[str, Any] = {"value": row.value, "label": row.label}
    if _present(row.product):
        fields["product"] = row.product
    if _present(row.parent_value):
        fields["parent_value"] = row.parent_value
    return OptionEntryOut(**fields)


def aggregate_options(rows: Iterable[Any]) -> list[OptionGroupOut]:
    # dict preserves insertion order, so keys come out in first-seen order
    groups: dict[str, list[OptionEntryOut]] = {}
    for row in rows:
        entries = groups.get(row.option_key)
        if entries is None:
            entries = []
            groups[row.option_key] = entries
        entries.append(_project_option_entry(row))
    return [OptionGroupOut(key=key, options=entries) for key, entries in groups.items()]


def project_change_rule(row: Any) -> UiChangeOut:
    return UiChangeOut(
        change_id=row.change_id,
        element_id=row.element_id,
        parent_value=row.parent_value,
        action_id=row.action_id,
        action_type=row.action_type,
    )
