from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, Mapping

from app.core.config import settings
from app.schemas.ui_data import UiDataDocument
from app.services.row_source import RowSource
from app.services.ui_projection import aggregate_options, project_change_rule, project_element


class UiDataFetchError(Exception):
    def __init__(self, failures: Mapping[str, BaseException]):
        self.failures = dict(failures)
        tables = ", ".join(sorted(self.failures))
        super().__init__(f"Failed to read UI definition tables: {tables}")


async def _fetch(table: str, fn: Callable[..., Any], *args: Any, timeout: float | None) -> Any:
    loop = asyncio.get_running_loop()
    future = loop.run_in_executor(None, functools.partial(fn, *args))
    if timeout is None or timeout <= 0:
        return await future
    try:
        return await asyncio.wait_for(future, timeout)
    except asyncio.TimeoutError as exc:
        raise TimeoutError(f"{table} fetch exceeded {timeout:.2f}s") from exc


async def assemble_ui_document(
    source: RowSource,
    product: str,
    *,
    timeout: float | None = None,
    tokens: Mapping[str, bool] | None = None,
) -> UiDataDocument:
    """Fetch elements, options and change rules concurrently and project them.

    All three fetches are awaited before anything is projected. If any of them
    fails, the completed results are dropped and a single UiDataFetchError is
    raised.
    """
    limit = settings.UI_DATA_FETCH_TIMEOUT_SECONDS if timeout is None else timeout
    tables = ("ui_elements", "options_data", "ui_changed")
    results = await asyncio.gather(
        _fetch("ui_elements", source.fetch_elements, product, timeout=limit),
        _fetch("options_data", source.fetch_options, timeout=limit),
        _fetch("ui_changed", source.fetch_change_rules, timeout=limit),
        return_exceptions=True,
    )
    failures = {table: result for table, result in zip(tables, results) if isinstance(result, BaseException)}
    if failures:
        raise UiDataFetchError(failures) from next(iter(failures.values()))

    element_rows, option_rows, change_rows = results
    return UiDataDocument(
        ui_data_table=[project_element(row, tokens=tokens) for row in element_rows],
        options_data_table=aggregate_options(option_rows),
        ui_changed_table=[project_change_rule(row) for row in change_rows],
    )


def render_ui_document(document: UiDataDocument) -> dict[str, Any]:
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)
