from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional, Union


class _CamelModel(BaseModel):
    # Output keys are camelCase; unset optional fields are omitted on dump.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class UiElementOut(_CamelModel):
    element_id: int
    seq_id: int
    element_type: str
    label: Optional[str] = None
    parent_id: Optional[int] = None
    parent_label: Optional[str] = None
    initial_value: Optional[Union[bool, str]] = None
    options_key: Optional[str] = None
    properties: Optional[Any] = None
    trigger_event: Optional[str] = None
    product: Optional[str] = None


class OptionEntryOut(_CamelModel):
    value: str
    label: str
    product: Optional[str] = None
    parent_value: Optional[str] = None


class OptionGroupOut(_CamelModel):
    key: str
    options: List[OptionEntryOut]


class UiChangeOut(_CamelModel):
    change_id: int
    element_id: int
    parent_value: Optional[str]
    action_id: int
    action_type: str


class UiDataDocument(_CamelModel):
    ui_data_table: List[UiElementOut]
    options_data_table: List[OptionGroupOut]
    ui_changed_table: List[UiChangeOut]


class ErrorOut(BaseModel):
    error: str
