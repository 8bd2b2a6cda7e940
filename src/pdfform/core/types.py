# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/core/types.py

"""Types describing form fields and their state"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class FieldType(Enum):
    """The possible types of fillable form fields in a PDF"""

    BUTTON = "Button"
    RADIO = "Radio"
    CHECKBOX = "CheckBox"
    LISTBOX = "ListBox"
    COMBOBOX = "ComboBox"
    TEXT = "Text"
    UNKNOWN = "Unknown"

    def __str__(self):
        return self.value


# --- Field states ---
#
# One dataclass per FieldType. Each class carries its tag in `field_type`, so
# `state.field_type` can be matched on without isinstance checks.


@dataclass
class ButtonState:
    """Push buttons have no state"""

    field_type: ClassVar[FieldType] = FieldType.BUTTON


@dataclass
class RadioState:
    """`selected` is the singular option from `options` that is selected"""

    field_type: ClassVar[FieldType] = FieldType.RADIO

    selected: str
    options: list[str]
    readonly: bool = False
    required: bool = False


@dataclass
class CheckBoxState:
    """The toggle state of the checkbox"""

    field_type: ClassVar[FieldType] = FieldType.CHECKBOX

    is_checked: bool
    readonly: bool = False
    required: bool = False


@dataclass
class ListBoxState:
    """`selected` is the list of selected options from `options`"""

    field_type: ClassVar[FieldType] = FieldType.LISTBOX

    selected: list[str]
    options: list[str]
    multiselect: bool = False
    readonly: bool = False
    required: bool = False


@dataclass
class ComboBoxState:
    """`selected` is the list of selected options from `options`"""

    field_type: ClassVar[FieldType] = FieldType.COMBOBOX

    selected: list[str]
    options: list[str]
    editable: bool = False
    readonly: bool = False
    required: bool = False


@dataclass
class TextState:
    """User text input"""

    field_type: ClassVar[FieldType] = FieldType.TEXT

    text: str
    readonly: bool = False
    required: bool = False


@dataclass
class UnknownState:
    """Unknown fields have no state"""

    field_type: ClassVar[FieldType] = FieldType.UNKNOWN


FieldState = (
    ButtonState | RadioState | CheckBoxState | ListBoxState | ComboBoxState | TextState | UnknownState
)


# --- Operation results ---


@dataclass
class OpResult:
    """The outcome of a registered operation."""

    success: bool = True
    data: Any = None
    pdf: Any = None
    summary: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
    is_discardable: bool = False
