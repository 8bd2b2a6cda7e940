# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""pdfform - inspect and fill the interactive form fields of PDF documents."""

from pdfform._version import __version__
from pdfform.core.flags import ButtonFlags, ChoiceFlags, FieldFlags
from pdfform.core.types import (
    ButtonState,
    CheckBoxState,
    ComboBoxState,
    FieldState,
    FieldType,
    ListBoxState,
    RadioState,
    TextState,
    UnknownState,
)
from pdfform.exceptions import (
    FieldValueError,
    FormStructureError,
    InvalidSelectionError,
    LoadError,
    NoSuchReferenceError,
    NotAReferenceError,
    PdfFormError,
    ReadonlyFieldError,
    TooManySelectedError,
    TypeMismatchError,
)
from pdfform.form import Form

__all__ = [
    "Form",
    "FieldType",
    "FieldState",
    "ButtonState",
    "RadioState",
    "CheckBoxState",
    "ListBoxState",
    "ComboBoxState",
    "TextState",
    "UnknownState",
    "FieldFlags",
    "ButtonFlags",
    "ChoiceFlags",
    "PdfFormError",
    "LoadError",
    "FormStructureError",
    "NoSuchReferenceError",
    "NotAReferenceError",
    "FieldValueError",
    "TypeMismatchError",
    "InvalidSelectionError",
    "TooManySelectedError",
    "ReadonlyFieldError",
    "__version__",
]
