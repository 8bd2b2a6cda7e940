# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/form.py

"""A PDF form that contains fillable fields"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Iterable

if TYPE_CHECKING:
    import pikepdf

from pdfform.core.types import FieldState, FieldType
from pdfform.fields import mutate
from pdfform.fields.classify import classify
from pdfform.fields.discover import discover_fields
from pdfform.fields.state import read_state

logger = logging.getLogger(__name__)


class Form:
    """A PDF with a fillable form, whose fields are addressed by index.

    Use `Form.load` to open an existing PDF. The fields are located once, when
    the form is created; afterwards their number and order never change. Field
    types and states are always read from the live document, never cached.

    The form owns its `pikepdf.Pdf`. Use it as a context manager, or call
    `close()`, to release the underlying file.
    """

    enforce_readonly: bool
    """If True, the setters raise ReadonlyFieldError for fields flagged read-only.
    By default read-only fields can be written like any other.
    """
    regenerate_appearances: bool
    """If True, text fields get their appearance stream rebuilt by `set_text`."""
    _pdf: pikepdf.Pdf
    _form_ids: tuple[tuple[int, int], ...]

    def __init__(
        self,
        pdf: pikepdf.Pdf,
        *,
        enforce_readonly: bool = False,
        regenerate_appearances: bool = True,
    ):
        """Analyze an open PDF and identify all of the fields its form has."""
        self._pdf = pdf
        self._form_ids = tuple(discover_fields(pdf))
        self.enforce_readonly = enforce_readonly
        self.regenerate_appearances = regenerate_appearances
        logger.debug("Loaded form with %d fields", len(self._form_ids))

    @classmethod
    def load(
        cls,
        source: str | Path | BinaryIO,
        *,
        password: str | None = None,
        **options,
    ) -> Form:
        """Open a PDF from a path or a binary stream and analyze its form."""
        import pikepdf

        pdf = pikepdf.open(source, password=password) if password else pikepdf.open(source)
        try:
            return cls(pdf, **options)
        except Exception:
            pdf.close()
            raise

    # --- Lifetime ---

    def save(self, target: str | Path | BinaryIO, **kwargs) -> None:
        """Save the form to a path or writable binary stream."""
        self._pdf.save(target, **kwargs)

    def close(self) -> None:
        self._pdf.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def pdf(self) -> pikepdf.Pdf:
        """The underlying document, e.g. to pass to other pikepdf-based tools."""
        return self._pdf

    # --- Queries ---

    def field_count(self) -> int:
        """Returns the number of fields the form has"""
        return len(self._form_ids)

    def __len__(self) -> int:
        return self.field_count()

    def is_empty(self) -> bool:
        return self.field_count() == 0

    def _field(self, n: int):
        if not 0 <= n < len(self._form_ids):
            raise IndexError(f"Field index {n} out of range (form has {len(self._form_ids)} fields)")
        return self._pdf.get_object(self._form_ids[n])

    def type_of(self, n: int) -> FieldType:
        """Gets the type of the field at index `n`"""
        return classify(self._field(n))

    def name_of(self, n: int) -> str | None:
        """Gets the partial name (/T) of the field at index `n`, if it has one"""
        name = self._field(n).get("/T")
        return str(name) if name is not None else None

    def state_of(self, n: int) -> FieldState:
        """Gets the current state of the field at index `n`"""
        field = self._field(n)
        return read_state(field, classify(field))

    def all_types(self) -> list[FieldType]:
        return [self.type_of(i) for i in range(self.field_count())]

    def all_names(self) -> list[str | None]:
        return [self.name_of(i) for i in range(self.field_count())]

    def index_of(self, name: str) -> int:
        """The index of the first field named `name`."""
        for i in range(self.field_count()):
            if self.name_of(i) == name:
                return i
        raise KeyError(name)

    # --- Edits ---

    def set_text(self, n: int, text: str) -> None:
        """Fills in the text field at index `n` with `text`.

        Raises TypeMismatchError if it is not a text field.
        """
        mutate.set_text(
            self._pdf,
            self._field(n),
            text,
            enforce_readonly=self.enforce_readonly,
            regenerate_appearances=self.regenerate_appearances,
        )

    def set_checkbox(self, n: int, is_checked: bool) -> None:
        """Toggles the checkbox at index `n`.

        Raises TypeMismatchError if it is not a checkbox.
        """
        mutate.set_checkbox(self._field(n), is_checked, enforce_readonly=self.enforce_readonly)

    def set_radio(self, n: int, choice: str) -> None:
        """Selects `choice` in the radio group at index `n`.

        Raises TypeMismatchError if it is not a radio group, and
        InvalidSelectionError if `choice` is not one of its options.
        """
        mutate.set_radio(self._field(n), choice, enforce_readonly=self.enforce_readonly)

    def set_list_selection(self, n: int, choices: Iterable[str]) -> None:
        """Selects `choices` in the list box at index `n`.

        Raises TypeMismatchError if it is not a list box, InvalidSelectionError
        if a choice is not an option, and TooManySelectedError if several
        choices are given to a single-select list box.
        """
        mutate.set_list_selection(self._field(n), choices, enforce_readonly=self.enforce_readonly)

    def set_combo_selection(self, n: int, choice: str) -> None:
        """Selects `choice` in the combo box at index `n`.

        Raises TypeMismatchError if it is not a combo box, and
        InvalidSelectionError if `choice` is not an option of a non-editable
        combo box.
        """
        mutate.set_combo_selection(self._field(n), choice, enforce_readonly=self.enforce_readonly)
