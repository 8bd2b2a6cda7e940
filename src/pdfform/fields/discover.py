# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/fields/discover.py

"""Locate the terminal fields of an interactive form"""

import logging
from collections import deque

import pikepdf

from pdfform.exceptions import FormStructureError, NoSuchReferenceError, NotAReferenceError

logger = logging.getLogger(__name__)


def get_acroform_fields(pdf):
    """Return the /Root /AcroForm /Fields array, raising if it is absent or malformed."""
    root = pdf.Root
    if not isinstance(root, pikepdf.Dictionary):
        raise FormStructureError("Document catalog (/Root) is not a dictionary")

    acroform = root.get("/AcroForm")
    if acroform is None:
        raise FormStructureError("Document has no interactive form (/AcroForm)")
    if not isinstance(acroform, pikepdf.Dictionary):
        raise FormStructureError("/AcroForm is not a dictionary")

    fields = acroform.get("/Fields")
    if fields is None:
        raise FormStructureError("/AcroForm has no /Fields array")
    if not isinstance(fields, pikepdf.Array):
        raise FormStructureError("/AcroForm /Fields is not an array")
    return fields


def _resolve_entry(entry):
    """Check that an array entry is an indirect reference to a live object."""
    if entry is None:
        # pikepdf resolves dangling references to null
        raise NoSuchReferenceError()
    if not isinstance(entry, pikepdf.Object) or not entry.is_indirect:
        raise NotAReferenceError(entry)
    return entry


def discover_fields(pdf) -> list[tuple[int, int]]:
    """
    Walks the field hierarchy breadth-first and returns the object ids of all
    fields that take input (those carrying /FT), in traversal order.

    A node with /FT is recorded, and its /Kids (if any) are still followed, so
    mixed field/widget hierarchies are handled.
    """
    queue = deque(get_acroform_fields(pdf))
    form_ids = []
    seen = set()

    while queue:
        obj = _resolve_entry(queue.popleft())

        # Guard against /Kids cycles in broken files
        if obj.objgen in seen:
            continue
        seen.add(obj.objgen)

        if not isinstance(obj, pikepdf.Dictionary):
            logger.debug("Skipping non-dictionary field node %s", obj.objgen)
            continue

        # If the field has FT, it actually takes input
        if "/FT" in obj:
            form_ids.append(obj.objgen)

        # Kids might have FT too
        kids = obj.get("/Kids")
        if isinstance(kids, pikepdf.Array):
            queue.extend(kids)

    logger.debug("[FORMS] Discovered %d input fields", len(form_ids))
    return form_ids
