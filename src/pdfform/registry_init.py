# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/registry_init.py

"""Import operation modules so that their registrations run"""

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)


def _discover_modules(packages, label):
    loaded = []
    for pkg in packages:
        if not hasattr(pkg, "__path__"):
            logger.warning("Skipping discovery for %s (no __path__)", pkg.__name__)
            continue
        for _, module_name, _ in pkgutil.iter_modules(pkg.__path__):
            full_name = f"{pkg.__name__}.{module_name}"
            importlib.import_module(full_name)
            loaded.append(full_name)
    logger.debug("Loaded %s modules: %s", label, ", ".join(loaded))
    return loaded


def initialize_registry():
    if getattr(initialize_registry, "initialized", False):
        return

    import pdfform.operations

    _discover_modules([pdfform.operations], "operation")
    initialize_registry.initialized = True
