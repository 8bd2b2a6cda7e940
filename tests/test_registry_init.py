import logging
import types

import pytest

import pdfform.registry_init as reg_init
from pdfform.core.registry import registry


@pytest.fixture(autouse=True)
def reset_init_flag():
    """Ensure initialize_registry.initialized flag is reset before each test."""
    if hasattr(reg_init.initialize_registry, "initialized"):
        delattr(reg_init.initialize_registry, "initialized")
    yield
    if hasattr(reg_init.initialize_registry, "initialized"):
        delattr(reg_init.initialize_registry, "initialized")


def make_fake_package(name):
    mod = types.ModuleType(name)
    mod.__path__ = [f"/fake/{name.replace('.', '/')}"]
    return mod


def test_discover_modules_imports_all(monkeypatch):
    fake_operations = make_fake_package("fake.operations")

    def fake_iter_modules(path):
        for sub in ["mod_a", "mod_b"]:
            yield (None, sub, False)

    monkeypatch.setattr(reg_init.pkgutil, "iter_modules", fake_iter_modules)

    imported = []
    monkeypatch.setattr(reg_init.importlib, "import_module", imported.append)

    result = reg_init._discover_modules([fake_operations], "operation")

    assert imported == ["fake.operations.mod_a", "fake.operations.mod_b"]
    assert result == imported


def test_discover_modules_skips_non_packages(caplog):
    plain = types.ModuleType("fake.plain")
    with caplog.at_level(logging.WARNING):
        result = reg_init._discover_modules([plain], "operation")
    assert result == []
    assert "Skipping discovery for fake.plain" in caplog.text


def test_initialize_registry_registers_operations():
    reg_init.initialize_registry()
    assert reg_init.initialize_registry.initialized is True
    for name in ("dump_fields", "dump_fields_json", "fill_fields"):
        assert name in registry.operations


def test_initialize_registry_is_idempotent(monkeypatch):
    reg_init.initialize_registry()

    calls = []
    monkeypatch.setattr(reg_init, "_discover_modules", lambda *a: calls.append(a))
    reg_init.initialize_registry()
    assert calls == []
