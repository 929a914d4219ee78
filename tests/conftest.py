"""Shared fixtures for the shapemock tests."""

import pytest

from shapemock import Mocked, ShapeMeta, ShapeMockConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at an empty temporary directory for every test."""
    monkeypatch.delenv("SHAPEMOCK_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    reset_config()
    set_config(ShapeMockConfig())
    yield
    reset_config()


@pytest.fixture
def shape():
    """A fresh instance class and constructor class pair."""

    class Calculator(metaclass=ShapeMeta):
        version = "1.0"

        def __init__(self):
            self.memory = 0

        def add(self, a, b):
            return a + b

        @property
        def total(self):
            return self.memory

        @staticmethod
        def create():
            return Calculator()

    return Calculator


@pytest.fixture
def mocked(shape):
    instance = shape.__new__(shape)
    return Mocked(instance=instance, constructor=shape)
