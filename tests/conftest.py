# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import Mock

import pytest

from hooksys.core.config import HooksConfig
from hooksys.plugins.state import SlotStateHolder, make_state_system
from hooksys.runtime.context import InstanceContext


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class Component:
    """A plain instance type that records what the hooks did to it."""

    def __init__(self, name: str = "component") -> None:
        self.name = name
        self.calls = []

    def __repr__(self) -> str:
        return f"Component({self.name!r})"


@pytest.fixture
def component():
    return Component()


@pytest.fixture
def other_component():
    return Component("other")


@pytest.fixture
def echo_factories():
    """Factories whose hooks report the instance and arguments they saw."""

    def use_instance(instance):
        return lambda: instance

    def use_echo(instance):
        def echo(*args, **kwargs):
            instance.calls.append((args, kwargs))
            return instance, args, kwargs

        return echo

    return {"use_instance": use_instance, "use_echo": use_echo}


@pytest.fixture
def lifecycle():
    """Parent mock; its prepare/release/callback children share one call log."""
    return Mock()


@pytest.fixture
def context():
    return InstanceContext(HooksConfig())


@pytest.fixture
def holder():
    return SlotStateHolder()


@pytest.fixture
def state_system():
    return make_state_system()
