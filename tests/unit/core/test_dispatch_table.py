# tests/unit/core/test_dispatch_table.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from collections.abc import Mapping
from unittest.mock import Mock

import pytest

from hooksys.core.config import HooksConfig
from hooksys.core.dispatch import BoundHook, HookDispatchTable
from hooksys.core.errors import HookDefinitionError, NoActiveInstanceError
from hooksys.runtime.context import InstanceContext


def test_keys_match_factory_names(context, echo_factories):
    table = HookDispatchTable(echo_factories, context)
    assert isinstance(table, Mapping)
    assert set(table) == {"use_instance", "use_echo"}
    assert list(table) == list(echo_factories)
    assert len(table) == 2
    assert all(isinstance(hook, BoundHook) for hook in table.values())


def test_attribute_and_item_access_agree(context, echo_factories):
    table = HookDispatchTable(echo_factories, context)
    assert table.use_echo is table["use_echo"]
    assert "use_echo" in dir(table)


def test_unknown_hook(context, echo_factories):
    table = HookDispatchTable(echo_factories, context)
    with pytest.raises(AttributeError, match="use_missing"):
        table.use_missing
    with pytest.raises(KeyError):
        table["use_missing"]


def test_table_is_read_only(context, echo_factories):
    table = HookDispatchTable(echo_factories, context)
    with pytest.raises(AttributeError):
        table.use_echo = lambda: None
    with pytest.raises(TypeError):
        table["use_echo"] = lambda: None
    with pytest.raises(AttributeError):
        del table.use_echo


def test_hook_named_like_mapping_method_is_reachable_by_item(context, component):
    table = HookDispatchTable({"get": lambda instance: lambda: instance}, context)
    with context.activate(component):
        assert table["get"]() is component
    # Attribute access keeps the Mapping method.
    assert table.get("get") is table["get"]


def test_call_without_active_instance(context, echo_factories):
    table = HookDispatchTable(echo_factories, context)
    with pytest.raises(NoActiveInstanceError) as exc_info:
        table.use_echo(1)
    assert exc_info.value.hook_name == "use_echo"


def test_call_uses_configured_message(echo_factories):
    context = InstanceContext(HooksConfig(hook_used_outside_of_with_instance_error_message="custom"))
    table = HookDispatchTable(echo_factories, context)
    with pytest.raises(NoActiveInstanceError, match="^custom$"):
        table.use_instance()


def test_call_forwards_arguments_and_result(context, echo_factories, component):
    table = HookDispatchTable(echo_factories, context)
    with context.activate(component):
        result = table.use_echo(1, 2, key="value")
    assert result == (component, (1, 2), {"key": "value"})
    assert component.calls == [((1, 2), {"key": "value"})]


def test_factory_resolved_on_every_call(context, component):
    factory = Mock(side_effect=lambda instance: lambda: len(factory.call_args_list))
    table = HookDispatchTable({"use_count": factory}, context)
    with context.activate(component):
        assert table.use_count() == 1
        assert table.use_count() == 2
    factory.assert_called_with(component)
    assert factory.call_count == 2


def test_factory_not_called_at_construction(context):
    factory = Mock()
    HookDispatchTable({"use_lazy": factory}, context)
    factory.assert_not_called()


def test_inner_exception_propagates_unchanged(context, component):
    error = ValueError("boom")

    def use_failure(instance):
        def fail():
            raise error

        return fail

    table = HookDispatchTable({"use_failure": use_failure}, context)
    with context.activate(component):
        with pytest.raises(ValueError) as exc_info:
            table.use_failure()
    assert exc_info.value is error


def test_bound_hook_metadata(context):
    def use_thing(instance):
        """Docs for use_thing."""
        return lambda: None

    table = HookDispatchTable({"useThing": use_thing}, context)
    hook = table["useThing"]
    assert hook.name == "useThing"
    assert hook.__name__ == "useThing"
    assert hook.factory is use_thing
    assert hook.__doc__ == "Docs for use_thing."
    assert repr(hook) == "<BoundHook useThing>"


@pytest.mark.parametrize(
    "factories",
    [
        {},
        [("use_x", lambda instance: None)],
        {"": lambda instance: None},
        {1: lambda instance: None},
        {"use_x": "not callable"},
    ],
)
def test_invalid_factories(context, factories):
    with pytest.raises(HookDefinitionError):
        HookDispatchTable(factories, context)
