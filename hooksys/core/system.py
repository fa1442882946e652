# hooksys/core/system.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator, Generic, Mapping, Optional, Union

from hooksys.core.config import HooksConfig
from hooksys.core.dispatch import HookDispatchTable
from hooksys.core.types import HookFactories, Instance, R
from hooksys.runtime.context import InstanceContext

logger = logging.getLogger(__name__)


class HooksSystem(Generic[Instance]):
    """
    Exposes instance-scoped hook factories as plain functions.

    ``hooks`` holds one callable per factory. Calling one resolves its factory
    against whichever instance ``with_instance`` has made active.

    Example:
        system = make_hooks_system({"use_name": lambda inst: lambda: inst.name})
        system.with_instance(component, lambda: system.hooks.use_name())
    """

    def __init__(self, factories: HookFactories, config: Optional[HooksConfig] = None) -> None:
        self._config = config if config is not None else HooksConfig()
        self._context = InstanceContext(self._config)
        self._hooks = HookDispatchTable(factories, self._context)

    @property
    def hooks(self) -> HookDispatchTable:
        return self._hooks

    @property
    def config(self) -> HooksConfig:
        return self._config

    @property
    def context(self) -> InstanceContext:
        return self._context

    @property
    def active_instance(self) -> Optional[Instance]:
        return self._context.current

    @property
    def is_active(self) -> bool:
        return self._context.is_active

    def with_instance(self, instance: Instance, callback: Callable[[], R]) -> R:
        """
        Run callback with instance active and return its result.

        :param instance: The object hooks resolve against during the call.
        :param callback: Zero-argument callable.
        """
        return self._context.run(instance, callback)

    @contextmanager
    def instance_scope(self, instance: Instance) -> Generator[Instance, None, None]:
        """
        Context manager form of with_instance.

        Example:
            with system.instance_scope(component):
                value, set_value = system.hooks.use_state(0)
        """
        with self._context.activate(instance) as active:
            yield active

    def __repr__(self) -> str:
        return f"HooksSystem(hooks={list(self._hooks)!r}, active={self.is_active})"


def make_hooks_system(
    factories: HookFactories,
    config: Union[HooksConfig, Mapping[str, Any], None] = None,
    **options: Any,
) -> HooksSystem:
    """
    Bind hook factories into a HooksSystem.

    :param factories: Mapping of hook name to a function taking an instance and
        returning the hook implementation.
    :param config: A HooksConfig or a mapping of option names to values.
    :param options: Options applied over ``config``.
    :raises HookDefinitionError: If ``factories`` is empty or malformed.
    :raises TypeError: On unknown or ill-typed options.
    """
    if config is None:
        resolved = HooksConfig.from_options(**options)
    elif isinstance(config, HooksConfig):
        resolved = config.merged(**options)
    else:
        resolved = HooksConfig.from_options(**{**dict(config), **options})
    system: HooksSystem = HooksSystem(factories, resolved)
    logger.debug("Created %r", system)
    return system
