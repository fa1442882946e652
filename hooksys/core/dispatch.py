# hooksys/core/dispatch.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator

from hooksys.core.errors import HookDefinitionError
from hooksys.core.types import HookFactories, HookFactory
from hooksys.runtime.context import InstanceContext

logger = logging.getLogger(__name__)


class BoundHook:
    """
    A hook function that needs no instance argument. Each call looks up the
    active instance, resolves the factory against it and forwards the call.

    Nothing is cached between calls; all state lives in the instance.
    """

    def __init__(self, name: str, factory: HookFactory, context: InstanceContext) -> None:
        self.name = name
        self.factory = factory
        self._context = context
        self.__name__ = name
        self.__qualname__ = name
        self.__doc__ = getattr(factory, "__doc__", None)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        instance = self._context.require(self.name)
        return self.factory(instance)(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<BoundHook {self.name}>"


class HookDispatchTable(Mapping):
    """
    Read-only mapping of hook name to BoundHook.

    Keys are exactly the names of the factories it was built from. Entries are
    reachable by item access and, for names that are valid identifiers and do
    not shadow a Mapping method, by attribute access:

        hooks["use_state"](0)
        hooks.use_state(0)
    """

    def __init__(self, factories: HookFactories, context: InstanceContext) -> None:
        _validate_factories(factories)
        hooks = {name: BoundHook(name, factory, context) for name, factory in factories.items()}
        object.__setattr__(self, "_hooks", hooks)
        logger.debug("Bound %d hook(s): %s", len(hooks), ", ".join(hooks))

    def __getitem__(self, name: str) -> BoundHook:
        return self._hooks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    def __getattr__(self, name: str) -> BoundHook:
        # Only reached when normal lookup fails.
        hooks: Dict[str, BoundHook] = self.__dict__.get("_hooks", {})
        try:
            return hooks[name]
        except KeyError:
            raise AttributeError(f"No hook named {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("HookDispatchTable is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("HookDispatchTable is read-only")

    def __dir__(self):
        return sorted(set(super().__dir__()) | {n for n in self._hooks if n.isidentifier()})

    def __repr__(self) -> str:
        return f"HookDispatchTable({list(self._hooks)!r})"


def _validate_factories(factories: Any) -> None:
    if not isinstance(factories, Mapping):
        raise HookDefinitionError(f"Hook factories must be a mapping, got {type(factories).__name__}")
    if not factories:
        raise HookDefinitionError("At least one hook factory is required")
    for name, factory in factories.items():
        if not isinstance(name, str) or not name:
            raise HookDefinitionError(f"Hook names must be non-empty strings, got {name!r}")
        if not callable(factory):
            raise HookDefinitionError(f"Factory for hook {name!r} is not callable")
