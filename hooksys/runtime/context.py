# hooksys/runtime/context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional

from hooksys.core.config import HooksConfig
from hooksys.core.errors import NoActiveInstanceError, ReentrantActivationError
from hooksys.core.types import ContextState, R

logger = logging.getLogger(__name__)


class InstanceContext:
    """
    Owns the active instance slot of one hooks system.

    The slot is written only by activate() and read by the bound hooks. It is
    set for the dynamic extent of a scoped call and cleared on every exit path.

    Runtime Invariants:
    - At most one instance is active at a time.
    - After activate() exits, normally or by exception, the slot is empty.

    Nesting:
    - An inner activate() overwrites the slot and its exit clears it, so hooks
      called afterwards in the outer scope see no active instance. Set
      ``strict_reentrancy`` in the config to reject nesting instead.
    """

    def __init__(self, config: Optional[HooksConfig] = None) -> None:
        self._config = config if config is not None else HooksConfig()
        self._current: Any = None

    @property
    def config(self) -> HooksConfig:
        return self._config

    @property
    def current(self) -> Any:
        """The active instance, or None when idle."""
        return self._current

    @property
    def state(self) -> ContextState:
        return ContextState.IDLE if self._current is None else ContextState.ACTIVE

    @property
    def is_active(self) -> bool:
        return self._current is not None

    def require(self, hook_name: Optional[str] = None) -> Any:
        """
        Return the active instance.

        :param hook_name: Name of the calling hook, attached to the error.
        :raises NoActiveInstanceError: If no instance is active.
        """
        instance = self._current
        if instance is None:
            raise NoActiveInstanceError(self._config.no_active_instance_message(), hook_name=hook_name)
        return instance

    @contextmanager
    def activate(self, instance: Any) -> Generator[Any, None, None]:
        """
        Bind an instance for the duration of the with-block.

        prepare_instance runs before the slot is set; if it fails the slot is
        never touched. release_instance runs after the block, then the slot is
        cleared even if the block or release_instance raised.

        Activating None runs the lifecycle callbacks and the block, but the
        slot still reads as empty, so hooks raise NoActiveInstanceError.

        Example:
            with context.activate(component):
                hooks.use_state(0)
        """
        if self._config.strict_reentrancy and self._current is not None:
            raise ReentrantActivationError(
                "Cannot activate an instance while another instance is active",
                active_instance=self._current,
            )

        if self._config.prepare_instance is not None:
            self._config.prepare_instance(instance)

        self._current = instance
        logger.debug("Activated hooks instance %r", instance)
        try:
            yield instance
        finally:
            try:
                if self._config.release_instance is not None:
                    self._config.release_instance(instance)
            finally:
                self._current = None
                logger.debug("Released hooks instance %r", instance)

    def run(self, instance: Any, callback: Callable[[], R]) -> R:
        """
        Run a zero-argument callback with the instance active and return its
        result. Exceptions from the callback propagate unchanged.
        """
        with self.activate(instance):
            return callback()
