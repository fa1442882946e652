# hooksys/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from hooksys.core.errors import DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE
from hooksys.core.types import InstanceCallback

# Option names accepted in their original camelCase spelling.
_OPTION_ALIASES: Dict[str, str] = {
    "prepareInstance": "prepare_instance",
    "releaseInstance": "release_instance",
    "hookUsedOutsideOfWithInstanceErrorMessage": "hook_used_outside_of_with_instance_error_message",
    "strictReentrancy": "strict_reentrancy",
}


@dataclass(frozen=True)
class HooksConfig:
    """
    Immutable configuration for a hooks system.

    :param prepare_instance: Called with the instance before it becomes active.
    :param release_instance: Called with the instance after the callback ends,
        before the active slot is cleared.
    :param hook_used_outside_of_with_instance_error_message: Overrides the
        message of NoActiveInstanceError.
    :param strict_reentrancy: Reject activating an instance while another is
        active instead of silently overwriting it.
    """

    prepare_instance: Optional[InstanceCallback] = None
    release_instance: Optional[InstanceCallback] = None
    hook_used_outside_of_with_instance_error_message: Optional[str] = None
    strict_reentrancy: bool = False

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_options(cls, **options: Any) -> "HooksConfig":
        """
        Build a config from keyword options. Unknown names raise TypeError.
        """
        return cls().merged(**options)

    def merged(self, **options: Any) -> "HooksConfig":
        """Return a copy with the given options applied over this config."""
        if not options:
            return self
        values: Dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        given: Dict[str, str] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in values:
                raise TypeError(f"Unknown hooks system option: {key!r}")
            if name in given:
                raise TypeError(f"Option {key!r} given twice (also as {given[name]!r})")
            given[name] = key
            values[name] = value
        return type(self)(**values)

    def validate(self) -> None:
        for name in ("prepare_instance", "release_instance"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise TypeError(f"{name} must be callable, got {type(value).__name__}")
        message = self.hook_used_outside_of_with_instance_error_message
        if message is not None and not isinstance(message, str):
            raise TypeError("hook_used_outside_of_with_instance_error_message must be a string")
        if not isinstance(self.strict_reentrancy, bool):
            raise TypeError(f"strict_reentrancy must be a bool, got {type(self.strict_reentrancy).__name__}")

    def no_active_instance_message(self) -> str:
        # An empty custom message falls back to the default.
        return self.hook_used_outside_of_with_instance_error_message or DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE
