# hooksys/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Shared type definitions for the hooks system.

No runtime dependencies on other modules of the package.
"""

from enum import Enum, auto
from typing import Any, Callable, Mapping, TypeVar

Instance = TypeVar("Instance")
R = TypeVar("R")

HookFunction = Callable[..., Any]
HookFactory = Callable[[Any], HookFunction]
HookFactories = Mapping[str, HookFactory]
InstanceCallback = Callable[[Any], None]


class ContextState(Enum):
    """
    The two states of an instance context. IDLE when no instance is bound,
    ACTIVE while a scoped call is running.
    """

    IDLE = auto()
    ACTIVE = auto()
