"""
Core package binding hook factories to the active instance.

Architecture:
- errors, types and config carry no dependencies on the rest of the package
- dispatch builds the name -> callable table over an InstanceContext
- system ties the table and the context together behind make_hooks_system
"""

# Import order matters to avoid circular dependencies
from .errors import (
    DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE,
    HookDefinitionError,
    HooksError,
    NoActiveInstanceError,
    ReentrantActivationError,
)
from .types import ContextState, HookFactories, HookFactory
from .config import HooksConfig
from .dispatch import BoundHook, HookDispatchTable
from .system import HooksSystem, make_hooks_system

__all__ = [
    # Errors
    "DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE",
    "HooksError",
    "HookDefinitionError",
    "NoActiveInstanceError",
    "ReentrantActivationError",
    # Types
    "ContextState",
    "HookFactories",
    "HookFactory",
    # Building blocks
    "HooksConfig",
    "BoundHook",
    "HookDispatchTable",
    "HooksSystem",
    "make_hooks_system",
]
