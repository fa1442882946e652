"""hooksys: instance-scoped hooks exposed as plain functions

A hooks system takes a mapping of hook factories, each a function from an
instance to a callable, and produces a table of functions that need no
instance argument. While ``with_instance`` runs, those functions resolve
against the instance it made active.

Responsibilities:
    - Binding hook factories into a dispatch table
    - Scoping an instance around a callback
    - Running prepare/release callbacks around each scope

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; one scope may be active per system at a time
        - Nested scopes are unguarded unless strict_reentrancy is set

    Error Handling:
        - HooksError hierarchy for the library's own failures
        - Callback and hook exceptions propagate unchanged

    Logging:
        - DEBUG records through the standard logging module
"""

from .core import (
    DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE,
    BoundHook,
    ContextState,
    HookDefinitionError,
    HookDispatchTable,
    HooksConfig,
    HooksError,
    HooksSystem,
    NoActiveInstanceError,
    ReentrantActivationError,
    make_hooks_system,
)
from .runtime import InstanceContext

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE",
    "BoundHook",
    "ContextState",
    "HookDefinitionError",
    "HookDispatchTable",
    "HooksConfig",
    "HooksError",
    "HooksSystem",
    "InstanceContext",
    "NoActiveInstanceError",
    "ReentrantActivationError",
    "make_hooks_system",
]
