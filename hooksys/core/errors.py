# hooksys/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional

DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE = "Attempted to use a hook function, but there was no active instance."


class HooksError(Exception):
    """
    Base exception class for errors raised by the hooks system itself.
    """


class NoActiveInstanceError(HooksError):
    """
    Raised when a hook function is called while no instance is active.

    :param message: Text of the error, either configured or the default.
    :param hook_name: Name of the hook that was called, if known.
    """

    def __init__(self, message: str = DEFAULT_NO_ACTIVE_INSTANCE_MESSAGE, hook_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.hook_name = hook_name


class HookDefinitionError(HooksError):
    """
    Raised when the hook factories handed to the system are malformed.
    """


class ReentrantActivationError(HooksError):
    """
    Raised when an instance is activated while another one is still active and
    the system was configured to reject nesting.
    """

    def __init__(self, message: str, active_instance: Any = None) -> None:
        super().__init__(message)
        self.active_instance = active_instance
