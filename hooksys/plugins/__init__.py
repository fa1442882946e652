"""
Optional hook implementations built on the core hooks system.
"""

from .state import STATE_HOOKS, SlotStateHolder, make_state_system, reset_cursor, use_state_factory

__all__ = ["STATE_HOOKS", "SlotStateHolder", "make_state_system", "reset_cursor", "use_state_factory"]
