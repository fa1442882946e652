"""
Runtime package managing the active instance of a hooks system.
"""

from .context import InstanceContext

__all__ = ["InstanceContext"]
