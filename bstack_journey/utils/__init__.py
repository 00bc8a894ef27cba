"""
Utilities Package

This package contains the session, wait, interaction and vendor reporting layers.
"""

from . import waiter
from . import session_manager
from . import interactions
from . import diagnostics

__all__ = [
    'waiter',
    'session_manager',
    'interactions',
    'diagnostics'
]
