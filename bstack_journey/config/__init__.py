"""
Configuration Package

This package contains environment-driven settings and the capability matrix.
"""

from .config import Config, StepTimeouts
from .capabilities import build_capabilities

__all__ = [
    'Config',
    'StepTimeouts',
    'build_capabilities'
]
