"""
Journey Models Package

FLOW OVERVIEW
- Immutable value types shared by the session, wait and scenario layers.
- Exposes: Credentials, CapabilityDescriptor, Locator, ScenarioResult.
"""

from .capability import Credentials, CapabilityDescriptor
from .locator import Locator, xpath_literal
from .result import ScenarioResult, PASSED, FAILED

__all__ = [
    'Credentials',
    'CapabilityDescriptor',
    'Locator',
    'xpath_literal',
    'ScenarioResult',
    'PASSED',
    'FAILED'
]
