"""
Bstackdemo Journey Package

FLOW OVERVIEW
- create_runner(config=None)
  • Build a ScenarioRunner wired to the BrowserStack hub from Config.
- Layers (leaves first):
  • models: Credentials, CapabilityDescriptor, Locator, ScenarioResult.
  • utils: SessionManager, ConditionWaiter, Interactions, DiagnosticsReporter.
  • journeys: FavoriteSamsungJourney (login → filter → favorite → verify).
  • runner: ScenarioRunner, one result and one session per descriptor.
"""

from .config import Config, build_capabilities
from .errors import (
    JourneyError,
    ConfigurationError,
    SessionCreationError,
    StepFailure,
    WaitTimeoutError,
    InteractionError,
    VerificationError,
)
from .models import Credentials, CapabilityDescriptor, Locator, ScenarioResult
from .runner import ScenarioRunner


def create_runner(config=None):
    """Runner factory wired from environment-based configuration"""
    config = config or Config()
    return ScenarioRunner(config)


__all__ = [
    'create_runner',
    'Config',
    'build_capabilities',
    'JourneyError',
    'ConfigurationError',
    'SessionCreationError',
    'StepFailure',
    'WaitTimeoutError',
    'InteractionError',
    'VerificationError',
    'Credentials',
    'CapabilityDescriptor',
    'Locator',
    'ScenarioResult',
    'ScenarioRunner'
]
