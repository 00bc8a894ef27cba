"""
Journey Errors

FLOW OVERVIEW
- JourneyError is the base of every failure raised by the package.
  • `kind` identifies the failure for ScenarioResult reporting.
  • `fatal` separates setup defects (no scenario can run) from expected
    step failures (the scenario ran and a condition did not hold).
- StepFailure groups the expected end states: timeouts, interaction
  post-conditions and verification mismatches.
"""

from typing import Optional


class JourneyError(Exception):
    """Base exception for all journey failures."""

    kind = 'error'
    fatal = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(JourneyError):
    """Credentials or configuration are missing or malformed."""

    kind = 'configuration'


class SessionCreationError(JourneyError):
    """The remote grid rejected the capabilities or could not be reached."""

    kind = 'session'


class StepFailure(JourneyError):
    """A scenario step did not reach its expected state."""

    fatal = False


class WaitTimeoutError(StepFailure, TimeoutError):
    """A wait condition did not become true within its budget."""

    kind = 'timeout'


class InteractionError(StepFailure):
    """An interaction could not complete or its post-condition did not hold."""

    kind = 'interaction'

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage


class VerificationError(StepFailure, AssertionError):
    """Page content did not match the expected state."""

    kind = 'verification'
