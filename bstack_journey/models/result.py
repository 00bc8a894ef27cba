"""
Scenario Result

Immutable outcome of one scenario run. Created once at the end of the run
and reported exactly once (test runner and vendor status channel).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from selenium.common.exceptions import WebDriverException

from ..errors import JourneyError

PASSED = 'passed'
FAILED = 'failed'


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of a single scenario"""
    status: str
    reason: str
    descriptor: Optional[str] = None
    error_kind: Optional[str] = None
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == PASSED

    @classmethod
    def success(cls, reason: str, descriptor: Optional[str] = None,
                duration: float = 0.0) -> 'ScenarioResult':
        return cls(status=PASSED, reason=reason, descriptor=descriptor, duration=duration)

    @classmethod
    def failure(cls, error: BaseException, descriptor: Optional[str] = None,
                duration: float = 0.0) -> 'ScenarioResult':
        """Build a failed result from the error that aborted the scenario."""
        if isinstance(error, JourneyError):
            kind = error.kind
            reason = error.message
        elif isinstance(error, WebDriverException):
            kind = 'webdriver'
            reason = error.msg or error.__class__.__name__
        else:
            kind = 'error'
            reason = f"{error.__class__.__name__}: {error}"
        return cls(status=FAILED, reason=reason, descriptor=descriptor,
                   error_kind=kind, duration=duration)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'reason': self.reason,
            'descriptor': self.descriptor,
            'error_kind': self.error_kind,
            'duration': round(self.duration, 3),
        }
