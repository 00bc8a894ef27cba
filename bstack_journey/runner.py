"""
Scenario Runner

FLOW OVERVIEW
- ScenarioRunner.run(descriptor, credentials=None)
  • Resolve credentials (ConfigurationError before any network call).
  • Open a session; a rejected/unreachable grid yields a failed result.
  • Name the session on the grid, run the journey, build exactly one
    ScenarioResult, report its status to the grid.
  • Close the session on every exit path.
- ScenarioRunner.run_all(descriptors, credentials=None)
  • Sequential convenience over the capability matrix.
"""

import logging
import time
from typing import Callable, List, Optional

from .config.config import Config
from .journeys.favorite_samsung import FavoriteSamsungJourney
from .models.capability import CapabilityDescriptor, Credentials
from .models.result import ScenarioResult
from .errors import SessionCreationError
from .utils.diagnostics import DiagnosticsReporter
from .utils.interactions import Interactions
from .utils.session_manager import SessionManager
from .utils.waiter import ConditionWaiter


class ScenarioRunner:
    """Runs one journey per capability descriptor."""

    def __init__(self, config: Optional[Config] = None, session_manager: Optional[SessionManager] = None,
                 reporter_factory: Optional[Callable[..., DiagnosticsReporter]] = None,
                 journey_cls=FavoriteSamsungJourney, sleep=time.sleep, clock=time.monotonic):
        self.config = config or Config()
        self.session_manager = session_manager or SessionManager(self.config)
        self.reporter_factory = reporter_factory or (
            lambda credentials: DiagnosticsReporter(self.config, credentials)
        )
        self.journey_cls = journey_cls
        self.sleep = sleep
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    def session_name(self, descriptor: CapabilityDescriptor) -> str:
        return f"Bstackdemo Test on {descriptor.display_name}"

    def build_journey(self, session):
        timeouts = self.config.STEP_TIMEOUTS
        waiter = ConditionWaiter(session.driver, poll_interval=self.config.POLL_INTERVAL)
        interactions = Interactions(session, waiter, timeouts, sleep=self.sleep)
        return self.journey_cls(session, waiter, interactions, self.config, timeouts)

    def run(self, descriptor: CapabilityDescriptor, credentials: Optional[Credentials] = None) -> ScenarioResult:
        """
        Run the journey on one descriptor.

        Args:
            descriptor: Platform/browser to run on
            credentials: BrowserStack credentials (read from env when omitted)

        Returns:
            ScenarioResult for this run

        Raises:
            ConfigurationError: credentials missing; no session is attempted
        """
        if credentials is None:
            credentials = Credentials.from_env()

        start = self.clock()
        try:
            session = self.session_manager.open(descriptor, credentials)
        except SessionCreationError as e:
            result = ScenarioResult.failure(e, descriptor.display_name, self.clock() - start)
            self.logger.error(f"Test failed on {descriptor.display_name}: {result.reason}")
            return result

        try:
            reporter = self.reporter_factory(credentials)
            reporter.set_session_name(session, self.session_name(descriptor))
            try:
                self.build_journey(session).run()
                result = ScenarioResult.success(
                    self.journey_cls.success_reason, descriptor.display_name, self.clock() - start
                )
                self.logger.info(f"--- Test finished successfully on {descriptor.display_name} ---")
            except Exception as e:
                result = ScenarioResult.failure(e, descriptor.display_name, self.clock() - start)
                self.logger.error(f"Test failed on {descriptor.display_name} ({result.error_kind}): {result.reason}")
            reporter.set_session_status(session, result.status, result.reason)
            return result
        finally:
            self.session_manager.close(session)

    def run_all(self, descriptors: List[CapabilityDescriptor],
                credentials: Optional[Credentials] = None) -> List[ScenarioResult]:
        if credentials is None:
            credentials = Credentials.from_env()
        return [self.run(descriptor, credentials) for descriptor in descriptors]
