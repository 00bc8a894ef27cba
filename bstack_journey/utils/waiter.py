"""
Condition Waiter

FLOW OVERVIEW
- ConditionWaiter.wait_for(predicate, timeout, message)
  • Poll `predicate(driver)` through Selenium's WebDriverWait until it returns
    a truthy value; that value is returned.
  • Stale and missing element errors raised by the predicate count as
    "not yet satisfied", so a navigation mid-poll never aborts the wait.
  • On deadline, raise WaitTimeoutError carrying the caller's stage message.
- until(WaitCondition)
  • Same as wait_for for a pre-built condition.
- element_located / all_located / element_visible / element_enabled /
  element_stale / element_absent
  • Common conditions composed by the interaction protocol.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from ..errors import WaitTimeoutError
from ..models.locator import Locator

DEFAULT_POLL_INTERVAL = 0.05

IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)


@dataclass(frozen=True)
class WaitCondition:
    """Predicate over the current page plus its time budget"""
    predicate: Callable[[Any], Any]
    timeout: float
    message: str


class ConditionWaiter:
    """Polls predicates against one WebDriver session."""

    def __init__(self, driver, poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.driver = driver
        self.poll_interval = poll_interval
        self.logger = logging.getLogger(__name__)

    def wait_for(self, predicate: Callable[[Any], Any], timeout: float, message: str) -> Any:
        """
        Wait until `predicate` returns a truthy value.

        Args:
            predicate: Callable receiving the driver
            timeout: Budget in seconds
            message: Failure message naming the stage that timed out

        Returns:
            The first truthy value returned by the predicate

        Raises:
            WaitTimeoutError: if the predicate stays falsy past the timeout
        """
        wait = WebDriverWait(
            self.driver,
            timeout,
            poll_frequency=self.poll_interval,
            ignored_exceptions=IGNORED_EXCEPTIONS,
        )
        try:
            return wait.until(predicate, message)
        except TimeoutException as e:
            self.logger.debug(f"Wait timed out after {timeout}s: {message}")
            raise WaitTimeoutError(message) from e

    def until(self, condition: WaitCondition) -> Any:
        return self.wait_for(condition.predicate, condition.timeout, condition.message)

    def element_located(self, locator: Locator, timeout: float, message: str) -> WebElement:
        return self.wait_for(EC.presence_of_element_located(locator.as_tuple()), timeout, message)

    def all_located(self, locator: Locator, timeout: float, message: str) -> List[WebElement]:
        return self.wait_for(EC.presence_of_all_elements_located(locator.as_tuple()), timeout, message)

    def element_visible(self, element: WebElement, timeout: float, message: str) -> WebElement:
        return self.wait_for(EC.visibility_of(element), timeout, message)

    def element_enabled(self, element: WebElement, timeout: float, message: str) -> WebElement:
        return self.wait_for(lambda _: element if element.is_enabled() else False, timeout, message)

    def element_stale(self, element: WebElement, timeout: float, message: str) -> bool:
        return self.wait_for(EC.staleness_of(element), timeout, message)

    def element_absent(self, locator: Locator, timeout: float, message: str) -> bool:
        """Wait until no element matching `locator` is displayed."""
        def _absent(driver):
            for element in driver.find_elements(*locator.as_tuple()):
                try:
                    if element.is_displayed():
                        return False
                except StaleElementReferenceException:
                    continue
            return True

        return self.wait_for(_absent, timeout, message)
