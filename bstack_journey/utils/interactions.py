"""
Interaction Protocol

FLOW OVERVIEW
- select_dropdown_option(dropdown, option_text)
  • locate dropdown → click → locate option by visible text → wait-visible → click → settle.
- click_when_ready(locator)
  • locate → wait-visible → wait-enabled → click.
- click_and_confirm_state_change(locator, confirmation)
  • Skip the click when the confirmation already holds; otherwise
    click_when_ready, then wait for the confirmation element.
- navigate_and_verify(url, ready_locator)
  • load → wait located → wait visible; logs URL and page source on failure.
- verify_text_present(locator, expected) / verify_count(locator, expected)
  • Read page state and raise VerificationError on mismatch.

Every step has its own budget and failure message so an error names the exact
stage that did not complete. Timeouts inside composite verbs surface as
InteractionError with the failing `stage`.
"""

import logging
import time
from typing import Optional

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    StaleElementReferenceException,
)
from selenium.webdriver.remote.webelement import WebElement

from ..config.config import StepTimeouts
from ..errors import InteractionError, VerificationError, WaitTimeoutError
from ..models.locator import Locator, xpath_literal

CLICK_ERRORS = (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    StaleElementReferenceException,
)


def dropdown_option_locator(option_text: str) -> Locator:
    """react-select renders options as divs with generated react-select ids."""
    return Locator.by_xpath(
        f"//div[contains(@id, 'react-select') and text()={xpath_literal(option_text)}]",
        f"option '{option_text}'",
    )


class Interactions:
    """Composite UI verbs over one session."""

    def __init__(self, session, waiter, timeouts: Optional[StepTimeouts] = None, sleep=time.sleep):
        self.session = session
        self.waiter = waiter
        self.timeouts = timeouts or StepTimeouts()
        self.sleep = sleep
        self.logger = logging.getLogger(__name__)

    def settle(self, seconds: Optional[float] = None) -> None:
        """Give asynchronous UI handlers time to finish."""
        seconds = self.timeouts.settle if seconds is None else seconds
        if seconds > 0:
            self.sleep(seconds)

    def _click(self, element: WebElement, target, stage: str = 'click') -> None:
        try:
            element.click()
        except CLICK_ERRORS as e:
            raise InteractionError(f"Could not click {target}: {e.__class__.__name__}", stage=stage) from e

    def select_dropdown_option(self, dropdown: Locator, option_text: str) -> None:
        """
        Open a dropdown and pick the option with the given visible text.

        Raises:
            InteractionError: stage is 'locate dropdown', 'locate option' or 'option visibility'
        """
        try:
            wrapper = self.waiter.element_located(
                dropdown, self.timeouts.locate, f"Dropdown '{dropdown}' not found."
            )
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='locate dropdown') from e
        self._click(wrapper, dropdown, stage='open dropdown')
        self.logger.info(f"Clicked dropdown: {dropdown}")

        option_locator = dropdown_option_locator(option_text)
        try:
            option = self.waiter.element_located(
                option_locator, self.timeouts.option, f"Option '{option_text}' not found in dropdown."
            )
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='locate option') from e
        try:
            self.waiter.element_visible(
                option, self.timeouts.visible, f"Option '{option_text}' found but not visible."
            )
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='option visibility') from e

        self._click(option, option_locator, stage='select option')
        self.logger.info(f"Selected option: {option_text}")
        self.settle()

    def click_when_ready(self, locator: Locator) -> WebElement:
        """
        Click an element once it is located, visible and enabled.

        Returns:
            The clicked element

        Raises:
            InteractionError: stage is 'locate', 'visibility', 'enabled' or 'click'
        """
        try:
            element = self.waiter.element_located(locator, self.timeouts.locate, f"{locator} not found.")
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='locate') from e
        try:
            self.waiter.element_visible(element, self.timeouts.visible, f"{locator} not visible.")
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='visibility') from e
        try:
            self.waiter.element_enabled(element, self.timeouts.enabled, f"{locator} not enabled.")
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='enabled') from e

        self._click(element, locator)
        self.logger.info(f"Clicked {locator}")
        return element

    def click_and_confirm_state_change(self, locator: Locator, confirmation: Locator) -> WebElement:
        """
        Click and wait until the click produced an observable state change.

        Re-invoking after the state already holds does not click again, so a
        toggle is never flipped back.

        Returns:
            The confirmation element

        Raises:
            InteractionError: readiness stages from click_when_ready, or 'confirm'
        """
        already = self.session.find_all(confirmation)
        if already:
            self.logger.info(f"{confirmation} already present, skipping click on {locator}")
            return already[0]

        self.click_when_ready(locator)
        try:
            confirmed = self.waiter.element_located(
                confirmation, self.timeouts.confirm, f"{confirmation} did not appear after clicking {locator}."
            )
        except WaitTimeoutError as e:
            raise InteractionError(e.message, stage='confirm') from e
        self.logger.info(f"State change confirmed: {confirmation}")
        return confirmed

    def navigate_and_verify(self, url: str, ready_locator: Locator) -> WebElement:
        """
        Load a page and wait for its ready marker to be located and visible.

        Raises:
            WaitTimeoutError: the marker never appeared or stayed hidden
        """
        self.session.get(url)
        self.logger.info(f"Navigated to: {self.session.current_url}")
        try:
            element = self.waiter.element_located(
                ready_locator, self.timeouts.page_container,
                f"Main page content container '{ready_locator}' not found after loading."
            )
            self.waiter.element_visible(
                element, self.timeouts.page_visible,
                f"Main page content container '{ready_locator}' found but not visible."
            )
        except WaitTimeoutError as e:
            self.logger.error(f"Error during page load: {e.message}")
            self.logger.error(f"Current URL: {self.session.current_url}")
            self.logger.error(f"Page source (first 500 chars): {self.session.page_source[:500]}")
            raise
        self.logger.info("Page content loaded and ready.")
        return element

    def verify_text_present(self, locator: Locator, expected: str,
                            timeout: Optional[float] = None) -> str:
        """
        Assert the element's text contains `expected`.

        Returns:
            The element text

        Raises:
            VerificationError: element absent or text mismatch
        """
        timeout = self.timeouts.locate if timeout is None else timeout
        try:
            element = self.waiter.element_located(locator, timeout, f"{locator} not found.")
        except WaitTimeoutError as e:
            raise VerificationError(f"Expected text '{expected}' but {e.message}") from e
        text = element.text or ''
        if expected not in text:
            raise VerificationError(f"Expected {locator} to contain '{expected}', got '{text}'")
        return text

    def verify_count(self, locator: Locator, expected: int) -> int:
        """
        Assert exactly `expected` elements match the locator.

        Raises:
            VerificationError: on count mismatch
        """
        count = len(self.session.find_all(locator))
        if count != expected:
            raise VerificationError(f"Expected {expected} element(s) matching {locator}, found {count}")
        return count
