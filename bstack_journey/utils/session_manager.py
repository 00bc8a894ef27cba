"""
Session Manager

FLOW OVERVIEW
- SessionManager.open(descriptor, credentials)
  • Fail with ConfigurationError before any network call when credentials are absent.
  • Build W3C options from the descriptor and connect to the remote hub.
  • Wrap grid rejections and connection failures in SessionCreationError.
- SessionManager.close(session)
  • Quit the remote browser once; repeat calls and quit failures are absorbed.
- SessionManager.session(descriptor, credentials)
  • Context manager pairing open/close on every exit path.
- Session
  • Handle over one live remote browser; owns every DOM query of one test.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.webelement import WebElement
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from ..errors import ConfigurationError, SessionCreationError
from ..models.capability import CapabilityDescriptor, Credentials
from ..models.locator import Locator


def build_options(descriptor: CapabilityDescriptor,
                  credentials: Optional[Credentials] = None) -> ArgOptions:
    """Translate a descriptor into Selenium options carrying its capabilities."""
    options = ArgOptions()
    for name, value in descriptor.to_capabilities(credentials).items():
        options.set_capability(name, value)
    return options


class Session:
    """One live remote-controlled browser bound to one test."""

    def __init__(self, driver, descriptor: CapabilityDescriptor):
        self.driver = driver
        self.descriptor = descriptor
        self.closed = False

    def __repr__(self):
        state = 'closed' if self.closed else 'open'
        return f"<Session {self.session_id} {self.descriptor.display_name} ({state})>"

    @property
    def session_id(self) -> Optional[str]:
        return getattr(self.driver, 'session_id', None)

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def page_source(self) -> str:
        return self.driver.page_source

    def get(self, url: str) -> None:
        self.driver.get(url)

    def find(self, locator: Locator) -> WebElement:
        return self.driver.find_element(*locator.as_tuple())

    def find_all(self, locator: Locator) -> List[WebElement]:
        return self.driver.find_elements(*locator.as_tuple())

    def execute_script(self, script: str, *args) -> Any:
        return self.driver.execute_script(script, *args)


class SessionManager:
    """Opens and releases remote browser sessions."""

    def __init__(self, config, driver_factory: Optional[Callable[..., Any]] = None):
        self.config = config
        self.driver_factory = driver_factory or webdriver.Remote
        self.logger = logging.getLogger(__name__)

    def open(self, descriptor: CapabilityDescriptor, credentials: Optional[Credentials]) -> Session:
        """
        Open a remote browser session.

        Args:
            descriptor: Platform/browser to request
            credentials: BrowserStack credentials

        Returns:
            Live Session

        Raises:
            ConfigurationError: credentials missing
            SessionCreationError: grid unreachable or capabilities rejected
        """
        if credentials is None or not credentials.username or not credentials.access_key:
            raise ConfigurationError(
                "BrowserStack login details are missing! "
                "Please set BROWSERSTACK_USERNAME and BROWSERSTACK_ACCESS_KEY."
            )

        self.logger.info(f"Opening session on {descriptor.display_name} via {self.config.HUB_URL}")
        try:
            driver = self.driver_factory(
                command_executor=self.config.HUB_URL,
                options=build_options(descriptor, credentials),
            )
        except (WebDriverException, Urllib3HTTPError, OSError) as e:
            self.logger.error(f"Session creation failed for {descriptor.display_name}: {e}")
            raise SessionCreationError(
                f"Could not create session for {descriptor.display_name}: {e}"
            ) from e

        session = Session(driver, descriptor)
        try:
            driver.set_page_load_timeout(self.config.PAGE_LOAD_TIMEOUT)
        except WebDriverException as e:
            self.logger.warning(f"Could not set page load timeout: {e}")
        self.logger.info(f"Session {session.session_id} opened")
        return session

    def close(self, session: Optional[Session]) -> None:
        """Release the remote browser. Safe to call on closed or broken sessions."""
        if session is None or session.closed:
            return
        session.closed = True
        try:
            session.driver.quit()
            self.logger.info(f"Session {session.session_id} closed")
        except Exception as e:
            self.logger.warning(f"Ignoring error while closing session {session.session_id}: {e}")

    @contextmanager
    def session(self, descriptor: CapabilityDescriptor,
                credentials: Optional[Credentials]) -> Iterator[Session]:
        session = self.open(descriptor, credentials)
        try:
            yield session
        finally:
            self.close(session)
