"""
Capability and Credential Models

FLOW OVERVIEW
- Credentials.from_env(environ)
  • Read BROWSERSTACK_USERNAME / BROWSERSTACK_ACCESS_KEY, fail fast when absent.
- CapabilityDescriptor
  • Desktop shape (os, os_version) or device shape (device, real_mobile).
  • to_capabilities(credentials) builds the W3C payload with vendor keys
    nested under `bstack:options`.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..errors import ConfigurationError

USERNAME_ENV = 'BROWSERSTACK_USERNAME'
ACCESS_KEY_ENV = 'BROWSERSTACK_ACCESS_KEY'


@dataclass(frozen=True)
class Credentials:
    """BrowserStack account credentials"""
    username: str
    access_key: str

    def __repr__(self):
        return f"Credentials(username={self.username!r}, access_key='*****')"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Credentials':
        """
        Build credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Credentials instance

        Raises:
            ConfigurationError: if either variable is missing or blank
        """
        environ = os.environ if environ is None else environ
        username = (environ.get(USERNAME_ENV) or '').strip()
        access_key = (environ.get(ACCESS_KEY_ENV) or '').strip()

        missing = [name for name, value in ((USERNAME_ENV, username), (ACCESS_KEY_ENV, access_key))
                   if not value]
        if missing:
            raise ConfigurationError(
                "BrowserStack login details are missing! "
                f"Please set {' and '.join(missing)}."
            )
        return cls(username=username, access_key=access_key)

    def describe(self) -> Dict[str, str]:
        """Masked view suitable for logging."""
        return {
            'username': '*****' if self.username else 'Not found',
            'access_key': '*****' if self.access_key else 'Not found',
        }


@dataclass(frozen=True)
class CapabilityDescriptor:
    """Platform and browser requested from the remote grid."""
    browser_name: str
    os: Optional[str] = None
    os_version: Optional[str] = None
    device: Optional[str] = None
    real_mobile: bool = False
    project_name: Optional[str] = None
    build_name: Optional[str] = None
    debug: bool = True
    network_logs: bool = True

    def __post_init__(self):
        if not self.browser_name:
            raise ConfigurationError("Capability descriptor requires a browserName")
        is_desktop = bool(self.os or self.os_version)
        is_device = bool(self.device)
        if is_desktop == is_device:
            raise ConfigurationError(
                "Capability descriptor must be either desktop (os, os_version) "
                f"or device (device), got os={self.os!r} device={self.device!r}"
            )
        if is_desktop and not (self.os and self.os_version):
            raise ConfigurationError("Desktop descriptor requires both os and os_version")

    @classmethod
    def desktop(cls, os_name: str, os_version: str, browser_name: str, **labels) -> 'CapabilityDescriptor':
        return cls(browser_name=browser_name, os=os_name, os_version=os_version, **labels)

    @classmethod
    def mobile(cls, device: str, browser_name: str, real_mobile: bool = True, **labels) -> 'CapabilityDescriptor':
        return cls(browser_name=browser_name, device=device, real_mobile=real_mobile, **labels)

    @property
    def is_device(self) -> bool:
        return bool(self.device)

    @property
    def display_name(self) -> str:
        """Human readable name used for test ids and vendor session names."""
        if self.is_device:
            return f"{self.device} - {self.browser_name}"
        return f"{self.browser_name} - {self.os} {self.os_version}"

    @property
    def test_id(self) -> str:
        return self.display_name.lower().replace(' - ', '-').replace(' ', '_')

    def to_capabilities(self, credentials: Optional[Credentials] = None,
                        session_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the W3C capability payload for webdriver.Remote.

        Args:
            credentials: Added as userName/accessKey when provided
            session_name: Optional vendor session name

        Returns:
            Dict with top-level browserName and a `bstack:options` block
        """
        bstack_options: Dict[str, Any] = {}
        if self.is_device:
            bstack_options['deviceName'] = self.device
            bstack_options['realMobile'] = 'true' if self.real_mobile else 'false'
        else:
            bstack_options['os'] = self.os
            bstack_options['osVersion'] = self.os_version
        if self.project_name:
            bstack_options['projectName'] = self.project_name
        if self.build_name:
            bstack_options['buildName'] = self.build_name
        if session_name:
            bstack_options['sessionName'] = session_name
        bstack_options['debug'] = 'true' if self.debug else 'false'
        bstack_options['networkLogs'] = 'true' if self.network_logs else 'false'
        if credentials is not None:
            bstack_options['userName'] = credentials.username
            bstack_options['accessKey'] = credentials.access_key

        return {
            'browserName': self.browser_name,
            'bstack:options': bstack_options,
        }
