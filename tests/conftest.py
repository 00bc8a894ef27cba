"""
Test configuration and shared fixtures for bstack_journey tests.

This file contains:
- Centralized test configuration (no dotenv file, short step budgets)
- Fixtures handing out the WebDriver doubles from fakes.py
- Shared fixtures used across multiple test files
"""

import os
from dataclasses import fields, replace

import pytest

os.environ.setdefault('BSTACK_ENV', 'testing')

from bstack_journey.config import Config, StepTimeouts
from bstack_journey.models import CapabilityDescriptor, Credentials
from bstack_journey.utils.session_manager import SessionManager
from fakes import FakeDriver, build_bstackdemo_driver


FAST_TIMEOUTS = replace(
    StepTimeouts(**{f.name: 0.3 for f in fields(StepTimeouts)}),
    settle=0,
    post_login_settle=0,
    post_favorite_settle=0,
)


class FastConfig(Config):
    """Config with tight budgets so timeout paths finish quickly"""

    @property
    def POLL_INTERVAL(self):
        return 0.01

    @property
    def STEP_TIMEOUTS(self):
        return FAST_TIMEOUTS


@pytest.fixture
def config():
    """Configuration with short step budgets"""
    return FastConfig()


@pytest.fixture
def credentials():
    return Credentials(username='test-user', access_key='test-access-key')


@pytest.fixture
def desktop_descriptor():
    return CapabilityDescriptor.desktop('Windows', '10', 'Chrome',
                                        project_name='BSTACK Tech Challenge',
                                        build_name='Tech Challenge Test Build')


@pytest.fixture
def device_descriptor():
    return CapabilityDescriptor.mobile('Samsung Galaxy S22', 'Android')


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def bstackdemo_driver():
    return build_bstackdemo_driver()


@pytest.fixture
def session_manager_for(config):
    """Build a SessionManager whose factory hands out the given driver."""
    def _build(driver):
        calls = []

        def factory(**kwargs):
            calls.append(kwargs)
            return driver

        manager = SessionManager(config, driver_factory=factory)
        manager.factory_calls = calls
        return manager
    return _build
