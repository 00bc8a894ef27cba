"""
Unit tests for the condition waiter
"""

import time

import pytest
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException

from bstack_journey.errors import WaitTimeoutError
from bstack_journey.models import Locator
from bstack_journey.utils.waiter import ConditionWaiter, WaitCondition
from fakes import FakeElement

pytestmark = pytest.mark.timeout(30)


class TestWaitFor:
    """Test polling semantics."""

    def test_returns_first_truthy_value(self, fake_driver):
        values = iter([None, 0, '', 'ready'])
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        assert waiter.wait_for(lambda d: next(values), 1, 'never ready') == 'ready'

    def test_predicate_receives_driver(self, fake_driver):
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        assert waiter.wait_for(lambda d: d, 1, 'no driver') is fake_driver

    @pytest.mark.parametrize('timeout', [0.1, 0.3])
    def test_times_out_not_before_budget(self, fake_driver, timeout):
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        start = time.monotonic()
        with pytest.raises(WaitTimeoutError) as exc_info:
            waiter.wait_for(lambda d: False, timeout, 'Login button not visible.')
        elapsed = time.monotonic() - start

        assert elapsed >= timeout
        assert elapsed < timeout + 0.5
        assert exc_info.value.message == 'Login button not visible.'
        assert isinstance(exc_info.value, TimeoutError)

    def test_stale_and_missing_elements_mean_not_yet(self, fake_driver):
        attempts = {'count': 0}

        def flaky(driver):
            attempts['count'] += 1
            if attempts['count'] == 1:
                raise StaleElementReferenceException('navigated')
            if attempts['count'] == 2:
                raise NoSuchElementException('not rendered')
            return 'found'

        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        assert waiter.wait_for(flaky, 1, 'flaky') == 'found'
        assert attempts['count'] == 3

    def test_other_errors_propagate(self, fake_driver):
        def broken(driver):
            raise ValueError('bug')

        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        with pytest.raises(ValueError):
            waiter.wait_for(broken, 1, 'broken')

    def test_until_wait_condition(self, fake_driver):
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        condition = WaitCondition(lambda d: 42, 1, 'answer')
        assert waiter.until(condition) == 42


class TestElementConditions:
    """Test the element helpers against a fake driver."""

    def test_element_located(self, fake_driver):
        locator = Locator.by_id('__next')
        element = fake_driver.put(locator, FakeElement())
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        assert waiter.element_located(locator, 1, 'missing') is element

    def test_element_located_times_out(self, fake_driver):
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        with pytest.raises(WaitTimeoutError):
            waiter.element_located(Locator.by_id('nope'), 0.1, 'missing')

    def test_all_located(self, fake_driver):
        locator = Locator.by_css('.shelf-item')
        fake_driver.put(locator, FakeElement('a'), FakeElement('b'))
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        assert len(waiter.all_located(locator, 1, 'none')) == 2

    def test_element_visible_and_enabled(self, fake_driver):
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        element = FakeElement(displayed=True, enabled=False)

        assert waiter.element_visible(element, 1, 'hidden') is element
        with pytest.raises(WaitTimeoutError):
            waiter.element_enabled(element, 0.1, 'disabled')

    def test_element_absent(self, fake_driver):
        spinner = Locator.by_css('.spinner')
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        assert waiter.element_absent(spinner, 0.1, 'spinner stuck') is True

        fake_driver.put(spinner, FakeElement())
        with pytest.raises(WaitTimeoutError) as exc_info:
            waiter.element_absent(spinner, 0.1, 'spinner stuck')
        assert exc_info.value.message == 'spinner stuck'

    def test_element_absent_ignores_hidden_spinner(self, fake_driver):
        spinner = Locator.by_css('.spinner')
        fake_driver.put(spinner, FakeElement(displayed=False))
        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)

        assert waiter.element_absent(spinner, 0.1, 'spinner stuck') is True

    def test_element_stale(self, fake_driver):
        class GoneElement(FakeElement):
            def is_enabled(self):
                raise StaleElementReferenceException('gone')

        waiter = ConditionWaiter(fake_driver, poll_interval=0.01)
        assert waiter.element_stale(GoneElement(), 1, 'still attached') is True
