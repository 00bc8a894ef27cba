"""
Unit tests for the BrowserStack diagnostics channel
"""

import json
from unittest.mock import Mock

import requests
from selenium.common.exceptions import WebDriverException
from urllib3.exceptions import MaxRetryError, ProtocolError

from bstack_journey.utils.diagnostics import (
    DiagnosticsReporter, executor_command, truncate_reason, EXECUTOR_PREFIX, MAX_REASON_LENGTH
)
from bstack_journey.utils.session_manager import Session
from fakes import FakeDriver


class BrokenDriver(FakeDriver):
    def execute_script(self, script, *args):
        raise WebDriverException('invalid session id')


def _payload(script):
    assert script.startswith(EXECUTOR_PREFIX)
    return json.loads(script[len(EXECUTOR_PREFIX):])


class TestExecutorCommand:
    """Test executor command serialization."""

    def test_command_format(self):
        script = executor_command('setSessionName', {'name': 'Bstackdemo Test'})
        assert _payload(script) == {'action': 'setSessionName', 'arguments': {'name': 'Bstackdemo Test'}}

    def test_truncate_reason(self):
        assert truncate_reason(None) == ''
        assert truncate_reason('short') == 'short'
        long_reason = 'x' * 400
        assert len(truncate_reason(long_reason)) == MAX_REASON_LENGTH
        assert truncate_reason(long_reason).endswith('...')


class TestDiagnosticsReporter:
    """Test fire-and-forget status reporting."""

    def test_session_name(self, config, credentials, desktop_descriptor, fake_driver):
        reporter = DiagnosticsReporter(config, credentials, http=Mock())
        session = Session(fake_driver, desktop_descriptor)

        assert reporter.set_session_name(session, 'Bstackdemo Test on Chrome - Windows 10') is True
        assert _payload(fake_driver.scripts[0])['arguments']['name'] == 'Bstackdemo Test on Chrome - Windows 10'

    def test_status_via_executor(self, config, credentials, desktop_descriptor, fake_driver):
        http = Mock()
        reporter = DiagnosticsReporter(config, credentials, http=http)
        session = Session(fake_driver, desktop_descriptor)

        assert reporter.set_session_status(session, 'passed', 'all good') is True
        assert _payload(fake_driver.scripts[0]) == {
            'action': 'setSessionStatus',
            'arguments': {'status': 'passed', 'reason': 'all good'},
        }
        http.put.assert_not_called()

    def test_status_falls_back_to_rest_api(self, config, credentials, desktop_descriptor):
        http = Mock()
        reporter = DiagnosticsReporter(config, credentials, http=http)
        session = Session(BrokenDriver(session_id='abc123'), desktop_descriptor)

        assert reporter.set_session_status(session, 'failed', 'spinner stuck') is True

        http.put.assert_called_once()
        args, kwargs = http.put.call_args
        assert args[0] == f"{config.API_URL}/sessions/abc123.json"
        assert kwargs['json'] == {'status': 'failed', 'reason': 'spinner stuck'}
        assert kwargs['auth'] == ('test-user', 'test-access-key')

    def test_failures_never_raise(self, config, credentials, desktop_descriptor):
        http = Mock()
        http.put.side_effect = requests.exceptions.ConnectionError('offline')
        reporter = DiagnosticsReporter(config, credentials, http=http)
        session = Session(BrokenDriver(), desktop_descriptor)

        assert reporter.set_session_name(session, 'name') is False
        assert reporter.set_session_status(session, 'failed', 'reason') is False

    def test_transport_errors_never_raise(self, config, credentials, desktop_descriptor, fake_driver):
        def dropped(script, *args):
            raise MaxRetryError(None, '/wd/hub/session/x/execute/sync', ProtocolError('Connection aborted.'))

        fake_driver.execute_script = dropped
        http = Mock()
        reporter = DiagnosticsReporter(config, credentials, http=http)
        session = Session(fake_driver, desktop_descriptor)

        assert reporter.set_session_name(session, 'name') is False
        assert reporter.set_session_status(session, 'passed', 'ok') is True
        http.put.assert_called_once()

    def test_http_error_status_is_reported_as_failure(self, config, credentials, desktop_descriptor):
        response = Mock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError('401 Unauthorized')
        http = Mock()
        http.put.return_value = response
        reporter = DiagnosticsReporter(config, credentials, http=http)

        assert reporter.set_session_status(Session(BrokenDriver(), desktop_descriptor), 'passed', 'ok') is False

    def test_no_rest_fallback_without_credentials(self, config, desktop_descriptor):
        http = Mock()
        reporter = DiagnosticsReporter(config, None, http=http)

        assert reporter.set_session_status(Session(BrokenDriver(), desktop_descriptor), 'passed', 'ok') is False
        http.put.assert_not_called()
