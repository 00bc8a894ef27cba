"""
BrowserStack Diagnostics Channel

FLOW OVERVIEW
- set_session_name(session, name)
  • Send a `browserstack_executor: setSessionName` command through the session.
- set_session_status(session, status, reason)
  • Send `setSessionStatus`; if the in-session channel fails (e.g. the browser
    already died), fall back to the Automate REST API.
- Every call is fire-and-forget: failures are logged and never raised, so
  reporting can not mask the scenario's own result.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests
from selenium.common.exceptions import WebDriverException
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from ..models.capability import Credentials

# Raised by execute_script when the command fails or the grid connection drops
CHANNEL_ERRORS = (WebDriverException, Urllib3HTTPError, OSError)

EXECUTOR_PREFIX = 'browserstack_executor: '
MAX_REASON_LENGTH = 255


def executor_command(action: str, arguments: Dict[str, Any]) -> str:
    """Serialize an executor command for execute_script."""
    return EXECUTOR_PREFIX + json.dumps({'action': action, 'arguments': arguments})


def truncate_reason(reason: Optional[str]) -> str:
    reason = reason or ''
    if len(reason) <= MAX_REASON_LENGTH:
        return reason
    return reason[:MAX_REASON_LENGTH - 3] + '...'


class DiagnosticsReporter:
    """Reports session metadata and final status to BrowserStack."""

    def __init__(self, config, credentials: Optional[Credentials] = None, http=None):
        self.config = config
        self.credentials = credentials
        self.http = http or requests
        self.logger = logging.getLogger(__name__)

    def set_session_name(self, session, name: str) -> bool:
        """
        Name the session in the Automate dashboard.

        Returns:
            True if the grid accepted the command
        """
        try:
            session.execute_script(executor_command('setSessionName', {'name': name}))
            self.logger.info(f"Session name set: {name}")
            return True
        except CHANNEL_ERRORS as e:
            self.logger.warning(f"Could not set session name '{name}': {e}")
            return False

    def set_session_status(self, session, status: str, reason: str) -> bool:
        """
        Mark the session passed/failed.

        Args:
            session: Session the status applies to
            status: 'passed' or 'failed'
            reason: Free-text reason, truncated to the vendor limit

        Returns:
            True if either channel accepted the status
        """
        reason = truncate_reason(reason)
        try:
            session.execute_script(
                executor_command('setSessionStatus', {'status': status, 'reason': reason})
            )
            self.logger.info(f"Session status set to {status}")
            return True
        except CHANNEL_ERRORS as e:
            self.logger.warning(f"Executor channel failed for session status, trying REST API: {e}")
        return self._set_status_via_api(session.session_id, status, reason)

    def _set_status_via_api(self, session_id: Optional[str], status: str, reason: str) -> bool:
        if not session_id or self.credentials is None:
            self.logger.warning("Cannot report session status via REST API: no session id or credentials")
            return False

        url = f"{self.config.API_URL}/sessions/{session_id}.json"
        try:
            response = self.http.put(
                url,
                json={'status': status, 'reason': reason},
                auth=(self.credentials.username, self.credentials.access_key),
                timeout=self.config.REST_TIMEOUT,
            )
            response.raise_for_status()
            self.logger.info(f"Session {session_id} status set to {status} via REST API")
            return True
        except requests.exceptions.RequestException as e:
            self.logger.warning(f"REST API status update failed for session {session_id}: {e}")
            return False
