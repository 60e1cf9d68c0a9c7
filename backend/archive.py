import logging

import requests

from schemas import ParsedResult

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """The archive endpoint did not accept the result."""


class ArchiveClient:
    def __init__(self, url, timeout=10, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self):
        self.session.close()

    @property
    def enabled(self):
        return bool(self.url)

    def send(self, result: ParsedResult):
        """POSTs the result as JSON. Returns False when no archive URL is set."""
        if not self.enabled:
            logger.info("No archive URL configured, skipping archive")
            return False

        try:
            response = self.session.post(
                self.url,
                json=result.model_dump(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ArchiveError(f"Failed to archive result: {e}") from e

        logger.info("Archived result (%d questions) to %s", len(result.questions), self.url)
        return True
