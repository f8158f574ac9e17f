"""
Five-channel progress log used to report per-file sync outcomes.
"""
from typing import Protocol

from loguru import logger


class SyncLog(Protocol):
    """Write-only message channels. Implementations must not raise."""

    def success(self, *messages: str) -> None: ...

    def error(self, *messages: str) -> None: ...

    def debug(self, *messages: str) -> None: ...

    def pending(self, *messages: str) -> None: ...

    def watch(self, *messages: str) -> None: ...


class LoguruSyncLog:
    """SyncLog that forwards every channel to loguru."""

    def __init__(self, name: str = 'bucket_sync'):
        self._logger = logger.bind(sync=name)

    @staticmethod
    def _join(messages) -> str:
        return ' '.join(str(message) for message in messages)

    def success(self, *messages: str) -> None:
        self._logger.bind(channel='success').success(self._join(messages))

    def error(self, *messages: str) -> None:
        self._logger.bind(channel='error').error(self._join(messages))

    def debug(self, *messages: str) -> None:
        self._logger.bind(channel='debug').debug(self._join(messages))

    def pending(self, *messages: str) -> None:
        self._logger.bind(channel='pending').info(self._join(messages))

    def watch(self, *messages: str) -> None:
        self._logger.bind(channel='watch').info(self._join(messages))
