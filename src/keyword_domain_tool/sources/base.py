"""
Base protocol for lookup sources

A lookup source answers "what does the directory know about this name"
with raw text. The dispatcher treats every source as an opaque call and
classifies the text itself.
"""

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional


class SourceError(Exception):
    """Base exception for lookup source errors."""
    pass


class SourceTimeoutError(SourceError):
    """The directory server did not answer in time."""
    pass


class SourceConnectionError(SourceError):
    """Could not reach the directory server."""
    pass


class SourceResponseError(SourceError):
    """The directory server answered with something unusable."""
    pass


class LookupSource(ABC):
    """
    Abstract base class for lookup sources.

    Sources must implement lookup() for a single domain. They may hold
    connections or thread pools; close() releases them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name (e.g., 'whois', 'rdap')."""
        pass

    @abstractmethod
    async def lookup(self, domain: str) -> str:
        """
        Look up a single domain.

        Args:
            domain: Fully formed domain name (e.g., "onetwo.com")

        Returns:
            Raw response text

        Raises:
            SourceError: On transport or protocol failures
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        pass

    async def __aenter__(self) -> "LookupSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class FunctionSource(LookupSource):
    """
    Adapts a blocking lookup function.

    Each call runs in a thread pool sized to the worker count, so every
    dispatcher worker can block on its own lookup at the same time.
    """

    def __init__(
        self,
        func: Callable[[str], str],
        max_workers: int = 10,
        name: Optional[str] = None,
    ):
        """
        Initialize function source.

        Args:
            func: Blocking callable returning raw text for a domain
            max_workers: Threads available for concurrent calls
            name: Optional display name (defaults to the function name)
        """
        self._func = func
        self._name = name or getattr(func, "__name__", "function")
        self._max_workers = max_workers
        self._executor = None

    @property
    def name(self) -> str:
        return self._name

    def _get_executor(self) -> ThreadPoolExecutor:
        """Lazy initialization of the thread pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="lookup",
            )
        return self._executor

    async def lookup(self, domain: str) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._get_executor(), self._func, domain)

    async def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None
