"""
Tests for the lookup dispatcher.
"""

import asyncio
import threading
import time

import pytest

from keyword_domain_tool.classifier import Availability
from keyword_domain_tool.dispatcher import check_domains, dispatch, resolve_source
from keyword_domain_tool.sources import (
    FunctionSource,
    LookupSource,
    MockSource,
    RdapSource,
    WhoisSource,
    create_available_mock,
)


NAMES = [f"name{i}.com" for i in range(25)]


class ConcurrencyProbe(LookupSource):
    """Source that records the highest number of overlapping lookups."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    @property
    def name(self) -> str:
        return "probe"

    async def lookup(self, domain: str) -> str:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.01)
        self.active -= 1
        return "No match"


class TestDispatch:
    """Tests for the async dispatcher."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("workers", [1, 3, 10, 100])
    async def test_one_result_per_name(self, workers):
        """Every name gets exactly one result for any worker count."""
        source = MockSource()
        results = await dispatch(NAMES, source, workers)

        assert len(results) == len(NAMES)
        assert sorted(r.domain for r in results) == sorted(NAMES)
        assert sorted(source.calls) == sorted(NAMES)

    @pytest.mark.asyncio
    async def test_failure_is_isolated(self):
        """A failing lookup does not stop the others."""
        source = MockSource(fail_domains={"name3.com"})
        results = await dispatch(NAMES, source, 4)

        by_domain = {r.domain: r for r in results}
        assert len(by_domain) == len(NAMES)
        assert by_domain["name3.com"].failed
        assert "name3.com" in by_domain["name3.com"].error
        assert all(not r.failed for d, r in by_domain.items() if d != "name3.com")

    @pytest.mark.asyncio
    async def test_classifies_results(self):
        """Raw text is classified per name."""
        source = create_available_mock({"name1.com"})
        results = await dispatch(["name1.com", "name2.com"], source, 2)

        by_domain = {r.domain: r for r in results}
        assert by_domain["name1.com"].availability == Availability.AVAILABLE
        assert by_domain["name2.com"].availability == Availability.TAKEN
        assert by_domain["name1.com"].source == "mock"

    @pytest.mark.asyncio
    async def test_worker_count_bounds_concurrency(self):
        """No more lookups run at once than there are workers."""
        source = ConcurrencyProbe()
        await dispatch(NAMES, source, 5)

        assert source.peak == 5

    @pytest.mark.asyncio
    async def test_empty_input(self):
        results = await dispatch([], MockSource(), 3)

        assert results == []

    @pytest.mark.asyncio
    async def test_invalid_concurrency(self):
        with pytest.raises(ValueError):
            await dispatch(NAMES, MockSource(), 0)

    @pytest.mark.asyncio
    async def test_on_result_called_per_name(self):
        """The callback sees each result as it is produced."""
        seen = []
        results = await dispatch(NAMES, MockSource(), 3, on_result=seen.append)

        assert seen == results


class TestCheckDomains:
    """Tests for the blocking entry point."""

    def test_blocking_function_source(self):
        """Plain functions run in parallel threads."""
        threads = set()
        lock = threading.Lock()

        def lookup(domain: str) -> str:
            with lock:
                threads.add(threading.get_ident())
            time.sleep(0.02)
            return "Registrar: Example"

        results = check_domains(NAMES, source=lookup, workers=5)

        assert len(results) == len(NAMES)
        assert all(r.taken for r in results)
        assert all(r.source == "lookup" for r in results)
        assert len(threads) > 1

    def test_blocking_function_failure(self):
        """Exceptions from a plain function become failed results."""
        def lookup(domain: str) -> str:
            if domain == "name0.com":
                raise OSError("connection refused")
            return "no entries found"

        results = check_domains(NAMES[:5], source=lookup, workers=2)

        failed = [r for r in results if r.failed]
        assert [r.domain for r in failed] == ["name0.com"]
        assert failed[0].error == "connection refused"
        assert sum(1 for r in results if r.available) == 4

    def test_malformed_response_is_isolated(self):
        """A response the classifier cannot read fails only its own name."""
        def lookup(domain: str) -> str:
            if domain == "name0.com":
                return b"No match"
            return "No match"

        results = check_domains(NAMES[:5], source=lookup, workers=2)

        assert sorted(r.domain for r in results) == sorted(NAMES[:5])
        failed = [r for r in results if r.failed]
        assert [r.domain for r in failed] == ["name0.com"]
        assert failed[0].availability is None
        assert sum(1 for r in results if r.available) == 4

    def test_source_instance_not_closed(self):
        """Sources passed in by the caller stay usable."""
        source = MockSource()
        check_domains(NAMES[:2], source=source, workers=2)
        check_domains(NAMES[2:4], source=source, workers=2)

        assert len(source.calls) == 4

    def test_zero_workers_rejected(self):
        with pytest.raises(ValueError):
            check_domains(NAMES, source=MockSource(), workers=0)


class TestResolveSource:
    """Tests for source resolution."""

    def test_by_name(self):
        assert isinstance(resolve_source("whois", 3), WhoisSource)
        assert isinstance(resolve_source("rdap", 3, timeout=2.0), RdapSource)

    def test_timeout_passed(self):
        source = resolve_source("whois", 3, timeout=1.5)

        assert source.timeout == 1.5

    def test_callable(self):
        source = resolve_source(lambda d: "", 7)

        assert isinstance(source, FunctionSource)

    def test_instance_passthrough(self):
        mock = MockSource()

        assert resolve_source(mock, 1) is mock

    def test_unknown(self):
        with pytest.raises(ValueError):
            resolve_source("gopher", 1)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            resolve_source(42, 1)
