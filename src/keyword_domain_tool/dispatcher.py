"""
Lookup dispatcher

Fans domain names out to a fixed pool of worker tasks and collects
exactly one LookupResult per name:
1. Every name is queued before any worker starts
2. Each worker pulls the next name, awaits the source, classifies the text
3. A failed lookup is recorded on its result and the worker moves on
4. The caller gets the results once the queue is drained and every
   worker has exited

Results are in completion order, not input order. There is no retry and
no cancellation; a hung lookup holds up the whole batch until the
source's own timeout fires.
"""

import asyncio
import logging
import time
from typing import Callable, List, Optional, Sequence, Union

from .classifier import LookupResult, classify_lookup
from .config import config
from .sources import FunctionSource, LookupSource, get_source

logger = logging.getLogger(__name__)

ResultCallback = Callable[[LookupResult], None]


async def dispatch(
    names: Sequence[str],
    source: LookupSource,
    concurrency: int,
    on_result: Optional[ResultCallback] = None,
) -> List[LookupResult]:
    """
    Look up every name with a bounded pool of workers.

    Args:
        names: Domain names to check
        source: Lookup source shared by all workers
        concurrency: Number of workers (at least 1)
        on_result: Optional callback invoked as each result is produced

    Returns:
        One LookupResult per name, in completion order

    Raises:
        ValueError: If concurrency is below 1
    """
    if concurrency < 1:
        raise ValueError(f"Concurrency must be at least 1, got {concurrency}")

    queue: asyncio.Queue = asyncio.Queue()
    for name in names:
        queue.put_nowait(name)

    results: List[LookupResult] = []

    async def worker(worker_id: int) -> None:
        while True:
            try:
                name = queue.get_nowait()
            except asyncio.QueueEmpty:
                return

            started_at = time.monotonic()
            try:
                text = await source.lookup(name)
                result = classify_lookup(name, raw_text=text, source=source.name, started_at=started_at)
            except Exception as e:
                logger.warning(f"Lookup failed for {name}: {e}")
                result = classify_lookup(name, error=e, source=source.name, started_at=started_at)
            else:
                logger.debug(f"[worker {worker_id}] {name}: {result.availability.value}")

            results.append(result)
            if on_result is not None:
                on_result(result)

    worker_count = min(concurrency, len(names))
    logger.info(f"Checking {len(names)} domains with {worker_count} workers via {source.name}")

    await asyncio.gather(*[worker(i) for i in range(worker_count)])

    failed = sum(1 for r in results if r.failed)
    logger.info(f"Finished {len(results)} lookups ({failed} failed)")
    return results


def resolve_source(
    source: Union[LookupSource, Callable[[str], str], str, None],
    workers: int,
    timeout: Optional[float] = None,
) -> LookupSource:
    """
    Turn a source name, blocking function or source instance into a source.

    Plain callables get a thread pool with one thread per worker.
    """
    if isinstance(source, LookupSource):
        return source
    if source is None:
        source = config.lookup.source
    if isinstance(source, str):
        kwargs = {"timeout": timeout} if timeout and source != "mock" else {}
        return get_source(source, **kwargs)
    if callable(source):
        return FunctionSource(source, max_workers=workers)
    raise TypeError(f"Unsupported lookup source: {source!r}")


def check_domains(
    names: Sequence[str],
    source: Union[LookupSource, Callable[[str], str], str, None] = None,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
    on_result: Optional[ResultCallback] = None,
) -> List[LookupResult]:
    """
    Blocking entry point: check every name and return once all are done.

    Args:
        names: Domain names to check
        source: LookupSource, blocking lookup function, or source name
            (defaults to config.lookup.source)
        workers: Worker count (defaults to config.lookup.workers)
        timeout: Per-request transport timeout for named sources
        on_result: Optional per-result callback

    Returns:
        One LookupResult per name, in completion order
    """
    if workers is None:
        workers = config.lookup.workers
    lookup_source = resolve_source(source, workers, timeout)
    owns_source = lookup_source is not source

    async def run() -> List[LookupResult]:
        try:
            return await dispatch(names, lookup_source, workers, on_result=on_result)
        finally:
            if owns_source:
                await lookup_source.close()

    return asyncio.run(run())
