"""
Per-tool latency metrics accumulated on a run.

Metrics live on the in-memory run object; persisting them is the caller's
job (the executor saves after every step).
"""

import time
from typing import Awaitable, Callable, TypeVar

from state import Run, ToolMetric

T = TypeVar("T")

LogSink = Callable[[str], None]


def record_tool_metric(run: Run, tool_name: str, duration_ms: int) -> None:
    """Add one call of duration_ms to run.tools[tool_name]."""
    metric = run.tools.get(tool_name)
    if metric is None:
        run.tools[tool_name] = ToolMetric(calls=1, total_ms=duration_ms)
        return
    metric.calls += 1
    metric.total_ms += duration_ms


async def measure_tool(
    run: Run,
    tool_name: str,
    log: LogSink,
    fn: Callable[[], Awaitable[T]],
) -> T:
    """
    Await fn(), timing it and recording the result under tool_name.

    The metric and its log line are written whether fn succeeds or raises;
    a failure is re-raised unchanged after recording.
    """
    start = time.perf_counter()
    try:
        return await fn()
    finally:
        duration_ms = int(round((time.perf_counter() - start) * 1000))
        record_tool_metric(run, tool_name, duration_ms)
        log(f'[metrics] Tool "{tool_name}" executed in {duration_ms}ms')
