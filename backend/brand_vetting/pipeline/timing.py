"""
Timing Utilities for Latency Instrumentation

Provides context managers and utilities for logging execution times
of pipeline nodes and evidence queries.
"""

import functools
import logging
import time
from contextlib import asynccontextmanager, contextmanager
from typing import Any, Callable, Optional

logger = logging.getLogger("brand_vetting.timing")


def log_timing(node_name: str, action: str, duration_ms: Optional[float] = None):
    """Log a timing event in standard format."""
    if duration_ms is not None:
        logger.info("[TIMING] %s: %s — duration=%.0fms", node_name, action, duration_ms)
    else:
        logger.info("[TIMING] %s: %s", node_name, action)


@asynccontextmanager
async def async_timer(node_name: str, action: str = "OPERATION"):
    """Async context manager for timing operations."""
    log_timing(node_name, f"{action} START")
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        log_timing(node_name, f"{action} END", duration_ms)


def timed_node(node_name: str):
    """Decorator for timing synchronous graph nodes."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                log_timing(node_name, "NODE", (time.perf_counter() - start) * 1000)
        return wrapper
    return decorator


def timed_async(node_name: str):
    """Decorator for timing async graph nodes."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            async with async_timer(node_name, "NODE"):
                return await func(*args, **kwargs)
        return wrapper
    return decorator


class StepTimer:
    """
    Utility class for timing multiple steps within one request.

    Usage:
        timer = StepTimer("brand_vetting")
        with timer.step("validate"):
            validate()
        async with timer.async_step("graph"):
            await graph.ainvoke(state)
        timer.summary()
    """

    def __init__(self, node_name: str):
        self.node_name = node_name
        self.steps: dict[str, float] = {}
        self.start_time = time.perf_counter()

    @contextmanager
    def step(self, step_name: str):
        """Time a single step."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            self.steps[step_name] = duration_ms
            log_timing(self.node_name, step_name, duration_ms)

    @asynccontextmanager
    async def async_step(self, step_name: str):
        """Time a single async step."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            self.steps[step_name] = duration_ms
            log_timing(self.node_name, step_name, duration_ms)

    def summary(self) -> float:
        """Log summary of all steps."""
        total_ms = (time.perf_counter() - self.start_time) * 1000
        log_timing(self.node_name, "TOTAL", total_ms)
        return total_ms
