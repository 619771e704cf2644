"""Shared utilities for performance benchmarks."""
from __future__ import annotations

import time
from typing import List, Tuple
from statistics import mean, median, stdev


class Timer:
    """Context manager for timing code blocks."""

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start


# =============================================================================
# Statistics
# =============================================================================

def get_time_stats(times: List[float]) -> Tuple[float, float, float, float, float]:
    """Returns (mean, median, stdev, min, max) in seconds."""
    if not times:
        return (0.0, 0.0, 0.0, 0.0, 0.0)
    return (
        mean(times),
        median(times),
        stdev(times) if len(times) > 1 else 0.0,
        min(times),
        max(times)
    )


# =============================================================================
# Formatting
# =============================================================================

def format_time_us(seconds: float) -> str:
    """Format time in microseconds: '12.3us'"""
    return f"{seconds * 1_000_000:.1f}us"


def format_time_ms(seconds: float) -> str:
    """Format time in milliseconds: '12.34ms'"""
    return f"{seconds * 1000:.2f}ms"


def print_section_header(title: str, width: int = 80):
    """Print section header with border."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_metric(label: str, value: str, indent: int = 2):
    """Print formatted metric: '  Label:             value'"""
    print(f"{' ' * indent}{label:<25} {value}")


def print_time_stats(label: str, times: List[float]):
    """Print mean/median/stdev/min/max for a list of timings."""
    avg, med, dev, lo, hi = get_time_stats(times)
    print_metric(f"{label} mean", format_time_us(avg))
    print_metric(f"{label} median", format_time_us(med))
    print_metric(f"{label} stdev", format_time_us(dev))
    print_metric(f"{label} range", f"{format_time_us(lo)} - {format_time_us(hi)}")
