"""Performance bottlenecks: measuring before optimizing."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: performance monitoring toolkit
interface Measurement {
  name: string;
  duration: number;
  timestamp: number;
}

class PerformanceMonitor {
  private measurements: Measurement[] = [];
  private observer?: PerformanceObserver;

  constructor(private slowThresholdMs = 100) {}

  start(): void {
    // Long tasks block the main thread for more than 50ms
    this.observer = new PerformanceObserver(list => {
      for (const entry of list.getEntries()) {
        this.record(entry.name, entry.duration);
      }
    });
    this.observer.observe({ entryTypes: ['longtask', 'resource', 'measure'] });
  }

  async measure<T>(name: string, fn: () => Promise<T>): Promise<T> {
    const startMark = `${name}-start`;
    performance.mark(startMark);
    try {
      return await fn();
    } finally {
      performance.measure(name, startMark);
    }
  }

  private record(name: string, duration: number): void {
    this.measurements.push({ name, duration, timestamp: Date.now() });
    if (duration > this.slowThresholdMs) {
      console.warn(`Slow operation: ${name} took ${duration.toFixed(1)}ms`);
    }
  }

  report(): Record<string, { count: number; p95: number }> {
    const grouped: Record<string, number[]> = {};
    for (const m of this.measurements) {
      (grouped[m.name] ??= []).push(m.duration);
    }
    return Object.fromEntries(
      Object.entries(grouped).map(([name, durations]) => {
        const sorted = [...durations].sort((a, b) => a - b);
        return [name, { count: sorted.length, p95: sorted[Math.floor(sorted.length * 0.95)] }];
      })
    );
  }

  stop(): void {
    this.observer?.disconnect();
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: performance monitoring toolkit
import cProfile
import functools
import io
import logging
import pstats
import statistics
import time
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, List

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    def __init__(self, slow_threshold_ms: float = 100.0):
        self.slow_threshold_ms = slow_threshold_ms
        self._timings: Dict[str, List[float]] = defaultdict(list)

    @contextmanager
    def measure(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self._timings[name].append(elapsed_ms)
            if elapsed_ms > self.slow_threshold_ms:
                logger.warning(f"Slow operation: {name} took {elapsed_ms:.1f}ms")

    def timed(self, func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with self.measure(func.__qualname__):
                return func(*args, **kwargs)

        return wrapper

    def report(self) -> Dict[str, Dict[str, float]]:
        summary = {}
        for name, samples in self._timings.items():
            ordered = sorted(samples)
            summary[name] = {
                "count": len(ordered),
                "mean_ms": statistics.fmean(ordered),
                "p95_ms": ordered[min(len(ordered) - 1, int(len(ordered) * 0.95))],
            }
        return summary


def profile(func, *args, top: int = 10, **kwargs):
    \"\"\"Run func under cProfile and log the most expensive calls.\"\"\"
    profiler = cProfile.Profile()
    result = profiler.runcall(func, *args, **kwargs)
    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats("cumulative").print_stats(top)
    logger.info(stream.getvalue())
    return result
"""

PERFORMANCE_BOTTLENECK = Pattern(
    id="performance-bottleneck",
    title="Performance Bottleneck",
    description=(
        "A systematic method for identifying and resolving performance bottlenecks "
        "through waterfall diagrams, load time analysis, and resource optimization."
    ),
    category=PatternCategory.PERFORMANCE,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-223020.svg",
    use_cases=[
        "Load time optimization",
        "Resource utilization",
        "Performance monitoring",
        "Bottleneck identification",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common Performance Issues",
            language="typescript",
            code="""\
// ❌ Common performance issues
class DataGrid {
  // Issue 1: Inefficient rendering
  render() {
    this.items.forEach(item => {
      const element = document.createElement('div');
      element.innerHTML = item.toString();
      this.container.appendChild(element);
    });
  }

  // Issue 2: Blocking operations
  processData(items: any[]) {
    for (const item of items) {
      const result = heavyCalculation(item);
      this.results.push(result);
    }
  }
}
""",
            explanation=(
                "Common performance issues include inefficient DOM operations, memory "
                "leaks, blocking operations, and unoptimized resource loading."
            ),
        ),
        CodeExample(
            title="Optimized Implementation",
            language="typescript",
            code="""\
// ✅ Optimized implementation
class DataGrid {
  // Efficient rendering with DocumentFragment
  render() {
    const fragment = document.createDocumentFragment();
    requestAnimationFrame(() => {
      this.items.forEach(item => {
        const element = document.createElement('div');
        element.textContent = item.toString();
        fragment.appendChild(element);
      });
      this.container.appendChild(fragment);
    });
  }

  // Non-blocking operations with chunking
  async processData(items: any[]) {
    const chunkSize = 100;
    for (let i = 0; i < items.length; i += chunkSize) {
      const chunk = items.slice(i, i + chunkSize);
      await new Promise(resolve => setTimeout(resolve, 0));
      this.results.push(...chunk.map(heavyCalculation));
      this.updateProgress(i / items.length);
    }
  }
}
""",
            explanation=(
                "This implementation uses efficient DOM operations, proper cleanup, "
                "non-blocking operations, and optimized resource loading."
            ),
        ),
    ],
    best_practices=[
        "Use performance profiling tools",
        "Implement efficient DOM operations",
        "Optimize resource loading",
        "Handle memory management",
        "Use non-blocking operations",
        "Monitor performance metrics",
        "Implement proper cleanup",
    ],
    common_pitfalls=[
        "Blocking main thread",
        "Memory leaks",
        "Unoptimized resource loading",
        "Inefficient DOM operations",
        "Missing performance monitoring",
        "Poor error handling",
        "No cleanup implementation",
    ],
)
