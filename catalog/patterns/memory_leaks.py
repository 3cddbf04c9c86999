"""Memory leaks: finding references that outlive their owners."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: memory-safe cache and subscription tracking
interface CacheOptions {
  maxSize?: number;
  ttl?: number;
}

class LRUCache<K, V> {
  private cache = new Map<K, { value: V; timestamp: number }>();
  private maxSize: number;
  private ttl: number;
  private cleanupTimer: ReturnType<typeof setInterval>;

  constructor(options: CacheOptions = {}) {
    this.maxSize = options.maxSize ?? 1000;
    this.ttl = options.ttl ?? 3600000;
    // Periodic cleanup to prevent unbounded growth
    this.cleanupTimer = setInterval(() => this.cleanup(), 60000);
  }

  set(key: K, value: V): void {
    if (this.cache.size >= this.maxSize) {
      const oldestKey = this.cache.keys().next().value;
      this.cache.delete(oldestKey);
    }
    this.cache.set(key, { value, timestamp: Date.now() });
  }

  get(key: K): V | undefined {
    const item = this.cache.get(key);
    if (!item) return undefined;
    if (Date.now() - item.timestamp > this.ttl) {
      this.cache.delete(key);
      return undefined;
    }
    return item.value;
  }

  private cleanup(): void {
    const now = Date.now();
    for (const [key, item] of this.cache.entries()) {
      if (now - item.timestamp > this.ttl) {
        this.cache.delete(key);
      }
    }
  }

  destroy(): void {
    clearInterval(this.cleanupTimer);
    this.cache.clear();
  }
}

class SubscriptionManager {
  private subscriptions = new Set<() => void>();

  add(target: EventTarget, event: string, handler: EventListener): void {
    target.addEventListener(event, handler);
    this.subscriptions.add(() => target.removeEventListener(event, handler));
  }

  dispose(): void {
    this.subscriptions.forEach(unsubscribe => unsubscribe());
    this.subscriptions.clear();
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: memory leak prevention in a data processing pipeline
import gc
import logging
import time
import tracemalloc
import weakref
from collections import OrderedDict
from typing import Any, Callable, Optional


class BoundedCache:
    \"\"\"LRU cache with a size limit and per-entry TTL.\"\"\"

    def __init__(self, max_size: int = 1000, ttl: float = 3600.0):
        self._data: "OrderedDict[str, tuple[float, Any]]" = OrderedDict()
        self.max_size = max_size
        self.ttl = ttl

    def set(self, key: str, value: Any) -> None:
        if key in self._data:
            self._data.move_to_end(key)
        self._data[key] = (time.monotonic(), value)
        while len(self._data) > self.max_size:
            self._data.popitem(last=False)

    def get(self, key: str) -> Optional[Any]:
        entry = self._data.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if time.monotonic() - stored_at > self.ttl:
            del self._data[key]
            return None
        self._data.move_to_end(key)
        return value


class CallbackRegistry:
    \"\"\"Hold callbacks weakly so listeners never keep their owners alive.\"\"\"

    def __init__(self):
        self._callbacks = weakref.WeakSet()

    def register(self, callback: Callable) -> None:
        self._callbacks.add(callback)

    def fire(self, *args) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class MemoryMonitor:
    def __init__(self, threshold_mb: float = 500.0):
        self.threshold_mb = threshold_mb
        self.logger = logging.getLogger(__name__)
        tracemalloc.start()

    def check(self) -> None:
        current, peak = tracemalloc.get_traced_memory()
        current_mb = current / 1024 / 1024
        if current_mb > self.threshold_mb:
            snapshot = tracemalloc.take_snapshot()
            top = snapshot.statistics("lineno")[:5]
            self.logger.warning(
                "Memory above threshold",
                extra={"current_mb": current_mb, "top": [str(s) for s in top]},
            )
            gc.collect()
"""

MEMORY_LEAKS = Pattern(
    id="memory-leaks",
    title="Memory Leaks 101",
    description=(
        "A systematic approach to identifying and fixing memory leaks through heap "
        "snapshot analysis, memory usage visualization, and common leak pattern "
        "detection."
    ),
    category=PatternCategory.PERFORMANCE,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-224808.svg",
    use_cases=[
        "Long-running web applications",
        "Single-page applications (SPAs)",
        "Real-time data processing systems",
        "Applications with dynamic component loading",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common Memory Leak Patterns",
            language="typescript",
            code="""\
// ❌ Common memory leak patterns
class DataComponent {
  private eventHandlers = new Set();
  private cache = {};

  constructor() {
    // Issue 1: Unbounded cache growth
    this.cache = {};

    // Issue 2: Event listener not removed
    window.addEventListener('resize', this.handleResize);

    // Issue 3: Interval not cleared
    setInterval(this.fetchData, 5000);
  }

  handleResize = () => {
    // Handle resize
  };

  fetchData = () => {
    this.cache[Date.now()] = 'data';
  };
}
""",
            explanation=(
                "Common memory leaks include unbounded caches, uncleared intervals, "
                "uncleaned event listeners, and closure references."
            ),
        ),
        CodeExample(
            title="Memory-Safe Implementation",
            language="typescript",
            code="""\
// ✅ Memory-safe implementation
class DataComponent {
  private cleanups = new Set<() => void>();
  private cache = new LRUCache<string, string>({ maxSize: 100, ttl: 3600000 });
  private intervalId?: number;

  constructor() {
    const handler = this.handleResize;
    window.addEventListener('resize', handler);
    this.cleanups.add(() => window.removeEventListener('resize', handler));

    this.intervalId = window.setInterval(this.fetchData, 5000);
  }

  handleResize = () => {
    // Handle resize
  };

  fetchData = () => {
    this.cache.set(Date.now().toString(), 'data');
  };

  destroy(): void {
    this.cleanups.forEach(cleanup => cleanup());
    this.cleanups.clear();
    if (this.intervalId) {
      clearInterval(this.intervalId);
    }
    this.cache.destroy();
  }
}
""",
            explanation=(
                "This implementation uses bounded caches, tracks and cleans up event "
                "listeners, and properly manages intervals."
            ),
        ),
    ],
    best_practices=[
        "Use WeakMap/WeakSet for caching object references",
        "Implement size limits and TTL for caches",
        "Track and clean up all event listeners",
        "Clear intervals and timeouts on component destruction",
        "Use weak references for event callbacks",
        "Implement proper cleanup methods",
        "Monitor memory usage in development",
    ],
    common_pitfalls=[
        "Unbounded caches leading to memory growth",
        "Uncleaned event listeners in SPAs",
        "Forgotten setInterval cleanup",
        "Circular references in data structures",
        "Closure variables keeping references alive",
        "Not implementing proper cleanup methods",
    ],
)
