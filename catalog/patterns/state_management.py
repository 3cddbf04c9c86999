"""State management: tracking mutations, re-renders and stale caches."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: observable store with action history for debugging
type Listener<T> = (state: T, previous: T) => void;
type Reducer<T, A> = (state: T, action: A) => T;

interface HistoryEntry<T, A> {
  action: A;
  before: T;
  after: T;
  timestamp: number;
}

class Store<T, A extends { type: string }> {
  private state: T;
  private listeners = new Set<Listener<T>>();
  private history: HistoryEntry<T, A>[] = [];

  constructor(private reducer: Reducer<T, A>, initialState: T, private maxHistory = 50) {
    this.state = Object.freeze(initialState);
  }

  getState(): T {
    return this.state;
  }

  dispatch(action: A): void {
    const before = this.state;
    const after = Object.freeze(this.reducer(before, action));
    if (after === before) {
      return;
    }

    this.state = after;
    this.history.push({ action, before, after, timestamp: Date.now() });
    if (this.history.length > this.maxHistory) {
      this.history.shift();
    }
    this.listeners.forEach(listener => listener(after, before));
  }

  subscribe(listener: Listener<T>): () => void {
    this.listeners.add(listener);
    return () => this.listeners.delete(listener);
  }

  replay(): HistoryEntry<T, A>[] {
    return [...this.history];
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: observable store with action history for debugging
import logging
import time
from collections import deque
from dataclasses import dataclass, replace
from typing import Callable, Deque, Generic, List, TypeVar

S = TypeVar("S")

Listener = Callable[[S, S], None]


@dataclass(frozen=True)
class HistoryEntry(Generic[S]):
    action: str
    before: S
    after: S
    timestamp: float


class Store(Generic[S]):
    def __init__(self, initial_state: S, max_history: int = 50):
        self._state = initial_state
        self._listeners: List[Listener] = []
        self._history: Deque[HistoryEntry] = deque(maxlen=max_history)
        self.logger = logging.getLogger(__name__)

    @property
    def state(self) -> S:
        return self._state

    def dispatch(self, action: str, **changes) -> None:
        before = self._state
        # Frozen dataclasses force a new object on every change
        after = replace(before, **changes)
        if after == before:
            return

        self._state = after
        self._history.append(HistoryEntry(action, before, after, time.time()))
        self.logger.debug("State changed", extra={"action": action, "changes": changes})
        for listener in list(self._listeners):
            listener(after, before)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def history(self) -> List[HistoryEntry]:
        return list(self._history)
"""

STATE_MANAGEMENT = Pattern(
    id="state-management",
    title="State Management",
    description=(
        "A visual approach to debugging state management issues, tracking "
        "component re-renders, state mutations, and cache invalidation patterns."
    ),
    category=PatternCategory.STATE,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-222959.svg",
    use_cases=[
        "Complex state flows",
        "Component re-renders",
        "Cache invalidation",
        "State mutation tracking",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common State Management Issues",
            language="typescript",
            code="""\
// ❌ Common state management issues
class Component {
  // Issue 1: Direct state mutation
  updateUser(name: string) {
    this.state.user.name = name;
  }

  // Issue 2: No state immutability
  addTodo(todo: Todo) {
    this.state.todos.push(todo);
  }

  // Issue 3: Inconsistent updates
  async fetchUser() {
    const user = await api.getUser();
    this.state.user = user;
    // Preferences might be out of sync
  }
}
""",
            explanation=(
                "Common issues include direct state mutations, lack of immutability, "
                "inconsistent updates, and missing cleanup."
            ),
        ),
        CodeExample(
            title="Robust State Management",
            language="typescript",
            code="""\
// ✅ Robust state management
class Component {
  // Immutable state updates
  updateUser(name: string) {
    this.setState(state => ({
      user: state.user ? { ...state.user, name } : null
    }));
  }

  // Batch related updates
  async fetchUserWithPreferences() {
    const [user, preferences] = await Promise.all([
      api.getUser(),
      api.getUserPreferences()
    ]);
    this.setState({ user: { ...user, preferences } });
  }

  // Optimized re-renders
  shouldComponentUpdate(nextProps, nextState) {
    return !isEqual(this.state, nextState) || !isEqual(this.props, nextProps);
  }
}
""",
            explanation=(
                "This implementation uses immutable updates, batches related changes, "
                "includes proper cleanup, and optimizes re-renders."
            ),
        ),
    ],
    best_practices=[
        "Use immutable state updates",
        "Implement proper type safety",
        "Batch related state changes",
        "Add debugging capabilities",
        "Include state persistence",
        "Optimize component re-renders",
        "Handle cleanup properly",
    ],
    common_pitfalls=[
        "Direct state mutations",
        "Missing type safety",
        "Inconsistent state updates",
        "No performance optimization",
        "Memory leaks from missing cleanup",
        "Poor error handling",
        "Lack of debugging tools",
    ],
)
