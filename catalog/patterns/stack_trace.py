"""Stack trace analysis: locating the origin of runtime errors."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: error tracking with parsed stack frames
interface StackFrame {
  functionName: string;
  fileName: string;
  lineNumber: number;
  columnNumber: number;
}

interface ErrorReport {
  message: string;
  name: string;
  frames: StackFrame[];
  context: Record<string, unknown>;
  timestamp: string;
}

const FRAME_PATTERN = /at (?:(.+?) )?\\(?(.+?):(\\d+):(\\d+)\\)?$/;

class ErrorTracker {
  private static instance?: ErrorTracker;
  private reports: ErrorReport[] = [];

  static getInstance(): ErrorTracker {
    return (this.instance ??= new ErrorTracker());
  }

  parseStack(stack = ''): StackFrame[] {
    return stack
      .split('\\n')
      .slice(1)
      .map(line => FRAME_PATTERN.exec(line.trim()))
      .filter((match): match is RegExpExecArray => match !== null)
      .map(([, fn, file, line, column]) => ({
        functionName: fn ?? '<anonymous>',
        fileName: file,
        lineNumber: Number(line),
        columnNumber: Number(column)
      }));
  }

  handleError(error: unknown, context: Record<string, unknown> = {}): ErrorReport {
    const err = error instanceof Error ? error : new Error(String(error));
    const report: ErrorReport = {
      message: err.message,
      name: err.name,
      frames: this.parseStack(err.stack),
      context,
      timestamp: new Date().toISOString()
    };
    this.reports.push(report);
    // Application frames first; node_modules frames are rarely the cause
    const origin = report.frames.find(f => !f.fileName.includes('node_modules'));
    console.error(`${report.name}: ${report.message}`, { origin, context });
    return report;
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: error tracking with parsed stack frames
import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    filename: str
    lineno: int
    function: str
    line: Optional[str]


@dataclass
class ErrorReport:
    error_type: str
    message: str
    frames: List[Frame]
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def origin(self) -> Optional[Frame]:
        # Innermost frame that is not part of an installed package
        for frame in reversed(self.frames):
            if "site-packages" not in frame.filename:
                return frame
        return self.frames[-1] if self.frames else None


class ErrorTracker:
    def __init__(self):
        self.reports: List[ErrorReport] = []

    def capture(self, error: BaseException, **context) -> ErrorReport:
        frames = [
            Frame(f.filename, f.lineno, f.name, f.line)
            for f in traceback.extract_tb(error.__traceback__)
        ]
        report = ErrorReport(type(error).__name__, str(error), frames, context)
        self.reports.append(report)

        origin = report.origin
        logger.error(
            f"{report.error_type}: {report.message}",
            extra={
                "origin": f"{origin.filename}:{origin.lineno}" if origin else None,
                "context": context,
            },
        )
        if error.__cause__ is not None:
            logger.error(f"Caused by {type(error.__cause__).__name__}: {error.__cause__}")
        return report

    def install(self) -> None:
        \"\"\"Capture uncaught exceptions before the interpreter exits.\"\"\"
        previous = sys.excepthook

        def hook(exc_type, exc, tb):
            self.capture(exc)
            previous(exc_type, exc, tb)

        sys.excepthook = hook
"""

STACK_TRACE = Pattern(
    id="stack-trace",
    title="Stack Trace Analyzer",
    description=(
        "A structured approach to runtime error debugging, helping developers "
        "navigate complex stack traces, identify error sources, and implement "
        "error boundaries."
    ),
    category=PatternCategory.RUNTIME,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-223035.svg",
    use_cases=[
        "Error tracking",
        "Stack trace analysis",
        "Error boundaries",
        "Runtime debugging",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common Error Handling Issues",
            language="typescript",
            code="""\
// ❌ Common error handling issues
class Service {
  // Issue 1: Generic error handling
  async fetchData() {
    try {
      const response = await fetch('/api/data');
      return await response.json();
    } catch (error) {
      console.error('Error:', error);
    }
  }

  // Issue 2: Swallowing errors
  processItem(item: any) {
    try {
      return this.transform(item);
    } catch {
      return null;
    }
  }

  // Issue 3: Poor error information
  async saveData(data: any) {
    if (!this.validate(data)) {
      throw new Error('Invalid data');
    }
  }
}
""",
            explanation=(
                "Common issues include generic error handling, swallowing errors, "
                "missing error boundaries, and poor error information."
            ),
        ),
        CodeExample(
            title="Robust Error Handling",
            language="typescript",
            code="""\
// ✅ Robust error handling
class APIError extends Error {
  constructor(message: string, public status: number, public code: string) {
    super(message);
    this.name = 'APIError';
  }
}

class Service {
  async fetchData() {
    try {
      const response = await fetch('/api/data');
      if (!response.ok) {
        throw new APIError('API request failed', response.status, await response.text());
      }
      return await response.json();
    } catch (error) {
      // Track error with context, then rethrow for boundary handling
      ErrorTracker.getInstance().handleError(error, { endpoint: '/api/data', method: 'GET' });
      throw error;
    }
  }

  async processItems(items: Item[]) {
    const processed = new Set<string>();
    try {
      for (const item of items) {
        await this.process(item);
        processed.add(item.id);
      }
    } catch (error) {
      await this.rollback(Array.from(processed));
      throw error;
    }
  }
}
""",
            explanation=(
                "This implementation includes specific error types, proper error "
                "tracking, error boundaries, and cleanup handling."
            ),
        ),
    ],
    best_practices=[
        "Use specific error types",
        "Include error context",
        "Implement error boundaries",
        "Add error tracking",
        "Handle async errors",
        "Provide cleanup mechanisms",
        "Log error details",
    ],
    common_pitfalls=[
        "Generic error handling",
        "Swallowing errors",
        "Missing error boundaries",
        "Poor error information",
        "No error tracking",
        "Inconsistent error handling",
        "Missing cleanup on error",
    ],
)
