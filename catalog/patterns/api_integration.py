"""API integration: request/response debugging with timeouts and retries."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: API client with timeouts, retries and typed errors
interface RequestConfig {
  baseURL: string;
  timeout?: number;
  retries?: number;
}

class APIError extends Error {
  constructor(message: string, public status: number, public body: string) {
    super(message);
    this.name = 'APIError';
  }
}

class APIClient {
  private timeout: number;
  private retries: number;

  constructor(private config: RequestConfig) {
    this.timeout = config.timeout ?? 5000;
    this.retries = config.retries ?? 3;
  }

  async get<T>(path: string): Promise<T> {
    return this.request<T>(path, { method: 'GET' });
  }

  private async request<T>(path: string, init: RequestInit): Promise<T> {
    let lastError: unknown;

    for (let attempt = 0; attempt < this.retries; attempt++) {
      const controller = new AbortController();
      const timer = setTimeout(() => controller.abort(), this.timeout);

      try {
        const response = await fetch(`${this.config.baseURL}${path}`, {
          ...init,
          signal: controller.signal
        });
        if (!response.ok) {
          throw new APIError('Request failed', response.status, await response.text());
        }
        return (await response.json()) as T;
      } catch (error) {
        lastError = error;
        // Client errors are not retried
        if (error instanceof APIError && error.status < 500) {
          throw error;
        }
        await new Promise(r => setTimeout(r, 1000 * Math.pow(2, attempt)));
      } finally {
        clearTimeout(timer);
      }
    }
    throw lastError;
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: API client with timeouts, retries and typed errors
import logging
import time
from typing import Any, Dict, Optional

import requests


class APIError(Exception):
    def __init__(self, message: str, status: int, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class APIClient:
    def __init__(self, base_url: str, timeout: float = 5.0, retries: int = 3):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self.session = requests.Session()
        self.logger = logging.getLogger(__name__)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        last_error: Optional[Exception] = None

        for attempt in range(self.retries):
            try:
                response = self.session.request(
                    method, url, timeout=self.timeout, **kwargs
                )
                if response.status_code >= 400:
                    raise APIError("Request failed", response.status_code, response.text)
                return response.json()
            except APIError as error:
                # Client errors are not retried
                if error.status < 500:
                    raise
                last_error = error
            except requests.RequestException as error:
                last_error = error

            delay = 2 ** attempt
            self.logger.warning(
                "Request failed, retrying",
                extra={"url": url, "attempt": attempt + 1, "delay": delay},
            )
            time.sleep(delay)

        raise last_error
"""

API_INTEGRATION = Pattern(
    id="api-integration",
    title="API Integration",
    description=(
        "A comprehensive debugging flow for API integrations, focusing on "
        "request/response cycles, error handling patterns, and timeout/retry "
        "strategies."
    ),
    category=PatternCategory.INTEGRATION,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-222949.svg",
    use_cases=[
        "Complex API integrations",
        "Error handling strategies",
        "Request/response debugging",
        "Timeout and retry patterns",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common API Integration Issues",
            language="typescript",
            code="""\
// ❌ Common API integration issues
async function fetchUserData(userId: string) {
  // Issue 1: No error handling
  const response = await fetch(`/api/users/${userId}`);
  const data = await response.json();

  // Issue 2: No timeout handling
  const preferences = await fetch(`/api/users/${userId}/preferences`);

  // Issue 3: No retry logic
  if (!response.ok) {
    throw new Error('Request failed');
  }

  return data;
}
""",
            explanation=(
                "Common issues include missing error handling, no timeout handling, "
                "lack of retry logic, and no request cancellation."
            ),
        ),
        CodeExample(
            title="Robust API Integration",
            language="typescript",
            code="""\
// ✅ Robust API integration
async function fetchUserData(userId: string) {
  const controller = new AbortController();
  const timeout = setTimeout(() => controller.abort(), 5000);

  try {
    const [userResponse, preferencesResponse] = await Promise.all([
      fetch(`/api/users/${userId}`, { signal: controller.signal }),
      fetch(`/api/users/${userId}/preferences`, { signal: controller.signal })
    ]);

    if (!userResponse.ok) {
      throw new Error(`User request failed: ${userResponse.status}`);
    }
    if (!preferencesResponse.ok) {
      throw new Error(`Preferences request failed: ${preferencesResponse.status}`);
    }

    const [user, preferences] = await Promise.all([
      userResponse.json(),
      preferencesResponse.json()
    ]);
    return { user, preferences };
  } catch (error) {
    if (error instanceof Error && error.name === 'AbortError') {
      throw new Error('Request timeout');
    }
    console.error('API request failed:', { userId, error });
    throw error;
  } finally {
    clearTimeout(timeout);
  }
}
""",
            explanation=(
                "This implementation includes timeout handling, parallel requests, "
                "proper error handling, and request cancellation."
            ),
        ),
    ],
    best_practices=[
        "Implement proper error handling with specific error types",
        "Use timeouts for all requests",
        "Implement retry logic with exponential backoff",
        "Add request/response logging",
        "Use request cancellation",
        "Implement caching where appropriate",
        "Handle rate limiting and backoff",
    ],
    common_pitfalls=[
        "Missing error handling",
        "No timeout implementation",
        "Lack of retry logic",
        "Poor logging practices",
        "Missing request cancellation",
        "Not handling rate limits",
        "Inadequate response validation",
    ],
)
