"""Fetch article pages with a headless browser, recording every attempt."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Sequence

try:
    from playwright.sync_api import (  # type: ignore
        Browser,
        Error as PlaywrightError,
        TimeoutError as PlaywrightTimeoutError,
        sync_playwright,
    )
except ImportError as exc:  # pragma: no cover - surfacing missing dependency
    raise SystemExit(
        "Missing dependency 'playwright'. Install with pip install playwright "
        "&& playwright install"
    ) from exc

from config_loader import DEFAULT_SETTINGS

WaitUntilLiteral = Literal["commit", "domcontentloaded", "load", "networkidle"]
DEFAULT_TIMEOUT_MS = 60_000

FetchAttemptConfig = tuple[WaitUntilLiteral, int]

FETCH_ATTEMPTS: tuple[FetchAttemptConfig, ...] = (
    ("load", DEFAULT_TIMEOUT_MS // 2),
    ("domcontentloaded", DEFAULT_TIMEOUT_MS),
    ("networkidle", int(DEFAULT_TIMEOUT_MS * 1.5)),
)
ACCEPT_HEADER = "text/html,application/xhtml+xml"

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page cannot be fetched."""


def _empty_attempt_list() -> list["FetchAttemptResult"]:
    return []


@dataclass(slots=True)
class FetchAttemptResult:
    """Outcome and metadata for a single Playwright fetch attempt."""

    attempt: int
    wait_until: WaitUntilLiteral
    timeout_ms: int
    status: Literal["success", "timeout", "http_error", "error"]
    elapsed_ms: Optional[int] = None
    message: Optional[str] = None


@dataclass(slots=True)
class FetchResult:
    """Fetched HTML plus the attempts it took to get it."""

    url: str
    html: str
    attempts: list[FetchAttemptResult] = field(default_factory=_empty_attempt_list)


@contextmanager
def _launch_browser() -> Iterator[Browser]:
    """Context manager that yields a headless Chromium browser instance."""

    with sync_playwright() as playwright:  # type: ignore[misc]
        browser: Browser = playwright.chromium.launch(headless=True)
        try:
            yield browser
        finally:
            browser.close()


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


def _record(
    url: str, records: list[FetchAttemptResult], record: FetchAttemptResult
) -> None:
    records.append(record)
    logger.debug(
        "Fetch attempt %d for %s: wait_until=%s status=%s elapsed_ms=%s%s",
        record.attempt,
        url,
        record.wait_until,
        record.status,
        record.elapsed_ms,
        f" ({record.message})" if record.message else "",
    )


def fetch_with_browser(
    browser: Browser,
    url: str,
    *,
    user_agent: str = DEFAULT_SETTINGS["user_agent"],
    attempts: Sequence[FetchAttemptConfig] = FETCH_ATTEMPTS,
) -> FetchResult:
    """Load ``url`` in ``browser`` and return the rendered HTML.

    Timeouts move on to the next wait strategy. An HTTP error status or any
    other browser failure stops immediately with ``FetchError``.
    """

    attempt_records: list[FetchAttemptResult] = []
    for attempt_index, (wait_until, timeout_ms) in enumerate(attempts, start=1):
        page = browser.new_page(
            user_agent=user_agent,
            extra_http_headers={"accept": ACCEPT_HEADER},
        )
        start_time = time.perf_counter()
        try:
            response = page.goto(url, wait_until=wait_until, timeout=timeout_ms)
            if response is not None and not response.ok:
                message = f"Fetch failed: {response.status} {response.status_text}"
                _record(
                    url,
                    attempt_records,
                    FetchAttemptResult(
                        attempt=attempt_index,
                        wait_until=wait_until,
                        timeout_ms=timeout_ms,
                        status="http_error",
                        elapsed_ms=_elapsed_ms(start_time),
                        message=message,
                    ),
                )
                raise FetchError(message)
            html = page.content()
            _record(
                url,
                attempt_records,
                FetchAttemptResult(
                    attempt=attempt_index,
                    wait_until=wait_until,
                    timeout_ms=timeout_ms,
                    status="success",
                    elapsed_ms=_elapsed_ms(start_time),
                ),
            )
            return FetchResult(url=url, html=html, attempts=attempt_records)
        except PlaywrightTimeoutError as exc:
            _record(
                url,
                attempt_records,
                FetchAttemptResult(
                    attempt=attempt_index,
                    wait_until=wait_until,
                    timeout_ms=timeout_ms,
                    status="timeout",
                    elapsed_ms=_elapsed_ms(start_time),
                    message=str(exc),
                ),
            )
        except PlaywrightError as exc:
            _record(
                url,
                attempt_records,
                FetchAttemptResult(
                    attempt=attempt_index,
                    wait_until=wait_until,
                    timeout_ms=timeout_ms,
                    status="error",
                    elapsed_ms=_elapsed_ms(start_time),
                    message=str(exc),
                ),
            )
            raise FetchError(f"Fetch failed: {exc}") from exc
        finally:
            page.close()

    last_message = attempt_records[-1].message if attempt_records else None
    raise FetchError(
        f"Fetch failed: timed out after {len(attempt_records)} attempts"
        + (f" ({last_message})" if last_message else "")
    )


def fetch_html(
    url: str,
    *,
    user_agent: str = DEFAULT_SETTINGS["user_agent"],
    attempts: Sequence[FetchAttemptConfig] = FETCH_ATTEMPTS,
) -> str:
    """Launch a browser, fetch ``url`` and return its HTML."""

    with _launch_browser() as browser:
        result = fetch_with_browser(
            browser, url, user_agent=user_agent, attempts=attempts
        )
    return result.html


__all__ = [
    "FETCH_ATTEMPTS",
    "FetchAttemptResult",
    "FetchError",
    "FetchResult",
    "fetch_html",
    "fetch_with_browser",
]
