# apps/web_django/api/metrics.py
from __future__ import annotations

from django.http import HttpResponse
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    generate_latest,
)


# --- helpers: get_or_create，避免重复注册报错 ---
def _get_or_create_counter(name: str, doc: str, labels: list[str]):
    try:
        return Counter(name, doc, labels)
    except ValueError:
        # 已注册，直接复用（使用 REGISTRY 的内部映射）
        return REGISTRY._names_to_collectors[name]  # type: ignore[attr-defined]


def _get_or_create_hist(name: str, doc: str, labels: list[str]):
    try:
        return Histogram(name, doc, labels)
    except ValueError:
        return REGISTRY._names_to_collectors[name]  # type: ignore[attr-defined]


# --- API 通用指标 ---
API_LATENCY = _get_or_create_hist(
    "navigator_api_latency_seconds", "API latency", ["route", "method", "status"]
)
API_ERRORS = _get_or_create_counter(
    "navigator_api_errors_total", "API errors", ["route", "kind"]
)

# --- 会话/手牌指标 ---
SESSION_STARTS = _get_or_create_counter(
    "navigator_session_starts_total", "Session creation count", ["status"]
)
SESSION_RESETS = _get_or_create_counter(
    "navigator_session_resets_total", "Session reset count", ["state"]
)
HANDS_SUBMITTED = _get_or_create_counter(
    "navigator_hands_submitted_total", "Hands appended to a ledger", ["outcome", "result"]
)
ENTRIES_REJECTED = _get_or_create_counter(
    "navigator_entries_rejected_total", "Rejected score entries", ["reason"]
)


def observe_request(route: str, method: str, status: str, seconds: float):
    API_LATENCY.labels(route or "unknown", method or "GET", status or "200").observe(seconds)


def inc_api_error(route: str, kind: str):
    API_ERRORS.labels(route or "unknown", kind or "unknown").inc()


def inc_session_start(status: str = "success"):
    SESSION_STARTS.labels(status or "success").inc()


def inc_session_reset(state: str = "active"):
    SESSION_RESETS.labels(state or "active").inc()


def inc_hand_submitted(outcome: str, result: str):
    HANDS_SUBMITTED.labels(outcome or "unknown", result or "unknown").inc()


def inc_entry_rejected(reason: str):
    ENTRIES_REJECTED.labels(reason or "invalid").inc()


def prometheus_view(_request):
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
