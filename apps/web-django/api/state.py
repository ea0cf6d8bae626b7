"""
In-process counters for the JSON metrics endpoint
"""

from __future__ import annotations

# 进程内计数（重启会清空；持久数据在数据库）
METRICS = {
    "sessions_total": 0,
    "hands_total": 0,
    "resets_total": 0,
    "rejected_total": 0,
    "error_total": 0,
    "last_latency_ms": None,
}
