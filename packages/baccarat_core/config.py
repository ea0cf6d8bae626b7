"""Environment-backed engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TREND_MARGIN = 5
DEFAULT_CHART_WINDOW = 75
DEFAULT_CHART_Y_LIMIT = 20


@dataclass(frozen=True)
class EngineConfig:
    trend_margin: int = DEFAULT_TREND_MARGIN
    chart_window: int = DEFAULT_CHART_WINDOW
    chart_y_limit: int = DEFAULT_CHART_Y_LIMIT

    @classmethod
    def build(cls) -> EngineConfig:
        return cls(
            trend_margin=_env_int("NAVIGATOR_TREND_MARGIN", DEFAULT_TREND_MARGIN),
            chart_window=_env_int("NAVIGATOR_CHART_WINDOW", DEFAULT_CHART_WINDOW),
            chart_y_limit=_env_int("NAVIGATOR_CHART_Y_LIMIT", DEFAULT_CHART_Y_LIMIT),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return int(default)
    try:
        value = int(raw.strip())
    except ValueError:
        return int(default)
    # 0 或负数没有意义，回退默认值
    return value if value >= 1 else int(default)


__all__ = ["EngineConfig"]
