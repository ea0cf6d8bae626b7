# packages/baccarat_core/chart.py
from __future__ import annotations

from typing import Any

from baccarat_core.config import EngineConfig
from baccarat_core.ledger import Ledger


def chart_series(ledger: Ledger, config: EngineConfig | None = None) -> dict[str, Any]:
    """Running-total series for the strategy chart (data only, no rendering).

    An empty ledger yields a single origin point so the chart always has a line.
    Axis domains widen past the configured window/limit when the data needs it.
    """
    cfg = config or EngineConfig.build()
    if ledger.count():
        points = [{"x": h.sequence_number, "y": h.running_total} for h in ledger]
    else:
        points = [{"x": 0, "y": 0}]
    extreme = max(abs(p["y"]) for p in points)
    y_lim = max(cfg.chart_y_limit, extreme)
    return {
        "points": points,
        "x_domain": [0, max(cfg.chart_window, ledger.count())],
        "y_domain": [-y_lim, y_lim],
        "baseline": 0,
    }


__all__ = ["chart_series"]
