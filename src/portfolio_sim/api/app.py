from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

from ..errors import ConfigurationError, InputParseError, PortfolioSimError
from ..log import configure_logging
from ..montecarlo.config import SimulationConfig
from ..montecarlo.return_series import HistoricalReturns, ReturnSeries, parse_return_series
from ..montecarlo.simulator import MonteCarloSimulator
from ..reporting import format_success_rate


logger = logging.getLogger(__name__)

app = Flask(__name__)


def _series_from_payload(payload: Dict[str, Any], key: str) -> ReturnSeries:
    raw = payload.get(key)
    if isinstance(raw, str):
        return parse_return_series(raw.splitlines(), key)
    if isinstance(raw, list):
        return parse_return_series([str(item) for item in raw], key)
    raise InputParseError(f"'{key}' must be a list of returns or newline-delimited text", source=key)


def _histogram_payload(counts: Any, edges: Any) -> Dict[str, List[float]]:
    return {
        "counts": [int(c) for c in counts],
        "bin_edges": [float(e) for e in edges],
    }


def _simulate(payload: Dict[str, Any]) -> Dict[str, Any]:
    config_payload = payload.get("config") or {}
    if not isinstance(config_payload, dict):
        raise ConfigurationError("'config' must be an object")

    config = SimulationConfig.from_dict(config_payload)
    returns = HistoricalReturns(
        _series_from_payload(payload, "stocks"),
        _series_from_payload(payload, "bonds"),
    )

    results = MonteCarloSimulator(returns, config).run()
    summary = results.summarize()

    response: Dict[str, Any] = {
        "success": True,
        "summary": summary.to_dict(),
        "report": format_success_rate(summary),
        "details": {
            "config": config.to_dict(),
            "historical_periods": returns.sample_space_size,
        },
    }
    if payload.get("include_histogram"):
        response["histogram"] = _histogram_payload(*results.histogram(config.histogram_bins))
    if payload.get("include_final_values"):
        response["final_values"] = results.get_final_values().tolist()
    return response


@app.get("/health")
def health() -> Tuple[Any, int]:
    return jsonify({"ok": True, "service": "portfolio-sim-api"}), 200


@app.post("/api/v1/simulate")
def simulate() -> Tuple[Any, int]:
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"success": False, "error": "Request JSON body is required"}), 400
    if not isinstance(payload, dict):
        return jsonify({"success": False, "error": "Request JSON body must be an object"}), 400
    try:
        result = _simulate(payload)
    except PortfolioSimError as e:
        logger.info("Rejected simulation request: %s", e)
        return jsonify({"success": False, "error": str(e)}), 400
    return jsonify(result), 200


if __name__ == "__main__":
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    port = int(os.getenv("PORT", "8001"))
    app.run(host="0.0.0.0", port=port, debug=False)
