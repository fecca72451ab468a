"""Flask application exposing tournaments as a small JSON API."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Flask, jsonify, request

from .engine import DEFAULT_TABLE, Payoffs
from .tournament import list_available_strategies, run_tournament

logger = logging.getLogger(__name__)


def _optional_int(value: Any) -> int | None:
    return int(value) if value not in (None, "") else None


def create_app() -> Flask:
    app = Flask(__name__)

    @app.get("/api/strategies")
    def api_strategies():
        return jsonify(
            {
                "strategies": list_available_strategies(),
                "payoffs": Payoffs().to_dict(),
            }
        )

    @app.post("/api/run")
    def api_run():
        payload: Dict[str, Any] = request.get_json(silent=True) or {}
        try:
            min_rounds = _optional_int(payload.get("min_rounds"))
            max_rounds = _optional_int(payload.get("max_rounds"))
            seed = _optional_int(payload.get("seed"))
            payoffs = Payoffs.from_rows(payload.get("payoffs") or DEFAULT_TABLE)

            selected = payload.get("strategies") or None
            exclude = payload.get("exclude") or None
            history = bool(payload.get("history", False))

            # Requests are served in-process; parallel runs belong to the CLI
            result = run_tournament(
                min_rounds=min_rounds,
                max_rounds=max_rounds,
                seed=seed,
                workers=1,
                payoffs=payoffs,
                only=selected,
                exclude=exclude,
                record_history=history,
            )
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        except TypeError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:  # pragma: no cover - generic safeguard
            logger.exception("Tournament run failed")
            return jsonify({"error": "Failed to run tournament", "details": str(exc)}), 500

        return jsonify(result)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
