"""Lightweight Flask UI for computing circle bounding boxes and showing them on a map."""
from __future__ import annotations

import argparse
import math
import traceback
from pathlib import Path
from typing import Any, Mapping

from flask import Flask, jsonify, request, send_file

from cli import build_arg_parser, run_query
from circle_bbox.geo import Point, BBox
from circle_bbox.outputs import bboxes_to_geojson


UI_DIR = Path(__file__).resolve().parent / "web_ui"
INDEX_HTML_PATH = UI_DIR / "index.html"


def _fresh_args(base_args: argparse.Namespace) -> argparse.Namespace:
    return argparse.Namespace(**vars(base_args))


def _apply_payload(args: argparse.Namespace, payload: Mapping[str, Any]) -> argparse.Namespace:
    float_fields = ["lat", "lon", "radius_km"]

    for field in float_fields:
        if field in payload and payload[field] not in (None, ""):
            try:
                setattr(args, field, float(payload[field]))
            except (TypeError, ValueError) as e:
                raise ValueError(f"{field} must be a number: {payload[field]!r}") from e

    # the API only computes; file exports stay a CLI feature
    args.geojson = args.csv = args.pretty_png = args.manifest = False
    return args


def _json_safe(obj: Any) -> Any:
    # NaN/inf have no JSON spelling; browsers reject the bare tokens
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    return obj


def _result_geojson(result: dict[str, Any]) -> dict[str, Any]:
    bboxes = [BBox(Point(**b["min"]), Point(**b["max"])) for b in result["bboxes"]]
    return bboxes_to_geojson(bboxes, center=Point(**result["center"]), radius_km=result["radius_km"])


def create_app(base_args: argparse.Namespace | None = None) -> Flask:
    defaults = _fresh_args(base_args) if base_args else build_arg_parser().parse_args([])
    app = Flask(__name__)

    @app.get("/")
    def index():
        if INDEX_HTML_PATH.exists():
            return send_file(INDEX_HTML_PATH, mimetype="text/html")
        return "index.html not found", 500

    def _handle(payload: Mapping[str, Any]):
        try:
            args = _apply_payload(_fresh_args(defaults), payload)
            result = run_query(args)
            return jsonify(_json_safe({"status": "ok", "result": result, "geojson": _result_geojson(result)}))
        except Exception as e:  # noqa: BLE001
            traceback.print_exc()
            return jsonify({"status": "error", "message": str(e)}), 400

    @app.post("/api/bbox")
    def api_bbox_post():
        return _handle(request.get_json(force=True, silent=True) or {})

    @app.get("/api/bbox")
    def api_bbox_get():
        return _handle(request.args)

    return app


__all__ = ["create_app"]
