#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Circle bounding box calculator: (lat, lon, radius km) -> lat/lon aligned boxes

1) Validate the center point and radius
2) Compute one box, or two when the area crosses the 180th meridian
3) Print the boxes
4) Optionally export GeoJSON + CSV + (optional) pretty PNG + run manifest
"""

from __future__ import annotations
import argparse
import math
import webbrowser
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from circle_bbox.constants import (
    RADIUS_KM_DEFAULT, OUTDIR_DEFAULT,
    GEOJSON_NAME, CSV_NAME, PNG_NAME, MANIFEST_NAME,
    WEB_HOST_DEFAULT, WEB_PORT_DEFAULT,
)
from circle_bbox.geo import Point, bboxes_around, wraps_antimeridian
from circle_bbox.outputs import export_geojson, export_csv, export_pretty_map
from circle_bbox.manifest import QueryManifest, write_manifest

def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Bounding box(es) enclosing a circle around a lat/lon point")
    ap.add_argument("--lat", type=float, required=False, help="center latitude (deg, -90..90)")
    ap.add_argument("--lon", type=float, required=False, help="center longitude (deg, -180..180)")
    ap.add_argument("--radius-km", type=float, default=RADIUS_KM_DEFAULT)

    ap.add_argument("--outdir", type=str, default=OUTDIR_DEFAULT)
    ap.add_argument("--geojson", action="store_true", help=f"write {GEOJSON_NAME} into --outdir")
    ap.add_argument("--csv", action="store_true", help=f"write {CSV_NAME} into --outdir")
    ap.add_argument("--pretty-png", action="store_true", help=f"write {PNG_NAME} into --outdir")
    ap.add_argument("--manifest", action="store_true", help=f"write {MANIFEST_NAME} into --outdir")

    ap.add_argument("--web", action="store_true", help="start simple web UI instead of running CLI once")
    ap.add_argument("--web-host", type=str, default=WEB_HOST_DEFAULT, help="web UI listen host")
    ap.add_argument("--web-port", type=int, default=WEB_PORT_DEFAULT, help="web UI listen port")
    ap.add_argument("--open-browser", action="store_true", help="open browser to the web UI on start")
    return ap


def validate_query(lat: float | None, lon: float | None, radius_km: float | None) -> None:
    if lat is None or lon is None:
        raise ValueError("lat and lon are required")
    if radius_km is None:
        raise ValueError("radius-km is required")
    for name, val in (("lat", lat), ("lon", lon), ("radius-km", radius_km)):
        if not math.isfinite(val):
            raise ValueError(f"{name} must be a finite number: {val}")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"lat must be within [-90, 90]: {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"lon must be within [-180, 180]: {lon}")
    if radius_km < 0:
        raise ValueError(f"radius-km must not be negative: {radius_km}")


def run_query(args: argparse.Namespace) -> dict[str, Any]:
    validate_query(args.lat, args.lon, args.radius_km)

    center = Point(latitude=args.lat, longitude=args.lon)
    bboxes = bboxes_around(args.radius_km, center)
    wraps = wraps_antimeridian(bboxes)
    if wraps:
        print("[INFO] area crosses the 180th meridian; split into two boxes")

    outputs: dict[str, str] = {}
    if args.geojson or args.csv or args.pretty_png or args.manifest:
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        if args.geojson:
            path = outdir / GEOJSON_NAME
            export_geojson(bboxes, path, center=center, radius_km=args.radius_km)
            outputs["geojson"] = str(path)
            print(f"[OK] GeoJSON: {path}")
        if args.csv:
            path = outdir / CSV_NAME
            export_csv(bboxes, path)
            outputs["csv"] = str(path)
            print(f"[OK] CSV    : {path}")
        if args.pretty_png:
            path = outdir / PNG_NAME
            if export_pretty_map(bboxes, center, path):
                outputs["png"] = str(path)
        if args.manifest:
            manifest = QueryManifest(
                created_utc=datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds"),
                params={"lat": args.lat, "lon": args.lon, "radius_km": args.radius_km},
                bboxes=[b.as_dict() for b in bboxes],
                outputs=dict(outputs),
            )
            path = outdir / MANIFEST_NAME
            write_manifest(path, manifest)
            outputs["manifest"] = str(path)
            print(f"[OK] manifest: {path}")

    return {
        "center": center.as_dict(),
        "radius_km": args.radius_km,
        "bboxes": [b.as_dict() for b in bboxes],
        "wraps": wraps,
        "outputs": outputs,
    }


def start_web(args: argparse.Namespace) -> None:
    from webapp import create_app

    app = create_app(args)
    url = f"http://{args.web_host}:{args.web_port}"
    print(f"[WEB] starting UI at {url}")
    if args.open_browser:
        try:
            webbrowser.open(url)
        except Exception:
            print("[WARN] could not open browser; start manually")
    app.run(host=args.web_host, port=args.web_port, debug=False)


def main():
    ap = build_arg_parser()
    args = ap.parse_args()

    if args.web:
        start_web(args)
        return

    # Without a center point there is nothing to compute; fall back to the web UI.
    if args.lat is None or args.lon is None:
        print("[INFO] no --lat/--lon given; starting the web UI. Pass --lat and --lon to run once from the CLI.")
        start_web(args)
        return

    try:
        result = run_query(args)
    except ValueError as e:
        ap.error(str(e))
    for i, b in enumerate(result["bboxes"]):
        lo, hi = b["min"], b["max"]
        print(f"[RESULT] bbox[{i}]: min=({lo['latitude']}, {lo['longitude']}) max=({hi['latitude']}, {hi['longitude']})")


if __name__ == "__main__":
    main()
