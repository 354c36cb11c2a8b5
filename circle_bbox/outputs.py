# -*- coding: utf-8 -*-
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from .geo import BBox, Point

FRAME_COLUMNS = ["index", "min_lat", "min_lon", "max_lat", "max_lon"]


def bbox_ring(bbox: BBox) -> list[list[float]]:
    """Closed [lon, lat] ring, counter-clockwise from the lower-left corner."""
    return [
        [bbox.min_lon, bbox.min_lat],
        [bbox.max_lon, bbox.min_lat],
        [bbox.max_lon, bbox.max_lat],
        [bbox.min_lon, bbox.max_lat],
        [bbox.min_lon, bbox.min_lat],
    ]


def bboxes_to_geojson(
    bboxes: Iterable[BBox],
    center: Point | None = None,
    radius_km: float | None = None,
) -> dict[str, Any]:
    features: list[dict[str, Any]] = []
    for i, b in enumerate(bboxes):
        features.append({
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [bbox_ring(b)]},
            "properties": {
                "index": i,
                "min_lat": b.min_lat,
                "min_lon": b.min_lon,
                "max_lat": b.max_lat,
                "max_lon": b.max_lon,
            },
        })
    if center is not None:
        props: dict[str, Any] = {"role": "center"}
        if radius_km is not None:
            props["radius_km"] = radius_km
        features.append({
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [center.longitude, center.latitude]},
            "properties": props,
        })
    return {"type": "FeatureCollection", "features": features}


def export_geojson(
    bboxes: Iterable[BBox],
    path: str | Path,
    center: Point | None = None,
    radius_km: float | None = None,
) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    geojson = bboxes_to_geojson(bboxes, center=center, radius_km=radius_km)
    path.write_text(json.dumps(geojson, ensure_ascii=False, indent=2), encoding="utf-8")


def bboxes_to_frame(bboxes: Iterable[BBox]) -> pd.DataFrame:
    rows = [
        {"index": i, "min_lat": b.min_lat, "min_lon": b.min_lon, "max_lat": b.max_lat, "max_lon": b.max_lon}
        for i, b in enumerate(bboxes)
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def export_csv(bboxes: Iterable[BBox], csv_path: str | Path) -> None:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    # repr precision so the CSV round-trips the exact floats
    bboxes_to_frame(bboxes).to_csv(csv_path, index=False, float_format="%.17g")


def export_pretty_map(
    bboxes: list[BBox],
    center: Point,
    png_path: str | Path,
    pad_deg: float = 1.0,
    dpi: int = 180,
    use_cartopy: bool = True,
) -> bool:
    """Box outlines + center on a lon/lat map (matplotlib; coastlines when cartopy is installed)."""
    try:
        import numpy as np
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as e:
        print(f"[WARN] pretty map skipped (missing matplotlib): {e}")
        return False

    ccrs = None
    if use_cartopy:
        try:
            import cartopy.crs as ccrs
            import cartopy.feature as cfeature
        except Exception as e:
            print(f"[WARN] cartopy unavailable, plotting plain lon/lat axes: {e}")
            ccrs = None

    lons = np.array([[b.min_lon, b.max_lon] for b in bboxes], dtype=float).ravel()
    lats = np.array([[b.min_lat, b.max_lat] for b in bboxes], dtype=float).ravel()
    extent = [
        max(-180.0, float(np.nanmin(lons)) - pad_deg),
        min(180.0, float(np.nanmax(lons)) + pad_deg),
        max(-90.0, float(np.nanmin(lats)) - pad_deg),
        min(90.0, float(np.nanmax(lats)) + pad_deg),
    ]

    fig = plt.figure(figsize=(8, 6), dpi=dpi)
    if ccrs is not None:
        proj = ccrs.PlateCarree()
        ax = plt.axes(projection=proj)
        ax.set_extent(extent, crs=proj)
        ax.add_feature(cfeature.LAND.with_scale("50m"), facecolor="#f1f1f1")
        ax.add_feature(cfeature.COASTLINE.with_scale("50m"), linewidth=0.6)
        gl = ax.gridlines(draw_labels=True, linewidth=0.3, linestyle="--", alpha=0.5)
        gl.top_labels = False
        gl.right_labels = False
        kw = {"transform": proj}
    else:
        ax = plt.axes()
        ax.set_xlim(extent[0], extent[1])
        ax.set_ylim(extent[2], extent[3])
        ax.set_xlabel("lon [deg]")
        ax.set_ylabel("lat [deg]")
        ax.grid(linewidth=0.3, linestyle="--", alpha=0.5)
        kw = {}

    for i, b in enumerate(bboxes):
        ring = np.array(bbox_ring(b))
        ax.plot(ring[:, 0], ring[:, 1], linewidth=1.6, label=f"bbox[{i}]", **kw)
    ax.plot(center.longitude, center.latitude, marker="*", markersize=10, linestyle="none", **kw)
    ax.legend(loc="lower right", fontsize=8)

    plt.tight_layout()
    fig.savefig(str(png_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    print(f"[OK] pretty PNG: {png_path}")
    return True
