# -*- coding: utf-8 -*-
"""
Run manifest for one bounding box query.

Records when the query ran, its center and radius, the resulting boxes (as
nested min/max dicts, degrees) and the files written for it, so an export
directory can be traced back to the exact call that produced it.
"""
from __future__ import annotations
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

@dataclass
class QueryManifest:
    created_utc: str
    params: dict[str, Any]
    bboxes: list[dict[str, Any]]
    outputs: dict[str, str]

def write_manifest(path: str | Path, manifest: QueryManifest) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(manifest), ensure_ascii=False, indent=2), encoding="utf-8")

def read_manifest(path: str | Path) -> QueryManifest:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return QueryManifest(**data)
