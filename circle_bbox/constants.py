# -*- coding: utf-8 -*-
"""
Earth model and default parameters used by the bounding box calculator.

Notes:
  - The equatorial radius is used instead of a mean radius so that boxes line
    up with Google Maps, Bing Maps and Mapbox.
  - CLI and web defaults can always be overridden from the command line.
"""

# Earth (sphere) radius at the equator, meters
EQUATORIAL_RADIUS_M = 6378137

# Query defaults
RADIUS_KM_DEFAULT = 100.0
OUTDIR_DEFAULT = "./outputs"

# Output file names written into --outdir
GEOJSON_NAME = "bboxes.geojson"
CSV_NAME = "bboxes.csv"
PNG_NAME = "bboxes_pretty.png"
MANIFEST_NAME = "query_manifest.json"

# Web UI
WEB_HOST_DEFAULT = "127.0.0.1"
WEB_PORT_DEFAULT = 8000
