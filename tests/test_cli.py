import json
import math

import pytest

from cli import build_arg_parser, run_query, validate_query
from circle_bbox.constants import CSV_NAME, GEOJSON_NAME, MANIFEST_NAME, RADIUS_KM_DEFAULT


def _args(*argv):
    return build_arg_parser().parse_args(list(argv))


def test_defaults():
    args = _args()
    assert args.lat is None and args.lon is None
    assert args.radius_km == RADIUS_KM_DEFAULT
    assert not (args.geojson or args.csv or args.pretty_png or args.manifest or args.web)


def test_run_query_single_box():
    result = run_query(_args("--lat", "40.7491902", "--lon", "-74.0057076", "--radius-km", "123.123654"))
    assert result["wraps"] is False
    assert result["outputs"] == {}
    assert result["center"] == {"latitude": 40.7491902, "longitude": -74.0057076}
    (box,) = result["bboxes"]
    assert box["min"] == {"latitude": 39.643151597751555, "longitude": -75.46574887344373}
    assert box["max"] == {"latitude": 41.85522880224843, "longitude": -72.54566632655624}


def test_run_query_wrapping(capsys):
    result = run_query(_args("--lat", "-14.2436432", "--lon", "-178.1795257", "--radius-km", "276.494742"))
    assert result["wraps"] is True
    assert len(result["bboxes"]) == 2
    assert "[INFO]" in capsys.readouterr().out


def test_run_query_writes_outputs(tmp_path):
    args = _args(
        "--lat", "51.5073482", "--lon", "-0.1452675", "--radius-km", "322.14",
        "--outdir", str(tmp_path), "--geojson", "--csv", "--manifest",
    )
    result = run_query(args)
    outputs = result["outputs"]
    assert set(outputs) == {"geojson", "csv", "manifest"}
    assert (tmp_path / GEOJSON_NAME).is_file()
    assert (tmp_path / CSV_NAME).is_file()

    manifest = json.loads((tmp_path / MANIFEST_NAME).read_text(encoding="utf-8"))
    assert manifest["params"]["radius_km"] == 322.14
    assert manifest["bboxes"] == result["bboxes"]
    assert set(manifest["outputs"]) == {"geojson", "csv"}


def test_run_query_no_outdir_without_exports(tmp_path):
    outdir = tmp_path / "never"
    run_query(_args("--lat", "0", "--lon", "0", "--radius-km", "0", "--outdir", str(outdir)))
    assert not outdir.exists()


@pytest.mark.parametrize(
    ("lat", "lon", "radius"),
    [
        (None, 0.0, 10.0),
        (0.0, None, 10.0),
        (90.5, 0.0, 10.0),
        (-90.5, 0.0, 10.0),
        (0.0, 180.01, 10.0),
        (0.0, -181.0, 10.0),
        (0.0, 0.0, -1.0),
        (0.0, 0.0, math.inf),
        (math.nan, 0.0, 10.0),
    ],
)
def test_validate_query_rejects(lat, lon, radius):
    with pytest.raises(ValueError):
        validate_query(lat, lon, radius)


@pytest.mark.parametrize(
    ("lat", "lon", "radius"),
    [(90.0, 180.0, 0.0), (-90.0, -180.0, 5.0), (0.0, 0.0, 20000.0)],
)
def test_validate_query_accepts_edges(lat, lon, radius):
    validate_query(lat, lon, radius)


def test_main_rejects_bad_input(monkeypatch):
    import cli

    monkeypatch.setattr("sys.argv", ["cli.py", "--lat", "95", "--lon", "0"])
    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 2


def test_main_prints_results(monkeypatch, capsys):
    import cli

    monkeypatch.setattr("sys.argv", ["cli.py", "--lat", "0", "--lon", "0", "--radius-km", "0"])
    cli.main()
    out = capsys.readouterr().out
    assert "[RESULT] bbox[0]: min=(0.0, 0.0) max=(0.0, 0.0)" in out
