"""
Config and command line tests.

Usage:
    pytest test_cli.py
"""

import json

import pytest

from geojson_codec import AltitudePolicy, CodecConfig
from geojson_codec.cli import EXIT_INVALID, EXIT_OK, EXIT_USAGE, main

POLYGON = {
    'type': 'Polygon',
    'coordinates': [[[0, 0], [1, 0], [1, 1], [0, 0]]],
    'crs': {'type': 'name', 'properties': {'name': 'urn:ogc:def:crs:OGC:1.3:CRS84'}},
}


@pytest.fixture
def polygon_file(tmp_path):
    path = tmp_path / "polygon.json"
    path.write_text(json.dumps(POLYGON))
    return path


# ---------------------------------------------------------------- config

def test_config_defaults():
    config = CodecConfig()
    assert config.altitude == AltitudePolicy.PRESERVE
    assert config.indent is None
    assert config.intern_crs


def test_config_from_yaml(tmp_path):
    path = tmp_path / "codec.yaml"
    path.write_text("altitude: reject\nindent: 2\nlog_level: debug\nintern_crs: false\n")
    config = CodecConfig.from_yaml(path)
    assert config.altitude == AltitudePolicy.REJECT
    assert config.indent == 2
    assert config.log_level == "DEBUG"
    assert not config.intern_crs


def test_config_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "codec.yaml"
    path.write_text("")
    assert CodecConfig.from_yaml(path) == CodecConfig()


@pytest.mark.parametrize("data", [
    {'altitude': 'ignore'},
    {'indent': -1},
    {'indent': True},
    {'log_level': 'TRACE'},
    {'intern_crs': 'yes'},
    {'strict': True},
])
def test_config_rejects_invalid_values(data):
    with pytest.raises(ValueError):
        CodecConfig.from_dict(data)


def test_config_rejects_non_mapping_yaml(tmp_path):
    path = tmp_path / "codec.yaml"
    path.write_text("- preserve\n")
    with pytest.raises(ValueError):
        CodecConfig.from_yaml(path)


# ---------------------------------------------------------------- CLI

def test_validate_valid_file(polygon_file, capsys):
    assert main(['validate', str(polygon_file)]) == EXIT_OK
    assert 'valid Polygon' in capsys.readouterr().out


def test_validate_invalid_file(tmp_path, capsys):
    path = tmp_path / "open.json"
    path.write_text(json.dumps({'type': 'Polygon', 'coordinates': [[[0, 0], [1, 0], [1, 1], [0, 1]]]}))
    assert main(['validate', str(path)]) == EXIT_INVALID
    assert capsys.readouterr().out == ""


def test_validate_unknown_type(tmp_path):
    path = tmp_path / "circle.json"
    path.write_text(json.dumps({'type': 'Circle', 'coordinates': [0, 0]}))
    assert main(['validate', str(path)]) == EXIT_INVALID


def test_validate_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"type": "Point", "coordinates": [0, 0], "name": "\xff"}')
    assert main(['validate', str(path)]) == EXIT_INVALID
    assert capsys.readouterr().out == ""


def test_missing_input_and_config(tmp_path, polygon_file):
    assert main(['validate', str(tmp_path / "missing.json")]) == EXIT_USAGE
    assert main(['--config', str(tmp_path / "missing.yaml"), 'validate', str(polygon_file)]) == EXIT_USAGE


def test_no_command_prints_help(capsys):
    assert main([]) == EXIT_USAGE
    assert 'geojson-codec' in capsys.readouterr().out


def test_normalize(polygon_file, tmp_path, capsys):
    config = tmp_path / "codec.yaml"
    config.write_text("indent: 2\n")
    assert main(['--config', str(config), 'normalize', str(polygon_file)]) == EXIT_OK
    out = capsys.readouterr().out
    assert json.loads(out) == POLYGON
    assert out.startswith('{\n  "type"')


def test_info(polygon_file, capsys):
    assert main(['--log-level', 'ERROR', 'info', str(polygon_file)]) == EXIT_OK
    summary = json.loads(capsys.readouterr().out)
    assert summary['type'] == 'Polygon'
    assert summary['positions'] == 4
    assert summary['rings'] == 1
    assert summary['holes'] == 0
    assert summary['crs']['type'] == 'name'


def test_info_linestring(tmp_path, capsys):
    path = tmp_path / "line.json"
    path.write_text(json.dumps({'type': 'LineString', 'coordinates': [[0, 0, 1], [1, 1, 2]]}))
    assert main(['info', str(path)]) == EXIT_OK
    summary = json.loads(capsys.readouterr().out)
    assert summary['closed'] is False
    assert summary['linear_ring'] is False
    assert summary['has_altitude'] is True
