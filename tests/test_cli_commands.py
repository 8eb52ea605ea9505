"""Tests for CLI commands using Typer's CliRunner."""

from typer.testing import CliRunner

from stylemesh.cli import app

runner = CliRunner()


def test_shapes_command():
    result = runner.invoke(app, ["shapes"])
    assert result.exit_code == 0
    assert "Node shapes:" in result.stdout
    assert "Arrow types:" in result.stdout
    assert "torus-knot" in result.stdout
    assert "half-open" in result.stdout


def test_shapes_filtered_by_tag():
    result = runner.invoke(app, ["shapes", "--tag", "polyhedron"])
    assert result.exit_code == 0
    assert "octahedron" in result.stdout
    assert "- box" not in result.stdout


def test_stats_command(write_yaml):
    sheet = write_yaml(
        "sheet.yaml",
        {
            "nodes": [
                {"style_id": "a", "count": 3, "shape": {"type": "box"}},
                {"style_id": "b", "count": 1, "shape": {"type": "cone"}},
            ]
        },
    )
    result = runner.invoke(app, ["stats", str(sheet)])
    if result.exit_code != 0:
        print(f"stats failed stdout: {result.stdout}")
    assert result.exit_code == 0
    assert "Instances: 4" in result.stdout
    assert "Templates: 2" in result.stdout
    assert "Hits: 2" in result.stdout
    assert "Misses: 2" in result.stdout
    assert "Hit rate: 50.0%" in result.stdout


def test_stats_verbose_lists_keys(write_yaml):
    sheet = write_yaml("sheet.yaml", {"edges": [{"style_id": "e", "count": 2}]})
    result = runner.invoke(app, ["stats", "-v", str(sheet)])
    assert result.exit_code == 0
    assert "edge-style-e" in result.stdout


def test_stats_with_config(write_yaml):
    sheet = write_yaml("sheet.yaml", {"nodes": [{"style_id": "a", "shape": {"type": "box"}}]})
    config = write_yaml("render.yaml", {"materials": {"lit_emissive_scale": 0.5}})
    result = runner.invoke(app, ["stats", "--config", str(config), str(sheet)])
    assert result.exit_code == 0
    assert "Templates: 1" in result.stdout


def test_stats_unknown_shape_exits_nonzero(write_yaml):
    sheet = write_yaml("sheet.yaml", {"nodes": [{"style_id": "a", "shape": {"type": "blob"}}]})
    result = runner.invoke(app, ["stats", str(sheet)])
    assert result.exit_code == 1


def test_stats_missing_file(tmp_path):
    result = runner.invoke(app, ["stats", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
