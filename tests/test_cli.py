"""
Tests for the click CLI.
"""

from click.testing import CliRunner

from planetgen.cli import cli

EARTH = "R 6357\nM 5.9722e24\nD 23.9344\nS 0.1\nT 15\nW 0.57\nC terrestrial\n"


def test_build_writes_mesh(tmp_path):
    scene = tmp_path / "earth.txt"
    scene.write_text(EARTH)
    out = tmp_path / "earth.ply"

    result = CliRunner().invoke(cli, [
        'build', str(scene), '-o', str(out),
        '--sectors', '8', '--stacks', '4', '--seed', '1',
    ])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "48 faces" in result.output


def test_info_prints_summary(tmp_path):
    scene = tmp_path / "earth.txt"
    scene.write_text(EARTH)
    result = CliRunner().invoke(cli, ['info', str(scene), '--sectors', '4', '--stacks', '2'])
    assert result.exit_code == 0, result.output
    assert "===== Planet =====" in result.output
    assert "Triangle Count: 8" in result.output
    assert "stride 40" in result.output


def test_bad_scene_is_a_click_error(tmp_path):
    scene = tmp_path / "bad.txt"
    scene.write_text("R big\n")
    result = CliRunner().invoke(cli, ['info', str(scene), '--sectors', '4', '--stacks', '2'])
    assert result.exit_code != 0
    assert "bad value" in result.output


def test_unsupported_output_is_a_click_error(tmp_path):
    scene = tmp_path / "earth.txt"
    scene.write_text(EARTH)
    result = CliRunner().invoke(cli, [
        'build', str(scene), '-o', str(tmp_path / "x.fbx"),
        '--sectors', '4', '--stacks', '2',
    ])
    assert result.exit_code == 1
    assert "Unsupported export format" in result.output


def test_unreadable_scene_is_a_click_error(tmp_path):
    result = CliRunner().invoke(cli, ['info', str(tmp_path), '--sectors', '4', '--stacks', '2'])
    assert result.exit_code == 1
    assert "Error" in result.output
    assert not isinstance(result.exception, OSError)


def test_undecodable_scene_is_a_click_error(tmp_path):
    scene = tmp_path / "binary.txt"
    scene.write_bytes(b"R \xff\xfe\x80\n")
    result = CliRunner().invoke(cli, ['build', str(scene), '-o', str(tmp_path / "x.ply"),
                                      '--sectors', '4', '--stacks', '2'])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
