from __future__ import annotations

import json

import pytest

import main as entrypoint
from sgrcolor.cli import build_parser, main


def test_prints_escaped_sequence(capsys):
    assert main(["220"]) == 0
    assert capsys.readouterr().out == "\\x1b[38;5;220m\n"


def test_raw_sequence_has_no_newline(capsys):
    assert main(["--raw", "#ffcc00"]) == 0
    assert capsys.readouterr().out == "\x1b[38;2;255;204;0m"


def test_background_layer(capsys):
    assert main(["--layer", "bg", "1,2,3"]) == 0
    assert capsys.readouterr().out == "\\x1b[48;2;1;2;3m\n"


def test_foreground_and_background(capsys):
    assert main(["--raw", "0xffcc00", "--bg", "17"]) == 0
    assert capsys.readouterr().out == "\x1b[38;2;255;204;0m\x1b[48;5;17m"


def test_text_is_painted(capsys):
    assert main(["hsv:48,1,1", "--bg", "0x000000", "--text", "hi"]) == 0
    out = capsys.readouterr().out
    assert out == "\x1b[38;2;255;204;0m\x1b[48;2;0;0;0mhi\x1b[0m\n"


def test_text_on_background_layer(capsys):
    assert main(["--layer", "bg", "220", "--text", "hi"]) == 0
    assert capsys.readouterr().out == "\x1b[48;5;220mhi\x1b[0m\n"


def test_reset(capsys):
    assert main(["--reset"]) == 0
    assert capsys.readouterr().out == "\\x1b[0m\n"


@pytest.mark.parametrize(
    "argv, needle",
    [
        (["#xyz123"], "'#ffcc00'"),
        (["256"], "255"),
        (["hsv:361,1,1"], "Hue"),
        (["nope"], "Unrecognised"),
        ([], "colour is required"),
        (["--layer", "bg", "1", "--bg", "2"], "--bg"),
    ],
)
def test_errors_exit_with_two(capsys, argv, needle):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert needle in captured.err


def test_palette_name_from_config(capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text(json.dumps({"palette": {"gold": "#ffcc00"}}), encoding="utf-8")
    assert main(["--config", str(path), "GOLD"]) == 0
    assert capsys.readouterr().out == "\\x1b[38;2;255;204;0m\n"


def test_list_palette(capsys, tmp_path):
    (tmp_path / "sgrcolor.json").write_text(
        json.dumps({"palette": {"gold": "#ffcc00", "alert": "196"}}), encoding="utf-8"
    )
    assert main(["--list-palette"]) == 0
    out = capsys.readouterr().out
    assert out.index("alert") < out.index("gold")
    assert "\x1b[48;5;196m    \x1b[0m" in out


def test_list_palette_empty(capsys):
    assert main(["--list-palette"]) == 0
    assert "(no palette configured)" in capsys.readouterr().out


def test_show_config(capsys):
    assert main(["--show-config"]) == 0
    out = capsys.readouterr().out
    assert "(defaults)" in out
    assert "palette entries: 0" in out


def test_parser_defaults():
    args = build_parser().parse_args(["220"])
    assert args.layer == "fg"
    assert args.raw is False
    assert args.bg is None


def test_repository_entrypoint_delegates(capsys):
    assert entrypoint.main(["7"]) == 0
    assert capsys.readouterr().out == "\\x1b[38;5;7m\n"


def test_very_long_index_exits_with_two(capsys):
    assert main(["9" * 5000]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_oversized_palette_entry_keeps_other_names(capsys, tmp_path):
    (tmp_path / "sgrcolor.json").write_text(
        json.dumps({"palette": {"gold": "#ffcc00", "huge": "9" * 5000}}), encoding="utf-8"
    )
    assert main(["gold"]) == 0
    assert capsys.readouterr().out == "\\x1b[38;2;255;204;0m\n"


def test_errors_are_plain_when_not_a_terminal(capsys):
    assert main(["nope"]) == 2
    assert capsys.readouterr().err == "error: Unrecognised color 'nope'\n"


def test_force_color_paints_errors(monkeypatch, capsys):
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert main(["nope"]) == 2
    assert capsys.readouterr().err == "\x1b[38;5;9merror: Unrecognised color 'nope'\x1b[0m\n"


def test_no_color_wins_over_force_color(monkeypatch, capsys):
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert main(["--show-config"]) == 0
    assert "\x1b" not in capsys.readouterr().out
