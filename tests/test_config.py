import json

import pytest

from docxpdf.config import CONFIG_PATH, ConverterConfig, load_config
from docxpdf.docs import DEFAULT_STYLE_MAP


def test_defaults_match_fixed_behaviour():
    cfg = ConverterConfig()
    assert cfg.input_path == "./sample.docx"
    assert cfg.output_path == "./output.pdf"
    assert cfg.page_format == "A4"
    assert cfg.margins() == {"top": "1cm", "right": "1cm", "bottom": "1cm", "left": "1cm"}
    assert cfg.style_map == DEFAULT_STYLE_MAP
    assert cfg.wait_until == "networkidle"


def test_bundled_config_equals_defaults():
    assert load_config(CONFIG_PATH) == ConverterConfig()


def test_missing_file_falls_back_to_defaults(tmp_path, capsys):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == ConverterConfig()
    assert "Warning" in capsys.readouterr().out


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "converter.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == ConverterConfig()


def test_file_values_and_overrides(tmp_path):
    path = tmp_path / "converter.json"
    path.write_text(json.dumps({
        "output_path": "from_file.pdf",
        "margin": "2cm",
        "style_map": ["p[style-name='Quote'] => blockquote:fresh"],
        "unknown_key": 1,
    }), encoding="utf-8")
    cfg = load_config(str(path), output_path="override.pdf", margin=None)
    assert cfg.output_path == "override.pdf"
    assert cfg.margin == "2cm"
    assert [str(r) for r in cfg.style_map] == ["p[style-name='Quote'] => blockquote:fresh"]


def test_unknown_override_rejected(tmp_path):
    with pytest.raises(TypeError):
        load_config(str(tmp_path / "nope.json"), colour="red")


def test_non_object_json_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "converter.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == ConverterConfig()
    assert "Warning: Could not load settings" in capsys.readouterr().out


def test_null_values_in_file_are_skipped(tmp_path):
    path = tmp_path / "converter.json"
    path.write_text(json.dumps({"style_map": None, "margin": None, "output_path": "x.pdf"}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.style_map == DEFAULT_STYLE_MAP
    assert cfg.margin == "1cm"
    assert cfg.output_path == "x.pdf"


def test_non_list_style_map_is_ignored_with_warning(tmp_path, capsys):
    path = tmp_path / "converter.json"
    path.write_text(json.dumps({
        "style_map": "p[style-name='Quote'] => blockquote",
        "browser_args": "--no-sandbox",
    }), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.style_map == DEFAULT_STYLE_MAP
    assert cfg.browser_args == ConverterConfig().browser_args
    out = capsys.readouterr().out
    assert "Ignoring 'style_map'" in out
    assert "Ignoring 'browser_args'" in out
