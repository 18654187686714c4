import io
import json
from pathlib import Path

import pytest

from objhtml import __version__
from objhtml.cli import main


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_render_file_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", {"title": "Hi"})
    main(["render", "--in", str(source), "--indent", "  "])
    assert capsys.readouterr().out == "<div>\n  <title>Hi</title>\n</div>\n"


def test_render_to_output_file(tmp_path: Path) -> None:
    source = _write_json(tmp_path / "data.json", [{"_tag": "li", "_content": "a"}])
    out = tmp_path / "nested" / "out.html"
    main(["render", "--in", str(source), "--out", str(out), "--tag", "ul", "--attr", "id=list"])
    assert out.read_text(encoding="utf-8") == '<ul id="list"><li>a</li></ul>\n'


def test_render_without_outer_tag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", [{"p": "a"}, {"p": "b"}])
    main(["render", "--in", str(source), "--no-tag"])
    assert capsys.readouterr().out == "<p>a</p><p>b</p>\n"


def test_repeated_class_attributes_merge(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", {})
    main(["render", "--in", str(source), "--attr", "class=a", "--attr", "class=b a"])
    assert capsys.readouterr().out == '<div class="a b"></div>\n'


def test_render_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"q": "<x>"}'))
    main(["render"])
    assert capsys.readouterr().out == "<div><q>&lt;x&gt;</q></div>\n"


def test_config_file_and_flag_precedence(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", {"q": "it's"})
    config = tmp_path / "options.yaml"
    config.write_text("escapeMode: quotes\nindent: '    '\n", encoding="utf-8")
    main(["render", "--in", str(source), "--config", str(config), "--indent", ""])
    assert capsys.readouterr().out == "<div><q>it&#039;s</q></div>\n"


def test_string_root_document_is_decoded_once(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", "hello")
    main(["render", "--in", str(source)])
    assert capsys.readouterr().out == "<div>hello</div>\n"


def test_json_text_inside_a_string_stays_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", json.dumps({"a": 1}))
    main(["render", "--in", str(source)])
    assert capsys.readouterr().out == "<div>{&quot;a&quot;: 1}</div>\n"


def test_invalid_json_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "bad.json"
    source.write_text("{oops", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(source)])
    assert excinfo.value.code == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_recursion_limit_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_json(tmp_path / "data.json", {"a": {"b": {"c": "d"}}})
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(source), "--max-depth", "1"])
    assert excinfo.value.code == 1
    assert "max_depth=1" in capsys.readouterr().err


def test_missing_input_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tmp_path / "missing.json")])
    assert "Input file not found" in str(excinfo.value.code)


def test_bad_attr_pair(tmp_path: Path) -> None:
    source = _write_json(tmp_path / "data.json", {})
    with pytest.raises(SystemExit):
        main(["render", "--in", str(source), "--attr", "novalue"])


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"objhtml {__version__}"


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "render" in capsys.readouterr().out
