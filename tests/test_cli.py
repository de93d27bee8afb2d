import pyperclip
from typer.testing import CliRunner

from binastore.cli import app

runner = CliRunner()

def test_convert_table():
    result = runner.invoke(app, ["convert", "12\n\nabc"])
    assert result.exit_code == 0
    assert "BI" in result.output
    assert "(empty)" in result.output
    assert "(no digits)" in result.output
    assert "1=B" in result.output

def test_convert_example_as_text():
    result = runner.invoke(app, ["convert", "--example", "--format", "text"])
    assert result.exit_code == 0
    assert result.output == "BINASTOREE\n"

def test_convert_reads_stdin_as_csv():
    result = runner.invoke(app, ["convert", "--format", "csv"], input="12\r\n34")
    assert result.exit_code == 0
    assert result.output == '"12","BI"\n"34","NA"\n'

def test_convert_from_file(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text("9870", encoding="utf-8")
    result = runner.invoke(app, ["convert", "--file", str(src), "--format", "text"])
    assert result.output == "EROE\n"

def test_copy_all(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    result = runner.invoke(app, ["copy", "12\n34"])
    assert result.exit_code == 0
    assert copied == ["BI\nNA"]
    assert "Copied to clipboard" in result.output

def test_copy_single_line(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    result = runner.invoke(app, ["copy", "12\n34", "--line", "2"])
    assert result.exit_code == 0
    assert copied == ["NA"]

def test_copy_line_out_of_range(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    result = runner.invoke(app, ["copy", "12", "--line", "3"])
    assert result.exit_code != 0
    assert copied == []

def test_copy_failure(monkeypatch):
    def boom(text):
        raise pyperclip.PyperclipException("no clipboard")
    monkeypatch.setattr(pyperclip, "copy", boom)
    result = runner.invoke(app, ["copy", "12"])
    assert result.exit_code == 1
    assert "Unable to copy" in result.output

def test_share_to_file(tmp_path):
    out = tmp_path / "results.csv"
    result = runner.invoke(app, ["share", 'say "1"\n2', "--output", str(out)])
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == '"say ""1""","B"\n"2","I"'

def test_share_without_endpoint_reports_generic_error(monkeypatch):
    monkeypatch.delenv("BINASTORE_SHARE_ENDPOINT", raising=False)
    result = runner.invoke(app, ["share", "12"])
    assert result.exit_code == 1
    assert "Unable to share" in result.output

def test_mapping_command():
    result = runner.invoke(app, ["mapping"])
    assert result.exit_code == 0
    assert "9=E, 0=E" in result.output

def test_share_invalid_endpoint_reports_generic_error(monkeypatch):
    monkeypatch.setenv("BINASTORE_SHARE_ENDPOINT", "http://exa mple.com:abc")
    result = runner.invoke(app, ["share", "12"])
    assert result.exit_code == 1
    assert "Unable to share" in result.output

def test_share_bad_timeout_reports_generic_error(monkeypatch):
    monkeypatch.setenv("BINASTORE_SHARE_ENDPOINT", "https://share.test/inbox")
    monkeypatch.setenv("BINASTORE_SHARE_TIMEOUT_SECONDS", "ten")
    result = runner.invoke(app, ["share", "12"])
    assert result.exit_code == 1
    assert "Unable to share" in result.output

def test_unknown_log_level_does_not_stop_convert(monkeypatch):
    monkeypatch.setenv("BINASTORE_LOG_LEVEL", "verbose")
    result = runner.invoke(app, ["convert", "12", "--format", "text"])
    assert result.exit_code == 0
    assert "BI" in result.output
