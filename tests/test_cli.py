import json

from typer.testing import CliRunner

from tsorganizer import __version__
from tsorganizer.config import CONFIGURATION_FILE_NAME
from tsorganizer.main import app

runner = CliRunner()

UNORGANIZED = "class A {\n    foo() {}\n\n    bar = 1;\n}\n"


def _write(path, text=UNORGANIZED):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_organize_json_output(tmp_path):
    path = _write(tmp_path / "a.ts")

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["files"] == 1
    assert payload["organized"] == 1
    assert payload["outcomes"][0]["status"] == "organized"
    assert "// #region Classes (1)" in path.read_text(encoding="utf-8")


def test_organize_check_exits_one_when_changes_pending(tmp_path):
    path = _write(tmp_path / "a.ts")

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path), "--check"])

    assert result.exit_code == 1
    assert path.read_text(encoding="utf-8") == UNORGANIZED


def test_organize_check_exits_zero_when_organized(tmp_path):
    path = _write(tmp_path / "a.ts")
    runner.invoke(app, ["organize", str(path), "-w", str(tmp_path)])

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path), "--check"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["outcomes"][0]["status"] == "unchanged"


def test_organize_parse_error_exits_two(tmp_path):
    path = _write(tmp_path / "broken.ts", "class A {\n")

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path), "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert payload["failed"] == 1
    assert payload["outcomes"][0]["status"] == "failed"


def test_organize_uses_workspace_configuration(tmp_path):
    (tmp_path / CONFIGURATION_FILE_NAME).write_text(
        json.dumps({
            "sections": [{"label": "Everything", "kinds": ["class", "function"]}],
            "memberSections": [],
        }),
        encoding="utf-8",
    )
    path = _write(tmp_path / "a.ts")

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path)])

    assert result.exit_code == 0
    text = path.read_text(encoding="utf-8")
    assert "// #region Everything (1)" in text
    assert "// #region Other (2)" in text


def test_invalid_configuration_exits_two(tmp_path):
    (tmp_path / CONFIGURATION_FILE_NAME).write_text("{ nope", encoding="utf-8")
    path = _write(tmp_path / "a.ts")

    result = runner.invoke(app, ["organize", str(path), "-w", str(tmp_path), "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert payload["status"] == "error"
    assert payload["code"] == "CONFIGURATION_ERROR"
    assert path.read_text(encoding="utf-8") == UNORGANIZED


def test_organize_all_json(tmp_path):
    _write(tmp_path / "src" / "a.ts")
    _write(tmp_path / "src" / "nested" / "b.ts")
    _write(tmp_path / "node_modules" / "dep" / "c.ts")

    result = runner.invoke(app, ["organize-all", str(tmp_path), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["files"] == 2
    assert payload["organized"] == 2


def test_init_writes_default_configuration(tmp_path):
    result = runner.invoke(app, ["init", str(tmp_path), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["status"] == "ok"
    data = json.loads((tmp_path / CONFIGURATION_FILE_NAME).read_text(encoding="utf-8"))
    assert data["sections"][0]["label"] == "Enums"


def test_init_refuses_to_overwrite(tmp_path):
    runner.invoke(app, ["init", str(tmp_path)])

    result = runner.invoke(app, ["init", str(tmp_path), "--json"])

    assert result.exit_code == 2
    assert json.loads(result.stdout)["code"] == "CONFIGURATION_EXISTS"

    forced = runner.invoke(app, ["init", str(tmp_path), "--force"])
    assert forced.exit_code == 0


def test_human_mode_table(tmp_path):
    path = _write(tmp_path / "a.ts")

    result = runner.invoke(app, ["--human", "organize", str(path), "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "Organized 1 of 1 files." in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"tsorganizer v{__version__}"
