import json

from typer.testing import CliRunner

from phpsolver.cli.main import app

runner = CliRunner()


def test_resolve_json_output(zoo_index_file):
    result = runner.invoke(app, ["resolve", "@mcall(@global(dog),create)|int", "--index", str(zoo_index_file)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["resolved"] == ["Dog", "int"]
    assert payload["type"] == "@mcall(@global(dog),create)|int"


def test_resolve_with_context_class(zoo_index_file):
    result = runner.invoke(
        app,
        ["resolve", "@sprop(Dog,registry)", "--class", "Zoo", "--index", str(zoo_index_file)],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["resolved"] == ["Zoo[]"]


def test_resolve_bad_type_exits_nonzero(zoo_index_file):
    result = runner.invoke(app, ["resolve", "@mcall(", "--index", str(zoo_index_file)])
    assert result.exit_code == 1
    assert "error" in result.output


def test_find_method_json(zoo_index_file):
    result = runner.invoke(app, ["find-method", "Repo", "save", "--index", str(zoo_index_file)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["found"] is True
    assert payload["declared_in"] == "Repo"
    assert [p["name"] for p in payload["params"]] == ["entity", "flags"]

    missing = runner.invoke(app, ["find-method", "Dog", "fly", "--index", str(zoo_index_file)])
    assert missing.exit_code == 0
    assert json.loads(missing.stdout) == {"class": "Dog", "method": "fly", "found": False}


def test_find_property_and_constant_json(zoo_index_file):
    prop = runner.invoke(app, ["find-property", "Dog", "legs", "--index", str(zoo_index_file)])
    assert prop.exit_code == 0
    prop_payload = json.loads(prop.stdout)
    assert prop_payload["declared_in"] == "Animal"
    assert prop_payload["type"] == "int"

    const = runner.invoke(app, ["find-constant", "Repo", "TABLE", "--index", str(zoo_index_file)])
    assert const.exit_code == 0
    const_payload = json.loads(const.stdout)
    assert const_payload["declared_in"] == "RepoInterface"
    assert const_payload["value"] == "'repo'"


def test_implements_json(zoo_index_file):
    result = runner.invoke(app, ["implements", "Repo", "RepoInterface", "--index", str(zoo_index_file)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["implements"] is True


def test_stats_uses_configured_default_index(tmp_path, monkeypatch, zoo_index_file):
    monkeypatch.chdir(tmp_path)
    config_dir = tmp_path / ".phpsolver"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"index": {"path": zoo_index_file.name}}))

    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["classes"] == 5
    assert payload["functions"] == 2
    assert payload["indexing_complete"] is True


def test_missing_index_exits_nonzero(tmp_path):
    result = runner.invoke(app, ["stats", "--index", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "Index not found" in result.output


def test_corrupt_index_exits_nonzero(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    result = runner.invoke(app, ["stats", "--index", str(path)])
    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_bad_log_level_in_config_exits_nonzero(tmp_path, monkeypatch, zoo_index_file):
    monkeypatch.chdir(tmp_path)
    config_dir = tmp_path / ".phpsolver"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"logging": {"level": "LOUD"}}))

    result = runner.invoke(app, ["stats", "--index", str(zoo_index_file)])
    assert result.exit_code == 1
    assert "logging.level" in result.output


def test_human_mode_renders_table(zoo_index_file):
    result = runner.invoke(app, ["--human", "stats", "--index", str(zoo_index_file)])
    assert result.exit_code == 0
    assert "Index statistics" in result.output
    assert "classes" in result.output
