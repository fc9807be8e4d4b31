import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from spark_scm_cli.cli import app
from spark_scm_core.config import ScmConfigLoader

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_core_logger():
    core_logger = logging.getLogger("spark_scm_core")
    handlers, level = list(core_logger.handlers), core_logger.level
    yield
    core_logger.handlers[:] = handlers
    core_logger.setLevel(level)


def test_providers_list_json() -> None:
    result = runner.invoke(app, ["providers", "list", "--format", "json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [{"position": 1, "id": "git", "class": "GitScmProvider"}]


def test_providers_list_plain() -> None:
    result = runner.invoke(app, ["providers", "list"])

    assert result.exit_code == 0, result.output
    assert "git" in result.stdout
    assert "GitScmProvider" in result.stdout


def test_providers_show() -> None:
    ok = runner.invoke(app, ["providers", "show", "git"])
    assert ok.exit_code == 0
    assert "git: GitScmProvider" in ok.stdout

    missing = runner.invoke(app, ["providers", "show", "svn"])
    assert missing.exit_code == 1


def test_check_git_project(git_project_dir: Path) -> None:
    result = runner.invoke(app, ["check", str(git_project_dir), "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["under_scm"] is True
    assert payload["provider"] == "git"


def test_check_plain_project(plain_project_dir: Path) -> None:
    result = runner.invoke(app, ["check", str(plain_project_dir)])

    assert result.exit_code == 0, result.output
    assert "not under SCM" in result.stdout


def test_check_missing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "absent")])
    assert result.exit_code == 2


def test_status_reports_unimplemented(git_project_dir: Path) -> None:
    result = runner.invoke(
        app,
        ["status", "src/main.py", "--project", str(git_project_dir), "--format", "json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["provider"] == "git"
    assert payload["error"] == "unimplemented - getFileStatus()"
    assert payload["path"] == str(git_project_dir / "src" / "main.py")


def test_status_plain_error_message(git_project_dir: Path) -> None:
    result = runner.invoke(app, ["status", "README.md", "--project", str(git_project_dir)])

    assert result.exit_code == 1
    assert "unimplemented - getFileStatus()" in result.output


def test_status_project_not_under_scm(plain_project_dir: Path) -> None:
    result = runner.invoke(app, ["status", "README.md", "--project", str(plain_project_dir)])

    assert result.exit_code == 1
    assert "not under SCM" in result.output


def test_status_missing_resource(git_project_dir: Path) -> None:
    result = runner.invoke(app, ["status", "nope.txt", "--project", str(git_project_dir)])

    assert result.exit_code == 2
    assert "Resource not found" in result.output


def test_project_config_can_disable_git(git_project_dir: Path) -> None:
    config_path = ScmConfigLoader.config_path(git_project_dir)
    config_path.parent.mkdir(parents=True)
    config_path.write_text('providers = ["svn"]\n', encoding="utf-8")

    result = runner.invoke(app, ["check", str(git_project_dir)])

    assert result.exit_code == 2
    assert "Unknown SCM provider 'svn'" in result.output


def test_config_init_and_show(tmp_path: Path) -> None:
    init = runner.invoke(app, ["config", "init", "--project", str(tmp_path)])
    assert init.exit_code == 0, init.output
    assert ScmConfigLoader.config_path(tmp_path).exists()

    again = runner.invoke(app, ["config", "init", "--project", str(tmp_path)])
    assert again.exit_code == 1

    show = runner.invoke(app, ["config", "show", "--project", str(tmp_path)])
    assert show.exit_code == 0, show.output
    assert json.loads(show.stdout)["providers"] == ["git"]


def test_global_config_file_option(tmp_path: Path) -> None:
    config_file = tmp_path / "scm.toml"
    config_file.write_text('[log]\nverbosity = "error"\n', encoding="utf-8")

    result = runner.invoke(app, ["--config-file", str(config_file), "config", "show"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["log"]["verbosity"] == "error"


def test_status_follows_symlink_inside_project(git_project_dir: Path, tmp_path: Path) -> None:
    shared = tmp_path / "shared.py"
    shared.write_text("# shared\n", encoding="utf-8")
    (git_project_dir / "src" / "link.py").symlink_to(shared)

    result = runner.invoke(
        app,
        ["status", "src/link.py", "--project", str(git_project_dir), "--format", "json"],
    )

    assert result.exit_code == 1, result.output
    payload = json.loads(result.stdout)
    assert payload["path"] == str(git_project_dir / "src" / "link.py")
    assert payload["error"] == "unimplemented - getFileStatus()"


def test_verbose_logging_reaches_every_invocation() -> None:
    core_logger = logging.getLogger("spark_scm_core")
    before = len(core_logger.handlers)

    for _ in range(2):
        result = runner.invoke(app, ["--verbose", "providers", "show", "git"])

        assert result.exit_code == 0, result.output
        assert "DEBUG spark_scm_core.scm.registry: Built ScmRegistry([git])" in result.output

    assert len(core_logger.handlers) == before + 1
