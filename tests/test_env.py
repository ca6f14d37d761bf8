import os
from pathlib import Path

from geomatch.core.env import load_dotenv_if_present, resolve_project_path


def test_resolve_project_path_uses_project_root_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GEOMATCH_PROJECT_ROOT", str(tmp_path))
    assert resolve_project_path("data/regions.yaml") == (tmp_path / "data" / "regions.yaml").resolve()


def test_resolve_project_path_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.delenv("GEOMATCH_PROJECT_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_project_path("regions.yaml") == (tmp_path / "regions.yaml").resolve()


def test_resolve_project_path_keeps_absolute_paths(tmp_path):
    p = tmp_path / "regions.yaml"
    assert resolve_project_path(p) == p
    assert resolve_project_path(str(p)) == Path(p)


def test_load_dotenv_does_not_override_existing_env(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GEOMATCH_TEST_A=from_file\nGEOMATCH_TEST_B=from_file\n", encoding="utf-8")
    monkeypatch.setenv("GEOMATCH_ENV_FILE", str(env_file))
    monkeypatch.setenv("GEOMATCH_TEST_A", "from_process")
    monkeypatch.delenv("GEOMATCH_TEST_B", raising=False)
    load_dotenv_if_present.cache_clear()
    try:
        assert load_dotenv_if_present() == env_file
        assert os.environ["GEOMATCH_TEST_A"] == "from_process"
        assert os.environ["GEOMATCH_TEST_B"] == "from_file"
    finally:
        monkeypatch.delenv("GEOMATCH_TEST_B", raising=False)
        load_dotenv_if_present.cache_clear()


def test_load_dotenv_missing_explicit_file_returns_none(monkeypatch, tmp_path):
    monkeypatch.setenv("GEOMATCH_ENV_FILE", str(tmp_path / "missing.env"))
    load_dotenv_if_present.cache_clear()
    try:
        assert load_dotenv_if_present() is None
    finally:
        load_dotenv_if_present.cache_clear()
