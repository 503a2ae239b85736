import pytest
from pydantic import ValidationError

from services.config import load_config


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("RECCOBEATS_BASE_URL", raising=False)


def test_loads_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        """
LOG_LEVEL: DEBUG
blend:
  total_tracks: 50
  sequencing_mode: similarity
  exclude_instrumentals: "yes"
  seed: 7
features:
  type: file
  path: data/features.json
  batch_size: 4
""",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config.LOG_LEVEL == "DEBUG"
    assert config.blend.total_tracks == 50
    assert config.blend.sequencing_mode == "similarity"
    assert config.blend.exclude_instrumentals is True
    assert config.blend.seed == 7
    assert config.features.type == "file"
    assert config.features.path == "data/features.json"
    assert config.features.batch_size == 4
    assert config.features.batch_delay_ms == 100


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    config = load_config(str(path))

    assert config.blend.total_tracks == 100
    assert config.blend.sequencing_mode == "shuffle-only"
    assert config.blend.seed is None
    assert config.features.type == "reccobeats"
    assert config.features.base_url == "https://api.reccobeats.com/v1"


def test_environment_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yml"
    path.write_text("LOG_LEVEL: INFO\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("RECCOBEATS_BASE_URL", "http://localhost:9000/v1")

    config = load_config(str(path))

    assert config.LOG_LEVEL == "WARNING"
    assert config.features.base_url == "http://localhost:9000/v1"


def test_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yml"))


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("blend:\n  total_tracks: -3\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(str(path))

    path.write_text("blend:\n  sequencing_mode: random\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(str(path))
