import pytest

from taskline import configuration
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.repository.snapshot import SNAPSHOT_REPO
from taskline.view import state as view_state


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point config and snapshot paths at a temporary directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    data_path = tmp_path / "data"
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration, "DATA_PROJECTS_PATH", data_path / "projects.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")
    monkeypatch.delenv(configuration.DATA_PATH_ENV_VAR, raising=False)

    CONFIGURATION_REPO.reset()
    SNAPSHOT_REPO.reload()
    view_state.set_show_header(True)
    view_state.set_week_starts_on("sunday")
    yield data_path
    CONFIGURATION_REPO.reset()
    SNAPSHOT_REPO.reload()
