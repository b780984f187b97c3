import pytest

from list2table.config import hierarchy


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user-level config and LIST2TABLE_* env vars out of every test."""
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "global.yaml")
    monkeypatch.chdir(tmp_path)
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)


@pytest.fixture
def fruit_list():
    return "- apple\n- kiwi\n- banana"


@pytest.fixture
def mixed_list():
    """Every supported marker style, with blank lines around and inside."""
    return (
        "\n"
        "   \n"
        "1. first\n"
        "- [ ] open task\n"
        "- [x] done task\n"
        "\n"
        "- hyphen\n"
        "* star\n"
        "+ plus\n"
        "plain line\n"
        "\n"
    )


@pytest.fixture
def settings_yaml(tmp_path):
    """Write a persisted settings blob and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text("leaveHeaderEmpty: false\nnumberOfEmptyColumns: 2\n")
    return path
