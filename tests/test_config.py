from fqbn import config


def test_get_falls_back_on_blank(monkeypatch):
    monkeypatch.setenv("FQBN_TEST_VALUE", "   ")
    assert config._get("FQBN_TEST_VALUE", "boards.txt") == "boards.txt"
    monkeypatch.setenv("FQBN_TEST_VALUE", " custom.txt ")
    assert config._get("FQBN_TEST_VALUE", "boards.txt") == "custom.txt"


def test_flag_values(monkeypatch):
    monkeypatch.delenv("FQBN_TEST_FLAG", raising=False)
    assert config._flag("FQBN_TEST_FLAG") is False
    for v in ["1", "true", "YES", "on"]:
        monkeypatch.setenv("FQBN_TEST_FLAG", v)
        assert config._flag("FQBN_TEST_FLAG") is True
    monkeypatch.setenv("FQBN_TEST_FLAG", "0")
    assert config._flag("FQBN_TEST_FLAG") is False


def test_default_settings():
    assert config.SETTINGS.boards_file
    assert isinstance(config.SETTINGS.verbose, bool)
