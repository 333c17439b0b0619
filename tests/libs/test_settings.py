from lifepath.libs.schemas import get_settings


def test_get_settings_defaults(monkeypatch):
    monkeypatch.delenv("LIFEPATH_MIN_AGE", raising=False)
    monkeypatch.delenv("LIFEPATH_MAX_AGE", raising=False)
    settings = get_settings()

    assert settings.app_name == "LifePath"
    assert settings.age_bounds == (8, 70)
    assert settings.enable_metrics is True


def test_get_settings_from_env(monkeypatch):
    monkeypatch.setenv("LIFEPATH_APP_NAME", "TestPath")
    monkeypatch.setenv("MIN_AGE", "10")
    monkeypatch.setenv("LIFEPATH_ENABLE_METRICS", "false")
    get_settings.cache_clear()
    settings = get_settings()

    assert settings.app_name == "TestPath"
    assert settings.min_age == 10
    assert settings.enable_metrics is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
