import logging

from cloudcube.config import Settings, configure_logging
from cloudcube.cube import DeleteStrategy, resolve_config


def test_cube_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CUBE_PUBLIC", "AKIAEXAMPLE")
    monkeypatch.setenv("CUBE_PRIVATE", "secret")
    monkeypatch.setenv("CUBE_URL", "https://cloud-cube-eu.s3.amazonaws.com/eucube")
    monkeypatch.setenv("CUBE_BASE_PATH", "media")
    monkeypatch.setenv("CUBE_DELETE_STRATEGY", "derive")
    monkeypatch.setenv("LOGGING_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.cube.url == "https://cloud-cube-eu.s3.amazonaws.com/eucube"
    assert settings.cube.base_path == "media"
    assert settings.logging.level == "DEBUG"

    params = resolve_config(settings.cube.to_provider_config())
    assert params.access_key_id == "AKIAEXAMPLE"
    assert params.bucket == "cloud-cube-eu"
    assert params.region == "eu-west-1"
    assert params.base_path == "media"
    assert params.delete_strategy == DeleteStrategy.DERIVE


def test_settings_defaults_without_environment(monkeypatch):
    for name in (
        "CUBE_PUBLIC",
        "CUBE_PRIVATE",
        "CUBE_URL",
        "CUBE_BASE_PATH",
        "CUBE_USE_ENV",
        "CUBE_DELETE_STRATEGY",
        "LOGGING_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.cube.url is None
    assert settings.cube.delete_strategy == DeleteStrategy.URL
    assert settings.logging.level == "INFO"


def test_configure_logging_does_not_stack_handlers():
    configure_logging("WARNING")
    configure_logging("INFO")

    named = [h for h in logging.getLogger().handlers if h.get_name() == "cloudcube-console"]
    assert len(named) == 1
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_caps_botocore_and_unknown_levels():
    configure_logging("DEBUG")
    assert logging.getLogger("botocore").level == logging.INFO

    configure_logging("nonsense")
    assert logging.getLogger().level == logging.INFO
