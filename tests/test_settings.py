from fleet_builder.config.settings import Settings


def test_defaults():
    settings = Settings.load(env={})
    assert settings.default_rental_days == 30
    assert settings.max_quantity == 999_999_999
    assert settings.currency == "EUR"
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = Settings.load(env={
        "FLEET_BUILDER_DEFAULT_RENTAL_DAYS": "14",
        "FLEET_BUILDER_API_PORT": "9000",
        "FLEET_BUILDER_LOG_LEVEL": "debug",
    })
    assert settings.default_rental_days == 14
    assert settings.api_port == 9000
    assert settings.log_level == "DEBUG"


def test_invalid_overrides_keep_defaults():
    settings = Settings.load(env={
        "FLEET_BUILDER_DEFAULT_RENTAL_DAYS": "a month",
        "FLEET_BUILDER_MAX_QUANTITY": "-1",
        "FLEET_BUILDER_API_PORT": "0",
        "FLEET_BUILDER_LOG_LEVEL": "chatty",
    })
    assert settings.default_rental_days == 30
    assert settings.max_quantity == 999_999_999
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
