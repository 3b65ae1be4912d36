import pytest

from nullsafe.config.errors import ConfigurationError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ConfigurationError.invalid_value,
            ("name", 5, "must be positive"),
            "Invalid value for name: 5. must be positive",
        ),
        (
            ConfigurationError.invalid_value,
            ("name", "x"),
            "Invalid value for name: 'x'",
        ),
        (
            ConfigurationError.invalid_timezone,
            ("NULLSAFE_TIMEZONE", "Nowhere/City"),
            "Invalid timezone 'Nowhere/City' configured in NULLSAFE_TIMEZONE",
        ),
        (
            ConfigurationError.load_failed,
            ("configuration", "/tmp/.env"),
            "Failed to load configuration from /tmp/.env",
        ),
        (
            ConfigurationError.load_failed,
            ("configuration",),
            "Failed to load configuration",
        ),
    ],
)
def test_configuration_error_factories(factory, args, expected):
    exc = factory(*args)
    assert isinstance(exc, ConfigurationError)
    assert str(exc) == expected
