"""Config validation errors."""
from wallclock.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting's value is rejected, e.g. an unknown zone name."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
