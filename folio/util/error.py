"""Utility layer errors."""


class UtilError(Exception):
    """Base error for infrastructure helpers (settings, startup scripts)."""

    pass


class ConfigurationError(UtilError):
    """A setting is missing, or unsafe for the current environment.

    Attributes:
        setting: Environment variable carrying the setting, e.g. ``DATABASE__URL``
        reason: What is wrong with it
    """

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting} {reason}")
