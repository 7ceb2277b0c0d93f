"""Domain exceptions for the auth module."""


class ConfigurationError(Exception):
    """A required setting is missing; not recoverable per request."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"Missing required setting: {setting}")
