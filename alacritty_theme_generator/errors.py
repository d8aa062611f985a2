class ThemeGeneratorError(Exception):
    """Base class for errors raised by the theme generator."""


class UnknownSchemeError(ThemeGeneratorError, ValueError):
    def __init__(self, scheme):
        self.scheme = scheme
        super().__init__(f"unknown color scheme: {scheme}")


class InvalidHexFormatError(ThemeGeneratorError, ValueError):
    def __init__(self, value, reason="invalid hex color format"):
        self.value = value
        super().__init__(f"{reason}: {value}")


class ConfigError(ThemeGeneratorError):
    pass
