class ConfigError(ValueError):
    """Raised by the engine when a configuration cannot be used."""
