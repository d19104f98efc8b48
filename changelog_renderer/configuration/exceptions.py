"""Contains exceptions raised when reconciling renderer configuration."""


class InvalidConfigurationError(Exception):
    """Raised when a configuration element has an unusable value."""

    pass


class RequiredConfigurationElementError(Exception):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, argument_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name}")
        self.name = name
        self.argument_name = argument_name
        self.env_name = env_name
