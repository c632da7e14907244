"""Custom exceptions for credential resolution.

Example:
    ```python
    from tutum_client.auth.exceptions import CredentialNotFoundError

    if not credentials:
        raise CredentialNotFoundError("Tutum credentials not found", env_var_names=("TUTUM_USER",))
    ```
"""

from pathlib import Path


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when no source provided a complete user/apikey pair.

    Callers usually recover from this one, e.g. by prompting the operator
    or exiting with the message.

    Attributes:
        env_var_names: The environment variables that were checked.
        config_path: The configuration file that was checked (if any).

    Example:
        ```python
        try:
            credentials = resolver.resolve_credentials()
        except CredentialNotFoundError as e:
            print(f"Set one of {e.env_var_names} or create {e.config_path}")
        ```
    """

    def __init__(
        self,
        message: str,
        env_var_names: tuple[str, ...] = (),
        config_path: Path | None = None,
    ):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message naming the locations that were searched.
            env_var_names: Environment variable names that were checked.
            config_path: Configuration file path that was checked.
        """
        super().__init__(message)
        self.env_var_names = env_var_names
        self.config_path = config_path


class ConfigMalformedError(CredentialError):
    """Raised when the configuration file exists but cannot be used.

    This is fatal for resolution: a present-but-broken file is never
    skipped in favour of environment variables.

    Attributes:
        path: The configuration file that failed to parse.
    """

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
