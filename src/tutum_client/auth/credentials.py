"""Credential resolution for the Tutum API.

Every authenticated call is signed with a user name and an API key. This
module finds them and keeps them for the rest of the process.

Resolution order (first complete pair wins, sources are never merged):
1. Credentials already held by the CredentialStore
2. ``~/.tutum`` configuration file (TOML, ``[auth]`` table)
3. ``TUTUM_USER`` / ``TUTUM_APIKEY`` environment variables (.env aware)

A configuration file that exists but cannot be parsed stops resolution with
ConfigMalformedError. The environment is not consulted in that case.

Example:
    ```python
    from tutum_client.auth import CredentialResolver, default_store

    credentials = default_store.resolve(CredentialResolver())
    print(credentials.user)
    ```

Security Considerations:
    - API keys are never logged (masked with ***)
    - Only the user name and the source are logged
    - Thread-safe dotenv loading and first-time resolution with locks
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from tutum_client.auth.exceptions import ConfigMalformedError, CredentialNotFoundError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".tutum"
USER_ENV_VAR = "TUTUM_USER"
APIKEY_ENV_VAR = "TUTUM_APIKEY"

AUTH_SCHEME = "ApiKey"


@dataclass(frozen=True)
class Credentials:
    """A Tutum user name and API key pair."""

    user: str
    apikey: str

    @property
    def is_complete(self) -> bool:
        """Both fields are non-empty."""
        return bool(self.user) and bool(self.apikey)

    @property
    def authorization_header(self) -> str:
        return f"{AUTH_SCHEME} {self.user}:{self.apikey}"

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, apikey='***')"


class CredentialStore:
    """Holds the resolved credentials for as long as the store lives.

    The store is written at most once. After it holds a complete pair,
    further ``set`` or ``resolve`` calls return the stored value and never
    touch the filesystem or the environment again.

    Example:
        ```python
        store = CredentialStore()
        store.resolve(CredentialResolver(load_dotenv=False))
        assert store.is_authenticated
        ```
    """

    def __init__(self, credentials: Credentials | None = None):
        self._credentials: Credentials | None = None
        self._lock = Lock()
        if credentials is not None:
            self.set(credentials)

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    @property
    def is_authenticated(self) -> bool:
        return self._credentials is not None

    def set(self, credentials: Credentials) -> Credentials:
        """Store credentials unless a complete pair is already held.

        Returns:
            The credentials held by the store after the call.

        Raises:
            ValueError: If ``credentials`` is incomplete.
        """
        if not credentials.is_complete:
            raise ValueError("Credentials must have a non-empty user and apikey")

        with self._lock:
            if self._credentials is None:
                self._credentials = credentials
            return self._credentials

    def resolve(self, resolver: "CredentialResolver") -> Credentials:
        """Return stored credentials, resolving them on first use.

        Concurrent first callers are serialized so the configuration file
        and environment are read at most once.

        Raises:
            ConfigMalformedError: The configuration file exists but is broken.
            CredentialNotFoundError: No source provided credentials.
        """
        cached = self._credentials
        if cached is not None:
            logger.debug(f"Credentials for {cached.user} already loaded")
            return cached

        with self._lock:
            # Double-check after acquiring the lock
            if self._credentials is None:
                self._credentials = resolver.resolve_credentials()
            return self._credentials


class CredentialResolver:
    """Resolve Tutum credentials and settings from their sources.

    Attributes:
        config_path: Location of the TOML configuration file, or None when
            the home directory cannot be determined.
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.

    Example:
        ```python
        resolver = CredentialResolver()

        # User name and API key
        credentials = resolver.resolve_credentials()

        # Any other setting, with a fallback default
        base_url = resolver.resolve(env_var_name="TUTUM_BASE_URL", default="https://app.tutum.co/api/v1/")
        ```
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        """Initialize credential resolver.

        Args:
            config_path: Path to the TOML configuration file. Defaults to
                ``.tutum`` in the current user's home directory.
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file. Set to False to skip
                .env file loading (useful for testing or when not using .env).
                Default is True.
        """
        if config_path is not None:
            self.config_path: Path | None = Path(os.path.expanduser(str(config_path)))
        else:
            self.config_path = self._default_config_path()

        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        # Load dotenv immediately if enabled
        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    @staticmethod
    def _default_config_path() -> Path | None:
        try:
            return Path.home() / CONFIG_FILE_NAME
        except RuntimeError:
            logger.debug("Could not determine home directory, skipping config file")
            return None

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded (thread-safe).

        Variables already present in the environment are not overridden.
        """
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            # Double-check pattern for thread safety
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single setting from multiple sources.

        Resolution order (first match wins):
        1. Explicitly provided `value` parameter
        2. Non-empty environment variable (if `env_var_name` provided)
        3. Default value (if `default` provided)
        4. None (if not required) or raise error (if required)

        Raises:
            CredentialNotFoundError: If required=True and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved {env_var_name or 'setting'} from {source}")

        if required and result is None:
            error_msg = "Required setting not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            env_var_names = (env_var_name,) if env_var_name else ()
            raise CredentialNotFoundError(error_msg, env_var_names=env_var_names)

        return result

    def resolve_credentials(self) -> Credentials:
        """Find a complete user/apikey pair.

        Checks the configuration file first, then the environment.

        Returns:
            The resolved credentials.

        Raises:
            ConfigMalformedError: The configuration file exists but could not
                be parsed. The environment is not consulted.
            CredentialNotFoundError: Neither source provided both values.
        """
        credentials = self._from_config_file()
        if credentials is not None:
            logger.debug(f"Loading credentials for {credentials.user} from config file")
            return credentials

        credentials = self._from_environment()
        if credentials is not None:
            logger.debug(f"Loading credentials for {credentials.user} from environment")
            return credentials

        logger.debug("Couldn't automatically load credentials")
        raise CredentialNotFoundError(
            f"Couldn't find any Tutum credentials in ~/{CONFIG_FILE_NAME} "
            f"or environment variables {USER_ENV_VAR} and {APIKEY_ENV_VAR}",
            env_var_names=(USER_ENV_VAR, APIKEY_ENV_VAR),
            config_path=self.config_path,
        )

    def _from_config_file(self) -> Credentials | None:
        path = self.config_path
        if path is None:
            return None

        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Malformed Tutum configuration file found at {path}: {e}")
            raise ConfigMalformedError(f"Malformed Tutum configuration file found at {path}: {e}", path=path) from e

        auth = data.get("auth", {})
        if not isinstance(auth, dict):
            raise ConfigMalformedError(
                f"Malformed Tutum configuration file found at {path}: 'auth' must be a table", path=path
            )

        # Key names match case-insensitively; an exact-case key wins
        lowered = {key.lower(): value for key, value in auth.items()}
        user = auth.get("User", lowered.get("user", ""))
        apikey = auth.get("Apikey", lowered.get("apikey", ""))
        if not isinstance(user, str) or not isinstance(apikey, str):
            raise ConfigMalformedError(
                f"Malformed Tutum configuration file found at {path}: 'User' and 'Apikey' must be strings",
                path=path,
            )

        credentials = Credentials(user=user, apikey=apikey)
        return credentials if credentials.is_complete else None

    def _from_environment(self) -> Credentials | None:
        credentials = Credentials(
            user=os.environ.get(USER_ENV_VAR, ""),
            apikey=os.environ.get(APIKEY_ENV_VAR, ""),
        )
        return credentials if credentials.is_complete else None


# Process-wide store used by clients that are not given one explicitly.
default_store = CredentialStore()
