# btcrpc/core/config.py

from pathlib import Path
from typing import Optional, Tuple

from pydantic_settings import BaseSettings

from btcrpc.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application Settings"""

    # Application
    APP_NAME: str = "btcrpc"
    ENVIRONMENT: str = "development"  # development, staging, production
    VERSION: str = "0.1.0"

    # Introspection server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Daemon connection
    RPC_URL: str = "http://127.0.0.1:8332"
    RPC_USER: str = ""
    RPC_PASSWORD: str = ""
    RPC_COOKIE_FILE: str = ""  # e.g. ~/.bitcoin/.cookie, wins over user/password
    RPC_WALLET: str = ""  # appended as /wallet/<name> for wallet calls
    RPC_TIMEOUT: float = 30.0
    RPC_MAX_RETRIES: int = 3

    # Daemon major version the wire schemas are selected for (17 = v0.17)
    DAEMON_VERSION: int = 26

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = {
        "env_file": ".env",
        "env_prefix": "BTCRPC_",
        "case_sensitive": True,
        "extra": "ignore"
    }

    def rpc_auth(self) -> Optional[Tuple[str, str]]:
        """
        Resolve HTTP basic auth credentials

        The cookie file written by bitcoind holds ``user:password`` and takes
        precedence over RPC_USER/RPC_PASSWORD.

        Returns:
            (user, password) tuple, or None when no credentials are configured

        Raises:
            ConfigurationError: If the cookie file is unreadable or malformed
        """
        if self.RPC_COOKIE_FILE:
            path = Path(self.RPC_COOKIE_FILE).expanduser()
            try:
                cookie = path.read_text().strip()
            except OSError as e:
                raise ConfigurationError(
                    f"Cannot read RPC cookie file {path}: {e}",
                    details={"path": str(path)}
                )
            user, sep, password = cookie.partition(":")
            if not sep or not user:
                raise ConfigurationError(
                    f"RPC cookie file {path} is not in user:password form",
                    details={"path": str(path)}
                )
            return user, password

        if self.RPC_USER:
            return self.RPC_USER, self.RPC_PASSWORD

        return None

settings = Settings()
