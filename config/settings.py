"""Configuration management for the cluster client."""

from dataclasses import dataclass
from typing import Optional
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError


# Load .env file from project root
# This is called at module import time to ensure env vars are available
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080


@dataclass
class ClientConfig:
    """Address of the cluster server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def validate(self) -> None:
        """Validate client configuration parameters."""
        if not self.host:
            raise ConfigurationError("Server host is required")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ConfigurationError(f"Server port must be an integer, got: {self.port!r}")
        if self.port < 1 or self.port > 65535:
            raise ConfigurationError("Server port must be between 1 and 65535")


class Config:
    """Main configuration loader and manager."""

    def __init__(self):
        """Initialize configuration manager."""
        self.client: Optional[ClientConfig] = None

    def load_client_config(
        self,
        host: Optional[str] = None,
        port: Optional[str] = None,
    ) -> ClientConfig:
        """
        Load client configuration from arguments and environment variables.

        Explicit arguments take precedence over the environment.

        Environment variables:
            CLUSTER_SERVER_HOST: Server host name or IP (default: localhost)
            CLUSTER_SERVER_PORT: Server port (default: 8080)

        Args:
            host: Host given on the command line, if any
            port: Port given on the command line, if any

        Returns:
            Validated ClientConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        port_str = port if port is not None else os.getenv(
            'CLUSTER_SERVER_PORT', str(DEFAULT_PORT)
        )
        try:
            port_number = int(port_str)
        except ValueError:
            raise ConfigurationError(f"Server port must be a valid integer, got: {port_str}")

        config = ClientConfig(
            host=host if host is not None else os.getenv('CLUSTER_SERVER_HOST', DEFAULT_HOST),
            port=port_number,
        )
        config.validate()
        self.client = config
        return config
