#!/usr/bin/env python3
"""
Main entry point for the cluster client application.

This script connects to the cluster server and runs the interactive menu.
The server address comes from the command line (host port) or from
environment variables.
"""

from typing import List, Optional
import argparse
import sys
import os

from config.settings import Config
from client.cluster_client import ClusterClient
from client.session import ConsoleInput, SessionController
from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    ClusterClientError,
    ConfigurationError,
    ConnectionFailedError,
)

logger = get_logger(__name__)


class ClientApplication:
    """Main application class for the cluster client."""

    def __init__(self, host: Optional[str] = None, port: Optional[str] = None):
        """
        Initialize application.

        Args:
            host: Server host from the command line, if given
            port: Server port from the command line, if given
        """
        self.config = Config()
        self.host = host
        self.port = port
        self.client: Optional[ClusterClient] = None

    def run(self) -> int:
        """
        Run the client application.

        Loads configuration, connects to the server and runs the menu
        session until the operator stops or a fatal error occurs.

        Returns:
            Process exit status
        """
        try:
            logger.info("Loading configuration...")
            client_config = self.config.load_client_config(self.host, self.port)
            logger.info(f"Configuration loaded: server={client_config.host}:{client_config.port}")

            self.client = ClusterClient.connect(client_config.host, client_config.port)
            with self.client:
                SessionController(self.client, ConsoleInput()).run()

            logger.info("Client application stopped successfully")
            return 0

        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            logger.error(
                "Please check the command line or your environment variables. "
                "See .env.example for the available settings."
            )
            return 1
        except ConnectionFailedError as e:
            logger.error(f"Connection error: {e}")
            return 1
        except ClusterClientError as e:
            logger.error(f"Session ended by protocol error: {e}")
            return 1
        except (KeyboardInterrupt, EOFError):
            logger.info("Interrupted by user")
            return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the optional server host and port."""
    parser = argparse.ArgumentParser(description="Cluster mining client")
    parser.add_argument('host', nargs='?', help="server host (env CLUSTER_SERVER_HOST)")
    parser.add_argument('port', nargs='?', help="server port (env CLUSTER_SERVER_PORT)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Get log level from environment
    log_level = os.getenv('LOG_LEVEL', 'INFO')

    # Setup logging
    setup_logging(log_level)

    logger.info("Starting client application...")

    app = ClientApplication(args.host, args.port)
    return app.run()


if __name__ == '__main__':
    sys.exit(main())
