"""Command line entry point for the SolarEdge monitoring client."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from solaredge_monitoring.client import MonitoringClient
from solaredge_monitoring.config import Config, load_config, load_credentials_file
from solaredge_monitoring.endpoints.helpers import SIMPLE_ENDPOINTS, get_request
from solaredge_monitoring.exceptions import MonitoringError


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Send one parameterless request and print the response as JSON."""
    parser = argparse.ArgumentParser(description="SolarEdge monitoring API client")
    parser.add_argument("endpoint", choices=sorted(SIMPLE_ENDPOINTS), help="Endpoint to query")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument(
        "--credentials", type=Path, default=None, help="Two-line file holding site id and api key"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config or args.credentials is None else Config()
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    log_level = "DEBUG" if args.debug else config.logging.level
    logging.basicConfig(level=log_level)

    if args.credentials is not None:
        try:
            credentials = load_credentials_file(args.credentials)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
    elif config.credentials is not None:
        credentials = config.credentials.to_credentials()
    else:
        parser.error("no credentials given; use --credentials or a config file with a credentials section")

    with MonitoringClient(credentials, config=config.client) as client:
        try:
            response = client.send(get_request(args.endpoint))
        except MonitoringError as exc:
            logger.error("Request for %s failed: %s", args.endpoint, exc)
            return 1

    print(response.model_dump_json(indent=2, by_alias=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
