#!/usr/bin/env python3
"""
Startup script for the Tagger API server
"""

import uvicorn
import sys
import socket
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import load_config
from logger import setup_logging
from webui.main import create_app


def is_port_in_use(port: int) -> bool:
    """Check if a port is already in use"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(('localhost', port)) == 0


def find_free_port(start_port: int = 8000, max_attempts: int = 10) -> int:
    """Find a free port starting from start_port"""
    for port in range(start_port, start_port + max_attempts):
        if not is_port_in_use(port):
            return port
    raise RuntimeError(f"Could not find a free port in range {start_port}-{start_port + max_attempts - 1}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the Tagger API server")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config.yaml (default: ./config.yaml if present)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the server on (default: from config, 8000)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind to (default: from config, 0.0.0.0)"
    )
    parser.add_argument(
        "--auto-port",
        action="store_true",
        help="Automatically find a free port if the specified port is in use"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    # Command line wins over config.yaml
    if args.host:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.auto_port:
        config.server.auto_port = True
    if args.verbose:
        config.logging.verbose = True
    if args.log_file:
        config.logging.log_file = args.log_file

    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    logger = setup_logging(log_file, verbose=config.logging.verbose)

    # Check if port is in use
    port = config.server.port
    if is_port_in_use(port):
        if config.server.auto_port:
            port = find_free_port(port)
            logger.warning(f"Port {config.server.port} is in use, using port {port} instead")
        else:
            logger.error(f"Port {port} is already in use!")
            print(f"\nOptions:")
            print(f"  1. Use a different port:")
            print(f"     python start_webui.py --port {port + 1}")
            print(f"  2. Auto-find a free port:")
            print(f"     python start_webui.py --auto-port")
            return 1

    logger.info("Starting Tagger API...")
    logger.info(f"API: http://localhost:{port}")
    logger.info(f"API Docs: http://localhost:{port}/docs")

    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=port,
        log_config=None
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
