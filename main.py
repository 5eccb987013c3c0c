#!/usr/bin/env python3
"""
Main entry point for the Logistics Matching Service.
"""

import argparse

from src.logging_config import configure_logging


def run_api(host=None, port=None):
    """Start the FastAPI server."""
    import uvicorn
    from src.config import settings

    uvicorn.run(
        "src.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


def show_config():
    """Print the effective settings (environment + .env)."""
    from src.config import settings

    for name, value in settings.model_dump().items():
        print(f"{name} = {value}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Logistics Matching Service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  api       Start the FastAPI server
  config    Print the effective configuration

Examples:
  python main.py api
  python main.py api --port 8080
  ZONE_MEMBERSHIP_MODE=polygon python main.py api
        """,
    )

    parser.add_argument(
        "command",
        choices=["api", "config"],
        help="Command to run",
    )
    parser.add_argument("--host", default=None, help="Bind address (api)")
    parser.add_argument("--port", type=int, default=None, help="Port (api)")

    args = parser.parse_args()

    # Configure logging
    configure_logging()

    # Run command
    if args.command == "api":
        run_api(args.host, args.port)
    elif args.command == "config":
        show_config()


if __name__ == "__main__":
    main()
