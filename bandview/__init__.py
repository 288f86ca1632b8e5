"""
Command line entry point and dependency check for bandview.
"""

import sys


def check_project_dependencies() -> None:
    """
    Check all project dependencies before importing external packages.
    """
    required_packages = ["rich", "dns", "pydantic_settings"]
    missing_packages = []

    for pkg in required_packages:
        try:
            __import__(pkg)
        except ImportError:
            missing_packages.append(pkg)

    if missing_packages:
        print("Missing required Python packages:")
        for pkg in missing_packages:
            print(f"  - {pkg}")
        print("\nInstall them with:")
        print("  pip install -e .")
        sys.exit(1)


def main() -> None:
    """CLI entry point for the bandview dashboard."""
    import argparse
    import logging
    import os

    # Parse CLI args BEFORE config is imported so env var overrides take effect
    parser = argparse.ArgumentParser(
        description="Display network utilization by process, connection and remote address",
        prog="bandview",
    )
    parser.add_argument(
        "--refresh",
        "-r",
        type=float,
        help="Seconds between redraws (default: 1)",
    )
    parser.add_argument(
        "--no-resolve",
        "-n",
        action="store_true",
        help="Do not resolve remote addresses to hostnames",
    )
    parser.add_argument(
        "--scenario",
        "-s",
        choices=["steady", "burst", "idle"],
        help="Synthetic traffic scenario to display (default: steady)",
    )
    args = parser.parse_args()

    if args.refresh is not None:
        if args.refresh <= 0:
            parser.error("--refresh must be greater than 0")
        os.environ["REFRESH_INTERVAL"] = str(args.refresh)
    if args.no_resolve:
        os.environ["RESOLVE_HOSTNAMES"] = "false"
    if args.scenario:
        os.environ["DEMO_SCENARIO"] = args.scenario

    check_project_dependencies()

    from pydantic import ValidationError

    try:
        from config import LOG_DIR, LOG_FILE, LOG_LEVEL, LOG_TRUNCATE_ON_START
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}")
        sys.exit(2)

    # Create log directory if it doesn't exist
    os.makedirs(LOG_DIR, exist_ok=True)

    logging.basicConfig(
        filename=LOG_FILE,
        filemode='w' if LOG_TRUNCATE_ON_START else 'a',
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        encoding="utf-8",
    )

    from main import run_main

    run_main()


if __name__ == "__main__":
    main()
