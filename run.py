#!/usr/bin/env python3
"""
Test runner for the objects API suite.

Usage:
    python run.py                        # Unit and CRUD tests against the configured API mode
    python run.py --mode live            # CRUD tests against https://api.restful-api.dev
    python run.py --mode mock            # Everything offline against the in-memory API
    python run.py --integration-only -k lifecycle
"""

import argparse
import os
import sys

import pytest

from objects_api.config import get_settings


def main() -> int:
    """Main entry point for the test runner."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the objects API test suite")
    parser.add_argument(
        "--mode",
        choices=["live", "mock"],
        default=os.environ.get("API_MODE", "mock"),
        help="Backend the CRUD tests talk to (default: mock)",
    )
    parser.add_argument(
        "--base-url",
        default=settings.api_base_url,
        help=f"Remote API origin (default: {settings.api_base_url})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help=f"Set log level (default: {settings.log_level})",
    )
    parser.add_argument("-k", dest="keyword", help="Only run tests matching the given expression")
    scope = parser.add_mutually_exclusive_group()
    scope.add_argument("--unit-only", action="store_true", help="Run only the offline unit tests")
    scope.add_argument("--integration-only", action="store_true", help="Run only the CRUD integration tests")

    args = parser.parse_args()

    os.environ["API_MODE"] = args.mode
    os.environ["API_BASE_URL"] = args.base_url
    os.environ["LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()

    print(f"🚀 {settings.app_name} v{settings.app_version}")
    print(f"📡 API mode: {args.mode}")
    if args.mode == "live":
        print(f"🌐 Base URL: {args.base_url}")
    print("\n" + "=" * 50 + "\n")

    pytest_args = ["-v"]
    if args.unit_only:
        pytest_args.append("tests/unit")
    elif args.integration_only:
        pytest_args.append("tests/integration")
    else:
        pytest_args.append("tests")
    if args.keyword:
        pytest_args.extend(["-k", args.keyword])

    return pytest.main(pytest_args)


if __name__ == "__main__":
    sys.exit(main())
