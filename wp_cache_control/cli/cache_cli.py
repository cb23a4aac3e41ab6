#!/usr/bin/env python3
# wp_cache_control/cli/cache_cli.py - Command-line interface for cache control
import argparse
import json
import os
import sys
from typing import Any

import requests

from ..core.config import CacheControlSettings, get_config_value
from ..services.cache_control_service import CacheControlService, OperationRequest

ENDPOINTS = {
    "clear_one": "/admin/cache/clear",
    "clear_all": "/admin/cache/clear-all",
    "clear_object": "/admin/cache/object/clear",
}

STATUS_ICONS = {
    "success": "✅",
    "not_found": "🔍",
    "disabled": "⏸️",
    "invalid_input": "⚠️",
}


def make_request(
    method: str, url: str, headers: dict[str, str] | None = None, data: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Make HTTP request to API; result bodies are returned whatever the status code"""
    try:
        if method.upper() == "GET":
            response = requests.get(url, headers=headers)
        elif method.upper() == "POST":
            response = requests.post(url, headers=headers, json=data)
        else:
            raise ValueError(f"Unsupported method: {method}")

        payload = response.json()
    except requests.exceptions.RequestException as e:
        print(f"❌ API request failed: {e}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"❌ Invalid JSON response: {e}")
        sys.exit(1)

    if not response.ok and "status" not in payload:
        detail = payload.get("detail") or payload.get("message") or response.reason
        print(f"❌ API request failed ({response.status_code}): {detail}")
        sys.exit(1)
    return payload


def run_remote(operation: str, url: str | None, base_url: str, api_key: str | None) -> dict[str, Any]:
    """Fetch an operation token, then run the operation through the admin API"""
    auth_headers = {"X-API-Key": api_key} if api_key else {}

    token = make_request(
        "GET", f"{base_url}/admin/cache/token?operation={operation}", headers=auth_headers
    )
    headers = {**auth_headers, "X-Operation-Token": token["token"]}

    data = {"url": url} if operation == "clear_one" else None
    return make_request("POST", f"{base_url}{ENDPOINTS[operation]}", headers=headers, data=data)


def run_local(operation: str, url: str | None) -> dict[str, Any]:
    """Run the operation in-process against the configured cache root"""
    service = CacheControlService.from_settings(CacheControlSettings.from_config())
    return service.handle(OperationRequest(operation=operation, url=url)).to_dict()


def print_result(result: dict[str, Any]) -> int:
    """Print a result and return the process exit code"""
    status = result.get("status", "failure")
    icon = STATUS_ICONS.get(status, "❌")
    print(f"{icon} {result.get('message', status)}")

    if result.get("path"):
        print(f"   Path: {result['path']}")
    if "files_removed" in result:
        print(f"   Files removed: {result['files_removed']}")
        print(f"   Directories removed: {result['directories_removed']}")
    for failed in result.get("failed_paths") or []:
        print(f"   Not removed: {failed}")

    return 0 if status == "success" else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Clear the FastCGI page cache and the object cache")
    parser.add_argument(
        "--base-url",
        default=get_config_value("api.base_url", "http://localhost:8080"),
        help="Admin API base URL",
    )
    parser.add_argument("--api-key", default=os.getenv("API_KEY"), help="Administrator API key")
    parser.add_argument(
        "--local", action="store_true", help="Delete directly on this machine instead of via the API"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    clear_parser = subparsers.add_parser("clear", help="Clear the cache entry of one URL")
    clear_parser.add_argument("url", help="URL of the cached page")

    subparsers.add_parser("clear-all", help="Clear the entire page cache")
    subparsers.add_parser("clear-object", help="Flush the object cache")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    operation = {"clear": "clear_one", "clear-all": "clear_all", "clear-object": "clear_object"}[
        args.command
    ]
    url = getattr(args, "url", None)

    if args.local:
        result = run_local(operation, url)
    else:
        result = run_remote(operation, url, args.base_url.rstrip("/"), args.api_key)

    return print_result(result)


if __name__ == "__main__":
    sys.exit(main())
