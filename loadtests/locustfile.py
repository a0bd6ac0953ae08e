"""Inventory Catalog load testing: Locust entry point.

Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Catalog journeys only:
    locust -f loadtests/locustfile.py CatalogUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py CatalogUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.catalog import CatalogBrowserUser, CatalogUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so a failure reads "name: Product with name
    'X' already exists" instead of just "409".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Fetch and print the inventory health report when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    try:
        resp = requests.get(f"{environment.host}/metrics/health", timeout=5)
        report = resp.json()
        print(f"[LOADTEST] Inventory health: {report['status']} ({report['message']})")
        print(
            f"[LOADTEST] Products: {report['total_products']} total, "
            f"{report['out_of_stock_products']} out of stock, "
            f"availability {report['stock_availability_rate']}%"
        )
        print()
    except (requests.RequestException, ValueError, KeyError) as e:
        print(f"[LOADTEST] Could not fetch inventory health: {e}\n")
