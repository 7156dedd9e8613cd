"""``warble search`` and ``warble routes`` implementations."""

import argparse
import asyncio
import dataclasses
import logging
import sys

from warble.catalog import create_catalog, install_routes, select_search_view
from warble.config import ProxyConfig
from warble.errors import ConfigurationError
from warble.events import Event
from warble.proxy import HttpProxy, SimulatedProxy, create_proxy


def resolve_config(args: argparse.Namespace) -> ProxyConfig:
    """Environment first, then command-line overrides."""
    config = ProxyConfig.from_env()
    overrides: dict[str, object] = {}
    if args.backend is not None:
        overrides["backend"] = args.backend
    if args.base_url is not None:
        overrides["base_url"] = args.base_url
    if args.latency is not None:
        overrides["latency"] = tuple(args.latency)
    if args.verbose:
        overrides["log_level"] = "debug"
    return dataclasses.replace(config, **overrides)  # type: ignore[arg-type]


def run_search(args: argparse.Namespace) -> int:
    """Run one search and print every event plus the final view.

    Returns the process exit code: 0 on success, 1 if the search failed.
    """
    try:
        config = resolve_config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return asyncio.run(_search(config, args.text))


async def _search(config: ProxyConfig, text: str) -> int:
    proxy = create_proxy(config)
    if isinstance(proxy, SimulatedProxy):
        install_routes(proxy)

    catalog = create_catalog(proxy)

    def show(event: Event) -> None:
        print(f"  {event.name}: {event.payload!r}")

    catalog.store.tap(show)
    try:
        print(f"Searching {config.backend} backend for {text!r}")
        catalog.search.text_changed(text)
        await catalog.search.search()
    finally:
        if isinstance(proxy, HttpProxy):
            await proxy.aclose()

    view = select_search_view(catalog.store.get_state())
    if view["has_error"]:
        print(f"Error: {view['error_message']}")
        return 1
    print(f"{view['result_count']} result(s)")
    for name in view["results"]:
        print(f"  - {name}")
    return 0


def list_routes() -> None:
    proxy = install_routes(SimulatedProxy())
    for kind, pattern in proxy.routes:
        print(f"{kind.upper():<6} {pattern}")
