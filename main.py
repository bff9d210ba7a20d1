import argparse
import logging
import sys

from icecream import ic

from client.app import ClientApp
from core.config import Settings, get_settings
from core.result import Failure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Critical Maps - network client")

    parser.add_argument("--endpoint", "-e", help="API endpoint (default: from settings)")
    parser.add_argument("--timeout", "-t", type=float, help="Request timeout in seconds")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    subparsers = parser.add_subparsers(dest="command", required=False)
    subparsers.add_parser("fetch", help="Fetch rider locations and chat messages")

    post = subparsers.add_parser("post", help="Publish a location")
    post.add_argument("--device", "-d", required=True, help="Device identifier")
    post.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    post.add_argument("--lon", type=float, required=True, help="Longitude in degrees")
    post.add_argument("--message", "-m", help="Chat message to send along")

    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    overrides: dict = {}
    if args.endpoint:
        overrides["api_endpoint"] = args.endpoint
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.debug:
        overrides["debug"] = True

    settings = get_settings()
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ic.configureOutput(prefix="🚲 DEBUG | ")
    if not settings.debug:
        ic.disable()

    with ClientApp(settings) as app:
        if args.command is None:
            app.run()
            return 0
        if args.command == "fetch":
            result = app.fetch()
        else:
            result = app.post(args.device, args.lat, args.lon, args.message)

    if isinstance(result, Failure):
        print(f"Request failed: {result.error}", file=sys.stderr)
        return 1

    ic(result.value)
    response = result.value
    for device, location in response.locations.items():
        latitude, longitude = location.coordinate
        print(f"{device}: {latitude:.6f}, {longitude:.6f}")
    for message in response.chat_messages.values():
        print(f"[{message.timestamp}] {message.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
