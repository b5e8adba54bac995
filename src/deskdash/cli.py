from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable

from pydantic import ValidationError

from deskdash.config import Settings, get_settings
from deskdash.logging_config import setup_logging
from deskdash.models import coerce_id
from deskdash.render import format_dashboard
from deskdash.view_state import ViewState

Intent = Callable[[ViewState], Awaitable[bool]]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deskdash", description="Launcher shortcuts and notes from the command line."
    )
    parser.add_argument("--url", type=str, default=None, help="Dashboard service base URL.")
    parser.add_argument(
        "--timeout", type=float, default=None, help="Per-request timeout in seconds."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Show launchers and notes.")

    add_launcher = sub.add_parser("add-launcher", help="Add a launcher shortcut.")
    add_launcher.add_argument("name")
    add_launcher.add_argument("path")

    launch = sub.add_parser("launch", help="Trigger a launcher by id.")
    launch.add_argument("id")

    add_note = sub.add_parser("add-note", help="Add a note.")
    add_note.add_argument("content")
    add_note.add_argument("--title", default="", help="Optional note title.")

    delete_note = sub.add_parser("delete-note", help="Delete a note by id.")
    delete_note.add_argument("id")

    sub.add_parser("serve", help="Run the in-memory development service.")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    overrides = {}
    if args.url:
        overrides["api_base_url"] = args.url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.debug:
        overrides["debug"] = True
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def _intent_for(args: argparse.Namespace) -> Intent | None:
    if args.command == "add-launcher":
        return lambda view: view.on_add_launcher(args.name, args.path)
    if args.command == "launch":
        return lambda view: view.on_launch(coerce_id(args.id))
    if args.command == "add-note":
        return lambda view: view.on_add_note(args.title, args.content)
    if args.command == "delete-note":
        return lambda view: view.on_delete_note(coerce_id(args.id))
    return None


async def run_command(settings: Settings, intent: Intent | None) -> int:
    async with ViewState.from_settings(settings) as view:
        await view.load()
        if intent is not None:
            await intent(view)
        print(format_dashboard(view.snapshot()))
        return 1 if view.error else 0


def _serve(settings: Settings) -> int:
    import uvicorn

    from deskdash.devserver import create_app

    uvicorn.run(
        create_app(),
        host=settings.dev_host,
        port=settings.dev_port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        parser.error(f"invalid option: {e.errors()[0]['msg']}")
    setup_logging(settings.debug, stream=sys.stderr)

    if args.command == "serve":
        return _serve(settings)
    return asyncio.run(run_command(settings, _intent_for(args)))


if __name__ == "__main__":
    sys.exit(main())
