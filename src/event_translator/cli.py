"""
Command-line interface for the event translation service.

Provides CLI commands:
- run: Start the HTTP API server
- translate: Translate a single event description from a JSON file
- config: Print the effective configuration

Usage:
    event-translator run [--host HOST] [--port PORT]
    event-translator translate event.json
    event-translator config

Environment Variables:
    EVT_HOST, EVT_PORT: Address to bind the API server to
    EVT_TRANSLATOR_KEY: Subscription key for the translation backend
    EVT_TRANSLATOR_REGION: Region of the translation resource
    (see event_translator.config for the full list)
"""

import argparse
import json
import sys
from pathlib import Path


def load_event_file(path: Path):
    """
    Read and validate an event description from a JSON file.

    Returns:
        EventDetails built from the file contents.

    Raises:
        EventValidationError: If the file is not a JSON object or any field
            is missing, empty or of the wrong type.
        OSError: If the file cannot be read.
    """
    from event_translator.api.models import parse_event
    from event_translator.errors import EventValidationError
    from event_translator.models import validate_event

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise EventValidationError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise EventValidationError("event file must contain a JSON object")

    event = parse_event(data)
    validate_event(event)
    return event


def cmd_run(args: argparse.Namespace) -> int:
    """
    Run the API server.

    Returns:
        0 on clean shutdown, 1 on startup error
    """
    from event_translator.config import configure_logging

    configure_logging()

    try:
        from event_translator.api.server import start_server

        start_server(host=args.host, port=args.port)
        return 0
    except KeyboardInterrupt:
        print("\nServer stopped.")
        return 0
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        return 1


def cmd_translate(args: argparse.Namespace) -> int:
    """
    Translate one event file against the configured backend.

    Prints ``{language: text}`` as JSON on success.

    Returns:
        0 on success, 1 on validation, I/O or translation error
    """
    from event_translator.config import config, configure_logging
    from event_translator.errors import EventValidationError, TranslationError
    from event_translator.translation.service import EventTranslationService
    from event_translator.translation.translator import MicrosoftTranslator

    configure_logging()

    try:
        event = load_event_file(Path(args.file))
    except (EventValidationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    service = EventTranslationService(
        MicrosoftTranslator.from_settings(config.translator),
        max_workers=config.translator.max_workers,
    )
    try:
        translations = service.translate_event(event)
    except TranslationError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.retryable:
            print("The failure looks temporary; try again shortly.", file=sys.stderr)
        return 1

    print(json.dumps(translations, ensure_ascii=False, indent=2))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Print the configuration summary."""
    from event_translator.config import print_config_summary

    print_config_summary()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="event-translator",
        description="Event Translator - keyword-protected event translation service",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="Run the API server",
        description="Start the HTTP API server.",
    )
    run_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="API server port (default: 8080, or EVT_PORT env var)",
    )
    run_parser.add_argument(
        "--host",
        type=str,
        help="Host to bind to (default: 0.0.0.0, or EVT_HOST env var)",
    )
    run_parser.set_defaults(func=cmd_run)

    # translate command
    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate an event description from a JSON file",
        description=(
            "Compose, shield and translate the event in FILE using the configured "
            "translation backend, then print the translations as JSON."
        ),
    )
    translate_parser.add_argument("file", help="Path to the event JSON file")
    translate_parser.set_defaults(func=cmd_translate)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show the effective configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
