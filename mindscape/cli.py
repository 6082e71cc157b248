"""
Command line entry point for the Mindscape client.

Usage:
    python -m mindscape.cli upload notes.pdf
    python -m mindscape.cli upload notes.pdf --output palace.json

    # Ask about a concept of a saved palace:
    python -m mindscape.cli chat palace.json concept-1 "Explain it simply"
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from config.logging_config import setup_logging
from mindscape.errors import MindscapeError
from mindscape.http import ChatClient, ChatSession, PalaceClient
from mindscape.models import Palace

logger = logging.getLogger(__name__)


def format_palace(palace: Palace) -> str:
    """Multi-line summary of a palace."""
    lines = [
        f"Palace: {palace.title}",
        f"Theme:  {palace.environment_theme.theme}",
    ]
    if palace.environment_theme.confidence is not None:
        lines.append(f"        confidence {palace.environment_theme.confidence:.2f}")
    if palace.environment_config is not None:
        objects = palace.environment_config.objects or ()
        renderable = palace.environment_config.renderable_objects()
        lines.append(f"Scene:  {len(renderable)}/{len(objects)} renderable objects")
    lines.append(f"Concepts ({len(palace.concepts)}):")
    for index, concept in enumerate(palace.learning_path_concepts() or palace.concepts, start=1):
        lines.append(f"  {index}. [{concept.id}] {concept.name}")
    return "\n".join(lines)


async def run_upload(path: Path, output: Path = None) -> int:
    client = PalaceClient()
    palace = await client.upload_file(path)
    print(format_palace(palace))
    if output is not None:
        output.write_text(palace.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Palace saved to {output}")
    return 0


async def run_chat(palace_path: Path, concept_id: str, message: str) -> int:
    palace = Palace.from_json(palace_path.read_bytes())
    concept = palace.concept_by_id(concept_id)
    if concept is None:
        print(f"Error: concept '{concept_id}' not found")
        print(f"Available: {', '.join(c.id for c in palace.concepts)}")
        return 1
    session = ChatSession(ChatClient(), concept)
    reply = await session.send(message)
    print(reply.text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mindscape",
        description="Turn a PDF into a memory palace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m mindscape.cli upload notes.pdf
  python -m mindscape.cli upload notes.pdf -o palace.json
  python -m mindscape.cli chat palace.json concept-1 "Give me an example"
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Upload a PDF and print the palace")
    upload.add_argument("file", type=Path, help="PDF document to upload")
    upload.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write the decoded palace as JSON to this file"
    )

    chat = subparsers.add_parser("chat", help="Ask about a concept of a saved palace")
    chat.add_argument("palace", type=Path, help="Palace JSON written by 'upload --output'")
    chat.add_argument("concept_id", help="Concept id")
    chat.add_argument("message", help="Question to ask")

    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only"
    )
    return parser


def main(argv=None) -> int:
    """Entry point of the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging("cli", log_to_file=not args.no_log_file)

    try:
        if args.command == "upload":
            return asyncio.run(run_upload(args.file, args.output))
        return asyncio.run(run_chat(args.palace, args.concept_id, args.message))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except MindscapeError as e:
        logger.error(f"{e.error_code}: {e.message}")
        print(f"Error: {e.user_message}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
