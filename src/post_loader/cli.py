"""Command-line interface for the post loader."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LoaderConfig
from .exceptions import PostError
from .exporters import EXPORTERS
from .loader import load_posts

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate and collect Jekyll-style blog posts")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_site_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("site_dir", help="Site root containing _config.yml and the posts directory")
        sub.add_argument("--posts-dir", default=None, help="Posts directory relative to the site root")
        sub.add_argument("--timezone", default=None, help="Zone for dates without an offset")

    check_parser = subparsers.add_parser("check", help="Validate every post and report rejected documents")
    add_site_args(check_parser)

    export_parser = subparsers.add_parser("export", help="Write a manifest of published posts")
    add_site_args(export_parser)
    export_parser.add_argument("--format", choices=sorted(EXPORTERS), default="json", help="Manifest format")
    export_parser.add_argument("--output", required=True, help="Output file path")

    show_parser = subparsers.add_parser("show", help="Print the metadata of one post")
    add_site_args(show_parser)
    show_parser.add_argument("slug", help="Slug of the post to show")

    return parser


def _config(args: argparse.Namespace) -> LoaderConfig:
    return LoaderConfig.from_site(
        Path(args.site_dir),
        posts_dir=args.posts_dir,
        timezone=args.timezone,
    )


def check(args: argparse.Namespace) -> int:
    collection = load_posts(_config(args))
    for rejected in collection.rejected:
        print(f"{rejected.name}: {rejected.error}")
    return 0 if collection.is_clean else 1


def export(args: argparse.Namespace) -> int:
    collection = load_posts(_config(args))
    exporter = EXPORTERS[args.format]()
    count = exporter.export(collection, Path(args.output))
    LOGGER.info("Exported %s posts to %s", count, args.output)
    return 0


def show(args: argparse.Namespace) -> int:
    collection = load_posts(_config(args))
    post = collection.find_by_slug(args.slug)
    if post is None:
        print(f"No published post with slug '{args.slug}'", file=sys.stderr)
        return 1
    print(f"title: {post.title}")
    print(f"date: {post.published_at.isoformat()}")
    print(f"categories: {', '.join(sorted(post.categories))}")
    print(f"tags: {', '.join(post.tags)}")
    print(f"source: {post.source_name}")
    return 0


COMMANDS = {
    "check": check,
    "export": export,
    "show": show,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return command(args)
    except PostError as exc:
        LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
