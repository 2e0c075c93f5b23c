"""Tabby CLI — tabby build / tabby sitemap / tabby check.

Entry point for the ``tabby`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the tabby CLI."""
    parser = argparse.ArgumentParser(
        prog="tabby",
        description="Generate Sitemaps Protocol files from URL records.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tabby build
    build_parser = subparsers.add_parser(
        "build",
        help="Write a sitemap index and chunked sitemaps",
    )
    build_parser.add_argument("records", help="JSON or YAML file of URL records")
    build_parser.add_argument("--root", default=".", help="Directory holding tabby.toml/yaml")
    build_parser.add_argument(
        "--base-url", default=None, help="Public URL of the sitemaps (required unless configured)",
    )
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument(
        "--max-urls", type=int, default=None, help="Maximum URLs per sitemap",
    )
    build_parser.add_argument("--prefix", default=None, help="Sitemap file-name prefix")
    build_parser.add_argument("--index-name", default=None, help="Sitemap index file name")
    build_parser.add_argument(
        "--compact", action="store_true", help="Write single-line XML",
    )

    # tabby sitemap
    sitemap_parser = subparsers.add_parser(
        "sitemap",
        help="Stream a single sitemap to a file or stdout",
    )
    sitemap_parser.add_argument("records", help="JSON or YAML file of URL records")
    sitemap_parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    sitemap_parser.add_argument(
        "--compact", action="store_true", help="Write single-line XML",
    )

    # tabby check
    check_parser = subparsers.add_parser(
        "check",
        help="Validate URL records without writing anything",
    )
    check_parser.add_argument("records", help="JSON or YAML file of URL records")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from tabby import __version__

    return __version__


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _build(args: argparse.Namespace) -> None:
    from tabby.config_loader import load_config
    from tabby.export import write_collection
    from tabby.loader import load_urls

    root = Path(args.root)
    config = load_config(
        root,
        base_url=args.base_url,
        output=args.output,
        max_urls_per_sitemap=args.max_urls,
        prefix=args.prefix,
        index_name=args.index_name,
        pretty_print=False if args.compact else None,
    )
    urls = load_urls(Path(args.records))
    result = write_collection(urls, config.output_path(root), config=config)

    lines = [
        "",
        "─" * 41,
        f"  Wrote {_plural(result.total_sitemaps, 'sitemap')}"
        f" ({_plural(result.total_urls, 'URL')})",
        f"  Index: {result.files[-1].output_path}",
        f"  Output: {result.output_dir}",
        f"  Done in {result.duration_ms:.0f}ms",
    ]
    print("\n".join(lines), file=sys.stderr)


def _sitemap(args: argparse.Namespace) -> None:
    from tabby.export import write_sitemap_stream
    from tabby.loader import load_urls
    from tabby.stream import generate_sitemap_stream

    urls = load_urls(Path(args.records))
    pretty_print = not args.compact
    if args.output is None:
        for chunk in generate_sitemap_stream(urls, pretty_print=pretty_print):
            sys.stdout.buffer.write(chunk)
        sys.stdout.buffer.flush()
        return

    exported = write_sitemap_stream(urls, Path(args.output), pretty_print=pretty_print)
    print(
        f"  Wrote {exported.output_path} ({exported.size_bytes} bytes,"
        f" {exported.duration_ms:.0f}ms)",
        file=sys.stderr,
    )


def _check(args: argparse.Namespace) -> None:
    from tabby.document import validate_urls
    from tabby.loader import load_urls

    t0 = time.perf_counter()
    urls = load_urls(Path(args.records))
    validate_urls(urls)
    elapsed = (time.perf_counter() - t0) * 1000
    print(f"  {_plural(len(urls), 'URL')} OK ({elapsed:.0f}ms)", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    from tabby._errors import TabbyError

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    commands = {"build": _build, "sitemap": _sitemap, "check": _check}
    try:
        commands[args.command](args)
    except TabbyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
