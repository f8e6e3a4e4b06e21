"""CLI entrypoints for filebundler commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .bundler import FileBundler
from .cache_key import identifier_for
from .config import ConfigError, load_config_data
from .fileset import FileSet
from .logging import configure_logging
from .models import FileBundlerError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_bundle_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="+",
        help="Files to bundle, root-relative (/js/app.js) or relative to the source directory.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .filebundler.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument("--type", choices=["script", "style"], help="Bundle content type.")
    parser.add_argument("--approot", help="Filesystem directory the web root maps onto.")
    parser.add_argument("--source-dir", help="Directory relative file names resolve against.")
    parser.add_argument("--bundle-dir", help="Directory bundles are written to.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filebundler",
        description="Concatenate and minify script or stylesheet files into cached bundles.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Build (or reuse) the bundle and print the tags that include it.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_bundle_options(build_parser)
    build_parser.add_argument(
        "--minifier",
        help="Minifier strategy (script: jsmin, packer; style: regex, rcssmin).",
    )
    build_parser.add_argument(
        "--no-compress",
        dest="compress",
        action="store_false",
        default=None,
        help="Concatenate without minifying.",
    )
    build_parser.add_argument(
        "--no-header",
        dest="show_list",
        action="store_false",
        default=None,
        help="Omit the comment listing bundled files.",
    )
    build_parser.add_argument(
        "--no-bundle",
        dest="enable_bundling",
        action="store_false",
        default=None,
        help="Print one tag per source file instead of building a bundle.",
    )
    build_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Rebuild the bundle even if it already exists.",
    )

    key_parser = subparsers.add_parser(
        "key",
        help="Print the bundle file name for a set of files without building it.",
    )
    _add_verbose_option(key_parser, suppress_default=True)
    _add_bundle_options(key_parser)

    return parser


def _options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    options = load_config_data(Path(args.config))
    overrides = {
        "type": args.type,
        "approot": args.approot,
        "source_dir": args.source_dir,
        "bundle_dir": args.bundle_dir,
        "minifier": getattr(args, "minifier", None),
        "compress": getattr(args, "compress", None),
        "show_list": getattr(args, "show_list", None),
        "enable_bundling": getattr(args, "enable_bundling", None),
    }
    options.update({key: value for key, value in overrides.items() if value is not None})
    if args.verbose:
        options["debug"] = True
    return options


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for filebundler commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        bundler = FileBundler(**_options_from_args(args))
    except (ConfigError, ValueError) as exc:
        parser.exit(1, f"filebundler: invalid configuration: {exc}\n")

    if args.command == "build":
        bundler.add_files(args.files)
        if not bundler.files:
            parser.exit(1, "filebundler build: none of the requested files exist\n")
        try:
            outcome = bundler.write_bundle(overwrite=bool(args.overwrite))
        except FileBundlerError as exc:
            parser.exit(1, f"filebundler build failed: {exc}\nRun with --verbose for more details.\n")
        sys.stdout.write(outcome.html)
    elif args.command == "key":
        file_set = FileSet(bundler.config, args.files)
        print(identifier_for(file_set))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
