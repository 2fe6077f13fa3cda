"""CLI entrypoint for Quickdash."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from quickdash import __version__
from quickdash.algorithms import Algorithm
from quickdash.cli.progress import progress_bar
from quickdash.config import QuickdashConfig, load_config
from quickdash.constants.branding import CLI_DESCRIPTION
from quickdash.constants.exit_codes import EXIT_MANIFEST_PARSE_FAILURE, EXIT_OK, EXIT_OPTION_ERROR
from quickdash.exceptions import (
    AutodetectError,
    CompareError,
    ConfigError,
    ManifestExistsError,
    ManifestNotFoundError,
    ManifestParseError,
    QuickdashError,
    UnknownAlgorithmError,
)
from quickdash.reporting import ComparisonReporter, build_report, write_json_report
from quickdash.workflows import (
    VerificationResult,
    check_manifest,
    create_manifest,
    verify_manifest,
)

logger = logging.getLogger(__name__)


def _common_options() -> argparse.ArgumentParser:
    """Options shared by every subcommand."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("path", nargs="?", type=Path, default=Path("."), help="Directory to hash (default: .)")
    common.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Manifest path (default: <path>/<directory name>.hash)",
    )
    common.add_argument(
        "-a",
        "--algorithm",
        default=None,
        help="Hashing algorithm, e.g. blake3, sha2-256, xxh64 (default: autodetect from the manifest)",
    )
    common.add_argument("-j", "--jobs", type=int, default=None, help="Hashing threads (0 = all CPUs)")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    common.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeat for debug output)",
    )
    return common


def _tree_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--depth", type=int, default=None, help="Max recursion depth (default: unlimited)")
    parser.add_argument("--follow-symlinks", action="store_true", default=None, help="Recurse into symlinks")
    parser.add_argument(
        "-i",
        "--ignored-files",
        action="append",
        default=[],
        help="File or directory to ignore, relative to path (repeat flag for multiple values)",
    )


def _report_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--report", type=Path, default=None, help="Also write a JSON report to this path")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not list matching files")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="quickdash",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    common = _common_options()

    create = subparsers.add_parser("create", parents=[common], help="Create a manifest for a directory")
    _tree_options(create)
    create.add_argument("-f", "--force", action="store_true", help="Overwrite an existing manifest")

    verify = subparsers.add_parser("verify", parents=[common], help="Re-scan a directory and compare to its manifest")
    _tree_options(verify)
    _report_options(verify)

    check = subparsers.add_parser("check", parents=[common], help="Re-hash only the files a manifest lists")
    _report_options(check)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_OPTION_ERROR

    show_progress = not args.no_progress and sys.stderr.isatty()
    try:
        with progress_bar(show_progress) as on_progress:
            if args.command == "create":
                created = create_manifest(
                    args.path,
                    args.file,
                    algorithm=config.algorithm,
                    ignored_files=config.ignored_files,
                    max_depth=config.depth,
                    follow_symlinks=config.follow_symlinks,
                    jobs=config.jobs,
                    force=args.force,
                    on_progress=on_progress,
                )
                logger.info(
                    "Created %s with %d entries (%s)",
                    created.manifest,
                    created.entries,
                    created.algorithm.value,
                )
                return EXIT_OK
            if args.command == "verify":
                result = verify_manifest(
                    args.path,
                    args.file,
                    algorithm=config.algorithm,
                    ignored_files=config.ignored_files,
                    max_depth=config.depth,
                    follow_symlinks=config.follow_symlinks,
                    jobs=config.jobs,
                    on_progress=on_progress,
                )
            else:
                result = check_manifest(
                    args.path,
                    args.file,
                    algorithm=config.algorithm,
                    jobs=config.jobs,
                    on_progress=on_progress,
                )
    except ManifestParseError as exc:
        print(f"Manifest parse error: {exc}", file=sys.stderr)
        return EXIT_MANIFEST_PARSE_FAILURE
    except CompareError as exc:
        return ComparisonReporter(sys.stdout, sys.stderr, color=_use_color(args, config)).write_error(exc)
    except ManifestExistsError:
        print("File already exists. Use --force to overwrite.", file=sys.stderr)
        return EXIT_OPTION_ERROR
    except (ManifestNotFoundError, AutodetectError, ConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_OPTION_ERROR
    except QuickdashError as exc:
        print(f"Quickdash error: {exc}", file=sys.stderr)
        return EXIT_OPTION_ERROR
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return EXIT_OPTION_ERROR

    return _report(args, config, result)


def _resolve_config(args: argparse.Namespace) -> QuickdashConfig:
    """Merge CLI flags over the config file; CLI ignore entries extend the file's list."""
    config = load_config(args.path, args.config)

    algorithm = config.algorithm
    if args.algorithm is not None:
        try:
            algorithm = Algorithm.parse(args.algorithm)
        except UnknownAlgorithmError as exc:
            raise ConfigError(str(exc)) from exc

    jobs = config.jobs if args.jobs is None else args.jobs
    if jobs < 0:
        raise ConfigError("--jobs must be a non-negative integer")

    depth = getattr(args, "depth", None)
    if depth is None:
        depth = config.depth
    elif depth < 0:
        raise ConfigError("--depth must be a non-negative integer")

    follow_symlinks = getattr(args, "follow_symlinks", None)
    ignored = getattr(args, "ignored_files", [])
    return QuickdashConfig(
        algorithm=algorithm,
        depth=depth,
        follow_symlinks=config.follow_symlinks if follow_symlinks is None else follow_symlinks,
        ignored_files=(*config.ignored_files, *ignored),
        jobs=jobs,
        color=config.color,
    )


def _use_color(args: argparse.Namespace, config: QuickdashConfig) -> bool:
    return config.color and not args.no_color and sys.stdout.isatty()


def _report(args: argparse.Namespace, config: QuickdashConfig, result: VerificationResult) -> int:
    """Render a verification result and optionally persist the JSON report."""
    reporter = ComparisonReporter(
        sys.stdout,
        sys.stderr,
        color=_use_color(args, config),
        show_matches=not args.quiet,
    )
    status = reporter.write(result.comparison)

    if args.report is not None:
        report = build_report(
            result.comparison,
            mode=args.command,
            root=args.path.resolve(),
            manifest=result.manifest,
            algorithm=result.algorithm,
        )
        try:
            write_json_report(args.report, report)
        except OSError as exc:
            print(f"I/O error: could not write report {args.report}: {exc}", file=sys.stderr)
            return EXIT_OPTION_ERROR
    return status


if __name__ == "__main__":
    raise SystemExit(main())
