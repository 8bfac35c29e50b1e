import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, TextIO

from fwsyslog.ingest import LogConverter
from resolver import HostnameResolver
from settings import Settings, load_settings
from store import ResolutionCache


VERSION = "0.42"

logger = logging.getLogger("fwsyslog.cli")


# ---------------- CLI ----------------

def build_parser(settings: Settings) -> argparse.ArgumentParser:
    # -h belongs to --no-header, as in the original tool
    parser = argparse.ArgumentParser(
        prog="fwsyslog-convert",
        description=(
            "Juniper firewall log parser. Takes a raw firewall log and "
            "converts it to a readable format."
        ),
        epilog=f"[v{VERSION}]",
        add_help=False,
    )
    parser.add_argument("input_file", metavar="input-file")
    parser.add_argument("output_file", metavar="output-file", nargs="?")

    parser.add_argument(
        "-d",
        "--resolve-dst",
        action="store_true",
        default=settings.resolve_dst,
        help="Automatically resolve destination hostnames",
    )
    parser.add_argument(
        "-h",
        "--no-header",
        action="store_true",
        help="Suppress header line when showing tables",
    )
    parser.add_argument(
        "-o",
        "--console",
        action="store_true",
        help="Output data to the console instead of to the file",
    )
    parser.add_argument(
        "-s",
        "--resolve-src",
        action="store_true",
        default=settings.resolve_src,
        help="Automatically resolve source hostnames",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=settings.max_cached_hostnames,
        help="Maximum number of cached hostnames (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Diagnostic log level on stderr (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--help", action="help", help="Show this message and exit")

    return parser


def parse_args(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
) -> argparse.Namespace:
    settings = settings or load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.cache_size < 0:
        parser.error("--cache-size must be >= 0")

    if not args.console and args.output_file is None:
        args.output_file = args.input_file + ".csv"

    if args.output_file is not None and same_file(args.input_file, args.output_file):
        parser.error("input-file and output-file must differ")

    return args


# ---------------- Helpers ----------------

def same_file(first: str, second: str) -> bool:
    # catches ./name, absolute paths, symlinks and hard links
    if os.path.realpath(first) == os.path.realpath(second):
        return True

    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def configure_logging(level_name: str):
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_converter(args: argparse.Namespace) -> LogConverter:
    resolver = None
    if args.resolve_src or args.resolve_dst:
        resolver = HostnameResolver(cache=ResolutionCache(args.cache_size))

    return LogConverter(
        resolver=resolver,
        resolve_src=args.resolve_src,
        resolve_dst=args.resolve_dst,
        emit_header=not args.no_header,
    )


def file_sink(out: TextIO) -> Callable[[str], None]:
    def write(row: str):
        out.write(row + "\n")

    return write


def run(args: argparse.Namespace) -> int:
    converter = build_converter(args)

    try:
        fin = open(args.input_file, encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Error opening {args.input_file}: {e.strerror}", file=sys.stderr)
        return 1

    with fin:
        if args.console:
            converter.convert(fin, print)
        else:
            try:
                fout = open(args.output_file, "w", encoding="utf-8")
            except OSError as e:
                print(f"Error opening {args.output_file}: {e.strerror}", file=sys.stderr)
                return 1

            with fout:
                converter.convert(fin, file_sink(fout))

    if converter.resolver is not None:
        stats = converter.resolver.stats
        logger.info(
            "hostname cache: %d lookups, %d hits, %d misses, %d failed, %d evictions",
            stats.lookups,
            stats.hits,
            stats.misses,
            stats.failures,
            stats.evictions,
        )

    return 0


# ---------------- Main ----------------

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        return run(args)
    except MemoryError:
        print("out of memory!", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
