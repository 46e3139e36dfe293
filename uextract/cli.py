#!/usr/bin/env python3
"""
Command-line interface for uextract.
Exports objects from game asset archives as JSON documents or images.
"""
import argparse
import sys
import time

from .core.filesystem_utils import FileSystemUtils
from .core.image_exporter import TEXTURE_FORMATS, normalize_texture_format
from .core.request import LITERAL, REGEX, ExportRequest
from .errors import ArchiveInitError, InvalidPatternError, LoadError
from .exporter import open_provider, run_export
from .report import print_summary_report
from .settings import apply_global_settings, load_global_settings
from .utils import log_effective_parameters, setup_logging

UNREAL_VERSIONS = tuple(
    [f"GAME_UE4_{minor}" for minor in range(28)]
    + [f"GAME_UE5_{minor}" for minor in range(6)]
)


def unreal_version_type(value):
    """argparse type for --unreal-version; case-insensitive."""
    version = value.strip().upper()
    if not version.startswith("GAME_"):
        version = f"GAME_{version}"
    if version not in UNREAL_VERSIONS:
        raise argparse.ArgumentTypeError(
            f"unknown unreal version {value!r} (expected GAME_UE4_0..GAME_UE4_27 or GAME_UE5_0..GAME_UE5_5)"
        )
    return version


def texture_format_type(value):
    """argparse type for --textures."""
    try:
        return normalize_texture_format(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="uextract",
        description="uextract extracts object information from unreal engine games",
        epilog="""Examples:
  %(prog)s --pak-directory Game/Content/Paks --output out --unreal-version GAME_UE4_27 --object Game/Weapons/Sword
  %(prog)s --pak-directory Paks --output out --unreal-version GAME_UE5_1 --use-regex --object "Weapons/.*"
  %(prog)s --pak-directory Paks --output icons --unreal-version GAME_UE5_1 --use-regex --object "UI/Icons/" --textures png""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source_group = parser.add_argument_group("Source")
    source_group.add_argument(
        "--pak-directory", required=True, metavar="PATH",
        help="Where to load the archive files from (<GameRoot>/Content/Paks)",
    )
    source_group.add_argument(
        "--unreal-version", type=unreal_version_type, default=None, metavar="VERSION",
        help="The unreal engine version the game uses (e.g. GAME_UE4_27). "
             "Required unless set in the global settings file",
    )

    select_group = parser.add_argument_group("Selection")
    select_group.add_argument(
        "--object", required=True, metavar="PATTERN",
        help="The object path(s) to match for exporting",
    )
    select_group.add_argument(
        "--use-regex", action="store_true",
        help="If enabled all object paths matching the regex in --object will be exported",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "--output", required=True, metavar="PATH",
        help="The directory to export files to",
    )
    output_group.add_argument(
        "--textures", type=texture_format_type, default=None, metavar="FORMAT",
        help=f"If enabled textures will be exported in the selected format instead "
             f"({', '.join(TEXTURE_FORMATS)})",
    )

    log_group = parser.add_argument_group("Logging")
    verbosity = log_group.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show progress information")
    verbosity.add_argument("--debug", action="store_true", help="Show debug information")
    verbosity.add_argument("-s", "--silent", action="store_true", help="Only show errors")

    return parser


def parse_arguments(argv=None):
    """Parse arguments and merge the global settings file."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings, _ = load_global_settings()
    if args.unreal_version is None and settings.get("unreal_version"):
        try:
            settings["unreal_version"] = unreal_version_type(str(settings["unreal_version"]))
        except argparse.ArgumentTypeError as e:
            parser.error(f"invalid unreal_version in settings file: {e}")
    if args.textures is None and settings.get("textures"):
        try:
            settings["textures"] = texture_format_type(str(settings["textures"]))
        except argparse.ArgumentTypeError as e:
            parser.error(f"invalid textures in settings file: {e}")
    args = apply_global_settings(args, settings)
    if args.debug:
        args.silent = False

    if args.unreal_version is None:
        parser.error("the following arguments are required: --unreal-version")
    return args


def handle_export(args, logger):
    """Run an export. Returns the process exit status."""
    try:
        pak_directory = FileSystemUtils.validate_pak_directory(args.pak_directory)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid pak directory: {e}")
        return 1

    try:
        output_directory = FileSystemUtils.ensure_directory_exists(args.output)
    except OSError as e:
        logger.error(f"Failed to create output directory {args.output}: {e}")
        return 1

    request = ExportRequest(
        pak_directory=pak_directory,
        output_directory=output_directory,
        pattern=args.object,
        mode=REGEX if args.use_regex else LITERAL,
        texture_format=args.textures,
        unreal_version=args.unreal_version,
    )
    log_effective_parameters(request, logger)

    start_time = time.time()
    try:
        provider = open_provider(request, logger)
        outcomes = run_export(request, provider, logger)
    except InvalidPatternError as e:
        logger.error(str(e))
        return 1
    except ArchiveInitError as e:
        logger.error(f"Failed to open archives: {e}")
        return 1
    except LoadError as e:
        logger.error(f"Failed to load {request.pattern}: {e}")
        return 1

    print_summary_report(outcomes, logger, execution_time=time.time() - start_time)
    return 0


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    logger = setup_logging(args.verbose, args.silent, args.debug)
    return handle_export(args, logger)


if __name__ == "__main__":
    sys.exit(main())
