"""
Platdetect CLI

Diagnostic front end for the platform capability catalog.

Usage:
    platdetect summary
    platdetect check ubuntu --version-id 14.04
    platdetect report --format yaml
"""

import argparse
import json
import logging
import platform
import sys
from typing import List, Optional

from platdetect import __version__
from platdetect.config import DetectionConfig, get_config
from platdetect.detection import PREDICATE_NAMES, PlatformDetection
from platdetect.errors import ExitCode, PlatformDetectionError


def get_version_string() -> str:
    """Generate a detailed version string."""
    return (
        f"platdetect {__version__}\n"
        f"  python: {platform.python_version()}\n"
        f"  platform: {platform.system()} {platform.release()}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='platdetect',
        description='Report what the current host platform is',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  platdetect summary
  platdetect check centos --version-id 7
  platdetect check is_fedora
  platdetect report --format json
        """
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=get_version_string(),
    )

    parser.add_argument(
        '--os-release',
        dest='os_release',
        default=None,
        help='Distribution descriptor to read (default: /etc/os-release)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (-v, -vv)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser(
        'summary',
        help='Print the distribution summary line',
    )

    check_parser = subparsers.add_parser(
        'check',
        help='Check a distro id or a named predicate',
        description='Exit 0 if the host matches, 1 otherwise'
    )
    check_parser.add_argument(
        'target',
        type=str,
        help='Distro id (e.g. ubuntu) or predicate name (e.g. is_centos7)'
    )
    check_parser.add_argument(
        '--version-id',
        dest='version_id',
        default=None,
        help='Required VERSION_ID (distro ids only)'
    )

    report_parser = subparsers.add_parser(
        'report',
        help='Print every predicate and the distribution record',
    )
    report_parser.add_argument(
        '--format', '-f',
        dest='output_format',
        choices=['yaml', 'json'],
        default='yaml',
        help='Output format (default: yaml)'
    )

    return parser


def build_report(detector: PlatformDetection) -> dict:
    """Collect the catalog into a plain dict."""
    record = detector.distribution()
    return {
        'os_family': detector.os_family,
        'kernel_version': str(detector.kernel_version),
        'osx_kernel_version': str(detector.osx_kernel_version),
        'windows_version': detector.windows_version,
        'distribution': {
            'id': record.id,
            'version_id': record.version_id,
            'version': record.version,
            'pretty_name': record.pretty_name,
        },
        'predicates': detector.predicates(),
    }


def run_check(detector: PlatformDetection, args: argparse.Namespace) -> int:
    """Run the check command."""
    if args.target in PREDICATE_NAMES:
        if args.version_id is not None:
            print("ERROR: --version-id only applies to distro ids", file=sys.stderr)
            return ExitCode.USAGE_ERROR
        matched = detector.predicate(args.target)
    else:
        matched = detector.matches_distro(args.target, args.version_id)
    print('yes' if matched else 'no')
    return ExitCode.SUCCESS if matched else ExitCode.NO_MATCH


def run_report(detector: PlatformDetection, args: argparse.Namespace) -> int:
    """Run the report command."""
    report = build_report(detector)
    if args.output_format == 'json':
        print(json.dumps(report, indent=2))
    else:
        import yaml
        print(yaml.safe_dump(report, default_flow_style=False, sort_keys=False), end='')
    return ExitCode.SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the platdetect CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return ExitCode.SUCCESS

    config = DetectionConfig(
        os_release_path=args.os_release or get_config().os_release_path,
        cache_record=get_config().cache_record,
    )
    detector = PlatformDetection(config=config)

    try:
        if args.command == 'summary':
            print(detector.distribution_summary)
            return ExitCode.SUCCESS
        if args.command == 'check':
            return run_check(detector, args)
        return run_report(detector, args)

    except PlatformDetectionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(f"ERROR: Cannot read platform information: {e}", file=sys.stderr)
        if args.verbose >= 2:
            import traceback
            traceback.print_exc()
        return ExitCode.IO_ERROR


if __name__ == '__main__':
    sys.exit(main())
