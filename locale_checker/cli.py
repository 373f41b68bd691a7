"""Command-line interface for locale checker."""

import sys
import argparse
import yaml
from pathlib import Path
from typing import List, Optional

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import Config, ConfigValidationError, MISSING_BUNDLE_POLICIES
from .utils.logging import configure_logging, get_logger
from .core.checker import LocaleChecker
from .core.file_manager import FileAccessError
from .reports.console_reporter import ConsoleReporter
from .reports.json_reporter import JSONReporter

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def load_and_validate_config(
    project_dir: Path,
    config_path: Optional[Path] = None,
    validate: bool = True,
    verbose: bool = False,
    args=None,
) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        project_dir: Project directory (searched for .locale-checker.yml)
        config_path: Explicit config file
        validate: Whether to validate the config
        verbose: Whether to print warnings
        args: Parsed command-line options applied on top of the file

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    config = Config.from_file(config_path, project_dir=project_dir)
    if args is not None:
        apply_overrides(config, args)

    if validate:
        errors, warnings = config.validate(project_dir=project_dir)

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}", file=sys.stderr)

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:", file=sys.stderr)
            for error in errors:
                print(f"   • {error}", file=sys.stderr)
            raise ConfigValidationError(errors)

    return config


def apply_overrides(config: Config, args) -> Config:
    """Apply command-line options on top of the loaded config."""
    if args.missing_bundle:
        config.check.missing_bundle = args.missing_bundle
    # A malformed ignore value is left for validation to report
    if args.ignore and isinstance(config.check.ignore, list):
        config.check.ignore = config.check.ignore + list(args.ignore)
    return config


def cmd_check(args) -> int:
    """Run the check and report findings."""
    project_dir = Path(args.project).resolve()
    use_colors = not args.no_color

    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=Path(args.log_file) if args.log_file else None,
        use_colors=use_colors,
    )
    logger = get_logger()

    if not project_dir.is_dir():
        print(f"Unexpected error: project directory not found: {project_dir}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = load_and_validate_config(
            project_dir,
            config_path=Path(args.config) if args.config else None,
            verbose=args.verbose,
            args=args,
        )
    except ConfigValidationError:
        return EXIT_ERROR
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        # Unreadable or malformed config file, or unknown keys in it
        print(f"Unexpected error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    checker = LocaleChecker(
        project_dir=project_dir,
        config=config,
        use_threads=not args.no_threads,
        max_workers=args.workers,
    )

    try:
        result = checker.check()
    except FileAccessError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if 'console' in config.reports.formats:
        ConsoleReporter.print_report(result, use_colors=use_colors, show_summary=not args.quiet)

    if 'json' in config.reports.formats or args.json:
        output_path = Path(args.json) if args.json else Path(config.reports.output) / 'report.json'
        try:
            JSONReporter.generate(result, output_path=output_path, project_dir=project_dir, config=config)
        except OSError as e:
            print(f"Unexpected error: can't write report {output_path}: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info(f"JSON report: {output_path}")

    return EXIT_FINDINGS if result.has_findings else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='check-locales',
        description='Check that every template key is defined in every locale bundle',
    )
    parser.add_argument('project', nargs='?', default='.',
                        help='Project directory (default: current directory)')
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--ignore', '-i', action='append', metavar='GLOB', default=[],
                        help='Ignore files matching a glob (project-relative, repeatable)')
    parser.add_argument('--missing-bundle', '-m', choices=list(MISSING_BUNDLE_POLICIES),
                        help='Missing bundle policy (default: allow)')
    parser.add_argument('--config', '-c', metavar='PATH',
                        help='Config file (default: <project>/.locale-checker.yml)')
    parser.add_argument('--json', metavar='PATH',
                        help='Write a JSON report (on top of the configured report formats)')
    parser.add_argument('--workers', type=int, default=4, metavar='N',
                        help='Number of file reader threads (default: 4)')
    parser.add_argument('--no-threads', action='store_true', help='Read files sequentially')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show detailed output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only print findings')
    parser.add_argument('--log-file', metavar='PATH', help='Also write logs to a file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error('--workers must be at least 1')

    return cmd_check(args)


if __name__ == '__main__':
    sys.exit(main())
