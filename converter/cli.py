#!/usr/bin/env python3
"""Command-line interface for the case converter.

Usage:
    case-convert "Hello World"                      # hello-world
    case-convert --style camel "API response code"  # apiResponseCode
    case-convert --all "user#name$"                 # every style
    echo "version 2 update" | case-convert -s dot   # reads stdin
    case-convert --examples                         # demonstration table
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

import yaml

from config import get_config_value, load_config
from converter.case_converter import (
    CaseStyle,
    ConversionError,
    convert,
)


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


EXAMPLE_INPUTS = [
    'Hello World',
    ' API_Response Code ',
    'test-case',
    '___multiple___underscores___',
    'hello_world-foo bar',
    'hello   world',
    'version 2 update',
    'hello@world!',
    'user#name$',
    'SCREEN_NAME',
    '   ',
]


def setup_argparser() -> argparse.ArgumentParser:
    """Set up the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog='case-convert',
        description='Convert text to kebab-case, dot.case or camelCase.',
        epilog='Example: case-convert --style camel "API response code"',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Text to convert (default: read lines from stdin)',
    )

    parser.add_argument(
        '--style', '-s',
        help='Target style: kebab, dot or camel (default: from config)',
    )

    parser.add_argument(
        '--all', '-a',
        action='store_true',
        help='Print the conversion for every style',
    )

    parser.add_argument(
        '--examples',
        action='store_true',
        help='Convert the built-in sample inputs and exit',
    )

    parser.add_argument(
        '--config', '-c',
        help='Path to YAML config file (default: bundled default.yaml)',
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output',
    )

    return parser


def resolve_styles(args: argparse.Namespace, config: dict) -> List[CaseStyle]:
    """Determine which styles to print.

    Args:
        args: Parsed command-line arguments.
        config: Loaded configuration.

    Returns:
        Styles in output order.

    Raises:
        UnknownStyleError: If the requested style is not recognized.
    """
    if args.all:
        return list(CaseStyle)

    name = args.style or get_config_value(config, 'converter.default_style', 'kebab')
    return [CaseStyle.from_name(name)]


def read_inputs(args: argparse.Namespace) -> Iterable[str]:
    """Yield the strings to convert.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Iterator over input strings.
    """
    if args.examples:
        return iter(EXAMPLE_INPUTS)
    if args.text:
        return iter(args.text)
    return (line.rstrip('\r\n') for line in sys.stdin)


def format_result(text: str, styles: List[CaseStyle], show_input: bool) -> List[str]:
    """Convert one input and format the output lines.

    Args:
        text: Input string.
        styles: Styles to convert to.
        show_input: Prefix output with the input (used for the examples table).

    Returns:
        Lines to print.
    """
    if show_input:
        lines = [repr(text)]
        for style in styles:
            lines.append(f"  {style.value}: {convert(text, style)!r}")
        return lines

    if len(styles) == 1:
        return [convert(text, styles[0])]

    return [f"{style.value}: {convert(text, style)}" for style in styles]


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)

    if args.examples and args.text:
        parser.error('--examples cannot be combined with TEXT arguments')

    try:
        config = load_config(args.config)

        # Configure logging level
        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        else:
            level = str(get_config_value(config, 'logging.level', 'INFO')).upper()
            logging.getLogger().setLevel(getattr(logging, level, logging.INFO))

        styles = resolve_styles(args, config)
        logger.debug(f"Output styles: {', '.join(s.value for s in styles)}")

        for text in read_inputs(args):
            for line in format_result(text, styles, show_input=args.examples):
                print(line)

        return 0

    except FileNotFoundError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"Config error: Invalid YAML: {e}", file=sys.stderr)
        return 1
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
