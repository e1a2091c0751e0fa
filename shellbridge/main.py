"""
shellbridge - Main entry point.
Translates single command lines between bash and PowerShell.
"""

import argparse
import logging
import sys
from typing import List, Optional

from shellbridge import __version__
from shellbridge.bash import extract_variable_references, tokenize
from shellbridge.config import Config
from shellbridge.highlighting import BASH, POWERSHELL, highlight_command
from shellbridge.lookup import lookup, suggest
from shellbridge.powershell import from_bash, to_bash
from shellbridge.session import TranslatorSession
from shellbridge.shell_identity import detect_shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shellbridge",
        description="shellbridge - translate command lines between bash and PowerShell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shellbridge to-ps 'echo $HOME'            Write-Output $env:HOME
  shellbridge to-bash 'Write-Output $env:HOME'
  shellbridge tokenize 'echo "a b" c'
  shellbridge vars 'cp ${SRC:-.} $DEST'
  shellbridge detect                         Show the detected shell
  shellbridge                                Start an interactive session
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'shellbridge {__version__}'
    )
    parser.add_argument(
        '--config-dir',
        type=str,
        help='Custom configuration directory (default: ~/.shellbridge)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Do not highlight translations'
    )

    sub = parser.add_subparsers(dest='command')

    to_ps = sub.add_parser('to-ps', help='Translate a bash command line to PowerShell')
    to_ps.add_argument('line', nargs='+')

    to_sh = sub.add_parser('to-bash', help='Translate a PowerShell command line to bash')
    to_sh.add_argument('line', nargs='+')
    to_sh.add_argument(
        '--respect-quotes',
        action='store_true',
        default=None,
        help='Leave quoted strings untouched'
    )

    tok = sub.add_parser('tokenize', help='Split a command line into tokens')
    tok.add_argument('line', nargs='+')

    var = sub.add_parser('vars', help='List the variables a command line references')
    var.add_argument('line', nargs='+')

    look = sub.add_parser('lookup', help='Show the equivalent of a command name')
    look.add_argument('name')

    sub.add_parser('detect', help='Show the detected shell')

    return parser


def _configure_logging(config: Config, debug: bool):
    level = logging.DEBUG if debug else config.log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args: argparse.Namespace, config: Config) -> int:
    """Execute a parsed command line; returns the exit status."""
    color = bool(config.get("color", True)) and not args.no_color and sys.stdout.isatty()

    if args.command is None:
        TranslatorSession(config, color=color).run()
        return 0

    if args.command == 'to-ps':
        result = from_bash(" ".join(args.line))
        print(highlight_command(result, POWERSHELL) if color else result)
    elif args.command == 'to-bash':
        respect = args.respect_quotes
        if respect is None:
            respect = bool(config.get("reverse_respect_quotes", False))
        result = to_bash(" ".join(args.line), respect_quotes=respect)
        print(highlight_command(result, BASH) if color else result)
    elif args.command == 'tokenize':
        for token in tokenize(" ".join(args.line)):
            print(token)
    elif args.command == 'vars':
        for name in extract_variable_references(" ".join(args.line)):
            print(name)
    elif args.command == 'lookup':
        entries = lookup(args.name)
        if not entries:
            hint = suggest(args.name)
            message = f"No equivalent known for '{args.name}'"
            if hint:
                message += f". Did you mean '{hint}'?"
            print(message)
            return 1
        for entry in entries:
            print(f"{entry.bash:<10} {entry.powershell}")
    elif args.command == 'detect':
        identity = detect_shell()
        print(identity)
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for shellbridge."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_dir=args.config_dir)
        _configure_logging(config, args.debug)
        status = run(args, config)
    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")
        sys.exit(0)
    except Exception as e:
        print(f"\n[Fatal Error] {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)
    sys.exit(status)


if __name__ == '__main__':
    main()
