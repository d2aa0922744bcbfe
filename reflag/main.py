"""
reflag - Main entry point.
Translates a command line and prints or runs it.
"""

import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from reflag import __version__
from reflag.config import Config
from reflag.console import (
    color_enabled,
    disable_color,
    print_dim,
    print_error,
    print_info,
)
from reflag.dispatch import (
    ReflagError,
    UnknownTranslatorError,
    detect_from_binary_name,
    execute,
    render_command,
    resolve,
    run_pipeline,
)
from reflag.highlighting import highlight_command
from reflag.registry import build_registries, format_table
from reflag.shell_init import SHELLS, generate_init, parse_init_args


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflag",
        description="reflag - use classic UNIX flags with modern CLI tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  reflag ls2eza -ltr              Print the equivalent eza command
  reflag --exec find2fd . -name '*.go'
                                  Run fd with translated arguments
  reflag ls:eza -la               Pick a translator by tool pair
  reflag dig https://example.com/ Strip a URL down to its hostname
  reflag --list                   Show available translators
  eval "$(reflag init zsh)"       Install shell aliases

Installed as ls2eza, cat2bat, ... the translator is taken from the program
name and the translated command is executed directly.
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'reflag {__version__}'
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        '--exec',
        dest='execute',
        action='store_true',
        default=None,
        help='Run the translated command'
    )
    action.add_argument(
        '--print',
        dest='execute',
        action='store_false',
        help='Print the translated command (default)'
    )

    parser.add_argument(
        '--mode',
        type=str,
        help='Mode hint passed to translators (default: print or exec)'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List translators and preprocessors'
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help='Custom configuration directory (default: ~/.reflag)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        'translator',
        nargs='?',
        help="Translator name (ls2eza), tool pair (ls:eza), tool name, or 'init'"
    )

    # Listed for --help only; split_argv() hands these over untouched
    parser.add_argument(
        'args',
        nargs='*',
        help='Arguments in the source tool\'s syntax, passed on verbatim'
    )

    return parser


# reflag options that consume the following token
VALUE_OPTIONS = ("--mode", "--config-dir")


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split *argv* after the translator name.

    Returns ``(reflag_argv, tool_args)``: reflag's own options up to and
    including the translator, and everything after it exactly as typed
    (a ``--`` there belongs to the source tool).
    """
    i = 0
    while i < len(argv):
        a = argv[i]
        if a == "--":
            return argv[:i + 2], argv[i + 2:]
        if a in VALUE_OPTIONS:
            i += 2
            continue
        if a.startswith("-") and len(a) > 1:
            i += 1
            continue
        return argv[:i + 1], argv[i + 1:]
    return list(argv), []


def format_listing(translators, preprocessors) -> str:
    """Text printed by ``reflag --list``."""
    rows = [
        (t.name, t.source_tool, t.target_tool, "yes" if t.include_in_init else "")
        for t in translators
    ]
    return (
        format_table(("NAME", "SOURCE", "TARGET", "INIT"), rows)
        + "\n\n"
        + preprocessors.format_table()
    )


def _print_command(line: str, config: Config):
    if config.get("highlight") and color_enabled() and sys.stdout.isatty():
        line = highlight_command(line)
    print(line)


def run_translation(spec: str, tool_args: List[str], config: Config,
                    translators, preprocessors, do_execute: bool,
                    mode: Optional[str] = None) -> int:
    """Resolve *spec*, translate *tool_args*, then execute or print."""
    resolution = resolve(spec, translators, preprocessors)
    mode = mode or config.get("mode") or ("exec" if do_execute else "print")
    translated = run_pipeline(resolution, tool_args, mode)

    if do_execute:
        return execute(resolution.target_tool, translated)

    _print_command(render_command(resolution.target_tool, translated), config)
    return 0


def run_init(init_args: List[str], config: Config, translators, preprocessors) -> int:
    """
    Print shell aliases for ``reflag init [--save] [shell] [translators...]``.

    With ``--save`` the chosen shell and translators become the defaults
    for later ``reflag init`` calls.
    """
    save = "--save" in init_args
    init_args = [arg for arg in init_args if arg != "--save"]

    shell, filters = parse_init_args(init_args)
    if not any(arg in SHELLS for arg in init_args):
        shell = config.get("init_shell") or shell
    if filters is None:
        filters = config.get("init_translators")

    script = generate_init(shell, translators, preprocessors, filters,
                           program=config.get("program") or "reflag")

    if save:
        config.settings["init_shell"] = shell
        config.set("init_translators", filters)
        print_info(f"Saved init defaults to {config.config_file}")

    print(script, end="")
    return 0


def _program_name(argv0: str) -> str:
    name = Path(argv0).name
    if name.lower().endswith(".exe"):
        name = name[:-4]
    return name


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    """Main entry point for reflag and its ``<source>2<target>`` aliases."""
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = _program_name(sys.argv[0])

    translators, preprocessors = build_registries()

    # Invoked as ls2eza, cat2bat, ...: every argument belongs to the tool
    source, target, is_pair = detect_from_binary_name(prog)
    if is_pair:
        try:
            config = Config()
            return run_translation(f"{source}:{target}", argv, config,
                                   translators, preprocessors, do_execute=True)
        except ReflagError as e:
            print_error(f"{prog}: {e}")
            return 1
        except KeyboardInterrupt:
            return 130
        except Exception as e:
            print_error(f"[Fatal Error] {prog}: {e}")
            if os.getenv("DEBUG"):
                import traceback
                traceback.print_exc()
            return 1

    reflag_argv, tool_args = split_argv(argv)
    parser = build_parser()
    args = parser.parse_args(reflag_argv)

    # Set debug mode
    if args.debug:
        os.environ['DEBUG'] = '1'

    if args.no_color:
        disable_color()

    try:
        # Initialize config
        config = Config(config_dir=args.config_dir)

        if args.list:
            print(format_listing(translators, preprocessors))
            return 0

        if not args.translator:
            parser.print_help(sys.stderr)
            return 1

        if args.translator == "init":
            return run_init(tool_args, config, translators, preprocessors)

        do_execute = args.execute if args.execute is not None else bool(config.get("execute"))
        return run_translation(args.translator, tool_args, config,
                               translators, preprocessors, do_execute, args.mode)

    except UnknownTranslatorError as e:
        print_error(f"[Error] {e}")
        print_dim("Run 'reflag --list' to see available translators.")
        return 1
    except ReflagError as e:
        print_error(f"[Error] {e}")
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print_error(f"[Fatal Error] {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
