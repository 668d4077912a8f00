"""Command line entry point: ``emoji-banner "Hello" -e fire``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .banner.generator import generate_banner
from .banner.models import FillMode
from .config import OUTPUT_FORMATS, BannerConfig, config_path
from .core.errors import (
    BannerError,
    ClipboardError,
    ConfigurationConflictError,
    EmptyInputError,
    InputFileError,
    InvalidOptionError,
)
from .core.themes import get_available_themes, get_theme_background
from .fonts.registry import BUNDLED_FONTS_DIR, FontRegistry, font_summary
from .output.clipboard import copy_to_clipboard
from .output.slack import generate_slack_json

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 1024 * 1024

DESCRIPTION = """\
Convert text to emoji banner art for CLI display

Examples:
  $ emoji-banner "Hello" -e 🔥
  $ emoji-banner "World" -e fire
  $ emoji-banner "Test" -e "🔥,⭐,💎" -m row-gradient
  $ emoji-banner "GitHub" --theme github
  $ emoji-banner "Slack" -e 🎉 --format slack
"""

EPILOG = """\
Emoji Input:
  - Direct emoji: 🔥, ⭐, 💎
  - Alias with colons: :fire:, :star:
  - Alias without colons: fire, star
  - Multiple emojis (comma-separated): 🔥,⭐,💎 or fire,star,gem
  - Unknown aliases are kept as custom emoji, e.g. :partyparrot:

Emoji Modes (when multiple emojis provided):
  - random: Random emoji for each dot
  - row: Different emoji per row
  - column: Different emoji per column
  - row-gradient: Gradient across rows
  - column-gradient: Gradient across columns

Themes:
  - default: Uses the specified emoji(s)
  - github: GitHub contribution graph style with green squares

Output Formats:
  - text: Plain text (default)
  - slack: Slack Block Kit JSON format
"""


def build_parser() -> argparse.ArgumentParser:
    # Config-backed options default to None so the config file can fill them
    parser = argparse.ArgumentParser(
        prog="emoji-banner",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("text", nargs="?", help="Text to convert to emoji banner")
    parser.add_argument("-e", "--emoji", help="Emoji to use (emoji or alias, comma-separated for multiple)")
    parser.add_argument("-b", "--background", help="Background emoji (default: space)")
    parser.add_argument("-f", "--file", help="Read text from file instead of argument")
    parser.add_argument("-c", "--copy", action="store_true", help="Copy result to clipboard")
    parser.add_argument("--format", help="Output format (text, slack)")
    parser.add_argument("--theme", help="Theme to use (default, github)")
    parser.add_argument(
        "-m", "--mode",
        help="Emoji selection mode when multiple emojis provided "
             "(random, row, column, row-gradient, column-gradient)",
    )
    parser.add_argument("--font", help="Pixel font to use")
    parser.add_argument("--vertical", action="store_true", help="Stack characters vertically")
    parser.add_argument(
        "--border", nargs="?", const=True, default=None, metavar="EMOJI",
        help="Add an outer border. Emoji optional; defaults to the background emoji when omitted.",
    )
    parser.add_argument("--seed", type=int, help="Seed for random fill and theme intensities")
    parser.add_argument("--config", help="Config file (default: ~/.config/emoji-banner/config.json)")
    parser.add_argument("--list-fonts", action="store_true", help="List available fonts and exit")
    parser.add_argument("--list-themes", action="store_true", help="List available themes and exit")
    parser.add_argument(
        "--init-config", action="store_true",
        help="Write the current config (defaults if none) to the config path and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_text_from_file(file_path: str) -> str:
    """
    Read banner text from a file.

    Raises:
        InputFileError: path traversal, missing/unreadable file, or file over 1 MiB
    """
    if not file_path:
        raise InputFileError("Invalid file path")
    if ".." in file_path:
        raise InputFileError("Path traversal not allowed")

    path = Path(file_path)
    try:
        size = path.stat().st_size
        if size > MAX_FILE_SIZE:
            raise InputFileError(f"File too large. Maximum size is {MAX_FILE_SIZE} bytes")
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputFileError(f"File not found: {file_path}") from None
    except PermissionError:
        raise InputFileError(f"Permission denied: {file_path}") from None
    except IsADirectoryError:
        raise InputFileError(f"Not a file: {file_path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Failed to read file: {file_path} ({e})") from None

    return content.strip()


def apply_config_defaults(args: argparse.Namespace, cfg: BannerConfig) -> argparse.Namespace:
    """Fill options left unset on the command line from the config file."""
    defaults = cfg.defaults
    for name in ("emoji", "background", "mode", "theme", "font", "format", "seed"):
        if getattr(args, name) is None:
            setattr(args, name, getattr(defaults, name))
    return args


def validate_options(args: argparse.Namespace) -> None:
    """
    Reject invalid option values before any rendering happens.

    Raises:
        EmptyInputError: neither text nor --file was given
        InvalidOptionError: bad mode, format, theme or emoji
        ConfigurationConflictError: --border without a background
    """
    if not args.text and not args.file:
        raise EmptyInputError(
            "Text is required. Provide text as an argument or use --file option.\n"
            "Run with --help for usage information."
        )

    if FillMode.parse(args.mode) is None:
        raise InvalidOptionError(
            f"Invalid mode: {args.mode}. Valid modes are: {', '.join(FillMode.names())}"
        )
    if args.format not in OUTPUT_FORMATS:
        raise InvalidOptionError(
            f"Invalid format: {args.format}. Valid formats are: {', '.join(OUTPUT_FORMATS)}"
        )
    themes = get_available_themes()
    if args.theme not in themes:
        raise InvalidOptionError(
            f"Invalid theme: {args.theme}. Valid themes are: {', '.join(themes)}"
        )
    if not args.emoji or not args.emoji.strip():
        raise InvalidOptionError("Emoji is required. Use --emoji option.")

    if args.border and not (args.background or get_theme_background(args.theme)):
        raise ConfigurationConflictError(
            "Border requires a background emoji. Specify --background <emoji>."
        )


def list_fonts(registry: FontRegistry) -> None:
    for name in registry.list_names():
        info = font_summary(registry.get(name))
        print(f"{name:<12} {info['height']} rows, {info['glyphs']} glyphs")


def list_themes() -> None:
    for name in get_available_themes():
        print(name)


def handle_error(error: Exception) -> int:
    """Print a friendly message for ``error`` and return the exit status."""
    if isinstance(error, EmptyInputError) and "Text is required" in str(error):
        print(f"Error: {error}", file=sys.stderr)
        print("\nUsage: emoji-banner <text> -e <emoji>", file=sys.stderr)
    elif isinstance(error, InvalidOptionError):
        print(f"Validation Error: {error}", file=sys.stderr)
    else:
        print(f"Error: {error}", file=sys.stderr)
    return 1


def init_config(cfg: BannerConfig, path: Path) -> int:
    """Write ``cfg`` to ``path`` so it can be edited by hand."""
    try:
        cfg.save(path)
    except OSError as e:
        print(f"Error: could not write config {path}: {e}", file=sys.stderr)
        return 1
    print(f"Wrote config to {path}")
    return 0


def run(args: argparse.Namespace, cfg: BannerConfig) -> int:
    registry = FontRegistry([BUNDLED_FONTS_DIR, *cfg.fonts.paths])

    if args.list_fonts:
        list_fonts(registry)
        return 0
    if args.list_themes:
        list_themes()
        return 0

    apply_config_defaults(args, cfg)
    validate_options(args)

    text = read_text_from_file(args.file) if args.file else args.text

    result = generate_banner(
        text,
        emojis=args.emoji,
        background=args.background,
        border=args.border,
        mode=args.mode,
        theme=args.theme,
        font=args.font,
        vertical=args.vertical,
        seed=args.seed,
        registry=registry,
    )
    logger.debug("Rendered %dx%d banner", result.width, result.height)

    output = generate_slack_json(result) if args.format == "slack" else result.text

    if args.copy:
        try:
            copy_to_clipboard(output)
            print("Copied to clipboard!", file=sys.stderr)
        except ClipboardError as e:
            logger.warning("Could not copy to clipboard: %s", e)

    print("\n" + output + "\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``emoji-banner`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s %(levelname)s: %(message)s",
    )

    path = Path(args.config).expanduser() if args.config else config_path()
    cfg = BannerConfig.load(path)
    if not args.verbose:
        logging.getLogger().setLevel(cfg.logging.level)

    if args.init_config:
        return init_config(cfg, path)

    try:
        return run(args, cfg)
    except BannerError as e:
        return handle_error(e)


if __name__ == "__main__":
    sys.exit(main())
