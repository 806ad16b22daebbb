"""wth-setup: store WEATHER_API_KEY in a shell profile and link the wth command."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from .exceptions import InstallError
from .log_setup import setup_logger

API_KEY_MARKER = "WEATHER_API_KEY="
DEFAULT_BIN_DIR = Path("/usr/local/bin")
COMMAND_NAME = "wth"


def ensure_api_key(profile_path: Path, ask: Callable[[], str]) -> bool:
    """Append an export line for WEATHER_API_KEY unless the profile has one.

    Returns True when the profile was modified.
    """
    if profile_path.exists():
        try:
            content = profile_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise InstallError(f"Failed reading {profile_path}: {exc}") from exc
        if API_KEY_MARKER in content:
            return False

    key = ask().strip()
    if not key:
        raise InstallError("No WEATHER_API_KEY entered.")
    try:
        with profile_path.open("a", encoding="utf-8") as fh:
            fh.write(f"\nexport {API_KEY_MARKER}{key}\n")
    except OSError as exc:
        raise InstallError(f"Failed writing {profile_path}: {exc}") from exc
    return True


def install_command(source: Path, target: Path) -> None:
    """Symlink ``target`` to ``source``, replacing any previous install."""
    try:
        source.chmod(0o755)
        if target.is_symlink() or target.exists():
            target.unlink()
        target.symlink_to(source)
    except OSError as exc:
        raise InstallError(f"Failed to create system command: {exc}") from exc


def default_source() -> Path:
    return Path(sys.executable).parent / COMMAND_NAME


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wth-setup",
        description="Configure WEATHER_API_KEY and install the wth command.",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=Path.home() / ".zshrc",
        help="Shell profile that should export WEATHER_API_KEY.",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Executable to link (defaults to the wth script next to this interpreter).",
    )
    parser.add_argument(
        "--bin-dir",
        type=Path,
        default=DEFAULT_BIN_DIR,
        help="Directory on PATH that receives the wth symlink.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the one-time setup flow."""
    args = parse_args(argv)
    logger = setup_logger("wth.setup")
    console = Console(highlight=False, soft_wrap=True)
    profile: Path = args.profile.expanduser()

    def _ask() -> str:
        console.print(Text(f"WEATHER_API_KEY not found in {profile.name}."))
        return Prompt.ask("Please enter your WEATHER_API_KEY", password=True, console=console)

    try:
        if ensure_api_key(profile, _ask):
            console.print(
                Text(
                    f"✅ WEATHER_API_KEY added to {profile.name}. Please restart your "
                    f"terminal or run 'source {profile}'."
                )
            )
        else:
            console.print(Text(f"✅ WEATHER_API_KEY already exists in {profile.name}."))
    except InstallError as exc:
        logger.error("Profile update failed: %s", exc)
        console.print(Text(f"❌ {exc}"))
        return 1

    source = (args.source or default_source()).expanduser()
    target = args.bin_dir.expanduser() / COMMAND_NAME
    if os.path.realpath(source) == os.path.realpath(target):
        console.print(Text(f"✅ '{COMMAND_NAME}' is already installed at {target}."))
        return 0
    try:
        install_command(source, target)
    except InstallError as exc:
        logger.error("Command install failed: %s", exc)
        console.print(Text(f"❌ {exc}"))
        console.print(
            Text(f"You might need to run this installer with sudo for {args.bin_dir} permissions.")
        )
        return 1

    console.print(
        Text(
            f"✅ '{COMMAND_NAME}' command installed! You can now run: "
            "wth [city-name] [optional number of days to get forecast]"
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
