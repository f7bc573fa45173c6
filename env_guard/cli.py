"""
ABOUTME: Command-line interface for the environment validator
ABOUTME: Handles argument parsing, dotenv loading, and result reporting
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .exceptions import ConfigError
from .runtime import RuntimeMode
from .settings import SiteConfig, SupabaseConfig
from .validator import DEFAULT_REQUIRED, EnvVarConfig, check_env_variables

DEFAULT_ENV_FILES = (".env.local", ".env")

console = Console()
err_console = Console(stderr=True)


def load_environment(env_files: Optional[List[str]] = None) -> List[Path]:
    """
    Load dotenv files into the process environment without overriding existing values.

    Files are loaded in order, so earlier files win. Returns the paths that were loaded.
    """
    loaded = []
    for name in env_files or DEFAULT_ENV_FILES:
        env_path = Path(name)
        if env_path.exists():
            load_dotenv(env_path, override=False)
            loaded.append(env_path)
            logging.info(f"✅ Loaded environment from {env_path}")
        else:
            logging.debug(f"No {env_path} file found")
    if not loaded:
        logging.info("⚠️  No .env file found, using system environment variables")
    return loaded


def cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the environment validator.

    Returns:
        argparse.Namespace: Parsed arguments controlling key lists, dotenv files, and output format.
    """
    p = argparse.ArgumentParser(
        description="Check that required environment variables are set and not placeholders"
    )
    p.add_argument(
        "--required",
        action="append",
        metavar="KEY",
        help=f"Required key (repeatable, default: {', '.join(DEFAULT_REQUIRED)})",
    )
    p.add_argument(
        "--optional",
        action="append",
        metavar="KEY",
        help="Optional key, warned about in development mode (repeatable)",
    )
    p.add_argument(
        "--env-file",
        action="append",
        metavar="PATH",
        help=f"Dotenv file to load (repeatable, default: {', '.join(DEFAULT_ENV_FILES)})",
    )
    p.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved run mode and public URLs",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of rich console tables",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"env-guard {__version__}",
    )
    return p.parse_args(argv)


def describe_config() -> dict:
    """Collect the non-secret configuration for display."""
    mode = RuntimeMode.from_environ()
    supabase = SupabaseConfig()
    info = {"mode": mode.to_dict()}
    for label, accessor in (
        ("supabaseUrl", supabase.url),
        ("siteUrl", SiteConfig(mode=mode).url),
    ):
        try:
            info[label] = accessor()
        except ConfigError:
            info[label] = None
    try:
        info["serviceRoleKeySet"] = bool(supabase.service_role_key())
    except ConfigError:
        info["serviceRoleKeySet"] = False
    return info


def print_config(info: dict) -> None:
    table = Table(title="Environment")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for flag, value in info["mode"].items():
        table.add_row(flag, str(value))
    for key in ("supabaseUrl", "siteUrl", "serviceRoleKeySet"):
        value = info[key]
        table.add_row(key, "[red]not set[/red]" if value is None else str(value))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Execute the main entry point for the environment validator.

    Parses arguments, configures logging, loads dotenv files, and validates the
    environment. Exits with status 1 on a configuration error.
    """
    a = cli(argv)

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    load_environment(a.env_file)

    config = EnvVarConfig.coerce({"required": a.required, "optional": a.optional})
    try:
        check_env_variables(config)
    except ConfigError as exc:
        if a.json:
            print(json.dumps({"ok": False, **exc.to_dict()}, indent=2))
        else:
            console.print(f"❌ {exc}")
        sys.exit(1)

    info = describe_config() if a.show_config else None
    if a.json:
        result = {"ok": True, "required": list(config.required)}
        if info is not None:
            result["config"] = info
        print(json.dumps(result, indent=2))
    else:
        console.print(f"✅ {len(config.required)} required environment variables set")
        if info is not None:
            print_config(info)


if __name__ == "__main__":
    main()
