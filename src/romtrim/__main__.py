#!/usr/bin/env python3
"""RomTrim command line entry point"""

import logging
import os

import typer

from romtrim.cli.commands import config_command, inspect_command, trim_command
from romtrim.infrastructure.logging import get_logger as _ensure_logger

app = typer.Typer(
    help="RomTrim - removes the padding from cartridge ROM images",
    add_completion=False,
)

_ensure_logger()  # Initialize logging system

# ROMTRIM_LOG_LEVEL overrides the console log level
# Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL
# Example: ROMTRIM_LOG_LEVEL=DEBUG romtrim trim -p game.nds
env_log_level = os.environ.get("ROMTRIM_LOG_LEVEL", "").upper()
if env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    rom_logger = logging.getLogger("romtrim")
    log_level = getattr(logging, env_log_level)
    for handler in rom_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(log_level)
    rom_logger.debug(f"Log level set to {env_log_level} via ROMTRIM_LOG_LEVEL environment variable")


app.command("trim", help="Trim the padding from ROM files in place")(trim_command)
app.command("inspect", help="Compare detection methods without writing")(inspect_command)
app.command("config", help="Display the effective configuration")(config_command)


def main():
    app()


if __name__ == "__main__":
    main()
