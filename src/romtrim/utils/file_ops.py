#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
File helpers
"""

import shutil
from pathlib import Path
from typing import Iterable, Union

from ..common.constants import FileConstants
from ..common.exceptions import FileError
from ..infrastructure.logging import get_logger

logger = get_logger("file_ops")


def has_extension(filepath: Union[str, Path], extensions: Iterable[str]) -> bool:
    """Case-insensitive check of the file name's ending against ``extensions``."""
    name = Path(filepath).name.lower()
    return any(name.endswith(ext.lower()) for ext in extensions)


def choose_new_file_name(filepath: Union[str, Path]) -> Path:
    """
    Choose a name next to ``filepath`` that does not exist yet

    ``game.nds`` becomes ``game trim0.nds``, ``game trim1.nds``, ... until a
    free name is found.
    """
    old_path = Path(filepath).resolve()
    extension = old_path.suffix
    stem = old_path.name[: len(old_path.name) - len(extension)]

    count = 0
    while True:
        new_path = old_path.with_name(f"{stem}{FileConstants.COPY_SUFFIX}{count}{extension}")
        if not new_path.exists():
            return new_path
        count += 1


def copy_file_safely(src: Union[str, Path], dst: Union[str, Path], overwrite: bool = False) -> bool:
    """
    Copy a file

    Raises:
        FileError: When the source is missing, the destination exists or the copy fails
    """
    src_path = Path(src)
    dst_path = Path(dst)

    if not src_path.exists():
        raise FileError(f"Source file does not exist: {src}", file_path=str(src))

    if dst_path.exists() and not overwrite:
        raise FileError(
            f"Destination file exists and overwrite is disabled: {dst}",
            file_path=str(dst),
        )

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dst_path)
        logger.debug(f"Copied file: {src} -> {dst}")
        return True
    except OSError as e:
        raise FileError(f"Failed to copy file: {src} -> {dst}", file_path=str(src)) from e
