"""Zipping a directory tree and extracting it again."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def zip_dir(directory: PathLike, file_name: PathLike) -> bool:
    """Write every regular file under ``directory`` into the zip ``file_name``.

    Paths in the archive are relative to ``directory``. Returns ``False``
    without creating anything when the destination's folder does not exist.
    """
    target = Path(file_name).absolute()
    if not target.parent.exists():
        return False
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"no such directory: {root}")

    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.absolute() == target:
                continue
            try:
                content = path.read_bytes()
            except OSError:
                continue
            archive.writestr(path.relative_to(root).as_posix(), content)
    return True


def unzip_dir(zip_file: PathLike, output_dir: PathLike, replace: bool = False) -> bool:
    """Extract ``zip_file`` into ``output_dir``.

    Existing files are kept unless ``replace`` is true. Returns ``False``
    if the archive is missing or invalid.
    """
    out = Path(output_dir)
    try:
        archive = zipfile.ZipFile(zip_file)
    except (OSError, zipfile.BadZipFile):
        return False

    with archive:
        for info in archive.infolist():
            destination = out / info.filename
            if info.is_dir():
                destination.mkdir(parents=True, exist_ok=True)
                continue
            destination.parent.mkdir(parents=True, exist_ok=True)
            if destination.exists() and not replace:
                continue
            destination.write_bytes(archive.read(info))
    return True