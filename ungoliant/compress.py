"""Gzip compression of corpus files, keeping the originals."""

from __future__ import annotations

import gzip
import logging
import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

logger = logging.getLogger(__name__)


def compress_file(path: str | os.PathLike, dst: str | os.PathLike) -> Path:
    """Compress `path` into `dst/<name>.gz` and return the written path.

    Raises ValueError if the file name has no extension.
    """
    path = Path(path)
    if not path.suffix:
        raise ValueError(f"file has no extension: {path}")
    target = Path(dst) / f"{path.name}.gz"
    logger.info("compressing %s to %s", path, target)
    with path.open("rb") as source, gzip.open(target, "wb") as encoder:
        shutil.copyfileobj(source, encoder)
    return target


def compress_corpus(src: str | os.PathLike, dst: str | os.PathLike) -> list[Exception]:
    """Compress every entry of `src` into `dst` concurrently.

    Source files are kept. Returns the errors of failed compressions;
    errors listing `src` itself are raised.
    """
    paths = [entry.path for entry in os.scandir(src)]

    def attempt(filepath: str) -> Exception | None:
        try:
            compress_file(filepath, dst)
        except (OSError, ValueError) as exc:
            return exc
        return None

    with ThreadPoolExecutor() as pool:
        errors = [err for err in pool.map(attempt, paths) if err is not None]

    for error in errors:
        logger.error("%r", error)
    return errors