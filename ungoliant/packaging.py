"""Packaging of a split, compressed corpus into per-language folders with checksums."""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1 << 16


class PackagingError(Exception):
    """Raised when packaging cannot be done."""


def _file_hash(filepath: Path) -> str:
    hasher = hashlib.sha256()
    with filepath.open("rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def gen_checksum_file(src: str | os.PathLike, lang: str) -> Path:
    """Write `<src>/<lang>/<lang>_sha256.txt` holding a sha256 line per file.

    `src` is the root of the whole corpus, not the language folder. Lines
    are `<hash> <filename>`. Returns the checksum file path.
    """
    src_lang = Path(src) / lang
    logger.debug("gen checksum on folder %s", src_lang)
    files = sorted(src_lang.iterdir(), key=lambda p: p.name)

    lines = []
    for filepath in files:
        logger.info("[%s] hashing %s", lang, filepath.name)
        lines.append(f"{_file_hash(filepath)} {filepath.name}\n")

    checksum_path = src_lang / f"{lang}_sha256.txt"
    logger.debug("writing hashes to: %s", checksum_path)
    with checksum_path.open("w", encoding="utf-8") as out:
        out.writelines(lines)
    return checksum_path


def _put_in_lang_folder(filename: Path, dst: Path, lang: str, move_files: bool) -> None:
    """Move or copy `filename` into `dst/<lang>/`, creating the folder if needed."""
    folder = dst / lang
    folder.mkdir(exist_ok=True)
    target = folder / filename.name
    if move_files:
        os.replace(filename, target)
    else:
        shutil.copy(filename, target)


def package_lang(
    src: str | os.PathLike,
    dst: str | os.PathLike | None,
    lang: str,
    move_files: bool,
) -> bool:
    """Put the files of `lang` into `dst/<lang>/` and generate their checksums.

    Without a destination, files are moved within `src`, which requires
    `move_files`. Returns False when no file of the language was found.
    """
    if not move_files and dst is None:
        raise PackagingError("No destination path specified!")

    src = Path(src)
    dst = src if dst is None else Path(dst)

    logger.info("[%s] begin packaging", lang)
    filename_txt = src / f"{lang}.txt.gz"
    filename_meta = src / f"{lang}_meta.jsonl.gz"
    filename_txt_multipart = src / f"{lang}_part_1.txt.gz"

    if filename_txt.exists():
        logger.debug("[%s] lang has a single txt/json file", lang)
        files = [filename_txt, filename_meta]
    elif filename_txt_multipart.exists():
        logger.debug("[%s] lang has multiple txt/json files", lang)
        files = sorted(src.glob(f"{lang}_part_*.txt.gz")) + sorted(
            src.glob(f"{lang}_meta_part_*.jsonl.gz")
        )
    else:
        logger.warning("[%s] no files found", lang)
        return False

    for filepath in files:
        _put_in_lang_folder(filepath, dst, lang, move_files)

    logger.info("[%s] generating checksums", lang)
    gen_checksum_file(dst, lang)
    logger.info("[%s] done packaging", lang)
    return True


def package(
    src: str | os.PathLike,
    dst: str | os.PathLike | None,
    move_files: bool,
    langs: Iterable[str],
) -> None:
    """Package every language of `langs` concurrently.

    Raises PackagingError if any language failed; the individual errors are logged.
    """

    def attempt(lang: str) -> Exception | None:
        try:
            package_lang(src, dst, lang, move_files)
        except (OSError, PackagingError) as exc:
            return exc
        return None

    with ThreadPoolExecutor() as pool:
        errors = [err for err in pool.map(attempt, list(langs)) if err is not None]

    if errors:
        for error in errors:
            logger.error("%r", error)
        raise PackagingError("Errors occurred during packaging: see previous messages.")