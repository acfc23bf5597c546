"""Copy theme and user assets into the output root."""

from __future__ import annotations

import asyncio
import logging
import shutil
import time
from pathlib import Path

from mdsite.exceptions import AssetError

logger = logging.getLogger(__name__)


def copy_tree(source: Path, target: Path) -> None:
    """Copy ``source`` recursively into ``target``, overwriting same-named files.

    Raises:
        FileNotFoundError: If ``source`` does not exist.
    """
    shutil.copytree(source, target, dirs_exist_ok=True)


def write_change_marker(path: Path, now_ms: int | None = None) -> str:
    """Write the build completion time, in epoch milliseconds, to ``path``.

    Returns:
        The timestamp string written.
    """
    stamp = str(now_ms if now_ms is not None else time.time_ns() // 1_000_000)
    path.write_text(stamp, encoding="utf-8")
    return stamp


async def copy_assets(
    *,
    static_dir: Path,
    asset_dir: Path,
    target_dir: Path,
    change_file: Path,
    strict: bool = False,
) -> bool:
    """Copy theme static files, then user assets, then stamp the change marker.

    Each step starts only after the previous one finished; the first failure
    ends the chain. Files already copied are left in place.

    Args:
        static_dir: Theme static directory, copied first.
        asset_dir: User asset directory, copied second so it can override
            theme files.
        target_dir: Output root receiving both copies.
        change_file: Marker file written last.
        strict: If True, raise instead of only logging a failure.

    Returns:
        True if every step completed, False if a step failed.

    Raises:
        AssetError: If a step failed and ``strict`` is set.
    """
    try:
        await asyncio.to_thread(copy_tree, static_dir, target_dir)
        await asyncio.to_thread(copy_tree, asset_dir, target_dir)
        stamp = await asyncio.to_thread(write_change_marker, change_file)
    except OSError as exc:
        logger.error("Asset copy into %s failed: %s", target_dir, exc)
        if strict:
            raise AssetError(f"Asset copy into {target_dir} failed: {exc}") from exc
        return False

    logger.info("Copied assets into %s (change %s)", target_dir, stamp)
    return True
