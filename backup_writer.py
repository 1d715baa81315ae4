"""
Backup writer: the only component that touches the filesystem.

``write`` keeps one current file per entity kind. When that file already
exists its bytes are first copied into a timestamped backup, and only after
the copy has fully succeeded is the current file replaced.
"""

import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from exceptions import FilesystemError
from schemas import EntityKind
from settings import BACKUP_DIR

logger = logging.getLogger(__name__)


class BackupWriter:
    def __init__(self, backup_dir: Union[str, Path] = BACKUP_DIR,
                 clock: Callable[[], datetime] = datetime.now):
        self.backup_dir = Path(backup_dir)
        self.clock = clock

    def target_path(self, kind: EntityKind) -> Path:
        return self.backup_dir / f"{EntityKind(kind).value}.json"

    def backup_name(self, kind: EntityKind, moment: datetime) -> str:
        # Seconds are not zero padded; one backup per kind per second
        stamp = f"{moment:%m-%d-%Y-%H-%M}-{moment.second}"
        return f"{EntityKind(kind).value}DataBackup({stamp}).json"

    def backup_path(self, kind: EntityKind, moment: datetime) -> Path:
        return self.backup_dir / self.backup_name(kind, moment)

    def write(self, kind: EntityKind, data: bytes) -> Optional[Path]:
        """
        Write ``data`` as the current file for ``kind``.

        Returns the path of the backup taken of the previous content, or None
        when there was no previous file.
        """
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"can't create backup directory {self.backup_dir}: {e}") from e

        target = self.target_path(kind)
        if not target.exists():
            logger.info(f"File {target} does not exist, creating it")
            self._replace(target, data)
            logger.info(f"Data was saved to {target}")
            return None

        backup = self.backup_path(kind, self.clock())
        self._copy(target, backup)
        logger.info(f"Copied {target} to backup {backup}")
        self._replace(target, data)
        logger.info(f"Data was saved to {target}")
        return backup

    def _copy(self, source: Path, backup: Path) -> None:
        try:
            src = open(source, "rb")
        except OSError as e:
            raise FilesystemError(f"can't open source file {source}: {e}") from e
        with src:
            try:
                dst = open(backup, "wb")
            except OSError as e:
                raise FilesystemError(f"can't create backup file {backup}: {e}") from e
            try:
                with dst:
                    shutil.copyfileobj(src, dst)
            except OSError as e:
                logger.error(f"❌ Copy to {backup} failed, removing partial backup")
                backup.unlink(missing_ok=True)
                raise FilesystemError(f"can't finish copying {source}: {e}") from e

    def _replace(self, target: Path, data: bytes) -> None:
        # Write beside the target and swap it in, so a failed write leaves the old file intact
        tmp = target.with_name(target.name + ".tmp")
        try:
            tmp.write_bytes(data)
            os.replace(tmp, target)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise FilesystemError(f"can't save to {target}: {e}") from e
