from backup_writer import BackupWriter
from database import engine
from repository import Repository
from settings import BACKUP_DIR

# One repository per process; it only holds the engine and a session factory
_repository = Repository(engine)


def get_repository() -> Repository:
    return _repository


def get_backup_writer() -> BackupWriter:
    return BackupWriter(BACKUP_DIR)
