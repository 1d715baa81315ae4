import os
from pathlib import Path

from dotenv import load_dotenv

# Values from a local .env file; variables already set in the environment win
load_dotenv(Path(__file__).parent / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bank.db")

# Directory holding the current per-table exports and their timestamped backups
BACKUP_DIR = os.getenv("BANK_BACKUP_DIR", "backup")

SQL_ECHO = os.getenv("BANK_SQL_ECHO", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("BANK_LOG_LEVEL", "INFO").upper()

# Apply DDL + seed statements when the API starts
INIT_SCHEMA_ON_STARTUP = os.getenv("BANK_INIT_SCHEMA", "1").lower() in ("1", "true", "yes")

PASSWORD_HASH_ITERATIONS = int(os.getenv("BANK_PASSWORD_ITERATIONS", "120000"))

SEED_ADMIN_LOGIN = os.getenv("BANK_SEED_ADMIN_LOGIN", "admin")
SEED_ADMIN_PASSWORD = os.getenv("BANK_SEED_ADMIN_PASSWORD", "admin")
