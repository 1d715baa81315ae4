"""
Schema and seed statements applied by ``Repository.init_schema``.

Statements are plain SQL with named parameters; each string holds exactly one
statement. Callers may pass their own ``SchemaConfig`` to the repository.
"""

from typing import Any, Dict, List

from pydantic import BaseModel

from security import hash_password
from settings import SEED_ADMIN_LOGIN, SEED_ADMIN_PASSWORD


class Statement(BaseModel):
    sql: str
    params: Dict[str, Any] = {}


class SchemaConfig(BaseModel):
    ddl: List[Statement] = []
    seed: List[Statement] = []

    def statements(self) -> List[Statement]:
        """DDL first, then seed data, in declaration order."""
        return [*self.ddl, *self.seed]


MANAGERS_DDL = """
CREATE TABLE IF NOT EXISTS managers
(
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    name     TEXT NOT NULL,
    surname  TEXT NOT NULL,
    login    TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
)"""

CLIENTS_DDL = """
CREATE TABLE IF NOT EXISTS clients
(
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    name     TEXT NOT NULL,
    surname  TEXT NOT NULL,
    login    TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
)"""

CARDS_DDL = """
CREATE TABLE IF NOT EXISTS clients_cards
(
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    pan         INTEGER NOT NULL UNIQUE,
    pin         INTEGER NOT NULL,
    balance     INTEGER NOT NULL,
    holder_name TEXT    NOT NULL,
    cvv         INTEGER NOT NULL,
    validity    INTEGER NOT NULL,
    client_id   INTEGER NOT NULL REFERENCES clients
)"""

ATMS_DDL = """
CREATE TABLE IF NOT EXISTS atms
(
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    city     TEXT NOT NULL,
    district TEXT NOT NULL,
    street   TEXT NOT NULL
)"""

SERVICES_DDL = """
CREATE TABLE IF NOT EXISTS services
(
    id      INTEGER PRIMARY KEY AUTOINCREMENT,
    name    TEXT    NOT NULL,
    balance INTEGER NOT NULL DEFAULT 0
)"""

ACCOUNT_SEED = """
INSERT INTO {table} (name, surname, login, password)
VALUES (:name, :surname, :login, :password)
ON CONFLICT (login) DO NOTHING"""

CARD_SEED = """
INSERT INTO clients_cards (pan, pin, balance, holder_name, cvv, validity, client_id)
SELECT :pan, :pin, :balance, :holder_name, :cvv, :validity, id FROM clients WHERE login = :login
ON CONFLICT (pan) DO NOTHING"""

ATM_SEED = """
INSERT INTO atms (city, district, street)
SELECT :city, :district, :street
WHERE NOT EXISTS (SELECT 1 FROM atms WHERE city = :city AND street = :street)"""

SERVICE_SEED = """
INSERT INTO services (name, balance)
SELECT :name, 0
WHERE NOT EXISTS (SELECT 1 FROM services WHERE name = :name)"""


def default_ddl() -> List[Statement]:
    return [Statement(sql=sql) for sql in (MANAGERS_DDL, CLIENTS_DDL, CARDS_DDL, ATMS_DDL, SERVICES_DDL)]


def default_seed() -> List[Statement]:
    managers = [
        Statement(sql=ACCOUNT_SEED.format(table="managers"), params={
            "name": "Bank", "surname": "Administrator",
            "login": SEED_ADMIN_LOGIN, "password": hash_password(SEED_ADMIN_PASSWORD),
        }),
    ]
    clients = [
        Statement(sql=ACCOUNT_SEED.format(table="clients"), params={
            "name": name, "surname": surname, "login": login, "password": hash_password(login),
        })
        for name, surname, login in (("Jack", "Jackson", "jack"), ("Max", "Maximov", "max"))
    ]
    cards = [
        Statement(sql=CARD_SEED, params={
            "pan": 2021600000000000, "pin": 1111, "balance": 1000000, "holder_name": "Jack Jackson",
            "cvv": 123, "validity": 1225, "login": "jack",
        }),
    ]
    atms = [
        Statement(sql=ATM_SEED, params={"city": "New York", "district": "Manhattan", "street": "7 Av/W 47 St"}),
    ]
    services = [
        Statement(sql=SERVICE_SEED, params={"name": name})
        for name in ("Mobile", "Internet", "Water")
    ]
    return managers + clients + cards + atms + services


def default_schema() -> SchemaConfig:
    return SchemaConfig(ddl=default_ddl(), seed=default_seed())
