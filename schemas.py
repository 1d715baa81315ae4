from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from exceptions import ExportFailedError


class EntityKind(str, Enum):
    """Exportable tables; the value is the file stem used under the backup directory."""

    MANAGERS = "managers"
    CLIENTS = "clients"
    CARDS = "clientsCards"
    ATMS = "atms"
    SERVICES = "services"


# ------------- Records (read side) ---------------
# Snapshots are read-only; field order is the serialized field order.

class ManagerRead(BaseModel):
    id: int
    name: str
    surname: str
    login: str
    password: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ClientRead(BaseModel):
    id: int
    name: str
    surname: str
    login: str
    password: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


# Account views returned over HTTP never carry the password hash

class ManagerPublic(BaseModel):
    id: int
    name: str
    surname: str
    login: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ClientPublic(BaseModel):
    id: int
    name: str
    surname: str
    login: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class CardRead(BaseModel):
    id: int
    pan: int
    pin: int
    balance: int
    holder_name: str
    cvv: int
    validity: int
    client_id: int

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ATMRead(BaseModel):
    id: int
    city: str
    district: str
    street: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ServiceRead(BaseModel):
    id: int
    name: str
    balance: int

    model_config = ConfigDict(from_attributes=True, frozen=True)


# ------------- Payloads (write side) ---------------

class AccountCreate(BaseModel):
    name: str
    surname: str
    login: str
    password: str


class ManagerCreate(AccountCreate):
    pass  # POST payload – same fields as a client


class ClientCreate(AccountCreate):
    pass


class CardCreate(BaseModel):
    pan: int
    pin: int
    balance: int = 0
    holder_name: str
    cvv: int
    validity: int
    client_id: int


class CardIssue(BaseModel):
    client_id: int
    pin: int
    cvv: int
    validity: int
    balance: int = 0


class ATMCreate(BaseModel):
    city: str
    district: str
    street: str


class ServiceCreate(BaseModel):
    name: str


class SignIn(BaseModel):
    login: str
    password: str
    kind: EntityKind = EntityKind.MANAGERS


# ------------- Export results ---------------

class ExportOutcome(BaseModel):
    kind: EntityKind
    ok: bool
    records: int = 0
    path: Optional[Path] = None
    backup_path: Optional[Path] = None
    stage: Optional[str] = None
    error: Optional[str] = None


class ExportReport(BaseModel):
    outcomes: List[ExportOutcome] = []
    halted: bool = False

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> List[ExportOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def raise_for_failure(self) -> None:
        if self.failed:
            first = self.failed[0]
            raise ExportFailedError(
                f"export of {first.kind.value} failed during {first.stage}: {first.error}"
            )
