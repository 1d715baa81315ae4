"""
Repository: the only component that talks to the relational store.

Reads drain the whole result into read-only pydantic records; any failure
aborts the fetch and nothing partial is returned. Every insert runs in its own
begin / exec / commit transaction and is rolled back when the exec step fails.
"""

import logging
from typing import Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from exceptions import (
    CursorFailedError,
    NotFoundError,
    PasswordMismatchError,
    QueryFailedError,
    ScanFailedError,
    TransactionError,
)
from models import ATM, Card, Client, Manager, Service
from schema_sql import SchemaConfig, default_schema
from schemas import ATMRead, CardRead, ClientRead, EntityKind, ManagerRead, ServiceRead
from security import hash_password, verify_password

logger = logging.getLogger(__name__)

# Each exportable kind with its ORM model and record type
ENTITY_TYPES: Dict[EntityKind, Tuple[type, Type[BaseModel]]] = {
    EntityKind.MANAGERS: (Manager, ManagerRead),
    EntityKind.CLIENTS:  (Client, ClientRead),
    EntityKind.CARDS:    (Card, CardRead),
    EntityKind.ATMS:     (ATM, ATMRead),
    EntityKind.SERVICES: (Service, ServiceRead),
}

ACCOUNT_MODELS = {
    EntityKind.MANAGERS: Manager,
    EntityKind.CLIENTS: Client,
}


class Repository:
    def __init__(self, engine, schema: Optional[SchemaConfig] = None):
        self.engine = engine
        self.schema = schema if schema is not None else default_schema()
        self.Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # ------------- Schema ---------------

    def init_schema(self) -> None:
        """Apply DDL then seed statements in order; the first failure aborts."""
        statements = self.schema.statements()
        with self.engine.connect() as conn:
            for number, statement in enumerate(statements, start=1):
                try:
                    conn.execute(text(statement.sql), statement.params)
                    conn.commit()
                except SQLAlchemyError as e:
                    logger.error(f"❌ Schema statement {number}/{len(statements)} failed: {e}")
                    raise QueryFailedError(f"can't apply schema statement {number}: {e}") from e
        logger.info(f"✅ Schema initialised ({len(statements)} statements)")

    # ------------- Reads ---------------

    def _fetch(self, model, record_type: Type[BaseModel]) -> List[BaseModel]:
        records = []
        with self.Session() as session:
            try:
                result = session.execute(select(model))
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't query {model.__tablename__}: {e}") from e
            try:
                for row in result.scalars():
                    try:
                        records.append(record_type.model_validate(row))
                    except ValidationError as e:
                        raise ScanFailedError(f"can't decode {model.__tablename__} row: {e}") from e
            except SQLAlchemyError as e:
                raise CursorFailedError(f"cursor over {model.__tablename__} failed: {e}") from e
        logger.debug(f"Fetched {len(records)} rows from {model.__tablename__}")
        return records

    def fetch_all(self, kind: EntityKind) -> List[BaseModel]:
        model, record_type = ENTITY_TYPES[EntityKind(kind)]
        return self._fetch(model, record_type)

    def fetch_managers(self) -> List[ManagerRead]:
        return self.fetch_all(EntityKind.MANAGERS)

    def fetch_clients(self) -> List[ClientRead]:
        return self.fetch_all(EntityKind.CLIENTS)

    def fetch_cards(self) -> List[CardRead]:
        return self.fetch_all(EntityKind.CARDS)

    def fetch_atms(self) -> List[ATMRead]:
        return self.fetch_all(EntityKind.ATMS)

    def fetch_services(self) -> List[ServiceRead]:
        return self.fetch_all(EntityKind.SERVICES)

    def count(self, kind: EntityKind) -> int:
        model, _ = ENTITY_TYPES[EntityKind(kind)]
        with self.Session() as session:
            try:
                return session.execute(select(func.count()).select_from(model)).scalar_one()
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't count {model.__tablename__}: {e}") from e

    # ------------- Inserts ---------------

    def _insert(self, obj, record_type: Type[BaseModel]) -> BaseModel:
        session: Session = self.Session()
        try:
            try:
                session.begin()
                session.connection()
            except SQLAlchemyError as e:
                raise TransactionError("begin", str(e)) from e

            try:
                session.add(obj)
                session.flush()
            except SQLAlchemyError as e:
                session.rollback()
                raise TransactionError("exec", str(e)) from e

            try:
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise TransactionError("commit", str(e)) from e

            record = record_type.model_validate(obj)
        finally:
            session.close()
        logger.info(f"Inserted {obj!r}")
        return record

    def add_manager(self, name: str, surname: str, login: str, password: str) -> ManagerRead:
        manager = Manager(name=name, surname=surname, login=login, password=hash_password(password))
        return self._insert(manager, ManagerRead)

    def add_client(self, name: str, surname: str, login: str, password: str) -> ClientRead:
        client = Client(name=name, surname=surname, login=login, password=hash_password(password))
        return self._insert(client, ClientRead)

    def add_card_to_client(self, pan: int, pin: int, balance: int, holder_name: str,
                           cvv: int, validity: int, client_id: int) -> CardRead:
        card = Card(
            pan         = pan,
            pin         = pin,
            balance     = balance,
            holder_name = holder_name,
            cvv         = cvv,
            validity    = validity,
            client_id   = client_id,
        )
        return self._insert(card, CardRead)

    def add_service(self, name: str) -> ServiceRead:
        return self._insert(Service(name=name, balance=0), ServiceRead)

    def add_atm(self, city: str, district: str, street: str) -> ATMRead:
        return self._insert(ATM(city=city, district=district, street=street), ATMRead)

    # ------------- Cards ---------------

    def allocate_next_pan(self) -> int:
        """
        Return the highest stored PAN plus one.

        This is a plain read: nothing is reserved, so two callers may be given
        the same value. The unique constraint on ``pan`` rejects the second insert.
        """
        with self.Session() as session:
            try:
                last_pan = session.execute(select(func.max(Card.pan))).scalar()
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't find last PAN: {e}") from e
        if last_pan is None:
            raise QueryFailedError("can't find last PAN: no cards issued yet")
        return last_pan + 1

    def client_exists(self, client_id: int) -> bool:
        with self.Session() as session:
            try:
                found = session.execute(select(Client.id).where(Client.id == client_id)).scalar()
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't look up client {client_id}: {e}") from e
        return found is not None

    def get_client_name(self, client_id: int) -> Tuple[str, str]:
        with self.Session() as session:
            try:
                row = session.execute(
                    select(Client.name, Client.surname).where(Client.id == client_id)
                ).first()
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't look up client {client_id}: {e}") from e
        if row is None:
            raise NotFoundError(f"client {client_id} does not exist")
        return row.name, row.surname

    def issue_card(self, client_id: int, pin: int, cvv: int, validity: int, balance: int = 0) -> CardRead:
        """Issue a card to an existing client under the next free PAN."""
        name, surname = self.get_client_name(client_id)
        pan = self.allocate_next_pan()
        return self.add_card_to_client(pan, pin, balance, f"{name} {surname}", cvv, validity, client_id)

    # ------------- Authentication ---------------

    def sign_in(self, login: str, password: str, kind: EntityKind = EntityKind.MANAGERS) -> bool:
        """
        Check a login/password pair.

        Returns False when no account has ``login``; raises
        PasswordMismatchError when it exists but the password is wrong.
        """
        try:
            model = ACCOUNT_MODELS[EntityKind(kind)]
        except KeyError:
            raise ValueError(f"{kind} accounts can't sign in") from None
        with self.Session() as session:
            try:
                stored = session.execute(select(model.password).where(model.login == login)).scalar()
            except SQLAlchemyError as e:
                raise QueryFailedError(f"can't look up login: {e}") from e
        if stored is None:
            logger.info(f"Sign-in for unknown login {login!r}")
            return False
        if not verify_password(password, stored):
            logger.warning(f"Wrong password for {login!r}")
            raise PasswordMismatchError(login)
        return True
