from sqlalchemy import Column, Integer, BigInteger, String, ForeignKey
from database import Base


class Manager(Base):
    __tablename__ = "managers"

    id       = Column(Integer, primary_key=True, autoincrement=True)
    name     = Column(String, nullable=False)
    surname  = Column(String, nullable=False)
    login    = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Manager {self.id} – {self.login}>"


class Client(Base):
    __tablename__ = "clients"

    id       = Column(Integer, primary_key=True, autoincrement=True)
    name     = Column(String, nullable=False)
    surname  = Column(String, nullable=False)
    login    = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Client {self.id} – {self.login}>"


class Card(Base):
    __tablename__ = "clients_cards"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    pan         = Column(BigInteger, nullable=False, unique=True)
    pin         = Column(Integer, nullable=False)
    balance     = Column(BigInteger, nullable=False)
    holder_name = Column(String, nullable=False)
    cvv         = Column(Integer, nullable=False)
    validity    = Column(Integer, nullable=False)
    client_id   = Column(Integer, ForeignKey("clients.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Card {self.id} – {self.holder_name}>"


class ATM(Base):
    __tablename__ = "atms"

    id       = Column(Integer, primary_key=True, autoincrement=True)
    city     = Column(String, nullable=False)
    district = Column(String, nullable=False)
    street   = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<ATM {self.id} – {self.city}, {self.street}>"


class Service(Base):
    __tablename__ = "services"

    id      = Column(Integer, primary_key=True, autoincrement=True)
    name    = Column(String, nullable=False)
    balance = Column(BigInteger, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Service {self.id} – {self.name}>"
