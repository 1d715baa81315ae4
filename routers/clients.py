from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_repository
from repository import Repository
from schemas import ClientCreate, ClientPublic

router = APIRouter(prefix="/clients", tags=["Clients"])

@router.get("/", response_model=List[ClientPublic])
def read_clients(repo: Repository = Depends(get_repository)):
    return repo.fetch_clients()

@router.post("/", response_model=ClientPublic, status_code=201)
def create_client(client: ClientCreate, repo: Repository = Depends(get_repository)):
    return repo.add_client(client.name, client.surname, client.login, client.password)

@router.get("/{client_id}")
def read_client_name(client_id: int, repo: Repository = Depends(get_repository)):
    name, surname = repo.get_client_name(client_id)
    return {"id": client_id, "name": name, "surname": surname}

@router.get("/{client_id}/exists")
def client_exists(client_id: int, repo: Repository = Depends(get_repository)):
    return {"id": client_id, "exists": repo.client_exists(client_id)}
