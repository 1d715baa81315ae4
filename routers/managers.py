from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_repository
from repository import Repository
from schemas import ManagerCreate, ManagerPublic

router = APIRouter(prefix="/managers", tags=["Managers"])

@router.get("/", response_model=List[ManagerPublic])
def read_managers(repo: Repository = Depends(get_repository)):
    return repo.fetch_managers()

@router.post("/", response_model=ManagerPublic, status_code=201)
def create_manager(manager: ManagerCreate, repo: Repository = Depends(get_repository)):
    return repo.add_manager(manager.name, manager.surname, manager.login, manager.password)
