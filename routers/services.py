from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_repository
from repository import Repository
from schemas import ServiceCreate, ServiceRead

router = APIRouter(prefix="/services", tags=["Services"])

@router.get("/", response_model=List[ServiceRead])
def read_services(repo: Repository = Depends(get_repository)):
    return repo.fetch_services()

@router.post("/", response_model=ServiceRead, status_code=201)
def create_service(service: ServiceCreate, repo: Repository = Depends(get_repository)):
    return repo.add_service(service.name)
