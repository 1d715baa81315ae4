from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_repository
from repository import Repository
from schemas import ATMCreate, ATMRead

router = APIRouter(prefix="/atms", tags=["ATMs"])

@router.get("/", response_model=List[ATMRead])
def read_atms(repo: Repository = Depends(get_repository)):
    return repo.fetch_atms()

@router.post("/", response_model=ATMRead, status_code=201)
def create_atm(atm: ATMCreate, repo: Repository = Depends(get_repository)):
    return repo.add_atm(atm.city, atm.district, atm.street)
