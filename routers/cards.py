from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_repository
from repository import Repository
from schemas import CardCreate, CardIssue, CardRead

router = APIRouter(prefix="/cards", tags=["Cards"])

# ------------- CRUD ---------------

@router.get("/", response_model=List[CardRead])
def read_cards(repo: Repository = Depends(get_repository)):
    return repo.fetch_cards()

@router.post("/", response_model=CardRead, status_code=201)
def create_card(card: CardCreate, repo: Repository = Depends(get_repository)):
    return repo.add_card_to_client(
        pan          = card.pan,
        pin          = card.pin,
        balance      = card.balance,
        holder_name  = card.holder_name,
        cvv          = card.cvv,
        validity     = card.validity,
        client_id    = card.client_id,
    )

# ------------- Issuing ---------------

@router.get("/next-pan")
def next_pan(repo: Repository = Depends(get_repository)):
    return {"pan": repo.allocate_next_pan()}

@router.post("/issue", response_model=CardRead, status_code=201)
def issue_card(payload: CardIssue, repo: Repository = Depends(get_repository)):
    return repo.issue_card(
        client_id = payload.client_id,
        pin       = payload.pin,
        cvv       = payload.cvv,
        validity  = payload.validity,
        balance   = payload.balance,
    )
