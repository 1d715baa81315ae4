from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_repository
from repository import Repository
from schemas import SignIn

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/sign-in")
def sign_in(credentials: SignIn, repo: Repository = Depends(get_repository)):
    # PasswordMismatchError is turned into a 401 by the app's exception handler
    try:
        signed_in = repo.sign_in(credentials.login, credentials.password, credentials.kind)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not signed_in:
        raise HTTPException(status_code=404, detail="no such account")
    return {"login": credentials.login, "signed_in": True}
