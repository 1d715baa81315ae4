from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dependencies import get_repository
from exceptions import (
    BankStoreError,
    NotFoundError,
    PasswordMismatchError,
    TransactionError,
)
from orchestrator import EXPORT_ORDER
from repository import Repository
from routers import atms, auth, backups, cards, clients, managers, services
from settings import INIT_SCHEMA_ON_STARTUP, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if INIT_SCHEMA_ON_STARTUP:
        get_repository().init_schema()
    yield


app = FastAPI(
    title="Bank Back-Office API",
    version="1.0.0",
    description="Managers, clients, cards, ATMs and services with JSON table backups",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error mapping
ERROR_STATUS = (
    (PasswordMismatchError, 401),
    (NotFoundError, 404),
    (TransactionError, 409),
)


@app.exception_handler(BankStoreError)
async def bank_store_error_handler(request: Request, exc: BankStoreError):
    status_code = next((code for cls, code in ERROR_STATUS if isinstance(exc, cls)), 500)
    if status_code == 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# Include routers
for router_module in (managers, clients, cards, atms, services, auth, backups):
    app.include_router(router_module.router)


@app.get("/")
async def root():
    return {
        "message": "Bank Back-Office API",
        "version": "1.0.0",
        "status": "✅ Ready",
    }


@app.get("/status")
def status(repo: Repository = Depends(get_repository)):
    return {
        "tables": {kind.value: repo.count(kind) for kind in EXPORT_ORDER},
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
