from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backup_writer import BackupWriter
from dependencies import get_backup_writer, get_repository
from orchestrator import export_all
from repository import Repository

router = APIRouter(prefix="/backups", tags=["Backups"])

@router.post("/")
def run_backup(stop_on_error: bool = True,
               repo: Repository = Depends(get_repository),
               writer: BackupWriter = Depends(get_backup_writer)):
    report = export_all(repo, writer, stop_on_error=stop_on_error)
    body = report.model_dump(mode="json")
    body["ok"] = report.ok
    return JSONResponse(status_code=200 if report.ok else 500, content=body)
