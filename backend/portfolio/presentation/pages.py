"""HTML entry points — the public site and the admin panel. No auth."""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/")
async def index(request: Request) -> FileResponse:
    return FileResponse(request.app.state.settings.frontend_dir / "index.html")


@router.get("/admin")
async def admin(request: Request) -> FileResponse:
    return FileResponse(request.app.state.settings.frontend_dir / "admin.html")
