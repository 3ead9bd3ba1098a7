# routes/admin.py
import logging

from fastapi import APIRouter, Depends

from models.admin import AdminLogin
from utils.auth import get_verifier

logger = logging.getLogger(__name__)

router = APIRouter()


# === POST: Admin login (dashboard gate) ===
@router.post("/login")
async def admin_login(login: AdminLogin, verifier=Depends(get_verifier)):
    if not verifier.verify(login.username, login.password):
        logger.warning(f"Admin login failed for {login.username!r}")
        return {"success": False, "message": "Invalid Credentials"}
    logger.info(f"Admin {login.username} logged in")
    return {"success": True}
