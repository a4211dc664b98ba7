"""Browser sign-in: a form that trades credentials for an HttpOnly token cookie."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ..auth import ACCESS_TOKEN_EXPIRE_MINUTES, AUTH_COOKIE_NAME
from ..core.settings import get_settings
from ..dependencies import get_db
from ..http.flash import add_flash
from ..services.auth_service import AuthService
from ..templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["login"])


@router.get("/login")
def login_page(request: Request):
    return render(request, "auth/login.html", {"email": "", "error": None})


@router.post("/login")
async def login_submit(request: Request, db: Session = Depends(get_db)):
    form = await request.form()
    email = str(form.get("email", "")).strip()
    password = str(form.get("password", ""))

    try:
        user = AuthService.authenticate(db, email, password)
    except HTTPException as exc:
        logger.info(f"Failed browser login for {email!r}")
        return render(
            request,
            "auth/login.html",
            {"email": email, "error": exc.detail},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    response = RedirectResponse(url="/projects", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        AUTH_COOKIE_NAME,
        AuthService.create_access_token_for_user(user),
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=get_settings().session_https_only,
    )
    return response


@router.post("/logout")
def logout(request: Request):
    add_flash(request, "You have been signed out.", "info")
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(AUTH_COOKIE_NAME)
    return response
