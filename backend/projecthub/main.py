from pathlib import Path

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .core.logging import setup_logging
from .core.settings import get_settings
from .http.errors import register_exception_handlers
from .routers import auth, login, projects

settings = get_settings()
setup_logging(settings)

app = FastAPI(
    title="ProjectHub",
    description="Owner-scoped project management",
    version="1.0.0",
    debug=settings.debug,
)

# Signed cookie session, used for one-shot flash messages
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.mount(
    "/static",
    StaticFiles(directory=str(Path(__file__).resolve().parent / "static")),
    name="static",
)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router)
app.include_router(login.router)
app.include_router(projects.router)

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "ProjectHub is running"}

@app.get("/")
async def root():
    return RedirectResponse(url="/projects", status_code=status.HTTP_303_SEE_OTHER)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("projecthub.main:app", host="0.0.0.0", port=8000, reload=True)
