import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from core.database import Base, engine
from core.errors import AppError
from routers import auth_router
from routers import project_router, chapter_router
from routers import like_router, comment_router, public_router
from models import user, session, project, chapter, like, comment  # noqa: F401
from core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("uwrite")

Base.metadata.create_all(bind=engine)

app = FastAPI(title="uWrite Backend API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Drop "ctx", it can hold the raw exception object
    errors = [
        {key: err[key] for key in ("loc", "msg", "type") if key in err}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "VALIDATION_ERROR", "message": "Invalid input", "detail": errors},
    )


app.include_router(auth_router.router)
app.include_router(project_router.router)
app.include_router(chapter_router.router)
app.include_router(like_router.router)
app.include_router(comment_router.router)
app.include_router(public_router.router)


@app.get("/")
def root():
    return {"message": "uWrite Backend API Ready"}
