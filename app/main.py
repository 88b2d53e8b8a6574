import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config.config import settings
from app.config.database import Base, engine
from app.config.errors import ConflictError, NotFoundError
from app.config.logging_config import setup_logging
from app.routers import company_router, user_router

# 테이블 생성 전에 모델 등록
from app.models import company_model, user_model  # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # DB 테이블 생성
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
    yield

app = FastAPI(title="Recruit Records API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(company_router.router, prefix="/api/v1")
app.include_router(user_router.router, prefix="/api/v1")

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path} -> 404: {exc.message}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    logger.warning(f"{request.method} {request.url.path} -> 409: {exc.message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})

@app.get("/health")
def health_check():
    return {"status": "ok"}
