import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.database import engine, Base
from app.core.errors import BlockError
from app.routers import health, pages, blocks

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Notion Lite API",
    version="0.1.0"
)

# Erreurs métier -> réponse HTTP, même format que HTTPException
@app.exception_handler(BlockError)
async def block_error_handler(request: Request, exc: BlockError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(pages.router)
app.include_router(blocks.router)


def run():
    """Lance l'API (python -m app.main)"""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
