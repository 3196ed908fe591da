from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crockford.core.config import settings
from crockford.api import ids
from crockford.core.logging_config import configure_logging

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Crockford base32 identifier service"
)

app.include_router(ids.router, prefix="")

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "crockford-ids"}

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
