import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

import config
from database import check_connection
from errors import register_error_handlers
from routers import (
    applications_router,
    leases_router,
    managers_router,
    properties_router,
    tenants_router,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("rentwise")

# App instance
app = FastAPI(title="Rentwise API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Request log
@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


@app.get("/")
def home():
    return {"message": "This is home route"}


@app.get("/health")
def health():
    database_ok = check_connection()
    return {"status": "ok" if database_ok else "degraded", "database": database_ok}


app.include_router(applications_router)
app.include_router(leases_router)
app.include_router(managers_router)
app.include_router(properties_router)
app.include_router(tenants_router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
