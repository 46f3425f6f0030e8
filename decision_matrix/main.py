from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from decision_matrix.config import settings
from decision_matrix.logging_config import configure_logging
from decision_matrix.routers.errors import register_exception_handlers
from decision_matrix.routers.health import router as health_router
from decision_matrix.routers.simulation import router as simulation_router
from decision_matrix.routers.team import router as team_router

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Decision Matrix"},
    {"name": "Team Dashboard"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# REGISTER EXCEPTION HANDLERS
register_exception_handlers(app)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS)
app.include_router(health_router)           # Health
app.include_router(simulation_router)       # Decision Matrix
if settings.ENABLE_TEAM_DASHBOARD:
    app.include_router(team_router)         # Team Dashboard


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "decision_matrix.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
