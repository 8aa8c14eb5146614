import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from yojana.config import settings
from yojana.routes.eligibility import router as eligibility_router
from yojana.routes.schemes import router as schemes_router
from yojana.routes.users import router as users_router
from yojana.services.catalog_service import catalog_store
from yojana.services.mongo_service import mongo_service

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    catalog = catalog_store.reload(settings.catalog_path)
    logger.info(f"Scheme catalog ready with {len(catalog)} schemes")
    await mongo_service.connect()
    yield
    # Shutdown
    await mongo_service.close()


app = FastAPI(
    title=settings.app_name,
    description="Citizen registration and government scheme eligibility matching",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)
app.include_router(eligibility_router)
app.include_router(schemes_router)


@app.get("/")
async def root():
    return {"message": "Hello from Backend!", "service": settings.app_name, "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    mongo_healthy = await mongo_service.health_check()
    return {
        "status": "healthy" if mongo_healthy else "degraded",
        "service": "yojana-backend",
        "mongodb": mongo_healthy,
        "schemes_loaded": len(catalog_store.current())
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("yojana.main:app", host=settings.host, port=settings.port, reload=settings.debug)
