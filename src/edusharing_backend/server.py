import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from edusharing_backend.api.edusharing import edusharing_router
from edusharing_backend.database import engine
from edusharing_backend.model import Base
from edusharing_backend.settings import settings

logger = logging.getLogger(__name__)

async def startup_logic():
    if settings.DEBUG_MODE != "production":
        Base.metadata.create_all(bind=engine)
        logger.info("Created edusharing tables")

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_logic()
    yield

app = FastAPI(title="edu-sharing integration", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(edusharing_router)

@app.get("/", include_in_schema=False)
def info():
    return {"service": "edusharing"}
