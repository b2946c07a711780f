import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.database import create_db_and_tables
from .core.errors import register_exception_handlers
from .core.logging import setup_logging
from .core.settings import settings
from .models.User import User # Import models to register them with SQLModel
from .models.Car import Car, FavoriteCar
from .auth.service import revocation_list, revocation_sweep_loop

from .auth.router import router as auth_router
from .users.router import router as users_router
from .user.router import router as user_router
from .cars.router import router as cars_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    create_db_and_tables()
    sweep = asyncio.create_task(
        revocation_sweep_loop(revocation_list, settings.REVOCATION_SWEEP_SECONDS)
    )
    logger.info(f"{settings.PROJECT_NAME} started")
    yield
    sweep.cancel()
    try:
        await sweep
    except asyncio.CancelledError:
        pass



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(user_router)
app.include_router(cars_router)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


def serve():
    """Entry point for the carmarket-server script."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
