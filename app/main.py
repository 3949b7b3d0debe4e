"""FastAPI application entry point."""
from fastapi import FastAPI

from app.config import get_settings
from app.logging_config import configure_logging
from app.routers import health, meals, plans, progress, users, workouts


configure_logging()

app = FastAPI(
    title=get_settings().app_name,
    description="Weekly workout and meal plans with progress tracking.",
)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {"status": "ok"}


app.include_router(users.router)
app.include_router(plans.router)
app.include_router(workouts.router)
app.include_router(meals.router)
app.include_router(progress.router)
app.include_router(health.router)
