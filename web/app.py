"""
FastAPI app for the admin dashboard.
"""

from fastapi import FastAPI

from web.routes.dashboard import router as dashboard_router

app = FastAPI(
    title="PUBG Rank Role Dashboard",
    description="Admin dashboard for bot status, tier roles, and role sync events.",
    version="1.0.0",
)

app.include_router(dashboard_router, tags=["dashboard"])
