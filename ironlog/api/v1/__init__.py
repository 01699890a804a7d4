"""API v1 router aggregation."""

from fastapi import APIRouter

from ironlog.api.v1.endpoints import (
    analytics,
    auth,
    coach,
    exercises,
    health,
    pr,
    preferences,
    programs,
    progression,
    sessions,
    streak,
    tools,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])

api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(streak.router, prefix="/streak", tags=["streak"])
api_router.include_router(pr.router, prefix="/pr", tags=["pr"])
api_router.include_router(progression.router, prefix="/progression", tags=["progression"])
api_router.include_router(coach.router, prefix="/coach", tags=["coach"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
