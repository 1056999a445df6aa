"""
Cache-Control for API responses
"""
from fastapi import Request


def setup_no_store(app, prefix: str = "/api/"):
    """
    Mark every API response as non-cacheable so browsers always see the
    latest content after an admin edit.

    Usage:
        from app.middleware.cache import setup_no_store
        setup_no_store(app)
    """

    @app.middleware("http")
    async def no_store(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith(prefix):
            response.headers["Cache-Control"] = "no-store"
        return response
