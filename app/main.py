"""
FastAPI application entry point
Main application initialization
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from app.config import DATABASE_URL, DB_CREATE_TABLES, DEBUG, MODE, PORT, UPLOAD_DIR, UPLOAD_URL_PREFIX
from app.database import Database
from app.middleware.cors import setup_cors
from app.middleware.cache import setup_no_store
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="School Site API",
    description="Public school website with an authenticated content admin",
    version="0.1.0",
    debug=DEBUG,
)

# Setup middleware
setup_cors(app)
setup_no_store(app)


@app.on_event("startup")
async def startup_event():
    """Open the database on startup"""
    logger.info(f"Starting application in {MODE} mode")
    database = Database(DATABASE_URL, echo=DEBUG)
    await database.open()
    if DB_CREATE_TABLES:
        await database.create_all()
    app.state.database = database
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Close database connections on shutdown"""
    logger.info("Shutting down application")
    database = getattr(app.state, "database", None)
    if database is not None:
        await database.close()
    logger.info("Application shut down successfully")


@app.get("/", include_in_schema=False)
async def root():
    """The public site starts at the home page"""
    return RedirectResponse(url="/site/home")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse({
        "status": "healthy",
        "mode": MODE
    })


# Include routers
from app.apps.authentication.router import router as auth_router
app.include_router(auth_router, prefix="/api/admin", tags=["authentication"])

from app.apps.pages.router import router as pages_router
app.include_router(pages_router, prefix="/api/pages", tags=["pages"])

from app.apps.contact.router import router as contact_router
app.include_router(contact_router, prefix="/api/contact", tags=["contact"])

from app.apps.media.router import router as media_router
app.include_router(media_router, prefix="/api", tags=["media"])

from app.apps.content.router import include_resource_routers
include_resource_routers(app, prefix="/api")

from app.apps.site.router import router as site_router, STATIC_DIR
app.include_router(site_router, prefix="/site", tags=["site"])

# Uploaded media and site assets
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(UPLOAD_DIR), check_dir=False), name="uploads")
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )
