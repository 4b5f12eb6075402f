import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from places_api.core.db_connection import db_connection
from places_api.core.error_handlers import setup_error_handlers
from places_api.core.logger import logs
from places_api.routes.places_route import router as places_router
from places_api.routes.categories_route import router as categories_router
from places_api.routes.maps_route import router as maps_router
from places_api.routes.debug_route import router as debug_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Settings validation already failed at import if MONGODB_URI is missing
    db_connection.connect()
    logs.log(logging.INFO, "Stockholm Places API started")
    yield
    db_connection.close()

app = FastAPI(title="Stockholm Places API", lifespan=lifespan)
setup_error_handlers(app)
app.include_router(places_router)
app.include_router(categories_router)
app.include_router(maps_router)
app.include_router(debug_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Stockholm Places API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "places": "/places",
            "categories": "/categories",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Stockholm Places API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("places_api.main:app", host="0.0.0.0", port=8000, reload=True)
