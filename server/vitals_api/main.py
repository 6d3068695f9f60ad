"""Vitals Engine API - FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vitals_engine import InvalidInput

from .config import get_settings
from .routes import vitals, risks, standards

settings = get_settings()

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Vitals Engine API",
    description="Vitals validation, emergency alerts and disease-risk scoring",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(vitals.router)
app.include_router(risks.router)
app.include_router(standards.router)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    """Malformed height, weight or BMI is the one input the engine rejects."""
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "vitals-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.vitals_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
