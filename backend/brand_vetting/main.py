import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import BrandVettingError
from .pipeline.http_client import close_client
from .routers.vetting import router as vetting_router
from .services.report_builder import utc_timestamp


# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    provider = os.getenv("EVIDENCE_PROVIDER", "tavily")
    print("Starting Brand Vetting Engine")
    print(f"   Evidence provider: {provider}")
    if provider == "tavily":
        print(f"   Tavily Key:  {' Configured' if os.getenv('TAVILY_API_KEY') else ' Not set (requests will fail)'}")
    print("   Ready to vet brands!")

    yield

    await close_client()
    print("Shutting down Brand Vetting Engine")


app = FastAPI(
    title="Brand Authenticity & Greenwashing Vetting Engine",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vetting_router)


def error_envelope(code: str, message: str, details=None) -> dict:
    error = {"code": code, "message": message, "timestamp": utc_timestamp()}
    if details:
        error["details"] = details
    return {"error": error}


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Brand Vetting Engine",
        "version": "0.1.0",
        "description": "Brand authenticity and greenwashing scoring",
        "docs": "/docs",
        "endpoints": {
            "vet": "POST /brand-vetting - Score a brand's sustainability authenticity",
            "health": "GET /brand-vetting/health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "brand-vetting-engine",
        "version": "0.1.0"
    }


@app.exception_handler(BrandVettingError)
async def brand_vetting_exception_handler(request: Request, exc: BrandVettingError):
    """Render pipeline failures in the error envelope with their status."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.code, exc.message, exc.details),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s", request.url.path)
    debug = os.getenv("DEBUG", "false").lower() == "true"
    return JSONResponse(
        status_code=500,
        content=error_envelope(
            "ANALYSIS_FAILED",
            str(exc) if debug else "Brand analysis failed",
        ),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "brand_vetting.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("DEBUG", "false").lower() == "true",
    )
