"""
KidneyGuard Risk API - FastAPI Application

Main application entry point with API endpoints for:
- Kidney disease risk assessment
- Health check
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime
from dotenv import load_dotenv

# Load environment variables
load_dotenv()
import logging

from kidneyguard.config import settings
from kidneyguard.core.features.base import InvalidInputError
from kidneyguard.models.assessment import AssessmentRequest, AssessmentResponse, HealthResponse
from kidneyguard.services.assessment import AssessmentService

logger = logging.getLogger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title="KidneyGuard Risk API",
    description="Rule-based ensemble assessment of kidney disease risk",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_assessment_service = AssessmentService()


# ---- API Endpoints ----

@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
    )


@app.post(f"{settings.api_prefix}/risk/assess", response_model=AssessmentResponse, tags=["Risk"])
async def assess_risk(request: AssessmentRequest):
    """
    Assess kidney disease risk for one patient.

    Runs the ten-tree ensemble and returns the majority label, vote shares,
    0-100 score and confidence.
    """
    features = request.features.model_dump(by_alias=True, exclude_none=True)
    try:
        result = _assessment_service.assess(request.patient_id, features)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Risk assessment failed: {e}")
        raise HTTPException(status_code=500, detail=f"Risk assessment failed: {str(e)}")

    return AssessmentResponse(**result)


# ---- Application Lifecycle ----

@app.on_event("startup")
async def startup_event():
    """Initialize on startup."""
    logger.info(f"{settings.app_name} API starting up...")
    logger.info("API ready to accept requests")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info(f"{settings.app_name} API shutting down...")


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
