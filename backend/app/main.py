# backend/app/main.py
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from dotenv import load_dotenv

from backend.app.config.settings import get_settings
from backend.app.routers.chat import router as chat_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()

# ==================== FastAPI App ====================
app = FastAPI(
    title="TutorNeo - Conversational Homework Review",
    description="Chat proxy to the OpenAI Responses API with reply/evaluation normalization",
    version="0.1.0",
    docs_url="/docs",
    redoc_url=None
)

# CORS - allow the Streamlit frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Keep the {"error": ...} body shape for invalid payloads too
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid chat payload on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"error": "Invalid request body"})


app.include_router(chat_router)

# ==================== Routes ====================

@app.get("/")
async def root():
    return {
        "message": "TutorNeo API is LIVE",
        "status": "ready",
        "docs": "/docs"
    }


@app.get("/api/health")
async def health():
    settings = get_settings()
    return {
        "status": "healthy",
        "default_model": settings.openai_model,
        "server_key_configured": bool(settings.openai_api_key)
    }

# ==================== Run Server ====================
if __name__ == "__main__":
    logger.info("Starting TutorNeo API (frontend: http://localhost:8501, docs: http://127.0.0.1:5010/docs)")
    uvicorn.run("backend.app.main:app", host="127.0.0.1", port=5010, reload=True, log_level="info")
