"""
Term Rank Lab - FastAPI application for single-document term ranking

Upload a plain-text document, get back its most distinctive terms:
- Tokenization (Latin + Cyrillic words, hyphenated compounds)
- Term frequencies and single-document rarity scores round(ln(N / tf), 2)
- Top 50 terms, score descending, ties broken alphabetically

Nothing is stored: every upload is processed and discarded within the request.
"""

import logging
from datetime import datetime
from typing import List, Union

# Load environment variables from .env.local (local dev) or .env (production)
from .config import load_env_files, load_settings

loaded_env = load_env_files()
settings = load_settings()

# Configure logging: console (brief) + file (detailed)
from .logging_config import setup_logging

setup_logging(
    log_file=settings.log_file,
    console_level=settings.console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)

if loaded_env:
    logger.info(f"Loaded environment from: {loaded_env}")
else:
    logger.warning("No .env.local or .env file found - using system environment variables only")


from fastapi import FastAPI, File, HTTPException, UploadFile, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .file_validator import UploadValidator
from .ranking import compute_term_ranking

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

upload_validator = UploadValidator(
    max_document_size=settings.max_document_size,
    content_sniffing=settings.content_sniffing,
)

app = FastAPI(
    title="Term Rank Lab API",
    description="Most distinctive terms of a plain-text document (single-document TF/IDF)",
    version=APP_VERSION,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class TermItem(BaseModel):
    term: str
    frequency: int = Field(..., ge=1, description="Occurrences in the document")
    score: float = Field(..., ge=0.0, description="round(ln(N / frequency), 2)")


class TermRankingResponse(BaseModel):
    filename: str
    token_count: int = Field(..., description="Total tokens in the document (N)")
    distinct_terms: int = Field(..., description="Vocabulary size before truncation")
    terms: List[TermItem]
    message: str

    class Config:
        json_schema_extra = {
            "example": {
                "filename": "greeting.txt",
                "token_count": 3,
                "distinct_terms": 2,
                "terms": [
                    {"term": "world", "frequency": 1, "score": 1.1},
                    {"term": "hello", "frequency": 2, "score": 0.41},
                ],
                "message": "Ranked 2 of 2 distinct terms",
            }
        }


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Term Rank Lab API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/terms/upload", response_model=TermRankingResponse)
async def upload_document(file: Union[UploadFile, str, None] = File(None)):
    """
    Rank the most distinctive terms of an uploaded text document.

    - Declared content type must be text/* (e.g. text/plain)
    - Document size is limited by MAX_DOCUMENT_SIZE
    - Returns up to RESULT_LIMIT terms (default 50), score descending

    A document without any words is not an error: the term list is empty.

    Example:
        POST /v1/terms/upload
        Content-Type: multipart/form-data
        file: notes.txt
    """
    try:
        document = await upload_validator.read_upload(file)

        ranking = compute_term_ranking(
            document.content,
            alphabets=settings.alphabets,
            limit=settings.result_limit,
        )

        if ranking.token_count == 0:
            message = "Document contains no words"
        else:
            message = f"Ranked {len(ranking)} of {ranking.distinct_terms} distinct terms"

        logger.info(
            f"Processed '{document.filename}': {len(document.content)} bytes, "
            f"tokens={ranking.token_count}, distinct={ranking.distinct_terms}, "
            f"returned={len(ranking)}"
        )

        return TermRankingResponse(
            filename=document.filename,
            token_count=ranking.token_count,
            distinct_terms=ranking.distinct_terms,
            terms=[
                TermItem(term=record.term, frequency=record.frequency, score=record.score)
                for record in ranking
            ],
            message=message,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Term ranking failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Document processing failed: {str(e)}",
        )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
    )
