from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analyzer
from config import settings
from models.requests import MAX_JOB_DESCRIPTION_CHARS, QuickAnalyzeRequest
from models.responses import AnalysisReport, HealthResponse
from services import text_extractor
from services.analyzers.base import AnalysisUnavailable, BaseAnalyzer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _require_inputs(resume_text: str, job_description: str) -> None:
    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="Please upload a resume file.")
    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Please provide a job description.")


async def _run_analysis(
    analyzer: BaseAnalyzer, resume_text: str, job_description: str
) -> AnalysisReport:
    try:
        return await run_in_threadpool(analyzer.analyze, resume_text, job_description)
    except AnalysisUnavailable:
        raise HTTPException(status_code=503, detail="Analysis unavailable")


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        analyzer=settings.analyzer_strategy,
        gemini_configured=bool(settings.gemini_api_key),
    )


@router.post("/analyze", response_model=AnalysisReport)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
    analyzer: BaseAnalyzer = Depends(get_analyzer),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(
        tuple(text_extractor.SUPPORTED_TYPES)
    ):
        raise HTTPException(
            status_code=400, detail="Invalid file type. Please upload a .txt or .pdf file."
        )

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File size exceeds {settings.max_upload_size_mb}MB limit.",
        )

    if len(job_description) > MAX_JOB_DESCRIPTION_CHARS:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {MAX_JOB_DESCRIPTION_CHARS} chars)",
        )

    try:
        resume_text = text_extractor.extract_text(content, resume_file.filename)
    except text_extractor.TextExtractionError:
        raise HTTPException(status_code=400, detail="Error processing file. Please try again.")

    _require_inputs(resume_text, job_description)
    return await _run_analysis(analyzer, resume_text, job_description)


@router.post("/analyze/quick", response_model=AnalysisReport)
@limiter.limit("10/minute")
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    analyzer: BaseAnalyzer = Depends(get_analyzer),
):
    _require_inputs(body.resume_text, body.job_description)
    return await _run_analysis(analyzer, body.resume_text, body.job_description)
