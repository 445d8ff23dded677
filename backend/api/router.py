import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, Response, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResponse, SampleJobsResponse
from services import document_parser, report_generator, resume_analyzer
from services.sample_jobs import SAMPLE_JOBS

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(""),
    industry: str = Form(""),
):
    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is required")

    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        logger.warning("Rejected upload %s: %d bytes", resume_file.filename, len(content))
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = await run_in_threadpool(
            document_parser.parse_resume, resume_file.filename or "", content
        )
    except document_parser.UnsupportedFormatError as e:
        logger.warning("Rejected upload %s: %s", resume_file.filename, e)
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only PDF, DOCX, and TXT files are allowed.",
        )
    except document_parser.DocumentParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the resume")

    return await run_in_threadpool(
        resume_analyzer.analyze,
        resume_text,
        job_description,
        industry.strip() or settings.default_industry,
    )


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return await run_in_threadpool(
        resume_analyzer.analyze, body.resume_text, body.job_description, body.industry
    )


@router.get("/sample-job-descriptions", response_model=SampleJobsResponse)
async def sample_job_descriptions():
    return SampleJobsResponse(samples=SAMPLE_JOBS)


@router.post("/generate-report")
async def generate_report(request: Request):
    """Render a previous /analyze result as a downloadable PDF."""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid analysis data")

    if not isinstance(payload, dict) or "overall_score" not in payload:
        raise HTTPException(status_code=400, detail="Invalid analysis data")

    try:
        analysis = AnalysisResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning("Rejected report request: %d validation errors", e.error_count())
        raise HTTPException(status_code=400, detail="Invalid analysis data")

    pdf = await run_in_threadpool(report_generator.generate_pdf, analysis)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=ats-resume-report.pdf"},
    )
