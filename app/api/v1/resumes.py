from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.core.security import optional_user_id, require_api_key, required_user_id
from app.parsing.file_security import InvalidUploadError, UnreadableUploadError
from app.schemas.resumes import (
    AnalyzeResponse,
    AnalyzeTextRequest,
    ResumeListResponse,
    ResumeRecordResponse,
)
from app.services.resume_service import (
    AnalysisFailedError,
    get_saved_resume,
    list_saved_resumes,
    run_text_analysis,
    run_upload_analysis,
)

router = APIRouter(dependencies=[Depends(require_api_key)])

UPLOAD_CHUNK_BYTES = 1024 * 64


def _raise_analysis_http_error(exc: AnalysisFailedError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


async def _read_upload(file: UploadFile) -> bytes:
    limit = settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum allowed size is {limit // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resumes/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_text(
    request: Request,
    payload: AnalyzeTextRequest,
    user_id: str | None = Depends(optional_user_id),
):
    _ = request
    try:
        return run_text_analysis(text=payload.text, file_name=payload.file_name, user_id=user_id)
    except AnalysisFailedError as exc:
        _raise_analysis_http_error(exc)


@router.post("/resumes/upload", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_upload(
    request: Request,
    file: UploadFile = File(...),
    user_id: str | None = Depends(optional_user_id),
):
    _ = request
    filename = file.filename or "uploaded-resume"
    content = await _read_upload(file)
    try:
        return run_upload_analysis(
            filename=filename,
            content=content,
            content_type=file.content_type,
            user_id=user_id,
        )
    except InvalidUploadError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UnreadableUploadError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AnalysisFailedError as exc:
        _raise_analysis_http_error(exc)


@router.get("/resumes", response_model=ResumeListResponse)
def list_resumes(
    limit: int = Query(default=20, ge=1, le=100),
    user_id: str = Depends(required_user_id),
):
    return list_saved_resumes(user_id, limit=limit)


@router.get("/resumes/{resume_id}", response_model=ResumeRecordResponse)
def get_resume(resume_id: int, user_id: str = Depends(required_user_id)):
    record = get_saved_resume(user_id, resume_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume analysis not found.")
    return record
