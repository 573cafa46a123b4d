import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from cv_import import config
from cv_import.core.errors import ExtractionFailedError, InsufficientTextError, UnsupportedKindError
from cv_import.core.rate_limiter import UploadRateLimiter
from cv_import.core.schemas import ParsedRecord
from cv_import.core.text_parser import parse_resume

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


def get_rate_limiter(request: Request) -> UploadRateLimiter:
    return request.app.state.rate_limiter


@router.post(
    "/parse",
    response_model=ParsedRecord,
    summary="Parse Resume",
    description="Extract a structured candidate profile from a resume file (PDF, DOCX, or TXT).",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "personalInfo": {
                            "fullName": "Jane Doe",
                            "email": "jane.doe@example.com",
                            "phone": "+230 5123 4567",
                            "address": "",
                            "profileUrl": "linkedin.com/in/janedoe",
                            "homepage": "",
                            "photo": ""
                        },
                        "summary": "",
                        "experience": [
                            {
                                "id": "4f1c2a9e0b7d4c3f8e6a5b4c3d2e1f00",
                                "company": "Acme Corp",
                                "role": "Senior Developer",
                                "startDate": "2020",
                                "endDate": "",
                                "current": True,
                                "description": "• Led migration of core services\n"
                            }
                        ],
                        "education": [],
                        "skills": [],
                        "languages": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File larger than the upload limit"},
        415: {"description": "Unsupported file format"},
        422: {"description": "No usable resume text could be extracted"},
        429: {"description": "Too many uploads from this client"}
    }
)
async def parse_resume_upload(
    request: Request,
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT format)"),
    limiter: UploadRateLimiter = Depends(get_rate_limiter),
):
    """
    Parse a resume file into a candidate profile.

    **Supported formats:**
    - PDF (.pdf) - text objects only, scanned PDFs (OCR) are not supported
    - DOCX (.docx)
    - TXT (.txt)

    The returned `fullName` is the first line of the document and should be
    confirmed by the user.
    """
    client = request.client.host if request.client else "unknown"
    if not limiter.allow(client):
        logger.warning("Rate limit exceeded for %s", client)
        raise HTTPException(status_code=429, detail="Too many uploads, please try again later.")

    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large ({len(raw)} bytes, limit {config.MAX_UPLOAD_BYTES}).",
        )

    try:
        return await parse_resume(raw, file.content_type, file.filename)
    except UnsupportedKindError as exc:
        logger.warning("Rejected upload %r: %s", file.filename, exc)
        raise HTTPException(status_code=415, detail=str(exc))
    except (ExtractionFailedError, InsufficientTextError) as exc:
        logger.warning("Could not parse upload %r: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=str(exc))
