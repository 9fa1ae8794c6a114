"""
Resume parsing routes
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
import structlog

from resume_parser.core.config import settings
from resume_parser.core.exceptions import FileTooLargeError, ResumeParserException, UploadError
from resume_parser.resumes.parser import ResumeParser
from resume_parser.resumes.schemas import ErrorResponse, ParsedResumeData
from resume_parser.resumes.text_extractor import decode

router = APIRouter(prefix="/api", tags=["Resumes"])
logger = structlog.get_logger()


def get_resume_parser() -> ResumeParser:
    """Parser configured from application settings"""
    return ResumeParser(max_chars=settings.MAX_PARSE_CHARS)


@router.post(
    "/parse-resume",
    response_model=ParsedResumeData,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def parse_resume(
    resume: Optional[UploadFile] = File(None),
    parser: ResumeParser = Depends(get_resume_parser),
):
    """Extract a structured profile from an uploaded resume"""
    if resume is None or not resume.filename:
        raise UploadError()

    # One byte past the ceiling is enough to know the upload is too large
    file_content = resume.file.read(settings.max_upload_size_bytes + 1)
    if len(file_content) > settings.max_upload_size_bytes:
        raise FileTooLargeError(settings.MAX_UPLOAD_SIZE_MB)

    try:
        raw_text = decode(file_content, resume.content_type)
        parsed = parser.parse(raw_text)
    except ResumeParserException:
        raise
    except Exception as e:
        logger.exception("resume_parsing_failed", file_name=resume.filename, error=str(e))
        raise ResumeParserException("Unexpected error while parsing resume") from e

    logger.info(
        "resume_upload_parsed",
        file_name=resume.filename,
        content_type=resume.content_type,
        file_size=len(file_content),
    )
    return parsed
