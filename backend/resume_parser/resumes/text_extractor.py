"""
Turn uploaded resume files into plain text
"""
import io
from typing import Optional

import pdfplumber
from docx import Document
import structlog

from resume_parser.core.exceptions import DecodeError

logger = structlog.get_logger()

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"
WORD_MIME_TYPES = (DOCX_MIME_TYPE, DOC_MIME_TYPE)


def decode(file_bytes: bytes, mime_type: Optional[str]) -> str:
    """Extract raw text from file bytes; unknown types are read as UTF-8 text"""
    if mime_type == PDF_MIME_TYPE:
        return _extract_from_pdf(file_bytes)
    if mime_type in WORD_MIME_TYPES:
        return _extract_from_docx(file_bytes)
    return file_bytes.decode("utf-8", errors="replace")


def _extract_from_pdf(file_bytes: bytes) -> str:
    """Extract text from PDF"""
    text_parts = []
    try:
        with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    text_parts.append(text)
    except Exception as e:
        logger.error("pdf_extraction_failed", error=str(e))
        raise DecodeError("Failed to parse PDF file", details={"mime_type": PDF_MIME_TYPE}) from e
    return "\n".join(text_parts)


def _extract_from_docx(file_bytes: bytes) -> str:
    """Extract text from DOCX"""
    try:
        doc = Document(io.BytesIO(file_bytes))
    except Exception as e:
        logger.error("docx_extraction_failed", error=str(e))
        raise DecodeError("Failed to parse DOCX file", details={"mime_type": DOCX_MIME_TYPE}) from e
    return "\n".join(paragraph.text for paragraph in doc.paragraphs)
