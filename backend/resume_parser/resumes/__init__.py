"""
Resume text decoding and heuristic extraction
"""
from resume_parser.resumes.parser import ResumeParser
from resume_parser.resumes.schemas import ParsedResumeData

__all__ = ["ResumeParser", "ParsedResumeData"]
