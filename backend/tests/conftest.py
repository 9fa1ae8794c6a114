import pytest
from fastapi.testclient import TestClient

from resume_parser.main import app
from resume_parser.resumes.parser import ResumeParser


@pytest.fixture
def parser():
    return ResumeParser()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_resume_text():
    return """Jane Doe
jane.doe@example.com | 415-555-1234
San Francisco, CA

Experience
Software Engineer
Acme Corp
Jan 2020 - Present
Built scalable services

Education
B.S. Computer Science, State University, 2016
"""
