"""
Resume Pydantic schemas
"""
from typing import List
from pydantic import BaseModel, Field


DEFAULT_NAME = "Your Name"
PLACEHOLDER_SUMMARY = "Summary extracted from your resume. Please review and edit."
PLACEHOLDER_SKILLS = ("React", "Node.js", "JavaScript")


class PersonalInfo(BaseModel):
    """Candidate identity and contact details"""
    name: str = DEFAULT_NAME
    email: str = ""
    phone: str = ""
    summary: List[str] = Field(default_factory=lambda: [PLACEHOLDER_SUMMARY])


class ExperienceEntry(BaseModel):
    """One job held by the candidate"""
    title: str = ""
    company: str = ""
    period: str = ""
    description: List[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.title and self.company and self.period)


class EducationEntry(BaseModel):
    """One degree held by the candidate"""
    degree: str
    institution: str
    year: str


class ParsedResumeData(BaseModel):
    """Structured profile recovered from resume text"""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    experiences: List[ExperienceEntry]
    education: List[EducationEntry]
    skills: List[str]

    class Config:
        populate_by_name = True


def placeholder_experience() -> ExperienceEntry:
    return ExperienceEntry(
        title="Extracted Position",
        company="Company Name",
        period="2020 - Present",
        description=["Responsibilities and achievements extracted from your resume."],
    )


def placeholder_education() -> EducationEntry:
    return EducationEntry(degree="Degree Name", institution="University Name", year="2020")


def placeholder_skills() -> List[str]:
    return list(PLACEHOLDER_SKILLS)


class ErrorResponse(BaseModel):
    """Error envelope returned by the API"""
    error: str
    message: str
