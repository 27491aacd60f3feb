import logging
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from celestius.config.settings import settings
from celestius.core.gpa import SubjectEntry, calculate_gpa, counted_credits
from celestius.core.grades import GRADE_CODES, GRADE_POINTS
from celestius.core.inputs import to_credits, to_grade_code, to_name, to_previous_average
from celestius.core.logger import configure_logging


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Celestius GPA API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SubjectPayload(BaseModel):
    name: str = ""
    credits: float = 0.0
    grade: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return to_name(value)

    @field_validator("credits", mode="before")
    @classmethod
    def _coerce_credits(cls, value: Any) -> float:
        return to_credits(value)

    @field_validator("grade", mode="before")
    @classmethod
    def _coerce_grade(cls, value: Any) -> str:
        return to_grade_code(value)

    def to_entry(self) -> SubjectEntry:
        return SubjectEntry(name=self.name, credits=self.credits, grade=self.grade)


class CalculatePayload(BaseModel):
    subjects: List[SubjectPayload] = Field(default_factory=list)
    previous_cgpa: float = 0.0

    @field_validator("previous_cgpa", mode="before")
    @classmethod
    def _coerce_previous(cls, value: Any) -> float:
        return to_previous_average(value)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/grades")
def list_grades() -> Dict[str, List[Dict]]:
    return {"grades": [{"code": code, "points": GRADE_POINTS[code]} for code in GRADE_CODES]}


@app.post("/gpa/calculate")
def calculate(payload: CalculatePayload) -> Dict[str, float]:
    subjects = [subject.to_entry() for subject in payload.subjects]
    result = calculate_gpa(subjects, payload.previous_cgpa)
    logger.debug("API calculation over %d subjects: %s", len(subjects), result)
    return {
        "sgpa": result.sgpa,
        "cgpa": result.cgpa,
        "counted_credits": counted_credits(subjects),
    }
