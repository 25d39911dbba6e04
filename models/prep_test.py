# -*- coding: utf-8 -*-
"""
Test-preparation exam models (test, sections, questions).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.record import Record, clean_strings, optional_number, pick

TEST_TYPES = ("IELTS", "TOEFL", "PTE", "GRE", "GMAT", "SAT", "ACT",
              "DUOLINGO", "CAEL", "CELPIP", "CUSTOM")
TEST_DIFFICULTIES = ("EASY", "MEDIUM", "HARD", "EXPERT")
QUESTION_TYPES = ("MCQ", "ESSAY", "SPEAKING", "LISTENING", "READING", "FILL_BLANK", "TRUE_FALSE")
QUESTION_DIFFICULTIES = ("EASY", "MEDIUM", "HARD")

DEFAULT_QUESTION_COUNT = 10
DEFAULT_TIME_LIMIT = 30


@dataclass
class TestQuestion:
    """Question of a test section."""
    __test__ = False

    id: str
    question_text: str = ""
    question_type: str = "MCQ"
    options: List[str] = field(default_factory=list)
    correct_answer: str = ""
    explanation: str = ""
    difficulty: str = "MEDIUM"
    points: int = 1
    order_index: int = 0

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "questionText": self.question_text.strip(),
            "questionType": self.question_type,
            "options": clean_strings(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "difficulty": self.difficulty,
            "points": int(self.points or 0),
            "orderIndex": self.order_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestQuestion":
        return cls(
            id=str(data.get("id", "")),
            question_text=pick(data, "question_text", ""),
            question_type=pick(data, "question_type", "MCQ"),
            options=list(pick(data, "options", [])),
            correct_answer=str(pick(data, "correct_answer", "")),
            explanation=pick(data, "explanation", ""),
            difficulty=pick(data, "difficulty", "MEDIUM"),
            points=int(pick(data, "points", 1)),
            order_index=int(pick(data, "order_index", 0)),
        )


@dataclass
class TestSection:
    """Section (e.g. Listening, Reading) of a test."""
    __test__ = False

    id: str
    section_name: str = ""
    description: str = ""
    question_count: int = DEFAULT_QUESTION_COUNT
    time_limit: int = DEFAULT_TIME_LIMIT
    instructions: str = ""
    order_index: int = 0
    questions: List[TestQuestion] = field(default_factory=list)

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sectionName": self.section_name.strip(),
            "description": self.description,
            "questionCount": int(self.question_count or 0),
            "timeLimit": int(self.time_limit or 0),
            "instructions": self.instructions,
            "orderIndex": self.order_index,
            "questions": [q.to_api_payload() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestSection":
        return cls(
            id=str(data.get("id", "")),
            section_name=pick(data, "section_name", ""),
            description=pick(data, "description", ""),
            question_count=int(pick(data, "question_count", DEFAULT_QUESTION_COUNT)),
            time_limit=int(pick(data, "time_limit", DEFAULT_TIME_LIMIT)),
            instructions=pick(data, "instructions", ""),
            order_index=int(pick(data, "order_index", 0)),
            questions=[TestQuestion.from_dict(q) for q in pick(data, "questions", [])],
        )

    def to_aggregate(self) -> Dict[str, Any]:
        data = vars(self).copy()
        data["questions"] = [vars(q).copy() for q in self.questions]
        return data


@dataclass
class PrepTest(Record):
    """
    Test-preparation exam built with the test builder.

    Required: title, description. A paid test needs a price.
    """

    title: str = ""
    description: str = ""
    type: str = "IELTS"
    difficulty_level: str = "MEDIUM"
    duration: int = 120
    total_questions: int = 40
    passing_score: int = 70
    price: float = 999
    is_free: bool = False
    is_published: bool = False
    instructions: str = ""
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    sections: List[Dict[str, Any]] = field(default_factory=list)
    id: Optional[str] = None

    @property
    def test_sections(self) -> List[TestSection]:
        sections = [TestSection.from_dict(s) for s in self.sections]
        return sorted(sections, key=lambda s: s.order_index)

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title.strip(),
            "description": self.description,
            "type": self.type,
            "difficultyLevel": self.difficulty_level,
            "duration": int(self.duration or 0),
            "totalQuestions": int(self.total_questions or 0),
            "passingScore": int(self.passing_score or 0),
            "price": 0 if self.is_free else (optional_number(self.price) or 0),
            "isFree": bool(self.is_free),
            "isPublished": bool(self.is_published),
            "instructions": self.instructions,
            "metaTitle": self.meta_title,
            "metaDescription": self.meta_description,
            "metaKeywords": self.meta_keywords,
            "sections": [s.to_api_payload() for s in self.test_sections],
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PrepTest":
        sections = pick(data, "sections", None) or pick(data, "test_sections", [])
        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            title=pick(data, "title", ""),
            description=pick(data, "description", ""),
            type=pick(data, "type", "IELTS"),
            difficulty_level=pick(data, "difficulty_level", "MEDIUM"),
            duration=int(pick(data, "duration", 120)),
            total_questions=int(pick(data, "total_questions", 40)),
            passing_score=int(pick(data, "passing_score", 70)),
            price=pick(data, "price", 0),
            is_free=bool(pick(data, "is_free", False)),
            is_published=bool(pick(data, "is_published", False)),
            instructions=pick(data, "instructions", ""),
            meta_title=pick(data, "meta_title", ""),
            meta_description=pick(data, "meta_description", ""),
            meta_keywords=pick(data, "meta_keywords", ""),
            sections=[TestSection.from_dict(s).to_aggregate() for s in sections],
        )
