# -*- coding: utf-8 -*-
"""
Course entity models (course, modules, lessons).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.record import Record, clean_strings, optional_number, pick

COURSE_LEVELS = ("BEGINNER", "INTERMEDIATE", "ADVANCED")
LESSON_TYPES = ("video", "text", "quiz", "assignment")


@dataclass
class CourseLesson:
    """Lesson inside a course module."""
    id: str
    title: str = ""
    description: str = ""
    type: str = "video"
    content_url: str = ""
    duration: Optional[int] = None
    order_index: int = 0

    def to_api_payload(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "title": self.title.strip(),
            "description": self.description,
            "type": self.type,
            "orderIndex": self.order_index,
        }
        if self.content_url:
            payload["contentUrl"] = self.content_url
        if self.duration is not None:
            payload["duration"] = self.duration
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourseLesson":
        content_type = pick(data, "type") or pick(data, "content_type") or "video"
        return cls(
            id=str(data.get("id", "")),
            title=pick(data, "title", ""),
            description=pick(data, "description", ""),
            type=str(content_type).lower(),
            content_url=pick(data, "content_url", ""),
            duration=optional_number(pick(data, "duration")),
            order_index=int(pick(data, "order_index", 0)),
        )


@dataclass
class CourseModule:
    """Module (chapter) of a course."""
    id: str
    title: str = ""
    description: str = ""
    order_index: int = 0
    lessons: List[CourseLesson] = field(default_factory=list)

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title.strip(),
            "description": self.description,
            "orderIndex": self.order_index,
            "lessons": [lesson.to_api_payload() for lesson in self.lessons],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourseModule":
        return cls(
            id=str(data.get("id", "")),
            title=pick(data, "title", ""),
            description=pick(data, "description", ""),
            order_index=int(pick(data, "order_index", 0)),
            lessons=[CourseLesson.from_dict(l) for l in pick(data, "lessons", [])],
        )

    def to_aggregate(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "order_index": self.order_index,
            "lessons": [vars(lesson).copy() for lesson in self.lessons],
        }


@dataclass
class Course(Record):
    """
    Online course built with the course builder.

    Required: title, slug, instructor_name, category, short_description,
    description.
    """

    title: str = ""
    slug: str = ""
    category: str = ""
    instructor_name: str = ""
    short_description: str = ""
    description: str = ""
    level: str = "BEGINNER"
    language: str = "English"
    tags: List[str] = field(default_factory=list)
    thumbnail_url: str = ""
    video_url: str = ""
    duration: float = 0
    max_students: Optional[int] = None
    requirements: List[str] = field(default_factory=list)
    learning_objectives: List[str] = field(default_factory=list)
    modules: List[Dict[str, Any]] = field(default_factory=list)
    price: float = 0
    original_price: Optional[float] = None
    currency: str = "USD"
    is_published: bool = False
    is_featured: bool = False
    id: Optional[str] = None

    @property
    def course_modules(self) -> List[CourseModule]:
        modules = [CourseModule.from_dict(m) for m in self.modules]
        return sorted(modules, key=lambda m: m.order_index)

    def to_api_payload(self) -> Dict[str, Any]:
        payload = {
            "title": self.title.strip(),
            "slug": self.slug.strip(),
            "description": self.description,
            "shortDescription": self.short_description,
            "instructorName": self.instructor_name.strip(),
            "category": self.category,
            "tags": clean_strings(self.tags),
            "level": self.level,
            "language": self.language or "English",
            "price": optional_number(self.price) or 0,
            "currency": self.currency or "USD",
            "duration": optional_number(self.duration) or 0,
            "thumbnailUrl": self.thumbnail_url,
            "videoUrl": self.video_url,
            "requirements": clean_strings(self.requirements),
            "learningObjectives": clean_strings(self.learning_objectives),
            "modules": [m.to_api_payload() for m in self.course_modules],
            "isPublished": bool(self.is_published),
            "isFeatured": bool(self.is_featured),
        }
        original_price = optional_number(self.original_price)
        if original_price:
            payload["originalPrice"] = original_price
        max_students = optional_number(self.max_students)
        if max_students is not None:
            payload["maxStudents"] = int(max_students)
        return payload

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Course":
        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            title=pick(data, "title", ""),
            slug=pick(data, "slug", ""),
            category=pick(data, "category", ""),
            instructor_name=pick(data, "instructor_name", ""),
            short_description=pick(data, "short_description", ""),
            description=pick(data, "description", ""),
            level=pick(data, "level", "BEGINNER"),
            language=pick(data, "language", "English"),
            tags=list(pick(data, "tags", [])),
            thumbnail_url=pick(data, "thumbnail_url", ""),
            video_url=pick(data, "video_url", ""),
            duration=pick(data, "duration", 0),
            max_students=pick(data, "max_students"),
            requirements=list(pick(data, "requirements", [])),
            learning_objectives=list(pick(data, "learning_objectives", [])),
            modules=[CourseModule.from_dict(m).to_aggregate()
                     for m in pick(data, "modules", None) or pick(data, "course_modules", [])],
            price=pick(data, "price", 0),
            original_price=pick(data, "original_price"),
            currency=pick(data, "currency", "USD"),
            is_published=bool(pick(data, "is_published", False)),
            is_featured=bool(pick(data, "is_featured", False)),
        )
