# -*- coding: utf-8 -*-
"""
CMS page entity model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.record import Record, pick

PAGE_TEMPLATES = ("default", "landing", "about", "contact", "faq", "pricing", "blog", "custom")


@dataclass
class Page(Record):
    """
    A content page managed from the admin panel.

    Required: title, slug, content.
    """

    title: str = ""
    slug: str = ""
    content: str = ""
    excerpt: str = ""
    template: str = "default"
    is_published: bool = False
    meta_title: str = ""
    meta_description: str = ""
    custom_css: str = ""
    custom_js: str = ""
    parent_id: Optional[str] = None
    order: int = 0
    id: Optional[str] = None

    REQUIRED_FIELDS = ("title", "slug", "content")

    @property
    def status_display(self) -> str:
        return "Published" if self.is_published else "Draft"

    def to_api_payload(self) -> Dict[str, Any]:
        payload = {
            "title": self.title.strip(),
            "slug": self.slug.strip(),
            "content": self.content,
            "excerpt": self.excerpt,
            "template": self.template or "default",
            "isPublished": bool(self.is_published),
            "metaTitle": self.meta_title,
            "metaDescription": self.meta_description,
            "customCss": self.custom_css,
            "customJs": self.custom_js,
            "order": int(self.order or 0),
        }
        if self.parent_id:
            payload["parentId"] = self.parent_id
        return payload

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Page":
        """Build from an API page (camelCase or raw snake_case row)."""
        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            title=pick(data, "title", ""),
            slug=pick(data, "slug", ""),
            content=pick(data, "content", ""),
            excerpt=pick(data, "excerpt", ""),
            template=pick(data, "template", "default"),
            is_published=bool(pick(data, "is_published", False)),
            meta_title=pick(data, "meta_title", ""),
            meta_description=pick(data, "meta_description", ""),
            custom_css=pick(data, "custom_css", ""),
            custom_js=pick(data, "custom_js", ""),
            parent_id=pick(data, "parent_id"),
            order=int(pick(data, "order", 0) or 0),
        )
