# -*- coding: utf-8 -*-
"""
Filter schemas of the catalog list pages.

Each schema mirrors the query string the platform's list endpoints accept.
"""

from controllers.list_controller import FilterField, FilterSchema

UNIVERSITY_TYPES = (("all", "All types"), ("PUBLIC", "Public"), ("PRIVATE", "Private"))
UNIVERSITY_SORTS = (("ranking", "Ranking"), ("name", "Name"), ("tuition", "Tuition"))
EVENT_TIMEFRAMES = (("upcoming", "Upcoming"), ("past", "Past"), ("all", "All"))
COURSE_LEVELS = (("all", "All levels"), ("BEGINNER", "Beginner"),
                 ("INTERMEDIATE", "Intermediate"), ("ADVANCED", "Advanced"))
COURSE_PRICE_RANGES = (("all", "Any price"), ("free", "Free"), ("paid", "Paid"))
COURSE_SORTS = (("created_at", "Newest"), ("title", "Title"), ("price", "Price"), ("rating", "Rating"))
SORT_ORDERS = (("desc", "Descending"), ("asc", "Ascending"))
PAGE_STATUSES = (("all", "All"), ("published", "Published"), ("draft", "Draft"))
PAGE_TEMPLATES = (("all", "All templates"), ("default", "Default"), ("landing", "Landing"),
                  ("about", "About"), ("contact", "Contact"), ("faq", "FAQ"),
                  ("pricing", "Pricing"), ("blog", "Blog"), ("custom", "Custom"))


def universities_schema() -> FilterSchema:
    return FilterSchema(
        resource="/api/universities",
        items_key="universities",
        fields=[
            FilterField("search", "text", label="Search"),
            FilterField("countries", "set", label="Countries", facet="countries"),
            FilterField("state", "choice", label="State", facet="states"),
            FilterField("type", "choice", label="Type", choices=UNIVERSITY_TYPES),
            FilterField("discipline", "choice", label="Discipline", facet="disciplines"),
            FilterField("degree", "choice", label="Degree", facet="degrees"),
            FilterField("intake", "choice", label="Intake", facet="intakes"),
            FilterField("tuition", "range", bounds=(0, 50000), label="Tuition",
                        min_param="minTuition", max_param="maxTuition"),
            FilterField("sortBy", "choice", default="ranking",
                        label="Sort by", choices=UNIVERSITY_SORTS),
        ],
    )


def programs_schema() -> FilterSchema:
    return FilterSchema(
        resource="/api/programs",
        items_key="programs",
        fields=[
            FilterField("search", "text", label="Search"),
            FilterField("countries", "set", label="Countries", facet="countries"),
            FilterField("discipline", "choice", label="Discipline", facet="disciplines"),
            FilterField("degreeType", "choice", label="Degree", facet="degreeTypes"),
            FilterField("intake", "choice", label="Intake", facet="intakes"),
            FilterField("tuition", "range", bounds=(0, 100000), label="Tuition",
                        min_param="minTuition", max_param="maxTuition", split_bounds=True),
            FilterField("workPermit", "flag", label="Work permit"),
            FilterField("prPathway", "flag", label="PR pathway"),
            FilterField("internship", "flag", label="Internship"),
            FilterField("scholarship", "flag", label="Scholarship"),
            FilterField("online", "flag", label="Online"),
        ],
    )


def events_schema() -> FilterSchema:
    return FilterSchema(
        resource="/api/events",
        items_key="events",
        fields=[
            FilterField("search", "text", label="Search"),
            FilterField("timeframe", "choice", default="upcoming", always_send=True,
                        label="When", choices=EVENT_TIMEFRAMES),
            FilterField("eventType", "choice", label="Event type", facet="eventTypes"),
            FilterField("country", "choice", label="Country", facet="countries"),
            FilterField("city", "choice", label="City", facet="cities"),
            FilterField("isFree", "flag", label="Free"),
            FilterField("isOnline", "flag", label="Online"),
        ],
    )


def courses_schema() -> FilterSchema:
    return FilterSchema(
        resource="/api/courses",
        items_key="courses",
        fields=[
            FilterField("search", "text", label="Search"),
            FilterField("category", "choice", label="Category", facet="categories"),
            FilterField("level", "choice", label="Level", choices=COURSE_LEVELS),
            FilterField("priceRange", "choice", label="Price", choices=COURSE_PRICE_RANGES),
            FilterField("sortBy", "choice", default="created_at", always_send=True,
                        label="Sort by", choices=COURSE_SORTS),
            FilterField("sortOrder", "choice", default="desc", always_send=True,
                        label="Order", choices=SORT_ORDERS),
        ],
    )


def admin_pages_schema() -> FilterSchema:
    return FilterSchema(
        resource="/api/admin/pages",
        items_key="pages",
        page_size=20,
        fields=[
            FilterField("search", "text", label="Search"),
            FilterField("status", "choice", label="Status", choices=PAGE_STATUSES),
            FilterField("template", "choice", label="Template", choices=PAGE_TEMPLATES),
        ],
    )


CATALOG_SCHEMAS = {
    "universities": universities_schema,
    "programs": programs_schema,
    "events": events_schema,
    "courses": courses_schema,
}
