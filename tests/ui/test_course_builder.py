# -*- coding: utf-8 -*-
"""
Tests for the course builder wizard.
"""

import pytest

from controllers.wizard_controller import SubmissionStatus
from services.translation_manager import tr
from ui.wizards.course import CourseBuilderWizard, create_course_controller
from utils.helpers import is_temp_id

COURSES = "/api/admin/courses"


@pytest.fixture
def controller(fake_api, immediate_runner):
    return create_course_controller(api_client=fake_api, runner=immediate_runner)


def fill_course(controller):
    controller.update_field("title", "IELTS Masterclass")
    controller.update_field("category", "test-prep")
    controller.update_field("instructor_name", "Jane Doe")
    controller.update_field("short_description", "Band 7 and above in six weeks")
    controller.update_field("description", "Everything you need for the IELTS exam.")


class TestCourseBuilder:
    """Course fields, curriculum checks and publishing."""

    def test_defaults(self, controller):
        aggregate = controller.aggregate
        assert aggregate["level"] == "BEGINNER"
        assert aggregate["currency"] == "USD"
        assert aggregate["language"] == "English"
        assert aggregate["modules"] == []

    def test_title_derives_slug(self, controller):
        fill_course(controller)
        assert controller.aggregate["slug"] == "ielts-masterclass"

    def test_publish_sends_whole_course(self, controller, fake_api):
        fill_course(controller)
        controller.update_field("tags", ["ielts", "  ", "english"])
        speaking = controller.add_group("modules", {"title": "Speaking"})
        controller.add_item("modules", speaking["id"], {"title": "Part 1", "duration": 12})
        controller.add_group("modules", {"title": "Writing"})

        assert controller.publish()

        posts = fake_api.calls_to("POST", COURSES)
        assert len(posts) == 1
        payload = posts[0]
        assert payload["isPublished"] is True
        assert payload["slug"] == "ielts-masterclass"
        assert payload["instructorName"] == "Jane Doe"
        assert payload["tags"] == ["ielts", "english"]
        assert [m["title"] for m in payload["modules"]] == ["Speaking", "Writing"]
        assert [m["orderIndex"] for m in payload["modules"]] == [0, 1]
        lesson = payload["modules"][0]["lessons"][0]
        assert lesson["title"] == "Part 1"
        assert lesson["duration"] == 12
        assert is_temp_id(lesson["id"])

    def test_draft_is_unpublished(self, controller, fake_api):
        fill_course(controller)
        controller.save_draft()
        assert fake_api.calls_to("POST", COURSES)[0]["isPublished"] is False

    def test_untitled_module_blocks_submission(self, controller, fake_api):
        failures = []
        controller.validation_failed.connect(failures.append)
        fill_course(controller)
        controller.add_group("modules")

        assert controller.publish() is False

        assert controller.current_step.id == "curriculum"
        assert failures[0].errors == [tr("course.module_title_required", index=1)]
        assert fake_api.calls == []

    def test_untitled_lesson_names_its_module(self, controller):
        fill_course(controller)
        module = controller.add_group("modules", {"title": "Speaking"})
        controller.add_item("modules", module["id"])

        result = controller.steps[2].validate(controller.aggregate)

        assert result.errors == ['Lesson 1 in module "Speaking" needs a title']

    def test_original_price_below_price(self, controller):
        controller.update_field("price", 100)
        controller.update_field("original_price", 80)

        result = controller.steps[3].validate(controller.aggregate)

        assert result.fields == ["original_price"]

    def test_zero_original_price_is_compared(self, controller):
        controller.update_field("price", 10)
        controller.update_field("original_price", 0)

        result = controller.steps[3].validate(controller.aggregate)

        assert result.fields == ["original_price"]

    def test_malformed_price_is_a_field_error(self, controller, fake_api):
        fill_course(controller)
        for _ in range(3):
            controller.go_next()
        assert controller.current_step.id == "pricing"
        controller.update_field("price", "abc")

        result = controller.go_next()

        assert result.errors == [tr("validation.number", field="Price")]
        assert result.fields == ["price"]
        assert controller.publish() is False
        assert fake_api.calls == []

    def test_server_ids_are_adopted(self, controller, fake_api):
        fake_api.respond("POST", COURSES, {"course": {
            "id": "c1", "modules": [{"id": "m1", "lessons": [{"id": "l1"}]}]}})
        fill_course(controller)
        module = controller.add_group("modules", {"title": "Speaking"})
        controller.add_item("modules", module["id"], {"title": "Part 1"})

        controller.publish()

        assert controller.status == SubmissionStatus.SUCCEEDED
        assert controller.context.entity_id == "c1"
        assert controller.aggregate["modules"][0]["id"] == "m1"
        assert controller.aggregate["modules"][0]["lessons"][0]["id"] == "l1"

    def test_edit_mode_updates_existing_course(self, fake_api, immediate_runner):
        entity = {
            "id": "c9", "title": "GRE Prep", "slug": "gre-prep", "category": "test-prep",
            "instructorName": "Sam", "shortDescription": "Quant and verbal",
            "description": "Full GRE course", "price": 49,
            "courseModules": [{"id": "m2", "title": "Verbal", "orderIndex": 0,
                               "lessons": [{"id": "l5", "title": "Analogies",
                                            "contentType": "TEXT"}]}],
        }
        controller = create_course_controller(entity, api_client=fake_api, runner=immediate_runner)

        controller.update_field("title", "GRE Preparation")
        controller.publish()

        payload = fake_api.calls_to("PUT", f"{COURSES}/c9")[0]
        assert payload["title"] == "GRE Preparation"
        assert payload["slug"] == "gre-prep"
        assert payload["modules"][0]["id"] == "m2"
        assert payload["modules"][0]["lessons"][0]["type"] == "text"


class TestCourseBuilderWizard:

    def test_buttons_publish_and_save_draft(self, qtbot, fake_api, immediate_runner):
        controller = create_course_controller(api_client=fake_api, runner=immediate_runner)
        wizard = CourseBuilderWizard(controller)
        qtbot.addWidget(wizard)

        assert wizard.title_label.text() == tr("wizard.course.title")
        assert wizard.btn_submit.text() == tr("button.publish")

        fill_course(controller)
        with qtbot.waitSignal(wizard.wizard_completed, timeout=1000):
            wizard.btn_save_draft.click()

        assert fake_api.calls_to("POST", COURSES)[0]["isPublished"] is False

    def test_curriculum_editor_adds_modules(self, qtbot, fake_api, immediate_runner):
        controller = create_course_controller(api_client=fake_api, runner=immediate_runner)
        wizard = CourseBuilderWizard(controller)
        qtbot.addWidget(wizard)
        fill_course(controller)
        controller.jump_to(2)

        wizard.forms[2].editors["modules"].btn_add_group.click()

        assert len(controller.aggregate["modules"]) == 1
