# -*- coding: utf-8 -*-
"""
Tests for WizardController.

Tests cover:
- Field updates and derived values
- Gated navigation
- Submission lifecycle (coalescing, blocking, failures)
- Reconciliation after save
"""

import pytest

from controllers.wizard_controller import (
    PublishableWizardController, SubmissionStatus, WizardController
)
from services.exceptions import ApiException, AuthRequiredException, InvalidTransition
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.wizards.framework import FieldSpec, GroupSchema, StepDefinition, WizardContext
from utils.helpers import is_temp_id


class ArticleContext(WizardContext):
    slug_source = "title"
    reset_on_change = {"country": {"city": ""}}
    group_schemas = {"chapters": GroupSchema(items_key="sections",
                                             group_defaults={"title": ""},
                                             item_defaults={"title": ""})}

    def default_data(self):
        data = super().default_data()
        data.update({"title": "", "slug": "", "summary": "", "country": "", "city": "",
                     "is_published": False})
        return data


def article_steps():
    return [
        StepDefinition("basics", "Basics", fields=[
            FieldSpec("title", "Title", required=True),
            FieldSpec("slug", "Slug", required=True),
        ]),
        StepDefinition("summary", "Summary", fields=[
            FieldSpec("summary", "Summary", required=True, rules={"min_length": 5}),
        ]),
        StepDefinition("review", "Review"),
    ]


@pytest.fixture
def controller(fake_api, manual_runner):
    sync = RemoteSync("/api/articles", fake_api, entity_key="article")
    return WizardController(ArticleContext(), article_steps(), sync, runner=manual_runner)


def fill_valid(controller):
    controller.update_field("title", "About Us")
    controller.update_field("summary", "Who we are")


class TestFieldUpdates:
    """Field merges, slug derivation and dependent resets."""

    def test_title_derives_slug(self, controller):
        changed = []
        controller.field_changed.connect(lambda name, value: changed.append((name, value)))

        changes = controller.update_field("title", "About Us")

        assert changes == {"title": "About Us", "slug": "about-us"}
        assert ("slug", "about-us") in changed
        assert controller.aggregate["slug"] == "about-us"

    def test_typed_slug_is_kept(self, controller):
        controller.update_field("slug", "our-story")
        controller.update_field("title", "About Us")
        assert controller.aggregate["slug"] == "our-story"

    def test_cleared_slug_follows_title_again(self, controller):
        controller.update_field("slug", "our-story")
        controller.update_field("slug", "")
        controller.update_field("title", "Contact")
        assert controller.aggregate["slug"] == "contact"

    def test_edit_mode_never_rewrites_slug(self, fake_api, manual_runner):
        context = ArticleContext(data={"title": "About", "slug": "about"}, entity_id="a1")
        controller = WizardController(context, article_steps(),
                                      RemoteSync("/api/articles", fake_api), runner=manual_runner)

        controller.update_field("title", "About the team")

        assert controller.aggregate["slug"] == "about"
        assert context.persisted_slug == "about"

    def test_dependent_field_resets_only_on_change(self, controller):
        controller.update_field("country", "Canada")
        controller.update_field("city", "Toronto")

        assert controller.update_field("country", "Canada") == {"country": "Canada"}
        assert controller.aggregate["city"] == "Toronto"

        controller.update_field("country", "Australia")
        assert controller.aggregate["city"] == ""

    def test_list_values(self, controller):
        index = controller.append_list_value("tags", "visa")
        controller.append_list_value("tags", "uk")
        controller.set_list_value("tags", index, "visas")
        controller.remove_list_value("tags", 1)
        assert controller.aggregate["tags"] == ["visas"]


class TestGroups:

    def test_added_groups_get_temporary_ids_and_order(self, controller):
        first = controller.add_group("chapters")
        second = controller.add_group("chapters", {"title": "Two"})

        assert is_temp_id(first["id"])
        assert first["order_index"] == 0
        assert second["order_index"] == 1
        assert second["sections"] == []

    def test_removal_keeps_order_gaps(self, controller):
        groups = [controller.add_group("chapters") for _ in range(3)]
        controller.remove_group("chapters", groups[1]["id"])

        assert [g["order_index"] for g in controller.aggregate["chapters"]] == [0, 2]

    def test_group_actions(self, controller):
        emitted = []
        controller.group_changed.connect(emitted.append)
        controller.apply_group_action("chapters", "add_group", {})
        group_id = controller.aggregate["chapters"][0]["id"]

        controller.apply_group_action("chapters", "update_group",
                                      {"group_id": group_id, "name": "title", "value": "Intro"})
        controller.apply_group_action("chapters", "add_item", {"group_id": group_id})
        item_id = controller.aggregate["chapters"][0]["sections"][0]["id"]
        controller.apply_group_action("chapters", "update_item",
                                      {"group_id": group_id, "item_id": item_id,
                                       "name": "title", "value": "Welcome"})

        group = controller.aggregate["chapters"][0]
        assert group["title"] == "Intro"
        assert group["sections"][0]["title"] == "Welcome"
        assert emitted == ["chapters"] * 4

        controller.apply_group_action("chapters", "remove_item",
                                      {"group_id": group_id, "item_id": item_id})
        assert group["sections"] == []

    def test_unknown_action(self, controller):
        with pytest.raises(ValueError):
            controller.apply_group_action("chapters", "shuffle", {})


class TestNavigation:

    def test_next_is_blocked_by_invalid_step(self, controller):
        failures = []
        controller.validation_failed.connect(failures.append)

        result = controller.go_next()

        assert not result.is_valid
        assert controller.current_index == 0
        assert result.fields == ["title", "slug"]
        assert failures == [result]

    def test_next_advances_when_valid(self, controller):
        moves = []
        controller.step_changed.connect(lambda old, new: moves.append((old, new)))
        controller.update_field("title", "About Us")

        assert controller.go_next().is_valid
        assert controller.current_index == 1
        assert moves == [(0, 1)]

    def test_next_on_last_step_stays(self, controller):
        fill_valid(controller)
        controller.jump_to(2)

        assert controller.go_next().is_valid
        assert controller.current_index == 2

    def test_previous_never_validates(self, controller):
        controller.update_field("title", "About Us")
        controller.go_next()
        controller.update_field("title", "")

        assert controller.go_previous()
        assert controller.current_index == 0
        assert not controller.go_previous()

    def test_jump_blocked_by_earlier_step(self, controller):
        failures = []
        controller.validation_failed.connect(failures.append)
        controller.update_field("title", "About Us")

        with pytest.raises(InvalidTransition) as excinfo:
            controller.jump_to(2)

        assert excinfo.value.target_index == 2
        assert excinfo.value.blocking_index == 1
        assert controller.current_index == 0
        assert len(failures) == 1

    def test_jump_out_of_range(self, controller):
        with pytest.raises(IndexError):
            controller.jump_to(3)

    def test_jump_back_is_always_allowed(self, controller):
        fill_valid(controller)
        controller.jump_to(2)
        controller.update_field("title", "")

        controller.jump_to(0)
        assert controller.current_index == 0

    def test_progress(self, controller):
        assert controller.navigator.get_progress_percentage() == 0.0
        fill_valid(controller)
        controller.jump_to(1)
        assert controller.navigator.get_progress_percentage() == 50.0


class TestSubmission:

    def test_submit_posts_once_while_in_flight(self, controller, fake_api, manual_runner):
        statuses = []
        controller.submission_status_changed.connect(statuses.append)
        fill_valid(controller)

        assert controller.submit()
        assert controller.submit()

        assert len(manual_runner.pending) == 1
        assert controller.status == SubmissionStatus.SUBMITTING

        fake_api.respond("POST", "/api/articles", {"article": {"id": "a1", "slug": "about-us"}})
        manual_runner.run_all()

        assert len(fake_api.calls_to("POST", "/api/articles")) == 1
        assert controller.status == SubmissionStatus.SUCCEEDED
        assert statuses == ["submitting", "succeeded"]
        assert controller.context.entity_id == "a1"
        assert controller.context.persisted_slug == "about-us"

    def test_second_save_updates(self, controller, fake_api, manual_runner):
        fill_valid(controller)
        fake_api.respond("POST", "/api/articles", {"article": {"id": "a1"}})
        controller.submit()
        manual_runner.run_all()

        controller.update_field("summary", "Who we really are")
        controller.submit()
        manual_runner.run_all()

        assert fake_api.calls_to("PUT", "/api/articles/a1")[0]["summary"] == "Who we really are"

    def test_invalid_step_blocks_and_moves_there(self, controller, fake_api, manual_runner):
        failures = []
        controller.validation_failed.connect(failures.append)
        controller.update_field("title", "About Us")

        assert controller.submit() is False

        assert controller.current_index == 1
        assert failures[0].fields == ["summary"]
        assert manual_runner.pending == []
        assert fake_api.calls == []
        assert controller.status == SubmissionStatus.IDLE

    def test_server_ids_replace_temporary_ids(self, controller, fake_api, manual_runner):
        fill_valid(controller)
        chapter = controller.add_group("chapters", {"title": "One"})
        controller.add_item("chapters", chapter["id"], {"title": "Intro"})
        fake_api.respond("POST", "/api/articles", {"article": {
            "id": "a1", "chapters": [{"id": "c1", "sections": [{"id": "s1"}]}],
        }})

        controller.submit()
        manual_runner.run_all()

        saved = controller.aggregate["chapters"][0]
        assert saved["id"] == "c1"
        assert saved["sections"][0]["id"] == "s1"

    def test_rejection_fails_and_allows_retry(self, controller, fake_api, manual_runner):
        failures = []
        controller.submission_failed.connect(failures.append)
        fill_valid(controller)
        fake_api.respond("POST", "/api/articles", ApiException(
            "x", status_code=409, response_data={"error": "Slug already exists"}))

        controller.submit()
        manual_runner.run_all()

        assert controller.status == SubmissionStatus.FAILED
        assert controller.failure_reason == "Slug already exists"
        assert failures == ["Slug already exists"]
        assert controller.context.entity_id is None

        assert controller.submit()
        assert len(manual_runner.pending) == 1

    def test_expired_session_asks_for_login(self, controller, fake_api, manual_runner):
        logins = []
        failures = []
        controller.login_required.connect(lambda: logins.append(True))
        controller.submission_failed.connect(failures.append)
        fill_valid(controller)
        fake_api.respond("POST", "/api/articles", AuthRequiredException("x", status_code=401))

        controller.submit()
        manual_runner.run_all()

        assert logins == [True]
        assert controller.failure_reason == tr("error.auth.required")
        assert controller.status == SubmissionStatus.FAILED
        assert failures == []

    def test_runner_error_is_folded(self, controller, manual_runner):
        fill_valid(controller)
        controller.sync.save = lambda *_args: 1 / 0

        controller.submit()
        manual_runner.run_all()

        assert controller.status == SubmissionStatus.FAILED
        assert controller.failure_reason == tr("error.api.generic")


class TestPublishable:

    def test_publish_and_draft(self, fake_api, immediate_runner):
        fake_api.respond("POST", "/api/articles", {"id": "a1"})
        controller = PublishableWizardController(
            ArticleContext(), article_steps(), RemoteSync("/api/articles", fake_api),
            runner=immediate_runner)
        fill_valid(controller)

        assert controller.publish()
        assert fake_api.calls_to("POST", "/api/articles")[0]["is_published"] is True

        assert controller.save_draft()
        assert fake_api.calls_to("PUT", "/api/articles/a1")[0]["is_published"] is False
