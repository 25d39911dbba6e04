# -*- coding: utf-8 -*-
"""
Tests for the catalog list screens.
"""

import pytest

from services.exceptions import AuthRequiredException, NetworkException
from services.translation_manager import tr
from ui.pages.catalog_list_page import CATALOG_COLUMNS, CatalogListPage


def make_page(qtbot, catalog, fake_api, runner):
    page = CatalogListPage(catalog, api_client=fake_api, runner=runner)
    qtbot.addWidget(page)
    return page


class TestCatalogListPage:

    def test_unknown_catalog(self, fake_api, immediate_runner):
        with pytest.raises(ValueError):
            CatalogListPage("scholarships", api_client=fake_api, runner=immediate_runner)

    def test_every_catalog_has_columns(self, qtbot, fake_api, immediate_runner):
        for catalog in CATALOG_COLUMNS:
            page = make_page(qtbot, catalog, fake_api, immediate_runner)
            assert page.model.columnCount() == len(CATALOG_COLUMNS[catalog])

    def test_load_fills_table(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("GET", "/api/programs", {
            "programs": [{"id": "1", "name": "MSc Data Science", "university": {"name": "UCL"},
                          "degreeType": "Masters", "tuitionFee": 28000}],
            "pagination": {"page": 1, "totalPages": 1, "total": 1},
        })
        page = make_page(qtbot, "programs", fake_api, immediate_runner)

        page.load()

        model = page.model
        assert model.rowCount() == 1
        assert model.data(model.index(0, 0)) == "MSc Data Science"
        assert model.data(model.index(0, 1)) == "UCL"
        assert model.data(model.index(0, 5)) == "28,000"
        assert page.status_label.isHidden()

    def test_no_results_message(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("GET", "/api/events", {"events": [], "pagination": {"total": 0}})
        page = make_page(qtbot, "events", fake_api, immediate_runner)

        page.load()

        assert page.status_label.text() == tr("list.empty")
        assert not page.status_label.isHidden()

    def test_errors_are_shown(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("GET", "/api/courses", NetworkException("down"))
        page = make_page(qtbot, "courses", fake_api, immediate_runner)

        page.load()

        assert page.status_label.text() == tr("error.api.connection")

    def test_expired_session_is_forwarded(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("GET", "/api/universities", AuthRequiredException("x", status_code=401))
        page = make_page(qtbot, "universities", fake_api, immediate_runner)

        with qtbot.waitSignal(page.auth_required, timeout=1000):
            page.load()

    def test_search_refetches_first_page(self, qtbot, fake_api, immediate_runner):
        page = make_page(qtbot, "universities", fake_api, immediate_runner)
        page.show()
        page.load()

        qtbot.keyClicks(page.filter_panel.widgets["search"], "mit")

        last = fake_api.calls_to("GET", "/api/universities")[-1]
        assert last["search"] == "mit"
        assert last["page"] == "1"
