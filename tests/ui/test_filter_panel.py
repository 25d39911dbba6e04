# -*- coding: utf-8 -*-
"""
Tests for the list widgets: filter panel, pagination bar and table model.
"""

import pytest
from PyQt5.QtCore import Qt

from controllers.catalog_filters import universities_schema
from controllers.list_controller import ListFilterController
from ui.components.base_table_model import BaseTableModel
from ui.components.filter_panel import FilterPanel, facet_values
from ui.components.pagination_bar import PaginationBar


@pytest.fixture
def controller(fake_api, immediate_runner):
    fake_api.respond("GET", "/api/universities", {
        "universities": [{"id": "u1", "name": "MIT"}],
        "pagination": {"page": 1, "totalPages": 2, "total": 13},
        "filters": {
            "countries": [{"value": "Canada", "count": 12}, {"value": "UK", "count": 4}],
            "disciplines": ["Engineering", "Law", ""],
        },
    })
    return ListFilterController(universities_schema(), api_client=fake_api, runner=immediate_runner)


class TestFacetValues:

    def test_plain_and_counted_values(self):
        assert facet_values(["Law", {"value": "Arts", "count": 3}, {"name": "Design"}]) == [
            ("Law", "Law"), ("Arts", "Arts (3)"), ("Design", "Design")]

    def test_blank_entries_are_skipped(self):
        assert facet_values([None, "", {"value": ""}]) == []
        assert facet_values(None) == []


class TestFilterPanel:

    def test_widgets_follow_schema(self, qtbot, controller):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)

        assert set(panel.widgets) == {f.name for f in controller.schema.fields}
        assert panel.widgets["sortBy"].currentData() == "ranking"
        assert panel.widgets["tuition"].high.value() == 50000

    def test_facets_fill_choices(self, qtbot, controller):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)

        controller.refresh()

        discipline = panel.widgets["discipline"]
        assert [discipline.itemData(i) for i in range(discipline.count())] == [
            "all", "Engineering", "Law"]
        countries = panel.widgets["countries"]
        assert [countries.item(i).text() for i in range(countries.count())] == [
            "Canada (12)", "UK (4)"]

    def test_search_typing_refetches(self, qtbot, controller, fake_api):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)
        panel.show()

        qtbot.keyClicks(panel.widgets["search"], "mit")

        assert fake_api.calls_to("GET", "/api/universities")[-1]["search"] == "mit"

    def test_checking_a_country_toggles_it(self, qtbot, controller, fake_api):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)
        controller.refresh()

        panel.widgets["countries"].item(1).setCheckState(Qt.Checked)

        assert controller.state.fields["countries"] == ["UK"]
        assert fake_api.calls_to("GET", "/api/universities")[-1]["countries"] == "UK"
        assert panel.widgets["countries"].item(1).checkState() == Qt.Checked

    def test_selected_value_survives_missing_facet(self, qtbot, controller):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)

        controller.set_field("discipline", "Medicine")

        combo = panel.widgets["discipline"]
        assert combo.currentData() == "Medicine"

    def test_reset_clears_widgets(self, qtbot, controller):
        panel = FilterPanel(controller)
        qtbot.addWidget(panel)
        controller.set_field("search", "tech")
        assert panel.widgets["search"].text() == "tech"

        panel.btn_reset.click()

        assert panel.widgets["search"].text() == ""
        assert controller.state.fields["search"] == ""


class TestPaginationBar:

    def test_labels_and_buttons(self, qtbot, controller, fake_api):
        bar = PaginationBar(controller)
        qtbot.addWidget(bar)
        assert not bar.btn_next.isEnabled()

        controller.refresh()

        assert bar.total_label.text() == "13 results"
        assert bar.page_label.text() == "Page 1 of 2"
        assert bar.btn_next.isEnabled()
        assert not bar.btn_previous.isEnabled()

        bar.btn_next.click()
        assert fake_api.calls_to("GET", "/api/universities")[-1]["page"] == "2"


class TestBaseTableModel:

    def test_formatting(self):
        model = BaseTableModel(
            items=[{"name": "MIT", "university": {"name": "MIT"}, "featured": True,
                    "tags": ["stem", "usa"], "fee": 1000}],
            columns=[("university.name", "University"), ("featured", "Featured"),
                     ("tags", "Tags"), ("fee", "Fee", lambda v: f"${v}"), ("missing", "Missing")])

        values = [model.data(model.index(0, c)) for c in range(model.columnCount())]

        assert values == ["MIT", "Yes", "stem, usa", "$1000", ""]
        assert model.headerData(0, Qt.Horizontal) == "University"

    def test_get_item(self):
        model = BaseTableModel(items=[{"id": 1}])
        assert model.get_item(0) == {"id": 1}
        assert model.get_item(5) is None
