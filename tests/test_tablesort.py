"""Unit tests for the table sort indicator and header helpers."""

import pytest

from installer.services.theme import TableSort, get_order, get_sort


ASC_MARKUP = '<img src="/core/misc/arrow-asc.png" width="9" height="5" alt="Sort ascending" title="Sort ascending" />'
DESC_MARKUP = '<img src="/core/misc/arrow-desc.png" width="9" height="5" alt="Sort descending" title="Sort descending" />'

HEADER = [
    {"data": "Name", "field": "name", "sort": "asc"},
    {"data": "Created", "field": "created", "sort": "desc"},
    "Operations",
]


# ─────────────────────────────────────────────────────────────────
# Indicator
# ─────────────────────────────────────────────────────────────────


class TestRenderIndicator:
    def test_ascending(self, table_sort):
        assert str(table_sort.render_indicator("asc")).strip() == ASC_MARKUP

    @pytest.mark.parametrize("style", ["desc", None, "ASC", ""])
    def test_anything_else_is_descending(self, table_sort, style):
        assert str(table_sort.render_indicator(style)).strip() == DESC_MARKUP

    def test_asset_references_are_escaped(self, renderer):
        table_sort = TableSort(renderer, asset_base_url='/a"b&c')

        markup = str(table_sort.render_indicator("asc"))

        assert 'src="/a&#34;b&amp;c/core/misc/arrow-asc.png"' in markup

    def test_text_is_translated(self, table_sort):
        markup = str(table_sort.render_indicator("asc", language="de"))

        assert 'alt="Aufsteigend sortieren"' in markup
        assert 'title="Aufsteigend sortieren"' in markup

    def test_preprocess_context(self, renderer):
        context = TableSort(renderer, asset_base_url="https://cdn.example.com/assets").preprocess_indicator("desc")

        assert context == {
            "style": "desc",
            "arrow_asc": "https://cdn.example.com/assets/core/misc/arrow-asc.png",
            "arrow_desc": "https://cdn.example.com/assets/core/misc/arrow-desc.png",
        }


# ─────────────────────────────────────────────────────────────────
# Order and direction
# ─────────────────────────────────────────────────────────────────


class TestGetOrder:
    def test_requested_column(self):
        assert get_order(HEADER, {"order": "Created"}) == {"name": "Created", "sql": "created"}

    def test_first_column_with_default_sort(self):
        assert get_order(HEADER, {}) == {"name": "Name", "sql": "name"}

    def test_unknown_column_uses_default(self):
        assert get_order(HEADER, {"order": "Missing"}) == {"name": "Name", "sql": "name"}

    def test_first_column_without_defaults(self):
        assert get_order(["Title", {"data": "Size", "field": "size"}], {}) == {"name": "Title", "sql": None}

    def test_empty_header(self):
        assert get_order([], {}) == {"name": None, "sql": None}


class TestGetSort:
    def test_query_direction(self):
        assert get_sort(HEADER, {"sort": "DESC"}) == "desc"

    def test_unknown_query_direction_is_ascending(self):
        assert get_sort(HEADER, {"sort": "sideways"}) == "asc"

    def test_unknown_query_direction_overrides_column_default(self):
        assert get_sort(HEADER, {"order": "Created", "sort": "sideways"}) == "asc"

    def test_active_column_default(self):
        assert get_sort(HEADER, {"order": "Created"}) == "desc"

    def test_defaults_to_ascending(self):
        assert get_sort(["Title"], {}) == "asc"


# ─────────────────────────────────────────────────────────────────
# Header cells
# ─────────────────────────────────────────────────────────────────


class TestBuildHeader:
    def test_active_column_gets_indicator(self, table_sort):
        cells = table_sort.build_header(HEADER, {}, path="/admin/content")
        active = cells[0]

        assert active["attributes"]["aria-sort"] == "ascending"
        assert active["attributes"]["class"] == ["is-active"]
        assert 'href="/admin/content?sort=desc&amp;order=Name"' in str(active["content"])
        assert 'title="sort by Name"' in str(active["content"])
        assert "arrow-asc.png" in str(active["content"])

    def test_inactive_column_sorts_ascending(self, table_sort):
        cells = table_sort.build_header(HEADER, {}, path="/admin/content")
        inactive = cells[1]

        assert "aria-sort" not in inactive["attributes"]
        assert 'href="/admin/content?sort=asc&amp;order=Created"' in str(inactive["content"])
        assert "<img" not in str(inactive["content"])

    def test_plain_cell(self, table_sort):
        cells = table_sort.build_header(HEADER, {})

        assert str(cells[2]["content"]) == "Operations"
        assert cells[2]["attributes"] == {}

    def test_other_query_parameters_are_kept(self, table_sort):
        cells = table_sort.build_header(HEADER, {"order": "Created", "sort": "desc", "page": "2"})
        active = cells[1]

        assert active["attributes"]["aria-sort"] == "descending"
        assert 'href="?page=2&amp;sort=asc&amp;order=Created"' in str(active["content"])
        assert "arrow-desc.png" in str(active["content"])
