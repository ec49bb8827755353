"""
Table sorting helpers.

Works out the active column and direction of a sortable table from the
request query, and renders the header cells with a sort link and the
direction indicator icon on the active column.

Header cells are either plain strings or dicts:
    {"data": "Name", "field": "name", "sort": "desc"}
"field" makes a column sortable; "sort" marks the default column and
its initial direction.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

from markupsafe import Markup

from common.utils import format_markup
from installer.services.theme.renderer import TemplateRenderer

logger = logging.getLogger(__name__)

ARROW_ASC_PATH = "core/misc/arrow-asc.png"
ARROW_DESC_PATH = "core/misc/arrow-desc.png"
INDICATOR_TEMPLATE = "tablesort-indicator.html.j2"

HeaderCell = Union[str, Dict[str, Any]]


def get_order(header: List[HeaderCell], query: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """
    Determine the column the table is sorted by.

    The "order" query parameter names the column title; without it the
    first column with a default sort wins, then the first column.

    Returns:
        {"name": column title, "sql": column field}
    """
    order = query.get("order", "")
    default: Optional[Dict[str, Any]] = None

    for cell in header:
        if not isinstance(cell, dict):
            continue
        if "data" in cell and order == cell["data"]:
            default = cell
            break
        if default is None and cell.get("sort") in ("asc", "desc"):
            default = cell

    if default is None:
        if not header:
            return {"name": None, "sql": None}
        first = header[0]
        default = first if isinstance(first, dict) else {"data": first}

    return {"name": default.get("data"), "sql": default.get("field")}


def get_sort(header: List[HeaderCell], query: Mapping[str, str]) -> str:
    """
    Determine the sort direction.

    An explicit "sort" query parameter wins ("desc" or anything else
    meaning "asc"); otherwise the active column's default, then "asc".
    """
    if "sort" in query:
        return "desc" if str(query["sort"]).lower() == "desc" else "asc"

    active = get_order(header, query)
    for cell in header:
        if isinstance(cell, dict) and cell.get("data") == active["name"] and "sort" in cell:
            return cell["sort"]

    return "asc"


class TableSort:
    """
    Renders sort indicators and sortable table headers.
    """

    def __init__(self, renderer: TemplateRenderer, asset_base_url: str = "/"):
        """
        Initialize TableSort.

        Args:
            renderer: Template renderer holding the indicator template
            asset_base_url: Prefix for the arrow image paths
        """
        self._renderer = renderer
        self._asset_base_url = asset_base_url if asset_base_url.endswith("/") else asset_base_url + "/"

    def preprocess_indicator(self, style: Optional[str]) -> Dict[str, Any]:
        """Build the indicator template context."""
        return {
            "style": style,
            "arrow_asc": self._asset_base_url + ARROW_ASC_PATH,
            "arrow_desc": self._asset_base_url + ARROW_DESC_PATH,
        }

    def render_indicator(self, style: Optional[str], language: Optional[str] = None) -> Markup:
        """
        Render the sort direction icon.

        Args:
            style: "asc" for the ascending icon; anything else is descending
            language: Language for the alt and title text

        Returns:
            <img> markup
        """
        context = self.preprocess_indicator(style)
        return self._renderer.render(INDICATOR_TEMPLATE, language=language, **context)

    def build_header(
        self,
        header: List[HeaderCell],
        query: Mapping[str, str],
        path: str = "",
        language: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Render header cells for a sortable table.

        Sortable cells become links that sort by that column; the active
        column links to the opposite direction and carries the indicator.

        Returns:
            List of {"content": Markup, "attributes": dict}
        """
        order = get_order(header, query)
        sort = get_sort(header, query)
        base_query = {key: value for key, value in query.items() if key not in ("sort", "order")}

        cells = []
        for cell in header:
            if not isinstance(cell, dict):
                cells.append({"content": Markup.escape(cell), "attributes": {}})
                continue

            attributes = {
                key: value for key, value in cell.items() if key not in ("data", "field", "sort")
            }
            content = cell.get("data", "")

            if "field" not in cell:
                cells.append({"content": Markup.escape(content), "attributes": attributes})
                continue

            if content == order["name"]:
                attributes["aria-sort"] = "ascending" if sort == "asc" else "descending"
                attributes["class"] = attributes.get("class", []) + ["is-active"]
                next_sort = "desc" if sort == "asc" else "asc"
                image = self.render_indicator(sort, language)
            else:
                # A different column starts out ascending.
                next_sort = "asc"
                image = Markup("")

            href = path + "?" + urlencode({**base_query, "sort": next_sort, "order": content})
            link = format_markup('<a href="@href" title="!title">@content!image</a>', {
                "@href": href,
                "!title": self._renderer.translate("sort by @s", language, **{"@s": content}),
                "@content": content,
                "!image": image,
            })
            cells.append({"content": link, "attributes": attributes})

        return cells
