#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_end_to_end.py
"""End-to-end tests: render to HTML text and read it back with BeautifulSoup."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

import pytest
from bs4 import BeautifulSoup

from htmlmicrodata import (
    ApiActionDescription,
    ApiGroupDescription,
    ApiParameterDescription,
    Link,
    MappingDocumentationProvider,
    MicrodataFormatter,
    MicrodataOptions,
    ParameterSource,
    Uri,
    element,
)
from htmlmicrodata.renderers.scalars import parse_datetime_attribute, parse_duration


@dataclass
class Person:
    name: str
    homepage: Optional[Uri] = None
    manager: Optional["Person"] = None
    reports: list["Person"] = field(default_factory=list)


@dataclass
class Project:
    title: str
    owner: Person
    estimate: timedelta
    links: list[Link] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)


def parse(html):
    return BeautifulSoup(html, "html.parser")


@pytest.mark.integration
class TestTodoDocument:
    """The canonical three-member object."""

    def test_definition_list(self, formatter, todo):
        soup = parse(formatter.render_to_string(todo))

        [item] = soup.body.find_all("dl", recursive=False)
        assert item["itemscope"] == "itemscope"
        assert item["itemtype"].endswith(".Todo")
        assert [dt.get_text() for dt in item.find_all("dt")] == ["name", "description", "due"]

        descriptions = item.find_all("dd")
        assert len(descriptions) == 3
        assert descriptions[0].span.get_text() == "Finish this app"
        assert descriptions[0].span["itemprop"] == "name"
        assert descriptions[1].span.get_text() == "It'll take 6 to 8 weeks."

        due = descriptions[2].time
        assert due["itemprop"] == "due"
        assert parse_datetime_attribute(due["datetime"]) == todo.due

    def test_document_head(self, todo):
        formatter = MicrodataFormatter(
            MicrodataOptions(
                title="Todo",
                head_content=[element("link", rel="stylesheet", href="/todo.css")],
            )
        )
        html = formatter.render_to_string(todo)
        soup = parse(html)

        assert html.startswith("<!DOCTYPE html>")
        assert soup.html["lang"] == "en"
        assert soup.head.meta["charset"] == "utf-8"
        assert soup.head.title.get_text() == "Todo"
        assert soup.head.link["href"] == "/todo.css"


@pytest.mark.integration
class TestObjectGraphs:
    """Nested items, collections and cycles."""

    def test_nested_graph(self, formatter):
        owner = Person("Ada", homepage=Uri("https://example.com/ada"))
        project = Project(
            title="Engine",
            owner=owner,
            estimate=timedelta(days=3, hours=4),
            links=[Link("/projects/engine", body="Engine", rel="self", attributes={"type": "text/html"})],
            metadata={"priority": 1},
        )
        soup = parse(formatter.render_to_string(project))

        nested = soup.find("dl", attrs={"itemprop": "owner"})
        assert nested["itemscope"] == "itemscope"
        assert nested.find("a", attrs={"itemprop": "homepage"})["href"] == "https://example.com/ada"

        estimate = soup.find("time", attrs={"itemprop": "estimate"})
        assert parse_duration(estimate["datetime"]) == project.estimate

        link = soup.find("a", attrs={"itemprop": "links"})
        assert link["rel"] == ["self"]
        assert link["type"] == "text/html"
        assert link.get_text() == "Engine"

        metadata = soup.find("dl", attrs={"itemprop": "metadata"})
        assert metadata.find("span", attrs={"itemprop": "priority"}).get_text() == "1"

    def test_cyclic_graph_terminates(self, formatter):
        manager = Person("Grace")
        report = Person("Alan", manager=manager)
        manager.reports.append(report)
        manager.manager = manager

        soup = parse(formatter.render_to_string(manager))

        markers = soup.find_all(attrs={"data-cyclic-reference": "true"})
        assert sorted(m["itemprop"] for m in markers) == ["manager", "manager"]
        assert [s.get_text() for s in soup.find_all("span", attrs={"itemprop": "name"})] == ["Grace", "Alan"]

    def test_render_error_placeholder(self, formatter):
        class Flaky:
            @property
            def value(self):
                raise ValueError("unavailable")

        soup = parse(formatter.render_to_string([Flaky(), "after"]))

        [placeholder] = soup.find_all(attrs={"data-render-error": True})
        assert placeholder["data-render-error"] == "ValueError"
        assert soup.find_all("li")[1].get_text() == "after"


@pytest.mark.integration
class TestApiDocumentation:
    """Route groups rendered as navigable documentation."""

    def test_records_group(self):
        group = ApiGroupDescription(
            "Records",
            [
                ApiActionDescription("Records", "list", "GET", "/records"),
                ApiActionDescription(
                    "Records",
                    "get",
                    "GET",
                    "/records/{id}",
                    [ApiParameterDescription("id", int, source=ParameterSource.PATH)],
                ),
                ApiActionDescription(
                    "Records",
                    "search",
                    "GET",
                    "/records/search",
                    [
                        ApiParameterDescription("query"),
                        ApiParameterDescription("since", datetime, required=False),
                    ],
                ),
            ],
        )
        provider = MappingDocumentationProvider({"Records.search": "Full-text search."})
        formatter = MicrodataFormatter(MicrodataOptions(documentation_provider=provider))

        soup = parse(formatter.render_to_string(group))
        section = soup.find("section", id="Records")

        [anchor] = section.find_all("a")
        assert anchor["href"] == "/records"
        assert anchor["data-templated"] == "false"

        forms = {form["name"]: form for form in section.find_all("form")}
        assert forms["get"]["data-templated"] == "true"
        assert forms["get"].find("input", attrs={"name": "id"})["data-calling-convention"] == "path"

        search = forms["search"]
        assert search["data-templated"] == "false"
        assert search.find("p", class_="documentation").get_text() == "Full-text search."
        query = search.find("input", attrs={"name": "query"})
        assert query["type"] == "text"
        assert query["data-calling-convention"] == "query-string"
        assert query["data-required"] == "true"
        since = search.find("input", attrs={"name": "since"})
        assert since["type"] == "datetime-local"
        assert since["data-required"] == "false"
