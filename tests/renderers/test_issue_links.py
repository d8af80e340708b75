from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from tests.fakes.plans import make_ticket
from ticketpack.contracts.plan import PlanCore
from ticketpack.renderers.issue_links import IssueLinkBuilder, encode_query_value, ticket_issue_description


def test_encode_query_value_uses_plus_for_spaces() -> None:
    assert encode_query_value("Add export button") == "Add+export+button"
    assert encode_query_value("a/b&c=d") == "a%2Fb%26c%3Dd"
    assert encode_query_value("caf\N{LATIN SMALL LETTER E WITH ACUTE}") == "caf%C3%A9"


def test_build_url_shape() -> None:
    url = IssueLinkBuilder("https://linear.new/").build_url("Add export", "line one\nline two")

    assert url == "https://linear.new?title=Add+export&description=line+one%0Aline+two"


def test_one_link_per_ticket_in_order(sample_core: PlanCore) -> None:
    links = IssueLinkBuilder().build(sample_core.tickets)

    assert [link.ticket_id for link in links] == ["T1", "T2", "T3"]
    for link, ticket in zip(links, sample_core.tickets, strict=True):
        query = parse_qs(urlsplit(link.linear_new_url).query)
        assert link.linear_new_url.startswith("https://linear.new?title=")
        assert query["title"] == [ticket.title]
        assert query["description"] == [ticket_issue_description(ticket)]


def test_description_layout() -> None:
    ticket = make_ticket("T1", "E1", priority="P1", estimate="S", dependencies=["T0"])

    description = ticket_issue_description(ticket)

    assert description.splitlines()[:3] == ["Type: task", "Priority: P1", "Estimate: S"]
    assert "Acceptance criteria:\n- AC1\n- AC2\n- AC3" in description
    assert "Dependencies:\n- T0" in description
    assert "QA test cases:\n- QA1\n- QA2" in description
    assert description.endswith("Analytics:\n- clicked (user_id, plan)")


def test_description_omits_empty_optional_sections() -> None:
    description = ticket_issue_description(make_ticket("T1", "E1"))

    assert "Out of scope:" not in description
    assert "Dependencies:" not in description
