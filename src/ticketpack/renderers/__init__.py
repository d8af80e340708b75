"""Export synthesizers: Markdown documents and issue-creation links.

The :class:`PlanRenderer` contract defines document rendering;
:class:`MarkdownRenderer` is the default implementation.
"""

from ticketpack.renderers.factory import create_renderer
from ticketpack.renderers.issue_links import IssueLinkBuilder, ticket_issue_description
from ticketpack.renderers.markdown import MarkdownRenderer

__all__ = ["IssueLinkBuilder", "MarkdownRenderer", "create_renderer", "ticket_issue_description"]
