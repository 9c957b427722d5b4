"""Sidebar layout of the documentation site."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SidebarGroup:
    label: str
    items: tuple[tuple[str, str], ...]  # (label, slug)


SIDEBAR: tuple[SidebarGroup, ...] = (
    SidebarGroup(
        "Core Patterns",
        (
            ("Testing & Testability", "testing"),
            ("Functions Over Classes", "functions"),
            ("Validation at the Boundary", "validation"),
            ("Typed Errors", "errors"),
            ("Composing Workflows", "workflows"),
            ("Observability with OpenTelemetry", "opentelemetry"),
            ("Resilience Patterns", "resilience"),
        ),
    ),
    SidebarGroup(
        "Enforcement",
        (
            ("Configuration at Startup", "configuration"),
            ("TypeScript Config", "typescript-config"),
            ("ESLint Rules", "eslint"),
        ),
    ),
    SidebarGroup(
        "Verification",
        (
            ("Performance Testing", "performance"),
            ("Conclusion", "conclusion"),
        ),
    ),
    SidebarGroup(
        "Bonus",
        (
            ("AI Coding Agents", "ai-agents"),
            ("React Architecture", "react"),
        ),
    ),
)


def sidebar_slugs(sidebar: tuple[SidebarGroup, ...] = SIDEBAR) -> Iterator[str]:
    """Yield every slug the sidebar links to, in display order."""
    for group in sidebar:
        for _label, slug in group.items:
            yield slug
