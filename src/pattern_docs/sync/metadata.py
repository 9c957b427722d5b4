"""Hand-maintained page metadata for the synced pattern articles.

The table is the single place where page titles and descriptions live. It
has to list every slug the source directory produces; a slug without an
entry aborts the sync instead of publishing an unlabeled page.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pattern_docs.sync.exceptions import MissingMetadataError


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """Title and description rendered into a page's frontmatter."""

    title: str
    description: str


PATTERN_METADATA: Mapping[str, PageMetadata] = MappingProxyType(
    {
        "testing": PageMetadata(
            title="Why This Pattern Exists",
            description=(
                "Learn why testability drives design and how explicit dependency injection "
                "makes testing simpler than vi.mock."
            ),
        ),
        "functions": PageMetadata(
            title="Functions Over Classes",
            description=(
                "Learn the fn(args, deps) pattern for explicit dependency injection, "
                "making your code testable and composable."
            ),
        ),
        "validation": PageMetadata(
            title="Validation at the Boundary",
            description=(
                "Use Zod schemas to validate input at the edges of your system, "
                "keeping business functions focused on logic."
            ),
        ),
        "errors": PageMetadata(
            title="Typed Errors",
            description=(
                "Make failure explicit with Result types instead of throwing exceptions. "
                "Composable error handling with railway-oriented programming."
            ),
        ),
        "opentelemetry": PageMetadata(
            title="Functions + OpenTelemetry",
            description=(
                "Add observability to your functions without cluttering business logic. "
                "Distributed tracing with the trace() wrapper pattern."
            ),
        ),
        "resilience": PageMetadata(
            title="Resilience Patterns",
            description=(
                "Add retries, timeouts, and circuit breakers to handle transient failures "
                "without cluttering your business logic."
            ),
        ),
        "configuration": PageMetadata(
            title="Configuration at the Boundary",
            description=(
                "Validate and type configuration at startup. "
                "Handle secrets securely with secret managers."
            ),
        ),
        "typescript-config": PageMetadata(
            title="Enforcing Patterns with TypeScript",
            description=(
                "Use strict TypeScript compiler flags to enforce patterns at compile time. "
                "Beyond strict mode with noUncheckedIndexedAccess."
            ),
        ),
        "eslint": PageMetadata(
            title="Enforcing Patterns with ESLint",
            description=(
                "Use ESLint rules to enforce architectural boundaries, function signatures, "
                "and import patterns at lint time."
            ),
        ),
        "performance": PageMetadata(
            title="Performance Testing",
            description=(
                "Use load tests to find bottlenecks and chaos tests to verify resilience "
                "patterns work under pressure."
            ),
        ),
        "conclusion": PageMetadata(
            title="What We've Built",
            description=(
                "A complete architecture for TypeScript applications with testability, "
                "observability, and enforcement built in."
            ),
        ),
    }
)


def lookup_metadata(
    slug: str,
    table: Mapping[str, PageMetadata] = PATTERN_METADATA,
    *,
    source: str | None = None,
) -> PageMetadata:
    """Return the metadata for ``slug``.

    Raises:
        MissingMetadataError: If the table has no entry for the slug.

    """
    try:
        return table[slug]
    except KeyError:
        raise MissingMetadataError(slug, source) from None
