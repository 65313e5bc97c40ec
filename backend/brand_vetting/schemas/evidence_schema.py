from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field


def extract_host(url: str) -> Optional[str]:
    """Return the hostname of *url*, or None if it cannot be parsed."""
    if not url:
        return None
    try:
        host = urlparse(url).hostname
    except ValueError:
        return None
    return host or None


class EvidenceItem(BaseModel):
    """One retrieved search snippet.

    Transient: lives only for the duration of one vetting request.
    """

    title: str = Field(default="", description="Result title")
    snippet: str = Field(default="", description="Free-text result snippet")
    source_url: str = Field(default="", description="Link the snippet came from")

    @property
    def source_host(self) -> Optional[str]:
        return extract_host(self.source_url)


class EvidenceBundle(BaseModel):
    """All evidence gathered for one brand query plus derived aggregates.

    ``text`` concatenates every title and snippet (each followed by a
    space), ``item_count`` counts returned items without de-duplication and
    ``source_hosts`` lists distinct hostnames in first-seen order.
    """

    brand_name: str
    queries: list[str] = Field(default_factory=list)
    items: list[EvidenceItem] = Field(default_factory=list)
    failed_queries: list[str] = Field(
        default_factory=list,
        description="Queries dropped because the evidence source failed",
    )

    @property
    def text(self) -> str:
        parts: list[str] = []
        for item in self.items:
            if item.title:
                parts.append(item.title + " ")
            if item.snippet:
                parts.append(item.snippet + " ")
        return "".join(parts)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def source_hosts(self) -> list[str]:
        hosts: list[str] = []
        seen: set[str] = set()
        for item in self.items:
            host = item.source_host
            if host and host not in seen:
                seen.add(host)
                hosts.append(host)
        return hosts
