from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(slots=True)
class RenderedPage:
    url: str
    html: str

    def document(self) -> BeautifulSoup:
        return BeautifulSoup(self.html, "html.parser")
