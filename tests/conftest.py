"""Shared test fixtures."""

from typing import Sequence

import pytest
from typestub_gateway.domain.entities import FetchResult
from typestub_gateway.domain.exceptions import SourceFileNotFoundError
from typestub_gateway.interface.dependencies import build_projectors
from typestub_gateway.services.project_stubs import ProjectStubsUseCase

GO_SOURCE = """\
package models

type User struct {
	Name string
}

type Role int
"""


class FakeFetcher:
    """In-memory SourceFetcher keyed by URL; records every attempt."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files
        self.attempts: list[str] = []

    async def fetch_first_available(self, urls: Sequence[str]) -> FetchResult:
        for url in urls:
            self.attempts.append(url)
            if url in self.files:
                return FetchResult(url=url, content=self.files[url])
        raise SourceFileNotFoundError("File not found.")


@pytest.fixture
def fetcher() -> FakeFetcher:
    """Fetcher serving a Go file, a proto file and a broken Go file."""
    return FakeFetcher(
        {
            "https://github.com/alice/repo/main/raw/models/user.go": GO_SOURCE,
            "https://github.com/alice/repo/main/raw/api/service.proto": (
                'syntax = "proto3";\nmessage Ping {}\n'
            ),
            "https://github.com/alice/repo/main/raw/broken.go": "package x\ntype {",
        }
    )


@pytest.fixture
def use_case(fetcher: FakeFetcher) -> ProjectStubsUseCase:
    return ProjectStubsUseCase(source_fetcher=fetcher, projectors=build_projectors())

