"""Tests for the project-stubs use case."""

import pytest
from typestub_gateway.domain.exceptions import (
    MalformedPathError,
    ParseFailureError,
    SourceFileNotFoundError,
    UnsupportedDialectError,
)
from typestub_gateway.services.project_stubs import ProjectStubsUseCase


class TestExecute:
    """Tests for ProjectStubsUseCase.execute()."""

    @pytest.mark.asyncio
    async def test_projects_go_file(self, use_case: ProjectStubsUseCase) -> None:
        """Resolve, fetch the .go candidate and render its types."""
        document = await use_case.execute("alice/repo/main/models/user")

        assert document.text == "export interface User {}\nexport interface Role {}\n"
        assert document.source_url == "https://github.com/alice/repo/main/raw/models/user.go"
        assert document.target_extension == ".ts"
        assert document.media_type == "application/typescript"

    @pytest.mark.asyncio
    async def test_go_candidate_stops_the_search(self, use_case, fetcher) -> None:
        """The .proto candidate is never tried once .go answers."""
        await use_case.execute("alice/repo/main/models/user.ts")

        assert fetcher.attempts == ["https://github.com/alice/repo/main/raw/models/user.go"]

    @pytest.mark.asyncio
    async def test_malformed_path(self, use_case, fetcher) -> None:
        with pytest.raises(MalformedPathError):
            await use_case.execute("alice/repo")

        assert fetcher.attempts == []

    @pytest.mark.asyncio
    async def test_not_found(self, use_case, fetcher) -> None:
        """Every candidate is tried once before giving up."""
        with pytest.raises(SourceFileNotFoundError):
            await use_case.execute("alice/repo/main/missing")

        assert len(fetcher.attempts) == 2

    @pytest.mark.asyncio
    async def test_proto_has_no_projector(self, use_case) -> None:
        """A file only found as .proto is rejected explicitly."""
        with pytest.raises(UnsupportedDialectError, match=r"service\.proto"):
            await use_case.execute("alice/repo/main/api/service")

    @pytest.mark.asyncio
    async def test_parse_failure_is_recoverable(self, use_case) -> None:
        with pytest.raises(ParseFailureError, match=r"broken\.go"):
            await use_case.execute("alice/repo/main/broken")

    @pytest.mark.asyncio
    async def test_custom_host(self, fetcher) -> None:
        """Candidate URLs follow the configured host."""
        use_case = ProjectStubsUseCase(
            source_fetcher=fetcher,
            projectors={},
            host="https://mirror.example.com",
        )

        with pytest.raises(SourceFileNotFoundError):
            await use_case.execute("alice/repo/main/models/user")

        assert fetcher.attempts[0] == "https://mirror.example.com/alice/repo/main/raw/models/user.go"
