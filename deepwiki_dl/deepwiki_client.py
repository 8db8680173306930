# deepwiki_dl/deepwiki_client.py

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Iterable, Optional

from mcp import ClientSession, types
from mcp.client.streamable_http import streamablehttp_client

from deepwiki_dl.config.settings import Settings

logger = logging.getLogger(__name__)

READ_WIKI_STRUCTURE = "read_wiki_structure"
READ_WIKI_CONTENTS = "read_wiki_contents"


@dataclass
class DeepWikiClientConfig:
    """
    Configuration for talking to the DeepWiki MCP server.
    """

    server_url: str
    timeout: float = 30.0
    sse_read_timeout: float = 300.0
    client_name: str = "deepwiki-dl"
    client_version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> "DeepWikiClientConfig":
        """
        Build configuration from DEEPWIKI_DL_* environment variables
        (and .env), falling back to the Settings defaults.
        """
        current = Settings()
        return cls(
            server_url=current.MCP_SERVER_URL.rstrip("/"),
            timeout=current.REQUEST_TIMEOUT,
            sse_read_timeout=current.SSE_READ_TIMEOUT,
            client_name=current.CLIENT_NAME,
            client_version=current.CLIENT_VERSION,
        )


class DeepWikiClientError(RuntimeError):
    """
    Error raised when a DeepWiki tool call fails.
    """

    def __init__(
        self,
        message: str,
        *,
        tool: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.tool = tool
        self.url = url


def _extract_text(content: Iterable[Any]) -> str:
    """
    Join the text parts of a tool result with newlines; other parts
    (images, resources) are ignored.
    """
    return "\n".join(
        getattr(part, "text", None) or ""
        for part in content
        if getattr(part, "type", None) == "text"
    )


def _root_cause(exc: BaseException) -> BaseException:
    # anyio wraps transport failures in (possibly nested) exception groups.
    while getattr(exc, "exceptions", None):
        exc = exc.exceptions[0]  # type: ignore[attr-defined]
    return exc


class DeepWikiClient:
    """
    Blocking client for the two DeepWiki tools used to download a wiki.

    Methods:
        - read_wiki_structure(repo_name) -> str
        - read_wiki_contents(repo_name) -> str
        - call_tool(name, repo_name) -> str

    Each call opens its own MCP session; calls are made one after the other.
    """

    def __init__(
        self,
        config: Optional[DeepWikiClientConfig] = None,
        *,
        server_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if config is None:
            config = DeepWikiClientConfig.from_env()

        if server_url is not None:
            config.server_url = server_url.rstrip("/")
        if timeout is not None:
            config.timeout = timeout

        self.config = config
        self.server_url: str = config.server_url

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------
    def read_wiki_structure(self, repo_name: str) -> str:
        return self.call_tool(READ_WIKI_STRUCTURE, repo_name)

    def read_wiki_contents(self, repo_name: str) -> str:
        return self.call_tool(READ_WIKI_CONTENTS, repo_name)

    def call_tool(self, name: str, repo_name: str) -> str:
        """
        Call a DeepWiki tool for ``owner/repo`` and return its text output.

        Note that DeepWiki reports unknown repositories as ordinary text
        content, not as a failed call; callers have to inspect the text.
        """
        arguments: Dict[str, Any] = {"repoName": repo_name}
        logger.debug("Calling %s(%s) on %s", name, repo_name, self.server_url)

        try:
            result = asyncio.run(self._call_tool_async(name, arguments))
        except Exception as exc:
            cause = _root_cause(exc)
            raise DeepWikiClientError(
                f"Error calling {name} on {self.server_url}: {cause}",
                tool=name,
                url=self.server_url,
            ) from exc

        text = _extract_text(result.content)

        if result.isError:
            raise DeepWikiClientError(
                f"DeepWiki tool {name} failed: {text.strip() or 'no details returned'}",
                tool=name,
                url=self.server_url,
            )

        return text

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    async def _call_tool_async(
        self,
        name: str,
        arguments: Dict[str, Any],
    ) -> types.CallToolResult:
        async with streamablehttp_client(
            self.server_url,
            timeout=timedelta(seconds=self.config.timeout),
            sse_read_timeout=timedelta(seconds=self.config.sse_read_timeout),
        ) as (read_stream, write_stream, _get_session_id):
            async with ClientSession(
                read_stream,
                write_stream,
                client_info=types.Implementation(
                    name=self.config.client_name,
                    version=self.config.client_version,
                ),
            ) as session:
                await session.initialize()
                return await session.call_tool(name, arguments)
