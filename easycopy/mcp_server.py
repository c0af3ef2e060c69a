#!/usr/bin/env python3
"""
MCP server for easycopy - flattens repositories into CXML text for LLM context
"""

import asyncio
import logging
import pathlib
import shutil
import sys
import tempfile
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    GetPromptResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    TextContent,
    Tool,
)

from .classifier import MAX_DEFAULT_BYTES, collect_files, summarize
from .document import generate_cxml_text, load_documents
from .git_ops import acquire, short_revision

logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)

PROMPT_NAME = "easycopy-flatten-repo"

server = Server("easycopy-mcp")


def flatten_to_cxml(repo_url: str, ref: Optional[str] = None, max_bytes: int = MAX_DEFAULT_BYTES) -> str:
    """Acquire ``repo_url`` and return a header line followed by its CXML dump."""
    tmpdir = tempfile.mkdtemp(prefix="easycopy_mcp_")
    try:
        logger.info(f"Preparing {repo_url}")
        tree = acquire(repo_url, pathlib.Path(tmpdir), ref=ref)
        logger.info(f"Source ready (HEAD: {short_revision(tree.revision)})")

        infos = collect_files(tree.root, max_bytes)
        s = summarize(infos)
        logger.info(f"Found {s.total} files total ({s.rendered} will be rendered, {s.skipped} skipped)")

        cxml_text = generate_cxml_text(load_documents(infos))
        return f"Repository {tree.display} (commit: {short_revision(tree.revision)}) flattened into CXML format:\n\n{cxml_text}"
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@server.list_prompts()
async def list_prompts() -> List[Prompt]:
    return [
        Prompt(
            name=PROMPT_NAME,
            description="Flatten a repository into text format for LLM context",
            arguments=[
                PromptArgument(
                    name="repo_url",
                    description="Git repository URL or local directory to flatten",
                    required=True,
                )
            ],
        )
    ]


@server.get_prompt()
async def get_prompt(name: str, arguments: Dict[str, str] | None) -> GetPromptResult:
    if name != PROMPT_NAME:
        raise ValueError(f"Unknown prompt: {name}")
    if not arguments or "repo_url" not in arguments:
        raise ValueError("Missing required argument: repo_url")

    repo_url = arguments["repo_url"]
    text = await asyncio.to_thread(flatten_to_cxml, repo_url)
    return GetPromptResult(
        description=f"Flattened repository {repo_url}",
        messages=[PromptMessage(role="user", content=TextContent(type="text", text=text))],
    )


@server.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(
            name="flatten_repo",
            description="Flatten a repository into CXML text for LLM context",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo_url": {
                        "type": "string",
                        "description": "Git repository URL or local directory to flatten",
                    },
                    "ref": {
                        "type": "string",
                        "description": "Branch, tag or commit to check out",
                    },
                    "max_bytes": {
                        "type": "integer",
                        "description": f"Max file size to include (default {MAX_DEFAULT_BYTES})",
                    },
                },
                "required": ["repo_url"],
            },
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    if name != "flatten_repo":
        raise ValueError(f"Unknown tool: {name}")
    if "repo_url" not in arguments:
        raise ValueError("Missing required argument: repo_url")

    repo_url = arguments["repo_url"]
    logger.info(f"Processing repository with tool: {repo_url}")
    try:
        text = await asyncio.to_thread(
            flatten_to_cxml,
            repo_url,
            ref=arguments.get("ref"),
            max_bytes=arguments.get("max_bytes", MAX_DEFAULT_BYTES),
        )
    except Exception as e:
        logger.error(f"Error processing repository: {e}")
        raise
    return [TextContent(type="text", text=text)]


async def serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    asyncio.run(serve())


if __name__ == "__main__":
    main()
