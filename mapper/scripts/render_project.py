#!/usr/bin/env python3
"""CLI script to render a project's workspace to a standalone HTML file.

Usage:
    python -m mapper.scripts.render_project <project_id> --output board.html

    # without a project id the placeholder graph is rendered
    python -m mapper.scripts.render_project --output demo.html
"""

import argparse
import asyncio
import html
import json
import logging
import sys
from pathlib import Path

from mapper.config import get_config
from mapper.gateway.http import HttpGateway
from mapper.render.surface import Surface
from mapper.workspace.session import WorkspaceSession

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"><title>{title}</title></head>
<body>
{board}
</body>
</html>
"""


def surface_to_dict(surface: Surface) -> dict:
    """Summarise a surface for JSON output."""
    return {
        "nodes": [element.node_id for element in surface.elements],
        "paths": [
            {"from": path.source, "to": path.target, "d": path.d}
            for path in surface.paths
        ],
        "skipped_links": surface.skipped_links,
    }


async def render(project_id: str | None, api_url: str, user_id: str | None) -> WorkspaceSession:
    config = get_config()
    gateway = HttpGateway(api_url, user_id=user_id, timeout=config.timeout)
    session = WorkspaceSession(project_id, gateway, config=config)
    await session.start()
    return session


def main():
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Render a workflow mapper project to HTML."
    )
    parser.add_argument(
        "project_id",
        nargs="?",
        default=None,
        help="project to load (omit to render the placeholder graph)",
    )
    parser.add_argument("--api-url", default=config.api_url, help="project server URL")
    parser.add_argument("--user", default=config.user_id, help="user id to load as")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="HTML file to write (defaults to stdout)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print a JSON summary of the rendered surface instead of HTML",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = asyncio.run(render(args.project_id, args.api_url, args.user))
    if args.project_id and session.is_placeholder:
        print(f"Warning: project {args.project_id} could not be loaded", file=sys.stderr)

    if args.json:
        print(json.dumps(surface_to_dict(session.surface), indent=2))
        return

    page = PAGE_TEMPLATE.format(title=html.escape(session.title), board=session.surface.to_html())
    if args.output is None:
        print(page)
    else:
        args.output.write_text(page)
        print(f"Wrote {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
