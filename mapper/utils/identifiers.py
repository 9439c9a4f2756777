"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timezone


def generate_project_id() -> str:
    """Generate a project ID (``proj-`` + 12-char hex string)."""
    return "proj-" + uuid.uuid4().hex[:12]


def generate_node_id() -> str:
    """Generate a node ID (``node`` + 7-char hex string)."""
    return "node" + uuid.uuid4().hex[:7]


def generate_link_id() -> str:
    """Generate a link ID (``link`` + 7-char hex string)."""
    return "link" + uuid.uuid4().hex[:7]


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
