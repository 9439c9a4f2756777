"""Utility functions for the workflow mapper."""

from mapper.utils.identifiers import (
    generate_link_id,
    generate_node_id,
    generate_project_id,
    utc_timestamp,
)

__all__ = [
    "generate_link_id",
    "generate_node_id",
    "generate_project_id",
    "utc_timestamp",
]
