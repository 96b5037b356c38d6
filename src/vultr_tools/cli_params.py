"""Shared CLI parameter definitions.

This module provides reusable parameter definitions for the CLI interface so
that flags shared by several commands (paging, labels, IDs) keep the same
names, short forms, types and help text everywhere.

Each definition is a ready-made ``Annotated`` type that can be used directly
in a command signature:

    @app.command()
    def my_command(
        cursor: CursorOption = None,
        per_page: PerPageOption = settings.per_page_default,
    ):
        pass

Parameter Categories:
    - Global parameters: output format and API key
    - Paging parameters: cursor and page size for list commands
    - Object storage parameters: IDs, labels, cluster and tier
"""

from typing import Annotated, Literal, Optional

import typer

from vultr_tools.core.config import settings

PER_PAGE_MAX = 500

# Global
OutputOption = Annotated[
    Literal["text", "json"],
    typer.Option(
        "--output",
        "-o",
        help="Output format: text or json",
        case_sensitive=False,
    ),
]

ApiKeyOption = Annotated[
    Optional[str],
    typer.Option(
        "--api-key",
        help="Vultr API key (defaults to the VULTR_API_KEY environment variable)",
        show_default=False,
    ),
]

# Paging
CursorOption = Annotated[
    Optional[str],
    typer.Option("--cursor", "-c", help="(optional) Cursor for paging."),
]

PerPageOption = Annotated[
    int,
    typer.Option(
        "--per-page",
        "-p",
        min=1,
        max=PER_PAGE_MAX,
        help=(
            "(optional) Number of items requested per page. "
            f"Default is {settings.per_page_default} and Max is {PER_PAGE_MAX}."
        ),
    ),
]

# Object storage
ObjectStorageIdArgument = Annotated[
    Optional[str],
    typer.Argument(help="Object Storage ID", show_default=False),
]

ClusterIdArgument = Annotated[
    Optional[str],
    typer.Argument(help="Cluster ID", show_default=False),
]

LabelOption = Annotated[
    Optional[str],
    typer.Option("--label", "-l", help="label you want your object storage to have"),
]

RequiredLabelOption = Annotated[
    str,
    typer.Option("--label", "-l", help="label you want your object storage to have"),
]

ClusterIdOption = Annotated[
    int,
    typer.Option(
        "--cluster-id",
        "-i",
        help="ID of the cluster in which to create the object storage",
    ),
]

TierIdOption = Annotated[
    int,
    typer.Option(
        "--tier-id", "-t", help="Tier ID used to create the object storage tiers"
    ),
]
