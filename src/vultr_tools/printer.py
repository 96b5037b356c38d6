"""Output formatting for command results.

Results are printed either as aligned text tables or as JSON. JSON output
mirrors the API response envelope and contains only the fields the API sent.
"""

import json
from typing import Any, Literal, Optional, Sequence

import typer

from vultr_tools.schemas import (
    Meta,
    ObjectStorage,
    ObjectStorageCluster,
    ObjectStorageTier,
    S3Keys,
)

OutputFormat = Literal["text", "json"]

SEPARATOR = "======================================"

STORAGE_HEADERS = [
    "ID",
    "REGION",
    "OBJSTORECLUSTERID",
    "STATUS",
    "LABEL",
    "DATE CREATED",
    "S3 HOSTNAME",
    "S3 ACCESS KEY",
    "S3 SECRET KEY",
]
KEY_HEADERS = ["S3 HOSTNAME", "S3 ACCESS KEY", "S3 SECRET KEY"]
CLUSTER_HEADERS = ["ID", "REGION", "HOSTNAME", "DEPLOY"]
TIER_HEADERS = [
    "ID",
    "SALES NAME",
    "SALES DESC",
    "PRICE",
    "BW GB PRICE",
    "DISK GB PRICE",
    "IS DEFAULT",
    "RATELIMIT OPS SECS",
    "RATELIMIT OPS BYTES",
    "LOCATIONS",
]
META_HEADERS = ["TOTAL", "NEXT PAGE", "PREV PAGE"]


def render_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    """Render rows as left-aligned columns under the given headers."""
    if not rows:
        rows = [["---"] * len(headers)]

    cells = [[str(h) for h in headers]] + [[_cell(v) for v in row] for row in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(headers))]

    lines = []
    for row in cells:
        line = "  ".join(value.ljust(width) for value, width in zip(row, widths))
        lines.append(line.rstrip())
    return "\n".join(lines)


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "---"
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _storage_row(storage: ObjectStorage) -> list[Any]:
    return [
        storage.id,
        storage.region,
        storage.cluster_id,
        storage.status,
        storage.label,
        storage.date_created,
        storage.s3_hostname,
        storage.s3_access_key,
        storage.s3_secret_key,
    ]


def _tier_row(tier: ObjectStorageTier) -> list[Any]:
    locations = ", ".join(loc.region or str(loc.id) for loc in tier.locations)
    return [
        tier.id,
        tier.sales_name,
        tier.sales_desc,
        tier.price,
        tier.bw_gb_price,
        tier.disk_gb_price,
        tier.is_default,
        tier.ratelimit_ops_secs,
        tier.ratelimit_ops_bytes,
        locations,
    ]


def _meta_table(meta: Optional[Meta]) -> str:
    meta = meta or Meta()
    return render_table(META_HEADERS, [[meta.total, meta.links.next, meta.links.prev]])


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


def display_object_storages(
    storages: list[ObjectStorage], meta: Optional[Meta], output: OutputFormat = "text"
) -> None:
    """Print a page of object storage subscriptions."""
    if output == "json":
        _echo_json(
            {
                "object_storages": [s.to_dict() for s in storages],
                "meta": meta.to_dict() if meta else {},
            }
        )
        return

    typer.echo(render_table(STORAGE_HEADERS, [_storage_row(s) for s in storages]))
    typer.echo(SEPARATOR)
    typer.echo(_meta_table(meta))


def display_object_storage(storage: ObjectStorage, output: OutputFormat = "text") -> None:
    """Print one object storage subscription."""
    if output == "json":
        _echo_json({"object_storage": storage.to_dict()})
        return

    typer.echo(render_table(STORAGE_HEADERS, [_storage_row(storage)]))


def display_keys(keys: S3Keys, output: OutputFormat = "text") -> None:
    """Print an S3 credential pair."""
    if output == "json":
        _echo_json({"s3_credentials": keys.to_dict()})
        return

    typer.echo(
        render_table(
            KEY_HEADERS, [[keys.s3_hostname, keys.s3_access_key, keys.s3_secret_key]]
        )
    )


def display_clusters(
    clusters: list[ObjectStorageCluster],
    meta: Optional[Meta],
    output: OutputFormat = "text",
) -> None:
    """Print a page of object storage clusters."""
    if output == "json":
        _echo_json(
            {
                "clusters": [c.to_dict() for c in clusters],
                "meta": meta.to_dict() if meta else {},
            }
        )
        return

    rows = [[c.id, c.region, c.hostname, c.deploy] for c in clusters]
    typer.echo(render_table(CLUSTER_HEADERS, rows))
    typer.echo(SEPARATOR)
    typer.echo(_meta_table(meta))


def display_tiers(tiers: list[ObjectStorageTier], output: OutputFormat = "text") -> None:
    """Print object storage tiers."""
    if output == "json":
        _echo_json({"tiers": [t.to_dict() for t in tiers]})
        return

    typer.echo(render_table(TIER_HEADERS, [_tier_row(t) for t in tiers]))


def display_info(message: str, output: OutputFormat = "text") -> None:
    """Print a confirmation message."""
    if output == "json":
        _echo_json({"message": message})
        return

    typer.echo(message)
