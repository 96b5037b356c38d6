"""The ``object-storage`` command group.

Commands:
    - list: Retrieve all active object storages
    - get: Retrieve a given object storage
    - create: Create a new object storage
    - label: Change the label for object storage
    - delete (alias destroy): Delete an object storage
    - regenerate-keys: Regenerate the S3 API keys for an object storage
    - list-clusters: Retrieve all available object storage clusters
    - list-cluster-tiers: Retrieve the tiers available on one cluster
    - list-tiers: Retrieve all available object storage tiers

Arguments and flags are validated before the API is called. Errors are
printed to stderr as ``Error: <message>`` and exit with status 1.
"""

import re
from typing import NoReturn, Optional

import typer

from vultr_tools import printer
from vultr_tools.cli_params import (
    ClusterIdArgument,
    ClusterIdOption,
    CursorOption,
    LabelOption,
    ObjectStorageIdArgument,
    PerPageOption,
    RequiredLabelOption,
    TierIdOption,
)
from vultr_tools.cli_state import CLIState
from vultr_tools.core.config import settings
from vultr_tools.core.exceptions import ValidationError, VultrToolsError
from vultr_tools.schemas import ListOptions

from .operations import (
    DEFAULT_TIER_ID,
    create_object_storage,
    delete_object_storage,
    get_object_storage,
    list_cluster_tiers,
    list_clusters,
    list_object_storages,
    list_tiers,
    regenerate_object_storage_keys,
    update_object_storage_label,
)

object_storage_app = typer.Typer(
    name="object-storage",
    help="Commands to manage object storage",
    no_args_is_help=True,
)


def _state(ctx: typer.Context) -> CLIState:
    return ctx.ensure_object(CLIState)


def _fail(error: VultrToolsError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _require_id(object_storage_id: Optional[str]) -> str:
    if not object_storage_id:
        raise ValidationError("please provide an object storage ID")
    return object_storage_id


def _parse_cluster_id(cluster_id: Optional[str]) -> int:
    if not cluster_id:
        raise ValidationError("please provide a Cluster ID")
    if not re.fullmatch(r"[+-]?[0-9]+", cluster_id):
        raise ValidationError(f"invalid clusterID: {cluster_id!r} is not an integer")
    return int(cluster_id)


def _paging(cursor: Optional[str], per_page: int) -> ListOptions:
    return ListOptions(cursor=cursor or None, per_page=per_page)


@object_storage_app.command("list")
def list_cmd(
    ctx: typer.Context,
    cursor: CursorOption = None,
    per_page: PerPageOption = settings.per_page_default,
) -> None:
    """Retrieve all active object storages."""
    state = _state(ctx)
    try:
        storages, meta = list_object_storages(state.client, _paging(cursor, per_page))
        printer.display_object_storages(storages, meta, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("get")
def get_cmd(
    ctx: typer.Context,
    object_storage_id: ObjectStorageIdArgument = None,
) -> None:
    """Retrieve a given object storage."""
    state = _state(ctx)
    try:
        object_storage_id = _require_id(object_storage_id)
        storage = get_object_storage(state.client, object_storage_id)
        printer.display_object_storage(storage, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("create")
def create_cmd(
    ctx: typer.Context,
    cluster_id: ClusterIdOption,
    label: LabelOption = None,
    tier_id: TierIdOption = DEFAULT_TIER_ID,
) -> None:
    """
    Create a new object storage.

    Examples:
        vultr-tools object-storage create --cluster-id 2 --label my-bucket
        vultr-tools object-storage create -i 2 -l my-bucket -t 3
    """
    state = _state(ctx)
    try:
        storage = create_object_storage(
            state.client,
            cluster_id=cluster_id,
            label=label,
            tier_id=tier_id,
        )
        printer.display_object_storage(storage, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("label")
def label_cmd(
    ctx: typer.Context,
    label: RequiredLabelOption,
    object_storage_id: ObjectStorageIdArgument = None,
) -> None:
    """Change the label for object storage."""
    state = _state(ctx)
    try:
        object_storage_id = _require_id(object_storage_id)
        update_object_storage_label(state.client, object_storage_id, label)
        printer.display_info("object storage label has been set", state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("delete")
def delete_cmd(
    ctx: typer.Context,
    object_storage_id: ObjectStorageIdArgument = None,
) -> None:
    """Delete an object storage."""
    state = _state(ctx)
    try:
        object_storage_id = _require_id(object_storage_id)
        delete_object_storage(state.client, object_storage_id)
        printer.display_info("object storage has been deleted", state.output)
    except VultrToolsError as e:
        _fail(e)


object_storage_app.command("destroy", hidden=True)(delete_cmd)


@object_storage_app.command("regenerate-keys")
def regenerate_keys_cmd(
    ctx: typer.Context,
    object_storage_id: ObjectStorageIdArgument = None,
) -> None:
    """Regenerate the S3 API keys for an object storage."""
    state = _state(ctx)
    try:
        object_storage_id = _require_id(object_storage_id)
        keys = regenerate_object_storage_keys(state.client, object_storage_id)
        printer.display_keys(keys, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("list-clusters")
def list_clusters_cmd(
    ctx: typer.Context,
    cursor: CursorOption = None,
    per_page: PerPageOption = settings.per_page_default,
) -> None:
    """Retrieve a list of all available object storage clusters."""
    state = _state(ctx)
    try:
        clusters, meta = list_clusters(state.client, _paging(cursor, per_page))
        printer.display_clusters(clusters, meta, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("list-cluster-tiers")
def list_cluster_tiers_cmd(
    ctx: typer.Context,
    cluster_id: ClusterIdArgument = None,
) -> None:
    """Retrieve a list of all available object storage tiers on a specific cluster."""
    state = _state(ctx)
    try:
        parsed_id = _parse_cluster_id(cluster_id)
        tiers = list_cluster_tiers(state.client, parsed_id)
        printer.display_tiers(tiers, state.output)
    except VultrToolsError as e:
        _fail(e)


@object_storage_app.command("list-tiers")
def list_tiers_cmd(
    ctx: typer.Context,
    cursor: CursorOption = None,
    per_page: PerPageOption = settings.per_page_default,
) -> None:
    """Retrieve a list of all available object storage tiers."""
    state = _state(ctx)
    try:
        tiers = list_tiers(state.client, _paging(cursor, per_page))
        printer.display_tiers(tiers, state.output)
    except VultrToolsError as e:
        _fail(e)
