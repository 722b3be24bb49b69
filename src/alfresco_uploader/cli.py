"""Command-line interface for alfresco_uploader."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

import click

from alfresco_uploader import (
    AlfrescoClient,
    FolderError,
    RunConfig,
    SidecarIndex,
    UploadResult,
    UploadSummary,
    classify_paths,
    display_path,
    list_paths,
    upload_files,
)
from alfresco_uploader.config import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_SIDECAR_NAME,
    DEFAULT_TIMEOUT,
    env_var,
    load_env,
)

# Option values from a .env file pre-fill the prompts like command-line values
load_env()

SECRET_ARGS = {"xApiKey", "cookies"}


def get_client(config: RunConfig) -> AlfrescoClient:
    """Create the AlfrescoClient used for a run."""
    return AlfrescoClient(config)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _mask(args: dict[str, Any]) -> dict[str, Any]:
    return {
        key: ("***" if key in SECRET_ARGS and value else value)
        for key, value in args.items()
    }


def _ask(text: str, value: str | None, *, secret: bool = False) -> str:
    """Prompt for text, pre-filled with value when one was supplied."""
    return click.prompt(
        text,
        default=value or "",
        show_default=bool(value) and not secret,
        hide_input=secret,
    )


def collect_config(
    args: dict[str, Any],
    *,
    print_folder_ids: bool,
    max_concurrency: int,
    timeout: float,
) -> RunConfig:
    """Prompt for every run parameter, offering supplied values as defaults."""
    source = _ask("Path to source files", args.get("source"))
    ignore_file_name = _ask(
        "Metadata file name (not uploaded)",
        args.get("ignoreFileName") or DEFAULT_SIDECAR_NAME,
    )
    target = _ask(
        "Alfresco base url that is used to upload files and folders", args.get("target")
    )
    root_node_id = _ask("Alfresco root node ID", args.get("rootNodeId"))
    api_key = _ask("X-API-KEY", args.get("xApiKey"), secret=True)
    remote_user = _ask("OAM-REMOTE-USER", args.get("user"))
    cookies = _ask("Cookies used in requests calls", args.get("cookies"), secret=True)
    print_ids = click.confirm(
        "Print folder IDs after upload?", default=print_folder_ids
    )

    return RunConfig(
        source=source,
        ignore_file_name=ignore_file_name,
        target=target,
        root_node_id=root_node_id,
        api_key=api_key,
        remote_user=remote_user,
        cookies=cookies,
        print_folder_ids=print_ids,
        max_concurrency=max_concurrency,
        timeout=timeout,
    )


def _echo_result(result: UploadResult) -> None:
    if result.success:
        click.echo(click.style("✔ ", fg="bright_green") + result.file_name)
    else:
        click.echo(click.style("✘ ", fg="bright_red") + result.file_name, err=True)


def _echo_summary(summary: UploadSummary) -> None:
    click.echo(
        click.style(f"\n{summary.success_count} file(s) uploaded successfully", fg="green")
    )
    if summary.fail_count:
        click.echo(click.style(f"{summary.fail_count} file(s) failed", fg="red"), err=True)


async def _run(config: RunConfig, file_paths: list[str], sidecars: SidecarIndex) -> None:
    async with get_client(config) as client:
        summary = await upload_files(
            client,
            file_paths,
            sidecars,
            max_concurrency=config.max_concurrency,
            on_result=_echo_result,
        )
        _echo_summary(summary)

        if config.print_folder_ids:
            folders = await client.list_folders()
            if not folders:
                click.echo("(no folders under the root node)")
            for folder in folders:
                click.echo(f"  {folder.name}: {click.style(folder.id, fg='blue')}")


@click.command()
@click.version_option(package_name="alfresco-uploader")
@click.option("--source", envvar=env_var("source"), help="Path to the source directory")
@click.option(
    "--ignoreFileName",
    "--ignore-file-name",
    "ignore_file_name",
    envvar=env_var("ignore_file_name"),
    help=f"Sidecar metadata file name, never uploaded (default: {DEFAULT_SIDECAR_NAME})",
)
@click.option("--target", envvar=env_var("target"), help="Alfresco base URL")
@click.option(
    "--rootNodeId",
    "--root-node-id",
    "root_node_id",
    envvar=env_var("root_node_id"),
    help="Node ID to upload under",
)
@click.option(
    "--xApiKey", "--x-api-key", "api_key", envvar=env_var("api_key"), help="X-API-KEY header"
)
@click.option("--user", envvar=env_var("remote_user"), help="OAM-REMOTE-USER header")
@click.option("--cookies", envvar=env_var("cookies"), help="Cookie header")
@click.option(
    "--print-folder-ids/--no-print-folder-ids",
    default=False,
    help="List the root node's folders after uploading",
)
@click.option(
    "--max-concurrency",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_CONCURRENCY,
    envvar=env_var("max_concurrency"),
    show_default=True,
    help="Maximum number of uploads in flight",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds",
)
@click.option("--yes", "-y", is_flag=True, help="Upload without asking for confirmation")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    source: str | None,
    ignore_file_name: str | None,
    target: str | None,
    root_node_id: str | None,
    api_key: str | None,
    user: str | None,
    cookies: str | None,
    print_folder_ids: bool,
    max_concurrency: int,
    timeout: float,
    yes: bool,
    verbose: bool,
) -> None:
    """Upload a directory tree to Alfresco.

    Every option pre-fills the matching prompt; the answer given at the
    prompt is what is used. Files named like the metadata file are not
    uploaded; their "files" entries supply titles and descriptions.

    Examples:

        alfresco-upload --source ./photos --target https://alfresco.example.com

        alfresco-upload --source ./docs --rootNodeId 1a2b3c --print-folder-ids
    """
    _configure_logging(verbose)

    args = {
        "source": source,
        "ignoreFileName": ignore_file_name,
        "target": target,
        "rootNodeId": root_node_id,
        "xApiKey": api_key,
        "user": user,
        "cookies": cookies,
    }
    click.echo(f"Parsed args: {_mask(args)}")

    config = collect_config(
        args,
        print_folder_ids=print_folder_ids,
        max_concurrency=max_concurrency,
        timeout=timeout,
    )

    try:
        paths = list_paths(config.source)
        if not paths:
            click.echo(f"Nothing to upload under {config.source!r}")
            return
        for path in paths:
            click.echo(click.style(f"  {display_path(path)}", fg="magenta"))

        if not yes:
            click.confirm(
                "Uploading files and directories above to Alfresco. Confirm?",
                default=True,
                abort=True,
            )

        classification = classify_paths(paths, config.ignore_file_name)
    except OSError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    sidecars = SidecarIndex(classification.metadata_file_paths, config.ignore_file_name)
    try:
        asyncio.run(_run(config, classification.file_paths, sidecars))
    except FolderError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
