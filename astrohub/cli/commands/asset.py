"""Asset commands."""

import sys
from pathlib import Path

import cyclopts

from astrohub.cli.console import get_console
from astrohub.cli.util import run
from astrohub.client import AstroHubClient
from astrohub.domain.catalog.model.payload import MissionRef, UploadFile
from astrohub.domain.upload.model.state import UploadPhase, UploadState

app = cyclopts.App(name="asset", help="Manage mission assets")

COLUMNS = [
    ("id", "ID"),
    ("original_name", "Name"),
    ("content_type", "Type"),
    ("size", "Size"),
    ("uploaded_at", "Uploaded"),
]


def format_size(size: int) -> str:
    """Render a byte count with a binary unit (e.g. '1.5 KiB')."""
    value = float(size)
    for unit in ("B", "KiB", "MiB", "GiB"):
        if value < 1024 or unit == "GiB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


@app.command(name="list")
def list_assets(organization: str, project: str, mission: str, /) -> None:
    """List assets uploaded to a mission.

    Args:
        organization: Organization key.
        project: Project key.
        mission: Mission key.
    """
    assets = run(lambda client: client.assets.list(organization, project, mission))
    console = get_console()
    if not assets:
        console.info("No assets uploaded yet")
        return
    rows = [{**a.model_dump(), "size": format_size(a.size)} for a in assets]
    console.table(rows, COLUMNS, title=f"Assets in {organization}/{project}/{mission}")


@app.command
def show(organization: str, project: str, mission: str, asset_id: str, /) -> None:
    """Show an asset.

    Args:
        organization: Organization key.
        project: Project key.
        mission: Mission key.
        asset_id: Asset ID.
    """
    asset = run(lambda client: client.assets.get(organization, project, mission, asset_id))
    get_console().fields(
        {
            "Type": asset.content_type,
            "Size": format_size(asset.size),
            "Uploaded": asset.uploaded_at,
            "Path": asset.path,
            "Direct URL": asset.direct_url,
            "Thumbnail": asset.thumbnail_url,
        },
        title=asset.original_name,
        subtitle=f"[dim]{asset.id}[/dim]",
    )


@app.command
def upload(organization: str, project: str, mission: str, /, *files: Path) -> None:
    """Upload files to a mission, one after another.

    Stops at the first failing file; files uploaded before it are kept.

    Args:
        organization: Organization key.
        project: Project key.
        mission: Mission key.
        files: Files to upload, in order.
    """
    console = get_console()
    missing = [f for f in files if not f.is_file()]
    if missing:
        console.error(f"File not found: {missing[0]}")
        sys.exit(1)

    ref = MissionRef(organization=organization, project=project, mission=mission)
    batch = [UploadFile.from_path(f) for f in files]

    with console.progress() as progress:
        bar = progress.add_task("Uploading", total=100)

        def on_progress(state: UploadState) -> None:
            description = "Failed" if state.phase == UploadPhase.FAILED else "Uploading"
            progress.update(
                bar,
                completed=state.percent,
                description=f"{description} ({state.completed}/{state.total})",
            )

        result = run(lambda client: client.uploads.upload_batch(ref, batch, on_progress))

    noun = "asset" if result.count == 1 else "assets"
    console.success(f"{result.count} {noun} uploaded successfully")


@app.command
def thumbnail(organization: str, project: str, mission: str, asset_id: str, /) -> None:
    """Print the thumbnail URL of an asset.

    Args:
        organization: Organization key.
        project: Project key.
        mission: Mission key.
        asset_id: Asset ID.
    """

    async def _url(client: AstroHubClient) -> str:
        return client.assets.thumbnail_url(organization, project, mission, asset_id)

    get_console().print(run(_url))
