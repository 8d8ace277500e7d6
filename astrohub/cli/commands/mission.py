"""Mission commands."""

import cyclopts

from astrohub.cli.console import get_console
from astrohub.cli.util import run
from astrohub.domain.catalog.model.entity import Mission, MissionMetadata
from astrohub.domain.catalog.model.payload import (
    CreateMissionPayload,
    MissionMetadataPatch,
    MissionPatch,
)

app = cyclopts.App(name="mission", help="Manage observation missions")

COLUMNS = [
    ("key", "Key"),
    ("name", "Name"),
    ("mission", "Mission"),
    ("location", "Location"),
    ("date", "Date"),
]


def show_mission(organization: str, project: str, mission: Mission) -> None:
    values = {
        "Name": mission.name,
        "Mission": mission.mission,
        "Location": mission.location,
        "Date": mission.date,
    }
    values.update(
        {
            key.replace("_", " ").capitalize(): value
            for key, value in mission.metadata.model_dump().items()
        }
    )
    get_console().fields(
        values,
        title=f"{organization}/{project}/{mission.key}",
        subtitle=f"[dim]{mission.id}[/dim]",
    )


@app.command(name="list")
def list_missions(organization: str, project: str, /) -> None:
    """List missions of a project.

    Args:
        organization: Organization key.
        project: Project key.
    """
    missions = run(lambda client: client.missions.list(organization, project))
    console = get_console()
    if not missions:
        console.info(f"No missions found in '{organization}/{project}'")
        return
    console.table(
        [m.model_dump() for m in missions],
        COLUMNS,
        title=f"Missions in {organization}/{project}",
    )


@app.command
def show(organization: str, project: str, key: str, /) -> None:
    """Show a mission and its observation metadata.

    Args:
        organization: Organization key.
        project: Project key.
        key: Mission key.
    """
    mission = run(lambda client: client.missions.get(organization, project, key))
    show_mission(organization, project, mission)


@app.command
def create(
    organization: str,
    project: str,
    key: str,
    /,
    *,
    name: str,
    location: str,
    date: str,
    telescope: str,
    target: str,
    exposure_time: str,
    weather_conditions: str,
    observer: str,
    priority: str = "normal",
    altitude: str | None = None,
    overlap: str | None = None,
    sidelap: str | None = None,
    ground_resolution: str | None = None,
) -> None:
    """Create a mission.

    Args:
        organization: Organization key.
        project: Project key.
        key: Mission key used in paths.
        name: Display name.
        location: Observation site.
        date: Observation date.
        telescope: Telescope used.
        target: Observed target.
        exposure_time: Exposure time.
        weather_conditions: Weather during the observation.
        observer: Observer name.
        priority: Mission priority.
        altitude: Flight altitude, for aerial surveys.
        overlap: Forward image overlap, for aerial surveys.
        sidelap: Side image overlap, for aerial surveys.
        ground_resolution: Ground sampling distance, for aerial surveys.
    """
    payload = CreateMissionPayload(
        organization=organization,
        project=project,
        mission=key,
        name=name,
        location=location,
        date=date,
        metadata=MissionMetadata(
            telescope=telescope,
            target=target,
            exposure_time=exposure_time,
            weather_conditions=weather_conditions,
            observer=observer,
            priority=priority,
            altitude=altitude,
            overlap=overlap,
            sidelap=sidelap,
            ground_resolution=ground_resolution,
        ),
    )
    mission = run(lambda client: client.missions.create(payload))
    get_console().success(f"Mission '{organization}/{project}/{mission.key}' created")


@app.command
def update(
    organization: str,
    project: str,
    key: str,
    /,
    *,
    name: str | None = None,
    location: str | None = None,
    date: str | None = None,
    priority: str | None = None,
    observer: str | None = None,
    weather_conditions: str | None = None,
) -> None:
    """Update a mission. Only the given options are sent.

    Args:
        organization: Organization key.
        project: Project key.
        key: Mission key.
        name: New display name.
        location: New observation site.
        date: New observation date.
        priority: New priority.
        observer: New observer.
        weather_conditions: New weather conditions.
    """
    changes = {
        k: v for k, v in {"name": name, "location": location, "date": date}.items() if v is not None
    }
    metadata_changes = {
        k: v
        for k, v in {
            "priority": priority,
            "observer": observer,
            "weather_conditions": weather_conditions,
        }.items()
        if v is not None
    }
    if metadata_changes:
        changes["metadata"] = MissionMetadataPatch(**metadata_changes)
    patch = MissionPatch(**changes)

    mission = run(lambda client: client.missions.update(organization, project, key, patch))
    show_mission(organization, project, mission)
