"""Project commands."""

import cyclopts

from astrohub.cli.console import get_console
from astrohub.cli.util import parse_metadata, run
from astrohub.domain.catalog.model.entity import Project
from astrohub.domain.catalog.model.payload import ProjectFields, ProjectPatch

app = cyclopts.App(name="project", help="Manage projects within an organization")

COLUMNS = [("key", "Key"), ("name", "Name"), ("description", "Description")]


def show_project(organization: str, project: Project) -> None:
    get_console().fields(
        {"Name": project.name, "Description": project.description, **project.metadata},
        title=f"{organization}/{project.key}",
        subtitle=f"[dim]{project.id}[/dim]",
    )


@app.command(name="list")
def list_projects(organization: str, /) -> None:
    """List projects of an organization.

    Args:
        organization: Organization key.
    """
    projects = run(lambda client: client.projects.list(organization))
    console = get_console()
    if not projects:
        console.info(f"No projects found in '{organization}'")
        return
    console.table([p.model_dump() for p in projects], COLUMNS, title=f"Projects in {organization}")


@app.command
def show(organization: str, key: str, /) -> None:
    """Show a project.

    Args:
        organization: Organization key.
        key: Project key.
    """
    show_project(organization, run(lambda client: client.projects.get(organization, key)))


@app.command
def create(
    organization: str,
    key: str,
    /,
    *,
    name: str,
    description: str = "",
    meta: list[str] | None = None,
) -> None:
    """Create a project.

    Args:
        organization: Organization key.
        key: Project key used in paths.
        name: Display name.
        description: Free-text description.
        meta: Metadata entries as key=value (repeatable).
    """
    fields = ProjectFields(key=key, name=name, description=description, metadata=parse_metadata(meta))
    project = run(lambda client: client.projects.create(organization, key, fields))
    get_console().success(f"Project '{organization}/{project.key}' created")


@app.command
def update(
    organization: str,
    key: str,
    /,
    *,
    name: str | None = None,
    description: str | None = None,
    meta: list[str] | None = None,
) -> None:
    """Update a project. Only the given options are changed.

    Args:
        organization: Organization key.
        key: Project key.
        name: New display name.
        description: New description.
        meta: Replacement metadata entries as key=value (repeatable).
    """
    changes: dict = {}
    if name is not None:
        changes["name"] = name
    if description is not None:
        changes["description"] = description
    if meta is not None:
        changes["metadata"] = parse_metadata(meta)
    patch = ProjectPatch(**changes)
    show_project(organization, run(lambda client: client.projects.update(organization, key, patch)))


@app.command
def delete(organization: str, key: str, /) -> None:
    """Delete a project.

    Args:
        organization: Organization key.
        key: Project key.
    """
    run(lambda client: client.projects.delete(organization, key))
    get_console().success(f"Project '{organization}/{key}' deleted")
