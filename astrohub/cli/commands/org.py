"""Organization commands."""

import cyclopts

from astrohub.cli.console import get_console
from astrohub.cli.util import parse_metadata, run
from astrohub.domain.catalog.model.entity import Organization
from astrohub.domain.catalog.model.payload import OrganizationFields, OrganizationPatch

app = cyclopts.App(name="org", help="Manage organizations")

COLUMNS = [("key", "Key"), ("name", "Name"), ("description", "Description")]


def show_organization(org: Organization) -> None:
    get_console().fields(
        {"Name": org.name, "Description": org.description, **org.metadata},
        title=org.key,
        subtitle=f"[dim]{org.id}[/dim]",
    )


@app.command(name="list")
def list_organizations() -> None:
    """List all organizations."""
    orgs = run(lambda client: client.organizations.list())
    console = get_console()
    if not orgs:
        console.info("No organizations found")
        return
    console.table([o.model_dump() for o in orgs], COLUMNS, title="Organizations")


@app.command
def show(key: str, /) -> None:
    """Show an organization.

    Args:
        key: Organization key.
    """
    show_organization(run(lambda client: client.organizations.get(key)))


@app.command
def create(
    key: str,
    /,
    *,
    name: str,
    description: str = "",
    meta: list[str] | None = None,
) -> None:
    """Create an organization.

    Args:
        key: Organization key used in paths.
        name: Display name.
        description: Free-text description.
        meta: Metadata entries as key=value (repeatable).
    """
    fields = OrganizationFields(
        key=key, name=name, description=description, metadata=parse_metadata(meta)
    )
    org = run(lambda client: client.organizations.create(key, fields))
    get_console().success(f"Organization '{org.key}' created")


@app.command
def update(
    key: str,
    /,
    *,
    name: str | None = None,
    description: str | None = None,
    meta: list[str] | None = None,
) -> None:
    """Update an organization. Only the given options are changed.

    Args:
        key: Organization key.
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
    patch = OrganizationPatch(**changes)
    show_organization(run(lambda client: client.organizations.update(key, patch)))


@app.command
def delete(key: str, /) -> None:
    """Delete an organization.

    Args:
        key: Organization key.
    """
    run(lambda client: client.organizations.delete(key))
    get_console().success(f"Organization '{key}' deleted")
