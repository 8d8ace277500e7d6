"""Processing task commands."""

import cyclopts

from astrohub.cli.console import get_console
from astrohub.cli.util import run

app = cyclopts.App(name="task", help="View mission processing tasks")


@app.command(name="list")
def list_tasks(organization: str, project: str, mission: str, /) -> None:
    """List processing tasks of a mission.

    Args:
        organization: Organization key.
        project: Project key.
        mission: Mission key.
    """
    tasks = run(lambda client: client.tasks.list(organization, project, mission))
    console = get_console()
    if not tasks:
        console.info("No tasks found")
        return

    rows = [t.model_dump() for t in tasks]
    # Task fields are backend-defined; show every key seen, id first
    keys = ["id"] + sorted({k for row in rows for k in row} - {"id"})
    console.table(rows, [(k, k) for k in keys], title=f"Tasks in {organization}/{project}/{mission}")
