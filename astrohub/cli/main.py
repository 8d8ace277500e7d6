"""Main CLI application using Cyclopts.

The CLI is a thin HTTP client over AstroHubClient. The backend address comes
from ASTROHUB_API__BASE_URL or the ASTROHUB_CONFIG_FILE yaml.
"""

import cyclopts

from astrohub.cli.commands import asset, mission, org, project, task

app = cyclopts.App(
    name="astrohub",
    help="AstroHub - manage observation missions and upload their files",
)

app.command(org.app, name="org")
app.command(project.app, name="project")
app.command(mission.app, name="mission")
app.command(asset.app, name="asset")
app.command(task.app, name="task")
