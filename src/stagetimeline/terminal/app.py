# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from stagetimeline.logger import configure_logging
from stagetimeline.repository.configuration import CONFIGURATION_REPO
from stagetimeline.terminal.custom_typer import AliasedTyperGroup
from stagetimeline.terminal.event import add
from stagetimeline.terminal.timeline import calendar, day, history, summary
from stagetimeline.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Stage timeline - event history and deadline calendar in the CLI",
    no_args_is_help=True,
)
app.command(name="calendar, c")(calendar)
app.command(name="history, h")(history)
app.command(name="day, d", no_args_is_help=True)(day)
app.command(name="summary, s")(summary)
app.command(name="add, a", no_args_is_help=True)(add)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    Stage timeline - event history and deadline calendar in the CLI

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    configure_logging("DEBUG" if verbose else config["log_level"])
    view_state.set_show_header(config["show_header"] and not no_header)


def run() -> None:
    app()
