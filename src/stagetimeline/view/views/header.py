# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from stagetimeline.view.state import get_show_header


def header(
    console: Console,
    title: str,
    description: Optional[str] = None,
    sub_header: Optional[str] = None,
) -> None:
    """Print the report header: timeline title, description and report name.

    Args:
        console: Console to print to
        title: The timeline title from the bundle
        description: Optional timeline description
        sub_header: Optional report name
    """
    if not get_show_header():
        return

    console.print(Padding(f"[dark_orange]{title}[/dark_orange]", (1, 0, 0, 1)))
    if description:
        console.print(Padding(f"[plum1]{description}[/plum1]", (0, 1)))
    if sub_header:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
