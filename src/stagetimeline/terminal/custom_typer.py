# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """Command group whose registered names carry their aliases: ``"history, h"``."""

    COMMAND_ORDER = ("calendar, c", "history, h", "day, d", "summary, s", "add, a")

    _ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

    def aliases(self) -> dict[str, str]:
        """Every alias mapped to the registered name it belongs to."""
        mapping: dict[str, str] = {}
        for registered in self.commands:
            for alias in self._ALIAS_SEPARATOR.split(registered):
                mapping.setdefault(alias, registered)
        return mapping

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.aliases().get(cmd_name, cmd_name))

    def list_commands(self, ctx: click.Context) -> list[str]:
        # Reading order for help output; unknown commands go last
        def position(name: str) -> int:
            if name in self.COMMAND_ORDER:
                return self.COMMAND_ORDER.index(name)
            return len(self.COMMAND_ORDER)

        return sorted(self.commands, key=position)
