# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from habitgrid.view.state import get_show_header


def header(report_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the report name.

    Args:
        report_name: The name of the report being shown
        sub_header: Optional sub-header text, usually the date or week shown
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    report_name = f"[plum1]{report_name}[/plum1]"

    print(Padding("[dark_orange]habitgrid[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(report_name, (0, 1)))
    print(Padding(additional, (0, 1)))
