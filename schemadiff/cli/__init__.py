"""Command-line interface for schemadiff."""

import rich_click as click

from .. import __version__
from .analyze import analyze_command

# Configure rich-click styling
click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_ARGUMENT = "bold yellow"
click.rich_click.STYLE_COMMAND = "bold green"
click.rich_click.STYLE_SWITCH = "bold blue"


@click.group(name="schemadiff")
@click.version_option(version=__version__, prog_name="schemadiff")
def main() -> None:
    """🧬 **schemadiff** - Semantic differences between schema versions.

    Turns the edit operations computed between two schema graphs into a
    report of added, removed and modified types.
    """
    pass


main.add_command(analyze_command)


if __name__ == "__main__":
    main()


__all__ = ["main"]
