"""Core commands for the project board."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from project_board.core.board_core.app import BoardApp
from project_board.core.board_core.config import BoardConfig, load_config
from project_board.core.board_core.projects import Project, ProjectStatus

console = Console()

SHELL_HELP = """[bold]add[/bold] <title> | <description> | <people>   propose a project
[bold]move[/bold] <id> active|finished                  drag a project to a list
[bold]list[/bold]                                       show the board
[bold]show[/bold] <id>                                  show one project
[bold]help[/bold]                                       show this help
[bold]quit[/bold]                                       leave (the board is not saved)"""


def get_config() -> BoardConfig:
    """Load the board configuration for CLI commands."""
    return load_config()


def matching_project_ids(board: BoardApp, id_prefix: str) -> List[str]:
    """Full ids an abbreviated id could mean; an exact id match wins outright."""
    projects = board.state.projects
    exact = [p.id for p in projects if p.id == id_prefix]
    if exact:
        return exact
    return [p.id for p in projects if p.id.startswith(id_prefix)]


def resolve_project_id(board: BoardApp, id_prefix: str) -> Optional[str]:
    """Expand an abbreviated project id, reporting unknown or ambiguous ids."""
    matches = matching_project_ids(board, id_prefix)
    if len(matches) == 1:
        return matches[0]

    if matches:
        console.print(f"Ambiguous id '{escape(id_prefix)}' matches {len(matches)} projects", style="yellow")
    else:
        console.print(f"No project with id '{escape(id_prefix)}'", style="yellow")
    return None


def print_board(board: BoardApp) -> None:
    console.print(board.render())


def print_change(projects: List[Project]) -> None:
    active = sum(1 for p in projects if p.status == ProjectStatus.ACTIVE)
    finished = len(projects) - active
    console.print(f"  Board updated: {active} active, {finished} finished", style="dim")


def handle_add(board: BoardApp, args: str) -> None:
    parts = [part.strip() for part in args.split("|")]
    if len(parts) != 3:
        console.print("Usage: add <title> | <description> | <people>", style="yellow")
        return

    title, description, people = parts
    if board.project_input.submit(title, description, people):
        console.print(f"✓ Added project: {escape(title)}", style="green")
    else:
        console.print(f"✗ Not added: {escape(board.project_input.last_error)}", style="red")


def handle_move(board: BoardApp, args: str) -> None:
    parts = args.split()
    if len(parts) != 2:
        console.print("Usage: move <id> active|finished", style="yellow")
        return

    id_prefix, status_name = parts
    try:
        new_status = ProjectStatus(status_name.lower())
    except ValueError:
        console.print(f"Unknown status '{escape(status_name)}' (use active or finished)", style="yellow")
        return

    project_id = resolve_project_id(board, id_prefix)
    if project_id is None:
        return

    board.move(project_id, new_status)


def handle_show(board: BoardApp, args: str) -> None:
    id_prefix = args.strip()
    if not id_prefix:
        console.print("Usage: show <id>", style="yellow")
        return

    project_id = resolve_project_id(board, id_prefix)
    if project_id is None:
        return

    item = board.find_item(project_id)
    if item is not None:
        console.print(item.render())


def run_shell_command(board: BoardApp, line: str) -> bool:
    """Run one shell line against the board.

    Returns:
        False when the session should end
    """
    command, _, args = line.strip().partition(" ")
    command = command.lower()

    if not command:
        return True
    if command in ("quit", "exit"):
        return False

    if command == "add":
        handle_add(board, args)
    elif command == "move":
        handle_move(board, args)
    elif command == "show":
        handle_show(board, args)
    elif command == "list":
        print_board(board)
    elif command == "help":
        console.print(SHELL_HELP)
    else:
        console.print(f"Unknown command '{escape(command)}'. Type 'help' for commands.", style="yellow")
    return True


def shell() -> None:
    """Start an interactive board session (kept in memory until you quit)."""
    board = BoardApp(get_config())
    board.state.add_listener(print_change)

    console.print(Panel("📋 Project Board - type 'help' for commands", style="bold blue", expand=False))

    while True:
        try:
            line = typer.prompt("board", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            break
        if not run_shell_command(board, line):
            break

    console.print("Goodbye.", style="dim")


def demo() -> None:
    """Show a sample board with a few projects."""
    board = BoardApp(get_config())

    board.project_input.submit("Build API", "backend work", 3)
    board.project_input.submit("Design landing page", "marketing site refresh", 2)
    board.project_input.submit("Write docs", "user guide", 1)

    first = board.state.projects[0]
    board.move(first.id, ProjectStatus.FINISHED)

    print_board(board)
