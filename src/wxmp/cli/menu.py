"""CLI: wxmp menu get|set|delete"""

import json

import click
from rich.console import Console

from wxmp.client import WechatMP
from wxmp.errors import WxmpError

console = Console()


def _get_config():
    from wxmp.cli.main import _get_config
    return _get_config()


def _run(coro):
    from wxmp.cli.main import _run
    return _run(coro)


async def _call(method: str, *args):
    async with WechatMP(_get_config()) as client:
        return await getattr(client.menu, method)(*args)


@click.group()
def menu():
    """Custom menu commands."""


@menu.command("get")
def menu_get():
    """Print the current menu."""
    try:
        result = _run(_call("get"))
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print_json(json.dumps(result, ensure_ascii=False))


@menu.command("set")
@click.argument("source", type=click.File("r", encoding="utf-8"))
def menu_set(source):
    """Create the menu from a JSON file."""
    try:
        menu_def = json.loads(source.read())
    except json.JSONDecodeError as e:
        console.print(f"[red]Menu file is not valid JSON: {e}[/red]")
        raise SystemExit(1)
    try:
        with console.status("Creating menu..."):
            _run(_call("create", menu_def))
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print("[green]Menu created.[/green]")


@menu.command("delete")
def menu_delete():
    """Delete the menu."""
    try:
        _run(_call("delete"))
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print("[green]Menu deleted.[/green]")
