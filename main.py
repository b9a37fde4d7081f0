"""
Main entry point for the address book.

Interactive menu for listing, adding, deleting and updating contacts.

Usage:
    >>> python main.py          # interactive menu
    >>> python main.py list     # print contacts and exit

File: main.py
Created: 2026-10-16
Last Modified: 2026-10-19
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm, IntPrompt
from rich.table import Table
from rich import box

from addressbook import Contact, ContactStore, StoreConfig

console = Console()

load_dotenv()

LOG_DIR = Path(__file__).parent / "logs"

log = logging.getLogger(__name__)

# Typed during an update to empty a field instead of keeping its value
CLEAR_MARKER = "-"

# Menu definitions
ACTIONS = {
    "l": {
        "name": "List contacts",
        "description": "Show every contact in order",
    },
    "a": {
        "name": "Add contact",
        "description": "Enter a new contact",
    },
    "d": {
        "name": "Delete contact",
        "description": "Remove a contact by row number",
    },
    "u": {
        "name": "Update contact",
        "description": "Edit a contact by row number",
    },
}

FIELD_LABELS = [
    ("name", "Name"),
    ("phone", "Phone Number"),
    ("email", "Email Address"),
    ("address", "Address"),
    ("birthday", "Birthday"),
]


def configure_logging():
    """Log to a dated file in logs/, and to the console at WARNING and above."""
    LOG_DIR.mkdir(exist_ok=True)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        handlers=[
            logging.FileHandler(LOG_DIR / f"addressbook_{datetime.now().strftime('%Y-%m-%d')}.log"),
            console_handler,
        ]
    )


def show_menu(store: ContactStore):
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Address Book[/] - {len(store)} contacts in [dim]{store.path}[/]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")

    for key, action in ACTIONS.items():
        table.add_row(key, action["name"], action["description"])

    console.print(table)
    console.print("  [cyan]q[/]  Quit")
    console.print()


def contacts_table(contacts: List[Contact]) -> Table:
    """Build a table of contacts with 1-based row numbers."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", style="cyan", justify="right")
    for _, label in FIELD_LABELS:
        table.add_column(label)

    for i, contact in enumerate(contacts, start=1):
        table.add_row(str(i), *contact.fields())

    return table


def show_contacts(store: ContactStore):
    contacts = store.list()
    if not contacts:
        console.print("[dim]No contacts yet.[/]")
        return
    console.print(contacts_table(contacts))


def prompt_contact(existing: Optional[Contact] = None) -> Optional[Contact]:
    """
    Ask for the five contact fields.

    Args:
        existing: Contact whose values are offered as defaults. Pressing
            enter keeps a value; typing CLEAR_MARKER empties it.

    Returns:
        The entered Contact, or None if the user left the name blank
    """
    if existing is not None:
        console.print(f"[dim]Enter keeps the current value, {CLEAR_MARKER} clears it.[/]")

    values = {}
    for field, label in FIELD_LABELS:
        default = getattr(existing, field) if existing else ""
        answer = Prompt.ask(label, default=default, show_default=bool(default))
        values[field] = "" if existing is not None and answer.strip() == CLEAR_MARKER else answer

    if not values["name"].strip():
        console.print("[dim]Cancelled.[/]")
        return None
    return Contact(**values)


def select_contact(store: ContactStore, verb: str) -> Optional[Contact]:
    """Show the list and let the user pick a row. Returns None on 0 or an empty book."""
    contacts = store.list()
    if not contacts:
        console.print("[dim]No contacts yet.[/]")
        return None

    console.print(contacts_table(contacts))
    row = IntPrompt.ask(f"Row to {verb} (0 to cancel)", default=0)
    if row < 1 or row > len(contacts):
        console.print("[dim]Cancelled.[/]")
        return None
    return contacts[row - 1]


async def _report_save(future) -> None:
    """Wait for the background write and say how it went."""
    if future is None:
        return
    result = await asyncio.wrap_future(future)
    if result.ok:
        console.print(f"[green]Saved[/] [dim]({result.written} contacts)[/]")
    else:
        console.print(f"[red]Could not save contacts:[/] {result.error}")


async def _add(store: ContactStore):
    contact = prompt_contact()
    if contact is None:
        return
    await _report_save(store.add(contact))
    show_contacts(store)


async def _delete(store: ContactStore):
    contact = select_contact(store, "delete")
    if contact is None:
        return
    if not Confirm.ask(f"Delete {contact.name}?", default=False):
        console.print("[dim]Skipped.[/]")
        return
    await _report_save(store.delete(contact))
    show_contacts(store)


async def _update(store: ContactStore):
    contact = select_contact(store, "update")
    if contact is None:
        return
    updated = prompt_contact(contact)
    if updated is None:
        return
    future = store.update(contact, updated)
    if future is None:
        console.print("[yellow]That contact no longer exists.[/]")
        return
    await _report_save(future)
    show_contacts(store)


async def run_action(store: ContactStore, action: str):
    """Run a single menu action."""
    console.rule(f"[bold]{ACTIONS[action]['name']}")

    if action == "l":
        show_contacts(store)
    elif action == "a":
        await _add(store)
    elif action == "d":
        await _delete(store)
    elif action == "u":
        await _update(store)


async def main():
    """Main entry point with interactive menu."""
    config = StoreConfig.from_env()
    store = ContactStore(config=config)

    load = store.last_load
    if not load.ok:
        console.print(f"[red]Could not read {load.path}:[/] {load.error}")
    elif load.skipped:
        console.print(f"[yellow]Skipped {load.skipped} malformed line(s) in {load.path}[/]")

    try:
        # Check for command-line argument for non-interactive use
        if len(sys.argv) > 1:
            command = sys.argv[1].lower()
            if command in ("list", "l"):
                show_contacts(store)
            else:
                console.print(f"[red]Unknown command: {command}[/]")
                console.print("[dim]Valid commands: list[/]")
            return

        # Interactive mode
        while True:
            show_menu(store)

            choice = Prompt.ask(
                "Select action",
                choices=list(ACTIONS.keys()) + ["q"],
                default="l",
            )

            if choice == "q":
                console.print("[dim]Goodbye![/]")
                break

            await run_action(store, choice)
    finally:
        store.close()
        log.info(f"Closed contact store at {store.path}")


def run():
    configure_logging()
    asyncio.run(main())


if __name__ == "__main__":
    run()
