#!/usr/bin/env python3
"""
Seed the identity directory with demo accounts.

Creates one well-known admin plus a number of generated admins and users,
all through the credential service so passwords are hashed exactly as a
real signup would hash them. Accounts whose email already exists are
skipped, so the script can be re-run safely.

Usage:
    python run_seed.py                      # 1 known admin, 2 admins, 10 users
    python run_seed.py --admins 5 --users 50

Only meaningful with DIRECTORY_BACKEND=supabase; the in-memory directory
disappears when the script exits.
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from api.dependencies import ServiceContainer
from shared.config import get_settings
from shared.exceptions import BastionError, ErrorKind
from shared.logging_config import configure_logging
from shared.roles import Role

console = Console()

KNOWN_ADMIN = ("Admin", "admin@example.com", "admin123")
DEFAULT_PASSWORD = "password123"


def seed_plan(admins: int, users: int) -> list[tuple[str, str, str, Role]]:
    """(name, email, password, role) for every account to create."""
    name, email, password = KNOWN_ADMIN
    plan = [(name, email, password, Role.ADMIN)]
    for i in range(1, admins + 1):
        plan.append((f"Admin {i}", f"admin{i}@example.com", DEFAULT_PASSWORD, Role.ADMIN))
    for i in range(1, users + 1):
        plan.append((f"User {i}", f"user{i}@example.com", DEFAULT_PASSWORD, Role.USER))
    return plan


async def seed(container: ServiceContainer, plan: list[tuple[str, str, str, Role]]) -> Table:
    await container.connect()
    credentials = container.credentials

    table = Table(title="Seeded Accounts")
    table.add_column("Email", style="cyan")
    table.add_column("Role")
    table.add_column("Status")

    for name, email, password, role in plan:
        try:
            await credentials.sign_up(name, email, password, role)
        except BastionError as e:
            if e.kind != ErrorKind.DUPLICATE_IDENTITY:
                raise
            table.add_row(email, role.value, "[yellow]exists[/yellow]")
            continue
        table.add_row(email, role.value, "[green]created[/green]")
    return table


def main():
    parser = argparse.ArgumentParser(description="Seed demo accounts")
    parser.add_argument("--admins", type=int, default=2, help="Generated admin accounts")
    parser.add_argument("--users", type=int, default=10, help="Generated user accounts")
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red]\n{e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    if settings.directory_backend == "memory":
        console.print("[yellow]Warning:[/yellow] seeding the in-memory directory has no lasting effect")

    table = asyncio.run(seed(ServiceContainer(settings), seed_plan(args.admins, args.users)))
    console.print(table)


if __name__ == "__main__":
    main()
