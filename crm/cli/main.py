"""
CRM CLI - Main Entry Point

Unified Typer CLI that assembles all module sub-commands.

Usage:
    crm                 (interactive menu)
    crm menu
    crm version
    crm customers [command]
"""

import typer

import crm

app = typer.Typer(
    name="crm",
    help="Customer Record Manager: customer records kept in a delimited text file.",
)


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context):
    # No sub-command: start the interactive menu
    if ctx.invoked_subcommand is None:
        menu()


@app.command()
def version():
    """Show CRM version."""
    typer.echo(f"crm {crm.__version__}")


@app.command()
def menu():
    """Start the interactive customer menu."""
    from crm.customers.session import MenuSession
    from crm.customers.store import open_store

    MenuSession(open_store()).run()


def _register_modules():
    """Register module CLI sub-apps."""
    from crm.customers.cli import app as customers_app

    app.add_typer(customers_app, name="customers", help="Customer records")


_register_modules()


def main():
    """Entry point for the crm CLI."""
    app()


if __name__ == "__main__":
    main()
