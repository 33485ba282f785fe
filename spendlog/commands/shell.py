"""Interactive menu for recording expenses and comparing prices."""

import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendlog.config import Settings, load_settings
from spendlog.domain.ledger import ExpenseLedger
from spendlog.domain.models import CategoryName, Description, ExpenseDate, ItemName, Money, StoreName
from spendlog.domain.money import format_money_display, parse_money
from spendlog.domain.prices import PriceCatalog, pick_cheapest
from spendlog.logging_setup import configure_logging, get_logger, resolve_level

console = Console()
logger = get_logger(__name__)

MENU_OPTIONS = [
    "Add New Expense",
    "Add Price Data (for Minimizer)",
    "Find Cheapest Store for an Item",
    "Show Expenses by Category",
    "Show All Expenses (Sorted by Date)",
    "Show Spending Summary",
    "Exit",
]
EXIT_CHOICE = len(MENU_OPTIONS)


def print_menu() -> None:
    """Display the main menu."""
    console.print("\n[bold cyan]Smart Student Expense Minimizer[/bold cyan]")
    for idx, label in enumerate(MENU_OPTIONS, 1):
        console.print(f"{idx}. {label}")


def prompt_money(label: str, symbol: str) -> Money:
    """Prompt until the user enters a valid amount.

    Args:
        label: Prompt text.
        symbol: Currency symbol the user may type before the amount.

    Returns:
        Amount in minor units.
    """
    while True:
        raw: str = typer.prompt(label, type=str)
        amount, error = parse_money(raw, symbol)
        if amount is not None:
            return amount
        console.print(f"[red]Invalid amount: {escape(error or raw)}[/red]")


def add_expense_interactive(ledger: ExpenseLedger, settings: Settings) -> int:
    """Prompt for expense details and record it.

    Args:
        ledger: Ledger to add the expense to.
        settings: Runtime settings.

    Returns:
        ID of the new expense.
    """
    date: str = typer.prompt("Enter date (YYYY-MM-DD)", type=str)
    amount = prompt_money("Enter amount", settings.currency_symbol)
    category: str = typer.prompt("Enter category (e.g., Food, Transport, Books)", type=str)
    description: str = typer.prompt("Enter description", type=str)

    expense_id = ledger.add_expense(
        ExpenseDate(date.strip()),
        amount,
        CategoryName(category.strip()),
        Description(description.strip()),
    )

    console.print(f"[green]Success:[/green] Added expense '{escape(description.strip())}' (ID: {expense_id}).")
    return expense_id


def add_price_interactive(catalog: PriceCatalog, settings: Settings) -> None:
    """Prompt for an item price at a store and record it.

    Args:
        catalog: Price catalog to update.
        settings: Runtime settings.
    """
    item: str = typer.prompt("Enter item name (e.g., Milk 1L)", type=str)
    store: str = typer.prompt("Enter store name", type=str)
    price = prompt_money("Enter price", settings.currency_symbol)

    catalog.set_price(ItemName(item.strip()), StoreName(store.strip()), price)

    console.print(f"[green]Success:[/green] Added price for '{escape(item.strip())}' at '{escape(store.strip())}'.")


def show_cheapest_store(catalog: PriceCatalog, item: ItemName, settings: Settings) -> None:
    """Show every recorded price for an item and highlight the cheapest.

    Args:
        catalog: Price catalog to search.
        item: Item name.
        settings: Runtime settings.
    """
    quotes = catalog.prices_for(item)
    cheapest = pick_cheapest(quotes)

    if cheapest is None:
        console.print(f"[yellow]Sorry, no price data found for '{escape(item)}'.[/yellow]")
        return

    table = Table(title=f"Price Check for: {escape(item)}")
    table.add_column("Store", style="cyan")
    table.add_column("Price", justify="right")

    for quote in quotes:
        table.add_row(escape(quote.store), format_money_display(quote.price, settings.currency_symbol))

    console.print(table)
    console.print(
        f"[bold green]==> The cheapest store is '{escape(cheapest.store)}' at "
        f"{format_money_display(cheapest.price, settings.currency_symbol)} <==[/bold green]"
    )


def show_expenses_by_category(ledger: ExpenseLedger, category: CategoryName, settings: Settings) -> None:
    """Show expenses for one category in the order they were added.

    Args:
        ledger: Ledger to query.
        category: Category label.
        settings: Runtime settings.
    """
    expenses = ledger.list_by_category(category)

    if not expenses:
        console.print("[yellow]No expenses found for this category.[/yellow]")
        known = ledger.categories()
        if known:
            console.print(f"[dim]Known categories: {escape(', '.join(known))}[/dim]")
        return

    table = Table(title=f"Expenses for Category: {escape(category)}")
    table.add_column("Date", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="white")

    for expense in expenses:
        table.add_row(
            escape(expense.date),
            format_money_display(expense.amount, settings.currency_symbol),
            escape(expense.description),
        )

    console.print(table)


def show_all_expenses_by_date(ledger: ExpenseLedger, settings: Settings) -> None:
    """Show all expenses ordered by date."""
    expenses = ledger.list_all_by_date()

    if not expenses:
        console.print("[yellow]No expenses to show.[/yellow]")
        return

    table = Table(title="All Expenses (Sorted by Date)")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="white")

    for expense in expenses:
        table.add_row(
            escape(expense.date),
            escape(expense.category),
            format_money_display(expense.amount, settings.currency_symbol),
            escape(expense.description),
        )

    console.print(table)


def show_spending_summary(ledger: ExpenseLedger, settings: Settings) -> None:
    """Show per-category totals and the grand total."""
    summary = ledger.category_totals()

    if not summary.categories:
        console.print("[yellow]No expenses to summarize.[/yellow]")
        return

    table = Table(title="Spending Summary by Category")
    table.add_column("Category", style="magenta")
    table.add_column("Total", justify="right")

    for item in summary.categories:
        table.add_row(escape(item.category), format_money_display(item.total, settings.currency_symbol))

    table.add_section()
    table.add_row("[bold]TOTAL[/bold]", f"[bold]{format_money_display(summary.total, settings.currency_symbol)}[/bold]")

    console.print(table)


def parse_menu_choice(raw: str) -> tuple[int | None, str | None]:
    """Parse a menu selection.

    Args:
        raw: Text entered by the user.

    Returns:
        Tuple of (choice, error_message).
    """
    try:
        choice = int(raw.strip())
    except ValueError:
        return None, "Invalid input. Please enter a number."

    if choice < 1 or choice > EXIT_CHOICE:
        return None, "Invalid choice. Please try again."

    return choice, None


def run_menu(ledger: ExpenseLedger, catalog: PriceCatalog, settings: Settings) -> None:
    """Run the menu loop until the user exits.

    Args:
        ledger: Ledger for this session.
        catalog: Price catalog for this session.
        settings: Runtime settings.
    """
    console.print("Welcome to the Smart Student Expense Minimizer!")

    while True:
        print_menu()
        raw: str = typer.prompt("Enter your choice", type=str)
        choice, error = parse_menu_choice(raw)

        if choice is None:
            console.print(f"[red]{error}[/red]")
            continue

        if choice == EXIT_CHOICE:
            console.print("Goodbye!")
            break

        if choice == 1:
            add_expense_interactive(ledger, settings)
        elif choice == 2:
            add_price_interactive(catalog, settings)
        elif choice == 3:
            item: str = typer.prompt("Enter item name to check", type=str)
            show_cheapest_store(catalog, ItemName(item.strip()), settings)
        elif choice == 4:
            category: str = typer.prompt("Enter category to show", type=str)
            show_expenses_by_category(ledger, CategoryName(category.strip()), settings)
        elif choice == 5:
            show_all_expenses_by_date(ledger, settings)
        elif choice == 6:
            show_spending_summary(ledger, settings)

    logger.info("Session ended with %d expenses and %d priced items", len(ledger), len(catalog.items()))


def shell_command(config_path: str | None = None, log_level: str | None = None) -> None:
    """Start an interactive session.

    Args:
        config_path: Optional config file path (default: XDG config location).
        log_level: Optional log level overriding environment and config.
    """
    path = Path(config_path).expanduser() if config_path else None

    try:
        settings = load_settings(path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config: {e}[/red]", style="bold")
        sys.exit(1)

    configure_logging(resolve_level(log_level, settings.log_level))
    logger.info("Starting session (currency symbol %r)", settings.currency_symbol)

    run_menu(ExpenseLedger(), PriceCatalog(), settings)
