"""Interactive cash register: log in, take orders, check out.

Every prompt accepts 0 to cancel. Domain errors are shown and the
cashier is asked again; nothing here ends the program except choosing
to exit.
"""

from __future__ import annotations

import click

from wansilog.application.authenticate import LogInHandler, SignUpHandler
from wansilog.application.checkout import CheckoutStatus
from wansilog.application.ordering_session import OrderingSession
from wansilog.domain.exceptions import DomainException
from wansilog.domain.model.cashier import PASSWORD_RULES
from wansilog.domain.repository.cashier_repository import CashierRepository
from wansilog.infrastructure.bootstrap import cashier_repository, catalog, ledger
from wansilog.infrastructure.cli.menu_commands import echo_entries

BANNER = "=" * 31
CANCEL = "0"


def _heading(title: str) -> None:
    click.echo(f"\n{BANNER}")
    click.echo(title)
    click.echo(BANNER)


def _prompt_number(text: str, maximum: int | None = None) -> int | None:
    """Ask for a whole number; None means the cashier typed 0."""
    value = click.prompt(f"{text} or 0 to cancel", type=click.IntRange(0, maximum))
    return None if value == 0 else value


# --- Authentication -----------------------------------------------------------


def _sign_up(cashiers: CashierRepository) -> None:
    _heading("       User Sign Up")
    handler = SignUpHandler(cashiers)

    while True:
        username = click.prompt("Enter new username or 0 to cancel")
        if username == CANCEL:
            click.echo("Signup cancelled.")
            return
        try:
            handler.check_username(username)
            break
        except DomainException as exc:
            click.echo(str(exc))

    while True:
        password = click.prompt(
            f"Enter new password ({PASSWORD_RULES}) or 0 to cancel", hide_input=True
        )
        if password == CANCEL:
            click.echo("Signup cancelled.")
            return
        try:
            handler.handle(username, password)
            break
        except DomainException as exc:
            click.echo(str(exc))

    click.echo("\nSign up successful! You can now log in.")


def _log_in(cashiers: CashierRepository) -> str | None:
    _heading("       User Login")
    handler = LogInHandler(cashiers)

    while True:
        username = click.prompt("Enter username or 0 to cancel")
        if username == CANCEL:
            click.echo("Login cancelled.")
            return None
        password = click.prompt("Enter password or 0 to cancel", hide_input=True)
        if password == CANCEL:
            click.echo("Login cancelled.")
            return None
        try:
            name = handler.handle(username, password)
        except DomainException as exc:
            click.echo(f"\n{exc}")
            continue
        click.echo(f"\nLogin successful! Welcome, {name}!")
        return name


def _authenticate(cashiers: CashierRepository) -> str | None:
    """Welcome screen loop. Returns the cashier name, or None to exit."""
    while True:
        _heading("   WELCOME TO WANSILOG!!")
        click.echo("1. Sign Up")
        click.echo("2. Log In")
        click.echo("3. Exit")
        choice = click.prompt("Enter your choice").strip()[:1]

        if choice == "1":
            _sign_up(cashiers)
        elif choice == "2":
            name = _log_in(cashiers)
            if name is not None:
                return name
        elif choice == "3":
            return None
        else:
            click.echo("\nInvalid choice. Please enter 1, 2 or 3.")


# --- Ordering -----------------------------------------------------------------


def _display_order(session: OrderingSession) -> None:
    dto = session.show_order()
    if dto.is_empty:
        click.echo("Your order is empty.")
        return
    click.echo("\nCurrent Orders:")
    for line in dto.lines:
        click.echo(
            f"[{line.number}] {line.item_name} x{line.quantity} "
            f"({line.addon_name}) - {line.line_total}"
        )
    click.echo(f"Total: {dto.total}")


def _add_item(session: OrderingSession) -> None:
    menu = session.menu()

    click.echo("\nAdd Item to Order:")
    echo_entries(menu.items)
    item = _prompt_number("Select item number", len(menu.items))
    if item is None:
        click.echo("Add item cancelled.")
        return

    echo_entries(menu.addons)
    addon = _prompt_number("Select addon number", len(menu.addons))
    if addon is None:
        click.echo("Add item cancelled.")
        return

    quantity = _prompt_number("Enter quantity")
    if quantity is None:
        click.echo("Add item cancelled.")
        return

    try:
        session.add_item(item, addon, quantity)
    except DomainException as exc:
        click.echo(str(exc))
        return
    click.echo("Item added!")


def _update_quantity(session: OrderingSession) -> None:
    if session.order.is_empty:
        click.echo("No items to update.")
        return
    _display_order(session)

    number = _prompt_number("Enter order number to update", len(session.order))
    if number is None:
        click.echo("Update cancelled.")
        return
    quantity = _prompt_number("Enter new quantity")
    if quantity is None:
        click.echo("Update cancelled.")
        return

    try:
        session.update_quantity(number, quantity)
    except DomainException as exc:
        click.echo(str(exc))
        return
    click.echo("Quantity updated!")


def _remove_item(session: OrderingSession) -> None:
    if session.order.is_empty:
        click.echo("No item to remove.")
        return
    _display_order(session)

    number = _prompt_number("Enter order number to remove", len(session.order))
    if number is None:
        click.echo("Remove cancelled.")
        return

    try:
        session.remove_item(number)
    except DomainException as exc:
        click.echo(str(exc))
        return
    click.echo("Item removed!")


def _checkout(session: OrderingSession) -> bool:
    """Take payment. True once the sale is committed."""
    try:
        checkout = session.begin_checkout()
    except DomainException as exc:
        click.echo(str(exc))
        return False
    _display_order(session)

    while True:
        raw = click.prompt("Enter payment amount or 0 to cancel: $", prompt_suffix="")
        result = checkout.tender(raw)

        if result.status is CheckoutStatus.RETRY:
            click.echo(str(result.error))
            continue
        if result.status is CheckoutStatus.CANCELLED:
            click.echo("Checkout cancelled.")
            return False

        click.echo(f"Change: {result.change}")
        click.echo("Thank you for your order!")
        for failure in result.failures:
            click.echo(f"Warning: {failure}", err=True)
        return True


def _order_menu(session: OrderingSession) -> None:
    session.cancel_order()
    while True:
        _heading("Order Menu:")
        click.echo("[1] Add Item")
        click.echo("[2] Update Quantity")
        click.echo("[3] Remove Item")
        click.echo("[4] Display Orders")
        click.echo("[5] Checkout")
        click.echo("[6] Cancel Order")
        click.echo("[0] Cancel/Back to Main Menu")
        choice = click.prompt("Choose an option").strip()

        if choice == "1":
            _add_item(session)
        elif choice == "2":
            _update_quantity(session)
        elif choice == "3":
            _remove_item(session)
        elif choice == "4":
            _display_order(session)
        elif choice == "5":
            if _checkout(session):
                return
        elif choice == "6":
            session.cancel_order()
            click.echo("Order cancelled.")
            return
        elif choice == "0":
            session.cancel_order()
            click.echo("Back to main menu.")
            return
        else:
            click.echo("Invalid choice. Please select from 1 to 6 or 0 to cancel.")


@click.command("register")
@click.pass_obj
def register_run(obj: dict) -> None:
    """Run the interactive cash register."""
    # One ledger for the whole run: the ID counter is recovered once here.
    sales_ledger = ledger(obj["data_dir"])
    cashiers = cashier_repository()

    cashier_name = _authenticate(cashiers)
    if cashier_name is None:
        click.echo("\nExiting Wansilog. Thank you!")
        return

    session = OrderingSession(cashier_name, catalog(), sales_ledger)
    while True:
        _order_menu(session)
        again = click.prompt("\nDo you want to process another order? (yes/no)")
        if again.strip().lower() == "no":
            break

    click.echo(f"\nThank you for using the Wansilog Cash Register, {cashier_name}!")
