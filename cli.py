# cli.py
import argparse
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from storeapi.settings import STORE_API_URL
from storeclient.client import StoreAPIError, StoreClient

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=22)
    table.add_column("Description", width=26)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=8)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"{p.get('price', 0):.2f}",
            str(p.get("stock", 0)),
        )
    console.print(table)


def _lines_table(items: List[Dict[str, Any]]) -> Table:
    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=30)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Subtotal", justify="right", width=12)
    for it in items:
        table.add_row(
            it.get("productName", f"Product {it.get('productId', '?')}"),
            str(it.get("qty", 0)),
            f"{it.get('unitPrice', 0):.2f}",
            f"{it.get('subtotal', 0):.2f}",
        )
    return table


def show_cart(cart: Dict[str, Any]):
    title = Text()
    title.append("🛒 Cart - customer ", style="bold")
    title.append(str(cart.get("customerId", "?")), style="bold cyan")
    title.append(f" - Subtotal: {cart.get('subtotal', 0):.2f}", style="bold green")

    items = cart.get("items", [])
    if not items:
        console.print(Panel("Cart is empty 🛍️", title=title, style="blue"))
        return
    console.print(Panel(_lines_table(items), title=title, border_style="blue"))


def show_order(order: Dict[str, Any]):
    title = f"✅ Order {order.get('id', 'N/A')} - Total: {order.get('total', 0):.2f}"
    console.print(Panel(_lines_table(order.get("items", [])), title=title, border_style="green"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """Call fn and print a status panel; returns None when the API refuses."""
    try:
        result = fn(*args, **kwargs)
    except StoreAPIError as e:
        console.print(show_status(f"Error: {e.error} (HTTP {e.status_code})", False))
        return None
    if success_msg:
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Interactive menu
# ---------------------------
def menu(c: StoreClient):
    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in [
            ("1", "📦 List products"),
            ("2", "ℹ️ Get product by ID"),
            ("3", "🛒 Add to cart"),
            ("4", "🛒 View cart"),
            ("5", "✅ Checkout"),
            ("q", "👋 Quit"),
        ]:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt(
            "\nChoose an option ",
            completer=WordCompleter(["1", "2", "3", "4", "5", "q"]),
            style=custom_style,
        ).strip().lower()

        if choice == "1":
            products = try_api(c.list_products)
            if products is not None:
                show_products(products)

        elif choice == "2":
            pid = IntPrompt.ask("Product ID")
            p = try_api(c.get_product, pid)
            if p:
                show_products([p])

        elif choice == "3":
            cid = IntPrompt.ask("Customer ID", default=1)
            pid = IntPrompt.ask("Product ID")
            qty = IntPrompt.ask("Quantity", default=1)
            if try_api(c.add_to_cart, cid, pid, qty, success_msg=f"Added {qty} of product {pid}") is not None:
                cart = try_api(c.view_cart, cid)
                if cart:
                    show_cart(cart)

        elif choice == "4":
            cid = IntPrompt.ask("Customer ID", default=1)
            cart = try_api(c.view_cart, cid)
            if cart:
                show_cart(cart)

        elif choice == "5":
            cid = IntPrompt.ask("Customer ID", default=1)
            order = try_api(c.checkout, cid, success_msg=f"Order placed for customer {cid}")
            if order:
                show_order(order)

        elif choice in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                return

        console.print()
        console.rule(style="dim")


# ---------------------------
# One-shot commands
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Store API CLI")
    parser.add_argument("--url", default=STORE_API_URL, help="Base URL of the store API")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True)

    add = subparsers.add_parser("add-to-cart", help="Add product to cart")
    add.add_argument("--customer-id", type=int, required=True)
    add.add_argument("--product-id", type=int, required=True)
    add.add_argument("--qty", type=int, default=1)

    vc = subparsers.add_parser("view-cart", help="View cart contents")
    vc.add_argument("--customer-id", type=int, required=True)

    co = subparsers.add_parser("checkout", help="Check out a customer's cart")
    co.add_argument("--customer-id", type=int, required=True)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    c = StoreClient(base_url=args.url)

    if args.command is None:
        menu(c)
        return 0

    try:
        if args.command == "list-products":
            show_products(c.list_products())
        elif args.command == "get-product":
            show_products([c.get_product(args.product_id)])
        elif args.command == "add-to-cart":
            c.add_to_cart(args.customer_id, args.product_id, args.qty)
            show_cart(c.view_cart(args.customer_id))
        elif args.command == "view-cart":
            show_cart(c.view_cart(args.customer_id))
        elif args.command == "checkout":
            show_order(c.checkout(args.customer_id))
    except StoreAPIError as e:
        console.print(show_status(f"Error: {e.error} (HTTP {e.status_code})", False))
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
