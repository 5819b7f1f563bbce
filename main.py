import logging
import sys
from pydantic import ValidationError

from vending import settings, utils
from vending.logger import setup_logger
from vending.machine import VendingMachine

logger = logging.getLogger(__name__)

COMMANDS = {"top", "reload", "quit"}


def show_menu(machine: VendingMachine):
    logger.info("\n--- Menu ---")
    prices = machine.prices
    for name, (available, _) in machine.inventory.items():
        price = prices.get(name)
        price_str = utils.format_pence(price) if price is not None else "not for sale"
        stock_str = f"{available} left" if available > 0 else "SOLD OUT"
        logger.info(f"{name:<12} {price_str:>8}   {stock_str}")
    logger.info(f"Coins accepted: {', '.join(settings.DENOMINATIONS)}")
    logger.info(f"Commands: {', '.join(sorted(COMMANDS))}")


def handle_command(machine: VendingMachine, command: str):
    if command == "top":
        best_sellers = machine.top_items(settings.TOP_ITEMS_COUNT)
        logger.info(f"🏆 Best sellers: {', '.join(best_sellers) or 'nothing sold yet'}")
    elif command == "reload":
        machine.reload_inventory()
        machine.reload_coins()


def run_machine():
    """Interactive loop: pick an item, feed it coins, collect the change."""
    logger.info("--- Vending Machine ---")
    try:
        machine = VendingMachine(read_token=lambda: input("> "))
    except ValidationError as e:
        logger.error("❌ Machine load is invalid!")
        logger.error(e)
        sys.exit(1)

    while True:
        show_menu(machine)
        try:
            token = input("Choose an item: ").strip()
        except EOFError:
            break

        if token == "quit":
            break
        if token in COMMANDS:
            handle_command(machine, token)
            continue

        item = machine.select_item(token)
        if not item:
            continue

        change = machine.pay_for(item)
        if change is None:
            logger.info("No sale.")
        elif change:
            logger.info(f"💰 Your change: {utils.format_coins(change)}")

    logger.info("\n--- Goodbye ---")


if __name__ == "__main__":
    setup_logger()
    run_machine()
