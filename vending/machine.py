import copy
import logging
from typing import Callable, Optional

from . import settings, utils
from .schemas import MachineLoad

logger = logging.getLogger(__name__)


class VendingMachine:
    """
    Holds the live state of a single machine: inventory, coin bank and purchase history.
    The load given at construction is kept aside so reloads can restore it exactly.

    Expected failures (unknown item, sold out, change that cannot be made) are returned
    as sentinels and logged, never raised.
    """

    def __init__(
        self,
        inventory: Optional[dict[str, list[int]]] = None,
        coins: Optional[dict[str, int]] = None,
        prices: Optional[dict[str, int]] = None,
        read_token: Callable[[], str] = input,
    ):
        load = MachineLoad(
            inventory=inventory if inventory is not None else settings.DEFAULT_INVENTORY,
            coins=coins if coins is not None else settings.DEFAULT_COINS,
            prices=prices if prices is not None else settings.DEFAULT_PRICES,
        )
        self._read_token = read_token

        # Initial snapshots, only ever copied from.
        self._initial_inventory = copy.deepcopy(load.inventory)
        self._initial_coins = dict(load.coins)
        self._prices = dict(load.prices)

        self._inventory = copy.deepcopy(self._initial_inventory)
        self._coin_bank = dict(self._initial_coins)
        self._purchase_history: dict[str, int] = {}

    # --- Observable state ---

    @property
    def inventory(self) -> dict[str, list[int]]:
        return copy.deepcopy(self._inventory)

    @property
    def coin_bank(self) -> dict[str, int]:
        return dict(self._coin_bank)

    @property
    def purchase_history(self) -> dict[str, int]:
        return dict(self._purchase_history)

    @property
    def prices(self) -> dict[str, int]:
        return dict(self._prices)

    # --- Selling ---

    def select_item(self, token: Optional[str] = None) -> str:
        """
        Returns the item name if it is stocked and available, otherwise an empty string.
        Reads the selection from the input source when no token is given.
        """
        if token is None:
            token = self._read_token()
        name = token.strip()

        levels = self._inventory.get(name)
        if levels is None:
            logger.warning(f"⚠️ '{name}' is not sold by this machine.")
            return ""
        if levels[0] <= 0:
            logger.warning(f"⚠️ '{name}' is out of stock.")
            return ""
        return name

    def pay_for(self, item_name: str) -> Optional[dict[str, int]]:
        """
        Reads coin labels from the input source until the item's price is covered,
        then dispenses the item and pays out any change.

        Returns the change handed back ({} for exact payment), or None when nothing
        was sold: the item can't be sold, input ran out, or change couldn't be made.
        """
        item_name = self.select_item(item_name)
        if not item_name:
            return None
        price = self._prices.get(item_name)
        if price is None:
            logger.error(f"❌ No price set for '{item_name}'; it cannot be sold.")
            return None

        logger.info(f"Insert {utils.format_pence(price)} for {item_name}.")
        tendered = 0
        while tendered < price:
            try:
                token = self._read_token()
            except EOFError:
                logger.warning(
                    f"⚠️ Payment for {item_name} abandoned after {utils.format_pence(tendered)}."
                )
                return None

            value = utils.coin_value(token)
            if value is None:
                logger.warning(f"⚠️ Rejected unknown coin '{token.strip()}'.")
                continue
            tendered += value
            logger.debug(f"Tendered {utils.format_pence(tendered)} of {utils.format_pence(price)}")

        overpayment = tendered - price
        change = self.calculate_change(overpayment) if overpayment > 0 else {}
        if not self.process_change(item_name, overpayment, change):
            return None

        self.log_purchase(item_name)
        logger.info(f"✅ Dispensed {item_name}.")
        return change

    def calculate_change(self, amount: int) -> dict[str, int]:
        """
        Greedy change for `amount` pence, largest denominations first.
        All or nothing: the bank is only touched once the full amount is covered.
        """
        if amount <= 0:
            return {}

        remaining = amount
        used: dict[str, int] = {}
        for label, value in settings.DENOMINATIONS.items():
            available = self._coin_bank.get(label, 0)
            count = min(remaining // value, available)
            if count > 0:
                used[label] = count
                remaining -= count * value

        if remaining != 0:
            logger.warning(
                f"⚠️ Cannot make change for {utils.format_pence(amount)}; "
                f"short by {utils.format_pence(remaining)}."
            )
            return {}

        for label, count in used.items():
            self._coin_bank[label] -= count
        return used

    def process_change(self, item_name: str, amount: int, coins: dict[str, int]) -> bool:
        """
        Dispenses `item_name` unless change of `amount` was owed and `coins` is empty.
        The item only leaves inventory once its change is secured, and never below zero.
        """
        levels = self._inventory.get(item_name)
        if levels is None:
            logger.warning(f"⚠️ {item_name} not dispensed: not sold by this machine.")
            return False
        if levels[0] <= 0:
            logger.warning(f"⚠️ {item_name} not dispensed: out of stock.")
            return False
        if amount > 0 and not coins:
            logger.warning(f"⚠️ {item_name} not dispensed: no change available.")
            return False
        levels[0] -= 1
        return True

    # --- Purchase history ---

    def log_purchase(self, item_name: str) -> None:
        self._purchase_history[item_name] = self._purchase_history.get(item_name, 0) + 1

    def top_items(self, n: int) -> list[str]:
        # sorted() is stable, so equal counts keep first-logged order.
        ranked = sorted(self._purchase_history.items(), key=lambda entry: entry[1], reverse=True)
        return [name for name, _ in ranked[:n]]

    def top_3_items(self) -> list[str]:
        return self.top_items(3)

    # --- Servicing ---

    def reload_inventory(self) -> None:
        self._inventory = copy.deepcopy(self._initial_inventory)
        logger.info("🔄 Inventory restored to its original load.")

    def reload_coins(self) -> None:
        self._coin_bank = dict(self._initial_coins)
        logger.info("🔄 Coin bank restored to its original load.")
