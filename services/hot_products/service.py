from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from shared import config
from shared.logging import get_logger

from .helpers import NoSalesError, distinct_product_ids, parse_date, pick_top_product
from .models import (
    DailyTopProduct,
    HotProductsResult,
    Order,
    OrderStatus,
    PeriodTopProduct,
    Product,
)
from .reader import read_json_list

WINDOW_DAYS = 3

DayCounts = Dict[date, Dict[str, int]]
PurchaseKey = Tuple[date, str, str]

logger = get_logger(__name__)


def aggregate_orders(orders: List[Order]) -> DayCounts:
    """
    Net sale count per day per product.

    A customer buying the same product several times on one day counts once.
    A cancellation removes the original order's purchases from the original
    order's day; the cancellation's own date and customer are ignored.
    """
    completed_by_id: Dict[str, Order] = {}
    for order in orders:
        if order.status == OrderStatus.COMPLETED:
            completed_by_id.setdefault(order.order_id, order)

    active: Set[PurchaseKey] = set()
    day_counts: DayCounts = {}
    deduped = 0
    ignored_cancellations = 0

    for order in orders:
        order_date = parse_date(order.date)

        if order.status == OrderStatus.COMPLETED:
            for pid in distinct_product_ids(order.entries):
                key = (order_date, order.customer_id, pid)
                if key in active:
                    deduped += 1
                    continue
                active.add(key)
                counts = day_counts.setdefault(order_date, {})
                counts[pid] = counts.get(pid, 0) + 1

        elif order.status == OrderStatus.CANCELED:
            original = completed_by_id.get(order.order_id)
            if original is None:
                ignored_cancellations += 1
                continue

            original_date = parse_date(original.date)
            for pid in distinct_product_ids(original.entries):
                key = (original_date, original.customer_id, pid)
                if key not in active:
                    continue
                active.remove(key)
                # entry stays even at zero
                counts = day_counts.setdefault(original_date, {})
                counts[pid] = counts.get(pid, 0) - 1

    logger.debug(
        "Aggregated {} orders into {} days ({} repeat purchases skipped, {} unmatched cancellations)",
        len(orders),
        len(day_counts),
        deduped,
        ignored_cancellations,
    )
    return day_counts


class HotProductCalculator:
    def __init__(
        self,
        anchor_date: date,
        reader: Callable[[Any, type], list] = read_json_list,
        aggregator: Callable[[List[Order]], DayCounts] = aggregate_orders,
        unknown_name: str = config.UNKNOWN_PRODUCT_NAME,
    ):
        self.anchor_date = anchor_date
        self.reader = reader
        self.aggregator = aggregator
        self.unknown_name = unknown_name

    def calculate_files(self, orders_payload: Any, products_payload: Any) -> HotProductsResult:
        orders = self.reader(orders_payload, Order)
        products = self.reader(products_payload, Product)
        return self.calculate(orders, products)

    def calculate(self, orders: List[Order], products: List[Product]) -> HotProductsResult:
        names = {p.id: p.name for p in products}
        day_counts = self.aggregator(orders)

        result = HotProductsResult(
            daily_top=self._daily_top(day_counts, names),
            top_last_3_days=self._window_top(day_counts, names),
        )
        logger.debug(
            "Calculated hot products for {} days, window {} -> {}",
            len(result.daily_top),
            result.top_last_3_days.from_date,
            result.top_last_3_days.to_date,
        )
        return result

    def _daily_top(self, day_counts: DayCounts, names: Dict[str, str]) -> List[DailyTopProduct]:
        return [
            DailyTopProduct(
                date=day,
                product_name=pick_top_product(day_counts[day], names, self.unknown_name),
            )
            for day in sorted(day_counts)
        ]

    def _window_top(self, day_counts: DayCounts, names: Dict[str, str]) -> PeriodTopProduct:
        period_from = self.anchor_date - timedelta(days=WINDOW_DAYS - 1)
        totals: Dict[str, int] = {}

        for offset in range(WINDOW_DAYS):
            counts = day_counts.get(period_from + timedelta(days=offset))
            if not counts:
                continue
            for pid, count in counts.items():
                totals[pid] = totals.get(pid, 0) + count

        try:
            name: Optional[str] = pick_top_product(totals, names, self.unknown_name)
        except NoSalesError:
            name = None

        return PeriodTopProduct(from_date=period_from, to_date=self.anchor_date, product_name=name)


def get_calculator() -> HotProductCalculator:
    return HotProductCalculator(
        anchor_date=parse_date(config.ANCHOR_DATE),
        unknown_name=config.UNKNOWN_PRODUCT_NAME,
    )
