import json

import pytest
from fastapi.testclient import TestClient

from services.hot_products.main import app
from services.hot_products.models import Order, OrderLine, OrderStatus, Product


def completed(order_id, customer_id, date, *product_ids):
    return Order(
        order_id=order_id,
        customer_id=customer_id,
        date=date,
        status=OrderStatus.COMPLETED,
        entries=[OrderLine(product_id=pid, quantity=1) for pid in product_ids],
    )


def cancelled(order_id, date):
    return Order(
        order_id=order_id,
        customer_id="IGNORED",
        date=date,
        status=OrderStatus.CANCELED,
        entries=[],
    )


@pytest.fixture()
def products():
    return [
        Product(id="P1", name="Ezy Storage 37L Flexi Laundry Basket - White"),
        Product(id="P2", name="Aandleford Black Seaford Post Mounted Letterbox"),
        Product(id="P3", name="Coolaroo 5.4m Square Graphite Premium Shade Sail Kit"),
        Product(id="P4", name="Ozito 80W Soldering Iron"),
        Product(id="P5", name="Richgro 25L All Purpose Garden Soil Mix"),
        Product(id="P6", name="Arlec 160W Crystalline Solar Foldable Charging Kit"),
    ]


@pytest.fixture()
def sample_orders():
    return [
        completed("O10", "C1", "19/07/2021", "P1"),
        completed("O20", "C2", "19/07/2021", "P1"),
        completed("O30", "C2", "19/07/2021", "P2"),
        completed("O31", "C3", "19/07/2021", "P2", "P1"),
        completed("O32", "C32", "19/07/2021", "P2"),
        cancelled("O30", "20/07/2021"),
        completed("O40", "C3", "20/07/2021", "P4"),
        completed("O60", "C3", "20/07/2021", "P4", "P1"),
        completed("O70", "C4", "20/07/2021", "P5"),
        completed("O80", "C5", "20/07/2021", "P1"),
        # same customer, product and day as O80
        completed("O81", "C5", "20/07/2021", "P1"),
        completed("O90", "C5", "21/07/2021", "P1"),
        completed("O100", "C3", "21/07/2021", "P4", "P6"),
    ]


@pytest.fixture()
def orders_json(sample_orders):
    return json.dumps([o.model_dump(mode="json", by_alias=True) for o in sample_orders])


@pytest.fixture()
def products_json(products):
    return json.dumps([p.model_dump(mode="json") for p in products])


@pytest.fixture()
def client():
    return TestClient(app)
