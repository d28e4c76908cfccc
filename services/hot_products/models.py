import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    COMPLETED = "completed"
    CANCELED = "cancelled"


class OrderLine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="id")
    quantity: int = 0


class Order(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(alias="orderId")
    customer_id: str = Field(default="", alias="customerId")
    entries: List[OrderLine] = Field(default_factory=list)
    # dd/MM/yyyy, parsed by the aggregator
    date: str
    status: OrderStatus


class Product(BaseModel):
    id: str
    name: str


class DailyTopProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    product_name: str = Field(alias="productName")


class PeriodTopProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_date: datetime.date = Field(alias="from")
    to_date: datetime.date = Field(alias="to")
    # None when nothing sold inside the window
    product_name: Optional[str] = Field(alias="productName")


class HotProductsResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    daily_top: List[DailyTopProduct] = Field(alias="dailyTop")
    top_last_3_days: PeriodTopProduct = Field(alias="topLast3Days")
