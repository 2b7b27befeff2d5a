# app/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, Union


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[Any] = None
    price: Union[int, float]
    category: Optional[Any] = None
    in_stock: bool = Field(False, alias="inStock")


class ProductIn(BaseModel):
    """Create/replace payload.

    Every field is accepted as-is so that ``name`` and ``price`` can be
    checked by hand and rejected with the service's own message instead
    of pydantic's.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Any = None
    description: Any = None
    price: Any = None
    category: Any = None
    in_stock: Any = Field(None, alias="inStock")
