from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, ValidationError
from typing import Any, Dict, Union

from .errors import ProductValidationError
from .models import Product

Number = Union[StrictInt, StrictFloat]

NAME_ERROR = "Invalid or missing product name"
PRICE_ERROR = "Invalid or missing product price"
BODY_ERROR = "Request body must be a JSON object"

class ProductIn(BaseModel):
    """Body accepted by create and update.

    Only ``name`` and ``price`` are checked; the optional fields are stored
    as sent. Only the camelCase ``inStock`` key is read; ``in_stock`` is ignored like
    any other unknown key.
    """
    name: StrictStr = Field(..., min_length=1)
    description: Any = None
    price: Number
    category: Any = None
    in_stock: Any = Field(None, alias="inStock")

def validate_product(payload: Any) -> ProductIn:
    if not isinstance(payload, dict):
        raise ProductValidationError(BODY_ERROR)
    try:
        return ProductIn.model_validate(payload)
    except ValidationError as e:
        fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        if "name" in fields:
            raise ProductValidationError(NAME_ERROR)
        raise ProductValidationError(PRICE_ERROR)

def _make_product(product_id: str, p: ProductIn) -> Product:
    supplied = {name: getattr(p, name) for name in p.model_fields_set}
    return Product(id=product_id, **supplied)

def _truthy(value: Any) -> bool:
    # Empty lists and objects count as truthy; NaN does not.
    if value is None or value is False or isinstance(value, str) and value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and value == value
    return True

def _update_fields(p: ProductIn) -> Dict[str, Any]:
    """Changes an update body applies to a stored product.

    Text and price fields only overwrite when the incoming value is truthy,
    so ``price: 0`` or ``description: ""`` leave the stored value alone.
    ``inStock`` overwrites whenever the key is present, ``false`` included.
    """
    changes: Dict[str, Any] = {}
    for name in ("name", "description", "price", "category"):
        value = getattr(p, name)
        if _truthy(value):
            changes[name] = value
    if "in_stock" in p.model_fields_set:
        changes["in_stock"] = p.in_stock
    return changes
