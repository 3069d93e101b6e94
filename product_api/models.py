# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Union

class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Any = None
    price: Union[int, float]
    category: Any = None
    in_stock: Any = Field(None, alias="inStock")

    def to_dict(self) -> Dict[str, Any]:
        # fields never supplied stay out of the JSON body
        return self.model_dump(by_alias=True, exclude_unset=True)
