from pydantic import BaseModel, ConfigDict
from typing import Optional

class ProductType(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)

class Product(BaseModel):
    id: int
    name: str
    type: Optional[ProductType] = None
    model_config = ConfigDict(from_attributes=True)
