from pydantic import BaseModel, ConfigDict
from typing import Optional

# 두 필드 모두 비어 있을 수 있습니다. 필수 여부는 crud에서 검증하고 422로 응답합니다.
class FavouriteParams(BaseModel):
    user_id: Optional[int] = None
    product_id: Optional[int] = None

    def is_complete(self) -> bool:
        return self.user_id is not None and self.product_id is not None

# 요청 본문 형식: {"favourite": {"user_id": 1, "product_id": 5}}
class FavouriteRequest(BaseModel):
    favourite: FavouriteParams

class FavouriteResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    model_config = ConfigDict(from_attributes=True)
