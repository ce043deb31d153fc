# crud 폴더의 각 파일에 있는 함수들을 패키지 레벨로 가져옵니다.

from .crud_user import get_user_by_email, get_user_by_token, create_user, delete_user
from .crud_product import get_product, get_products
from .crud_favourite import (
    get_favourite,
    get_favourites_by_user,
    create_favourite,
    update_favourite,
    delete_favourite,
)
