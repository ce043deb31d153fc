from sqlalchemy.orm import Session
from typing import List, Optional
from database import Product, id_in_range

def get_product(db: Session, product_id: int) -> Optional[Product]:
    if not id_in_range(product_id):
        return None
    return db.query(Product).filter(Product.id == product_id).first()

def get_products(db: Session, skip: int = 0, limit: int = 100) -> List[Product]:
    return db.query(Product).order_by(Product.id).offset(skip).limit(limit).all()
