"""
Sample catalogue loaded at startup when SEED_DATABASE is enabled.

Rows are only inserted into an empty products table, so restarting the
application never duplicates them.
"""
from decimal import Decimal
from uuid import uuid4
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.product import Product
from app.repositories.base import utcnow

logger = logging.getLogger(__name__)

# category name -> (description, [(product name, description, price, stock)])
SEED_CATALOGUE = {
    "Electronics": (
        "Electronic devices and accessories",
        [
            ("MacBook Pro 16-inch", "Apple M2 Pro chip, 16GB RAM, 512GB SSD", "2499.99", 50),
            ("Sony WH-1000XM4", "Wireless Noise Cancelling Headphones", "349.99", 100),
            ("iPad Air 5th Gen", "M1 chip, 10.9-inch Liquid Retina", "599.99", 120),
            ("Steam Deck OLED", "512GB Gaming Handheld", "549.99", 60),
        ],
    ),
    "Home & Kitchen": (
        "Home appliances and kitchen essentials",
        [
            ("Ninja Foodi 9-in-1 Deluxe XL", "Pressure Cooker and Air Fryer", "219.99", 75),
            ("Dyson V15 Detect", "Cordless Vacuum Cleaner with Laser Detection", "699.99", 30),
            ("Breville Barista Express", "Espresso Machine", "699.99", 40),
            ("Le Creuset Dutch Oven", "5.5Qt Enameled Cast Iron", "399.99", 70),
        ],
    ),
    "Books": (
        "Books across various genres",
        [
            ("Atomic Habits", "An Easy & Proven Way to Build Good Habits by James Clear", "24.99", 200),
            ("The Psychology of Money", "Timeless lessons on wealth, greed, and happiness", "19.99", 150),
            ("Clean Code", "Robert C. Martin", "44.99", 80),
            ("The Pragmatic Programmer", "Hunt & Thomas", "49.99", 75),
        ],
    ),
    "Sports & Outdoors": (
        "Sports equipment and outdoor gear",
        [
            ("Hydroflask 32oz", "Wide Mouth Stainless Steel Water Bottle", "44.95", 120),
            ("Nike Pegasus 39", "Running Shoes with React Foam", "129.99", 80),
            ("Osprey Atmos AG 65", "Hiking Backpack", "299.99", 70),
            ("Manduka PRO Yoga Mat", "6mm Premium Mat", "129.99", 90),
        ],
    ),
}


def seed_database(db: Session) -> int:
    """
    Insert the sample catalogue if there are no products yet.

    Returns:
        Number of products inserted (0 when the table was already populated)
    """
    if db.scalar(select(func.count()).select_from(Product)):
        logger.info("Products already present, skipping seed data")
        return 0

    now = utcnow()
    inserted = 0
    for category_name, (category_description, products) in SEED_CATALOGUE.items():
        category = Category(
            id=uuid4(),
            name=category_name,
            description=category_description,
            created_at=now,
        )
        db.add(category)

        for name, description, price, stock_quantity in products:
            db.add(Product(
                id=uuid4(),
                name=name,
                description=description,
                price=Decimal(price),
                stock_quantity=stock_quantity,
                category_id=category.id,
                created_at=now,
            ))
            inserted += 1

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Seeded {len(SEED_CATALOGUE)} categories and {inserted} products")
    return inserted
