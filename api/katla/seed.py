"""Seed minimal reference data."""
import logging
import os
from sqlalchemy.orm import Session
from katla.core.database import SessionLocal
from katla.core.logging_config import configure_logging
from katla.core.security import get_password_hash
from katla.models import User, ProductCategory

logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Bicycles", "description": "Road, mountain and city bicycles."},
    {"name": "Camping", "description": "Tents, sleeping bags and outdoor cooking."},
    {"name": "Running", "description": "Running shoes and apparel."},
    {"name": "Winter Sports", "description": "Skis, snowboards and accessories."},
]


def seed_admin(db: Session) -> User:
    """Create the administrator account if it does not exist yet."""
    email = os.getenv("KATLA_ADMIN_EMAIL", "admin@katlasport.com")
    user = db.query(User).filter(User.email == email).first()
    if user:
        logger.info("Admin user %s already exists", email)
        return user

    user = User(
        email=email,
        full_name="Administrator",
        password_hash=get_password_hash(os.getenv("KATLA_ADMIN_PASSWORD", "admin123")),
        is_active=True,
    )
    db.add(user)
    db.flush()
    logger.info("Created admin user %s", email)
    return user


def seed_categories(db: Session) -> int:
    """Insert missing categories by name. Returns how many were added."""
    existing = {name for (name,) in db.query(ProductCategory.name).all()}
    added = 0
    for item in CATEGORIES:
        if item["name"] in existing:
            continue
        db.add(ProductCategory(**item))
        added += 1
    logger.info("Added %d product categories", added)
    return added


def seed_database():
    db = SessionLocal()
    try:
        seed_admin(db)
        seed_categories(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    seed_database()
