"""Demo data loaded at startup when SEED_DEMO_DATA is on."""
import logging
from datetime import datetime, timezone

from closet.domain.admin.models import User
from closet.domain.common.types import utcnow
from closet.domain.market.models import Listing
from closet.infra.db.session import Database
from closet.infra.security.password import get_password_hash

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


def _demo_listings(seller_id: int) -> list[Listing]:
    now = utcnow()
    return [
        Listing(
            seller_id=seller_id,
            brand="Reformation",
            title="Silk Midi Dress",
            description="Beautiful silk midi dress in perfect condition. Worn only twice.",
            category="Cocktail",
            size="M",
            condition="Like New",
            buttons_price=85,
            original_price=298,
            images=["https://images.pexels.com/photos/1926769/pexels-photo-1926769.jpeg"],
            views=234,
            likes=42,
            created_at=datetime(2025, 1, 15, tzinfo=timezone.utc),
            tags=["silk", "midi", "cocktail"],
        ),
        Listing(
            seller_id=seller_id,
            brand="Zimmermann",
            title="Floral Maxi Dress",
            description="Stunning floral maxi dress, perfect for summer events.",
            category="Evening",
            size="S",
            condition="Excellent",
            buttons_price=120,
            original_price=550,
            images=["https://images.pexels.com/photos/1055691/pexels-photo-1055691.jpeg"],
            views=189,
            likes=56,
            created_at=datetime(2025, 1, 20, tzinfo=timezone.utc),
            tags=["floral", "maxi", "evening"],
        ),
        Listing(
            seller_id=seller_id,
            brand="Self Portrait",
            title="Lace Mini Dress",
            description="Intricate lace details, perfect for weddings.",
            category="Cocktail",
            size="S",
            condition="Good",
            buttons_price=95,
            original_price=350,
            images=["https://images.pexels.com/photos/291759/pexels-photo-291759.jpeg?auto=compress&cs=tinysrgb&w=400"],
            views=120,
            likes=30,
            created_at=now,
            tags=["lace", "mini"],
        ),
        Listing(
            seller_id=seller_id,
            brand="Ganni",
            title="Summer Wrap Dress",
            description="Lightweight and flowy, great for casual days.",
            category="Casual",
            size="L",
            condition="Like New",
            buttons_price=55,
            original_price=180,
            images=["https://images.pexels.com/photos/985635/pexels-photo-985635.jpeg?auto=compress&cs=tinysrgb&w=400"],
            views=85,
            likes=15,
            created_at=now,
            tags=["summer", "wrap"],
        ),
    ]


def seed_demo_data(db: Database) -> User:
    """Create the demo seller and their listings. Returns the seller."""
    seller = db.users.create(
        User(
            username="fashionista_sarah",
            email="sarah@example.com",
            password_hash=get_password_hash(DEMO_PASSWORD),
            buttons=250,
            bio="Fashion lover & sustainable style advocate",
            followers=145,
            following=98,
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
    )
    for listing in _demo_listings(seller.id):
        db.listings.create(listing)

    logger.info(f"Seeded demo seller {seller.username} with {db.listings.count()} listings")
    return seller
