#!/usr/bin/env python3
"""
Seed script to create sample providers, offers and properties for local
development of the directory pages
"""
from datetime import timedelta
import uuid

from core.context import build_context
from core.exceptions import BaseCustomException
from database.connection import create_tables, get_db
from database.store import RowStore
from schemas.offer import OfferForm
from schemas.property import PropertyForm
from schemas.rating import RatingCreate
from schemas.service import ServiceListingForm
from services.listings import save_offer, save_property, save_service_listing
from services.rating import RatingService

SAMPLE_PROVIDERS = [
    {
        "service_name": "Cascais Plumbing",
        "description": "Leaks, boilers and bathroom renovations across the Cascais area.",
        "category_id": "home-services",
        "subcategory_id": "plumber",
        "location": "Cascais",
        "contact_email": "info@cascaisplumbing.pt",
        "phone": "912345678",
        "instagram": "@cascaisplumbing",
        "languages": ["pt", "en"],
    },
    {
        "service_name": "Estoril Yoga Studio",
        "description": "Morning and sunset classes by the sea.",
        "category_id": "wellness-beauty",
        "location": "Cascais",
        "contact_email": "hello@estorilyoga.pt",
        "phone": "934567812",
        "languages": ["en", "fr"],
    },
    {
        "service_name": "Carcavelos Legal",
        "description": "Residency permits, NIF and property contracts.",
        "category_id": "legal-bureaucracy",
        "location": "Carcavelos",
        "contact_email": "office@carcaveloslegal.pt",
        "phone": "961234567",
        "linkedin": "company/carcavelos-legal",
        "languages": ["pt", "en", "es"],
    },
]

SAMPLE_PROPERTIES = [
    {
        "buy_rent": "buy",
        "property_type": "apartment",
        "title": "T2 with sea view in Cascais centre",
        "location": "Cascais",
        "description": "Renovated two-bedroom apartment five minutes from the beach.",
        "price": "450 000",
        "bedrooms": 2,
        "bathrooms": 2,
        "usable_area": "95",
        "condition": "renovado",
        "furnished": "partial",
        "contact_name": "Ana Silva",
        "contact_email": "ana@example.pt",
    },
    {
        "buy_rent": "rent",
        "property_type": "house",
        "title": "Family house with garden",
        "location": "Alcabideche",
        "description": "Four-bedroom house with garden and garage.",
        "price": "3200",
        "bedrooms": 4,
        "bathrooms": 3,
        "usable_area": "220",
        "contact_name": "Rui Costa",
        "contact_email": "rui@example.pt",
    },
    {
        "buy_rent": "buy",
        "property_type": "land",
        "title": "Building plot near Alcabideche",
        "location": "Alcabideche",
        "description": "Plot with approved project for a single-family house.",
        "price": "180000",
        "land_area": "1200",
        "contact_name": "Ana Silva",
        "contact_email": "ana@example.pt",
    },
]


def create_sample_directory():
    """Create sample directory data for testing"""
    create_tables()
    db = next(get_db())
    store = RowStore(db)

    try:
        service_ids = []
        for provider in SAMPLE_PROVIDERS:
            ctx = build_context(user_id=str(uuid.uuid4()))
            service = save_service_listing(store, ctx, ServiceListingForm(**provider))
            service_ids.append(service.id)
            print(f"✅ Created provider: {service.name}")

            offer = save_offer(store, ctx, OfferForm(
                title=f"{service.name}: first visit discount",
                description="Valid for new customers.",
                category_id=provider["category_id"],
                service_name=service.name,
                location=provider["location"],
                original_price="60",
                discounted_price="45",
                valid_until=(ctx.today + timedelta(days=30)).isoformat(),
                contact_email=provider["contact_email"],
                phone=provider["phone"],
                languages=provider["languages"],
            ))
            print(f"✅ Created offer: {offer.title}")

        for score, service_id in zip((5, 4, 3), service_ids):
            ctx = build_context(user_id=str(uuid.uuid4()))
            RatingService.submit_rating(store, ctx, service_id, RatingCreate(
                work_quality=score, punctuality=score, comment="Great service"
            ))

        for listing in SAMPLE_PROPERTIES:
            ctx = build_context(user_id=str(uuid.uuid4()))
            prop = save_property(store, ctx, PropertyForm(**listing))
            print(f"✅ Created property: {prop.title}")

        print("\n🎉 Sample directory created successfully!")

    except BaseCustomException as e:
        print(f"❌ Error creating sample directory: {e.message}")
    finally:
        db.close()

if __name__ == "__main__":
    create_sample_directory()
