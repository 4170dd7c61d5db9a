#!/usr/bin/env python3
"""
Seed the designs table with deterministic random data.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: safe to run multiple times (clears before seeding)
- Roughly a third of the designs carry a loan offer

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_designs.py
"""

from __future__ import annotations

import logging
import random
import sys
from decimal import Decimal

from sqlalchemy import delete

from construct_lite.infra.db.models import DesignRow
from construct_lite.infra.db.session import get_session

logger = logging.getLogger("seed_designs")


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_DESIGNS = 30
LOAN_OFFER_RATIO = 0.35


# ==============================================================================
# Catalog Data
# ==============================================================================

# Price per square meter (PHP) and floor area band per category
CATEGORIES = {
    "residential": {
        "styles": ["Bungalow", "Two-Storey House", "Townhouse", "Modern Farmhouse", "Loft Home"],
        "price_per_sqm": (Decimal("28000"), Decimal("42000")),
        "area": (45, 220),
    },
    "commercial": {
        "styles": ["Retail Row", "Cafe Shell", "Showroom", "Mixed-Use Building"],
        "price_per_sqm": (Decimal("35000"), Decimal("55000")),
        "area": (80, 600),
    },
    "office": {
        "styles": ["Office Fit-Out", "Co-Working Floor", "Clinic Suite"],
        "price_per_sqm": (Decimal("30000"), Decimal("48000")),
        "area": (60, 400),
    },
    "industrial": {
        "styles": ["Warehouse", "Light Factory", "Cold Storage"],
        "price_per_sqm": (Decimal("18000"), Decimal("30000")),
        "area": (300, 2000),
    },
    "custom": {
        "styles": ["Custom Residence", "Resort Villa", "Chapel"],
        "price_per_sqm": (Decimal("40000"), Decimal("65000")),
        "area": (90, 500),
    },
}

ADJECTIVES = ["Azure", "Maple", "Coral", "Summit", "Harbor", "Cedar", "Luna", "Terra"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def calculate_price(category: str, square_meters: int) -> Decimal:
    """Floor area times a random rate for the category, rounded to the nearest 10,000."""
    low, high = CATEGORIES[category]["price_per_sqm"]
    rate = Decimal(random.randint(int(low), int(high)))
    return ((rate * square_meters) / 10000).quantize(Decimal("1")) * 10000


def generate_loan_offer(price: Decimal) -> dict[str, object]:
    if random.random() >= LOAN_OFFER_RATIO:
        return {"is_loan_offer": False}

    loan_term_type = random.choice(["years", "months"])
    if loan_term_type == "years":
        max_loan_term = random.choice([5, 10, 15, 20])
        interest_rate = Decimal(random.choice(["6.5", "8", "10", "12"]))
        interest_rate_type = "yearly"
    else:
        max_loan_term = random.choice([12, 24, 36, 60])
        interest_rate = Decimal(random.choice(["0.5", "0.75", "1"]))
        interest_rate_type = "monthly"

    estimated_downpayment = None
    if random.random() < 0.5:
        estimated_downpayment = (price * Decimal(random.choice(["0.15", "0.25", "0.30"]))).quantize(
            Decimal("0.01")
        )

    return {
        "is_loan_offer": True,
        "max_loan_term": max_loan_term,
        "loan_term_type": loan_term_type,
        "interest_rate": interest_rate,
        "interest_rate_type": interest_rate_type,
        "estimated_downpayment": estimated_downpayment,
    }


def generate_design(index: int) -> DesignRow:
    category = random.choice(list(CATEGORIES))
    style = random.choice(CATEGORIES[category]["styles"])
    low_area, high_area = CATEGORIES[category]["area"]
    square_meters = random.randint(low_area, high_area)
    number_of_rooms = max(1, square_meters // random.randint(25, 45))
    price = calculate_price(category, square_meters)
    name = f"{random.choice(ADJECTIVES)} {style}"

    return DesignRow(
        design_code=f"{category[:3].upper()}-{index:04d}",
        name=name,
        description=f"{square_meters} sqm {style.lower()} with {number_of_rooms} rooms.",
        price=price,
        number_of_rooms=number_of_rooms,
        square_meters=Decimal(square_meters),
        category=category,
        images=[f"https://images.construct-lite.local/designs/{category}-{index:04d}.jpg"],
        created_by="Admin",
        **generate_loan_offer(price),
    )


def seed_designs(num_designs: int = NUM_DESIGNS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random designs.

    Args:
        num_designs: Number of designs to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    logger.info("Seeding designs", extra={"num_designs": num_designs, "seed": seed})

    with get_session() as session:
        deleted = session.execute(delete(DesignRow)).rowcount
        logger.info("Cleared existing designs", extra={"deleted": deleted})

        designs = [generate_design(i) for i in range(1, num_designs + 1)]
        session.add_all(designs)
        session.flush()

        offered = sum(1 for d in designs if d.is_loan_offer)
        logger.info(
            "Designs seeded",
            extra={"inserted": len(designs), "loan_offers": offered},
        )
        for design in designs[:5]:
            logger.info(
                "%s %s (%s) PHP %s%s",
                design.design_code,
                design.name,
                design.category,
                f"{design.price:,.2f}",
                " [loan offer]" if design.is_loan_offer else "",
            )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        seed_designs()
    except Exception:
        logger.exception("Error seeding database")
        sys.exit(1)
