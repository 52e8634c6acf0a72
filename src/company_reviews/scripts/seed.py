"""Seed the database with the demo company catalogue.

Run as ``python -m company_reviews.scripts.seed``. Seeding is skipped when any
company already exists. Seeded companies start with zero aggregates; ratings
appear once reviews are written.
"""
from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from company_reviews.core.logging import configure_logging
from company_reviews.db.session import SessionLocal, create_tables, drop_tables
from company_reviews.models import Company

logger = logging.getLogger(__name__)

DEMO_COMPANIES: tuple[dict[str, str], ...] = (
    {
        "name": "TechCorp",
        "industry": "Technology",
        "location": "San Francisco, CA",
        "description": (
            "Leading technology company specializing in software development, "
            "cloud solutions, and digital transformation."
        ),
        "website": "https://techcorp.com",
        "founded": "2010",
        "employees": "500-1000",
        "revenue": "$100M+",
    },
    {
        "name": "InnovateSoft",
        "industry": "Software Development",
        "location": "New York, NY",
        "description": (
            "Innovative software solutions for modern businesses. We help companies "
            "digitize and optimize their operations."
        ),
        "website": "https://innovatesoft.com",
        "founded": "2015",
        "employees": "200-500",
        "revenue": "$50M+",
    },
    {
        "name": "DataFlow",
        "industry": "Data Analytics",
        "location": "Austin, TX",
        "description": (
            "Advanced data analytics and business intelligence solutions. "
            "We turn data into actionable insights."
        ),
        "website": "https://dataflow.com",
        "founded": "2012",
        "employees": "100-250",
        "revenue": "$25M+",
    },
    {
        "name": "CloudTech",
        "industry": "Cloud Services",
        "location": "Seattle, WA",
        "description": (
            "Cloud infrastructure and platform services. "
            "We help businesses scale with reliable cloud solutions."
        ),
        "website": "https://cloudtech.com",
        "founded": "2018",
        "employees": "300-600",
        "revenue": "$75M+",
    },
    {
        "name": "MobileFirst",
        "industry": "Mobile Development",
        "location": "Boston, MA",
        "description": (
            "Mobile app development and consulting services. "
            "We create engaging mobile experiences."
        ),
        "website": "https://mobilefirst.com",
        "founded": "2016",
        "employees": "150-300",
        "revenue": "$30M+",
    },
    {
        "name": "SecureNet",
        "industry": "Cybersecurity",
        "location": "Washington, DC",
        "description": (
            "Enterprise cybersecurity and network protection. "
            "We keep your business safe in the digital world."
        ),
        "website": "https://securenet.com",
        "founded": "2013",
        "employees": "400-800",
        "revenue": "$90M+",
    },
)


def seed_companies(db: Session) -> int:
    """Insert the demo companies into an empty catalogue.

    Returns:
        Number of companies inserted (0 when the catalogue was not empty).
    """
    if db.query(Company.id).first() is not None:
        logger.info("Companies already exist, skipping seed")
        return 0

    db.add_all(Company(**entry) for entry in DEMO_COMPANIES)
    db.commit()
    logger.info("Inserted %d demo companies", len(DEMO_COMPANIES))
    return len(DEMO_COMPANIES)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create tables and seed demo companies")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before recreating and seeding them.",
    )
    args = parser.parse_args()

    configure_logging()
    try:
        if args.reset:
            drop_tables()
        create_tables()
        with SessionLocal() as db:
            seed_companies(db)
    except SQLAlchemyError as exc:
        print(f"[seed] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
