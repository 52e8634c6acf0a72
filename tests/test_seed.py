"""Tests for the demo catalogue seed."""

from company_reviews.models import Company
from company_reviews.scripts.seed import DEMO_COMPANIES, seed_companies


def test_seed_inserts_demo_companies(db_session) -> None:
    assert seed_companies(db_session) == len(DEMO_COMPANIES)

    companies = db_session.query(Company).all()
    assert {c.name for c in companies} == {entry["name"] for entry in DEMO_COMPANIES}
    assert all(c.review_count == 0 and c.average_rating == 0.0 for c in companies)


def test_seed_skips_non_empty_catalogue(db_session, company) -> None:
    assert seed_companies(db_session) == 0
    assert db_session.query(Company).count() == 1
