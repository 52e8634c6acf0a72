# tests/v1/test_reviews.py
from typing import Any
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError


def test_create_review(client: Any, auth_token: Any, company: Any, review_payload: Any) -> None:
    res = client.post("/api/v1/reviews/", json=review_payload(company.id, rating=4.5), headers=auth_token)
    assert res.status_code == 201
    data = res.json()
    assert data["rating"] == 4.5
    assert data["author"]["first_name"] == "Alice"
    assert data["company"]["name"] == "TechCorp"
    assert data["helpful_votes"] == 0
    assert data["is_verified"] is False
    assert data["user_vote"] is None

    company_res = client.get(f"/api/v1/companies/{company.id}")
    assert company_res.json()["average_rating"] == 4.5
    assert company_res.json()["review_count"] == 1


def test_create_review_requires_auth(client: Any, company: Any, review_payload: Any) -> None:
    res = client.post("/api/v1/reviews/", json=review_payload(company.id))
    assert res.status_code in (401, 403)


def test_duplicate_review_returns_conflict(
    client: Any, auth_token: Any, test_review: Any, company: Any, review_payload: Any
) -> None:
    res = client.post("/api/v1/reviews/", json=review_payload(company.id, rating=1), headers=auth_token)
    assert res.status_code == 409
    assert "already reviewed" in res.json()["detail"]

    company_res = client.get(f"/api/v1/companies/{company.id}")
    assert company_res.json()["review_count"] == 1


def test_review_for_missing_company(client: Any, auth_token: Any, review_payload: Any) -> None:
    res = client.post("/api/v1/reviews/", json=review_payload(424242), headers=auth_token)
    assert res.status_code == 404


def test_review_validation(client: Any, auth_token: Any, company: Any, review_payload: Any) -> None:
    invalid = [
        review_payload(company.id, rating=0),
        review_payload(company.id, rating=5.5),
        review_payload(company.id, rating=3.3),
        review_payload(company.id, title="x" * 101),
        review_payload(company.id, comment="x" * 1001),
        review_payload(company.id, salary="amazing"),
        review_payload(company.id, employment_type="volunteer"),
        review_payload(company.id, helpful_votes=50),
        {k: v for k, v in review_payload(company.id).items() if k != "is_recommended"},
    ]
    for payload in invalid:
        res = client.post("/api/v1/reviews/", json=payload, headers=auth_token)
        assert res.status_code == 422, payload


def test_client_cannot_set_server_fields(
    client: Any, auth_token: Any, company: Any, review_payload: Any
) -> None:
    res = client.post(
        "/api/v1/reviews/",
        json=review_payload(company.id, is_verified=True),
        headers=auth_token,
    )
    assert res.status_code == 422


def test_get_review(client: Any, test_review: Any) -> None:
    res = client.get(f"/api/v1/reviews/{test_review.id}")
    assert res.status_code == 200
    assert res.json()["title"] == test_review.title


def test_get_missing_review(client: Any) -> None:
    assert client.get("/api/v1/reviews/55555").status_code == 404


def test_list_company_reviews_paginated(
    client: Any, make_user: Any, headers_for: Any, company: Any, review_payload: Any
) -> None:
    for rating in (2, 5, 3):
        client.post(
            "/api/v1/reviews/",
            json=review_payload(company.id, rating=rating),
            headers=headers_for(make_user()),
        )

    res = client.get(
        f"/api/v1/reviews/company/{company.id}",
        params={"limit": 2, "sort": "rating-desc"},
    )
    assert res.status_code == 200
    body = res.json()
    assert [r["rating"] for r in body["data"]] == [5, 3]
    assert body["pagination"] == {"current": 1, "total": 2, "limit": 2, "total_reviews": 3}

    res = client.get(
        f"/api/v1/reviews/company/{company.id}",
        params={"limit": 2, "page": 2, "sort": "rating-desc"},
    )
    assert [r["rating"] for r in res.json()["data"]] == [2]


def test_list_company_reviews_rejects_unknown_sort(client: Any, company: Any) -> None:
    res = client.get(f"/api/v1/reviews/company/{company.id}", params={"sort": "random"})
    assert res.status_code == 422


def test_list_reviews_for_missing_company(client: Any) -> None:
    assert client.get("/api/v1/reviews/company/9999").status_code == 404


def test_listing_shows_viewer_vote(
    client: Any, test_review: Any, other_auth_token: Any, company: Any
) -> None:
    client.post(
        f"/api/v1/reviews/{test_review.id}/vote",
        json={"vote": "helpful"},
        headers=other_auth_token,
    )

    mine = client.get(f"/api/v1/reviews/company/{company.id}", headers=other_auth_token)
    assert mine.json()["data"][0]["user_vote"] == "helpful"

    anonymous = client.get(f"/api/v1/reviews/company/{company.id}")
    assert anonymous.json()["data"][0]["user_vote"] is None

    single = client.get(f"/api/v1/reviews/{test_review.id}", headers=other_auth_token)
    assert single.json()["user_vote"] == "helpful"


def test_list_user_reviews(client: Any, test_review: Any, test_user: Any) -> None:
    res = client.get(f"/api/v1/reviews/user/{test_user.id}")
    assert res.status_code == 200
    body = res.json()
    assert [r["id"] for r in body["data"]] == [test_review.id]
    assert body["pagination"]["total_reviews"] == 1


def test_update_review_rating(client: Any, auth_token: Any, test_review: Any, company: Any) -> None:
    res = client.put(
        f"/api/v1/reviews/{test_review.id}",
        json={"rating": 2, "title": "Things changed"},
        headers=auth_token,
    )
    assert res.status_code == 200
    assert res.json()["title"] == "Things changed"

    company_res = client.get(f"/api/v1/companies/{company.id}")
    assert company_res.json()["average_rating"] == 2.0


def test_update_review_rejects_null_rating(client: Any, auth_token: Any, test_review: Any) -> None:
    res = client.put(f"/api/v1/reviews/{test_review.id}", json={"rating": None}, headers=auth_token)
    assert res.status_code == 422


def test_update_review_rejects_company_change(
    client: Any, auth_token: Any, test_review: Any, other_company: Any
) -> None:
    res = client.put(
        f"/api/v1/reviews/{test_review.id}",
        json={"company_id": other_company.id},
        headers=auth_token,
    )
    assert res.status_code == 422


def test_update_someone_elses_review(client: Any, other_auth_token: Any, test_review: Any) -> None:
    res = client.put(f"/api/v1/reviews/{test_review.id}", json={"rating": 1}, headers=other_auth_token)
    assert res.status_code == 403


def test_delete_review(client: Any, auth_token: Any, test_review: Any, company: Any) -> None:
    res = client.delete(f"/api/v1/reviews/{test_review.id}", headers=auth_token)
    assert res.status_code == 204
    assert client.get(f"/api/v1/reviews/{test_review.id}").status_code == 404

    company_res = client.get(f"/api/v1/companies/{company.id}")
    assert company_res.json()["review_count"] == 0
    assert company_res.json()["average_rating"] == 0.0


def test_delete_someone_elses_review(client: Any, other_auth_token: Any, test_review: Any) -> None:
    res = client.delete(f"/api/v1/reviews/{test_review.id}", headers=other_auth_token)
    assert res.status_code == 403


def test_admin_deletes_any_review(client: Any, admin_auth_token: Any, test_review: Any) -> None:
    res = client.delete(f"/api/v1/reviews/{test_review.id}", headers=admin_auth_token)
    assert res.status_code == 204


def test_delete_review_removes_its_votes(
    client: Any, auth_token: Any, other_auth_token: Any, test_review: Any, db_session: Any
) -> None:
    from company_reviews.models import ReviewVote

    client.post(
        f"/api/v1/reviews/{test_review.id}/vote",
        json={"vote": "unhelpful"},
        headers=other_auth_token,
    )
    client.delete(f"/api/v1/reviews/{test_review.id}", headers=auth_token)

    assert db_session.query(ReviewVote).filter_by(review_id=test_review.id).count() == 0


def test_create_succeeds_when_recompute_fails(
    client: Any, auth_token: Any, company: Any, review_payload: Any
) -> None:
    with patch(
        "company_reviews.services.aggregation.recompute_company_rating",
        side_effect=SQLAlchemyError("disk I/O error"),
    ):
        res = client.post("/api/v1/reviews/", json=review_payload(company.id), headers=auth_token)

    assert res.status_code == 201
    company_res = client.get(f"/api/v1/companies/{company.id}")
    assert company_res.json()["review_count"] == 0
