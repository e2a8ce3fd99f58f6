"""
Tests for POST /api/reviews and the rating written back onto tests.
"""
from quiz_api import models


def review(client, test_id, rating, comment="ok"):
    response = client.post("/api/reviews", json={
        "test_id": str(test_id),
        "user_name": "Bob",
        "rating": rating,
        "comment": comment,
    })
    assert response.status_code == 200, response.text
    return response.json()


class TestAddReview:

    def test_review_is_approved_and_anonymous(self, client, quiz_factory):
        quiz = quiz_factory()

        body = review(client, quiz.id, 5, "Loved it")

        assert body["success"] is True
        assert body["data"]["rating"] == 5
        assert body["data"]["comment"] == "Loved it"
        assert body["data"]["is_approved"] is True
        assert body["data"]["user_id"] is None

    def test_rating_written_back(self, client, quiz_factory):
        quiz = quiz_factory()

        review(client, quiz.id, 5)
        detail = client.get(f"/api/tests/{quiz.id}").json()
        assert detail["average_rating"] == 5.0
        assert detail["review_count"] == 1

        review(client, quiz.id, 4)
        review(client, quiz.id, 4)
        detail = client.get(f"/api/tests/{quiz.id}").json()
        # 13 / 3
        assert detail["average_rating"] == 4.3
        assert detail["review_count"] == 3

    def test_unapproved_reviews_do_not_count(self, client, db, quiz_factory):
        quiz = quiz_factory()
        db.add(models.Review(test_id=quiz.id, rating=1, is_approved=False))
        db.commit()

        review(client, quiz.id, 4)

        db.expire_all()
        stored = db.get(models.Test, quiz.id)
        assert stored.average_rating == 4.0
        assert stored.review_count == 1
