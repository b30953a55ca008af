from app.models import BookingStatus, UserRole


def review_body(booking, reviewer, reviewed, rating, comment=None):
    return {
        "bookingId": booking.id,
        "reviewerId": reviewer.id,
        "reviewedUserId": reviewed.id,
        "rating": rating,
        "comment": comment,
    }


class TestCreateReview:
    def test_review_updates_sitter_rating(
        self, client, owner, sitter, make_booking, transport, metrics
    ):
        booking = make_booking(owner, sitter, BookingStatus.COMPLETED)

        response = client.post("/reviews", json=review_body(booking, owner, sitter, 4, "<b>great</b>"))

        assert response.status_code == 201
        data = response.json()
        assert data["comment"] == "&lt;b&gt;great&lt;/b&gt;"
        assert data["reviewer"]["id"] == owner.id

        user = client.get(f"/users/{sitter.id}").json()
        assert user["rating"] == 4.0
        assert user["reviewCount"] == 1
        assert transport.delivered == [(sitter.id, "REVIEW_RECEIVED")]
        assert metrics.rating_distribution[4] == 1

    def test_rating_is_mean_of_all_reviews(self, client, owner, sitter, make_user, make_booking):
        second_owner = make_user(UserRole.OWNER)
        client.post("/reviews", json=review_body(make_booking(owner, sitter), owner, sitter, 5))
        client.post(
            "/reviews", json=review_body(make_booking(second_owner, sitter), second_owner, sitter, 4)
        )
        client.post("/reviews", json=review_body(make_booking(owner, sitter), owner, sitter, 4))

        user = client.get(f"/users/{sitter.id}").json()
        assert user["rating"] == 4.3
        assert user["reviewCount"] == 3

    def test_rating_out_of_range(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        for rating in (0, 6):
            response = client.post("/reviews", json=review_body(booking, owner, sitter, rating))
            assert response.status_code == 400
            assert response.json()["detail"] == "Rating must be between 1 and 5"

    def test_same_reviewer_cannot_review_booking_twice(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        assert client.post("/reviews", json=review_body(booking, owner, sitter, 5)).status_code == 201

        response = client.post("/reviews", json=review_body(booking, owner, sitter, 1))

        assert response.status_code == 400
        assert response.json()["detail"] == "Review already exists for this booking"
        assert client.get(f"/users/{sitter.id}").json()["rating"] == 5.0

    def test_both_parties_can_review_the_same_booking(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        assert client.post("/reviews", json=review_body(booking, owner, sitter, 5)).status_code == 201
        assert client.post("/reviews", json=review_body(booking, sitter, owner, 4)).status_code == 201

    def test_booking_and_reviewer_must_exist(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        body = review_body(booking, owner, sitter, 5)

        response = client.post("/reviews", json={**body, "bookingId": 999})
        assert response.json()["detail"] == "Booking not found"

        response = client.post("/reviews", json={**body, "reviewerId": 999})
        assert response.json()["detail"] == "Reviewer not found"


class TestReviewChanges:
    def test_update_and_delete_recompute_rating(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        review_id = client.post("/reviews", json=review_body(booking, owner, sitter, 2)).json()["id"]

        client.put(f"/reviews/{review_id}", json={"rating": 5})
        assert client.get(f"/users/{sitter.id}").json()["rating"] == 5.0

        response = client.delete(f"/reviews/{review_id}")
        assert response.json() == {"message": "Review deleted successfully"}
        user = client.get(f"/users/{sitter.id}").json()
        assert user["rating"] == 0
        assert user["reviewCount"] == 0

    def test_update_rejects_bad_rating(self, client, owner, sitter, make_booking, make_review):
        review = make_review(make_booking(owner, sitter), owner, sitter, 3)
        assert client.put(f"/reviews/{review.id}", json={"rating": 9}).status_code == 400


class TestReviewQueries:
    def test_sitter_reviews_and_average(
        self, client, owner, sitter, make_user, make_booking, make_review
    ):
        other_owner = make_user(UserRole.OWNER)
        first = make_booking(owner, sitter)
        second = make_booking(owner, sitter)
        make_review(first, owner, sitter, 5)
        make_review(first, other_owner, sitter, 3)
        make_review(second, owner, sitter, 4)

        assert len(client.get(f"/reviews/sitter/{sitter.id}").json()) == 3
        assert len(client.get(f"/reviews/booking/{first.id}").json()) == 2
        assert client.get(f"/reviews/sitter/{sitter.id}/average-rating").json() == {
            "averageRating": 4.0,
            "totalReviews": 3,
        }

    def test_average_for_unreviewed_sitter(self, client, sitter):
        assert client.get(f"/reviews/sitter/{sitter.id}/average-rating").json() == {
            "averageRating": 0,
            "totalReviews": 0,
        }

    def test_missing_review(self, client):
        assert client.get("/reviews/1").status_code == 404
