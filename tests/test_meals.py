"""
Tests for the meal ledger and summary endpoints.

Meal Ledger Flow
======================================

1. LOG A MEAL
   POST /api/meals   (Cookie: sessionId=<token>)
   {
       "name": "Grilled chicken salad",
       "description": "Mixed greens, grilled chicken and olive oil",
       "meal_date": "2024-01-01T12:00:00.000Z",
       "on_diet": true
   }
   Response: 201 Created, the stored meal

2. LIST / GET
   GET /api/meals          -> 200, newest meal_date first
   GET /api/meals/{id}     -> 200 or 404

3. EDIT / REMOVE
   PATCH /api/meals/{id}   -> 204, only the given fields change
   DELETE /api/meals/{id}  -> 204, a second delete gives 404

4. SUMMARY
   GET /api/meals/summary
   {"totalMeals": 5, "totalDietMeals": 3, "totalNotDietMeals": 2,
    "bestDietSequence": ["...", "..."]}
"""

import pytest

from test_fixtures import (
    client,
    auth,
    register,
    post_meal,
    unique_email,
    DAY_OF_MEALS,
    UNKNOWN_ID,
)
from repositories import MealRepository
from app.config import settings


@pytest.fixture
def token():
    return register(email=unique_email("john.doe"))


# =============================================================================
# CREATE
# =============================================================================


def test_create_meal(token):
    response = client.post(
        "/api/meals",
        json={
            "name": "Minha refeição favorita",
            "description": "Descrição da minha refeição favorita",
            "meal_date": "2024-01-01T10:00:00.000Z",
            "on_diet": True,
        },
        headers=auth(token),
    )

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {
        "id",
        "user_id",
        "name",
        "description",
        "meal_date",
        "on_diet",
        "created_at",
        "updated_at",
    }
    assert body["name"] == "Minha refeição favorita"
    assert body["description"] == "Descrição da minha refeição favorita"
    assert body["meal_date"] == "2024-01-01T10:00:00.000Z"
    assert body["on_diet"] is True

    me = client.get("/api/users/me", headers=auth(token)).json()
    assert body["user_id"] == me["id"]


def test_create_meal_normalizes_offset_to_utc(token):
    body = post_meal(token, meal_date="2024-01-01T09:30:00-03:00")

    assert body["meal_date"] == "2024-01-01T12:30:00.000Z"


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": ""}, "Param name: Must not be an empty value"),
        ({"description": ""}, "Param description: Must not be an empty value"),
        ({"meal_date": "invalid_date"}, "Param meal_date: Invalid date"),
        ({"on_diet": "invalid_boolean"}, "Param on_diet: Expected boolean"),
        ({"name": "x" * 256}, "Param name: Must be at most 255 characters"),
    ],
)
def test_create_meal_validation(token, overrides, message):
    payload = {
        "name": "Breakfast",
        "description": "Oats with banana",
        "meal_date": "2024-01-01T08:00:00.000Z",
        "on_diet": True,
    }
    payload.update(overrides)

    response = client.post("/api/meals", json=payload, headers=auth(token))

    assert response.status_code == 400
    assert response.json() == {"message": message}


# =============================================================================
# LIST / GET
# =============================================================================


def test_list_meals_newest_first(token):
    post_meal(token, name="Breakfast", meal_date="2024-01-01T08:00:00.000Z")
    post_meal(token, name="Dinner", meal_date="2024-01-01T18:00:00.000Z", on_diet=False)
    post_meal(token, name="Lunch", meal_date="2024-01-01T12:00:00.000Z")

    response = client.get("/api/meals", headers=auth(token))

    assert response.status_code == 200
    assert [m["name"] for m in response.json()] == ["Dinner", "Lunch", "Breakfast"]


def test_list_meals_only_own(token):
    post_meal(token, name="Mine")
    other = register(email=unique_email("other"))
    post_meal(other, name="Theirs")

    names = [m["name"] for m in client.get("/api/meals", headers=auth(token)).json()]

    assert names == ["Mine"]


def test_list_length_matches_summary_total(token):
    for meal in DAY_OF_MEALS:
        post_meal(token, **meal)

    meals = client.get("/api/meals", headers=auth(token)).json()
    summary = client.get("/api/meals/summary", headers=auth(token)).json()

    assert len(meals) == summary["totalMeals"] == len(DAY_OF_MEALS)


def test_get_meal(token):
    created = post_meal(token, name="Lunch", on_diet=False)

    response = client.get(f"/api/meals/{created['id']}", headers=auth(token))

    assert response.status_code == 200
    assert response.json() == created


def test_get_meal_not_found(token):
    response = client.get(f"/api/meals/{UNKNOWN_ID}", headers=auth(token))

    assert response.status_code == 404
    assert response.json() == {"message": "Meal not found"}


def test_get_meal_of_other_user_not_found(token):
    created = post_meal(token)
    other = register(email=unique_email("other"))

    response = client.get(f"/api/meals/{created['id']}", headers=auth(other))

    assert response.status_code == 404
    assert response.json() == {"message": "Meal not found"}


def test_get_meal_invalid_id(token):
    response = client.get("/api/meals/not-a-uuid", headers=auth(token))

    assert response.status_code == 400
    assert response.json() == {"message": "Param meal_id: Invalid uuid"}


# =============================================================================
# UPDATE
# =============================================================================


def test_update_meal_all_fields(token):
    created = post_meal(
        token, name="Lunch", meal_date="2024-01-01T12:00:00.000Z", on_diet=False
    )

    response = client.patch(
        f"/api/meals/{created['id']}",
        json={
            "name": "Lunch - updated",
            "description": "Lunch description - updated",
            "meal_date": "2024-01-01T05:00:00.000Z",
            "on_diet": True,
        },
        headers=auth(token),
    )

    assert response.status_code == 204
    assert response.content == b""
    updated = client.get(f"/api/meals/{created['id']}", headers=auth(token)).json()
    assert updated["name"] == "Lunch - updated"
    assert updated["description"] == "Lunch description - updated"
    assert updated["meal_date"] == "2024-01-01T05:00:00.000Z"
    assert updated["on_diet"] is True
    assert updated["user_id"] == created["user_id"]


def test_update_meal_only_name(token):
    created = post_meal(token, name="Lunch", on_diet=False)

    response = client.patch(
        f"/api/meals/{created['id']}", json={"name": "Late lunch"}, headers=auth(token)
    )

    assert response.status_code == 204
    updated = client.get(f"/api/meals/{created['id']}", headers=auth(token)).json()
    assert updated["name"] == "Late lunch"
    for field in ("description", "meal_date", "on_diet", "user_id", "created_at"):
        assert updated[field] == created[field]


def test_update_meal_validation(token):
    created = post_meal(token)

    response = client.patch(
        f"/api/meals/{created['id']}",
        json={"name": "Fine", "on_diet": "maybe"},
        headers=auth(token),
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Param on_diet: Expected boolean"}
    unchanged = client.get(f"/api/meals/{created['id']}", headers=auth(token)).json()
    assert unchanged["name"] == created["name"]


def test_update_meal_not_found(token):
    response = client.patch(
        f"/api/meals/{UNKNOWN_ID}", json={"name": "Ghost"}, headers=auth(token)
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Meal not found"}


# =============================================================================
# DELETE
# =============================================================================


def test_delete_meal_twice(token):
    created = post_meal(token)

    first = client.delete(f"/api/meals/{created['id']}", headers=auth(token))
    second = client.delete(f"/api/meals/{created['id']}", headers=auth(token))

    assert first.status_code == 204
    assert second.status_code == 404
    assert second.json() == {"message": "Meal not found"}
    assert client.get("/api/meals", headers=auth(token)).json() == []


def test_delete_meal_of_other_user_not_found(token):
    created = post_meal(token)
    other = register(email=unique_email("other"))

    response = client.delete(f"/api/meals/{created['id']}", headers=auth(other))

    assert response.status_code == 404
    assert client.get(f"/api/meals/{created['id']}", headers=auth(token)).status_code == 200


# =============================================================================
# SUMMARY
# =============================================================================


def test_summary_day_of_meals(token):
    """
    Register, log five meals (on, off, on, on, off) and read the summary:
    the 12:00 + 15:00 pair is the best on-diet sequence.
    """
    for meal in DAY_OF_MEALS:
        post_meal(token, **meal)

    response = client.get("/api/meals/summary", headers=auth(token))

    assert response.status_code == 200
    assert response.json() == {
        "totalMeals": 5,
        "totalDietMeals": 3,
        "totalNotDietMeals": 2,
        "bestDietSequence": [
            "Grilled chicken salad",
            "Chicken with broccoli and brown rice",
        ],
    }


def test_summary_empty(token):
    response = client.get("/api/meals/summary", headers=auth(token))

    assert response.json() == {
        "totalMeals": 0,
        "totalDietMeals": 0,
        "totalNotDietMeals": 0,
        "bestDietSequence": [],
    }


def test_summary_ignores_run_open_at_the_end(token):
    """
    Three on-diet meals and nothing after them: the run is never closed by
    an off-diet meal, so bestDietSequence is empty.
    """
    for hour in (8, 12, 18):
        post_meal(token, name=f"Meal {hour}", meal_date=f"2024-01-01T{hour:02d}:00:00Z")

    summary = client.get("/api/meals/summary", headers=auth(token)).json()

    assert summary["totalDietMeals"] == 3
    assert summary["bestDietSequence"] == []


def test_summary_trailing_run_when_enabled(token, monkeypatch):
    monkeypatch.setattr(settings, "summary_include_trailing_streak", True)
    for hour in (8, 12, 18):
        post_meal(token, name=f"Meal {hour}", meal_date=f"2024-01-01T{hour:02d}:00:00Z")

    summary = client.get("/api/meals/summary", headers=auth(token)).json()

    assert summary["bestDietSequence"] == ["Meal 8", "Meal 12", "Meal 18"]


# =============================================================================
# AUTHENTICATION
# =============================================================================


MEAL_ENDPOINTS = [
    ("get", "/api/meals"),
    ("get", "/api/meals/summary"),
    ("get", f"/api/meals/{UNKNOWN_ID}"),
    ("post", "/api/meals"),
    ("patch", f"/api/meals/{UNKNOWN_ID}"),
    ("delete", f"/api/meals/{UNKNOWN_ID}"),
]


@pytest.mark.parametrize("method, path", MEAL_ENDPOINTS)
@pytest.mark.parametrize("cookie", [None, UNKNOWN_ID])
def test_meal_endpoints_require_valid_session(method, path, cookie, monkeypatch):
    """
    Without a valid session every meal endpoint answers 401 and no meal
    query runs.
    """

    def _forbidden(*args, **kwargs):
        raise AssertionError("meal storage touched without a session")

    for attr in ("list_by_owner", "get_for_owner", "create_meal"):
        monkeypatch.setattr(MealRepository, attr, _forbidden)

    kwargs = {"headers": auth(cookie)}
    if method in ("post", "patch"):
        kwargs["json"] = {"name": ""}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
