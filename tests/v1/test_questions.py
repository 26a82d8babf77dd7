# tests/v1/test_questions.py
"""Tests for question endpoints."""

from fastapi import status

from question_bank.models import Category, Question


def _payload(employee, **overrides):
    payload = {
        "question_text": "Which planet is largest?",
        "question_writer_id": employee.employee_id,
        "question_type": "mcq",
        "difficulty_level": "medium",
        "options": [
            {"text": "Jupiter", "is_correct": True, "order": 1},
            {"text": "Mars", "order": 2},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_mcq_question_with_options(client, auth_token, employee) -> None:
    response = client.post("/api/v1/questions/", json=_payload(employee), headers=auth_token)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["question_type"] == "mcq"
    assert data["is_active"] is True
    assert [o["option_text"] for o in data["options"]] == ["Jupiter", "Mars"]
    assert data["options"][0]["is_correct"] is True
    assert data["options"][1]["is_correct"] is False


def test_true_false_question_ignores_options(client, auth_token, employee) -> None:
    response = client.post(
        "/api/v1/questions/",
        json=_payload(employee, question_type="true_false"),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["options"] == []


def test_create_question_validation(client, auth_token, employee) -> None:
    response = client.post(
        "/api/v1/questions/",
        json=_payload(employee, question_text=""),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    response = client.post(
        "/api/v1/questions/",
        json=_payload(employee, difficulty_level="impossible"),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    response = client.post(
        "/api/v1/questions/",
        json=_payload(employee, question_type="essay"),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_create_question_unknown_writer(client, auth_token, employee) -> None:
    response = client.post(
        "/api/v1/questions/",
        json=_payload(employee, question_writer_id=99999),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_question_mismatched_subcategory(
    client, auth_token, employee, subcategory, db_session
) -> None:
    other = Category(category_name="Science")
    db_session.add(other)
    db_session.commit()

    response = client.post(
        "/api/v1/questions/",
        json=_payload(
            employee,
            category_id=other.category_id,
            subcategory_id=subcategory.subcategory_id,
        ),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "does not belong" in response.json()["detail"]


def test_get_question(client, auth_token, test_question) -> None:
    response = client.get(f"/api/v1/questions/{test_question.question_id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["question_text"] == test_question.question_text
    assert [o["option_order"] for o in data["options"]] == [1, 2]


def test_get_nonexistent_question(client, auth_token) -> None:
    response = client.get("/api/v1/questions/99999", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_questions_filters(client, auth_token, employee, category, test_question) -> None:
    client.post(
        "/api/v1/questions/",
        json=_payload(employee, difficulty_level="hard", question_type="true_false"),
        headers=auth_token,
    )

    response = client.get("/api/v1/questions/", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 2

    response = client.get(
        "/api/v1/questions/",
        params={"category_id": category.category_id},
        headers=auth_token,
    )
    assert [q["question_id"] for q in response.json()] == [test_question.question_id]

    response = client.get("/api/v1/questions/", params={"difficulty": "hard"}, headers=auth_token)
    assert [q["question_type"] for q in response.json()] == ["true_false"]

    response = client.get("/api/v1/questions/", params={"type": "mcq"}, headers=auth_token)
    assert [q["question_id"] for q in response.json()] == [test_question.question_id]

    response = client.get(
        "/api/v1/questions/",
        params={"limit": 1, "offset": 1},
        headers=auth_token,
    )
    assert len(response.json()) == 1
    assert response.json()[0]["question_id"] != test_question.question_id


def test_update_question_fields(client, auth_token, test_question) -> None:
    response = client.put(
        f"/api/v1/questions/{test_question.question_id}",
        json={"question_text": "What is 25% of 40?", "difficulty_level": "medium"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["question_text"] == "What is 25% of 40?"
    assert data["difficulty_level"] == "medium"
    assert len(data["options"]) == 2


def test_update_question_replaces_options(client, auth_token, test_question) -> None:
    response = client.put(
        f"/api/v1/questions/{test_question.question_id}",
        json={
            "options": [
                {"text": "8", "order": 1},
                {"text": "10", "is_correct": True, "order": 2},
                {"text": "12", "order": 3},
            ]
        },
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK

    response = client.get(f"/api/v1/questions/{test_question.question_id}", headers=auth_token)
    options = response.json()["options"]
    assert [o["option_text"] for o in options] == ["8", "10", "12"]
    assert [o["is_correct"] for o in options] == [False, True, False]


def test_update_question_without_fields(client, auth_token, test_question) -> None:
    response = client.put(
        f"/api/v1/questions/{test_question.question_id}",
        json={},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "No valid fields provided for update"


def test_update_nonexistent_question(client, auth_token) -> None:
    response = client.put(
        "/api/v1/questions/99999",
        json={"question_text": "Anything"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_question_is_soft(client, auth_token, test_question, db_session) -> None:
    response = client.delete(f"/api/v1/questions/{test_question.question_id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK

    response = client.get(f"/api/v1/questions/{test_question.question_id}", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert db_session.get(Question, test_question.question_id) is not None

    response = client.delete(f"/api/v1/questions/{test_question.question_id}", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_question_score(client, auth_token, test_question) -> None:
    client.post(
        "/api/v1/votes/",
        json={"question_id": test_question.question_id, "vote_type": "upvote"},
        headers=auth_token,
    )
    response = client.get(
        f"/api/v1/questions/{test_question.question_id}/score",
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total_score"] == 101


def test_question_score_unknown_question(client, auth_token) -> None:
    response = client.get("/api/v1/questions/99999/score", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND
