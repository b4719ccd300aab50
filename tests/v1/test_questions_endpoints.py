# tests/v1/test_questions_endpoints.py
"""Tests for question endpoints."""

from fastapi import status


def test_create_question(client, asker_headers) -> None:
    response = client.post(
        "/api/v1/questions",
        json={
            "title": "Why is my session detached?",
            "description": "DetachedInstanceError after commit.",
            "tags": ["SQLAlchemy", "python", "python"],
        },
        headers=asker_headers,
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["author"] == "asker"
    assert body["tags"] == ["python", "sqlalchemy"]
    assert body["answerCount"] == 0
    assert body["views"] == 0
    assert body["acceptedAnswerId"] is None


def test_create_question_requires_auth(client) -> None:
    response = client.post(
        "/api/v1/questions",
        json={"title": "t", "description": "d"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_question_rejects_missing_title(client, asker_headers) -> None:
    response = client.post(
        "/api/v1/questions",
        json={"description": "no title"},
        headers=asker_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_list_with_search_tag_and_sort(client, asker, make_question) -> None:
    make_question(asker, "Async sessions", tags=("sqlalchemy",), answer_count=1)
    make_question(asker, "Async views", tags=("django",))
    make_question(asker, "Async engines", tags=("sqlalchemy",), answer_count=4)

    response = client.get(
        "/api/v1/questions",
        params={"search": "ASYNC", "tag": "sqlalchemy", "sortBy": "most-answers"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert [q["title"] for q in response.json()] == ["Async engines", "Async sessions"]


def test_list_unanswered(client, asker, make_question) -> None:
    make_question(asker, "older open question")
    make_question(asker, "answered", answer_count=2)
    make_question(asker, "newer open question")

    response = client.get("/api/v1/questions", params={"sortBy": "unanswered"})
    assert [q["title"] for q in response.json()] == ["newer open question", "older open question"]


def test_list_rejects_unknown_sort(client) -> None:
    response = client.get("/api/v1/questions", params={"sortBy": "random"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_question(client, question) -> None:
    response = client.get(f"/api/v1/questions/{question.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == question.id
    assert response.json()["tags"] == ["python", "sqlalchemy"]


def test_get_missing_question(client) -> None:
    response = client.get("/api/v1/questions/8080")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"detail": "Question not found", "code": "not_found"}


def test_increment_views(client, question) -> None:
    for _ in range(3):
        response = client.patch(f"/api/v1/questions/{question.id}/views")
        assert response.json() == {"message": "Views incremented"}

    assert client.get(f"/api/v1/questions/{question.id}").json()["views"] == 3


def test_increment_views_missing(client) -> None:
    response = client.patch("/api/v1/questions/9999/views")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_related_questions(client, asker, question, make_question) -> None:
    make_question(asker, "shares python", tags=("python",), views=10)
    make_question(asker, "shares sqlalchemy", tags=("sqlalchemy",), views=20)
    make_question(asker, "shares nothing", tags=("go",), views=100)

    response = client.get(f"/api/v1/questions/{question.id}/related")

    titles = [q["title"] for q in response.json()]
    assert titles == ["shares sqlalchemy", "shares python"]


def test_related_limit(client, asker, question, make_question) -> None:
    for n in range(4):
        make_question(asker, f"related {n}", tags=("python",), views=n)

    response = client.get(f"/api/v1/questions/{question.id}/related", params={"limit": 2})
    assert [q["title"] for q in response.json()] == ["related 3", "related 2"]

    too_many = client.get(f"/api/v1/questions/{question.id}/related", params={"limit": 50})
    assert too_many.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
