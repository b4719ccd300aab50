# tests/v1/test_answers_endpoints.py
"""Tests for answer endpoints, acceptance included."""

from fastapi import status


def test_post_answer(client, voter_headers, question) -> None:
    response = client.post(
        "/api/v1/answers",
        json={"questionId": question.id, "content": "Wrap it in a transaction."},
        headers=voter_headers,
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["questionId"] == question.id
    assert body["author"] == "voter"
    assert body["votes"] == 0
    assert body["isAccepted"] is False

    question_body = client.get(f"/api/v1/questions/{question.id}").json()
    assert question_body["answerCount"] == 1


def test_post_answer_to_missing_question(client, voter_headers) -> None:
    response = client.post(
        "/api/v1/answers",
        json={"questionId": 4040, "content": "hello?"},
        headers=voter_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_post_answer_requires_content(client, voter_headers, question) -> None:
    response = client.post(
        "/api/v1/answers",
        json={"questionId": question.id, "content": ""},
        headers=voter_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_answering_enough_questions_unlocks_voting(client, newcomer, newcomer_headers, question, answer) -> None:
    """A user at one answer is blocked, and one more answer lifts the gate."""
    blocked = client.post(
        "/api/v1/votes",
        json={"answerId": answer.id, "voteType": "up"},
        headers=newcomer_headers,
    )
    assert blocked.status_code == status.HTTP_403_FORBIDDEN

    client.post(
        "/api/v1/answers",
        json={"questionId": question.id, "content": "A second answer."},
        headers=newcomer_headers,
    )
    allowed = client.post(
        "/api/v1/votes",
        json={"answerId": answer.id, "voteType": "up"},
        headers=newcomer_headers,
    )
    assert allowed.status_code == status.HTTP_200_OK


def test_accept_then_switch(client, asker_headers, voter, question, answer, make_answer) -> None:
    other = make_answer(question, voter, "Better answer.")

    first = client.patch(f"/api/v1/answers/{answer.id}/accept", headers=asker_headers)
    assert first.status_code == status.HTTP_200_OK
    assert first.json() == {"message": "Answer accepted"}

    client.patch(f"/api/v1/answers/{other.id}/accept", headers=asker_headers)

    answers = client.get(f"/api/v1/answers/question/{question.id}").json()
    assert [a["id"] for a in answers if a["isAccepted"]] == [other.id]
    assert answers[0]["id"] == other.id
    assert client.get(f"/api/v1/questions/{question.id}").json()["acceptedAnswerId"] == other.id


def test_accept_by_non_owner(client, voter_headers, answer) -> None:
    response = client.patch(f"/api/v1/answers/{answer.id}/accept", headers=voter_headers)

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Only question owner can accept answers"


def test_accept_missing_answer(client, asker_headers) -> None:
    response = client.patch("/api/v1/answers/5150/accept", headers=asker_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_voting_and_acceptance_scenario(client, make_user, auth_headers_for, asker_headers, voter_headers, question, answer) -> None:
    """Up, up, down from one voter moves the score 1, 0, -1; then the asker accepts."""
    scores = []
    for direction in ("up", "up", "down"):
        response = client.post(
            "/api/v1/votes",
            json={"answerId": answer.id, "voteType": direction},
            headers=voter_headers,
        )
        scores.append(response.json()["votes"])
    assert scores == [1, 0, -1]

    second_voter = make_user(answer_count=3)
    response = client.post(
        "/api/v1/votes",
        json={"answerId": answer.id, "voteType": "down"},
        headers=auth_headers_for(second_voter),
    )
    assert response.json()["votes"] == -2

    client.patch(f"/api/v1/answers/{answer.id}/accept", headers=asker_headers)
    listed = client.get(f"/api/v1/answers/question/{question.id}").json()
    assert listed[0] == {**listed[0], "id": answer.id, "isAccepted": True, "votes": -2}
