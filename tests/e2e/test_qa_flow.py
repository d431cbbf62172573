"""End-to-end tests for asking, answering, reacting and accepting."""

from uuid import uuid4

from tests.conftest import auth_headers
from tests.harness import create_client_fixture

client = create_client_fixture()


def _ask(client, headers, title="How do I reverse a list?"):
    response = client.post(
        "/questions",
        json={"title": title, "body": "I want it backwards.", "tags": ["python"]},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def _answer(client, question_id, headers, body="Use reversed()."):
    response = client.post(
        f"/questions/{question_id}/answers", json={"body": body}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


class TestQuestionLifecycle:
    """Questions from creation to deletion."""

    def test_health(self, client):
        """Health reports the service is up."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ask_requires_auth(self, client):
        """Anonymous users cannot ask."""
        response = client.post(
            "/questions", json={"title": "Anyone?", "body": "Hello"}
        )

        assert response.status_code == 401

    def test_ask_then_view(self, client):
        """Viewing a question counts and shows its answers."""
        asker = auth_headers(uuid4(), "alice")
        question = _ask(client, asker)
        _answer(client, question["question_id"], auth_headers(uuid4(), "bob"))

        response = client.get(f"/questions/{question['question_id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["question"]["views"] == 1
        assert data["question"]["answer_count"] == 1
        assert len(data["answers"]) == 1

    def test_list_and_search(self, client):
        """Listing supports search across titles."""
        headers = auth_headers(uuid4())
        _ask(client, headers, title="Asyncio deadlock")
        _ask(client, headers, title="Pandas groupby")

        response = client.get("/questions", params={"search": "asyncio"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["questions"][0]["title"] == "Asyncio deadlock"

    def test_unknown_question_is_404(self, client):
        """Missing questions map to 404."""
        response = client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404

    def test_only_author_deletes(self, client):
        """Deleting someone else's question is forbidden."""
        asker = auth_headers(uuid4())
        question = _ask(client, asker)
        url = f"/questions/{question['question_id']}"

        assert client.delete(url, headers=auth_headers(uuid4())).status_code == 403
        assert client.delete(url, headers=asker).status_code == 200
        assert client.get(url).status_code == 404


class TestAnswersAndAcceptance:
    """Answering and accepting."""

    def test_duplicate_answer_is_400(self, client):
        """One answer per user per question."""
        question = _ask(client, auth_headers(uuid4()))
        helper = auth_headers(uuid4())
        _answer(client, question["question_id"], helper)

        response = client.post(
            f"/questions/{question['question_id']}/answers",
            json={"body": "Again"},
            headers=helper,
        )

        assert response.status_code == 400

    def test_accept_moves_between_answers(self, client):
        """Accepting another answer unaccepts the first."""
        asker = auth_headers(uuid4())
        question = _ask(client, asker)
        first = _answer(client, question["question_id"], auth_headers(uuid4()))
        second = _answer(client, question["question_id"], auth_headers(uuid4()))

        client.put(f"/answers/{first['answer_id']}/accept", headers=asker)
        response = client.put(f"/answers/{second['answer_id']}/accept", headers=asker)

        assert response.status_code == 200
        assert response.json()["is_accepted"]
        answers = client.get(f"/questions/{question['question_id']}/answers").json()
        accepted = [a["answer_id"] for a in answers["answers"] if a["is_accepted"]]
        assert accepted == [second["answer_id"]]
        detail = client.get(f"/questions/{question['question_id']}").json()
        assert detail["question"]["accepted_answer_id"] == second["answer_id"]
        assert detail["question"]["is_answered"]

    def test_non_author_accept_is_403(self, client):
        """Only the asker accepts."""
        question = _ask(client, auth_headers(uuid4()))
        helper = auth_headers(uuid4())
        answer = _answer(client, question["question_id"], helper)

        response = client.put(f"/answers/{answer['answer_id']}/accept", headers=helper)

        assert response.status_code == 403


class TestReactions:
    """Votes and likes over HTTP."""

    def test_vote_toggle_and_switch(self, client):
        """Up, up again, then down ends as a single downvote."""
        question = _ask(client, auth_headers(uuid4()))
        voter = auth_headers(uuid4())
        url = f"/votes/question/{question['question_id']}"

        up = client.post(url, json={"vote_type": "upvote"}, headers=voter).json()
        retracted = client.post(url, json={"vote_type": "upvote"}, headers=voter).json()
        down = client.post(url, json={"vote_type": "downvote"}, headers=voter).json()

        assert (up["vote_count"], up["user_vote"]) == (1, "upvoted")
        assert (retracted["vote_count"], retracted["user_vote"]) == (0, "none")
        assert (down["vote_count"], down["user_vote"]) == (-1, "downvoted")

    def test_invalid_vote_type_is_400(self, client):
        """Unknown vote types are rejected."""
        question = _ask(client, auth_headers(uuid4()))

        response = client.post(
            f"/votes/question/{question['question_id']}",
            json={"vote_type": "sideways"},
            headers=auth_headers(uuid4()),
        )

        assert response.status_code == 400
        assert "sideways" in response.json()["detail"]

    def test_vote_requires_auth(self, client):
        """Anonymous votes are refused."""
        response = client.post(
            f"/votes/answer/{uuid4()}", json={"vote_type": "upvote"}
        )

        assert response.status_code == 401

    def test_like_answer_toggles(self, client):
        """A second like removes the first."""
        question = _ask(client, auth_headers(uuid4()))
        answer = _answer(client, question["question_id"], auth_headers(uuid4()))
        fan = auth_headers(uuid4())
        url = f"/answers/{answer['answer_id']}/like"

        liked = client.post(url, headers=fan).json()
        unliked = client.post(url, headers=fan).json()

        assert liked["outcome"] == "liked"
        assert liked["answer"]["like_count"] == 1
        assert unliked["outcome"] == "unliked"
        assert unliked["answer"]["like_count"] == 0


class TestComments:
    """Comments over HTTP."""

    def test_comment_needs_exactly_one_target(self, client):
        """Both parents at once is a 400."""
        question = _ask(client, auth_headers(uuid4()))
        answer = _answer(client, question["question_id"], auth_headers(uuid4()))

        response = client.post(
            "/comments",
            json={
                "body": "Which one?",
                "question_id": question["question_id"],
                "answer_id": answer["answer_id"],
            },
            headers=auth_headers(uuid4()),
        )

        assert response.status_code == 400

    def test_comment_and_list(self, client):
        """Comments show up under their answer."""
        question = _ask(client, auth_headers(uuid4()))
        answer = _answer(client, question["question_id"], auth_headers(uuid4()))

        created = client.post(
            "/comments",
            json={"body": "Nice trick", "answer_id": answer["answer_id"]},
            headers=auth_headers(uuid4()),
        )
        listed = client.get("/comments", params={"answer_id": answer["answer_id"]})

        assert created.status_code == 201
        assert [c["body"] for c in listed.json()["comments"]] == ["Nice trick"]
