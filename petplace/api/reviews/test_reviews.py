# petplace/api/reviews/test_reviews.py
import pytest


@pytest.fixture
def place_id(seed_place):
    return seed_place("멍멍 카페", "대구 수성구 동대구로 1").place_id


def _place(client, place_id):
    return client.get(f'/api/places/{place_id}').get_json()['data']


def test_create_review_updates_place_aggregate(client, register_user, place_id):
    _, alice = register_user("alice")
    _, bob = register_user("bob")

    first = client.post(f'/api/places/{place_id}/reviews', json={"rating": 5, "content": "좋아요"}, headers=alice)
    assert first.status_code == 201
    assert first.get_json()['data']['author']['nickname'] == "alice-nick"
    client.post(f'/api/places/{place_id}/reviews', json={"rating": 2}, headers=bob)

    place = _place(client, place_id)
    assert place['reviewCount'] == 2
    assert place['avgRating'] == 3.5

    reviews = client.get(f'/api/places/{place_id}/reviews').get_json()['data']
    assert len(reviews) == 2


def test_review_requires_rating(client, auth_headers, place_id):
    response = client.post(f'/api/places/{place_id}/reviews', json={"content": "별점 없음"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['details']['rating'] == ["별점을 선택해주세요."]


def test_review_content_limit(client, auth_headers, place_id):
    response = client.post(f'/api/places/{place_id}/reviews', json={"rating": 3, "content": "가" * 501}, headers=auth_headers)
    assert response.status_code == 400


def test_review_for_unknown_place(client, auth_headers):
    response = client.post('/api/places/nowhere/reviews', json={"rating": 3}, headers=auth_headers)
    assert response.status_code == 404
    assert client.get('/api/places/nowhere/reviews').status_code == 404


def test_only_author_can_edit_or_delete(client, register_user, place_id):
    _, alice = register_user("alice")
    _, bob = register_user("bob")
    review_id = client.post(f'/api/places/{place_id}/reviews', json={"rating": 4}, headers=alice).get_json()['data']['reviewId']

    assert client.put(f'/api/reviews/{review_id}', json={"rating": 1}, headers=bob).status_code == 403
    assert client.delete(f'/api/reviews/{review_id}', headers=bob).status_code == 403
    assert _place(client, place_id)['avgRating'] == 4.0


def test_update_and_delete_adjust_aggregate(client, auth_headers, place_id):
    review_id = client.post(f'/api/places/{place_id}/reviews', json={"rating": 2}, headers=auth_headers).get_json()['data']['reviewId']

    updated = client.put(f'/api/reviews/{review_id}', json={"rating": 5, "content": "다시 가보니 최고"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.get_json()['data']['content'] == "다시 가보니 최고"
    assert _place(client, place_id)['avgRating'] == 5.0

    assert client.delete(f'/api/reviews/{review_id}', headers=auth_headers).status_code == 200
    place = _place(client, place_id)
    assert place['reviewCount'] == 0
    assert place['avgRating'] == 0.0
    assert client.delete(f'/api/reviews/{review_id}', headers=auth_headers).status_code == 404


def _overlap_once(monkeypatch, review_service, concurrent_call):
    """첫 번째 집계 보정 직전에 다른 요청 하나가 먼저 끝나도록 끼워 넣습니다."""
    original = review_service.place_repository.update_counters
    state = {'fired': False}

    def update_counters(writer, *args, **kwargs):
        if not state['fired']:
            state['fired'] = True
            concurrent_call()
        return original(writer, *args, **kwargs)

    monkeypatch.setattr(review_service.place_repository, 'update_counters', update_counters)


def test_concurrent_deletes_decrement_aggregate_once(app, client, register_user, place_id, monkeypatch):
    """같은 리뷰를 동시에 두 번 삭제해도 리뷰 수는 음수가 되지 않아야 함"""
    user_id, headers = register_user("alice")
    review_id = client.post(f'/api/places/{place_id}/reviews', json={"rating": 4}, headers=headers).get_json()['data']['reviewId']
    review_service = app.services['reviews']
    _overlap_once(monkeypatch, review_service, lambda: review_service.delete_review(review_id, user_id))

    with pytest.raises(FileNotFoundError):
        review_service.delete_review(review_id, user_id)

    place = _place(client, place_id)
    assert place['reviewCount'] == 0
    assert place['avgRating'] == 0.0


def test_concurrent_updates_adjust_from_latest_rating(app, client, register_user, place_id, monkeypatch):
    """동시 수정은 먼저 반영된 별점을 기준으로 다시 계산되어야 함"""
    user_id, headers = register_user("alice")
    review_id = client.post(f'/api/places/{place_id}/reviews', json={"rating": 1}, headers=headers).get_json()['data']['reviewId']
    review_service = app.services['reviews']
    _overlap_once(monkeypatch, review_service, lambda: review_service.update_review(review_id, user_id, {"rating": 3}))

    updated = review_service.update_review(review_id, user_id, {"rating": 5})

    assert updated['rating'] == 5
    place = _place(client, place_id)
    assert place['reviewCount'] == 1
    assert place['avgRating'] == 5.0


def test_review_update_and_delete_unexpected_errors(app, client, auth_headers, place_id, monkeypatch):
    review_service = app.services['reviews']

    def broken(*args, **kwargs):
        raise RuntimeError("firestore unavailable")

    monkeypatch.setattr(review_service, 'update_review', broken)
    monkeypatch.setattr(review_service, 'delete_review', broken)

    response = client.put('/api/reviews/any', json={"rating": 3}, headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json()['error_code'] == "REVIEW_UPDATE_FAILED"

    response = client.delete('/api/reviews/any', headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json()['error_code'] == "REVIEW_DELETION_FAILED"
