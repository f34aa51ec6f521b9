# petplace/api/reviews/services.py

import logging
import uuid
from dataclasses import asdict
from firebase_admin import firestore
from typing import Dict, Any, List

from petplace.models.review import Review
from petplace.api.places.repository import PlaceRepository
from petplace.utils.datetime_utils import DateTimeUtils

class ReviewService:
    """
    장소 리뷰 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 리뷰 작성/수정/삭제 시 장소의 review_count, rating_sum을 같은 배치(작성) 또는 트랜잭션(수정/삭제)에서 갱신합니다.
    """
    def __init__(self, place_repository: PlaceRepository, db=None):
        self.db = db or firestore.client()
        self.reviews_ref = self.db.collection('reviews')
        self.users_ref = self.db.collection('users')
        self.place_repository = place_repository

    def create_review(self, place_id: str, author_id: str, review_data: Dict[str, Any]) -> Dict[str, Any]:
        """새로운 리뷰를 작성합니다."""
        if not self.place_repository.exists(place_id):
            raise FileNotFoundError("존재하지 않는 장소입니다.")

        author_doc = self.users_ref.document(author_id).get()
        if not author_doc.exists:
            raise FileNotFoundError("리뷰 작성자를 찾을 수 없습니다.")
        author = {"user_id": author_id, "nickname": author_doc.to_dict().get("nickname")}

        review = Review(
            review_id=str(uuid.uuid4()),
            place_id=place_id,
            author=author,
            rating=review_data['rating'],
            content=review_data.get('content') or "",
            photos=list(review_data.get('photos') or [])
        )

        batch = self.db.batch()
        batch.set(self.reviews_ref.document(review.review_id), DateTimeUtils.for_firestore(asdict(review)))
        self.place_repository.update_counters(batch, place_id, review_delta=1, rating_delta=review.rating)
        batch.commit()

        logging.info(f"Review {review.review_id} created for place {place_id} by {author_id}")
        return asdict(review)

    def get_reviews_for_place(self, place_id: str) -> List[Dict[str, Any]]:
        """특정 장소의 리뷰 목록을 최신순으로 조회합니다."""
        if not self.place_repository.exists(place_id):
            raise FileNotFoundError("존재하지 않는 장소입니다.")
        docs = self.reviews_ref.where('place_id', '==', place_id).stream()
        reviews = [doc.to_dict() for doc in docs]
        reviews.sort(key=lambda r: r['created_at'], reverse=True)
        return reviews

    def _get_own_review(self, review_id: str, user_id: str, transaction=None) -> Dict[str, Any]:
        doc = self.reviews_ref.document(review_id).get(transaction=transaction)
        if not doc.exists:
            raise FileNotFoundError("리뷰를 찾을 수 없습니다.")
        review_data = doc.to_dict()
        if review_data.get('author', {}).get('user_id') != user_id:
            raise PermissionError("본인이 작성한 리뷰만 수정하거나 삭제할 수 있습니다.")
        return review_data

    def update_review(self, review_id: str, user_id: str, review_data: Dict[str, Any]) -> Dict[str, Any]:
        """리뷰의 별점/내용/사진을 교체합니다. 별점 차이만큼 장소 집계를 보정합니다."""
        review_ref = self.reviews_ref.document(review_id)

        @firestore.transactional
        def _update_review_transaction(transaction, review_ref):
            # 리뷰 읽기, 리뷰 쓰기, 집계 보정은 한 트랜잭션 안에서
            current = self._get_own_review(review_id, user_id, transaction)
            update_data = {
                'rating': review_data['rating'],
                'content': review_data.get('content') or "",
                'photos': list(review_data.get('photos') or []),
                'updated_at': DateTimeUtils.now()
            }
            transaction.update(review_ref, update_data)
            rating_delta = update_data['rating'] - current['rating']
            if rating_delta:
                self.place_repository.update_counters(transaction, current['place_id'], review_delta=0, rating_delta=rating_delta)
            current.update(update_data)
            return current, rating_delta

        transaction = self.db.transaction()
        updated, rating_delta = _update_review_transaction(transaction, review_ref)
        logging.info(f"Review {review_id} updated (rating delta: {rating_delta})")
        return updated

    def delete_review(self, review_id: str, user_id: str) -> None:
        """리뷰를 삭제합니다. (작성자 본인만 가능)"""
        review_ref = self.reviews_ref.document(review_id)

        @firestore.transactional
        def _delete_review_transaction(transaction, review_ref):
            current = self._get_own_review(review_id, user_id, transaction)
            transaction.delete(review_ref)
            self.place_repository.update_counters(transaction, current['place_id'], review_delta=-1, rating_delta=-current['rating'])

        transaction = self.db.transaction()
        _delete_review_transaction(transaction, review_ref)
        logging.info(f"Review {review_id} deleted by {user_id}")
