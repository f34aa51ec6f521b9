# conftest.py
"""
테스트 공용 픽스처

Firebase에 연결하지 않도록 서비스가 사용하는 만큼의 Firestore 동작을 메모리로 흉내 낸 FakeFirestore를
create_app(db=...)에 주입합니다.

사용법: python -m pytest -v
"""

import copy
import uuid
from collections import defaultdict

import pytest
from firebase_admin import firestore
from google.api_core.exceptions import Aborted, NotFound

from petplace import create_app
from petplace.api.places.repository import PlaceRepository
from petplace.models.place import Place


class FakeDocumentSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, docs, doc_id):
        self._docs = docs
        self.id = doc_id

    def get(self, transaction=None):
        if transaction is not None:
            transaction._record_read(self._docs, self.id)
        return FakeDocumentSnapshot(self.id, self._docs.get(self.id))

    def set(self, data, merge=False):
        if merge and self.id in self._docs:
            self._docs[self.id].update(copy.deepcopy(data))
        else:
            self._docs[self.id] = copy.deepcopy(data)

    def update(self, data):
        if self.id not in self._docs:
            raise NotFound(f"No document to update: {self.id}")
        doc = self._docs[self.id]
        for key, value in data.items():
            if isinstance(value, firestore.Increment):
                doc[key] = doc.get(key, 0) + value.value
            else:
                doc[key] = copy.deepcopy(value)

    def delete(self):
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, docs, filters=(), limit_count=None):
        self._docs = docs
        self._filters = filters
        self._limit = limit_count

    def where(self, field_path=None, op_string=None, value=None, *, filter=None):
        if filter is not None:
            field_path, op_string, value = filter.field_path, filter.op_string, filter.value
        return FakeQuery(self._docs, self._filters + ((field_path, op_string, value),), self._limit)

    def limit(self, count):
        return FakeQuery(self._docs, self._filters, count)

    def _matches(self, data):
        for field_path, op_string, value in self._filters:
            actual = data.get(field_path)
            if op_string == '==':
                if actual != value:
                    return False
            elif op_string == 'in':
                if actual not in value:
                    return False
            else:
                raise NotImplementedError(op_string)
        return True

    def stream(self):
        matched = [
            FakeDocumentSnapshot(doc_id, data)
            for doc_id, data in list(self._docs.items())
            if self._matches(data)
        ]
        if self._limit is not None:
            matched = matched[:self._limit]
        return iter(matched)

    def get(self):
        return list(self.stream())


class FakeCollection(FakeQuery):
    def document(self, doc_id=None):
        return FakeDocumentReference(self._docs, doc_id or uuid.uuid4().hex)


class FakeWriteBatch:
    def __init__(self):
        self._operations = []

    def set(self, reference, data, merge=False):
        self._operations.append(lambda: reference.set(data, merge=merge))

    def update(self, reference, data):
        self._operations.append(lambda: reference.update(data))

    def delete(self, reference):
        self._operations.append(reference.delete)

    def commit(self):
        for operation in self._operations:
            operation()
        self._operations = []


class FakeTransaction(FakeWriteBatch):
    """
    firestore.transactional 데코레이터가 사용하는 만큼의 Transaction 동작.
    커밋 시점에 트랜잭션 안에서 읽은 문서가 바뀌었으면 실제 Firestore처럼 Aborted를 던져 재시도하게 합니다.
    """

    def __init__(self, max_attempts=5):
        super().__init__()
        self._max_attempts = max_attempts
        self._read_only = False
        self._id = None
        self._reads = []

    def _record_read(self, docs, doc_id):
        self._reads.append((docs, doc_id, copy.deepcopy(docs.get(doc_id))))

    def _clean_up(self):
        self._operations = []
        self._reads = []
        self._id = None

    def _begin(self, retry_id=None):
        self._id = uuid.uuid4().bytes

    def _rollback(self):
        self._clean_up()

    def _commit(self):
        for docs, doc_id, seen in self._reads:
            if docs.get(doc_id) != seen:
                self._clean_up()
                raise Aborted(f"Document changed during transaction: {doc_id}")
        self.commit()
        self._clean_up()


class FakeFirestore:
    def __init__(self):
        self._collections = defaultdict(dict)

    def collection(self, name):
        return FakeCollection(self._collections[name])

    def batch(self):
        return FakeWriteBatch()

    def transaction(self):
        return FakeTransaction()


# =====================================================================================
# 픽스처
# =====================================================================================

@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def app(db):
    return create_app('testing', db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed_place(db):
    """장소 문서를 직접 저장하고 Place를 반환하는 헬퍼."""
    repository = PlaceRepository(db)

    def _seed(name, address, **extra):
        place = Place(place_id=uuid.uuid4().hex, name=name, address=address, **extra)
        return repository.save(place)

    return _seed


@pytest.fixture
def register_user(client):
    """회원가입 후 로그인하여 (user_id, Authorization 헤더)를 반환하는 헬퍼."""
    def _register(login_id="happydog", nickname=None, email=None, password="password123"):
        payload = {
            "loginId": login_id,
            "email": email or f"{login_id}@example.com",
            "passwordRaw": password,
            "nickname": nickname or f"{login_id}-nick",
            "phone": "010-1234-5678",
        }
        signup = client.post('/api/users/signup', json=payload)
        assert signup.status_code == 201, signup.get_json()

        login = client.post('/api/users/login', json={"loginId": login_id, "password": password})
        body = login.get_json()["data"]
        return body["userId"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register


@pytest.fixture
def auth_headers(register_user):
    _, headers = register_user()
    return headers
