"""
Read-through cache tests (in-memory stand-in for the Redis client)
Run with: pytest tests/test_cache.py -v
"""
import pytest
from redis import ConnectionError as RedisConnectionError

from app.schemas.company_schema import CompanyRequest
from app.schemas.user_schema import UserCreate, UserUpdate
from app.services import company_service, user_service
from app.utils.cache_util import RecordCache, record_cache


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.gets = []
        self.expiry = {}

    def get(self, key):
        self.gets.append(key)
        value = self.store.get(key)
        return value.encode("utf-8") if value is not None else None

    def set(self, key, value, ex=None):
        self.store[key] = value
        self.expiry[key] = ex

    def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)


class BrokenRedis:
    def get(self, key):
        raise RedisConnectionError("down")

    def set(self, key, value, ex=None):
        raise RedisConnectionError("down")

    def delete(self, *keys):
        raise RedisConnectionError("down")


@pytest.fixture
def fake_redis():
    fake = FakeRedis()
    record_cache.client = fake
    return fake


class TestRecordCache:
    """Test cache wiring in the record managers"""

    def test_disabled_cache_is_noop(self):
        cache = RecordCache(None)
        assert cache.get("company:1") is None
        cache.set("company:1", "{}")
        cache.invalidate("company:1")

    def test_find_by_id_populates_cache(self, db, fake_redis):
        created = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        company_service.get_company(db, created.id)
        assert f"company:{created.id}" in fake_redis.store

    def test_cached_entries_expire(self, db, fake_redis):
        """Read-through entries carry the configured TTL"""
        record_cache.ttl = 120
        created = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        company_service.get_company(db, created.id)
        assert fake_redis.expiry[f"company:{created.id}"] == 120

    def test_cached_value_is_served(self, db, fake_redis):
        created = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        first = company_service.get_company(db, created.id)
        fake_redis.store[f"company:{created.id}"] = first.model_copy(update={"name": "CACHED"}).model_dump_json()
        assert company_service.get_company(db, created.id).name == "CACHED"

    def test_update_invalidates(self, db, fake_redis):
        created = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        company_service.get_company(db, created.id)
        company_service.update_company(db, created.id, CompanyRequest(name="META2", email="meta@x.com"))
        assert f"company:{created.id}" not in fake_redis.store
        assert company_service.get_company(db, created.id).name == "META2"

    def test_user_write_invalidates_company(self, db, fake_redis):
        company = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        assert company_service.get_company(db, company.id).users == []

        user = user_service.create_user(
            db, UserCreate(name="oussama", email="o@x.com", password="pw", company_id=company.id)
        )
        assert [u.id for u in company_service.get_company(db, company.id).users] == [user.id]

        user_service.get_user(db, user.id)
        user_service.update_user(db, user.id, UserUpdate(name="renamed", email="o@x.com"))
        assert f"user:{user.id}" not in fake_redis.store
        assert company_service.get_company(db, company.id).users[0].name == "renamed"

    def test_founded_date_survives_cache(self, db, fake_redis):
        created = company_service.create_company(
            db, CompanyRequest(name="META", email="meta@x.com", founded_date="2004/02/04")
        )
        first = company_service.get_company(db, created.id)
        second = company_service.get_company(db, created.id)
        assert second.founded_date == first.founded_date

    def test_redis_errors_fall_back_to_store(self, db):
        record_cache.client = BrokenRedis()
        created = company_service.create_company(db, CompanyRequest(name="META", email="meta@x.com"))
        assert company_service.get_company(db, created.id).name == "META"
        company_service.delete_company(db, created.id)
