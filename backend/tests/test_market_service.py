import asyncio

import pytest

from src.domain.exceptions import DomainValidationError, EntityNotFoundError


@pytest.fixture()
def profile(profile_service):
    return asyncio.run(profile_service.create({"name": "TEST-PROFILE"}))


def _market(profile_id, **overrides):
    data = {
        "profile_id": profile_id,
        "name": "TEST-MARKET",
        "receive_key": "TEST-PRIVATE-KEY",
        "receive_address": "TEST-MARKET-ADDRESS",
    }
    data.update(overrides)
    return data


def test_create(market_service, profile):
    market = asyncio.run(market_service.create(_market(profile.id)))

    assert market.name == "TEST-MARKET"
    assert market.receive_key == "TEST-PRIVATE-KEY"
    assert market.receive_address == "TEST-MARKET-ADDRESS"
    assert market.profile_id == profile.id
    assert market.is_default is False


def test_create_with_empty_body_fails_validation(fake_db, market_service):
    with pytest.raises(DomainValidationError) as exc_info:
        asyncio.run(market_service.create({}))

    failed_fields = {error["loc"][0] for error in exc_info.value.errors}
    assert {"profile_id", "name", "receive_key", "receive_address"} <= failed_fields
    assert fake_db.market.rows == {}


def test_create_for_missing_profile(fake_db, market_service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(market_service.create(_market(404)))
    assert exc_info.value.key == 404
    assert fake_db.market.rows == {}


def test_find_one(market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    market = asyncio.run(market_service.find_one(created.id))
    assert market.id == created.id
    assert market.name == "TEST-MARKET"


def test_find_all_by_profile_id(market_service, profile_service, profile):
    other = asyncio.run(profile_service.create({"name": "OTHER-PROFILE"}))
    asyncio.run(market_service.create(_market(profile.id)))
    asyncio.run(market_service.create(_market(other.id, name="OTHER-MARKET")))

    markets = asyncio.run(market_service.find_all_by_profile_id(profile.id))
    assert [market.name for market in markets] == ["TEST-MARKET"]
    assert len(asyncio.run(market_service.find_all())) == 2


def test_update(market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    market = asyncio.run(
        market_service.update(
            created.id,
            {
                "name": "TEST-UPDATE-MARKET",
                "receive_key": "TEST-UPDATE-PRIVATE-KEY",
                "receive_address": "TEST-UPDATE-MARKET-ADDRESS",
            },
        )
    )
    assert market.name == "TEST-UPDATE-MARKET"
    assert market.receive_key == "TEST-UPDATE-PRIVATE-KEY"
    assert market.receive_address == "TEST-UPDATE-MARKET-ADDRESS"
    assert market.profile_id == profile.id


def test_update_missing(market_service):
    with pytest.raises(EntityNotFoundError):
        asyncio.run(market_service.update(404, {"name": "TEST-UPDATE-MARKET"}))


def test_update_with_empty_name_fails_validation(market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    with pytest.raises(DomainValidationError):
        asyncio.run(market_service.update(created.id, {"name": ""}))


def test_update_with_null_name_fails_validation(fake_db, market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    with pytest.raises(DomainValidationError) as exc_info:
        asyncio.run(market_service.update(created.id, {"name": None}))

    assert "name cannot be null" in exc_info.value.errors[0]["msg"]
    assert not any(call[0] == "update" for call in fake_db.market.calls)
    assert asyncio.run(market_service.find_one(created.id)).name == "TEST-MARKET"

def test_get_default_for_profile(market_service, profile):
    asyncio.run(market_service.create(_market(profile.id)))
    default = asyncio.run(
        market_service.create(_market(profile.id, name="DEFAULT", receive_address="DEFAULT-ADDRESS", is_default=True))
    )

    market = asyncio.run(market_service.get_default_for_profile(profile.id))
    assert market.id == default.id


def test_get_default_for_profile_missing(market_service, profile):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(market_service.get_default_for_profile(profile.id))
    assert str(exc_info.value) == f"Default market for profile {profile.id} does not exist"


def test_find_one_by_profile_id_and_receive_address(market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    market = asyncio.run(
        market_service.find_one_by_profile_id_and_receive_address(profile.id, "TEST-MARKET-ADDRESS")
    )
    assert market.id == created.id

    with pytest.raises(EntityNotFoundError):
        asyncio.run(
            market_service.find_one_by_profile_id_and_receive_address(profile.id, "UNKNOWN-ADDRESS")
        )


def test_destroy(market_service, profile):
    created = asyncio.run(market_service.create(_market(profile.id)))

    asyncio.run(market_service.destroy(created.id))

    with pytest.raises(EntityNotFoundError):
        asyncio.run(market_service.find_one(created.id))
