import asyncio
from datetime import datetime

import pytest

from src.domain.exceptions import DatabaseError, EntityNotFoundError
from src.domain.ports.repositories import ProposalSearchParams
from src.domain.value_objects.search_order import SearchOrder


def _proposal(hash="proposal-hash-1", **overrides):
    data = {
        "submitter": "pmktyVZshdMAQ6DPbbRXEFNGuzMbTMkqAA",
        "hash": hash,
        "type": "PUBLIC_VOTE",
        "title": "Allow digital goods",
        "description": "Should the market accept listings of digital goods?",
        "time_start": datetime(2019, 1, 1),
        "post_time": datetime(2019, 1, 1),
        "expired_at": datetime(2019, 2, 1),
        "options": [
            {"option_id": 0, "description": "YES", "hash": "option-hash-0"},
            {"option_id": 1, "description": "NO", "hash": "option-hash-1"},
        ],
    }
    data.update(overrides)
    return data


def test_create_returns_stored_proposal_with_options(proposal_repository):
    proposal = asyncio.run(proposal_repository.create(_proposal()))

    fetched = asyncio.run(proposal_repository.find_one(proposal.id))
    assert fetched.id == proposal.id
    assert fetched.hash == "proposal-hash-1"
    assert fetched.title == "Allow digital goods"
    assert [option.description for option in fetched.options] == ["YES", "NO"]


def test_find_one_by_hash(proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))

    proposal = asyncio.run(proposal_repository.find_one_by_hash("proposal-hash-1"))
    assert proposal.id == created.id


def test_find_one_by_hash_missing(proposal_repository):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(proposal_repository.find_one_by_hash("no-such-hash"))
    assert exc_info.value.key == "no-such-hash"


def test_find_one_without_related_skips_options(fake_db, proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))

    proposal = asyncio.run(proposal_repository.find_one(created.id, with_related=False))
    assert proposal.options == []

    action, kwargs = fake_db.proposal.calls[-1]
    assert action == "find_unique"
    assert kwargs["include"] is None


def test_find_one_with_related_requests_options(fake_db, proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))
    asyncio.run(proposal_repository.find_one(created.id))

    action, kwargs = fake_db.proposal.calls[-1]
    assert action == "find_unique"
    assert "options" in kwargs["include"]


def test_find_one_missing(proposal_repository):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(proposal_repository.find_one(404))
    assert str(exc_info.value) == "Entity with identifier 404 does not exist"


def test_create_duplicate_hash_raises_database_error(proposal_repository):
    asyncio.run(proposal_repository.create(_proposal()))

    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(proposal_repository.create(_proposal()))
    assert exc_info.value.message == "Could not create the proposal!"
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_update_changes_only_given_fields(proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))

    updated = asyncio.run(proposal_repository.update(created.id, {"title": "Allow services"}))
    assert updated.title == "Allow services"
    assert updated.description == created.description
    assert updated.hash == created.hash
    assert len(updated.options) == 2


def test_update_missing_raises_not_found(fake_db, proposal_repository):
    with pytest.raises(EntityNotFoundError):
        asyncio.run(proposal_repository.update(404, {"title": "x"}))
    assert not [call for call in fake_db.proposal.calls if call[0] == "update"]


def test_update_failure_raises_database_error(fake_db, proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))
    fake_db.proposal.fail_on = {"update"}

    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(proposal_repository.update(created.id, {"title": "x"}))
    assert exc_info.value.message == "Could not update the proposal!"


def test_destroy(proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))

    asyncio.run(proposal_repository.destroy(created.id))

    with pytest.raises(EntityNotFoundError):
        asyncio.run(proposal_repository.find_one(created.id))


def test_destroy_missing_raises_not_found(proposal_repository):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(proposal_repository.destroy(404))
    assert exc_info.value.key == 404


def test_destroy_failure_raises_database_error(fake_db, proposal_repository):
    created = asyncio.run(proposal_repository.create(_proposal()))
    fake_db.proposal.fail_on = {"delete"}

    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(proposal_repository.destroy(created.id))
    assert exc_info.value.message == "Could not delete the proposal!"
    assert asyncio.run(proposal_repository.find_one(created.id)).id == created.id


def test_search_by_type_and_window(proposal_repository):
    asyncio.run(proposal_repository.create(_proposal("a")))
    asyncio.run(
        proposal_repository.create(
            _proposal(
                "b",
                type="ITEM_VOTE",
                time_start=datetime(2019, 1, 10),
                expired_at=datetime(2019, 1, 20),
            )
        )
    )
    asyncio.run(
        proposal_repository.create(
            _proposal(
                "c",
                time_start=datetime(2019, 3, 1),
                expired_at=datetime(2019, 4, 1),
            )
        )
    )

    item_votes = asyncio.run(
        proposal_repository.search(ProposalSearchParams(type="ITEM_VOTE"), True)
    )
    assert [proposal.hash for proposal in item_votes] == ["b"]

    open_in_january = asyncio.run(
        proposal_repository.search(
            ProposalSearchParams(
                time_start=datetime(2019, 1, 15),
                time_end=datetime(2019, 1, 31),
                order=SearchOrder.DESC,
            ),
            False,
        )
    )
    assert [proposal.hash for proposal in open_in_january] == ["b", "a"]


def test_find_all(proposal_repository):
    asyncio.run(proposal_repository.create(_proposal("a")))
    asyncio.run(proposal_repository.create(_proposal("b")))

    proposals = asyncio.run(proposal_repository.find_all())
    assert [proposal.hash for proposal in proposals] == ["a", "b"]
