"""Tests for the in-memory unicorn store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from unicorn_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from unicorn_api.app.core.seed import SEED_UNICORNS
from unicorn_api.app.services.unicorn_store import UnicornStore

from .conftest import LUCKY, LUNA


class TestCreate:
    """Creating records."""

    def test_create_normalises_fields(self, store):
        record = store.create(
            {"name": "Aurora", "dob": "1991-01-24T13:00:00Z", "loves": "grape", "weight": "450", "gender": "Female"}
        )

        assert len(record.id) == 32
        assert record.name == "Aurora"
        assert record.dob == "1991-01-24T13:00:00.000Z"
        assert record.loves == ["grape"]
        assert record.weight == 450.0
        assert record.gender == "f"
        assert record.vampires is None
        assert record.vaccinated is True

    def test_find_by_name_after_create_any_case(self, store):
        created = store.create(LUCKY)

        assert store.find_by_name("lucky") == created
        assert store.find_by_name("LUCKY") == created
        assert store.get("LuCkY") == created

    def test_zero_vampires_is_present(self, store):
        record = store.create({**LUCKY, "vampires": 0})
        assert record.vampires == 0

    def test_client_supplied_id_is_ignored(self, store):
        record = store.create({**LUCKY, "id": "mine", "_id": "mine"})
        assert record.id != "mine"

    def test_conflict_leaves_collection_unchanged(self, pair_store):
        before = pair_store.all()

        with pytest.raises(ConflictError):
            pair_store.create({**LUCKY, "name": "LUCKY", "weight": 1})

        assert len(pair_store) == 2
        assert pair_store.all() == before

    @pytest.mark.parametrize("missing", ["name", "dob", "loves", "weight", "gender"])
    def test_missing_required_field(self, store, missing):
        payload = {k: v for k, v in LUCKY.items() if k != missing}

        with pytest.raises(ValidationError) as exc_info:
            store.create(payload)

        assert missing in str(exc_info.value)
        assert len(store) == 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("weight", "heavy"),
            ("weight", 10**400),
            ("dob", "someday"),
            ("dob", "0001-01-01T00:00:00+05:00"),
            ("gender", "x"),
            ("vampires", -1),
            ("loves", []),
        ],
    )
    def test_unparseable_field(self, store, field, value):
        with pytest.raises(ValidationError):
            store.create({**LUCKY, field: value})
        assert len(store) == 0

    def test_ids_are_unique_and_not_reused(self, store):
        first = store.create(LUCKY)
        store.delete("Lucky")
        second = store.create(LUCKY)

        assert first.id != second.id

    def test_seed_data_loads(self):
        store = UnicornStore(SEED_UNICORNS)

        assert len(store) == len(SEED_UNICORNS)
        assert [u.name for u in store.all()] == [u["name"] for u in SEED_UNICORNS]
        assert store.get("Nimue").vampires is None


class TestUpdate:
    """Partial updates."""

    def test_only_supplied_fields_change(self, pair_store):
        before = pair_store.get("Luna")

        updated = pair_store.update("luna", {"weight": "320.5", "loves": ["Apples"]})

        assert updated.weight == 320.5
        assert updated.loves == ["Apples"]
        assert updated.id == before.id
        assert updated.dob == before.dob
        assert updated.vampires == before.vampires
        assert pair_store.get("Luna") == updated

    def test_normalisation_matches_create(self, pair_store):
        updated = pair_store.update(
            "Lucky",
            {"dob": "2011-02-03", "gender": "male", "vaccinated": "false", "vampires": "7"},
        )

        assert updated.dob == "2011-02-03T00:00:00.000Z"
        assert updated.gender == "m"
        assert updated.vaccinated is False
        assert updated.vampires == 7

    def test_no_recognised_fields_returns_record_unchanged(self, pair_store):
        before = pair_store.get("Lucky")

        assert pair_store.update("Lucky", {}) == before
        assert pair_store.update("Lucky", {"color": "pink"}) == before

    def test_name_is_not_mutable(self, pair_store):
        updated = pair_store.update("Lucky", {"name": "Unlucky", "weight": 1})

        assert updated.name == "Lucky"
        assert pair_store.find_by_name("Unlucky") is None

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_vampires_clears(self, pair_store, value):
        updated = pair_store.update("Luna", {"vampires": value})

        assert updated.vampires is None
        assert pair_store.get("Luna").vampires is None

    def test_out_of_range_value_is_a_validation_error(self, pair_store):
        before = pair_store.get("Luna")

        with pytest.raises(ValidationError):
            pair_store.update("Luna", {"weight": 10**400})
        with pytest.raises(ValidationError):
            pair_store.update("Luna", {"dob": "9999-12-31T23:00:00-05:00"})

        assert pair_store.get("Luna") == before

    def test_invalid_value_changes_nothing(self, pair_store):
        before = pair_store.get("Luna")

        with pytest.raises(ValidationError):
            pair_store.update("Luna", {"loves": ["Apples"], "weight": "heavy"})

        assert pair_store.get("Luna") == before

    def test_unknown_name(self, pair_store):
        with pytest.raises(NotFoundError):
            pair_store.update("Sparkle", {"weight": 1})


class TestDelete:
    def test_delete_returns_record_and_keeps_order(self, store):
        for name in ("A", "B", "C"):
            store.create({**LUCKY, "name": name})

        removed = store.delete("b")

        assert removed.name == "B"
        assert len(store) == 2
        assert [u.name for u in store.all()] == ["A", "C"]

    def test_delete_unknown_name(self, pair_store):
        with pytest.raises(NotFoundError):
            pair_store.delete("Sparkle")
        assert len(pair_store) == 2

    def test_get_unknown_name(self, pair_store):
        assert pair_store.find_by_name("Sparkle") is None
        with pytest.raises(NotFoundError):
            pair_store.get("Sparkle")


class TestIsolation:
    def test_returned_records_are_copies(self, pair_store):
        record = pair_store.get("Lucky")
        record.loves.append("Glitter")
        snapshot = pair_store.all()
        snapshot[0].loves.clear()

        assert pair_store.get("Lucky").loves == ["Carrots", "Sugar"]

    def test_concurrent_creates_with_same_name(self, store):
        def attempt(i):
            try:
                store.create({**LUNA, "name": "Luna" if i % 2 else "LUNA"})
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(32)))

        assert results.count(True) == 1
        assert len(store) == 1
