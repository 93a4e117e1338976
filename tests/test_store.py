import asyncio

import pytest

from cafe_admin.core.errors import StorageError
from cafe_admin.core.security import verify_password
from cafe_admin.core.store import Store
from cafe_admin.models import AdminUser, Contact, MenuItem, Order


@pytest.fixture
def store(tmp_path):
    s = Store(f"sqlite:///{tmp_path / 'store.db'}")
    s.open("admin", "pw-one")
    yield s
    s.close()


def run(coro):
    return asyncio.run(coro)


def test_open_seeds_once(tmp_path):
    url = f"sqlite:///{tmp_path / 'seed.db'}"

    first = Store(url)
    first.open("admin", "pw-one")
    first.close()

    # Reopening an existing database keeps its state
    second = Store(url)
    second.open("admin", "pw-two")
    try:
        assert len(run(second.all(MenuItem))) == 2
        admin = run(second.find_admin("admin"))
        assert verify_password("pw-one", admin.password)
        assert len(run(second.all(AdminUser))) == 1
    finally:
        second.close()


def test_seeded_menu_is_kept_after_edits(tmp_path):
    url = f"sqlite:///{tmp_path / 'menu.db'}"
    s = Store(url)
    s.open("admin", "pw")
    for item in run(s.all(MenuItem)):
        run(s.delete(MenuItem, item.id))
    run(s.insert(MenuItem, name="Tea", price=80))
    s.close()

    s.open("admin", "pw")
    try:
        assert [i.name for i in run(s.all(MenuItem))] == ["Tea"]
    finally:
        s.close()


def test_insert_get_update_delete(store):
    contact_id = run(store.insert(Contact, name="Jo", email="jo@x.com", message="Hi", is_read=False))

    contact = run(store.get(Contact, contact_id))
    assert contact.name == "Jo"
    assert contact.is_read is False
    assert contact.created_at is not None

    assert run(store.update(Contact, contact_id, is_read=True)) is True
    assert run(store.get(Contact, contact_id)).is_read is True

    assert run(store.delete(Contact, contact_id)) is True
    assert run(store.get(Contact, contact_id)) is None
    assert run(store.delete(Contact, contact_id)) is False
    assert run(store.update(Contact, contact_id, is_read=False)) is False


def test_ids_are_assigned_per_collection(store):
    first = run(store.insert(Order, customer_name="A", phone="1", items="[]", total=1))
    second = run(store.insert(Order, customer_name="B", phone="2", items="[]", total=2))

    assert second > first
    orders = run(store.all(Order))
    assert [o.id for o in orders] == [second, first]
    assert orders[0].status == "pending"
    assert orders[0].payment_status == "unpaid"


def test_failed_statement_raises_storage_error(store):
    # customer_name is NOT NULL
    with pytest.raises(StorageError):
        run(store.insert(Order, phone="1", items="[]", total=1))

    assert run(store.all(Order)) == []


def test_closed_store_raises_storage_error(tmp_path):
    s = Store(f"sqlite:///{tmp_path / 'closed.db'}")

    with pytest.raises(StorageError):
        run(s.all(MenuItem))

    s.open("admin", "pw")
    s.close()
    assert not s.is_open
    with pytest.raises(StorageError):
        run(s.dashboard_stats())
