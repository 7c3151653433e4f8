from smartcache.eviction_policy.order_list import IndexedOrderList
from smartcache.sentinels import MISS


def drain(order):
    """Pop keys from the tail until empty, oldest first."""
    keys = []
    while len(order):
        key = order.tail()
        keys.append(key)
        order.remove(key)
    return keys


def test_empty_list_has_no_tail():
    order = IndexedOrderList()
    assert order.tail() is MISS
    assert len(order) == 0


def test_add_to_head_orders_oldest_first():
    order = IndexedOrderList()
    for key in ("a", "b", "c"):
        order.add_to_head(key)

    assert order.tail() == "a"
    assert drain(order) == ["a", "b", "c"]


def test_move_to_head_changes_tail():
    order = IndexedOrderList()
    for key in (1, 2, 3):
        order.add_to_head(key)

    order.move_to_head(1)
    assert order.tail() == 2

    # Moving the head again is a no-op
    order.move_to_head(1)
    assert drain(order) == [2, 3, 1]


def test_move_to_head_ignores_unknown_key():
    order = IndexedOrderList()
    order.add_to_head(1)
    order.move_to_head(99)
    assert len(order) == 1
    assert drain(order) == [1]


def test_add_existing_key_moves_it():
    order = IndexedOrderList()
    order.add_to_head("x")
    order.add_to_head("y")
    order.add_to_head("x")
    assert len(order) == 2
    assert drain(order) == ["y", "x"]


def test_remove_middle_head_and_tail():
    order = IndexedOrderList()
    for key in range(5):
        order.add_to_head(key)

    assert order.remove(2) is True
    assert order.remove(0) is True
    assert order.remove(4) is True
    assert order.remove(4) is False
    assert drain(order) == [1, 3]


def test_freed_slots_are_reused():
    order = IndexedOrderList()
    for key in range(3):
        order.add_to_head(key)
    slots_before = len(order._keys)

    order.remove(1)
    order.add_to_head("new")

    assert len(order._keys) == slots_before
    assert drain(order) == [0, 2, "new"]


def test_none_is_a_valid_key():
    order = IndexedOrderList()
    order.add_to_head(None)
    order.add_to_head("b")
    assert order.tail() is None
    assert order.remove(None) is True
    assert order.tail() == "b"


def test_clear():
    order = IndexedOrderList()
    for key in range(3):
        order.add_to_head(key)
    order.clear()

    assert len(order) == 0
    assert order.tail() is MISS
    order.add_to_head("fresh")
    assert drain(order) == ["fresh"]
