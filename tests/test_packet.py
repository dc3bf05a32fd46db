import io

import pytest

from drrsim.generators import TimeGenerator
from drrsim.packet import DEFICIT_MAX, Packet, PacketQueue, RelevantPacketQueue
from drrsim.position import Mobility, Position
from drrsim.user import User


@pytest.fixture
def user():
    User.reset_last_id()
    return User(1, Position(8000, 8000, 1.5), Mobility(0, "random"), 10, 10.0)


def make_packet(user, at, queue=0, size=159):
    return Packet(queue, size, user, at)


def test_packet_queue_orders_by_arrival_time(user):
    queue = PacketQueue(100, 10)
    for at in (0.3, 0.1, 0.2):
        queue.push(make_packet(user, at))
    assert len(queue) == 3
    assert [queue.pop().scheduled_at for _ in range(3)] == [0.1, 0.2, 0.3]
    assert len(queue) == 0


def test_front_does_not_remove(user):
    queue = PacketQueue(100, 10)
    queue.push(make_packet(user, 0.5))
    assert queue.front().scheduled_at == 0.5
    assert len(queue) == 1


def test_empty_queue_raises():
    queue = PacketQueue(100, 10)
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.pop()


def test_schedule_packet_assigns_increasing_times(user):
    queue = PacketQueue(100, 10, TimeGenerator(1500, seed=3))
    packets = [make_packet(user, 0.0) for _ in range(5)]
    for packet in packets:
        queue.schedule_packet(packet)
    times = [p.scheduled_at for p in packets]
    assert times == sorted(times)
    assert all(t > 0 for t in times)
    assert [queue.pop().scheduled_at for _ in range(5)] == times


def test_schedule_packet_respects_limit(user):
    queue = PacketQueue(100, 2, TimeGenerator(10, seed=1))
    for _ in range(5):
        queue.schedule_packet(make_packet(user, 0.0))
    assert len(queue) == 2


def test_deficit_cap(user):
    queue = PacketQueue(100, 10)
    queue.deficit = 42.0
    assert queue.deficit == 42.0
    queue.deficit = DEFICIT_MAX + 1
    assert queue.deficit == 42.0
    queue.deficit = DEFICIT_MAX
    assert queue.deficit == DEFICIT_MAX


def test_packet_queue_dump_keeps_content(user):
    queue = PacketQueue(100, 10)
    queue.push(make_packet(user, 0.25))
    queue.push(make_packet(user, 0.125))
    out = io.StringIO()
    queue.dump(out)
    assert out.getvalue() == (
        f"PACKET = 0\nSCHEDULE TIME = 0.125\nUSER = {user.id}\n\n"
        f"PACKET = 1\nSCHEDULE TIME = 0.25\nUSER = {user.id}\n\n"
    )
    assert len(queue) == 2
    assert queue.front().scheduled_at == 0.125


def test_relevant_queue_higher_priority_first():
    User.reset_last_id()
    low = User(1, Position(), Mobility(), 10, 1.0)
    high = User(1, Position(), Mobility(), 10, 1.0)
    low.priority = 1.0
    high.priority = 5.0
    queue = RelevantPacketQueue()
    queue.push(make_packet(low, 0.1))
    queue.push(make_packet(high, 0.9))
    assert queue.front().user is high
    assert queue.pop().user is high
    assert queue.pop().user is low
    assert len(queue) == 0


def test_relevant_queue_equal_priority_by_time():
    User.reset_last_id()
    a = User(1, Position(), Mobility(), 10, 1.0)
    b = User(1, Position(), Mobility(), 10, 1.0)
    a.priority = 2.0
    b.priority = 2.0 + 1e-12
    queue = RelevantPacketQueue()
    queue.push(make_packet(b, 0.2))
    queue.push(make_packet(a, 0.1))
    queue.push(make_packet(b, 0.3))
    assert [queue.pop().scheduled_at for _ in range(3)] == [0.1, 0.2, 0.3]


def test_relevant_queue_empty_raises():
    with pytest.raises(IndexError):
        RelevantPacketQueue().pop()


def test_relevant_queue_dump(user):
    queue = RelevantPacketQueue()
    queue.push(make_packet(user, 0.5))
    out = io.StringIO()
    queue.dump(out)
    assert out.getvalue() == f"PACKET = 0\nSCHEDULE TIME = 0.5\nUSER = {user.id}\n\n"
    assert len(queue) == 1