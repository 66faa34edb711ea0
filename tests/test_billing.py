import pytest

from algolab.billing import Call, Subscriber
from algolab.calendar_time import DateTime, TimeSpan


def _calls():
    return (
        Call(30890, DateTime.parse("2.2.2012 4:4:4"), TimeSpan(500)),
        Call(31211, DateTime.parse("2.2.2010 4:4:4"), TimeSpan(400)),
        Call(21652, DateTime.parse("2.2.2008 4:4:4"), TimeSpan(300)),
    )


@pytest.fixture
def subscriber():
    person = Subscriber("Who", 2, 3000)
    for call in _calls():
        person.add_call(call)
    return person


def test_subscriber_str():
    assert str(Subscriber("Who", 2, 3000)) == "Who | 2 | 3000"


def test_call_str():
    call = _calls()[0]
    assert str(call) == "30890 | 2.2.2012 4:4:4 | 500"


def test_call_parse_round_trip():
    call = _calls()[1]
    assert Call.parse("31211 2.2.2010 4:4:4 400") == call


@pytest.mark.parametrize("text", ["", "31211 2.2.2010 4:4:4", "x 2.2.2010 4:4:4 400", "1 2.2.2010 4:4 4"])
def test_call_parse_rejects(text):
    with pytest.raises(ValueError):
        Call.parse(text)


def test_history_is_newest_first(subscriber):
    assert subscriber.history() == list(reversed(_calls()))


def test_history_for_number(subscriber):
    assert subscriber.history_for_number(30890) == [_calls()[0]]
    assert subscriber.history_for_number(1) == []


def test_history_between(subscriber):
    window = subscriber.history_between(
        DateTime.parse("1.1.2010 7:7:7"), DateTime.parse("8.8.2011 9:9:9")
    )
    assert window == [_calls()[1]]


def test_history_between_is_inclusive(subscriber):
    moment = _calls()[2].date
    assert subscriber.history_between(moment, moment) == [_calls()[2]]


def test_charging_at_one_unit_per_second():
    person = Subscriber("Who", 60, 500)
    person.add_call(_calls()[0])
    assert person.balance == pytest.approx(0)


def test_repeated_calls_charge_equally(subscriber):
    spent_once = 3000 - subscriber.balance
    for call in _calls():
        subscriber.add_call(call)
    assert 3000 - subscriber.balance == pytest.approx(2 * spent_once)
    assert len(subscriber.history()) == 6


def test_recharge_adds_absolute_amount():
    person = Subscriber("Who", 2, 100)
    person.recharge(50)
    person.recharge(-50)
    assert person.balance == 200


def test_history_is_a_copy(subscriber):
    subscriber.history().clear()
    assert len(subscriber.history()) == 3