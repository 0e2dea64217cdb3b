import pytest

from connectvi.assistant import QueryInterpreter, ReplyStatus, UNRESOLVED_LOCATIONS_MESSAGE
from connectvi.assistant.service import to_24_hour

@pytest.fixture
def interpreter(timetable):
    return QueryInterpreter(timetable)

def test_navsari_to_sai_nagar_morning_window(navsari_timetable):
    reply = QueryInterpreter(navsari_timetable).respond("from navsari to sai nagar between 6am and 10am")
    
    assert reply.status == ReplyStatus.OK
    assert [m.departure for m in reply.matches] == ["06:30 AM", "06:55 AM", "09:45 AM", "10:00 AM"]
    assert all(m.origin == "Navsari" for m in reply.matches)
    assert reply.message.splitlines() == [
        "Here are the buses I found from navsari to sai nagar:",
        '- Route "Navsari - Old Town Badnera": Departs Navsari at 06:30 AM, arrives at Old Town, Badnera by 07:05 AM.',
        '- Route "Navsari - Old Town Badnera": Departs Navsari at 06:55 AM, arrives at Old Town, Badnera by 07:30 AM.',
        '- Route "Navsari - Old Town Badnera": Departs Navsari at 09:45 AM, arrives at Old Town, Badnera by 10:20 AM.',
        '- Route "Navsari - Old Town Badnera": Departs Navsari at 10:00 AM, arrives at Old Town, Badnera by 10:35 AM.',
    ]

def test_single_stop_asks_for_two_locations(interpreter):
    reply = interpreter.respond("Rajkamal please")
    assert reply.status == ReplyStatus.UNRESOLVED_LOCATIONS
    assert reply.matches == []
    assert reply.query.start_location == "rajkamal"
    assert reply.query.end_location is None
    assert interpreter.interpret("Rajkamal please") == UNRESOLVED_LOCATIONS_MESSAGE

def test_no_known_stops(interpreter):
    assert interpreter.interpret("take me home at 5pm") == UNRESOLVED_LOCATIONS_MESSAGE

def test_departures_in_window(interpreter):
    reply = interpreter.respond("From Amravati Bus Stand to Sai Nagar between 6 am and 10 AM")
    assert reply.status == ReplyStatus.OK
    assert {m.route_id for m in reply.matches} == {"route-1"}
    assert [m.departure for m in reply.matches] == ["06:50 AM", "06:55 AM", "07:00 AM", "10:00 AM", "10:15 AM"]
    assert all(6 <= m.departure_hour <= 10 for m in reply.matches)

def test_window_defaults_to_whole_day(interpreter):
    reply = interpreter.respond("amravati bus stand to rajapeth")
    assert (reply.query.start_hour, reply.query.end_hour) == (0, 24)
    assert len(reply.matches) == len(interpreter.timetable.get_route("route-1").timings)

def test_single_time_mention_keeps_whole_day(interpreter):
    reply = interpreter.respond("amravati bus stand to rajapeth at 7am")
    assert (reply.query.start_hour, reply.query.end_hour) == (0, 24)

def test_afternoon_window(interpreter):
    reply = interpreter.respond("amravati bus stand to rajapeth from 2pm to 5pm")
    assert (reply.query.start_hour, reply.query.end_hour) == (14, 17)
    assert [m.departure for m in reply.matches] == ["02:15 PM", "02:25 PM", "02:45 PM", "05:35 PM", "05:55 PM"]

def test_reverse_direction_route_is_excluded(interpreter):
    # Rajkamal is listed before Amt Bus Stand, but route-2 visits Amt Bus Stand first
    reply = interpreter.respond("rajkamal to amt bus stand")
    assert reply.status == ReplyStatus.NO_DEPARTURES
    assert reply.message == (
        "I couldn't find any buses going from rajkamal to amt bus stand within your "
        "specified time. Please try a different time or location."
    )

def test_empty_window_reports_not_found(interpreter):
    reply = interpreter.respond("amravati bus stand to sai nagar between 8pm and 11pm")
    assert reply.status == ReplyStatus.NO_DEPARTURES
    assert "from amravati bus stand to sai nagar" in reply.message

def test_locations_follow_stop_list_order_not_sentence_order(interpreter):
    # Known quirk: "Sai Nagar" is defined before "Navsari", so it becomes the start
    # and route-3 (Navsari -> Sai Nagar) is treated as the wrong direction.
    reply = interpreter.respond("from navsari to sai nagar between 6am and 10am")
    assert reply.query.start_location == "sai nagar"
    assert reply.query.end_location == "navsari"
    assert reply.status == ReplyStatus.NO_DEPARTURES

def test_swapped_sentence_resolves_to_same_endpoints(interpreter):
    forward = interpreter.parse("from amravati bus stand to sai nagar")
    backward = interpreter.parse("to sai nagar from amravati bus stand")
    assert (forward.start_location, forward.end_location) == (backward.start_location, backward.end_location)

@pytest.mark.parametrize("hour,period,expected", [
    (6, "am", 6),
    (12, "am", 12),
    (12, "PM", 12),
    (1, "pm", 13),
    (11, "Pm", 23),
])
def test_to_24_hour(hour, period, expected):
    assert to_24_hour(hour, period) == expected

def test_only_first_two_times_are_used(interpreter):
    query = interpreter.parse("navsari to sai nagar 7am 9am 5pm")
    assert (query.start_hour, query.end_hour) == (7, 9)
