import pytest

from moviekit.event_types import event_type_desc, event_type_name


@pytest.mark.parametrize(
    "number, name",
    [
        (0, "None"),
        (1, "Timer"),
        (6, "KeyPress"),
        (43, "MetaCall"),
        (14, "Resize"),
        (217, "PlatformSurface"),
    ],
)
def test_known_names(number, name):
    assert event_type_name(number) == name


def test_known_descriptions():
    assert event_type_desc(0) == "Not an event"
    assert event_type_desc(6) == "Key press (QKeyEvent)"
    assert event_type_desc(217) == (
        "A native platform surface has been created or is about to be "
        "destroyed(QPlatformSurfaceEvent)"
    )


@pytest.mark.parametrize("number", [15, 20, 107, 149, 216])
def test_unknown_slots_name_themselves(number):
    expected = f"UnknownEvent{number}"
    assert event_type_name(number) == expected
    assert event_type_desc(number) == expected


@pytest.mark.parametrize("number", [1000, 5000, 65535])
def test_user_event_range(number):
    assert event_type_name(number) == "UserEvent"
    assert event_type_desc(number) == "UserEvent"


@pytest.mark.parametrize("number", [218, 500, 999, 65536, 100000])
def test_unknown_large_events(number):
    assert event_type_name(number) == "UnknownLargeEvent"
    assert event_type_desc(number) == "UnknownLargeEvent"


@pytest.mark.parametrize("number", [-1, -1000])
def test_negative_raises(number):
    with pytest.raises(ValueError):
        event_type_name(number)
    with pytest.raises(ValueError):
        event_type_desc(number)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        event_type_name(1.5)


def test_table_names_are_distinct():
    names = [event_type_name(n) for n in range(218)]
    assert len(set(names)) == len(names)
    assert all(names)


def test_every_table_entry_has_description():
    assert all(event_type_desc(n) for n in range(218))
    assert all(
        event_type_desc(n) != event_type_name(n)
        for n in range(218)
        if not event_type_name(n).startswith("UnknownEvent")
    )