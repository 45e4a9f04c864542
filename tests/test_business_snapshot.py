import pytest

from booking_assistant.domain.business import BusinessSnapshot, OpeningHour, Service


def test_services_and_hours_are_ordered():
    snapshot = BusinessSnapshot(
        business_id="biz-1",
        services=(Service("Shave"), Service("Beard Trim"), Service("Haircut")),
        opening_hours=(OpeningHour(6, "10:00", "14:00"), OpeningHour(0, "09:00", "17:00")),
    )
    assert [s.name for s in snapshot.services] == ["Beard Trim", "Haircut", "Shave"]
    assert [oh.day_of_week for oh in snapshot.opening_hours] == [0, 6]


def test_hours_for():
    snapshot = BusinessSnapshot(
        business_id="biz-1", opening_hours=(OpeningHour(2, "09:00", "12:00"),)
    )
    assert snapshot.hours_for(2).close_time == "12:00"
    assert snapshot.hours_for(3) is None


@pytest.mark.parametrize("day", [-1, 7])
def test_day_out_of_range(day):
    with pytest.raises(ValueError):
        BusinessSnapshot(business_id="biz-1", opening_hours=(OpeningHour(day, "09:00", "17:00"),))


def test_one_entry_per_day():
    with pytest.raises(ValueError):
        BusinessSnapshot(
            business_id="biz-1",
            opening_hours=(OpeningHour(1, "09:00", "12:00"), OpeningHour(1, "13:00", "17:00")),
        )


# ---------------------------------------------------------------------------
# business.json loading (scripts/configure_business.py)
# ---------------------------------------------------------------------------


def test_snapshot_from_json():
    from scripts.configure_business import snapshot_from_json

    snapshot = snapshot_from_json("default", {
        "name": "Deva's Barbers",
        "services": [{"name": "Haircut", "duration": 45}, {"name": "Shave"}],
        "openingHours": [
            {"dayOfWeek": 6, "openTime": "00:00", "closeTime": "00:00", "isClosed": True},
            {"dayOfWeek": 0, "openTime": "09:00", "closeTime": "17:00"},
        ],
    })

    assert snapshot.name == "Deva's Barbers"
    assert snapshot.timezone is None
    assert [(s.name, s.duration_minutes) for s in snapshot.services] == [("Haircut", 45), ("Shave", 30)]
    assert snapshot.hours_for(0).is_closed is False
    assert snapshot.hours_for(6).is_closed is True


def test_snapshot_from_json_requires_a_name():
    from scripts.configure_business import snapshot_from_json

    with pytest.raises(ValueError, match="name is required"):
        snapshot_from_json("default", {"services": []})


def test_load_rejects_a_null_day(tmp_path, monkeypatch, capsys):
    import json

    import scripts.configure_business as configure_business

    config = tmp_path / "business.json"
    config.write_text(json.dumps({
        "name": "Deva's Barbers",
        "openingHours": [{"dayOfWeek": None, "openTime": "09:00", "closeTime": "17:00"}],
    }))
    monkeypatch.setattr(configure_business, "DB_PATH", str(tmp_path / "booking.db"))
    monkeypatch.setattr("sys.argv", ["configure_business.py", "load", str(config)])

    with pytest.raises(SystemExit) as exit_info:
        configure_business.main()

    assert exit_info.value.code == 1
    assert "invalid configuration" in capsys.readouterr().err
