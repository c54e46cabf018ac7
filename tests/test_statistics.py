from rotaplan.services.scheduler import SchedulerService, generate_range
from rotaplan.services.statistics import summarize, totals


def test_summarize_march_2024():
    march = generate_range(2024, 3, 1)[0]
    assert summarize(march) == {
        "month": "2024-03",
        "days": 31,
        "work_days": 9,
        "rest_days": 22,
        "weekend_rest_days": 10,
    }


def test_totals_over_run():
    months = generate_range(2024, 3, 2)
    result = totals(months)
    assert result["months"] == 2
    assert result["days"] == 61
    assert result["work_days"] == 18
    assert result["work_days"] + result["rest_days"] == result["days"]


def test_weekend_rest_follows_configured_weekend():
    service = SchedulerService({"rotation": {"weekend_days": [7]}})
    june = service.generate_month(2024, 6)
    summary = summarize(june)
    assert summary["weekend_rest_days"] == 5  # Sundays 2, 9, 16, 23, 30
    assert totals([june])["weekend_rest_days"] == 5
