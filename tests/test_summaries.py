"""Tests for dashboard aggregations."""

from datetime import date
from unittest.mock import patch

import pytest

from custom_components.youtube_creator_dashboard.models import AnalyticsReport, VideoItem
from custom_components.youtube_creator_dashboard.summaries import (
    days_ago,
    format_stats,
    growth_summary,
    is_short,
    parse_duration_seconds,
    rank_top_videos,
    revenue_summary,
    split_formats,
    sum_metric,
)


def make_video(video_id, title="Video", duration="PT5M", views=0, likes=0, comments=0):
    return VideoItem(
        id=video_id,
        title=title,
        thumbnail=f"https://img.example/{video_id}.jpg",
        published_at="2024-01-01T00:00:00Z",
        view_count=views,
        like_count=likes,
        comment_count=comments,
        duration=duration,
    )


@pytest.mark.parametrize(
    "duration,expected",
    [
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT10M", 600),
        ("P1D", 0),
        ("", 0),
    ],
)
def test_parse_duration_seconds(duration, expected):
    assert parse_duration_seconds(duration) == expected


def test_is_short_by_tag_or_duration():
    assert is_short(make_video("a", title="Fun #SHORTS clip", duration="PT3M"))
    assert is_short(make_video("b", duration="PT59S"))
    assert not is_short(make_video("c", duration="PT1M"))


def test_format_stats_rounds_averages():
    stats = format_stats(
        [make_video("a", views=10, likes=1), make_video("b", views=15, likes=2, comments=4)]
    )

    assert stats.count == 2
    assert stats.total_views == 25
    assert stats.total_comments == 4
    assert stats.avg_views == 12
    assert stats.avg_likes == 2


def test_format_stats_empty():
    stats = format_stats([])

    assert stats.count == 0
    assert stats.avg_views == 0


def test_split_formats():
    shorts, regular = split_formats(
        [
            make_video("a", duration="PT30S", views=500),
            make_video("b", duration="PT10M", views=100),
            make_video("c", duration="PT20M", views=300),
        ]
    )

    assert shorts.count == 1
    assert shorts.total_views == 500
    assert regular.count == 2
    assert regular.avg_views == 200


def test_sum_metric_ignores_missing_and_non_numeric():
    report = AnalyticsReport(
        columns=["day", "views"],
        rows=[{"day": "2024-01-01", "views": 10}, {"day": "2024-01-02", "views": "n/a"}, {"day": "2024-01-03"}],
    )

    assert sum_metric(report, "views") == 10


def test_growth_summary():
    report = AnalyticsReport(
        columns=["day", "views", "estimatedMinutesWatched", "subscribersGained", "subscribersLost"],
        rows=[
            {"day": "2024-01-01", "views": 100, "estimatedMinutesWatched": 60, "subscribersGained": 5, "subscribersLost": 1},
            {"day": "2024-01-02", "views": 150, "estimatedMinutesWatched": 90, "subscribersGained": 3, "subscribersLost": 4},
        ],
    )

    summary = growth_summary(report)

    assert summary["views"] == 250
    assert summary["watch_minutes"] == 150
    assert summary["subscribers_gained"] == 8
    assert summary["subscribers_lost"] == 5
    assert summary["net_subscribers"] == 3


def test_revenue_summary():
    report = AnalyticsReport(
        columns=["day", "views", "estimatedRevenue"],
        rows=[{"day": "d1", "views": 100, "estimatedRevenue": 1.25}, {"day": "d2", "views": 50, "estimatedRevenue": 0.75}],
    )

    assert revenue_summary(report) == {"revenue": 2.0, "views": 150}


def test_rank_top_videos_joins_metadata_and_keeps_order():
    report = AnalyticsReport(
        columns=["video", "views", "estimatedMinutesWatched", "likes", "estimatedRevenue"],
        rows=[
            {"video": "b", "views": 900, "estimatedMinutesWatched": 30, "likes": 9, "estimatedRevenue": 2.5},
            {"video": "unknown", "views": 100, "estimatedMinutesWatched": 3, "likes": 1, "estimatedRevenue": 0},
        ],
    )

    ranked = rank_top_videos(report, [make_video("b", title="Second upload")])

    assert [video.id for video in ranked] == ["b", "unknown"]
    assert ranked[0].title == "Second upload"
    assert ranked[0].revenue == 2.5
    assert ranked[1].title == "unknown"
    assert ranked[1].thumbnail == ""


def test_days_ago():
    with patch(
        "custom_components.youtube_creator_dashboard.summaries.today",
        return_value=date(2024, 3, 1),
    ):
        assert days_ago(28) == date(2024, 2, 2)
