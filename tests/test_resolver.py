from datetime import datetime

from conftest import FULL_VIDEO
from tiksave.models.provider import ProviderEnvelope, ProviderVideo
from tiksave.services.resolver import normalize_video

WHEN = datetime(2024, 1, 1, 12, 0, 0)


def test_normalize_full_video():
    metadata = normalize_video(ProviderVideo.model_validate(FULL_VIDEO), WHEN)

    assert metadata.author.name == "Cat Lover"
    assert metadata.thumbnail_url == "https://cdn.example.com/cover.jpg"
    assert metadata.music_url == "https://cdn.example.com/music.mp3"
    assert metadata.suggested_filename == "catlover_20240101_120000_tiksave"


def test_normalize_empty_video_applies_every_default():
    metadata = normalize_video(ProviderVideo(), WHEN)

    assert metadata.id == ""
    assert metadata.title == "TikTok Video"
    assert metadata.author.name == "Unknown"
    assert metadata.author.username == ""
    assert metadata.author.avatar_url == ""
    assert (metadata.stats.plays, metadata.stats.likes, metadata.stats.comments, metadata.stats.shares) == (0, 0, 0, 0)
    assert metadata.duration == 0
    assert metadata.thumbnail_url == ""
    assert metadata.hd_url == ""
    assert metadata.sd_url == ""
    assert metadata.is_high_definition is False
    assert metadata.display.quality == "SD"
    assert metadata.suggested_filename == "unknown_20240101_120000_tiksave"


def test_author_name_falls_back_to_unique_id():
    metadata = normalize_video(ProviderVideo.model_validate({"author": {"unique_id": "catlover"}}), WHEN)
    assert metadata.author.name == "catlover"
    assert metadata.author.username == "catlover"


def test_hd_flag_only_with_distinct_hd_url():
    without_hd = normalize_video(ProviderVideo.model_validate({"play": "https://cdn.example.com/sd.mp4"}), WHEN)
    assert without_hd.is_high_definition is False
    assert without_hd.hd_url == "https://cdn.example.com/sd.mp4"
    assert without_hd.sd_url == "https://cdn.example.com/sd.mp4"

    with_hd = normalize_video(ProviderVideo.model_validate({
        "play": "https://cdn.example.com/sd.mp4",
        "hdplay": "https://cdn.example.com/hd.mp4",
    }), WHEN)
    assert with_hd.is_high_definition is True
    assert with_hd.hd_url == "https://cdn.example.com/hd.mp4"


def test_sd_url_falls_back_to_watermarked():
    metadata = normalize_video(ProviderVideo.model_validate({"wmplay": "https://cdn.example.com/wm.mp4"}), WHEN)
    assert metadata.sd_url == "https://cdn.example.com/wm.mp4"
    assert metadata.hd_url == ""


def test_thumbnail_falls_back_to_origin_cover():
    metadata = normalize_video(ProviderVideo.model_validate({"origin_cover": "https://cdn.example.com/o.jpg"}), WHEN)
    assert metadata.thumbnail_url == "https://cdn.example.com/o.jpg"


def test_provider_counters_are_lenient():
    video = ProviderVideo.model_validate({
        "id": 7301234567890123456,
        "play_count": "1200",
        "digg_count": None,
        "comment_count": "n/a",
        "share_count": 3.0,
        "author": "not-an-object",
    })

    assert video.id == "7301234567890123456"
    assert video.play_count == 1200
    assert video.digg_count is None
    assert video.comment_count is None
    assert video.share_count == 3
    assert video.author is None


def test_envelope_keeps_empty_data_object():
    envelope = ProviderEnvelope.model_validate({"code": 0, "data": {}})
    assert envelope.data is not None
    assert normalize_video(envelope.data).title == "TikTok Video"
    assert ProviderEnvelope.model_validate({"code": 0, "data": None}).data is None
    assert ProviderEnvelope.model_validate({"code": 0, "data": []}).data is None
    assert ProviderEnvelope.model_validate({"code": "0", "data": {"id": "1"}}).code == 0
