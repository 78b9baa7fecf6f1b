"""Tests for the editing session wrapper and the session store."""

import pytest

from svgcode.engine.pipeline import NormalizerSession
from svgcode.engine.sessions import SessionStore
from svgcode.engine.state import NormalizationConfig, Phase
from tests.conftest import BLUE_PATH_SVG, NO_FILL_SVG, RED_GROUP_SVG


def test_new_session_is_empty():
    session = NormalizerSession()
    assert session.phase is Phase.EMPTY
    assert session.normalized_text is None
    assert session.detected_color is None


def test_config_change_before_upload_is_noop():
    session = NormalizerSession()
    result = session.on_config_change(64, 64, "#00ff00")
    assert result.ok
    assert result.svg is None
    assert session.phase is Phase.EMPTY
    assert session.config == NormalizationConfig(width=64, height=64, color="#00ff00")


def test_upload_normalizes_and_seeds_color():
    session = NormalizerSession()
    result = session.on_upload(RED_GROUP_SVG)
    assert result.ok
    assert result.svg == '<svg fill="#ff0000" width="150" height="150"><path /></svg>'
    assert result.detected_color == "#ff0000"
    assert session.normalized_text == result.svg
    assert session.phase is Phase.NORMALIZED
    assert session.config.color == "#ff0000"


def test_config_change_renormalizes_held_text():
    session = NormalizerSession()
    session.on_upload(RED_GROUP_SVG)
    result = session.on_config_change(64, 32, "#00ff00")
    assert result.svg == '<svg fill="#00ff00" width="64" height="32"><path /></svg>'
    assert session.detected_color == "#ff0000"


def test_bad_upload_keeps_previous_text():
    session = NormalizerSession()
    good = session.on_upload(RED_GROUP_SVG).svg

    result = session.on_upload("<svg><path></svg>")
    assert not result.ok
    assert result.svg == good
    assert session.normalized_text == good
    assert session.last_error
    assert session.detected_color == "#ff0000"

    # the session still works from the last good text
    result = session.on_config_change(10, 10, None)
    assert result.ok
    assert session.last_error is None
    assert 'width="10"' in result.svg


def test_new_upload_rearms_detection():
    session = NormalizerSession()
    session.on_upload(RED_GROUP_SVG)
    result = session.on_upload(BLUE_PATH_SVG)
    assert result.detected_color == "#0000ff"
    assert 'fill="#0000ff"' in result.svg


def test_upload_without_fill_keeps_chosen_color():
    session = NormalizerSession()
    session.on_config_change(150, 150, "#123456")
    result = session.on_upload(NO_FILL_SVG)
    assert result.detected_color is None
    assert 'fill="#123456"' in result.svg
    assert session.config.color == "#123456"


def test_session_store_lifecycle():
    store = SessionStore(config=NormalizationConfig(width=48, height=48), default_color="#ffffff")
    session_id, session = store.create()
    assert store.get(session_id) is session
    assert len(store) == 1

    result = session.on_upload(NO_FILL_SVG)
    assert 'fill="#ffffff"' in result.svg
    assert 'width="48"' in result.svg

    assert store.delete(session_id)
    assert store.get(session_id) is None
    assert not store.delete(session_id)


def test_empty_fill_survives_config_change():
    session = NormalizerSession()
    first = session.on_upload('<svg fill=""><path d="M0"/></svg>').svg
    assert session.detected_color == ""
    assert session.config.color == ""

    result = session.on_config_change(150, 150, session.config.color)
    assert result.svg == first


def test_session_store_evicts_oldest_past_cap():
    store = SessionStore(max_sessions=2)
    first_id, _ = store.create()
    second_id, _ = store.create()
    third_id, _ = store.create()

    assert len(store) == 2
    assert store.get(first_id) is None
    assert store.get(second_id) is not None
    assert store.get(third_id) is not None


def test_session_store_keeps_recently_used():
    store = SessionStore(max_sessions=2)
    first_id, _ = store.create()
    second_id, _ = store.create()

    store.get(first_id)
    store.create()

    assert store.get(first_id) is not None
    assert store.get(second_id) is None


def test_session_store_rejects_zero_cap():
    with pytest.raises(ValueError):
        SessionStore(max_sessions=0)
