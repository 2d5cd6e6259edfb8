import pytest

from chainquest.components import IdleProgress
from chainquest.idle import (
    AutoSaver,
    advance_idle,
    catch_up,
    collect_resources,
    level_markers,
    resource_bar_length,
)
from chainquest.storage import DatabaseConnection, RecordNotFound


@pytest.fixture
def db():
    with DatabaseConnection(":memory:") as conn:
        yield conn


def test_idle_progress_increases_resources_and_levels_up():
    progress = IdleProgress(resources=0.0, experience=0.0, level=1, last_update=0.0)
    advance_idle(progress, 0.0, 0.0)
    advance_idle(progress, 0.5, 0.5)
    advance_idle(progress, 0.5, 1.0)
    assert progress.resources > 0.0
    assert progress.level == 1
    assert progress.resources == pytest.approx(0.5)


def test_advance_idle_levels_up_and_resets_experience():
    progress = IdleProgress()
    assert advance_idle(progress, 100.0, 0.0) is True
    assert progress.level == 2
    assert progress.experience == 0.0


def test_advance_idle_stamps_fresh_progress():
    progress = IdleProgress()
    advance_idle(progress, 1.0, 50.0)
    assert progress.last_update == pytest.approx(51.0)


def test_catch_up_applies_wall_clock_delta():
    progress = IdleProgress(last_update=100.0)
    assert catch_up(progress, 102.0) is False
    assert progress.resources == pytest.approx(1.0)
    assert progress.last_update == 102.0


def test_catch_up_ignores_time_going_backwards():
    progress = IdleProgress(resources=5.0, last_update=100.0)
    assert catch_up(progress, 90.0) is False
    assert progress.resources == 5.0
    assert progress.last_update == 100.0


def test_collect_resources_scales_with_level():
    progress = IdleProgress(resources=1.0, level=3)
    assert collect_resources(progress) == pytest.approx(31.0)
    assert progress.resources == pytest.approx(31.0)


def test_resource_bar_length_is_capped():
    assert resource_bar_length(IdleProgress(resources=1e9)) == 200.0
    assert resource_bar_length(IdleProgress(resources=500.0)) == pytest.approx(5.0)


def test_level_markers_one_per_level():
    markers = level_markers(IdleProgress(level=4))
    assert len(markers) == 4
    assert markers[0] == (-280.0, 250.0)
    assert all(y == 250.0 for _, y in markers)


def test_autosaver_saves_after_interval(db):
    saver = AutoSaver(db, 10.0)
    progress = IdleProgress(resources=12.0, level=2, last_update=1.0)
    assert saver.tick(progress, 4.0) is False
    with pytest.raises(RecordNotFound):
        db.load_progress()
    assert saver.tick(progress, 6.0) is True
    assert db.load_progress() == progress
    assert saver.tick(progress, 5.0) is False


def test_autosaver_without_player_resets_timer(db):
    saver = AutoSaver(db, 10.0)
    assert saver.tick(None, 10.0) is False
    assert saver.elapsed == 0.0


def test_autosaver_reports_failed_save(tmp_path):
    conn = DatabaseConnection(tmp_path / "x.db")
    conn.close()
    saver = AutoSaver(conn, 1.0)
    assert saver.tick(IdleProgress(), 2.0) is False
    assert saver.elapsed == 0.0