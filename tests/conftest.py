import pytest

from beatscore import Chart, ScoreRecord, ScoreStore


class RecordingReporter:
    """Collects reports instead of logging them."""

    def __init__(self):
        self.reports = []

    def report(self, message, cause, fatal):
        self.reports.append((message, cause, fatal))

    def causes(self):
        return [cause for _, cause, _ in self.reports]


@pytest.fixture()
def reporter():
    return RecordingReporter()


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "scores.db"


@pytest.fixture()
def store(db_path, reporter):
    store = ScoreStore(db_path, reporter)
    store.initialize()
    yield store
    store.shutdown()


@pytest.fixture()
def chart():
    return Chart(
        chart_id=75,
        chart_set_id=1,
        title="DISCO PRINCE",
        artist="Kenji Ninuma",
        creator="peppy",
        version="Normal",
    )


@pytest.fixture()
def make_score(chart):
    def _make(timestamp, score=100000, version=None, **play):
        target = chart if version is None else chart.model_copy(update={"version": version})
        play.setdefault("count300", 100)
        play.setdefault("combo", 150)
        return ScoreRecord.for_chart(target, timestamp=timestamp, score=score, **play)

    return _make
