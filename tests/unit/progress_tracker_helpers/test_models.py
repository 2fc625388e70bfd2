import orjson

from progress_monitor.progress_tracker_helpers.models import ALL, StageState, StageStats, TaskScope, stats_to_json


def test_all_sentinel_is_distinct_from_string_ids():
    assert ALL is TaskScope.ALL
    assert ALL != "all"


def test_stage_state_defaults():
    state = StageState()

    assert state.steps_done == 0
    assert state.time_started is None
    assert state.time_finished is None
    assert state.time_elapsed == 0.0


def test_stats_to_json_stringifies_stage_keys():
    stats = {
        "load": StageStats(
            steps_planned=4,
            steps_done=4,
            time_started=10.0,
            time_finished=12.0,
            time_elapsed=2.0,
            effective_metric=0.5,
        ),
        7: StageStats(
            steps_planned=0,
            steps_done=0,
            time_started=None,
            time_finished=None,
            time_elapsed=0.0,
            effective_metric=0,
        ),
    }

    payload = orjson.loads(stats_to_json(stats))

    assert payload["load"] == {
        "steps_planned": 4,
        "steps_done": 4,
        "time_started": 10.0,
        "time_finished": 12.0,
        "time_elapsed": 2.0,
        "effective_metric": 0.5,
    }
    assert payload["7"]["time_started"] is None
