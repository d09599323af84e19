"""Tests for the forward/backward pass engine."""

import pytest

from mpm.exceptions import ErrorReason, InconsistentGraphError
from mpm.scheduler import (
    EngineConfig,
    InconsistencyPolicy,
    ScheduleEngine,
    ScheduleMode,
    SchedulingConfig,
    Task,
    Trace,
    compute_schedule,
    run,
)
from tests.conftest import assert_schedule_invariants, by_id, task


class TestWorkedExamples:
    """Known networks with hand-computed answers."""

    def test_linear_chain(self, chain_tasks: list[Task]) -> None:
        result = compute_schedule(chain_tasks)
        tasks = by_id(result)

        assert result.project_duration == 9
        assert result.critical_path == ["A", "B", "C"]
        expected = {
            "A": (0, 3, 0, 3, 0),
            "B": (3, 5, 3, 5, 0),
            "C": (5, 9, 5, 9, 0),
        }
        for task_id, (es, ef, ls, lf, total_float) in expected.items():
            t = tasks[task_id]
            assert (t.early_start, t.early_finish) == (es, ef)
            assert (t.late_start, t.late_finish) == (ls, lf)
            assert t.total_float == total_float
            assert t.is_critical

    def test_diamond(self, diamond_tasks: list[Task]) -> None:
        result = compute_schedule(diamond_tasks)
        tasks = by_id(result)

        assert result.project_duration == 9
        assert result.critical_path == ["A", "C", "D"]
        assert tasks["B"].early_start == 3
        assert tasks["B"].late_start == 6
        assert tasks["B"].late_finish == 8
        assert tasks["B"].total_float == 3
        assert not tasks["B"].is_critical
        assert tasks["D"].early_start == 8
        assert result.is_consistent

    def test_house_network(self, house_tasks: list[Task]) -> None:
        result = compute_schedule(house_tasks)
        tasks = by_id(result)

        assert result.project_duration == 30
        assert result.critical_path == ["A", "B", "D", "F", "G"]
        assert tasks["C"].total_float == 10
        assert tasks["E"].total_float == 1
        assert tasks["H"].total_float == 24
        assert tasks["G"].early_start == 23
        assert_schedule_invariants(result)

    def test_single_task(self) -> None:
        result = compute_schedule([task("solo", 4)])

        assert result.project_duration == 4
        assert result.critical_path == ["solo"]

    def test_zero_duration_milestone(self) -> None:
        tasks = [task("A", 2), task("M", 0, "A"), task("B", 3, "M")]
        result = compute_schedule(tasks)
        milestone = result.get_task("M")

        assert milestone.early_start == milestone.early_finish == 2
        assert milestone.is_critical
        assert result.project_duration == 5

    def test_independent_parallel_tasks(self) -> None:
        """Only the longest of several unrelated tasks is critical."""
        result = compute_schedule([task("A", 2), task("B", 7), task("C", 5)])

        assert result.project_duration == 7
        assert result.critical_path == ["B"]
        assert result.get_task("A").late_start == 5
        assert result.get_task("C").total_float == 2

    def test_all_zero_durations(self) -> None:
        result = compute_schedule([task("A", 0), task("B", 0, "A")])

        assert result.project_duration == 0
        assert result.critical_path == ["A", "B"]


class TestProperties:
    """Invariants that hold on any valid network."""

    @pytest.mark.parametrize("fixture_name", ["chain_tasks", "diamond_tasks", "house_tasks"])
    def test_invariants(self, fixture_name: str, request: pytest.FixtureRequest) -> None:
        tasks = request.getfixturevalue(fixture_name)

        assert_schedule_invariants(compute_schedule(tasks))

    def test_input_order_does_not_change_values(self, house_tasks: list[Task]) -> None:
        forward = by_id(compute_schedule(house_tasks))
        backward = by_id(compute_schedule(list(reversed(house_tasks))))

        assert forward == backward

    def test_results_keep_input_order(self, house_tasks: list[Task]) -> None:
        shuffled = [house_tasks[i] for i in (7, 2, 0, 5, 1, 6, 3, 4)]
        result = compute_schedule(shuffled)

        assert [t.id for t in result.tasks] == [t.id for t in shuffled]
        assert result.critical_path == ["A", "F", "B", "G", "D"]

    def test_idempotent(self, diamond_tasks: list[Task]) -> None:
        assert compute_schedule(diamond_tasks) == compute_schedule(diamond_tasks)

    def test_input_is_not_mutated(self, diamond_tasks: list[Task]) -> None:
        before = [Task(t.id, t.name, t.duration, list(t.predecessors)) for t in diamond_tasks]

        compute_schedule(diamond_tasks)

        assert diamond_tasks == before

    def test_later_edits_do_not_reach_earlier_result(self, diamond_tasks: list[Task]) -> None:
        result = compute_schedule(diamond_tasks)
        diamond_tasks[0].duration = 100
        diamond_tasks[3].predecessors.append("A")

        assert result.get_task("A").duration == 3
        assert result.get_task("D").predecessors == ("B", "C")
        assert compute_schedule(diamond_tasks).project_duration == 106

    def test_duplicate_predecessor_reference(self) -> None:
        result = compute_schedule([task("A", 3), task("B", 1, "A", "A")])

        assert result.get_task("B").early_start == 3
        assert result.project_duration == 4

    def test_predecessor_order_preserved(self) -> None:
        result = compute_schedule([task("A", 1), task("B", 1), task("C", 1, "B", "A")])

        assert result.get_task("C").predecessors == ("B", "A")

    def test_run_dispatches_on_mode(self, chain_tasks: list[Task]) -> None:
        full = run(chain_tasks)
        traced = run(chain_tasks, ScheduleMode.TRACE)

        assert full.project_duration == 9  # type: ignore[union-attr]
        assert isinstance(traced, Trace)


class TestInconsistentGraph:
    """Input that bypasses validation makes the passes stall."""

    def test_cycle_falls_back_and_is_flagged(self) -> None:
        tasks = [task("A", 2, "B"), task("B", 3, "A"), task("C", 4)]

        result = ScheduleEngine(tasks).run()

        assert not result.is_consistent
        passes = [i.pass_name for i in result.inconsistencies]
        assert passes == ["forward", "backward"]
        assert result.inconsistencies[0].task_ids == ("A", "B")
        assert result.inconsistencies[1].task_ids == ("A", "B")

        tasks_by_id = by_id(result)
        # Forward fallback: A sees no resolved predecessor, then B sees A
        assert tasks_by_id["A"].early_start == 0
        assert tasks_by_id["B"].early_start == 2
        assert result.project_duration == 5
        # Backward fallback pins every unresolved task to the project end
        for task_id in ("A", "B"):
            assert tasks_by_id[task_id].late_finish == result.project_duration
            t = tasks_by_id[task_id]
            assert t.late_start == t.late_finish - t.duration
            assert t.early_finish == t.early_start + t.duration

    def test_dangling_reference_falls_back(self) -> None:
        result = ScheduleEngine([task("A", 2), task("B", 1, "A", "ghost")]).run()

        assert [i.pass_name for i in result.inconsistencies] == ["forward"]
        assert result.get_task("B").early_start == 2
        assert result.project_duration == 3
        assert result.get_task("B").late_finish == 3

    def test_fallback_description(self) -> None:
        result = ScheduleEngine([task("A", 1, "A")]).run()

        message = result.inconsistencies[0].describe()
        assert "Forward pass stalled" in message
        assert "A" in message

    def test_raise_policy(self) -> None:
        config = SchedulingConfig(
            engine=EngineConfig(on_inconsistent=InconsistencyPolicy.RAISE)
        )

        with pytest.raises(InconsistentGraphError) as exc_info:
            ScheduleEngine([task("A", 1, "B"), task("B", 1, "A")], config).run()

        assert exc_info.value.reason == ErrorReason.INCONSISTENT_GRAPH
        assert exc_info.value.task_ids == ["A", "B"]

    def test_valid_graph_never_trips_guard_with_minimum_factor(
        self, house_tasks: list[Task]
    ) -> None:
        config = SchedulingConfig(engine=EngineConfig(iteration_factor=1))

        result = ScheduleEngine(list(reversed(house_tasks)), config).run()

        assert result.is_consistent
        assert result.project_duration == 30

    def test_engine_is_single_use(self, chain_tasks: list[Task]) -> None:
        engine = ScheduleEngine(chain_tasks)
        engine.run()

        with pytest.raises(RuntimeError):
            engine.run()

    def test_empty_engine_input(self) -> None:
        result = ScheduleEngine([]).run()

        assert result.tasks == []
        assert result.project_duration == 0
