import unittest
from concurrent.futures import ThreadPoolExecutor

from dynknap.business_objects.errors import ComputationOverflowError, StateValidationError
from dynknap.business_objects.items import Item
from dynknap.planning import ProblemState, SolverConfig
from dynknap.planning.aggregator import solve, solve_async
from dynknap.planning.policy import MAX_TOTAL_VALUE
from dynknap.planning.solvers.dynamic import solve_group

from tests.helpers import random_items


def _strip_time(result):
    return result.max_value, result.group_results


class TestAggregator(unittest.TestCase):

    def setUp(self):
        self.items = [
            Item(10, 2, 0), Item(9, 4, 2), Item(15, 3, 0),
            Item(7, 5, 0), Item(9, 3, 2), Item(4, 1, 2),
        ]
        self.state = ProblemState.build(4, 10, 2, self.items)

    def test_max_over_groups_and_skips_empty_ones(self):
        result = solve(self.state)
        self.assertEqual(result.max_value, 25)
        self.assertEqual([gr.group_index for gr in result.group_results], [0, 2])
        self.assertEqual(result.for_group(2).max_value, 18)
        self.assertIsNone(result.for_group(1))
        self.assertEqual(result.best_group().group_index, 0)
        self.assertGreaterEqual(result.total_time, 0.0)

    def test_group_results_match_direct_solves(self):
        result = solve(self.state)
        for gr in result.group_results:
            own = [it for it in self.items if it.group == gr.group_index]
            self.assertEqual(gr, solve_group(gr.group_index, own, 10, 2))
            for it in gr.selected_items:
                self.assertEqual(it.group, gr.group_index)

    def test_no_items_gives_zero(self):
        result = solve(ProblemState.build(3, 10, 1, []))
        self.assertEqual(result.max_value, 0)
        self.assertEqual(result.group_results, ())

    def test_all_items_too_heavy(self):
        result = solve(ProblemState.build(2, 3, 0, [Item(5, 4, 0), Item(6, 9, 1)]))
        self.assertEqual(result.max_value, 0)
        self.assertEqual(len(result.group_results), 2)
        self.assertTrue(all(gr.items_selected == 0 for gr in result.group_results))

    def test_parallel_matches_sequential(self):
        items = random_items(5, n=40, groups=6)
        seq = solve(ProblemState.build(6, 25, 1, items))
        par = solve(ProblemState.build(6, 25, 1, items, max_workers=4))
        self.assertEqual(_strip_time(seq), _strip_time(par))
        self.assertEqual([gr.group_index for gr in par.group_results],
                         sorted(gr.group_index for gr in par.group_results))

    def test_classic_mode_matches_dynamic_at_zero_rate(self):
        items = random_items(9, n=30, groups=3)
        dyn = solve(ProblemState.build(3, 40, 0, items))
        cls = solve(ProblemState.build(3, 40, 0, items, mode="classic"))
        self.assertEqual(dyn.max_value, cls.max_value)
        self.assertEqual(
            [gr.max_value for gr in dyn.group_results],
            [gr.max_value for gr in cls.group_results],
        )

    def test_overflow_aborts_whole_run(self):
        items = [Item(1, 1, 0), Item(MAX_TOTAL_VALUE, 1, 1), Item(1, 1, 1)]
        with self.assertRaises(ComputationOverflowError):
            solve(ProblemState.build(2, 5, 0, items))
        with self.assertRaises(ComputationOverflowError):
            solve(ProblemState.build(2, 5, 0, items, max_workers=2))


class TestSolveAsync(unittest.TestCase):

    def test_future_without_executor(self):
        state = ProblemState.build(1, 10, 2, [Item(10, 2, 0), Item(15, 3, 0)])
        self.assertEqual(solve_async(state).result(timeout=30).max_value, 25)

    def test_future_on_caller_executor(self):
        state = ProblemState.build(1, 10, 0, [Item(3, 4, 0)])
        with ThreadPoolExecutor(max_workers=1) as pool:
            fut = solve_async(state, executor=pool)
            self.assertEqual(fut.result(timeout=30).max_value, 3)

    def test_failure_surfaces_through_future(self):
        state = ProblemState.build(1, 5, 0, [Item(MAX_TOTAL_VALUE, 1, 0), Item(2, 1, 0)])
        with self.assertRaises(ComputationOverflowError):
            solve_async(state).result(timeout=30)


class TestProblemState(unittest.TestCase):

    def test_rejects_item_outside_group_range(self):
        with self.assertRaises(StateValidationError):
            ProblemState.build(2, 10, 0, [Item(1, 1, 2)])

    def test_lists_become_tuples(self):
        state = ProblemState(config=SolverConfig(groups=1, capacity=5, rate=0), items=[Item(1, 1, 0)])
        self.assertIsInstance(state.items, tuple)
        self.assertEqual(state.group_sizes(), {0: 1})
        self.assertEqual(state.non_empty_groups(), [0])

    def test_config_validation(self):
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=0, capacity=5, rate=0)
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=1, capacity=0, rate=0)
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=1, capacity=5, rate=-1)
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=1, capacity=5, rate=1, mode="classic")
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=1, capacity=5, rate=0, mode="greedy")
        with self.assertRaises(StateValidationError):
            SolverConfig(groups=1, capacity=5, rate=0, max_workers=0)


if __name__ == "__main__":
    unittest.main()
