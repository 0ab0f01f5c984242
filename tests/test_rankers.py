import numpy as np
import pytest

from courtwait.rankers import RANKERS, CountingRanker, SortingRanker, build_ranker


class TestCountingRanker:
    def test_counts_strictly_smaller(self):
        r = CountingRanker()
        assert r.rank("Jules", ["Adam", "Betty", "Frank", "Mike"]) == 4

    def test_empty_cohort(self):
        assert CountingRanker().rank("Alice", []) == 1

    def test_ties_favour_target(self):
        assert CountingRanker().rank("Bob", ["Bob", "Bob"]) == 1

    def test_case_sensitive(self):
        r = CountingRanker()
        assert r.rank("a", ["B"]) == 2
        assert r.rank("B", ["a"]) == 1


class TestSortingRanker:
    def test_matches_example(self):
        assert SortingRanker().rank("Zane", ["Mark", "Hank", "Ana", "Vivian"]) == 5

    def test_ties_favour_target(self):
        assert SortingRanker().rank("Bob", ["Adam", "Bob", "Bob"]) == 2

    def test_does_not_mutate_cohort(self):
        cohort = ["Mike", "Adam"]
        SortingRanker().rank("Jules", cohort)
        assert cohort == ["Mike", "Adam"]


class TestCrossCheck:
    def test_rankers_agree(self):
        rng = np.random.default_rng(42)
        alphabet = list("AaBbCcZz ")
        counting, sorting = CountingRanker(), SortingRanker()
        for _ in range(300):
            n = int(rng.integers(0, 25))
            cohort = ["".join(rng.choice(alphabet, size=rng.integers(0, 5)).tolist()) for _ in range(n)]
            # pick the target from the cohort half the time to exercise duplicates
            if cohort and rng.random() < 0.5:
                target = cohort[int(rng.integers(0, n))]
            else:
                target = "".join(rng.choice(alphabet, size=3).tolist())
            assert counting.rank(target, cohort) == sorting.rank(target, cohort)


class TestBuildRanker:
    def test_default_is_counting(self):
        assert isinstance(build_ranker({"schedule": {}}), CountingRanker)

    @pytest.mark.parametrize("name", list(RANKERS))
    def test_registry(self, name):
        assert isinstance(build_ranker({"schedule": {"ranker": name}}), RANKERS[name])

    @pytest.mark.parametrize("cls", list(RANKERS.values()))
    def test_rejects_unknown_options(self, cls):
        with pytest.raises(TypeError):
            cls(window=3)

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="not found"):
            build_ranker({"schedule": {"ranker": "bogo"}})
