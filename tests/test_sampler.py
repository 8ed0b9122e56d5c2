import random
from collections import Counter

from quizbank.sampler import sample, sample_rounds


class TestSample:
    def test_draws_distinct_records(self, pool):
        drawn = sample(pool, 5)
        assert len(drawn) == 5
        assert len({r.id for r in drawn}) == 5
        assert all(r.id in pool for r in drawn)

    def test_excluded_ids_never_drawn(self, pool):
        excluded = pool.ids()[:6]
        for _ in range(20):
            drawn = sample(pool, 6, excluded)
            assert not {r.id for r in drawn} & set(excluded)

    def test_short_result_when_depleted(self, pool):
        drawn = sample(pool, 5, pool.ids()[:10])
        assert sorted(r.id for r in drawn) == sorted(pool.ids()[10:])

    def test_count_larger_than_pool(self, pool):
        assert len(sample(pool, 100)) == len(pool)

    def test_zero_count(self, pool):
        assert sample(pool, 0) == []

    def test_pool_order_is_untouched(self, pool):
        before = pool.ids()
        sample(pool, 12, rng=random.Random(7))
        assert pool.ids() == before

    def test_seeded_rng_is_repeatable(self, pool):
        first = [r.id for r in sample(pool, 4, rng=random.Random(42))]
        second = [r.id for r in sample(pool, 4, rng=random.Random(42))]
        assert first == second

    def test_roughly_uniform(self, pool):
        rng = random.Random(1234)
        counts = Counter()
        for _ in range(3000):
            counts[sample(pool, 1, rng=rng)[0].id] += 1
        # 250 expected per record
        assert len(counts) == len(pool)
        assert all(150 < n < 350 for n in counts.values())


class TestSampleRounds:
    def test_rounds_never_repeat(self, pool):
        rounds = sample_rounds(pool, 4, 3)
        assert [len(r) for r in rounds] == [4, 4, 4]
        ids = [q.id for batch in rounds for q in batch]
        assert len(ids) == len(set(ids)) == 12

    def test_stops_when_pool_runs_dry(self, pool):
        rounds = sample_rounds(pool, 5, 3)
        assert [len(r) for r in rounds] == [5, 5, 2]

    def test_honours_initial_exclusions(self, pool):
        rounds = sample_rounds(pool, 5, 3, exclude_ids=pool.ids()[:10])
        assert [len(r) for r in rounds] == [2]

    def test_nothing_left(self, pool):
        assert sample_rounds(pool, 5, 3, exclude_ids=pool.ids()) == []
