from collections import Counter
import suite
from dgen import from_schema, integers
from kselect import selector, natural_order, by_key, then_by, NoSuchRankError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# small value range so duplicates are guaranteed
bag = integers(200, 0, 50, seed=7)
distinct_sorted = sorted(set(bag))
d = len(distinct_sorted)


def plain(a, b):
    return (a > b) - (a < b)


person_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 30}),
    'department': {'_dgen_provider': 'choice', 'from': ['eng', 'sales', 'hr']}
}
people = from_schema(person_schema, seed=42).take(60)
by_age = by_key(lambda p: p['age'])
ages = sorted({p['age'] for p in people})


@test("min is at most and max at least every element")
def test_min_max_bounds():
    lo = selector.min(bag, natural_order)
    hi = selector.max(bag, natural_order)
    assert_that(all(lo <= e for e in bag), f"min {lo} exceeds an element")
    assert_that(all(hi >= e for e in bag), f"max {hi} is below an element")


@test("rank one is the extreme")
def test_rank_one():
    assert_that(selector.kmin(bag, 1, natural_order) == selector.min(bag, natural_order), "kmin(1) != min")
    assert_that(selector.kmax(bag, 1, plain) == selector.max(bag, plain), "kmax(1) != max")


@test("last distinct rank is the opposite extreme")
def test_rank_d():
    assert_that(selector.kmin(bag, d, natural_order) == distinct_sorted[-1], "kmin(d) != max")
    assert_that(selector.kmax(bag, d, plain) == distinct_sorted[0], "kmax(d) != min")
    assert_raises(NoSuchRankError, selector.kmin, bag, d + 1, natural_order)
    assert_raises(NoSuchRankError, selector.kmax, bag, d + 1, plain)


@test("every rank walks the distinct values in order")
def test_all_ranks():
    ascending = [selector.kmin(bag, k, plain) for k in range(1, d + 1)]
    descending = [selector.kmax(bag, k, natural_order) for k in range(1, d + 1)]
    assert_that(ascending == distinct_sorted, "kmin ranks out of order")
    assert_that(descending == distinct_sorted[::-1], "kmax ranks out of order")


@test("range returns exactly the qualifying multiset")
def test_range_multiset():
    result = selector.range(bag, 10, 20, natural_order)
    expected = Counter(e for e in bag if 10 <= e <= 20)
    assert_that(Counter(result) == expected, "range multiset mismatch")
    full = selector.range(bag, selector.min(bag, plain), selector.max(bag, plain), plain)
    assert_that(len(full) == len(bag), f"full-span range lost elements: {len(full)}")


@test("floor <= key <= ceiling across the whole span")
def test_floor_ceiling_bracket():
    members = set(bag)
    for key in range(distinct_sorted[0], distinct_sorted[-1] + 1):
        lo = selector.floor(bag, key, natural_order)
        hi = selector.ceiling(bag, key, plain)
        assert_that(lo <= key <= hi, f"bracket broken at {key}: {lo}, {hi}")
        if key in members:
            assert_that(lo == hi == key, f"member key {key} not returned by floor/ceiling")


@test("records generated from a schema select by age")
def test_records_by_age():
    for k, age in enumerate(ages, start=1):
        assert_that(selector.kmin(people, k, by_age)['age'] == age, f"kmin({k}) age mismatch")
    assert_that(selector.max(people, by_age)['age'] == ages[-1], "oldest age mismatch")
    middle = selector.range(people, {'age': 20}, {'age': 25}, by_age)
    assert_that(len(middle) == sum(1 for p in people if 20 <= p['age'] <= 25), "age range count mismatch")


@test("composed comparer picks the same record as a stable sort")
def test_records_then_by():
    compare = then_by(by_key(lambda p: p['department']), by_age)
    expected_first = sorted(people, key=lambda p: (p['department'], p['age']))[0]
    expected_last = sorted(people, key=lambda p: (p['department'], p['age']), reverse=True)[0]
    assert_that(selector.min(people, compare) is expected_first, "composed min mismatch")
    assert_that(selector.max(people, compare) is expected_last, "composed max mismatch")


@test("queries never modify generated input")
def test_no_mutation():
    snapshot = list(bag)
    selector.kmin(bag, 3, plain)
    selector.kmax(bag, 3, plain)
    selector.range(bag, 5, 45, natural_order)
    selector.ceiling(bag, 25, natural_order)
    selector.floor(bag, 25, natural_order)
    assert_that(bag == snapshot, "input bag was modified")


if __name__ == "__main__":
    suite.run(title="kselect property test")
