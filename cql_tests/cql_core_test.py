import suite
from dgen import from_schema
from cql import select, where, where_lazy, ArrayList, LinkedList, LazySequence

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

# test data schemas
employee_schema = {
    'id': {'_qen_provider': 'int', 'low': 1, 'high': 500},
    'name': 'first_name',
    'city': 'city',
    'age': {'_qen_provider': 'int', 'low': 18, 'high': 65},
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']}
}

is_even = lambda v: v % 2 == 0


class _Counter:
    """callable wrapper that counts invocations"""
    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.func(*args)


# select() tests

@test("select projects every element in order")
def test_select_basic():
    employees = [
        {'id': 1, 'name': 'jack', 'address': 'kaiserslautern'},
        {'id': 2, 'name': 'jill', 'address': 'berlin'},
    ]
    names = select(employees, lambda e: e['name'])
    assert_that(names == ['jack', 'jill'], "should project names in order")

    pairs = select(employees, lambda e: (e['id'], e['address']))
    assert_that(pairs == [(1, 'kaiserslautern'), (2, 'berlin')], "should project tuples")


@test("select keeps the container shape and length")
def test_select_shape():
    linked = LinkedList([1, 2, 3])
    squares = select(linked, lambda x: x * x)
    assert_that(isinstance(squares, LinkedList), "linked input should give a linked result")
    assert_that(squares == [1, 4, 9], "should square each element")

    array = ArrayList(['a', 'bb'])
    lengths = select(array, len)
    assert_that(isinstance(lengths, ArrayList), "array input should give an array result")
    assert_that(len(lengths) == len(array), "length should be unchanged")


@test("select on empty input returns an empty container without calling the selector")
def test_select_empty():
    selector = _Counter(lambda x: x)
    result = select([], selector)
    assert_that(result == [] and isinstance(result, list), "should be an empty list, not None")
    assert_that(selector.calls == 0, "selector should never run")


@test("select does not modify its input")
def test_select_read_only():
    source = [1, 2, 3]
    select(source, lambda x: x + 1)
    assert_that(source == [1, 2, 3], "source should be untouched")


# where() tests

@test("where filters elements correctly")
def test_where_basic():
    assert_that(where([1, 2, 3, 4, 5], is_even) == [2, 4], "should keep even numbers")
    assert_that(where(LinkedList([1, 2, 3, 4, 5]), is_even) == [2, 4], "linked list should filter the same")


@test("where returns the input's concrete shape")
def test_where_shape():
    assert_that(type(where([1, 2], is_even)) is list, "list in, list out")
    assert_that(type(where(ArrayList([1, 2]), is_even)) is ArrayList, "array in, array out")
    assert_that(type(where(LinkedList([1, 2]), is_even)) is LinkedList, "linked in, linked out")


@test("where result is a new container")
def test_where_new_container():
    source = [2, 4]
    result = where(source, is_even)
    result.append(6)
    assert_that(source == [2, 4], "appending to the result must not touch the source")


@test("where over generated records satisfies the predicate")
def test_where_generated():
    people = from_schema(employee_schema, seed=42).take(60, shape='array')
    senior_eng = where(people, lambda p: p['department'] == 'eng' and p['age'] > 40)

    assert_that(len(senior_eng) <= len(people), "result cannot be longer than input")
    for person in senior_eng:
        assert_that(person['department'] == 'eng' and person['age'] > 40, "every result should match")
    expected = [p for p in people if p['department'] == 'eng' and p['age'] > 40]
    assert_that(senior_eng == expected, "should keep exactly the matches in original order")


@test("where propagates predicate errors")
def test_where_propagates():
    def explode(x):
        if x == 3:
            raise KeyError('boom')
        return True

    with raises(KeyError):
        where([1, 2, 3, 4], explode)


@test("where rejects a non-callable predicate")
def test_where_not_callable():
    with raises(TypeError):
        where([1, 2], 'not a function')


@test("where rejects unsupported containers")
def test_where_unsupported():
    with raises(TypeError) as caught:
        where((1, 2, 3), is_even)
    assert_that('tuple' in str(caught.exception), "message should name the type")


# where_lazy() tests

@test("where_lazy yields the same sequence as where")
def test_where_lazy_matches_where():
    data = ArrayList([5, 8, 1, 6, 6, 3, 10])
    lazy = where_lazy(data, is_even)
    assert_that(isinstance(lazy, LazySequence), "should return a lazy sequence")
    assert_that(list(lazy) == where(data, is_even), "lazy and eager results should match")


@test("where_lazy computes nothing until pulled")
def test_where_lazy_deferred():
    predicate = _Counter(is_even)
    lazy = where_lazy([1, 2, 3, 4, 5], predicate)
    assert_that(predicate.calls == 0, "creating the sequence should not run the predicate")

    assert_that(next(lazy) == 2, "first match is 2")
    assert_that(predicate.calls == 2, "only the first two elements should have been tested")

    assert_that(next(lazy) == 4, "second match is 4")
    assert_that(predicate.calls == 4, "production should stop right after each match")


@test("where_lazy is not restartable")
def test_where_lazy_single_pass():
    lazy = where_lazy([1, 2, 3, 4], is_even)
    assert_that(list(lazy) == [2, 4], "first traversal sees every match")
    assert_that(list(lazy) == [], "second traversal yields nothing")
    assert_that(lazy.exhausted, "sequence should report exhaustion")

    again = where_lazy([1, 2, 3, 4], is_even)
    assert_that(list(again) == [2, 4], "re-invoking the operation starts a fresh traversal")


@test("where_lazy stops producing once closed")
def test_where_lazy_close():
    predicate = _Counter(lambda x: True)
    with where_lazy(LinkedList(range(10)), predicate) as lazy:
        assert_that(next(lazy) == 0, "first element")
    assert_that(list(lazy) == [], "closed sequence yields nothing")
    assert_that(predicate.calls == 1, "no element past the first should be tested")


@test("where_lazy detects a source modified mid-traversal")
def test_where_lazy_modified_source():
    data = LinkedList([1, 2, 3, 4])
    lazy = where_lazy(data, lambda x: True)
    next(lazy)
    data.append(5)
    with raises(RuntimeError):
        next(lazy)

    plain = [1, 2, 3]
    lazy_plain = where_lazy(plain, lambda x: True)
    next(lazy_plain)
    plain.pop()
    with raises(RuntimeError):
        next(lazy_plain)


@test("where_lazy on empty input is immediately exhausted")
def test_where_lazy_empty():
    predicate = _Counter(is_even)
    assert_that(list(where_lazy([], predicate)) == [], "no elements")
    assert_that(predicate.calls == 0, "predicate should never run")


if __name__ == "__main__":
    suite.main(title="cql core operations test suite")
