import numpy as np
import pandas as pd
import suite
from dgen import from_schema
from bloqs import S, empty

test = suite.test
assert_that = suite.assert_that

product_schema = {
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_gen': 'choice', 'from': ['electronics', 'books', 'clothing']}
}


@test("to.list and to.tuple return the elements")
def test_list_tuple():
    s = S([1, 2, 3])
    assert_that(s.to.list() == [1, 2, 3], "list")
    assert_that(s.to.tuple() == (1, 2, 3), "tuple")


@test("to.array converts to a numpy array")
def test_array():
    arr = S([1, 2, 3]).map(lambda x: x * 1.5).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be ndarray")
    assert_that(np.allclose(arr, [1.5, 3.0, 4.5]), f"got {arr}")


@test("to.pandas converts to a series")
def test_pandas():
    series = S([4, 5, 6]).select(lambda x: x > 4).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be series")
    assert_that(series.tolist() == [5, 6], f"got {series.tolist()}")
    assert_that(len(empty().to.pandas()) == 0, "empty series")


@test("to.df builds a dataframe from records")
def test_df():
    products = from_schema(product_schema, seed=555).take(20)
    books = products.select(lambda p: p['category'] == 'books')
    frame = books.to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be dataframe")
    assert_that(len(frame) == len(books), "one row per record")
    if len(books):
        assert_that(set(frame.columns) == {'name', 'price', 'category'}, "columns from record keys")
        assert_that((frame['category'] == 'books').all(), "only books remain")


@test("to.count with and without predicate")
def test_count():
    s = S([1, 2, 3, 4])
    assert_that(s.to.count() == 4, "total")
    assert_that(s.to.count(lambda x: x > 2) == 2, "with predicate")
    assert_that(empty().to.count() == 0, "empty")


if __name__ == "__main__":
    suite.run(title="bloqs terminal conversions test suite")
