import pytest
from combiseq import Seq
from combiseq.functional.enumerators import partition_all, subsets
from combiseq.functional.split import split_all


@pytest.fixture
def numbers():
    return Seq([1, 2, 3, 4])


def test_sequence_protocol(numbers):
    assert len(numbers) == 4
    assert list(numbers) == [1, 2, 3, 4]
    assert numbers[0] == 1
    assert numbers[1:3] == Seq([2, 3])
    assert 3 in numbers
    assert numbers.index(4) == 3


def test_equality_and_hashing(numbers):
    assert numbers == Seq((1, 2, 3, 4))
    assert numbers == (1, 2, 3, 4)
    assert numbers != Seq([4, 3, 2, 1])
    assert len({numbers, Seq([1, 2, 3, 4])}) == 1


def test_repr_and_concat(numbers):
    assert repr(Seq("ab")) == "Seq(('a', 'b'))"
    assert numbers + [5] == Seq([1, 2, 3, 4, 5])


def test_chaining_returns_new_sequences(numbers):
    result = numbers.rotate(1).map_range(0, mapper=lambda e: e * 10).remove_range(3)
    assert isinstance(result, Seq)
    assert result == (40, 1, 2)
    assert numbers == (1, 2, 3, 4)


def test_positional_methods(numbers):
    assert numbers.take_range(1, 2) == (2, 3)
    assert numbers.map_if(lambda e: e % 2 == 0, lambda e: -e) == (1, -2, 3, -4)
    assert numbers.cyclic_pad(6) == (1, 2, 3, 4, 1, 2)
    assert numbers.rotate_all()[0] == (1, 2, 3, 4)


def test_split_methods(numbers):
    assert numbers.split_all() == split_all([1, 2, 3, 4])
    assert numbers.split_map(lambda l, c, r: len(l) + len(r)) == (3, 3, 3, 3)
    assert numbers.split_contexts()[1].left == (1,)
    assert numbers.remove_each()[0] == (2, 3, 4)
    assert numbers.lens_map(lambda e: 0)[3] == (1, 2, 3, 0)
    assert numbers.stepped()[1] == (2, 3, 4)
    assert numbers.stepped_right()[1] == (1, 2)
    assert numbers.pair_ends() == [(1, 4), (2, 3)]
    assert numbers.prefix_correspondence([1, 2, 0]) == 2
    assert numbers.prefix_correspondence([2, 3], lambda a, b: b == a + 1) == 2


def test_fold_methods(numbers):
    assert numbers.fold_while(0, lambda acc: acc < 5, lambda acc, e: acc + e) == 6
    assert numbers.fold_until(0, lambda acc: acc >= 3, lambda acc, e: acc + e) == 3
    assert numbers.any_match(lambda e: e > 3)
    assert not numbers.any_while(lambda e: e < 3, lambda e: e == 4)


def test_enumeration_methods(numbers):
    assert numbers.subsets(1, 2) == subsets([1, 2, 3, 4], 1, 2)
    assert numbers.partition_all(2, 2) == partition_all([1, 2, 3, 4], 2, 2)
    assert len(numbers.multisets(2, 2)) == 10


def test_class_docstring_example():
    assert "Example:" in Seq.__doc__
    assert "--------" not in Seq.__doc__
    assert Seq("abc").remove_each() == [("b", "c"), ("a", "c"), ("a", "b")]
    assert Seq([1, 2, 3]).subsets(2, 2) == [(1, 2), (1, 3), (2, 3)]
