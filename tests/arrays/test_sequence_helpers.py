from collections import Counter

from pytest import raises

from utilkit import NotFoundError
from utilkit.arrays import chunk, find_or_throw, first, last, move, shuffle


def describe_first():
    def gets_the_first_item():
        assert first([1, 2, 3]) == 1
        assert first([0]) == 0
        assert first([None]) is None

    def gives_none_for_empty_sequences():
        assert first([]) is None
        assert first(None) is None


def describe_last():
    def gets_the_last_item():
        assert last([1, 2, 3]) == 3
        assert last([0]) == 0

    def gives_none_for_empty_sequences():
        assert last([]) is None
        assert last("") is None


def describe_chunk():
    def splits_into_chunks():
        assert chunk([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]

    def allows_a_shorter_last_chunk():
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def handles_empty_sequences():
        assert chunk([], 2) == []
        assert chunk([], 0) == []

    def rejects_invalid_sizes():
        with raises(ValueError):
            chunk([1, 2], 0)


def describe_move():
    def moves_items():
        assert move([1, 2, 3, 4], 0, 3) == [2, 3, 4, 1]
        assert move([1, 2, 3, 4], 2, 2) == [1, 2, 3, 4]
        assert move([1, 2, 3, 4], 3, 2) == [1, 2, 4, 3]

    def moves_to_the_end_if_out_of_range():
        assert move([1, 2, 3, 4], 0, 30) == [2, 3, 4, 1]

    def counts_negative_targets_from_the_end():
        assert move(["a", "b", "c"], 0, -1) == ["b", "c", "a"]

    def does_not_change_the_input():
        items = [1, 2, 3, 4]
        move(items, 1, 2)
        assert items == [1, 2, 3, 4]

    def handles_empty_sequences():
        assert move([], 3, 2) == []


def describe_find_or_throw():
    def finds_items():
        assert find_or_throw([1, 2, 3], lambda v, _i, _s: v == 2) == 2

    def passes_index_and_sequence():
        items = ["a", "b", "c"]
        assert find_or_throw(items, lambda _v, i, s: s is items and i == 1) == "b"

    def finds_falsy_items():
        assert find_or_throw([1, 0, 2], lambda v, _i, _s: v < 1) == 0
        assert find_or_throw([1, None], lambda v, _i, _s: v is None) is None

    def raises_if_nothing_is_found():
        with raises(NotFoundError, match="find_or_throw yielded no results"):
            find_or_throw([1, 2, 3], lambda v, _i, _s: v > 3)

    def raises_the_given_error():
        with raises(KeyError, match="foo"):
            find_or_throw([1, 2, 3], lambda v, _i, _s: v > 3, KeyError("foo"))


def describe_shuffle():
    def keeps_all_items():
        items = [1, 2, 3, 4]
        shuffled = shuffle(items)
        assert shuffled is not items
        assert sorted(shuffled) == items

    def changes_the_order():
        results = Counter(tuple(shuffle([1, 2, 3, 4])) for _i in range(100))
        assert len(results) > 1

    def handles_short_sequences():
        assert shuffle([]) == []
        assert shuffle([1]) == [1]
