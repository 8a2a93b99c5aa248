from utilkit.arrays import dedup, dupes


def describe_dedup():
    def removes_duplicates_keeping_the_order():
        assert dedup([1, 2, 3, 3, 4, 5, 1, 2, 5]) == [1, 2, 3, 4, 5]

    def does_not_change_the_input():
        items = [1, 1, 2]
        dedup(items)
        assert items == [1, 1, 2]

    def compares_by_equality():
        items = [{"v": 1}, {"v": 2}, {"v": 1}]
        assert dedup(items) == [{"v": 1}, {"v": 2}]

    def accepts_a_compare_function():
        items = [{"v": 1, "n": "a"}, {"v": 2, "n": "b"}, {"v": 1, "n": "c"}]

        def compare(kept, item):
            return any(k["v"] == item["v"] for k in kept)

        assert dedup(items, compare) == [{"v": 1, "n": "a"}, {"v": 2, "n": "b"}]


def describe_dupes():
    def finds_duplicates():
        assert dupes([1, 2, 3, 3, 4, 5, 5]) == [3, 5]
        assert dupes([1, 2, 2, 3, 4]) == [2]
        assert dupes(["apple", "banana", "apple", "orange", "banana"]) == [
            "apple",
            "banana",
        ]

    def returns_each_duplicate_once():
        assert dupes([1, 1, 1, 1]) == [1]

    def handles_lists_without_duplicates():
        assert dupes([1, 2, 3]) == []
        assert dupes([]) == []

    def accepts_an_extract_function():
        items = [{"id": 1}, {"id": 2}, {"id": 1, "x": 0}, {"id": 3}]
        assert dupes(items, lambda item, _index, _items: item["id"]) == [
            {"id": 1, "x": 0}
        ]
        assert dupes([[1, 2], [3, 4], [1, 2], [5, 6]], lambda v, _i, _s: tuple(v)) == [
            [1, 2]
        ]
