from asyncio import sleep

from pytest import mark, raises

from utilkit.arrays import (
    async_every,
    async_filter,
    async_flat_map,
    async_map,
    async_some,
    each_chunk,
)


def describe_each_chunk():
    @mark.asyncio
    async def calls_back_with_each_chunk():
        chunks = []
        indices = []
        counts = []

        def callback(current_chunk, index):
            chunks.append(current_chunk)
            indices.append(index)
            return counts.append

        await each_chunk([1, 2, 3, 4, 5], 2, callback)
        assert chunks == [[1, 2], [3, 4], [5]]
        assert indices == [0, 1, 2]
        assert counts == [2, 4, 5]

    @mark.asyncio
    async def awaits_async_callbacks_in_order():
        events = []

        async def callback(current_chunk, index):
            events.append(("start", index))
            await sleep(0)
            events.append(("end", index))

        await each_chunk([1, 2, 3, 4], 2, callback)
        assert events == [("start", 0), ("end", 0), ("start", 1), ("end", 1)]


def describe_async_map():
    @mark.asyncio
    async def maps_items():
        async def callback(value, _index, _items):
            return value + 1

        assert await async_map([1, 2, 3, 4], callback) == [2, 3, 4, 5]

    @mark.asyncio
    async def accepts_sync_callbacks():
        assert await async_map([1, 2], lambda v, i, _s: v * i) == [0, 2]

    @mark.asyncio
    async def cancels_pending_callbacks_on_error():
        finished = []

        async def callback(value, _index, _items):
            if value == 2:
                raise RuntimeError("Oops")
            await sleep(0.1)
            finished.append(value)  # pragma: no cover

        with raises(RuntimeError, match="Oops"):
            await async_map([1, 2, 3], callback)
        await sleep(0.2)
        assert finished == []


def describe_async_flat_map():
    @mark.asyncio
    async def flattens_results():
        async def callback(value, _index, _items):
            return [] if value == 1 else [value, value]

        assert await async_flat_map([1, 2, 3], callback) == [2, 2, 3, 3]

    @mark.asyncio
    async def keeps_single_values():
        async def callback(value, _index, _items):
            return [] if value == 1 else value

        assert await async_flat_map([1, 2, 3], callback) == [2, 3]


def describe_async_filter():
    @mark.asyncio
    async def filters_items():
        async def callback(value, _index, _items):
            return value != 1

        assert await async_filter([1, 2, 3], callback) == [2, 3]


def describe_async_some():
    @mark.asyncio
    async def stops_at_the_first_match():
        seen = []

        async def callback(value, _index, _items):
            seen.append(value)
            return value > 1

        assert await async_some([1, 2, 3], callback) is True
        assert seen == [1, 2]

    @mark.asyncio
    async def is_false_without_match():
        async def callback(value, _index, _items):
            return value > 3

        assert await async_some([1, 2, 3], callback) is False


def describe_async_every():
    @mark.asyncio
    async def stops_at_the_first_mismatch():
        seen = []

        async def callback(value, _index, _items):
            seen.append(value)
            return value < 2

        assert await async_every([1, 2, 3], callback) is False
        assert seen == [1, 2]

    @mark.asyncio
    async def is_true_if_all_match():
        async def callback(value, _index, _items):
            return value > 0

        assert await async_every([1, 2, 3], callback) is True
