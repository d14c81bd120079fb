# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for aggregation and descriptor post-processing."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from archivus.descriptor import Descriptor, split_extension
from archivus.stats import (
    DirectoryStats,
    aggregate,
    group_by_extension,
    index_by_name,
    sort_descriptors,
)


def _file(name: str, size: int, *, modified: int | None = None) -> Descriptor:
    return Descriptor(
        path=f"root/{name}",
        name=name,
        extension=split_extension(name),
        size=size,
        is_directory=False,
        is_file=True,
        modified=modified,
    )


def _directory(name: str) -> Descriptor:
    return Descriptor(
        path=f"root/{name}",
        name=name,
        extension=split_extension(name),
        size=0,
        is_directory=True,
        is_file=False,
    )


_SAMPLE = [_file("a.txt", 10), _file("b.jpg", 2048), _directory("sub"), _file("c.txt", 5)]


class TestAggregate:
    """Folding descriptors into totals."""

    def test_empty_input(self) -> None:
        assert aggregate([]) == DirectoryStats()

    def test_sample_tree(self) -> None:
        stats = aggregate(_SAMPLE)

        assert stats.file_count == 3
        assert stats.directory_count == 1
        assert stats.total_size == 2063
        assert dict(stats.extension_counts) == {"txt": 2, "jpg": 1}
        assert stats.largest_file_size == 2048
        assert stats.largest_file_name == "b.jpg"

    def test_directories_add_no_size(self) -> None:
        stats = aggregate([_directory("a"), _directory("b")])

        assert stats.total_size == 0
        assert stats.largest_file_name is None

    def test_entries_without_extension_are_not_counted(self) -> None:
        stats = aggregate([_file("Makefile", 1), _file(".env", 1)])

        assert dict(stats.extension_counts) == {}
        assert stats.file_count == 2

    def test_directory_extensions_are_ignored(self) -> None:
        stats = aggregate([_directory("conf.d"), _file("a.txt", 1)])

        assert dict(stats.extension_counts) == {"txt": 1}
        assert stats.directory_count == 1

    def test_first_largest_file_wins_ties(self) -> None:
        stats = aggregate([_file("first.bin", 7), _file("second.bin", 7)])

        assert stats.largest_file_name == "first.bin"

    def test_first_file_is_incumbent_even_when_empty(self) -> None:
        stats = aggregate([_file("empty.txt", 0), _file("also_empty.txt", 0)])

        assert stats.largest_file_size == 0
        assert stats.largest_file_name == "empty.txt"

    def test_accepts_generators(self) -> None:
        stats = aggregate(descriptor for descriptor in _SAMPLE)

        assert stats.file_count == 3

    def test_extension_counts_are_read_only(self) -> None:
        stats = aggregate(_SAMPLE)

        with pytest.raises(TypeError):
            stats.extension_counts["txt"] = 9  # type: ignore[index]

    def test_formatted_sizes(self) -> None:
        stats = aggregate(_SAMPLE)

        assert stats.formatted_size == "2.01 KB"
        assert stats.formatted_largest_file_size == "2.00 KB"


_descriptors = st.lists(
    st.one_of(
        st.builds(
            _file,
            st.text(alphabet="ab.", min_size=1, max_size=6),
            st.integers(min_value=0, max_value=10**9),
        ),
        st.builds(_directory, st.text(alphabet="ab.", min_size=1, max_size=6)),
    ),
    max_size=20,
)


@given(descriptors=_descriptors, data=st.data())
@settings(max_examples=100)
def test_totals_do_not_depend_on_order(
    descriptors: list[Descriptor], data: st.DataObject
) -> None:
    shuffled = data.draw(st.permutations(descriptors))

    original = aggregate(descriptors)
    reordered = aggregate(shuffled)

    assert reordered.file_count == original.file_count
    assert reordered.directory_count == original.directory_count
    assert reordered.total_size == original.total_size
    assert dict(reordered.extension_counts) == dict(original.extension_counts)
    assert reordered.largest_file_size == original.largest_file_size


@given(descriptors=_descriptors)
@settings(max_examples=100)
def test_counts_partition_input(descriptors: list[Descriptor]) -> None:
    stats = aggregate(descriptors)

    assert stats.file_count + stats.directory_count == len(descriptors)
    assert stats.total_size == sum(d.size for d in descriptors if d.is_file)


class TestGroupByExtension:
    """Grouping keeps order and collects extensionless entries under None."""

    def test_groups(self) -> None:
        groups = group_by_extension(
            [_file("a.txt", 1), _file("Makefile", 1), _file("b.txt", 1)]
        )

        assert [d.name for d in groups["txt"]] == ["a.txt", "b.txt"]
        assert [d.name for d in groups[None]] == ["Makefile"]

    def test_empty(self) -> None:
        assert group_by_extension([]) == {}


class TestIndexByName:
    """Mapping names to descriptors."""

    def test_later_duplicates_win(self) -> None:
        first = _file("a.txt", 1)
        second = Descriptor(
            path="root/sub/a.txt",
            name="a.txt",
            extension="txt",
            size=2,
            is_directory=False,
            is_file=True,
        )

        index = index_by_name([first, _file("b.txt", 3), second])

        assert index["a.txt"] is second
        assert set(index) == {"a.txt", "b.txt"}


class TestSortDescriptors:
    """Sorting by descriptor attributes."""

    def test_by_name(self) -> None:
        ordered = sort_descriptors([_file("b", 1), _file("a", 2)])

        assert [d.name for d in ordered] == ["a", "b"]

    def test_by_size_descending(self) -> None:
        ordered = sort_descriptors(_SAMPLE, "size", reverse=True)

        assert [d.name for d in ordered] == ["b.jpg", "a.txt", "c.txt", "sub"]

    def test_by_modified_puts_unknown_first(self) -> None:
        ordered = sort_descriptors(
            [_file("new", 1, modified=20), _file("unknown", 1), _file("old", 1, modified=10)],
            "modified",
        )

        assert [d.name for d in ordered] == ["unknown", "old", "new"]

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError):
            _ = sort_descriptors(_SAMPLE, "owner")  # type: ignore[arg-type]
