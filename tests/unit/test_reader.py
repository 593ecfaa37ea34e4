# tests/unit/test_reader.py

"""Tests for MZReader cursor and lifecycle policies over an in-memory source."""

import gzip

import pytest

from mzaccess.core.base_reader import BaseSpectrumSource
from mzaccess.exceptions import ReaderClosedError, SpectrumNotFound
from mzaccess.reader import MZReader
from mzaccess.spectrum import SignalArrays, SpectrumDescription


class MemorySource(BaseSpectrumSource):
    """Concrete implementation for testing the reader without a file."""

    def __init__(self, count):
        super().__init__("memory")
        self.ids = [f"scan={i + 1}" for i in range(count)]
        self.reads = []
        self.closed = False

    def __len__(self):
        return len(self.ids)

    def read_record(self, index):
        if not 0 <= index < len(self.ids):
            raise SpectrumNotFound(index)
        self.reads.append(index)
        return SpectrumDescription(id=self.ids[index], index=index), SignalArrays.empty()

    def read_record_by_id(self, native_id):
        if native_id not in self.ids:
            raise SpectrumNotFound(native_id)
        return self.read_record(self.ids.index(native_id))

    def close(self):
        self.closed = True


class TestMZReader:
    """Test the sequential cursor and random access rules."""

    def setup_method(self):
        """Set up test fixtures."""
        self.source = MemorySource(3)
        self.reader = MZReader(self.source)

    def test_size(self):
        assert self.reader.size() == 3
        assert len(self.reader) == 3

    def test_exhaustion_is_sticky_until_reset(self):
        assert [self.reader.next().index() for _ in range(3)] == [0, 1, 2]
        assert self.reader.next() is None
        assert self.reader.next() is None

        self.reader.reset()
        assert self.reader.next().index() == 0

    def test_random_access_leaves_cursor(self):
        self.reader.next()
        self.reader.get_by_index(2)

        assert self.reader.position == 1
        assert self.reader.next().index() == 1

    def test_out_of_range_reports_index(self):
        with pytest.raises(SpectrumNotFound, match="No spectrum at index 3") as excinfo:
            self.reader.get_by_index(3)
        assert excinfo.value.key == 3
        with pytest.raises(SpectrumNotFound):
            self.reader.get_by_index(-1)
        with pytest.raises(IndexError):
            self.reader[4]
        assert self.source.reads == []

    def test_start_from_index(self):
        self.reader.start_from_index(1)

        assert [spectrum.index() for spectrum in self.reader] == [1, 2]
        with pytest.raises(SpectrumNotFound):
            self.reader.start_from_index(-1)

    def test_get_by_id(self):
        assert self.reader.get_by_id("scan=3").index() == 2
        with pytest.raises(SpectrumNotFound, match="No spectrum with id 'scan=9'"):
            self.reader.get_by_id("scan=9")

    def test_each_call_returns_a_new_record(self):
        first = self.reader.get_by_index(0)
        second = self.reader.get_by_index(0)
        first.release()

        assert first is not second
        assert second.id() == "scan=1"

    def test_close(self):
        with self.reader as reader:
            reader.next()

        assert self.source.closed
        assert self.reader.closed
        with pytest.raises(ReaderClosedError):
            self.reader.get_by_index(0)
        with pytest.raises(ReaderClosedError):
            self.reader.metadata()

        # Closing twice is harmless
        self.reader.close()

    def test_empty_source(self):
        reader = MZReader(MemorySource(0))

        assert reader.size() == 0
        assert reader.next() is None
        assert list(reader) == []

    def test_default_metadata_is_empty(self):
        metadata = self.reader.metadata()

        assert metadata.run_id is None
        assert metadata.instrument_configurations == []


class TestBaseSpectrumSource:
    """Test the shared source plumbing."""

    def test_count_comes_from_len(self):
        source = MemorySource(2)

        assert len(source) == 2
        assert MZReader(source).size() == 2

    def test_plain_file_is_passed_by_path(self, tmp_path):
        path = tmp_path / "run.mgf"
        path.write_bytes(b"BEGIN IONS\nEND IONS\n")
        source = MemorySource(0)
        source.data_path = path

        assert source._parser_source() == str(path)
        assert source._handle is None

    def test_compressed_file_is_passed_as_handle(self, tmp_path):
        path = tmp_path / "run.mgf.gz"
        with gzip.open(path, "wb") as handle:
            handle.write(b"BEGIN IONS\nEND IONS\n")
        source = MemorySource(0)
        source.data_path = path

        handle = source._parser_source()
        assert handle.read(10) == b"BEGIN IONS"

        source._close_handle()
        assert handle.closed
        assert source._handle is None
