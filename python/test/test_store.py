import os
import struct
import tempfile
import unittest

from helpers import write_both


class TestTextPointStore(unittest.TestCase):
    def parse(self, lines):
        from orthocount.store import TextPointStore
        return TextPointStore.from_lines(lines)

    def test_simple_data(self):
        store = self.parse(["3", "0 0", "1 0", "0 1"])
        self.assertEqual(store.count(), 3)
        self.assertEqual([tuple(p) for p in store], [(0, 0), (1, 0), (0, 1)])
        self.assertEqual(store.x(1), 1)
        self.assertEqual(store.y(2), 1)

    def test_blank_lines_and_whitespace(self):
        store = self.parse(["  2 \n", "\n", "   \t\n", " -5\t  7 \n", "\n", "+3 -0\n"])
        self.assertEqual([tuple(p) for p in store], [(-5, 7), (3, 0)])

    def test_stops_after_declared_count(self):
        store = self.parse(["1", "4 4", "this is not a point", "1 2 3"])
        self.assertEqual(store.count(), 1)

    def test_zero_points(self):
        self.assertEqual(self.parse(["0"]).count(), 0)

    def test_malformed(self):
        from orthocount.exceptions import MalformedInputError
        for lines in (
                [],
                ["three", "0 0"],
                ["1.0", "0 0"],
                ["-1"],
                ["2", "0 0", "1 2 3"],
                ["2", "0 0", "7"],
                ["1", "0 1.5"],
                ["1", "0x10 1"],
                ["1", "2147483648 0"],
                ["1", "0 -2147483649"],
                ["3", "0 0", "", "1 1"],
                ["99999999999999999999", "0 0", "1 0"],
                ["1000000000000", "0 0"],
        ):
            with self.assertRaises(MalformedInputError, msg=lines):
                self.parse(lines)

    def test_malformed_is_a_value_error(self):
        with self.assertRaises(ValueError):
            self.parse(["x"])

    def test_int32_bounds(self):
        store = self.parse(["1", "-2147483648 2147483647"])
        self.assertEqual((store.x(0), store.y(0)), (-2 ** 31, 2 ** 31 - 1))

    def test_index_out_of_range(self):
        store = self.parse(["2", "0 0", "1 1"])
        for idx in (-1, 2, 100):
            with self.assertRaises(IndexError):
                store.x(idx)
            with self.assertRaises(IndexError):
                store.y(idx)

    def test_close_is_idempotent(self):
        store = self.parse(["1", "0 0"])
        store.close()
        store.close()

    def test_read_from_file(self):
        from orthocount.exceptions import MalformedInputError
        from orthocount.store import TextPointStore
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "points.txt")
            with open(path, "w") as file:
                file.write("2\n1 2\n\n3 4\n")
            with TextPointStore(path) as store:
                self.assertEqual([tuple(p) for p in store], [(1, 2), (3, 4)])

            with open(path, "wb") as file:
                file.write(b"1\n\xff\xfe 1\n")
            with self.assertRaises(MalformedInputError):
                TextPointStore(path)

    def test_ignores_undecodable_bytes_after_the_last_point(self):
        from orthocount.store import TextPointStore
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "points.txt")
            with open(path, "wb") as file:
                file.write(b"3\n0 0\n1 0\n0 1\n\xff\xfe trailing junk\n")
            with TextPointStore(path) as store:
                self.assertEqual([tuple(p) for p in store], [(0, 0), (1, 0), (0, 1)])

    def test_stops_reading_at_the_last_point(self):
        def lines():
            yield "1"
            yield "4 4"
            raise AssertionError("read past the declared points")

        self.assertEqual(self.parse(lines()).count(), 1)

    def test_missing_file(self):
        from orthocount.store import TextPointStore
        with self.assertRaises(FileNotFoundError):
            TextPointStore("/nonexistent/points.txt")


class TestBinPointStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, data, name="points.dat"):
        path = os.path.join(self.tmp, name)
        with open(path, "wb") as file:
            file.write(data)
        return path

    def test_big_endian_records(self):
        from orthocount.store import BinPointStore
        path = self.write(struct.pack(">iiii", 1, -1, -2 ** 31, 2 ** 31 - 1))
        with BinPointStore(path) as store:
            self.assertEqual(store.count(), 2)
            self.assertEqual(store.point(0), (1, -1))
            self.assertEqual((store.x(1), store.y(1)), (-2 ** 31, 2 ** 31 - 1))
            xs, ys = store.coordinates()
            self.assertEqual(xs.tolist(), [1, -2 ** 31])
            self.assertEqual(ys.tolist(), [-1, 2 ** 31 - 1])

    def test_empty_file(self):
        from orthocount.store import BinPointStore
        store = BinPointStore(self.write(b""))
        self.assertEqual(store.count(), 0)
        self.assertEqual(len(store.coordinates()[0]), 0)
        with self.assertRaises(IndexError):
            store.x(0)
        store.close()

    def test_size_not_multiple_of_record(self):
        from orthocount.exceptions import MalformedInputError
        from orthocount.store import BinPointStore
        for size in (1, 4, 7, 9, 12):
            with self.assertRaises(MalformedInputError):
                BinPointStore(self.write(b"\x00" * size))

    def test_index_out_of_range(self):
        from orthocount.store import BinPointStore
        with BinPointStore(self.write(struct.pack(">ii", 5, 6))) as store:
            with self.assertRaises(IndexError):
                store.y(1)
            with self.assertRaises(IndexError):
                store.x(-1)

    def test_close_is_idempotent(self):
        from orthocount.store import BinPointStore
        store = BinPointStore(self.write(struct.pack(">ii", 5, 6)))
        xs, _ = store.coordinates()
        store.close()
        store.close()
        self.assertEqual(xs.tolist(), [5])
        with self.assertRaises(ValueError):
            store.x(0)


class TestOpenPointStoreMethod(unittest.TestCase):
    def test_selects_by_suffix(self):
        from orthocount.exceptions import MalformedInputError
        from orthocount.store import open_point_store, BinPointStore, TextPointStore
        points = [(0, 0), (3, 0), (0, 4), (-7, 2)]
        with tempfile.TemporaryDirectory() as tmp:
            text_path, binary_path = write_both(tmp, points)
            with open_point_store(text_path) as store:
                self.assertIsInstance(store, TextPointStore)
                self.assertEqual([tuple(p) for p in store], points)
            with open_point_store(binary_path) as store:
                self.assertIsInstance(store, BinPointStore)
                self.assertEqual([tuple(p) for p in store], points)
            with self.assertRaises(MalformedInputError):
                open_point_store(binary_path, binary_suffix=".bin")

    def test_text_and_binary_give_the_same_count(self):
        from orthocount.counting import count_right_triangles
        from orthocount.store import open_point_store
        from orthocount.utils import generate_points
        points = generate_points(50, -5, 5, random_state=11)
        with tempfile.TemporaryDirectory() as tmp:
            counts = list()
            for path in write_both(tmp, points):
                with open_point_store(path) as store:
                    counts.append(count_right_triangles(store))
        self.assertEqual(counts[0], counts[1])
        self.assertGreater(counts[0], 0)


if __name__ == '__main__':
    unittest.main()
