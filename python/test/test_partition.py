import unittest


class TestPartitionMethod(unittest.TestCase):
    def test_even_split(self):
        from orthocount.parallel import partition, WorkRange
        self.assertEqual(partition(12, 4), [WorkRange(0, 3), WorkRange(3, 6), WorkRange(6, 9), WorkRange(9, 12)])

    def test_uneven_split(self):
        from orthocount.parallel import partition
        self.assertEqual([tuple(r) for r in partition(10, 4)], [(0, 3), (3, 6), (6, 9), (9, 10)])

    def test_empty_tail_ranges_are_dropped(self):
        from orthocount.parallel import partition
        # chunk = ceil(10 / 6) = 2 covers everything with 5 workers
        self.assertEqual([tuple(r) for r in partition(10, 6)], [(0, 2), (2, 4), (4, 6), (6, 8), (8, 10)])

    def test_serial_cases(self):
        from orthocount.parallel import partition
        self.assertEqual([tuple(r) for r in partition(0, 8)], [(0, 0)])
        self.assertEqual([tuple(r) for r in partition(2, 8)], [(0, 2)])
        self.assertEqual([tuple(r) for r in partition(100, 1)], [(0, 100)])

    def test_more_workers_than_points(self):
        from orthocount.parallel import partition
        self.assertEqual([tuple(r) for r in partition(3, 256)], [(0, 1), (1, 2), (2, 3)])

    def test_ranges_cover_everything_once(self):
        from orthocount.parallel import partition
        for n in range(0, 60):
            for w in range(1, 20):
                ranges = partition(n, w)
                self.assertLessEqual(len(ranges), max(w, 1))
                covered = [i for r in ranges for i in range(r.start, r.end)]
                self.assertEqual(covered, list(range(n)))
                self.assertTrue(all(0 <= r.start <= r.end <= n for r in ranges))

    def test_size(self):
        from orthocount.parallel import WorkRange
        self.assertEqual(WorkRange(3, 8).size, 5)
        self.assertEqual(WorkRange(0, 0).size, 0)

    def test_negative_n(self):
        from orthocount.parallel import partition
        with self.assertRaises(ValueError):
            partition(-1, 2)


class TestAggregateMethod(unittest.TestCase):
    def test_sum(self):
        from orthocount.parallel import aggregate
        self.assertEqual(aggregate([]), 0)
        self.assertEqual(aggregate([1, 2, 3]), 6)


if __name__ == '__main__':
    unittest.main()
