"""
Example: count the right triangles of a random point set with every backend.

    python count_triangles.py [num_points] [num_workers] [--spark]
"""
from orthocount import TriangleCounter
from orthocount.utils import generate_points, write_text_points, write_binary_points
import os
import sys
import tempfile
import time


def main(num_points=2000, num_workers=4, use_spark=False):
    points = generate_points(num_points, low=-100, high=100, random_state=0)
    backends = ["serial", "thread", "process"] + (["spark"] if use_spark else [])

    with tempfile.TemporaryDirectory() as tmp:
        text_path = os.path.join(tmp, "points.txt")
        binary_path = os.path.join(tmp, "points.dat")
        write_text_points(text_path, points)
        write_binary_points(binary_path, points)

        for path in (text_path, binary_path):
            for backend in backends:
                start = time.time()
                count = TriangleCounter(n_workers=num_workers, backend=backend).count(path)
                print("{0:>10} {1:>8}: {2} right triangles in {3:.2f}s".format(
                    os.path.basename(path), backend, count, time.time() - start))


if __name__ == '__main__':
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    main(
        num_points=int(args[0]) if len(args) > 0 else 2000,
        num_workers=int(args[1]) if len(args) > 1 else 4,
        use_spark="--spark" in sys.argv
    )
