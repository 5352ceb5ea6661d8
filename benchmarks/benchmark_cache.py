import time

import numpy as np

from cache_matrix import CacheCell, MemoizedInverse, invert_matrix


def benchmark_cache(n=1000, method="numpy"):
    A = np.random.randn(n, n)
    cell = CacheCell(A)
    inverse = MemoizedInverse(method=method)

    # First call inverts, second call reads the cell
    t0 = time.time()
    y1 = inverse(cell)
    t_miss = time.time() - t0

    t0 = time.time()
    y2 = inverse(cell)
    t_hit = time.time() - t0

    print(f"Matrix size: {n}x{n} ({method})")
    print(f"Cache miss: {t_miss:.6f} s")
    print(f"Cache hit:  {t_hit:.6f} s")
    print(f"Same result:       {y1 is y2}")
    print(f"Matches inversion: {np.allclose(y1, np.linalg.inv(A))}")

    # Replacing the input invalidates the cached inverse
    B = np.random.randn(n // 10, n // 10)
    cell.set_input(B)
    y3 = inverse(cell)
    print(f"Recomputed after set_input: {np.allclose(y3, np.linalg.inv(B))}")
    print(f"hits={inverse.hits} misses={inverse.misses}")


def benchmark_backends(n=100, trials=3, methods=("numpy", "lu")):
    A = np.random.rand(n, n)
    A += n * np.eye(n)  # improve conditioning

    print(f"Matrix size: {n}x{n}")
    for method in methods:
        t0 = time.time()
        for _ in range(trials):
            invert_matrix(A, method=method)
        elapsed = (time.time() - t0) / trials
        print(f"{method:>10}: {elapsed:.6f} s")


if __name__ == "__main__":
    np.random.seed(42)
    benchmark_cache(n=1000)
    print("-" * 40)
    for n in [50, 100, 200]:
        benchmark_backends(n)
        print("-" * 40)
