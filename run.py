import time
import numpy as np
import matplotlib.pyplot as plt

from sumtree import IntervalSumTree
from config import Config



def make_workload(size, config, rng):
    values = rng.integers(config.value_min, config.value_max + 1, size=size, dtype=np.int64)

    operations = []
    for _ in range(config.n_operations):
        if rng.random() < config.update_ratio:
            idx = int(rng.integers(0, size))
            val = int(rng.integers(config.value_min, config.value_max + 1))
            operations.append(('update', idx, val))
        else:
            start, end = sorted(int(x) for x in rng.integers(0, size + 1, size=2))
            operations.append(('sum', start, end))

    return values, operations


def check_sums(tree, reference, rng, n_checks=8):
    size = len(reference)
    assert tree.sum() == int(reference.sum()), 'total: {} != {}'.format(tree.sum(), int(reference.sum()))
    for _ in range(n_checks):
        start, end = sorted(int(x) for x in rng.integers(0, size + 1, size=2))
        expected = int(reference[start:end].sum())
        assert tree.sum(start, end) == expected, 'sum({}, {}): {} != {}'.format(
            start, end, tree.sum(start, end), expected)


def benchmark_size(size, config, rng):
    values, operations = make_workload(size, config, rng)
    reference = values.copy()

    t0 = time.perf_counter()
    tree = IntervalSumTree(values)
    build_time = time.perf_counter() - t0

    update_times = []
    sum_times = []
    for step, (kind, a, b) in enumerate(operations, 1):
        if kind == 'update':
            t0 = time.perf_counter()
            tree.update(a, b)
            update_times.append(time.perf_counter() - t0)
            reference[a] = b
        else:
            t0 = time.perf_counter()
            result = tree.sum(a, b)
            sum_times.append(time.perf_counter() - t0)
            expected = int(reference[a:b].sum())
            assert result == expected, 'sum({}, {}): {} != {}'.format(a, b, result, expected)

        if step % config.check_every == 0:
            check_sums(tree, reference, rng)

    check_sums(tree, reference, rng)

    return {
        'size': size,
        'build_ms': build_time * 1e3,
        'update_us': float(np.mean(update_times)) * 1e6 if update_times else 0.0,
        'sum_us': float(np.mean(sum_times)) * 1e6 if sum_times else 0.0,
    }


def benchmark(config):
    rng = np.random.default_rng(config.seed)
    results = []

    for size in config.sizes:
        result = benchmark_size(size, config, rng)
        print('Size: {} \t Build: {:.3f}ms \t Update: {:.2f}us \t Sum: {:.2f}us'.format(
            result['size'], result['build_ms'], result['update_us'], result['sum_us']))
        results.append(result)

    return results


def plot(results, path):
    sizes = [r['size'] for r in results]

    plt.figure()
    plt.plot(sizes, [r['update_us'] for r in results], marker='o', label='update')
    plt.plot(sizes, [r['sum_us'] for r in results], marker='o', label='sum')
    plt.xscale('log', base=2)
    plt.xlabel('size')
    plt.ylabel('mean time per operation (us)')
    plt.legend()
    plt.savefig(path)
    plt.close()


if __name__ == '__main__':
    config = Config()

    results = benchmark(config)
    plot(results, config.plot_path)
