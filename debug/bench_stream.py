#!/usr/bin/env python3
"""Quick keystream benchmark - direct timing only"""
import io
import os
import time


KEY = "340282366920938463463374607431768211457" * 4
PAYLOAD = os.urandom(32 * 1024 * 1024)


def bench_python(chunk_size):
    """Benchmark one obfuscate pass over PAYLOAD"""
    import decxor

    source = io.BytesIO(PAYLOAD)
    dest = io.BytesIO()
    start = time.perf_counter()
    decxor.transform_stream(source, dest, KEY, "enc", chunk_size=chunk_size)
    elapsed = time.perf_counter() - start
    return elapsed, dest.getvalue()


def main():
    print("Benchmarking keystream obfuscate...")
    print(f"Input size: {len(PAYLOAD) // (1024 * 1024)} MiB\n")

    baseline = None
    for chunk_size in (4096, 64 * 1024, 4 * 1024 * 1024):
        elapsed, result = bench_python(chunk_size)
        rate = len(PAYLOAD) / elapsed / (1024 * 1024)
        print(f"  chunk {chunk_size:>8}: {elapsed:.3f}s ({rate:.1f} MiB/s)")
        if baseline is None:
            baseline = result
        elif result != baseline:
            print("  ❌ output differs between chunk sizes")
            return 1

    print("\n✅ Python benchmark complete")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
