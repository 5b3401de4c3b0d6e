"""Test that encodings can be shared between threads."""

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor

from base62codec import Encoding, StdEncoding

from .conftest import ReversedCaseEncoding


class TestConcurrentCodec:
    """The encoding table is read-only, so threads need no coordination."""

    def test_concurrent_roundtrips_share_std_encoding(self) -> None:
        num_threads = 10
        per_thread = 200
        failures: list[bytes] = []
        lock = threading.Lock()
        barrier = threading.Barrier(num_threads)

        def roundtrip() -> None:
            barrier.wait()
            bad = []
            for _ in range(per_thread):
                raw = b"\x00" + os.urandom(32)
                if StdEncoding.decode(StdEncoding.encode(raw)) != raw:
                    bad.append(raw)
            with lock:
                failures.extend(bad)

        threads = [threading.Thread(target=roundtrip) for _ in range(num_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not failures

    def test_concurrent_uint64_with_different_encodings(self) -> None:
        values = list(range(0, 1 << 64, (1 << 64) // 997))

        def check(encoding_and_value: tuple[Encoding, int]) -> bool:
            encoding, value = encoding_and_value
            return encoding.decode_uint64(encoding.encode_uint64(value)) == value

        jobs = [(enc, v) for v in values for enc in (StdEncoding, ReversedCaseEncoding)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(check, jobs))

        assert all(results)
        assert StdEncoding.alphabet != ReversedCaseEncoding.alphabet
