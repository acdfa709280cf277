"""Primality testing and prime factorisation of 64-bit integers."""

from __future__ import annotations

import argparse
from itertools import count
from math import gcd
from typing import Optional, Sequence

MAX_PRIME = (1 << 32) - 1
_UINT64_LIMIT = 1 << 64
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_TRIAL_LIMIT = 1000


def _small_primes(limit: int) -> list[int]:
    sieve = bytearray([1]) * (limit + 1)
    sieve[0:2] = b"\x00\x00"
    for p in range(2, int(limit ** 0.5) + 1):
        if sieve[p]:
            sieve[p * p::p] = bytearray(len(range(p * p, limit + 1, p)))
    return [p for p, flag in enumerate(sieve) if flag]


_SMALL_PRIMES = _small_primes(_TRIAL_LIMIT)


def _check_uint64(x: int) -> None:
    if not 0 <= x < _UINT64_LIMIT:
        raise ValueError(f"{x} is not an unsigned 64-bit integer")


def is_prime(x: int) -> bool:
    """Return True if ``x`` is prime; ``x`` must fit in 64 unsigned bits."""
    _check_uint64(x)
    if x < 2:
        return False
    for p in _WITNESSES:
        if x % p == 0:
            return x == p
    d, s = x - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        y = pow(a, d, x)
        if y in (1, x - 1):
            continue
        for _ in range(s - 1):
            y = y * y % x
            if y == x - 1:
                break
        else:
            return False
    return True


def next_prime(p: int) -> int:
    """Return the smallest prime greater than ``p``.

    Raises OverflowError when no such prime fits in 32 unsigned bits.
    """
    if not 0 <= p <= MAX_PRIME:
        raise ValueError(f"{p} is not an unsigned 32-bit integer")
    if p < 2:
        return 2
    candidate = p + 1 if p % 2 == 0 else p + 2
    while candidate <= MAX_PRIME:
        if is_prime(candidate):
            return candidate
        candidate += 2
    raise OverflowError(f"no 32-bit prime follows {p}")


def _rho(n: int) -> int:
    if n % 2 == 0:
        return 2
    for c in count(1):
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = gcd(abs(x - y), n)
        if d != n:
            return d
    raise AssertionError("unreachable")


def _factor(n: int, out: list[int]) -> None:
    if n == 1:
        return
    if is_prime(n):
        out.append(n)
        return
    d = _rho(n)
    _factor(d, out)
    _factor(n // d, out)


def decompose(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition.

    ``decompose(1)`` is empty; ``n`` must be a positive 64-bit integer.
    """
    _check_uint64(n)
    if n == 0:
        raise ValueError("0 has no prime decomposition")
    factors: list[int] = []
    for p in _SMALL_PRIMES:
        if p * p > n:
            break
        while n % p == 0:
            n //= p
            factors.append(p)
    rest: list[int] = []
    _factor(n, rest)
    factors.extend(sorted(rest))
    return factors


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the prime decomposition of 2^p - 1 for p from 1 to 63."""
    parser = argparse.ArgumentParser(
        description="Factor the numbers 2^p - 1 for p = 1..63."
    )
    parser.parse_args(argv)
    for p in range(1, 64):
        po = (1 << p) - 1
        line = f"2^{p} - 1 = {po}"
        factors = decompose(po)
        if len(factors) > 1:
            line += "".join(
                f" {'x' if i else '='} {f}" for i, f in enumerate(factors)
            )
        print(line, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())