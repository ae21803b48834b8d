"""src/weburl/encoding/punycode.py

RFC 3492 Punycode encoder for a single domain label.
"""

from typing import List

__all__ = ["encode_label"]

BASE = 36
T_MIN = 1
T_MAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128
DELIMITER = "-"


def _encode_digit(digit: int) -> str:
    # 0..25 -> a..z, 26..35 -> 0..9
    if digit < 26:
        return chr(ord("a") + digit)
    return chr(ord("0") + digit - 26)


def _adapt(delta: int, num_points: int, first_time: bool) -> int:
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points
    k = 0
    while delta > ((BASE - T_MIN) * T_MAX) // 2:
        delta //= BASE - T_MIN
        k += BASE
    return k + ((BASE - T_MIN + 1) * delta) // (delta + SKEW)


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return T_MIN
    if k >= bias + T_MAX:
        return T_MAX
    return k - bias


def encode_label(label: str) -> str:
    """
    Encode one domain label with Punycode.

    Basic (ASCII) code points are copied first, followed by the delimiter
    when there are any, then the deltas for every non-basic code point in
    ascending order.

    Args:
        label: A single label without dots.

    Returns:
        The ASCII label body. The caller adds the ``xn--`` prefix.
    """
    code_points = [ord(char) for char in label]
    output: List[str] = [chr(cp) for cp in code_points if cp < 0x80]
    basic_count = len(output)
    if 0 < basic_count < len(code_points):
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    handled = basic_count

    while handled < len(code_points):
        m = min(cp for cp in code_points if cp >= n)
        delta += (m - n) * (handled + 1)
        n = m

        for cp in code_points:
            if cp < n:
                delta += 1
                continue
            if cp != n:
                continue

            q = delta
            k = BASE
            while True:
                t = _threshold(k, bias)
                if q < t:
                    break
                output.append(_encode_digit(t + (q - t) % (BASE - t)))
                q = (q - t) // (BASE - t)
                k += BASE
            output.append(_encode_digit(q))
            bias = _adapt(delta, handled + 1, handled == basic_count)
            delta = 0
            handled += 1

        delta += 1
        n += 1

    return "".join(output)
