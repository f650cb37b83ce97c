"""Perlin noise with reproducible seeding and octave helpers.

Noise values lie in [-1, 1]; the ``_01`` variants remap them to [0, 1].
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, MutableSequence
from typing import Union

DEFAULT_Y = 0.12345
DEFAULT_Z = 0.34567

_DEFAULT_PERMUTATION = bytes((
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
))

_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """32-bit Mersenne Twister (MT19937) producing unsigned 32-bit integers."""

    _N = 624
    _M = 397
    _MATRIX_A = 0x9908B0DF
    _UPPER = 0x80000000
    _LOWER = 0x7FFFFFFF

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n = self._N
        for i in range(n):
            y = (state[i] & self._UPPER) | (state[(i + 1) % n] & self._LOWER)
            value = state[(i + self._M) % n] ^ (y >> 1)
            if y & 1:
                value ^= self._MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


Generator = Callable[[], int]
Seed = Union[int, Generator]


def shuffle(items: MutableSequence, generator: Generator) -> None:
    """Shuffle ``items`` in place with a deterministic Fisher-Yates walk."""
    for i in range(1, len(items)):
        j = generator() % (i + 1)
        items[i], items[j] = items[j], items[i]


def fade(t: float) -> float:
    """Quintic smoothstep used to ease lattice interpolation."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


def grad(hash_value: int, x: float, y: float, z: float) -> float:
    """Dot product of the offset with the gradient selected by ``hash_value``."""
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def remap_01(x: float) -> float:
    """Map [-1, 1] onto [0, 1]."""
    return x * 0.5 + 0.5


def clamp_11(x: float) -> float:
    """Clamp to [-1, 1]."""
    return min(max(x, -1.0), 1.0)


def remap_clamp_01(x: float) -> float:
    """Clamp to [-1, 1], then map onto [0, 1]."""
    if x <= -1.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return x * 0.5 + 0.5


def max_amplitude(octaves: int, persistence: float) -> float:
    """Sum of the amplitudes of ``octaves`` layers decaying by ``persistence``."""
    result = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        result += amplitude
        amplitude *= persistence
    return result


def _octaves(sample: Callable[..., float], coords: tuple[float, ...],
             octaves: int, persistence: float) -> float:
    result = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        result += sample(*coords) * amplitude
        coords = tuple(c * 2 for c in coords)
        amplitude *= persistence
    return result


class PerlinNoise:
    """Classic improved Perlin noise over a 256-entry permutation table."""

    def __init__(self, seed: Seed | None = None) -> None:
        self._permutation = _DEFAULT_PERMUTATION
        if seed is not None:
            self.reseed(seed)

    def reseed(self, seed: Seed) -> None:
        """Rebuild the permutation from an integer seed or a random generator."""
        generator = MersenneTwister(seed) if isinstance(seed, int) else seed
        if not callable(generator):
            raise TypeError("seed must be an integer or a callable generator")
        table = list(range(256))
        shuffle(table, generator)
        self._permutation = bytes(table)

    def serialize(self) -> bytes:
        """Return the permutation table."""
        return self._permutation

    def deserialize(self, state: Iterable[int]) -> None:
        """Replace the permutation table with 256 values in 0..255."""
        table = bytes(state)
        if len(table) != 256:
            raise ValueError(f"state must hold 256 entries, got {len(table)}")
        self._permutation = table

    # Raw noise in [-1, 1]

    def noise1d(self, x: float) -> float:
        return self.noise3d(x, DEFAULT_Y, DEFAULT_Z)

    def noise2d(self, x: float, y: float) -> float:
        return self.noise3d(x, y, DEFAULT_Z)

    def noise3d(self, x: float, y: float, z: float) -> float:
        p = self._permutation
        fx0, fy0, fz0 = math.floor(x), math.floor(y), math.floor(z)
        ix, iy, iz = int(fx0) & 255, int(fy0) & 255, int(fz0) & 255
        fx, fy, fz = x - fx0, y - fy0, z - fz0
        u, v, w = fade(fx), fade(fy), fade(fz)

        a = (p[ix] + iy) & 255
        b = (p[(ix + 1) & 255] + iy) & 255
        aa = (p[a] + iz) & 255
        ab = (p[(a + 1) & 255] + iz) & 255
        ba = (p[b] + iz) & 255
        bb = (p[(b + 1) & 255] + iz) & 255

        p0 = grad(p[aa], fx, fy, fz)
        p1 = grad(p[ba], fx - 1, fy, fz)
        p2 = grad(p[ab], fx, fy - 1, fz)
        p3 = grad(p[bb], fx - 1, fy - 1, fz)
        p4 = grad(p[(aa + 1) & 255], fx, fy, fz - 1)
        p5 = grad(p[(ba + 1) & 255], fx - 1, fy, fz - 1)
        p6 = grad(p[(ab + 1) & 255], fx, fy - 1, fz - 1)
        p7 = grad(p[(bb + 1) & 255], fx - 1, fy - 1, fz - 1)

        q0 = lerp(p0, p1, u)
        q1 = lerp(p2, p3, u)
        q2 = lerp(p4, p5, u)
        q3 = lerp(p6, p7, u)
        return lerp(lerp(q0, q1, v), lerp(q2, q3, v), w)

    # Noise remapped to [0, 1]

    def noise1d_01(self, x: float) -> float:
        return remap_01(self.noise1d(x))

    def noise2d_01(self, x: float, y: float) -> float:
        return remap_01(self.noise2d(x, y))

    def noise3d_01(self, x: float, y: float, z: float) -> float:
        return remap_01(self.noise3d(x, y, z))

    # Octave noise, may leave [-1, 1]

    def octave1d(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return _octaves(self.noise1d, (x,), octaves, persistence)

    def octave2d(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return _octaves(self.noise2d, (x, y), octaves, persistence)

    def octave3d(self, x: float, y: float, z: float, octaves: int,
                 persistence: float = 0.5) -> float:
        return _octaves(self.noise3d, (x, y, z), octaves, persistence)

    # Octave noise clamped to [-1, 1]

    def octave1d_11(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return clamp_11(self.octave1d(x, octaves, persistence))

    def octave2d_11(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return clamp_11(self.octave2d(x, y, octaves, persistence))

    def octave3d_11(self, x: float, y: float, z: float, octaves: int,
                    persistence: float = 0.5) -> float:
        return clamp_11(self.octave3d(x, y, z, octaves, persistence))

    # Octave noise clamped and remapped to [0, 1]

    def octave1d_01(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return remap_clamp_01(self.octave1d(x, octaves, persistence))

    def octave2d_01(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return remap_clamp_01(self.octave2d(x, y, octaves, persistence))

    def octave3d_01(self, x: float, y: float, z: float, octaves: int,
                    persistence: float = 0.5) -> float:
        return remap_clamp_01(self.octave3d(x, y, z, octaves, persistence))

    # Octave noise normalised to [-1, 1]

    def normalized_octave1d(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return self.octave1d(x, octaves, persistence) / max_amplitude(octaves, persistence)

    def normalized_octave2d(self, x: float, y: float, octaves: int,
                            persistence: float = 0.5) -> float:
        return self.octave2d(x, y, octaves, persistence) / max_amplitude(octaves, persistence)

    def normalized_octave3d(self, x: float, y: float, z: float, octaves: int,
                            persistence: float = 0.5) -> float:
        return (self.octave3d(x, y, z, octaves, persistence)
                / max_amplitude(octaves, persistence))

    # Octave noise normalised and remapped to [0, 1]

    def normalized_octave1d_01(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return remap_01(self.normalized_octave1d(x, octaves, persistence))

    def normalized_octave2d_01(self, x: float, y: float, octaves: int,
                               persistence: float = 0.5) -> float:
        return remap_01(self.normalized_octave2d(x, y, octaves, persistence))

    def normalized_octave3d_01(self, x: float, y: float, z: float, octaves: int,
                               persistence: float = 0.5) -> float:
        return remap_01(self.normalized_octave3d(x, y, z, octaves, persistence))