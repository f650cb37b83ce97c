import math

import pytest

from gamelab.perlin import (
    MersenneTwister,
    PerlinNoise,
    clamp_11,
    fade,
    grad,
    lerp,
    max_amplitude,
    remap_01,
    remap_clamp_01,
    shuffle,
)

SAMPLES = [(x * 0.37 - 5.1, x * 0.91 + 0.3, x * 0.13 - 2.2) for x in range(40)]


def test_mersenne_twister_default_seed_first_output():
    assert MersenneTwister(5489)() == 3499211612


def test_mersenne_twister_ten_thousandth_output():
    gen = MersenneTwister(5489)
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_mersenne_twister_is_deterministic_and_32_bit():
    a, b = MersenneTwister(42), MersenneTwister(42)
    values = [a() for _ in range(1000)]
    assert values == [b() for _ in range(1000)]
    assert all(0 <= v <= 0xFFFFFFFF for v in values)


def test_default_permutation_starts_with_reference_table():
    state = PerlinNoise().serialize()
    assert list(state[:6]) == [151, 160, 137, 91, 90, 15]
    assert state[-1] == 180
    assert sorted(state) == list(range(256))


def test_seeded_permutation_is_a_permutation_and_reproducible():
    a = PerlinNoise(123).serialize()
    assert sorted(a) == list(range(256))
    assert PerlinNoise(123).serialize() == a
    assert PerlinNoise(124).serialize() != a


def test_integer_seed_matches_generator_seed():
    assert PerlinNoise(7).serialize() == PerlinNoise(MersenneTwister(7)).serialize()


def test_reseed_replaces_state():
    noise = PerlinNoise()
    noise.reseed(99)
    assert noise.serialize() == PerlinNoise(99).serialize()


def test_reseed_rejects_non_callable():
    with pytest.raises(TypeError):
        PerlinNoise().reseed("seed")


def test_serialize_deserialize_round_trip():
    source = PerlinNoise(5)
    target = PerlinNoise()
    target.deserialize(source.serialize())
    assert target.serialize() == source.serialize()
    for x, y, z in SAMPLES:
        assert target.noise3d(x, y, z) == source.noise3d(x, y, z)


def test_deserialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([0] * 10)


def test_deserialize_rejects_out_of_range():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([300] * 256)


def test_shuffle_with_constant_zero_generator_is_rotation():
    items = [0, 1, 2, 3]
    shuffle(items, lambda: 0)
    assert sorted(items) == [0, 1, 2, 3]
    assert items[0] == 3


def test_shuffle_empty_list():
    items = []
    shuffle(items, MersenneTwister(1))
    assert items == []


def test_fade_fixed_points():
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == pytest.approx(0.5)


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_grad_is_zero_for_zero_offset():
    assert all(grad(h, 0.0, 0.0, 0.0) == 0.0 for h in range(256))


def test_grad_ignores_upper_bits():
    assert all(grad(h, 0.3, -0.7, 0.9) == grad(h + 16, 0.3, -0.7, 0.9) for h in range(16))


def test_remap_and_clamp():
    assert remap_01(-1.0) == 0.0
    assert remap_01(1.0) == 1.0
    assert clamp_11(5.0) == 1.0
    assert clamp_11(-5.0) == -1.0
    assert remap_clamp_01(-2.0) == 0.0
    assert remap_clamp_01(2.0) == 1.0
    assert remap_clamp_01(0.0) == 0.5


def test_max_amplitude_single_octave():
    assert max_amplitude(1, 0.5) == 1.0
    assert max_amplitude(0, 0.5) == 0.0


def test_noise_is_zero_on_lattice_points():
    noise = PerlinNoise(3)
    for i in range(-3, 4):
        assert noise.noise3d(float(i), float(i + 1), float(-i)) == 0.0


def test_noise_within_unit_range():
    noise = PerlinNoise(11)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.noise3d(x, y, z) <= 1.0
        assert 0.0 <= noise.noise3d_01(x, y, z) <= 1.0


def test_lower_dimensions_use_default_coordinates():
    noise = PerlinNoise(4)
    for x, y, _ in SAMPLES:
        assert noise.noise1d(x) == noise.noise3d(x, 0.12345, 0.34567)
        assert noise.noise2d(x, y) == noise.noise3d(x, y, 0.34567)


def test_remapped_variants_match_base():
    noise = PerlinNoise(8)
    for x, y, z in SAMPLES:
        assert noise.noise1d_01(x) == pytest.approx(noise.noise1d(x) * 0.5 + 0.5)
        assert noise.noise2d_01(x, y) == pytest.approx(noise.noise2d(x, y) * 0.5 + 0.5)


def test_single_octave_equals_noise():
    noise = PerlinNoise(2)
    for x, y, z in SAMPLES:
        assert noise.octave1d(x, 1) == noise.noise1d(x)
        assert noise.octave2d(x, y, 1) == noise.noise2d(x, y)
        assert noise.octave3d(x, y, z, 1) == noise.noise3d(x, y, z)


def test_zero_octaves_is_zero():
    assert PerlinNoise().octave3d(0.4, 0.2, 0.9, 0) == 0.0


def test_clamped_octaves_stay_in_range():
    noise = PerlinNoise(21)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.octave3d_11(x, y, z, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave2d_01(x, y, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave1d_01(x, 6, 0.9) <= 1.0
        assert -1.0 <= noise.octave1d_11(x, 6, 0.9) <= 1.0
        assert -1.0 <= noise.octave2d_11(x, y, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave3d_01(x, y, z, 6, 0.9) <= 1.0


def test_normalized_octave_divides_by_max_amplitude():
    noise = PerlinNoise(13)
    for x, y, z in SAMPLES:
        expected = noise.octave3d(x, y, z, 4, 0.6) / max_amplitude(4, 0.6)
        assert noise.normalized_octave3d(x, y, z, 4, 0.6) == pytest.approx(expected)
        assert -1.0 <= noise.normalized_octave2d(x, y, 4) <= 1.0
        assert -1.0 <= noise.normalized_octave1d(x, 4) <= 1.0


def test_normalized_octave_01_is_remapped():
    noise = PerlinNoise(17)
    for x, y, z in SAMPLES:
        assert noise.normalized_octave1d_01(x, 3) == pytest.approx(
            noise.normalized_octave1d(x, 3) * 0.5 + 0.5)
        assert noise.normalized_octave2d_01(x, y, 3) == pytest.approx(
            noise.normalized_octave2d(x, y, 3) * 0.5 + 0.5)
        assert noise.normalized_octave3d_01(x, y, z, 3) == pytest.approx(
            noise.normalized_octave3d(x, y, z, 3) * 0.5 + 0.5)


def test_noise_is_periodic_over_256():
    noise = PerlinNoise(31)
    for x, y, z in SAMPLES:
        assert math.isclose(noise.noise3d(x, y, z), noise.noise3d(x + 256, y, z),
                            abs_tol=1e-9)