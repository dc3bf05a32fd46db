import math

import pytest

from drrsim.channel import Channel


def test_dense_urban_offset_is_three_db_above_urban():
    dense = Channel(2000, 46, "Dense Urban")
    urban = Channel(2000, 46, "Urban")
    diff = dense.path_loss(5000, 25, 1.5) - urban.path_loss(5000, 25, 1.5)
    assert diff == pytest.approx(3.0)


def test_suburban_offset_at_reference_frequency():
    suburban = Channel(28, 46, "Suburban")
    urban = Channel(28, 46, "Urban")
    diff = suburban.path_loss(5000, 25, 1.5) - urban.path_loss(5000, 25, 1.5)
    assert diff == pytest.approx(-5.4)


def test_suburban_offset_is_below_reference_elsewhere():
    assert Channel(2000, 46, "Suburban").constant_offset < -5.4


def test_unknown_area_type_raises():
    with pytest.raises(ValueError):
        Channel(2000, 46, "Desert")


def test_path_loss_distance_slope_with_unit_bs_height():
    channel = Channel(2000, 46, "Urban")
    near = channel.path_loss(1000, 1, 1.5)
    far = channel.path_loss(10000, 1, 1.5)
    assert far - near == pytest.approx(44.9)


def test_path_loss_grows_with_distance():
    channel = Channel(2000, 46, "Dense Urban")
    losses = [channel.path_loss(d, 25, 1.5) for d in (1000, 2000, 5000, 20000)]
    assert losses == sorted(losses)
    assert len(set(losses)) == 4


def test_received_power_is_transmit_power_minus_loss():
    channel = Channel(2000, 46, "Urban")
    loss = channel.path_loss(3000, 25, 1.5)
    assert channel.received_signal_power(loss) == pytest.approx(46 - loss)


def test_sinr_subtracts_noise_and_interference():
    channel = Channel(2000, 43, "Urban")
    assert channel.sinr(-80.0, -130.0, 5.0) == pytest.approx(45.0)


def test_interference_is_zero():
    assert Channel(2000, 46, "Urban").interference_power() == 0


def test_noise_power_is_thermal_noise_over_20_mhz():
    noise = Channel(2000, 46, "Urban").noise_power()
    assert math.isclose(10 ** (noise / 10), 1.380649e-23 * 290.0 * 20e6, rel_tol=1e-9)
    assert noise == pytest.approx(-130.97, abs=0.01)