import pytest

from drrsim.standards import (
    StandardManager,
    UnknownParameterError,
    default_standards,
)


@pytest.fixture
def manager():
    return StandardManager()


def test_default_standards_has_lte():
    standards = default_standards()
    assert list(standards) == ["LTE"]
    assert standards["LTE"].description == "Long-Term Evolution"


def test_tti_and_sync_interval(manager):
    assert manager.tti("1ms") == pytest.approx(0.001)
    assert manager.channel_sync_interval("10ms") == pytest.approx(0.010)


def test_unknown_tti_raises(manager):
    with pytest.raises(UnknownParameterError):
        manager.tti("2ms")


def test_unknown_sync_interval_raises(manager):
    with pytest.raises(UnknownParameterError):
        manager.channel_sync_interval("5ms")


def test_unknown_standard_raises(manager):
    with pytest.raises(UnknownParameterError):
        manager.set_current_standard("NR")
    assert manager.current_standard_name == "LTE"


def test_constructor_rejects_unknown_current():
    with pytest.raises(UnknownParameterError):
        StandardManager(current="WiMAX")


def test_rb_number_from_bandwidth(manager):
    assert manager.rb_number_from_bandwidth(5) == 25
    assert manager.rb_number_from_bandwidth(20) == 100
    assert manager.rb_number_from_bandwidth(1.4) == 6


def test_rb_number_invalid_bandwidth(manager):
    with pytest.raises(UnknownParameterError):
        manager.rb_number_from_bandwidth(7)
    with pytest.raises(UnknownParameterError):
        manager.rb_number_from_bandwidth(25)


def test_cqi_efficiency_is_increasing(manager):
    values = [manager.cqi_efficiency(cqi) for cqi in range(1, 16)]
    assert values == sorted(values)
    assert len(set(values)) == 15


def test_cqi_efficiency_invalid(manager):
    with pytest.raises(UnknownParameterError):
        manager.cqi_efficiency(0)
    with pytest.raises(UnknownParameterError):
        manager.cqi_efficiency(16)


def test_cqi_from_sinr_clamps(manager):
    assert manager.cqi_from_sinr(-100.0) == 1
    assert manager.cqi_from_sinr(100.0) == 15
    assert manager.cqi_from_sinr(-6.9390) == 1


def test_cqi_from_sinr_is_monotonic(manager):
    sinrs = [x / 2 for x in range(-30, 50)]
    cqis = [manager.cqi_from_sinr(s) for s in sinrs]
    assert cqis == sorted(cqis)
    assert all(1 <= c <= 15 for c in cqis)


def test_resource_elements(manager):
    assert manager.resource_elements_in_resource_block() == 168


def test_resource_block_data_size(manager):
    # CQI 1 carries less than one bit per RE, truncated to zero.
    assert manager.resource_block_effective_data_size(1) == 0
    sizes = [manager.resource_block_effective_data_size(c) for c in range(1, 16)]
    assert sizes == sorted(sizes)
    assert sizes[-1] > 0


def test_mobility_direction(manager):
    assert manager.mobility_direction(0) == "random"
    assert manager.mobility_direction(1) == "forward"
    assert manager.mobility_direction(4) == "right"
    with pytest.raises(UnknownParameterError):
        manager.mobility_direction(5)


def test_standard_info_lists(manager):
    info = manager.get_standard_info("LTE")
    assert "DefaultPFScheduler" in info.schedulers
    assert info.area_types == ("Dense Urban", "Urban", "Suburban")
    assert info.users_per_tti_limits == (4, 8)