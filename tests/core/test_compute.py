"""
Tests for timing and device selection.
"""

import pytest

from quickfit.core.compute import Timer, select_device, get_cpu_info


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('epochs'):
                pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'epochs'}
        assert result['epochs'] >= 0.0
        assert result['total_seconds'] >= result['epochs']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestDevice:

    def test_cpu_always_available(self):
        device = select_device('cpu')
        assert device.device_type == 'cpu'
        assert not device.is_gpu
        assert str(device).startswith("CPU")

    def test_auto_returns_a_device(self):
        device = select_device('auto')
        assert device.device_type in ('cpu', 'cuda', 'mps')

    def test_cpu_info_has_name(self):
        assert get_cpu_info().name

    def test_unknown_preference(self):
        with pytest.raises(ValueError, match="Unknown device"):
            select_device('tpu')
