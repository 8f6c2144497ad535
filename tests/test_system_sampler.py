"""Tests for probe.collectors.system_sampler."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import psutil
import pytest

from probe.collectors.system_sampler import PsutilSampler
from probe.errors import CollectorError


class TestPsutilSampler:
    @pytest.mark.asyncio
    async def test_cpu_usage_formatted(self):
        with patch("probe.collectors.system_sampler.psutil") as mock_psutil:
            mock_psutil.Error = psutil.Error
            mock_psutil.cpu_percent.return_value = 12.344
            value = await PsutilSampler().cpu_usage()
        assert value == "12.34%"
        mock_psutil.cpu_percent.assert_called_once_with(interval=0)

    @pytest.mark.asyncio
    async def test_memory_usage_formatted(self):
        with patch("probe.collectors.system_sampler.psutil") as mock_psutil:
            mock_psutil.Error = psutil.Error
            mock_psutil.virtual_memory.return_value = MagicMock(percent=56.78)
            value = await PsutilSampler().memory_usage()
        assert value == "56.78%"

    @pytest.mark.asyncio
    async def test_cpu_failure_raises(self):
        with patch("probe.collectors.system_sampler.psutil") as mock_psutil:
            mock_psutil.Error = psutil.Error
            mock_psutil.cpu_percent.side_effect = OSError("no /proc/stat")
            with pytest.raises(CollectorError) as info:
                await PsutilSampler().cpu_usage()
        assert info.value.step == "CPU usage"

    @pytest.mark.asyncio
    async def test_memory_failure_raises(self):
        with patch("probe.collectors.system_sampler.psutil") as mock_psutil:
            mock_psutil.Error = psutil.Error
            mock_psutil.virtual_memory.side_effect = psutil.AccessDenied()
            with pytest.raises(CollectorError) as info:
                await PsutilSampler().memory_usage()
        assert info.value.step == "memory usage"

    @pytest.mark.asyncio
    async def test_real_sample_is_percentage(self):
        value = await PsutilSampler().memory_usage()
        assert value.endswith("%")
        assert 0.0 <= float(value.rstrip("%")) <= 100.0
