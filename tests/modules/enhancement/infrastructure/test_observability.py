# tests/modules/enhancement/infrastructure/test_observability.py
"""
Tests para: ObservabilityService (SRE Edition)
Tipo: Unitario
Validación:
  1. Estructura de Logs (JSON)
  2. Manejo de Errores (Exceptions) en funciones síncronas y corrutinas
  3. Métricas SRE (Latency + RAM Saturation)
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from image_enhancer.modules.enhancement.application.dtos import EnhanceImageRequest
from image_enhancer.modules.enhancement.infrastructure.observability import (
    ObservabilityService,
    configure_logging,
)

MODULE = "image_enhancer.modules.enhancement.infrastructure.observability"


@pytest.fixture
def fake_psutil():
    with patch(f"{MODULE}.psutil") as mock_psutil:
        process_mock = MagicMock()
        process_mock.memory_info.return_value.rss = 104857600  # 100 MB
        mock_psutil.Process.return_value = process_mock
        yield mock_psutil


class TestObservabilityService:

    # ─── 1. Pruebas de Utilidad Básica ────────────────────────────────────────

    def test_correlation_id_format(self):
        cid = ObservabilityService.get_correlation_id()
        assert isinstance(cid, str)
        assert len(cid) == 8

    @patch(f"{MODULE}.logger")
    def test_log_structure_compliance(self, mock_logger):
        ObservabilityService.log_event("test.evt", "123", {"user": "test"})

        args, _ = mock_logger.info.call_args
        log_json = json.loads(args[0])

        for field in ["timestamp", "level", "event", "correlation_id", "data"]:
            assert field in log_json

    @patch(f"{MODULE}.logger")
    def test_error_level_routes_to_logger_error(self, mock_logger):
        ObservabilityService.log_event("x.failed", "1", {}, level="ERROR")

        mock_logger.error.assert_called_once()
        mock_logger.info.assert_not_called()

    # ─── 2. Decorador Síncrono ────────────────────────────────────────────────

    @patch(f"{MODULE}.logger")
    def test_measure_latency_logs_ram_metrics(self, mock_logger, fake_psutil):
        @ObservabilityService.measure_latency("sre_op")
        def work():
            return "done"

        assert work() == "done"

        log_json = json.loads(mock_logger.info.call_args_list[-1][0][0])
        data = log_json["data"]
        assert log_json["event"] == "sre_op.completed"
        assert data["end_ram_mb"] == 100.0
        assert data["ram_delta_mb"] == 0.0
        assert data["status"] == "success"

    @patch(f"{MODULE}.logger")
    def test_measure_latency_reraises_and_logs_crash(self, mock_logger, fake_psutil):
        @ObservabilityService.measure_latency("fail_op")
        def broken():
            raise ValueError("Critical Failure")

        with pytest.raises(ValueError):
            broken()

        log_json = json.loads(mock_logger.error.call_args[0][0])
        assert log_json["event"] == "fail_op.failed"
        assert log_json["data"]["error_msg"] == "Critical Failure"
        assert log_json["data"]["crash_ram_mb"] == 100.0

    # ─── 3. Decorador Asíncrono ───────────────────────────────────────────────

    @pytest.mark.asyncio
    async def test_measure_latency_supports_coroutines(self):
        @ObservabilityService.measure_latency("async_op")
        async def work(request):
            return 42

        with patch(f"{MODULE}.logger") as mock_logger:
            assert await work(EnhanceImageRequest(image_input="cat.png")) == 42

        events = [json.loads(c[0][0]) for c in mock_logger.info.call_args_list]
        assert [e["event"] for e in events] == ["async_op.started", "async_op.completed"]
        assert events[-1]["data"]["target"] == "cat.png"

    @pytest.mark.asyncio
    async def test_measure_latency_reraises_from_coroutines(self):
        @ObservabilityService.measure_latency("async_fail")
        async def broken():
            raise RuntimeError("boom")

        with patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(RuntimeError, match="boom"):
                await broken()

        mock_logger.error.assert_called_once()

    # ─── 4. Prueba de Contexto ────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "arg, expected",
        [(Path("/data/photo.jpg"), "photo.jpg"), (b"12345", "<5 bytes>")],
    )
    def test_context_extraction(self, arg, expected):
        @ObservabilityService.measure_latency("file_op")
        def handle(value):
            pass

        with patch(f"{MODULE}.logger") as mock_logger:
            handle(arg)

        log_json = json.loads(mock_logger.info.call_args_list[-1][0][0])
        assert log_json["data"]["target"] == expected


def test_configure_logging_uses_env_file(tmp_path, monkeypatch):
    log_file = tmp_path / "enhancer.log"
    monkeypatch.setenv("IMAGE_ENHANCER_LOG_FILE", str(log_file))
    root = logging.getLogger()
    saved = list(root.handlers)

    try:
        configure_logging("DEBUG")
        logging.getLogger("image_enhancer.test").debug("hola")
        for handler in root.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hola" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved
