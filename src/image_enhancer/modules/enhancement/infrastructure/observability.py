# src/image_enhancer/modules/enhancement/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).

Principios:
1. Eventos estructurados en JSON (Horizontal por defecto, Vertical con LOG_FORMAT=PRETTY).
2. Correlation ID por ejecución.
3. Latencia y RAM medidas alrededor de cada operación instrumentada.
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional

import psutil

logger = logging.getLogger("image_enhancer")

# Configuración por entorno
LOG_LEVEL_ENV = "IMAGE_ENHANCER_LOG_LEVEL"
LOG_FILE_ENV = "IMAGE_ENHANCER_LOG_FILE"


def configure_logging(level: Optional[int | str] = None) -> None:
    """
    Configura el logging con consola y, si IMAGE_ENHANCER_LOG_FILE existe, archivo.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()

    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    log_file = os.getenv(LOG_FILE_ENV)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)  # Siempre capturamos todo en disco
        root_logger.addHandler(file_handler)
        logging.info(f"🔭 Observabilidad iniciada. Logs persistentes en: {log_file}")


def _describe_target(args: tuple[Any, ...]) -> str:
    """Extrae un contexto legible del primer argumento reconocible."""
    for arg in args:
        if isinstance(arg, Path):
            return arg.name
        if isinstance(arg, (bytes, bytearray)):
            return f"<{len(arg)} bytes>"
        image_input = getattr(arg, "image_input", None)
        if isinstance(image_input, (str, Path, bytes, bytearray)):
            return _describe_target((image_input,))
        if isinstance(arg, str):
            return arg
    return "unknown"


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ) -> None:
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str) -> Callable[[Callable], Callable]:
        """
        Decorador de latencia + RAM para funciones síncronas y corrutinas.
        Re-lanza cualquier excepción después de registrarla.
        """

        def decorator(func: Callable) -> Callable:
            def _started(args: tuple[Any, ...]) -> tuple[str, str, float, float]:
                correlation_id = ObservabilityService.get_correlation_id()
                target = _describe_target(args)
                start_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )
                return correlation_id, target, start_ram, time.perf_counter()

            def _completed(ctx: tuple[str, str, float, float]) -> None:
                correlation_id, target, start_ram, start_time = ctx
                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 3),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                )

            def _failed(ctx: tuple[str, str, float, float], e: Exception) -> None:
                correlation_id, target, _, start_time = ctx
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.failed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 3),
                        "crash_ram_mb": ObservabilityService._get_ram_usage_mb(),
                        "target": target,
                        "error_type": type(e).__name__,
                        "error_msg": str(e),
                    },
                    level="ERROR",
                )

            if inspect.iscoroutinefunction(func):

                @functools.wraps(func)
                async def async_wrapper(*args, **kwargs):
                    ctx = _started(args)
                    try:
                        result = await func(*args, **kwargs)
                    except Exception as e:
                        _failed(ctx, e)
                        raise
                    _completed(ctx)
                    return result

                return async_wrapper

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                ctx = _started(args)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _failed(ctx, e)
                    raise
                _completed(ctx)
                return result

            return wrapper

        return decorator
