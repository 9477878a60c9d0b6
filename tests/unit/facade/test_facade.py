"""Unit tests for the Logger facade and LogManager lifecycle."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from logchain.config import LoggingSettings
from logchain.facade import LogManager, Logger, build_logger
from logchain.kernel.errors import LoggerAlreadyCreatedError, UnknownSeverityError
from logchain.observability import DIAGNOSTICS_LOGGER
from logchain.routing import default_wiring
from logchain.severity import Severity
from logchain.testing import FailingDestination, RecordingDestination


class _ClosingDestination(RecordingDestination):
    def __init__(self, error: Exception | None = None) -> None:
        super().__init__("closing")
        self._error = error
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        if self._error is not None:
            raise self._error


@pytest.fixture()
def console() -> RecordingDestination:
    return RecordingDestination("console")


@pytest.fixture()
def file() -> RecordingDestination:
    return RecordingDestination("file")


@pytest.fixture()
def logger(console: RecordingDestination, file: RecordingDestination) -> Logger:
    return build_logger(
        LoggingSettings(),
        destinations={"console": console, "file": file},
    )


class TestLogger:
    def test_scenario_default_wiring(
        self, logger: Logger, console: RecordingDestination, file: RecordingDestination
    ) -> None:
        logger.info("a")
        assert console.messages == ["INFO: a"]
        assert file.messages == []

        logger.error("b")
        assert console.messages == ["INFO: a", "ERROR: b"]
        assert file.messages == ["ERROR: b"]

        logger.debug("c")
        assert console.messages == ["INFO: a", "ERROR: b", "DEBUG: c"]
        assert file.messages == ["ERROR: b"]

    @pytest.mark.parametrize(
        ("method", "tag"), [("info", "INFO"), ("error", "ERROR"), ("debug", "DEBUG")]
    )
    def test_each_level_reaches_only_its_destinations(self, method: str, tag: str) -> None:
        sinks = {level: RecordingDestination(level.name) for level in Severity}
        logger = build_logger(
            LoggingSettings(),
            wiring={level: [sink] for level, sink in sinks.items()},
        )
        getattr(logger, method)("M")
        for level, sink in sinks.items():
            assert sink.messages == ([f"{tag}: M"] if level.tag == tag else [])

    def test_log_accepts_names(self, logger: Logger, console: RecordingDestination) -> None:
        logger.log("debug", "c")
        logger.log(Severity.INFO, "a")
        assert console.messages == ["DEBUG: c", "INFO: a"]

    def test_log_unknown_level_raises(self, logger: Logger) -> None:
        with pytest.raises(UnknownSeverityError):
            logger.log("fatal", "x")

    def test_log_accepts_stdlib_level_numbers(
        self, logger: Logger, console: RecordingDestination
    ) -> None:
        logger.log(40, "b")
        assert console.messages == ["ERROR: b"]

    @pytest.mark.parametrize("level", [30, None, 4.5])
    def test_log_rejects_other_levels_with_unknown_severity(self, logger: Logger, level) -> None:
        with pytest.raises(UnknownSeverityError):
            logger.log(level, "x")

    def test_cumulative_policy_repeats_on_shared_destination(
        self, console: RecordingDestination, file: RecordingDestination
    ) -> None:
        logger = build_logger(
            LoggingSettings(match_policy="at_or_above"),
            destinations={"console": console, "file": file},
        )
        logger.error("b")
        assert console.messages == ["ERROR: b"] * 3
        assert file.messages == ["ERROR: b"]

    def test_level_without_destinations_is_silent(self, console: RecordingDestination) -> None:
        logger = build_logger(LoggingSettings(), wiring={Severity.INFO: [console]})
        logger.debug("nobody")
        assert console.messages == []

    def test_delivery_failure_never_reaches_caller(self) -> None:
        reported: list = []
        healthy = RecordingDestination()
        logger = build_logger(
            LoggingSettings(),
            wiring={Severity.ERROR: [FailingDestination(), healthy]},
            error_reporter=reported.append,
        )
        logger.error("b")
        assert healthy.messages == ["ERROR: b"]
        assert len(reported) == 1

    def test_cumulative_policy_from_settings(self) -> None:
        sinks = {level: RecordingDestination(level.name) for level in Severity}
        logger = build_logger(
            LoggingSettings(match_policy="at_or_above"),
            wiring={level: [sink] for level, sink in sinks.items()},
        )
        logger.error("b")
        assert all(sink.messages == ["ERROR: b"] for sink in sinks.values())

    def test_chain_order_from_settings(self, console: RecordingDestination) -> None:
        logger = build_logger(
            LoggingSettings(order="debug,error,info"), wiring={Severity.INFO: [console]}
        )
        assert logger.chain.order == (Severity.DEBUG, Severity.ERROR, Severity.INFO)
        logger.info("a")
        assert console.messages == ["INFO: a"]

    def test_unregister_through_registry(
        self, logger: Logger, console: RecordingDestination, file: RecordingDestination
    ) -> None:
        logger.registry.unregister(console)
        logger.info("a")
        logger.error("b")
        assert console.messages == []
        assert file.messages == ["ERROR: b"]


class TestLogManager:
    @staticmethod
    def _settings(tmp_path: Path) -> LoggingSettings:
        return LoggingSettings(file_path=str(tmp_path / "app.log"))

    def test_starts_uninitialized(self, tmp_path: Path) -> None:
        manager = LogManager(lambda: self._settings(tmp_path))
        assert manager.is_ready is False

    def test_get_logger_is_lazy_and_stable(self, tmp_path: Path) -> None:
        manager = LogManager(lambda: self._settings(tmp_path))
        first = manager.get_logger()
        assert manager.is_ready is True
        assert manager.get_logger() is first
        assert manager.get_logger().registry is first.registry

    def test_create_then_get_returns_same(self, console: RecordingDestination, file) -> None:
        manager = LogManager()
        created = manager.create(
            LoggingSettings(), destinations={"console": console, "file": file}
        )
        assert manager.get_logger() is created
        manager.get_logger().error("b")
        assert file.messages == ["ERROR: b"]

    def test_second_create_fails_fast(self, tmp_path: Path) -> None:
        manager = LogManager(lambda: self._settings(tmp_path))
        first = manager.create()
        with pytest.raises(LoggerAlreadyCreatedError):
            manager.create()
        assert manager.get_logger() is first

    def test_create_after_lazy_access_fails(self, tmp_path: Path) -> None:
        manager = LogManager(lambda: self._settings(tmp_path))
        manager.get_logger()
        with pytest.raises(LoggerAlreadyCreatedError):
            manager.create()

    def test_concurrent_first_access_builds_once(self, tmp_path: Path) -> None:
        calls: list[int] = []

        def _slow_settings() -> LoggingSettings:
            calls.append(1)
            time.sleep(0.05)
            return self._settings(tmp_path)

        manager = LogManager(_slow_settings)
        barrier = threading.Barrier(16)
        results: list[Logger] = []
        lock = threading.Lock()

        def _worker() -> None:
            barrier.wait()
            logger = manager.get_logger()
            with lock:
                results.append(logger)

        threads = [threading.Thread(target=_worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 16
        assert all(r is results[0] for r in results)
        assert len(results[0].chain) == 3

    def test_close_closes_file_destination(self, tmp_path: Path) -> None:
        manager = LogManager(lambda: self._settings(tmp_path))
        manager.get_logger().error("b")
        manager.close()
        assert (tmp_path / "app.log").read_text(encoding="utf-8") == "ERROR: b\n"
        assert manager.is_ready is True

    def test_close_continues_after_a_failing_close(self) -> None:
        bad, good = _ClosingDestination(OSError("fd gone")), _ClosingDestination()
        manager = LogManager()
        manager.create(LoggingSettings(), wiring={Severity.INFO: [bad, good]})
        with capture_logs() as logs:
            closed = manager.close()
        assert closed == 1
        assert bad.close_calls == 1
        assert good.close_calls == 1
        assert [e["event"] for e in logs] == ["destination_close_failed"]
        assert "fd gone" in logs[0]["error"]
        assert manager.is_ready is True

    def test_diagnostics_setting_installs_handler(self) -> None:
        target = logging.getLogger(DIAGNOSTICS_LOGGER)
        saved = list(target.handlers), target.level, target.propagate
        try:
            LogManager().create(
                LoggingSettings(diagnostics=True, diagnostics_level="error"),
                wiring={Severity.INFO: [RecordingDestination()]},
            )
            assert target.level == logging.ERROR
            assert target.propagate is False
            assert any(
                isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
                for h in target.handlers
            )
        finally:
            structlog.reset_defaults()
            target.handlers[:] = saved[0]
            target.setLevel(saved[1])
            target.propagate = saved[2]

    def test_close_before_ready_is_noop(self) -> None:
        assert LogManager().close() == 0

    def test_default_settings_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("LOGCHAIN_ROUTES", "error=file")
        monkeypatch.setenv("LOGCHAIN_FILE_PATH", str(tmp_path / "env.log"))
        logger = LogManager().get_logger()
        logger.info("a")
        logger.error("b")
        assert logger.registry.levels() == (Severity.ERROR,)
        for dest in logger.registry.all_destinations():
            dest.close()  # type: ignore[attr-defined]
        assert (tmp_path / "env.log").read_text(encoding="utf-8") == "ERROR: b\n"


class TestModuleLevelAccess:
    def test_root_exports(self) -> None:
        import logchain

        assert logchain.Logger is Logger
        assert logchain.Severity is Severity
        assert callable(logchain.get_logger)
        assert callable(logchain.create_logger)

    def test_default_wiring_is_reused(self, console, file) -> None:
        logger = build_logger(
            LoggingSettings(),
            wiring=default_wiring(),
            destinations={"console": console, "file": file},
        )
        assert logger.registry.destinations(Severity.ERROR) == (console, file)
