"""Tests for the process entry point."""

import logging
from unittest.mock import patch

from domain_catcher import main as main_module
from domain_catcher.exceptions import AuthError
from domain_catcher.scheduler import ScanScheduler
from domain_catcher.session import RegistrarSession


class TestMain:
    def test_auth_failure_exits_with_1(self, config):
        with patch.object(RegistrarSession, 'authenticate', side_effect=AuthError("bad", status_code=401)), \
                patch.object(ScanScheduler, 'run') as mock_run:
            assert main_module.main(config=config) == 1
            mock_run.assert_not_called()

    def test_graceful_stop_exits_with_0(self, config):
        with patch.object(RegistrarSession, 'authenticate', return_value=config.token), \
                patch.object(ScanScheduler, 'run') as mock_run, \
                patch.object(main_module, 'install_signal_handlers') as mock_signals:
            assert main_module.main(config=config) == 0
            mock_run.assert_called_once()
            mock_signals.assert_called_once()

    def test_keyboard_interrupt_exits_with_130(self, config):
        with patch.object(RegistrarSession, 'authenticate', return_value=config.token), \
                patch.object(ScanScheduler, 'run', side_effect=KeyboardInterrupt), \
                patch.object(main_module, 'install_signal_handlers'):
            assert main_module.main(config=config) == 130

    def test_invalid_arguments_exit_with_2(self, monkeypatch):
        monkeypatch.setattr(main_module, 'load_dotenv', lambda: None)
        assert main_module.main(argv=["--interval", "-5"]) == 2

    def test_signal_handler_stops_scheduler(self):
        scheduler = ScanScheduler(engine=None, interval_secs=1)
        with patch.object(main_module.signal, 'signal') as mock_signal:
            main_module.install_signal_handlers(scheduler)
            handler = mock_signal.call_args_list[0].args[1]
            handler(2, None)
        assert scheduler.stop_requested is True

    def test_build_engine_uses_file_sink_and_config_domains(self, config, session):
        config.domains_env = "a.test,b.test"
        engine = main_module.build_engine(config, session)
        assert engine.domain_loader() == ["a.test", "b.test"]
        assert engine.audit_sink.log_dir == config.log_dir


class TestConfigureLogging:
    def test_package_logger_level_follows_dev_flag(self, config):
        package_logger = logging.getLogger(main_module.PACKAGE_LOGGER)
        original = package_logger.level
        try:
            main_module.configure_logging(config)
            assert package_logger.level == logging.INFO
            config.dev = True
            main_module.configure_logging(config)
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(original)
