"""Tests for the StyleEngine facade, configuration and logging helpers."""

import json
import logging

import pytest

from style_engine import StyleEngine, parse_css, parse_html, style_tree
from style_engine.css import Keyword
from style_engine.parser import InvalidUnit, MismatchedClosingTag
from style_engine.style import Display
from style_engine.utils import Config, PerformanceLogger, get_default_log_file, log_exception, setup_logging


def flatten(styled):
    """(tag or text, specified values) for every node, depth first."""
    node = styled.node
    label = node.tag_name if node.is_element else node.text
    result = [(label, styled.specified_values)]
    for child in styled.children:
        result.extend(flatten(child))
    return result


HTML = "<html><body id='main'><div class='note'>Hello</div><p>Bye</p></body></html>"
CSS = "body { display: block; } #main { color: blue; } .note { display: none; }"


class TestStyleEngine:
    """StyleEngine wraps the parsers and the resolver."""

    def test_style_matches_module_functions(self) -> None:
        styled = StyleEngine().style(HTML, CSS)
        expected = style_tree(parse_html(HTML), parse_css(CSS))
        assert flatten(styled) == flatten(expected)

    def test_style_resolves_display(self) -> None:
        body = StyleEngine().style(HTML, CSS).children[0]
        assert body.display() == Display.BLOCK
        assert body.value("color") == Keyword("blue")
        assert body.children[0].display() == Display.NONE
        assert body.children[1].display() == Display.INLINE

    def test_html_errors_are_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = StyleEngine()
        with caplog.at_level(logging.ERROR, logger="style_engine"):
            with pytest.raises(MismatchedClosingTag):
                engine.parse_html("<a></b>")
        assert any("Error parsing HTML" in record.getMessage() for record in caplog.records)

    def test_css_errors_are_reraised(self) -> None:
        with pytest.raises(InvalidUnit):
            StyleEngine().parse_css("div { width: 3em; }")

    def test_performance_can_be_disabled(self) -> None:
        config = Config()
        config.set("performance.enabled", False)
        engine = StyleEngine(config)
        engine.parse_html("<a></a>")
        assert engine.perf.start_times == {}


class TestConfig:
    """JSON-backed Config."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.get("logging.console_level") == "WARNING"
        assert config.get("logging.log_file") is None
        assert config.get("logging.file_enabled") is False
        assert config.get("performance.enabled") is True
        assert config.get("missing.key", "fallback") == "fallback"

    def test_set_get_remove(self) -> None:
        config = Config()
        config.set("a.b.c", 3)
        assert config.get("a.b.c") == 3
        assert config.remove("a.b.c")
        assert not config.remove("a.b.c")
        assert config.get("a.b.c") is None

    def test_get_all_is_a_copy(self) -> None:
        config = Config()
        config.get_all()["logging"]["console_level"] = "DEBUG"
        assert config.get("logging.console_level") == "WARNING"

    def test_save_and_load(self, tmp_path) -> None:
        path = str(tmp_path / "conf" / "config.json")
        config = Config()
        config.set("logging.console_level", "ERROR")
        config.save(path)

        reloaded = Config(path)
        assert reloaded.get("logging.console_level") == "ERROR"
        assert reloaded.get("performance.enabled") is True

    def test_partial_file_is_merged_with_defaults(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"file_level": "INFO"}}))
        config = Config(str(path))
        assert config.get("logging.file_level") == "INFO"
        assert config.get("logging.console_level") == "WARNING"

    def test_unreadable_file_falls_back_to_defaults(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert Config(str(path)).get("logging.console_level") == "WARNING"

    def test_save_without_path(self) -> None:
        with pytest.raises(ValueError):
            Config().save()


class TestLogging:
    """Logging helpers."""

    def test_setup_logging_is_idempotent(self) -> None:
        logger = setup_logging(component="tests_idempotent")
        assert logger.name == "style_engine.tests_idempotent"
        handlers = list(logger.handlers)
        assert setup_logging(component="tests_idempotent").handlers == handlers

    def test_setup_logging_writes_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "engine.log"
        logger = setup_logging(log_file=str(log_file), console_level="ERROR", component="tests_file")
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_default_log_file(self) -> None:
        path = get_default_log_file()
        assert ".style_engine" in path
        assert path.endswith(".log")

    def test_log_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("style_engine.tests.errors")
        try:
            raise ValueError("bad")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger="style_engine.tests.errors"):
                log_exception(logger, e, "Failed")
        record = caplog.records[-1]
        assert record.levelname == "ERROR"
        assert record.getMessage() == "Failed: bad"
        assert record.exc_info[0] is ValueError

    def test_performance_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("style_engine.tests.perf")
        perf = PerformanceLogger(logger, "Tests")
        with caplog.at_level(logging.DEBUG, logger="style_engine.tests.perf"):
            perf.start("phase")
            assert perf.end("phase") >= 0.0
            assert perf.end("never-started") == 0.0
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Tests phase took") for message in messages)
        assert "No start time found for never-started" in messages


@pytest.fixture
def engine_logger():
    """The package logger, restored to its previous handlers afterwards."""
    logger = logging.getLogger("style_engine")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


def file_handlers(logger: logging.Logger) -> list:
    return [handler for handler in logger.handlers if isinstance(handler, logging.FileHandler)]


class TestEngineLogging:
    """Each StyleEngine applies its own logging configuration."""

    def test_second_engine_adds_its_log_file(self, engine_logger: logging.Logger, tmp_path) -> None:
        StyleEngine()
        log_file = tmp_path / "second.log"
        config = Config()
        config.set("logging.log_file", str(log_file))
        engine = StyleEngine(config)
        engine.parse_css("div { color: red; }")
        for handler in engine_logger.handlers:
            handler.flush()
        assert "Parsed stylesheet with 1 rules" in log_file.read_text()

    def test_same_log_file_is_attached_once(self, engine_logger: logging.Logger, tmp_path) -> None:
        config = Config()
        config.set("logging.log_file", str(tmp_path / "engine.log"))
        StyleEngine(config)
        StyleEngine(config)
        paths = [handler.baseFilename for handler in file_handlers(engine_logger)]
        assert paths.count(str(tmp_path / "engine.log")) == 1

    def test_second_engine_sets_console_level(self, engine_logger: logging.Logger) -> None:
        StyleEngine()
        config = Config()
        config.set("logging.console_level", "ERROR")
        StyleEngine(config)
        consoles = [handler for handler in engine_logger.handlers
                    if type(handler) is logging.StreamHandler]
        assert len(consoles) == 1
        assert consoles[0].level == logging.ERROR

    def test_file_enabled_uses_default_log_file(self, engine_logger: logging.Logger, tmp_path,
                                                monkeypatch: pytest.MonkeyPatch) -> None:
        default_file = tmp_path / "logs" / "default.log"
        monkeypatch.setattr("style_engine.core.engine.get_default_log_file", lambda: str(default_file))
        config = Config()
        config.set("logging.file_enabled", True)
        StyleEngine(config)
        assert str(default_file) in [handler.baseFilename for handler in file_handlers(engine_logger)]

    def test_file_logging_off_by_default(self, engine_logger: logging.Logger, tmp_path,
                                         monkeypatch: pytest.MonkeyPatch) -> None:
        default_file = tmp_path / "default.log"
        monkeypatch.setattr("style_engine.core.engine.get_default_log_file", lambda: str(default_file))
        StyleEngine()
        assert str(default_file) not in [handler.baseFilename for handler in file_handlers(engine_logger)]
        assert not default_file.exists()
