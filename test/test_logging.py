import structlog

from apillon.utils.logging import configure_logging


def test_configure_logging_json() -> None:
    configure_logging(level="DEBUG", format_json=True)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    structlog.reset_defaults()


def test_configure_logging_console_without_timestamp() -> None:
    configure_logging(level="INFO", format_json=False, include_timestamp=False)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
    structlog.reset_defaults()
