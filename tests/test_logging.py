import io
import logging

from addonsmith.logging import get_logger, set_level, setup_logging


def test_setup_logging_configures_package_root():
    stream = io.StringIO()
    setup_logging("debug", format="%(name)s|%(message)s", stream=stream)

    get_logger("workbench").debug("hello")
    assert "addonsmith.workbench|hello" in stream.getvalue()
    assert logging.getLogger("addonsmith").level == logging.DEBUG

    set_level("warning")
    assert logging.getLogger("addonsmith").level == logging.WARNING


def test_get_logger_names():
    assert get_logger("cli").name == "addonsmith.cli"
    assert get_logger("addonsmith.codegen").name == "addonsmith.codegen"


def test_non_level_names_fall_back_to_info():
    for name in ("basicconfig", "basic_format", "nonsense"):
        setup_logging(name, stream=io.StringIO())
        assert logging.getLogger("addonsmith").level == logging.INFO
    set_level("basic_format")
    assert logging.getLogger("addonsmith").level == logging.INFO
