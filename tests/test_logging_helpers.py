import io
import json
import logging
import os
from unittest.mock import patch

import filecount
from filecount.logging import DefaultLoggerFactory, JsonLogFormatter, get_logger, setup_base_logger, trace_io
from filecount.logging.helpers import level_from_env


def test_logger_names_are_namespaced():
    assert get_logger().name == "filecount"
    assert get_logger("filecount").name == "filecount"
    assert get_logger("io.loader").name == "filecount.io.loader"
    assert get_logger("filecount.csv").name == "filecount.csv"


def test_json_formatter_fields():
    record = logging.LogRecord("filecount.csv", logging.WARNING, __file__, 1, "merged %d", (3,), None)
    record.context = {"files": 3}
    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["module"] == "filecount.csv"
    assert payload["msg"] == "merged 3"
    assert payload["version"] == filecount.__version__
    assert payload["ctx"] == {"files": 3}
    assert payload["ts"].endswith("Z")


def test_setup_base_logger_plain_text():
    stream = io.StringIO()
    setup_base_logger(stream=stream)
    get_logger("runtime").warning("careful")
    assert stream.getvalue() == "WARNING: careful\n"


def test_factory_configures_once_per_instance():
    stream = io.StringIO()
    factory = DefaultLoggerFactory(json_logs=True, stream=stream)
    factory.get_logger("x").info("one")
    factory.get_logger("y").info("two")
    lines = stream.getvalue().splitlines()
    assert [json.loads(ln)["msg"] for ln in lines] == ["one", "two"]


def test_trace_io_is_opt_in():
    stream = io.StringIO()
    log = setup_base_logger(level=logging.DEBUG, stream=stream)
    with patch.dict(os.environ, {"FILECOUNT_TRACE_IO": "0"}):
        trace_io(log, "loaded file", filename="a.txt")
    assert stream.getvalue() == ""
    with patch.dict(os.environ, {"FILECOUNT_TRACE_IO": "1"}):
        trace_io(log, "loaded file", filename="a.txt")
    assert "loaded file" in stream.getvalue()
    assert "a.txt" in stream.getvalue()


def test_level_from_env():
    with patch.dict(os.environ, {"FILECOUNT_LOG_LEVEL": "debug"}):
        assert level_from_env() == logging.DEBUG
    with patch.dict(os.environ, {"FILECOUNT_LOG_LEVEL": "nonsense"}):
        assert level_from_env(logging.WARNING) == logging.WARNING
    with patch.dict(os.environ, {"FILECOUNT_LOG_LEVEL": ""}):
        assert level_from_env() == logging.INFO


def test_factory_from_argv_reads_flag_and_env():
    with patch.dict(os.environ, {"FILECOUNT_JSON_LOGS": "", "FILECOUNT_LOG_LEVEL": "warning"}):
        plain = DefaultLoggerFactory.from_argv(["bytes", "a.txt"])
        flagged = DefaultLoggerFactory.from_argv(["bytes", "a.txt", "--json-logs"])
    assert plain.json_logs is False
    assert flagged.json_logs is True
    assert plain.level == logging.WARNING
    with patch.dict(os.environ, {"FILECOUNT_JSON_LOGS": "1"}):
        assert DefaultLoggerFactory.from_argv(["version"]).json_logs is True


def test_factory_configures_lazily():
    stream = io.StringIO()
    factory = DefaultLoggerFactory(stream=stream)
    assert not factory.configured
    factory.get_logger("runtime").error("late")
    assert factory.configured
    assert stream.getvalue() == "ERROR: late\n"
