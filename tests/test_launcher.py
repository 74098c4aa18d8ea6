import logging

from logging_config import setup_logging
from spill_pay_gui import build_parser


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.data_dir is None
    assert not args.no_cache
    assert not args.debug


def test_parser_flags():
    args = build_parser().parse_args(["--data-dir", "/tmp/x", "--no-cache", "--debug", "--log-file", "a.log"])
    assert args.data_dir == "/tmp/x"
    assert args.no_cache and args.debug
    assert args.log_file == "a.log"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(logging.DEBUG, str(log_file))
        setup_logging(logging.DEBUG, str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("store").debug("hello")
        for h in root.handlers:
            h.flush()
        assert "store - DEBUG - hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
