"""Timestamp and source prefixes on diagnostic lines."""

import re

from Battle_Othello.utils.logger import log_event, tagged


def test_untagged_line(capsys):
    log_event("hello")
    assert re.fullmatch(r"\[\d\d:\d\d:\d\d\] hello\n", capsys.readouterr().out)


def test_tagged_logger_prefixes_source(capsys):
    logger = tagged("view")
    logger("Failed to load font x.ttf")
    assert re.fullmatch(r"\[\d\d:\d\d:\d\d\] view: Failed to load font x\.ttf\n", capsys.readouterr().out)
