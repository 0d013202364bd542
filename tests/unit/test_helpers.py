"""Unit tests for helper utilities and logging setup"""
import logging

import pytest
from bddgen.utils.helpers import first_quoted, js_string, quoted_literals, to_class_name, to_identifier
from bddgen.utils.logger import set_log_level, setup_logger


def test_quoted_literals():
    assert quoted_literals('fill "Name" with "Ada" and "x"') == ['Name', 'Ada', 'x']
    assert quoted_literals('no quotes') == []


def test_first_quoted():
    assert first_quoted('type "a" then "b"') == 'a'
    assert first_quoted('type ""') == ''
    assert first_quoted('nothing', 'default') == 'default'


def test_js_string():
    assert js_string('plain') == "'plain'"
    assert js_string("it's\na \\ b") == "'it\\'s\\na \\\\ b'"


@pytest.mark.parametrize('text, expected', [
    ('Valid login', 'valid_login'),
    ('  Log-in: as "admin"!  ', 'log_in_as_admin'),
    ('***', 'scenario'),
    ('Ünïcode', 'ünïcode'),
    ('Area in m²', 'area_in_m'),
])
def test_to_identifier(text, expected):
    assert to_identifier(text) == expected


@pytest.mark.parametrize('text, expected', [
    ('Google search', 'GoogleSearch'),
    ('3D viewer', 'Feature3DViewer'),
    ('', 'Feature'),
])
def test_to_class_name(text, expected):
    assert to_class_name(text) == expected


def test_setup_logger_is_cached_and_level_applies():
    logger = setup_logger('bddgen.tests.sample')

    assert setup_logger('bddgen.tests.sample') is logger
    assert len(logger.handlers) == 1

    set_log_level('debug')
    assert logger.level == logging.DEBUG
    set_log_level(logging.INFO)
    assert logger.level == logging.INFO


def test_set_log_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        set_log_level('chatty')
